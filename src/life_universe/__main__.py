"""
Conway's Game of Life - Toroidal Universe

Usage: python -m life_universe [width] [height] [generations] [visualize]
       python -m life_universe --benchmark [generations]
       python -m life_universe --analyze [csv]
"""

import logging
import sys

from life_universe import analysis, simulation

USAGE = __doc__.strip().splitlines()[-3:]


def print_usage() -> None:
    for line in USAGE:
        print(line.strip(), file=sys.stderr)


def _int_at_least(name: str, value: str, minimum: int = 1) -> int:
    number = int(value)
    if number < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {number}")
    return number


def parse_args(argv: list[str]) -> tuple[str, dict]:
    """Split the command line into a mode and its options. Raises ValueError on bad input."""
    # Check for benchmark / analysis mode first
    if argv and argv[0] == "--benchmark":
        generations = _int_at_least("generations", argv[1], 0) if len(argv) > 1 else simulation.GENERATIONS
        return "benchmark", {"generations": generations}

    if argv and argv[0] == "--analyze":
        return "analyze", {"csv_path": argv[1] if len(argv) > 1 else simulation.BENCHMARK_CSV}

    # Default parameters
    return "run", {
        "width": _int_at_least("width", argv[0]) if len(argv) > 0 else 64,
        "height": _int_at_least("height", argv[1]) if len(argv) > 1 else 64,
        "generations": _int_at_least("generations", argv[2], 0) if len(argv) > 2 else 100,
        "visualize": bool(int(argv[3])) if len(argv) > 3 else False,
    }


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        mode, options = parse_args(argv)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        print_usage()
        return 2

    if mode == "benchmark":
        simulation.benchmark(generations=options["generations"], csv_file=simulation.BENCHMARK_CSV)
    elif mode == "analyze":
        try:
            analysis.main(options["csv_path"])
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            print("Run the benchmark first: python -m life_universe --benchmark", file=sys.stderr)
            return 1
    else:
        simulation.run_simulation(**options)

    return 0


if __name__ == "__main__":
    sys.exit(main())
