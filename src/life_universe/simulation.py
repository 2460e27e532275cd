"""
Console simulation runner and benchmark for the toroidal universe.

Compares the NumPy vectorized tick against the cell-by-cell tick over
a range of grid sizes.
"""

import logging
import time
from pathlib import Path

import pandas as pd

from life_universe.patterns import stamp
from life_universe.universe import Universe

logger = logging.getLogger(__name__)

BENCHMARK_SIZES = [32, 64, 128, 256, 512]
GENERATIONS = 100
# Cellwise ticks are pure Python, larger grids are skipped for that mode
CELLWISE_MAX_SIZE = 64
BENCHMARK_CSV = Path("benchmarks") / "benchmark_sequential.csv"
MODES = {"vectorized": True, "cellwise": False}


def print_grid(universe: Universe) -> None:
    """Print the universe to console."""
    print("\033[H", end="")  # Move cursor to home position
    print(universe.render())


def _timing(width: int, height: int, generations: int, elapsed_ms: float) -> dict:
    if generations == 0 or elapsed_ms <= 0:
        return {
            "total_time_ms": elapsed_ms,
            "time_per_generation_ms": 0.0,
            "cells_per_second_million": 0.0,
        }
    return {
        "total_time_ms": elapsed_ms,
        "time_per_generation_ms": elapsed_ms / generations,
        "cells_per_second_million": width * height * generations / elapsed_ms / 1000,
    }


def run_simulation(width: int, height: int, generations: int,
                   visualize: bool = False, vectorized: bool = True,
                   pattern: str | None = None, delay: float = 0.1) -> dict:
    """
    Run the Game of Life simulation.

    Args:
        width: Grid width
        height: Grid height
        generations: Number of generations to simulate
        visualize: Whether to print each generation
        vectorized: Use the NumPy tick (faster) or the cellwise tick (slower)
        pattern: Name of a pattern to start from instead of the default seed
        delay: Seconds to pause between printed generations

    Returns:
        Dictionary with timing and statistics
    """
    if generations < 0:
        raise ValueError(f"generations must be >= 0, got {generations}")

    if pattern is None:
        universe = Universe(width, height)
    else:
        universe = Universe(width, height, seed=None)
        stamp(universe, pattern, 1, 1)

    print(f"Game of Life Toroidal Universe")
    print(f"Grid size: {width} x {height}")
    print(f"Generations: {generations}")
    print(f"Using {'NumPy vectorized' if vectorized else 'cellwise'} tick")
    print()

    initial_live = universe.live_count
    print(f"Initial live cells: {initial_live}")
    logger.info("Starting %dx%d simulation for %d generations", width, height, generations)

    show = visualize and width <= 80 and height <= 40
    if show:
        print("\033[2J", end="")  # Clear screen
        print_grid(universe)

    start_time = time.perf_counter()

    for gen in range(generations):
        universe.tick(vectorized=vectorized)

        if show:
            print_grid(universe)
            print(f"Generation: {gen + 1}, Live cells: {universe.live_count}")
            time.sleep(delay)

    elapsed_ms = (time.perf_counter() - start_time) * 1000

    final_live = universe.live_count
    timing = _timing(width, height, generations, elapsed_ms)

    print(f"\nSimulation complete!")
    print(f"Final live cells: {final_live}")
    print(f"Total time: {elapsed_ms:.2f} ms")
    print(f"Time per generation: {timing['time_per_generation_ms']:.4f} ms")
    print(f"Cells processed per second: {timing['cells_per_second_million']:.2f} million")

    return {
        "width": width,
        "height": height,
        "generations": generations,
        "initial_live_cells": initial_live,
        "final_live_cells": final_live,
        **timing,
    }


def benchmark(sizes: list[int] | None = None, generations: int = GENERATIONS,
              modes: tuple[str, ...] = ("vectorized", "cellwise"),
              csv_file: str | Path | None = None, verbose: bool = True) -> pd.DataFrame:
    """
    Time the tick for each grid size and stepping mode.

    Args:
        sizes: List of square grid sizes to test
        generations: Number of generations per test
        modes: Stepping modes to compare ("vectorized", "cellwise")
               cellwise runs are skipped above CELLWISE_MAX_SIZE
        csv_file: Where to save the results, if given
        verbose: If True, print a line per run

    Returns:
        DataFrame with one row per (size, mode)
    """
    if sizes is None:
        sizes = BENCHMARK_SIZES
    for mode in modes:
        if mode not in MODES:
            raise ValueError(f"unknown benchmark mode {mode!r}, expected one of {sorted(MODES)}")

    print("=" * 60)
    print("BENCHMARK: Toroidal Universe tick")
    print("=" * 60)

    results = []

    for size in sizes:
        for mode in modes:
            if mode == "cellwise" and size > CELLWISE_MAX_SIZE:
                logger.info("Skipping cellwise run at %dx%d (above %d)", size, size, CELLWISE_MAX_SIZE)
                if verbose:
                    print(f"Size {size:>5}x{size:<5} {mode:>10}: skipped")
                continue

            universe = Universe(size, size)
            start_time = time.perf_counter()
            for _ in range(generations):
                universe.tick(vectorized=MODES[mode])
            elapsed_ms = (time.perf_counter() - start_time) * 1000

            results.append({
                "size": size,
                "mode": mode,
                "generations": generations,
                **_timing(size, size, generations, elapsed_ms),
            })
            if verbose:
                print(f"Size {size:>5}x{size:<5} {mode:>10}: {elapsed_ms:>10.2f} ms")

    df = pd.DataFrame(results, columns=[
        "size", "mode", "generations", "total_time_ms",
        "time_per_generation_ms", "cells_per_second_million",
    ])

    # Summary table
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"{'Size':>6} | {'Mode':>10} | {'Total (ms)':>12} | {'Per Gen (ms)':>12} | {'M cells/s':>10}")
    print("-" * 60)
    for r in df.itertuples(index=False):
        print(f"{r.size:>6} | {r.mode:>10} | {r.total_time_ms:>12.2f} | "
              f"{r.time_per_generation_ms:>12.4f} | {r.cells_per_second_million:>10.2f}")
    print("=" * 60)

    if csv_file is not None:
        csv_file = Path(csv_file)
        csv_file.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(csv_file, index=False)
        print(f"\nResults saved to {csv_file}")
        logger.info("Benchmark results written to %s", csv_file)

    return df
