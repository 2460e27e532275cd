import pandas as pd
import pytest

from life_universe import simulation
from life_universe.simulation import benchmark, run_simulation


def test_run_simulation_stats(capsys):
    stats = run_simulation(12, 8, 5)

    assert stats["width"] == 12
    assert stats["height"] == 8
    assert stats["generations"] == 5
    assert stats["initial_live_cells"] > 0
    assert stats["total_time_ms"] >= 0
    assert "Simulation complete!" in capsys.readouterr().out


def test_run_simulation_from_pattern():
    stats = run_simulation(6, 6, 4, pattern="block", vectorized=False)
    assert stats["initial_live_cells"] == 4
    assert stats["final_live_cells"] == 4


def test_run_simulation_zero_generations():
    stats = run_simulation(4, 4, 0)
    assert stats["initial_live_cells"] == stats["final_live_cells"]
    assert stats["time_per_generation_ms"] == 0.0
    assert stats["cells_per_second_million"] == 0.0


def test_run_simulation_negative_generations():
    with pytest.raises(ValueError):
        run_simulation(4, 4, -1)


def test_run_simulation_visualize_prints_grid(capsys):
    run_simulation(5, 5, 2, visualize=True, pattern="blinker", delay=0)
    out = capsys.readouterr().out
    assert "◼◼◼" in out
    assert "Generation: 2, Live cells: 3" in out


def test_benchmark_dataframe_and_csv(tmp_path, capsys):
    csv_file = tmp_path / "out" / "bench.csv"
    df = benchmark(sizes=[8, 16], generations=2, csv_file=csv_file)

    assert list(df.columns) == [
        "size", "mode", "generations", "total_time_ms",
        "time_per_generation_ms", "cells_per_second_million",
    ]
    assert len(df) == 4
    assert set(df["mode"]) == {"vectorized", "cellwise"}
    assert csv_file.exists()
    assert len(pd.read_csv(csv_file)) == 4
    assert "SUMMARY" in capsys.readouterr().out


def test_benchmark_single_mode_without_csv():
    df = benchmark(sizes=[8], generations=1, modes=("vectorized",), verbose=False)
    assert df["mode"].tolist() == ["vectorized"]


def test_benchmark_default_sizes(monkeypatch):
    monkeypatch.setattr(simulation, "BENCHMARK_SIZES", [4, 6])
    df = benchmark(generations=1, modes=("vectorized",), verbose=False)
    assert df["size"].tolist() == [4, 6]


def test_benchmark_unknown_mode():
    with pytest.raises(ValueError):
        benchmark(sizes=[8], generations=1, modes=("gpu",))


def test_benchmark_defaults_cap_cellwise_size():
    df = benchmark(generations=1, verbose=False)
    rows = list(zip(df["size"], df["mode"]))

    assert rows == [
        (32, "vectorized"), (32, "cellwise"),
        (64, "vectorized"), (64, "cellwise"),
        (128, "vectorized"),
        (256, "vectorized"),
        (512, "vectorized"),
    ]


def test_benchmark_skips_large_cellwise(monkeypatch, capsys):
    monkeypatch.setattr(simulation, "CELLWISE_MAX_SIZE", 8)
    df = benchmark(sizes=[8, 16], generations=1, modes=("cellwise",))
    assert df["size"].tolist() == [8]
    assert "skipped" in capsys.readouterr().out
