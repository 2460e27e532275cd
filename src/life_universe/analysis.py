"""
Performance Analysis & Visualization
Speedup of the vectorized tick over the cellwise tick, throughput and time per generation
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from matplotlib.font_manager import FontProperties
from matplotlib.gridspec import GridSpec

from life_universe.simulation import BENCHMARK_CSV

logger = logging.getLogger(__name__)

COLORS = {
    'primary': '#2E86AB',
    'secondary': '#A23B72',
    'success': '#06A77D',
    'warning': '#F18F01',
    'danger': '#C73E1D',
}
MODE_COLORS = {'vectorized': COLORS['success'], 'cellwise': COLORS['secondary']}

TITLE_FONT = {'family': 'sans-serif', 'weight': 'bold', 'size': 16}
LABEL_FONT = {'family': 'sans-serif', 'weight': 'normal', 'size': 12}
LEGEND_FONT = FontProperties(family='sans-serif', size=10)

DASHBOARD_FILE = 'benchmark_dashboard.png'


def load_results(csv_path) -> pd.DataFrame:
    """Load benchmark results and normalize column names"""
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"benchmark CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)
    df = df.rename(columns={
        'size': 'grid_size',
        'total_time_ms': 'time_ms',
        'time_per_generation_ms': 'time_per_gen_ms',
        'cells_per_second_million': 'throughput_mcells_s'
    })
    logger.info("Loaded %d records from %s", len(df), csv_path)
    return df


def calculate_metrics(df: pd.DataFrame) -> dict:
    """Speedup of vectorized over cellwise for every grid size both modes ran"""
    metrics = {}

    modes = set(df['mode'].unique())
    if {'vectorized', 'cellwise'} <= modes:
        # Repeated runs of the same size are averaged
        vec = df[df['mode'] == 'vectorized'].groupby('grid_size')['time_per_gen_ms'].mean()
        cell = df[df['mode'] == 'cellwise'].groupby('grid_size')['time_per_gen_ms'].mean()
        common_sizes = [size for size in sorted(set(vec.index) & set(cell.index)) if vec[size] > 0]

        speedups = [float(cell[size] / vec[size]) for size in common_sizes]

        metrics['common_sizes'] = common_sizes
        metrics['speedups'] = speedups
        if speedups:
            metrics['mean_speedup'] = float(np.mean(speedups))
            metrics['max_speedup'] = float(np.max(speedups))
            metrics['min_speedup'] = float(np.min(speedups))

    metrics['peak'] = {
        mode: group.loc[group['throughput_mcells_s'].idxmax()]
        for mode, group in df.groupby('mode')
    }
    return metrics


def create_dashboard(df: pd.DataFrame, metrics: dict):
    """Dashboard with throughput, time per generation and speedup panels"""
    sns.set_palette("husl")
    fig = plt.figure(figsize=(18, 10))
    fig.patch.set_facecolor('white')
    gs = GridSpec(2, 2, figure=fig, hspace=0.35, wspace=0.25)

    fig.suptitle('Game of Life: Tick Performance Analysis',
                 fontsize=22, fontweight='bold',
                 color=COLORS['primary'], y=0.98)

    # PANEL 1: Throughput per mode
    ax1 = fig.add_subplot(gs[0, :])
    for mode, group in df.groupby('mode'):
        group = group.sort_values('grid_size')
        ax1.plot(group['grid_size'], group['throughput_mcells_s'], marker='o',
                 linewidth=3, markersize=10, markeredgecolor='white', markeredgewidth=2,
                 color=MODE_COLORS.get(mode, COLORS['primary']), label=mode)
    ax1.set_xlabel('Grid Size (N×N)', **LABEL_FONT)
    ax1.set_ylabel('Throughput (M cells/s)', **LABEL_FONT)
    ax1.set_title('Throughput by Tick Mode', **TITLE_FONT, pad=15)
    ax1.legend(loc='upper left', prop=LEGEND_FONT, framealpha=0.95)
    ax1.grid(True, alpha=0.3, linestyle='--')
    ax1.set_xscale('log', base=2)
    ax1.set_facecolor('#f8f9fa')

    # PANEL 2: Time per generation
    ax2 = fig.add_subplot(gs[1, 0])
    sns.barplot(data=df, x='grid_size', y='time_per_gen_ms', hue='mode', ax=ax2,
                palette=MODE_COLORS)
    ax2.set_xlabel('Grid Size (N×N)', **LABEL_FONT)
    ax2.set_ylabel('Time per Generation (ms)', **LABEL_FONT)
    ax2.set_title('Time per Generation', **TITLE_FONT, pad=15)
    ax2.set_yscale('log')
    ax2.set_facecolor('#f8f9fa')

    # PANEL 3: Speedup
    ax3 = fig.add_subplot(gs[1, 1])
    if metrics.get('speedups'):
        sizes = metrics['common_sizes']
        speedups = metrics['speedups']
        ax3.plot(sizes, speedups, marker='o', linewidth=3, markersize=12,
                 color=COLORS['warning'], markeredgecolor='white', markeredgewidth=2,
                 label='Vectorized vs Cellwise')
        for size, speedup in zip(sizes, speedups):
            ax3.text(size, speedup, f'{speedup:.1f}×',
                     ha='center', va='bottom', fontsize=9, fontweight='bold')
        ax3.axhline(y=1, color='red', linestyle='--', linewidth=2, alpha=0.5)
        ax3.set_xscale('log', base=2)
        ax3.legend(loc='upper left', prop=LEGEND_FONT, framealpha=0.95)
    else:
        ax3.text(0.5, 0.5, 'Speedup needs both modes', ha='center', va='center',
                 fontsize=12, style='italic', color='gray')
    ax3.set_xlabel('Grid Size (N×N)', **LABEL_FONT)
    ax3.set_ylabel('Speedup Factor (×)', **LABEL_FONT)
    ax3.set_title('Vectorized Speedup', **TITLE_FONT, pad=15)
    ax3.grid(True, alpha=0.3, linestyle='--')
    ax3.set_facecolor('#f8f9fa')

    return fig


def print_summary(df: pd.DataFrame, metrics: dict) -> None:
    """Print terminal summary"""
    print("\n" + "=" * 60)
    print("PERFORMANCE SUMMARY")
    print("=" * 60)

    for mode, best in metrics['peak'].items():
        print(f"\nPEAK THROUGHPUT ({mode}):")
        print(f"   {best['throughput_mcells_s']:.2f} M cells/s at "
              f"{int(best['grid_size'])}×{int(best['grid_size'])}")

    if 'mean_speedup' in metrics:
        print(f"\nSPEEDUP STATISTICS (vectorized vs cellwise):")
        print(f"   Average Speedup: {metrics['mean_speedup']:>8.2f}×")
        print(f"   Maximum Speedup: {metrics['max_speedup']:>8.2f}×")
        print(f"   Minimum Speedup: {metrics['min_speedup']:>8.2f}×")

    print(f"\nRecords analysed: {len(df)}")
    print("=" * 60 + "\n")


def main(csv_path=None, show: bool = False) -> Path:
    """Analyse a benchmark CSV and save the dashboard next to it"""
    if csv_path is None:
        csv_path = BENCHMARK_CSV
    csv_path = Path(csv_path)

    print("\nLoading benchmark data...")
    df = load_results(csv_path)

    print("Calculating performance metrics...")
    metrics = calculate_metrics(df)

    print("Generating dashboard...")
    fig = create_dashboard(df, metrics)
    output_path = csv_path.parent / DASHBOARD_FILE
    fig.savefig(output_path, dpi=150, bbox_inches='tight', facecolor='white')
    print(f"    Saved: {output_path}")

    print_summary(df, metrics)

    if show:
        plt.show()
    plt.close(fig)
    return output_path
