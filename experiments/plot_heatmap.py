# experiments/plot_heatmap.py
"""
Plot a heatmap: x axis = sample width (8/16/32), y axis = bit position,
cell value = mean ones rate of that bit across all seeds (ideal 0.5).

CSV expected columns: seed, width, bit, ones_rate
 - seed: int seed used for the run
 - width: int (8, 16, 32)
 - bit: int bit position (0 = least significant)
 - ones_rate: float in [0, 1]

Usage:
    python plot_heatmap.py --csv results/experiments_XXXX.csv --out heatmap.png
"""

import argparse
import os

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402


def prepare_pivot(df):
    # mean ones rate for each (bit, width) over seeds
    agg = df.groupby(['bit', 'width'], as_index=False)['ones_rate'].mean()
    pivot = agg.pivot(index='bit', columns='width', values='ones_rate')
    # most significant bit on top
    pivot = pivot.sort_index(ascending=False)
    return pivot


def plot_heatmap(pivot, title='Bit Balance Heatmap', out_file=None, annotate=True, spread=0.02):
    rows = pivot.index.tolist()
    cols = pivot.columns.tolist()
    data = pivot.values  # NaN where a width has no such bit

    fig, ax = plt.subplots(figsize=(1.2 * len(cols) + 3, 0.25 * len(rows) + 2))
    im = ax.imshow(data, aspect='auto', interpolation='nearest', cmap='coolwarm',
                   vmin=0.5 - spread, vmax=0.5 + spread)

    ax.set_xticks(np.arange(len(cols)))
    ax.set_yticks(np.arange(len(rows)))
    ax.set_xticklabels(cols)
    ax.set_yticklabels(rows)
    ax.set_xlabel('Sample width (bits)')
    ax.set_ylabel('Bit position')
    ax.set_title(title)

    if annotate:
        for i in range(len(rows)):
            for j in range(len(cols)):
                val = data[i, j]
                if np.isnan(val):
                    continue
                ax.text(j, i, f"{val:.3f}", ha='center', va='center', color='black', fontsize=6)

    cbar = fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)
    cbar.set_label('Mean ones rate (ideal 0.5)')

    plt.tight_layout()
    if out_file:
        os.makedirs(os.path.dirname(out_file) or '.', exist_ok=True)
        plt.savefig(out_file, dpi=300)
        print(f"Heatmap saved to {out_file}")
    plt.close(fig)
    return out_file


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--csv', required=True, help='Path to experiments CSV')
    parser.add_argument('--out', default='results/heatmap_bit_balance.png', help='Output PNG path')
    parser.add_argument('--title', default='Bit Balance Heatmap', help='Plot title')
    args = parser.parse_args(argv)

    df = pd.read_csv(args.csv)
    required = {'seed', 'width', 'bit', 'ones_rate'}
    if not required.issubset(set(df.columns)):
        raise SystemExit(f"CSV must contain columns: {required}. Found: {df.columns.tolist()}")

    df['width'] = df['width'].astype(int)
    df['bit'] = df['bit'].astype(int)
    df['ones_rate'] = df['ones_rate'].astype(float)

    pivot = prepare_pivot(df)
    return plot_heatmap(pivot, title=args.title, out_file=args.out, annotate=True)


if __name__ == '__main__':
    main()
