# experiments/run_experiments.py
# Automate quality experiments: vary seeds and sample widths, collect per-bit
# ones frequency and a low-byte chi-square statistic into a CSV.

import argparse
import csv
import logging
import os
import sys
import time
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slimrand import Kind, Xorwow, config  # noqa: E402

logger = logging.getLogger('experiments')

WIDTH_KINDS = {8: Kind.U8, 16: Kind.U16, 32: Kind.U32}


def collect(seed, width, samples):
    rng = Xorwow.from_seed(seed)
    kind = WIDTH_KINDS[width]
    return np.array([rng.sample(kind) for _ in range(samples)], dtype=np.uint64)


def bit_frequencies(values, width):
    # fraction of samples with each bit set, bit 0 first
    bits = (values[:, None] >> np.arange(width, dtype=np.uint64)) & np.uint64(1)
    return bits.mean(axis=0)


def byte_chi_square(values):
    counts = np.bincount((values & np.uint64(0xFF)).astype(np.int64), minlength=256)
    expected = len(values) / 256.0
    return float(((counts - expected) ** 2 / expected).sum())


def run(seeds, widths, samples, csv_path):
    os.makedirs(os.path.dirname(csv_path) or '.', exist_ok=True)
    with open(csv_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['seed', 'width', 'bit', 'ones_rate', 'chi2'])
        for seed in seeds:
            for width in widths:
                t0 = time.time()
                values = collect(seed, width, samples)
                chi2 = byte_chi_square(values)
                for bit, rate in enumerate(bit_frequencies(values, width)):
                    writer.writerow([seed, width, bit, f"{rate:.6f}", f"{chi2:.3f}"])
                f.flush()
                logger.info(f"seed={seed:#x} width={width} chi2={chi2:.1f} ({time.time() - t0:.2f}s)")
    return csv_path


def parse_int_list(text):
    return [int(x, 0) for x in text.split(',') if x]


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--seeds', type=str, default='0,1,0xCAFEBABEDEADBEEF', help='comma list')
    parser.add_argument('--widths', type=str, default='8,16,32', help='comma list of 8/16/32')
    parser.add_argument('--samples', type=int, default=100000, help='draws per (seed, width)')
    parser.add_argument('--out', type=str, default=None, help='CSV path')
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
    widths = parse_int_list(args.widths)
    unknown = [w for w in widths if w not in WIDTH_KINDS]
    if unknown:
        raise SystemExit(f"Unsupported widths {unknown}; choose from {sorted(WIDTH_KINDS)}")

    csv_path = args.out or os.path.join('results', f'experiments_{int(time.time())}.csv')
    run(parse_int_list(args.seeds), widths, args.samples, csv_path)
    print("Experiments complete. CSV saved at:", csv_path)
    return csv_path


if __name__ == '__main__':
    main()
