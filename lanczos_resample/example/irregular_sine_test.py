# -*- coding: utf-8 -*-
"""
Irregular Sine Test - Resample random sine samples onto a regular grid.

Draws ``SRC_COUNT`` positions uniformly from ``[0, 2 pi)``, samples
``sin(x)`` there, and resamples onto ``DST_W`` points spanning the same
interval.  Writes ``irregular-sine-A-N.dat`` (source records in draw
order) and ``irregular-sine-A-N-DST_W.dat`` (destination at
``x0 + (x1 - x0) * (j + 0.5) / dst_w``).

Usage::

    python -m lanczos_resample.example.irregular_sine_test 3 1000 64 --plot

Dependencies
------------
matplotlib (optional, ``--plot`` only)

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import argparse
import logging
import sys
from typing import Optional, Sequence

# Third-party
import numpy as np

# Lanczos internal
from lanczos_resample.example._common import (
    add_common_arguments,
    configure_logging,
    plot_series,
    write_dat,
)
from lanczos_resample.exceptions import LanczosError
from lanczos_resample.irregular import resample_irregular1D
from lanczos_resample.requests import IrregularRequest1D

logger = logging.getLogger(__name__)

X0 = 0.0
X1 = 2.0 * np.pi


def random_sine_records(count: int, seed: Optional[int] = None) -> np.ndarray:
    """Flat ``(x, sin(x))`` records with ``x`` uniform in ``[X0, X1)``."""
    rng = np.random.default_rng(seed)
    x = rng.uniform(X0, X1, count)
    records = np.empty((count, 2), dtype=np.float32)
    records[:, 0] = x
    records[:, 1] = np.sin(x)
    return records.reshape(-1)


def irregular_positions(dst_w: int, x0: float, x1: float) -> np.ndarray:
    """Domain position of each destination sample."""
    return x0 + (x1 - x0) * (np.arange(dst_w) + 0.5) / dst_w


# ── CLI ───────────────────────────────────────────────────────────────


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description=(
            "Resample SRC_COUNT random samples of sin(x) on [0, 2 pi) "
            "onto DST_W regular samples."
        ),
    )
    parser.add_argument("a", type=int, help="Kernel half-width (lobes).")
    parser.add_argument("src_count", type=int,
                        help="Number of random source samples.")
    parser.add_argument("dst_w", type=int, help="Destination sample count.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible positions (default: random).",
    )
    add_common_arguments(parser)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the harness; return the process exit status."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    if args.src_count < 0:
        logger.error("src_count must be >= 0, got %d", args.src_count)
        return 1

    src = random_sine_records(args.src_count, args.seed)
    try:
        dst = np.zeros(max(args.dst_w, 0), dtype=np.float32)
        request = IrregularRequest1D(a=args.a, channels=1,
                                     src_count=args.src_count,
                                     x0=X0, x1=X1, dst_w=args.dst_w,
                                     src=src, dst=dst, flags=args.flags)
    except LanczosError as error:
        logger.error("invalid request: %s", error)
        return 1

    if not resample_irregular1D(request):
        return 1

    records = src.reshape(args.src_count, 2)
    x_dst = irregular_positions(args.dst_w, X0, X1)
    src_dat = args.output_dir / ("irregular-sine-%d-%d.dat"
                                 % (args.a, args.src_count))
    dst_dat = args.output_dir / ("irregular-sine-%d-%d-%d.dat"
                                 % (args.a, args.src_count, args.dst_w))
    try:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        write_dat(src_dat, records[:, 0], records[:, 1])
        write_dat(dst_dat, x_dst, dst)
    except OSError as error:
        logger.error("export failed: %s", error)
        return 1

    if args.plot:
        order = np.argsort(records[:, 0])
        plot_series(
            "irregular sine a=%d, %d -> %d"
            % (args.a, args.src_count, args.dst_w),
            [
                ("source", records[order, 0], records[order, 1]),
                ("resampled", x_dst, dst),
            ],
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
