# -*- coding: utf-8 -*-
"""
Lanczos Test - Resample a fixed 10-sample signal up and down by 2x.

Writes three ``x value`` files to the output directory:

- ``s1.dat``: the source, at ``x = i``;
- ``s2u.dat``: the source resampled to 20 samples;
- ``s2d.dat``: the source resampled to 5 samples.

Resampled samples are placed at their source-space centers
``(j + 0.5) * src_w / dst_w - 0.5`` so all three files overlay directly.

Usage::

    python -m lanczos_resample.example.lanczos_test --output-dir out --plot

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
from lanczos_resample.regular import resample_regular1D
from lanczos_resample.requests import RegularRequest1D

logger = logging.getLogger(__name__)

SIGNAL = np.array(
    [0.1, 0.3, 0.4, 0.3, 0.2, 0.4, 0.6, 0.8, 0.9, 0.7],
    dtype=np.float32,
)
A = 3
UP_W = 20
DOWN_W = 5


def regular_positions(src_w: int, dst_w: int) -> np.ndarray:
    """Source-space center of each destination sample."""
    step = src_w / dst_w
    return (np.arange(dst_w) + 0.5) * step - 0.5


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
            "Resample a fixed 10-sample signal to 20 and 5 samples "
            "(a=3) and write s1.dat, s2u.dat, s2d.dat."
        ),
    )
    add_common_arguments(parser)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the harness; return the process exit status."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    src_w = SIGNAL.size
    dst_u = np.zeros(UP_W, dtype=np.float32)
    dst_d = np.zeros(DOWN_W, dtype=np.float32)
    try:
        request_u = RegularRequest1D(a=A, channels=1, src_w=src_w,
                                     dst_w=UP_W, src=SIGNAL, dst=dst_u,
                                     flags=args.flags)
        request_d = RegularRequest1D(a=A, channels=1, src_w=src_w,
                                     dst_w=DOWN_W, src=SIGNAL, dst=dst_d,
                                     flags=args.flags)
    except LanczosError as error:
        logger.error("invalid request: %s", error)
        return 1

    if not (resample_regular1D(request_u) and resample_regular1D(request_d)):
        return 1

    x_src = np.arange(src_w, dtype=np.float64)
    x_up = regular_positions(src_w, UP_W)
    x_down = regular_positions(src_w, DOWN_W)
    try:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        write_dat(args.output_dir / "s1.dat", x_src, SIGNAL)
        write_dat(args.output_dir / "s2u.dat", x_up, dst_u)
        write_dat(args.output_dir / "s2d.dat", x_down, dst_d)
    except OSError as error:
        logger.error("export failed: %s", error)
        return 1

    if args.plot:
        plot_series("Lanczos a=%d" % A, [
            ("s1 (%d)" % src_w, x_src, SIGNAL),
            ("s2u (%d)" % UP_W, x_up, dst_u),
            ("s2d (%d)" % DOWN_W, x_down, dst_d),
        ])

    return 0


if __name__ == "__main__":
    sys.exit(main())
