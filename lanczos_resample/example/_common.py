# -*- coding: utf-8 -*-
"""
Harness Helpers - Shared CLI options, ``.dat`` export, and plotting.

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
from pathlib import Path
from typing import Sequence, Tuple

# Third-party
import numpy as np

logger = logging.getLogger(__name__)


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add ``--output-dir``, ``--flags``, ``--plot``, and ``--verbose``."""
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory for the .dat files (default: current directory).",
    )
    parser.add_argument(
        "--flags",
        type=lambda text: int(text, 0),
        default=0,
        help="ResampleFlag bitmask, e.g. 0x1 for zero padding (default: 0).",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Plot source and resampled data with matplotlib.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )


def configure_logging(verbose: bool) -> None:
    """Route package log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def write_dat(path: Path, x: np.ndarray, y: np.ndarray) -> None:
    """Write one ``"x value"`` line per sample.

    Raises
    ------
    OSError
        If the file cannot be created.
    """
    with open(path, "w") as f:
        for xi, yi in zip(x, y):
            f.write("%f %f\n" % (xi, yi))
    logger.info("Wrote %d samples to %s", len(x), path)


def plot_series(
    title: str,
    series: Sequence[Tuple[str, np.ndarray, np.ndarray]],
) -> None:
    """Overlay ``(label, x, y)`` series in one figure and show it."""
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=(10, 5))
    for k, (label, x, y) in enumerate(series):
        style = "o" if k == 0 else ".-"
        ax.plot(x, y, style, label=label, markersize=4)
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("value")
    ax.legend()
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.show()
