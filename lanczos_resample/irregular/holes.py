# -*- coding: utf-8 -*-
"""
Hole Filling - Synthesize a sample for every empty irregular bin.

After binning, a bin with no observed sample (a *hole*) would leave the
kernel support of nearby destinations without data.  Each hole receives
exactly one synthesized sample placed at the bin center.  Its value comes
from a bounded search over the neighboring bins:

- to the left, bins ``ja - 1`` down to ``ja - a``, stopping at the first
  bin holding a sample below the hole position and keeping the largest
  such position;
- to the right, bins ``ja + 1`` up to ``ja + a``, keeping the smallest
  position above the hole.

The ``NodataMode`` then decides how the candidates become a value
(``WEIGHTED`` linear interpolation, ``NEAREST`` copy, or ``ZERO``).  Only
observed samples are searched; one hole never seeds another.

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
import logging
from typing import Optional

# Third-party
import numpy as np

# Lanczos internal
from lanczos_resample.irregular.binning import BinStructure
from lanczos_resample.vocabulary import NodataMode

logger = logging.getLogger(__name__)


def scan_left(bins: BinStructure, ja: int, xi: float) -> Optional[int]:
    """Nearest observed record left of *xi* within ``a`` bins of *ja*.

    Returns
    -------
    int or None
        Arena index of the record with the largest position ``< xi`` in
        the first non-empty bin scanning ``ja - 1 .. ja - a``, or None.
    """
    stop = max(ja - bins.a, 0)
    for k in range(ja - 1, stop - 1, -1):
        span = bins.bin_slice(k)
        positions = bins.positions[span]
        below = np.flatnonzero(positions < xi)
        if below.size:
            return span.start + int(below[np.argmax(positions[below])])
    return None


def scan_right(bins: BinStructure, ja: int, xi: float) -> Optional[int]:
    """Nearest observed record right of *xi* within ``a`` bins of *ja*.

    Returns
    -------
    int or None
        Arena index of the record with the smallest position ``> xi`` in
        the first non-empty bin scanning ``ja + 1 .. ja + a``, or None.
    """
    stop = min(ja + bins.a, bins.bin_count - 1)
    for k in range(ja + 1, stop + 1):
        span = bins.bin_slice(k)
        positions = bins.positions[span]
        above = np.flatnonzero(positions > xi)
        if above.size:
            return span.start + int(above[np.argmin(positions[above])])
    return None


def synthesize(
    bins: BinStructure,
    xi: float,
    left: Optional[int],
    right: Optional[int],
    nodata: NodataMode,
) -> np.ndarray:
    """Value of a hole at *xi* from its left/right candidates.

    Parameters
    ----------
    bins : BinStructure
        Observed samples.
    xi : float
        Hole position.
    left, right : int or None
        Arena indices from :func:`scan_left` / :func:`scan_right`.
    nodata : NodataMode
        Synthesis policy.

    Returns
    -------
    np.ndarray, shape ``(channels,)``
    """
    if nodata is NodataMode.ZERO or (left is None and right is None):
        return np.zeros(bins.channels)

    if left is not None and right is not None:
        x_left = bins.positions[left]
        x_right = bins.positions[right]
        if nodata is NodataMode.WEIGHTED:
            s = (xi - x_left) / (x_right - x_left)
            return (1.0 - s) * bins.values[left] + s * bins.values[right]
        nearest = left if xi - x_left <= x_right - xi else right
    else:
        nearest = left if left is not None else right

    return bins.values[nearest].copy()


def fill_holes(
    bins: BinStructure,
    nodata: NodataMode = NodataMode.WEIGHTED,
) -> BinStructure:
    """Give every empty bin one synthesized sample.

    Parameters
    ----------
    bins : BinStructure
        Output of :func:`~lanczos_resample.irregular.binning.bin_samples`.
        Not modified.
    nodata : NodataMode
        Synthesis policy. Default ``WEIGHTED``.

    Returns
    -------
    BinStructure
        New structure in which every bin, margin bins included, holds at
        least one record. Synthesized records have ``source_index == -1``.
    """
    empty = bins.empty_bins()
    if empty.size == 0:
        return bins

    hole_positions = bins.bin_center(empty)
    hole_values = np.zeros((empty.size, bins.channels))

    if nodata is not NodataMode.ZERO:
        for k, (ja, xi) in enumerate(zip(empty, hole_positions)):
            ja = int(ja)
            hole_values[k] = synthesize(
                bins, xi, scan_left(bins, ja, xi), scan_right(bins, ja, xi),
                nodata,
            )

    logger.debug("Filled %d of %d bins (%s)",
                 empty.size, bins.bin_count, nodata.value)
    return bins.with_samples(hole_positions, hole_values, empty)
