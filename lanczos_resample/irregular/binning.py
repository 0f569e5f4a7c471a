# -*- coding: utf-8 -*-
"""
Irregular Sample Binning - Partition scattered samples by destination bin.

Scattered ``(position, values)`` samples are mapped onto the destination
grid coordinate::

    jf = dst_w * (x - x0) / (x1 - x0)
    ja = floor(jf) + a

Bin ``ja`` therefore covers one destination sample width, and ``a``
margin bins on each side keep samples just outside ``[x0, x1]`` available
as kernel support for the boundary destinations.  Samples whose ``ja``
falls outside ``[0, dst_w + 2a)`` are discarded.

The bins are stored as one flat arena sorted by bin (insertion order is
kept within a bin) plus an offsets array giving each bin's
``[start, end)`` range, rather than a collection per bin.  Every record
remembers the row of the caller's buffer it came from; synthesized
records (holes) carry ``source_index == -1``.

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
import dataclasses
import logging
import math
from typing import Tuple

# Third-party
import numpy as np

# Lanczos internal
from lanczos_resample.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, eq=False)
class BinStructure:
    """Arena of binned samples in destination-aligned buckets.

    Parameters
    ----------
    a : int
        Kernel half-width; also the number of margin bins per side.
    dst_w : int
        Destination sample count.
    x0, x1 : float
        Destination domain bounds.
    positions : np.ndarray, shape ``(m,)``
        Record positions, grouped by bin.
    values : np.ndarray, shape ``(m, channels)``
        Record channel values.
    bins : np.ndarray, shape ``(m,)``
        Bin index of every record, non-decreasing.
    source_index : np.ndarray, shape ``(m,)``
        Row of the caller's source buffer, ``-1`` for synthesized records.
    offsets : np.ndarray, shape ``(bin_count + 1,)``
        Records of bin ``k`` are ``offsets[k]:offsets[k + 1]``.
    """

    a: int
    dst_w: int
    x0: float
    x1: float
    positions: np.ndarray
    values: np.ndarray
    bins: np.ndarray
    source_index: np.ndarray
    offsets: np.ndarray

    @property
    def bin_count(self) -> int:
        """Number of bins, ``dst_w + 2a``."""
        return self.dst_w + 2 * self.a

    @property
    def channels(self) -> int:
        """Values per record."""
        return self.values.shape[1]

    @property
    def size(self) -> int:
        """Total records, observed and synthesized."""
        return self.positions.shape[0]

    @property
    def owned(self) -> np.ndarray:
        """Mask of synthesized records (not backed by the caller's buffer)."""
        return self.source_index < 0

    def counts(self) -> np.ndarray:
        """Records per bin, shape ``(bin_count,)``."""
        return np.diff(self.offsets)

    def empty_bins(self) -> np.ndarray:
        """Indices of bins holding no record."""
        return np.flatnonzero(self.counts() == 0)

    def bin_slice(self, ja: int) -> slice:
        """Arena range of bin *ja*."""
        return slice(int(self.offsets[ja]), int(self.offsets[ja + 1]))

    def samples(self, ja: int) -> Tuple[np.ndarray, np.ndarray]:
        """Positions and values of the records in bin *ja*."""
        span = self.bin_slice(ja)
        return self.positions[span], self.values[span]

    def to_grid(self, x: np.ndarray) -> np.ndarray:
        """Destination grid coordinate ``jf`` of position(s) *x*."""
        return self.dst_w * (np.asarray(x, dtype=np.float64) - self.x0) \
            / (self.x1 - self.x0)

    def bin_center(self, ja: np.ndarray) -> np.ndarray:
        """Position of the center of bin(s) *ja* (``jf = ja - a + 0.5``)."""
        jf = np.asarray(ja, dtype=np.float64) - self.a + 0.5
        return self.x0 + jf * (self.x1 - self.x0) / self.dst_w

    def holes(self) -> Tuple[np.ndarray, np.ndarray]:
        """Positions and values of the synthesized records."""
        owned = self.owned
        return self.positions[owned], self.values[owned]

    def with_samples(
        self,
        positions: np.ndarray,
        values: np.ndarray,
        bins: np.ndarray,
    ) -> 'BinStructure':
        """Return a new structure with synthesized records added.

        The new records are appended after the existing records of their
        bin. ``self`` is left unchanged.

        Parameters
        ----------
        positions : np.ndarray, shape ``(h,)``
        values : np.ndarray, shape ``(h, channels)``
        bins : np.ndarray, shape ``(h,)``
            Bin index of each new record.
        """
        return _pack(
            self.a, self.dst_w, self.x0, self.x1,
            np.concatenate([self.positions, positions]),
            np.concatenate([self.values, values]),
            np.concatenate([self.bins, np.asarray(bins, dtype=np.int64)]),
            np.concatenate([
                self.source_index,
                np.full(len(positions), -1, dtype=np.int64),
            ]),
        )


def _pack(
    a: int,
    dst_w: int,
    x0: float,
    x1: float,
    positions: np.ndarray,
    values: np.ndarray,
    bins: np.ndarray,
    source_index: np.ndarray,
) -> BinStructure:
    """Sort records by bin (stable) and build the offsets array."""
    bin_count = dst_w + 2 * a
    order = np.argsort(bins, kind='stable')
    offsets = np.zeros(bin_count + 1, dtype=np.int64)
    offsets[1:] = np.cumsum(np.bincount(bins, minlength=bin_count))
    return BinStructure(
        a=a,
        dst_w=dst_w,
        x0=x0,
        x1=x1,
        positions=positions[order],
        values=values[order],
        bins=bins[order],
        source_index=source_index[order],
        offsets=offsets,
    )


def bin_samples(
    positions: np.ndarray,
    values: np.ndarray,
    a: int,
    dst_w: int,
    x0: float,
    x1: float,
) -> BinStructure:
    """Partition scattered samples into destination-aligned bins.

    Parameters
    ----------
    positions : np.ndarray, shape ``(n,)``
        Sample positions, any order.
    values : np.ndarray, shape ``(n,)`` or ``(n, channels)``
        Sample values.
    a : int
        Kernel half-width, >= 1.
    dst_w : int
        Destination sample count, >= 1.
    x0, x1 : float
        Destination domain, ``x0 < x1``.

    Returns
    -------
    BinStructure
        Observed samples only. Positions in ``[x0 - a*dx, x1 + a*dx)``
        with ``dx = (x1 - x0) / dst_w`` are kept; the rest (and
        non-finite positions) are dropped.

    Raises
    ------
    ValidationError
        If the geometry is invalid or *positions* and *values* disagree
        in length.
    """
    if a < 1:
        raise ValidationError(f"a must be >= 1, got {a}")
    if dst_w < 1:
        raise ValidationError(f"dst_w must be >= 1, got {dst_w}")
    if not (math.isfinite(x0) and math.isfinite(x1) and x0 < x1):
        raise ValidationError(
            f"domain must satisfy finite x0 < x1, got x0={x0!r}, x1={x1!r}"
        )

    positions = np.asarray(positions, dtype=np.float64)
    values = np.asarray(values, dtype=np.float64)
    if values.ndim == 1:
        values = values[:, np.newaxis]
    if positions.ndim != 1 or values.ndim != 2 \
            or values.shape[0] != positions.shape[0]:
        raise ValidationError(
            f"positions (n,) and values (n, channels) must agree, got "
            f"{positions.shape} and {values.shape}"
        )

    bin_count = dst_w + 2 * a
    jf = dst_w * (positions - x0) / (x1 - x0)
    with np.errstate(invalid='ignore'):
        ja = np.floor(jf) + a
        keep = np.isfinite(ja) & (ja >= 0) & (ja < bin_count)

    source_index = np.flatnonzero(keep)
    logger.debug(
        "Binned %d of %d samples into %d bins (a=%d, dst_w=%d)",
        source_index.size, positions.size, bin_count, a, dst_w,
    )
    return _pack(
        a, dst_w, float(x0), float(x1),
        positions[keep],
        values[keep],
        ja[keep].astype(np.int64),
        source_index.astype(np.int64),
    )
