# -*- coding: utf-8 -*-
"""
Irregular Lanczos Resampling - Scattered samples to a uniform grid.

Three-stage pipeline over a shared :class:`BinStructure`:

1. **bin**: partition the scattered samples by destination bin
   (:func:`~lanczos_resample.irregular.binning.bin_samples`);
2. **fill holes**: synthesize one sample in every empty bin
   (:func:`~lanczos_resample.irregular.holes.fill_holes`);
3. **convolve**: give destination ``j`` the Lanczos-weighted average of
   every record in bins ``j .. j + 2a``, with the kernel evaluated at the
   record's actual (not bin-quantized) grid offset ``jf - (j + 0.5)`` and
   the sum normalized by the weights actually applied.

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
from typing import Annotated

# Third-party
import numpy as np

# Lanczos internal
from lanczos_resample.base import Resampler
from lanczos_resample.exceptions import (
    NotSupportedError,
    ResampleError,
    ValidationError,
)
from lanczos_resample.irregular.binning import BinStructure, bin_samples
from lanczos_resample.irregular.holes import fill_holes
from lanczos_resample.kernel import lanczos_weights, normalize
from lanczos_resample.params import Desc, Options, Range
from lanczos_resample.requests import IrregularRequest1D, IrregularRequest2D
from lanczos_resample.vocabulary import NodataMode

logger = logging.getLogger(__name__)


def convolve_bins(bins: BinStructure) -> np.ndarray:
    """Windowed-sinc convolution of a hole-filled bin structure.

    A record in bin ``ja`` lies within the kernel support of destinations
    ``ja - 2a .. ja``; each such pair contributes
    ``L(jf - (j + 0.5), a)``.

    Parameters
    ----------
    bins : BinStructure
        Structure in which every bin holds at least one record.

    Returns
    -------
    np.ndarray, shape ``(dst_w, channels)``

    Raises
    ------
    ResampleError
        If a destination sample accumulates a non-positive or non-finite
        weight.
    """
    a = bins.a
    dst_w = bins.dst_w
    jf = bins.to_grid(bins.positions)

    # (record, destination) pairs within reach of each record's bin
    dest = bins.bins[:, np.newaxis] - np.arange(2 * a + 1)[np.newaxis, :]
    record = np.broadcast_to(
        np.arange(bins.size)[:, np.newaxis], dest.shape,
    )
    valid = (dest >= 0) & (dest < dst_w)
    dest = dest[valid]
    record = record[valid]

    w = lanczos_weights(jf[record] - (dest + 0.5), a)
    weight = np.bincount(dest, weights=w, minlength=dst_w)
    magnitude = np.bincount(dest, weights=np.abs(w), minlength=dst_w)
    accumulated = np.zeros((dst_w, bins.channels))
    np.add.at(accumulated, dest, w[:, np.newaxis] * bins.values[record])

    return normalize(accumulated, weight, magnitude)


class IrregularResampler(Resampler):
    """Lanczos resampler from scattered samples to a uniform grid.

    Parameters
    ----------
    a : int
        Kernel half-width in destination samples. Default 3.
    nodata : NodataMode
        How empty bins are filled before convolution. Default
        ``NodataMode.WEIGHTED``.

    Examples
    --------
    >>> x = rng.uniform(0.0, 2 * np.pi, 1000)
    >>> resampler = IrregularResampler(a=3)
    >>> y = resampler.resample(x, np.sin(x), 64, 0.0, 2 * np.pi)
    """

    a: Annotated[int, Range(min=1), Desc('Kernel half-width (lobes)')] = 3
    nodata: Annotated[NodataMode, Options(*NodataMode),
                      Desc('Empty bin synthesis')] = NodataMode.WEIGHTED

    def bin(
        self,
        positions: np.ndarray,
        values: np.ndarray,
        dst_w: int,
        x0: float,
        x1: float,
    ) -> BinStructure:
        """Stage 1: bin observed samples (see :func:`bin_samples`)."""
        return bin_samples(positions, values, self.a, dst_w, x0, x1)

    def fill(self, bins: BinStructure) -> BinStructure:
        """Stage 2: synthesize samples for empty bins."""
        return fill_holes(bins, self.nodata)

    def resample(
        self,
        positions: np.ndarray,
        values: np.ndarray,
        dst_w: int,
        x0: float,
        x1: float,
    ) -> np.ndarray:
        """Resample scattered samples onto ``dst_w`` regular samples.

        Destination sample ``j`` sits at ``x0 + (x1 - x0) * (j + 0.5) /
        dst_w``.

        Parameters
        ----------
        positions : np.ndarray, shape ``(n,)``
            Sample positions, any order. Samples farther than ``a``
            destination samples outside ``[x0, x1]`` are ignored.
        values : np.ndarray, shape ``(n,)`` or ``(n, channels)``
            Sample values.
        dst_w : int
            Destination sample count, >= 1.
        x0, x1 : float
            Destination domain, ``x0 < x1``.

        Returns
        -------
        np.ndarray
            Shape ``(dst_w,)`` or ``(dst_w, channels)``, float64.

        Raises
        ------
        ValidationError
            If the inputs or geometry are invalid.
        ResampleError
            If a destination sample accumulates a non-positive total
            weight, e.g. when dense clusters sit on negative lobes.
        """
        values = np.asarray(values, dtype=np.float64)
        squeeze = values.ndim == 1
        if values.ndim not in (1, 2):
            raise ValidationError(
                f"values must have shape (n,) or (n, channels), "
                f"got {values.shape}"
            )

        bins = self.bin(positions, values, dst_w, x0, x1)
        filled = self.fill(bins)
        logger.debug(
            "Irregular resample: %d observed, %d synthesized records",
            bins.size, filled.size - bins.size,
        )
        result = convolve_bins(filled)

        return result[:, 0] if squeeze else result

    def resample2d(self, *args, **kwargs) -> np.ndarray:
        """2D irregular resampling (not implemented).

        Raises
        ------
        NotSupportedError
            Always.
        """
        raise NotSupportedError("irregular 2D resampling is not implemented")


def irregular_resampler(
    a: int = 3,
    nodata: NodataMode = NodataMode.WEIGHTED,
) -> IrregularResampler:
    """Create an irregular-grid Lanczos resampler.

    Convenience factory function. See :class:`IrregularResampler` for
    full documentation.
    """
    return IrregularResampler(a=a, nodata=nodata)


# ── Functional API ────────────────────────────────────────────────────


def resample_irregular1D(request: IrregularRequest1D) -> bool:
    """Resample a 1D irregular request into its destination buffer.

    Parameters
    ----------
    request : IrregularRequest1D
        Validated request. ``request.dst`` is written in full on success
        and left untouched on failure.

    Returns
    -------
    bool
        True on success, False if resampling failed (logged).
    """
    resampler = IrregularResampler(
        a=int(request.a),
        nodata=request.options.nodata,
    )
    positions, values = request.src_records()
    try:
        result = resampler.resample(
            positions, values, int(request.dst_w),
            float(request.x0), float(request.x1),
        )
    except (ResampleError, MemoryError) as error:
        logger.error("irregular 1D resample of %d samples failed: %s",
                     request.src_count, error)
        return False

    request.write_dst(result)
    return True


def resample_irregular2D(request: IrregularRequest2D) -> bool:
    """Resample a 2D irregular request (not implemented).

    Returns
    -------
    bool
        Always False.
    """
    resampler = IrregularResampler(
        a=int(request.a),
        nodata=request.options.nodata,
    )
    try:
        result = resampler.resample2d(request)
    except NotSupportedError as error:
        logger.error("%s", error)
        return False

    request.write_dst(result)
    return True
