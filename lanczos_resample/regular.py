# -*- coding: utf-8 -*-
"""
Regular Lanczos Resampling - Uniform grid to uniform grid.

Resamples a channel-interleaved signal of ``src_w`` evenly spaced samples
onto ``dst_w`` evenly spaced samples covering the same extent.  Sample
``j`` of the destination sits at the continuous source-space position::

    x_j = (j + 0.5) * src_w / dst_w - 0.5

Two convolution paths exist:

- **Fast path**: integer ratios only.  Upsampling by ``S = dst_w /
  src_w`` has ``S`` distinct phases; downsampling by ``D = src_w / dst_w``
  has one phase and a kernel stretched by ``fs = D``.  The kernel
  coefficients of every phase are pre-computed once per call in a
  ``(phases, 2 * a * fs)`` table, and every destination sample of the
  same phase reuses its row.
- **Slow path**: arbitrary ratios.  The kernel is evaluated for each
  destination sample, stretched by ``fs = src_w / dst_w`` when
  downsampling.

Both paths divide the weighted sum by the sum of kernel weights of the
taps actually used (flux-preserving normalization), so the output level
stays correct where taps are dropped at the boundaries.

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
from typing import Annotated, Optional, Tuple, Union

# Third-party
import numpy as np

# Lanczos internal
from lanczos_resample.base import Resampler
from lanczos_resample.exceptions import (
    NotSupportedError,
    ResampleError,
    ValidationError,
)
from lanczos_resample.kernel import lanczos_weights, normalize
from lanczos_resample.params import Desc, Options, Range
from lanczos_resample.requests import RegularRequest1D, RegularRequest2D
from lanczos_resample.vocabulary import EdgeMode, ResamplePath

logger = logging.getLogger(__name__)


# ── Path selection ────────────────────────────────────────────────────


@dataclasses.dataclass(frozen=True)
class ResamplePlan:
    """Convolution layout for one ``src_w -> dst_w`` ratio.

    Attributes
    ----------
    path : ResamplePath
        ``FAST`` for integer ratios, ``SLOW`` otherwise.
    phases : int
        Distinct kernel phases (``S`` when upsampling by ``S``, else 1).
        Only meaningful for the fast path.
    fs : float
        Filter scale. The kernel is evaluated at ``offset / fs``.
    taps : int
        Kernel taps per destination sample.
    """

    path: ResamplePath
    phases: int
    fs: Union[int, float]
    taps: int

    @property
    def table_size(self) -> int:
        """Total coefficients ``N`` of the fast-path table."""
        return self.phases * self.taps


def plan_regular(src_w: int, dst_w: int, a: int) -> ResamplePlan:
    """Select the convolution path for a resampling ratio.

    Parameters
    ----------
    src_w : int
        Source sample count.
    dst_w : int
        Destination sample count.
    a : int
        Kernel half-width.

    Returns
    -------
    ResamplePlan
        Fast when ``dst_w`` is a multiple of ``src_w`` (``phases = S``,
        ``fs = 1``, ``N = S * 2a``) or ``src_w`` is a multiple of
        ``dst_w`` (``phases = 1``, ``fs = D``, ``N = D * 2a``); slow
        otherwise.
    """
    if dst_w % src_w == 0:
        upsample = dst_w // src_w
        return ResamplePlan(ResamplePath.FAST, upsample, 1, 2 * a)
    if src_w % dst_w == 0:
        downsample = src_w // dst_w
        return ResamplePlan(ResamplePath.FAST, 1, downsample,
                            2 * a * downsample)

    fs = src_w / dst_w if src_w > dst_w else 1.0
    half = math.ceil(fs * a)
    return ResamplePlan(ResamplePath.SLOW, 1, fs, 2 * half)


def destination_centers(
    src_w: int,
    dst_w: int,
    count: int,
) -> Tuple[np.ndarray, np.ndarray]:
    """Floor and fractional part of the first *count* destination centers.

    ``x_j = ((2j + 1) * src_w - dst_w) / (2 * dst_w)`` is split with
    integer arithmetic, so indices ``phases`` apart share exactly the
    same fraction.

    Returns
    -------
    base : np.ndarray
        ``floor(x_j)``, int64, shape ``(count,)``.
    frac : np.ndarray
        ``x_j - floor(x_j)`` in ``[0, 1)``, float64, shape ``(count,)``.
    """
    j = np.arange(count, dtype=np.int64)
    numerator = (2 * j + 1) * src_w - dst_w
    denominator = 2 * dst_w
    base = numerator // denominator
    frac = (numerator - base * denominator) / denominator
    return base, frac


def tap_offsets(half: int) -> np.ndarray:
    """Tap offsets ``[-half + 1, half]`` relative to ``floor(x_j)``."""
    return np.arange(-half + 1, half + 1, dtype=np.int64)


# ── Coefficient table construction ───────────────────────────────────


def build_coefficient_table(
    plan: ResamplePlan,
    a: int,
    src_w: int,
    dst_w: int,
) -> Tuple[np.ndarray, np.ndarray]:
    """Pre-compute the fast-path kernel table and per-phase weights.

    For phase ``j`` with fractional center ``f_j`` and tap offset ``i``
    in ``[-fs*a + 1, fs*a]`` the coefficient is ``L((i - f_j) / fs, a)``.
    The weight ``w_j`` is the row sum.

    Parameters
    ----------
    plan : ResamplePlan
        Fast-path plan from :func:`plan_regular`.
    a : int
        Kernel half-width.
    src_w, dst_w : int
        Grid sizes.

    Returns
    -------
    table : np.ndarray, shape ``(phases, taps)``
    weights : np.ndarray, shape ``(phases,)``

    Raises
    ------
    ResampleError
        If filling the table would run past ``N`` coefficients.
    """
    size = plan.table_size
    taps = tap_offsets(plan.fs * a)
    _, frac = destination_centers(src_w, dst_w, plan.phases)

    table = np.empty(size, dtype=np.float64)
    weights = np.empty(plan.phases, dtype=np.float64)

    idx = 0
    for j in range(plan.phases):
        row = lanczos_weights((taps - frac[j]) / plan.fs, a)
        end = idx + row.size
        if end > size:
            logger.error("invalid idx=%d, N=%d", end, size)
            raise ResampleError(
                f"coefficient table overrun at phase {j}: "
                f"idx={end}, N={size}"
            )
        table[idx:end] = row
        weights[j] = row.sum()
        idx = end

    if idx != size:
        logger.error("invalid idx=%d, N=%d", idx, size)
        raise ResampleError(
            f"coefficient table incomplete: idx={idx}, N={size}"
        )

    return table.reshape(plan.phases, plan.taps), weights


# ── Class ─────────────────────────────────────────────────────────────


class RegularResampler(Resampler):
    """Lanczos resampler between two uniform grids.

    Parameters
    ----------
    a : int
        Kernel half-width (number of lobes). The kernel spans ``2 * a``
        source samples when upsampling and ``2 * a * D`` when
        downsampling by ``D``. Default 3.
    edge_mode : EdgeMode
        ``CLAMPING`` (default) repeats the first/last source sample for
        taps before/after the buffer. ``ZERO_PADDING`` drops taps with an
        index ``< 0`` or ``>= src_w - 1`` from both the weighted sum and
        the normalizing weight.

    Examples
    --------
    >>> resampler = RegularResampler(a=3)
    >>> up = resampler.resample(signal, 2 * len(signal))
    >>> rgb_down = resampler.resample(rgb, len(rgb) // 4)
    """

    a: Annotated[int, Range(min=1), Desc('Kernel half-width (lobes)')] = 3
    edge_mode: Annotated[EdgeMode, Options(*EdgeMode),
                         Desc('Out-of-range tap handling')] = EdgeMode.CLAMPING

    def plan(self, src_w: int, dst_w: int) -> ResamplePlan:
        """Convolution layout used for ``src_w -> dst_w``."""
        return plan_regular(src_w, dst_w, self.a)

    def resample(self, src: np.ndarray, dst_w: int) -> np.ndarray:
        """Resample *src* onto ``dst_w`` samples.

        Parameters
        ----------
        src : np.ndarray
            Source samples, shape ``(src_w,)`` or ``(src_w, channels)``.
        dst_w : int
            Destination sample count, >= 1.

        Returns
        -------
        np.ndarray
            Shape ``(dst_w,)`` or ``(dst_w, channels)``, float64.

        Raises
        ------
        ValidationError
            If *src* is empty or not 1D/2D, or ``dst_w < 1``.
        ResampleError
            If the coefficient table cannot be built or a destination
            sample has a non-positive total kernel weight. Under
            ``ZERO_PADDING`` this happens at the right edge whenever the
            surviving taps sum to zero or less (identity and upsampling
            ratios).
        """
        samples = np.asarray(src, dtype=np.float64)
        squeeze = samples.ndim == 1
        if squeeze:
            samples = samples[:, np.newaxis]
        if samples.ndim != 2 or samples.shape[0] < 1:
            raise ValidationError(
                f"src must have shape (src_w,) or (src_w, channels) with "
                f"src_w >= 1, got {np.shape(src)}"
            )
        if dst_w < 1:
            raise ValidationError(f"dst_w must be >= 1, got {dst_w}")

        src_w = samples.shape[0]
        plan = self.plan(src_w, dst_w)
        logger.debug(
            "Regular resample %d -> %d: %s path, phases=%d, fs=%s, taps=%d",
            src_w, dst_w, plan.path.value, plan.phases, plan.fs, plan.taps,
        )

        if plan.path is ResamplePath.FAST:
            result = self._resample_fast(samples, dst_w, plan)
        else:
            result = self._resample_slow(samples, dst_w, plan)

        return result[:, 0] if squeeze else result

    def resample2d(
        self,
        src: np.ndarray,
        dst_w: int,
        dst_h: int,
    ) -> np.ndarray:
        """2D regular resampling (not implemented).

        Raises
        ------
        NotSupportedError
            Always.
        """
        raise NotSupportedError("regular 2D resampling is not implemented")

    def _resample_fast(
        self,
        samples: np.ndarray,
        dst_w: int,
        plan: ResamplePlan,
    ) -> np.ndarray:
        """Integer-ratio convolution with the pre-computed phase table."""
        src_w = samples.shape[0]
        table, weights = build_coefficient_table(plan, self.a, src_w, dst_w)

        base, _ = destination_centers(src_w, dst_w, dst_w)
        phase = np.arange(dst_w) % plan.phases
        index = base[:, np.newaxis] + tap_offsets(plan.fs * self.a)

        return self._convolve(samples, index, table[phase], weights[phase])

    def _resample_slow(
        self,
        samples: np.ndarray,
        dst_w: int,
        plan: ResamplePlan,
    ) -> np.ndarray:
        """Arbitrary-ratio convolution, kernel evaluated per sample."""
        src_w = samples.shape[0]
        taps = tap_offsets(plan.taps // 2)

        base, frac = destination_centers(src_w, dst_w, dst_w)
        offsets = taps[np.newaxis, :] - frac[:, np.newaxis]
        coef = lanczos_weights(offsets / plan.fs, self.a)
        index = base[:, np.newaxis] + taps[np.newaxis, :]

        return self._convolve(samples, index, coef)

    def _convolve(
        self,
        samples: np.ndarray,
        index: np.ndarray,
        coef: np.ndarray,
        full_weight: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """Apply edge handling, accumulate, and normalize.

        Parameters
        ----------
        samples : np.ndarray, shape ``(src_w, channels)``
        index : np.ndarray, shape ``(dst_w, taps)``
            Unbounded source tap indices.
        coef : np.ndarray, shape ``(dst_w, taps)``
            Kernel coefficient per tap.
        full_weight : np.ndarray, optional
            Pre-computed row sums of *coef*, valid when no tap is dropped.
        """
        src_w = samples.shape[0]
        clipped = np.clip(index, 0, src_w - 1)
        gathered = samples[clipped]  # (dst_w, taps, channels)

        if self.edge_mode is EdgeMode.CLAMPING:
            weight = coef.sum(axis=1) if full_weight is None else full_weight
        else:
            inside = (index >= 0) & (index < src_w - 1)
            coef = np.where(inside, coef, 0.0)
            gathered = np.where(inside[:, :, np.newaxis], gathered, 0.0)
            weight = coef.sum(axis=1)

        accumulated = np.einsum('jt,jtc->jc', coef, gathered)
        return normalize(accumulated, weight, np.abs(coef).sum(axis=1))


def regular_resampler(
    a: int = 3,
    edge_mode: EdgeMode = EdgeMode.CLAMPING,
) -> RegularResampler:
    """Create a regular-grid Lanczos resampler.

    Convenience factory function. See :class:`RegularResampler` for full
    documentation.
    """
    return RegularResampler(a=a, edge_mode=edge_mode)


# ── Functional API ────────────────────────────────────────────────────


def resample_regular1D(request: RegularRequest1D) -> bool:
    """Resample a 1D regular request into its destination buffer.

    Parameters
    ----------
    request : RegularRequest1D
        Validated request. ``request.dst`` is written in full on success
        and left untouched on failure.

    Returns
    -------
    bool
        True on success, False if resampling failed (logged).
    """
    resampler = RegularResampler(
        a=int(request.a),
        edge_mode=request.options.edge,
    )
    try:
        result = resampler.resample(request.src_samples(), int(request.dst_w))
    except (ResampleError, MemoryError) as error:
        logger.error("regular 1D resample %d -> %d failed: %s",
                     request.src_w, request.dst_w, error)
        return False

    request.write_dst(result)
    return True


def resample_regular2D(request: RegularRequest2D) -> bool:
    """Resample a 2D regular request (not implemented).

    Returns
    -------
    bool
        Always False.
    """
    resampler = RegularResampler(
        a=int(request.a),
        edge_mode=request.options.edge,
    )
    try:
        result = resampler.resample2d(request.src, request.dst_w,
                                      request.dst_h)
    except NotSupportedError as error:
        logger.error("%s", error)
        return False

    request.write_dst(result)
    return True
