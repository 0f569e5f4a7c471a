# -*- coding: utf-8 -*-
"""
Lanczos Kernel - Lanczos-windowed sinc evaluated at normalized offsets.

The Lanczos kernel truncates the ideal sinc with a wider sinc window,
parameterized by ``a`` (number of lobes, i.e. the kernel half-width)::

    L(x, a) = sinc(x) * sinc(x / a)    for -a < x < a
            = 0                        otherwise

with the normalized ``sinc(x) = sin(pi x) / (pi x)`` and ``sinc(0) = 1``.
The support is the open interval ``(-a, a)``.

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
import math
from typing import Optional

# Third-party
import numpy as np

# Lanczos internal
from lanczos_resample.exceptions import ResampleError


def sinc(x: float) -> float:
    """Normalized sinc with exact values at the integers.

    Parameters
    ----------
    x : float
        Offset in samples.

    Returns
    -------
    float
        ``1.0`` when ``x == 0``, ``0.0`` at any other integer, otherwise
        ``sin(pi*x) / (pi*x)``.
    """
    if x == 0.0:
        return 1.0
    if float(x).is_integer():
        return 0.0
    px = math.pi * x
    return math.sin(px) / px


def lanczos(x: float, a: float) -> float:
    """Evaluate the Lanczos kernel at a single offset.

    Parameters
    ----------
    x : float
        Normalized offset from the kernel center.
    a : float
        Kernel half-width (number of lobes).

    Returns
    -------
    float
        ``sinc(x) * sinc(x / a)`` inside ``(-a, a)``, else ``0.0``.
    """
    if -a < x < a:
        return sinc(x) * sinc(x / a)
    return 0.0


def lanczos_weights(x: np.ndarray, a: float) -> np.ndarray:
    """Evaluate the Lanczos kernel over an array of offsets.

    Same semantics as :func:`lanczos`.  ``numpy.sinc`` leaves a residue
    of order ``1e-17`` at the nonzero integers; those zero crossings are
    forced to exactly ``0`` so a tap sitting on one adds nothing to the
    normalizing weight.

    Parameters
    ----------
    x : np.ndarray
        Normalized offsets, any shape.
    a : float
        Kernel half-width (number of lobes).

    Returns
    -------
    np.ndarray
        Kernel weights, same shape as ``x``, dtype float64.
    """
    x = np.asarray(x, dtype=np.float64)
    inside = (np.abs(x) < a) & ((x == 0.0) | (x != np.floor(x)))
    return np.where(inside, np.sinc(x) * np.sinc(x / a), 0.0)


#: Smallest accepted ratio of a destination's total kernel weight to the
#: summed magnitude of the coefficients behind it.
WEIGHT_RTOL = 1e-12


def normalize(
    accumulated: np.ndarray,
    weight: np.ndarray,
    magnitude: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Divide accumulated sums by the kernel weight actually applied.

    A destination sample is only written when its weight is positive and
    not a cancellation residue: ``weight > WEIGHT_RTOL * magnitude``.

    Parameters
    ----------
    accumulated : np.ndarray, shape ``(dst_w, channels)``
        Weighted sums per destination sample.
    weight : np.ndarray, shape ``(dst_w,)``
        Sum of the kernel weights that contributed to each sum.
    magnitude : np.ndarray, shape ``(dst_w,)``, optional
        Sum of the absolute kernel weights behind each sum. Without it
        only ``weight <= 0`` is rejected.

    Returns
    -------
    np.ndarray
        ``accumulated / weight``, shape ``(dst_w, channels)``.

    Raises
    ------
    ResampleError
        If any weight is non-finite or not above that floor.
    """
    floor = 0.0 if magnitude is None else WEIGHT_RTOL * magnitude
    bad = ~np.isfinite(weight) | ~(weight > floor)
    if np.any(bad):
        first = int(np.flatnonzero(bad)[0])
        raise ResampleError(
            f"degenerate kernel weight {float(weight[first])!r} at "
            f"destination index {first} ({int(bad.sum())} affected)"
        )
    return accumulated / weight[:, np.newaxis]
