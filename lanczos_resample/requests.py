# -*- coding: utf-8 -*-
"""
Resampling Requests - Validated parameter records for the functional API.

Each request bundles the flag word, kernel half-width, channel count,
grid geometry, and the caller-owned source and destination buffers for
one call of a ``resample_*`` function.  Buffers are flat, 1D float arrays:

- regular source / destination: channel interleaved, stride ``channels``
- irregular source: records ``(position, value_1 .. value_c)``, stride
  ``1 + channels`` (``2 + channels`` in 2D: ``(x, y, values...)``)

Geometry invariants are checked at construction and raise
``ValidationError``.  The destination is only ever written through
:meth:`write_dst`, after a complete result exists.

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
import math
from typing import Tuple

# Third-party
import numpy as np

# Lanczos internal
from lanczos_resample.exceptions import ValidationError
from lanczos_resample.options import ResampleOptions


# ===================================================================
# Helpers
# ===================================================================

def _validate_count(name: str, value: int, minimum: int = 1) -> None:
    """Validate that *value* is an integer >= *minimum*."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < minimum:
        raise ValidationError(f"{name} must be >= {minimum}, got {value}")


def _validate_buffer(
    name: str,
    buffer: np.ndarray,
    length: int,
    writable: bool = False,
) -> None:
    """Validate a flat float buffer of the expected *length*."""
    if not isinstance(buffer, np.ndarray):
        raise ValidationError(
            f"{name} must be a numpy ndarray, got {type(buffer).__name__}"
        )
    if buffer.ndim != 1:
        raise ValidationError(
            f"{name} must be 1D (flat, interleaved), got {buffer.ndim}D "
            f"with shape {buffer.shape}"
        )
    if not np.issubdtype(buffer.dtype, np.floating):
        raise ValidationError(
            f"{name} must have a floating point dtype, got {buffer.dtype}"
        )
    if buffer.size != length:
        raise ValidationError(
            f"{name} must hold {length} values, got {buffer.size}"
        )
    if writable and not buffer.flags.writeable:
        raise ValidationError(f"{name} must be writable")


def _validate_bounds(name0: str, v0: float, name1: str, v1: float) -> None:
    """Validate finite domain bounds with ``v0 < v1``."""
    if not (math.isfinite(v0) and math.isfinite(v1)):
        raise ValidationError(
            f"{name0} and {name1} must be finite, got {v0!r}, {v1!r}"
        )
    if not v0 < v1:
        raise ValidationError(
            f"{name0} must be < {name1}, got {name0}={v0!r}, {name1}={v1!r}"
        )


class _RequestMixin:
    """Flag resolution and destination writing shared by all requests."""

    @property
    def options(self) -> ResampleOptions:
        """Options resolved from ``flags``."""
        return ResampleOptions.from_flags(self.flags)

    def write_dst(self, result: np.ndarray) -> None:
        """Copy a complete result into the caller's destination buffer.

        Parameters
        ----------
        result : np.ndarray
            Destination samples, any shape with ``dst.size`` elements in
            channel-interleaved order.
        """
        self.dst[:] = np.asarray(result).reshape(-1)


# ===================================================================
# Regular requests
# ===================================================================

@dataclasses.dataclass
class RegularRequest1D(_RequestMixin):
    """Request for 1D regular-grid resampling.

    Parameters
    ----------
    a : int
        Kernel half-width, >= 1.
    channels : int
        Interleaved channels per sample, >= 1.
    src_w : int
        Source sample count, >= 1.
    dst_w : int
        Destination sample count, >= 1.
    src : np.ndarray
        Source buffer, length ``src_w * channels``.
    dst : np.ndarray
        Writable destination buffer, length ``dst_w * channels``.
    flags : int
        ``ResampleFlag`` bitmask. Default 0 (all defaults).
    """

    a: int
    channels: int
    src_w: int
    dst_w: int
    src: np.ndarray
    dst: np.ndarray
    flags: int = 0

    def __post_init__(self) -> None:
        _validate_count('a', self.a)
        _validate_count('channels', self.channels)
        _validate_count('src_w', self.src_w)
        _validate_count('dst_w', self.dst_w)
        _validate_buffer('src', self.src, self.src_w * self.channels)
        _validate_buffer('dst', self.dst, self.dst_w * self.channels,
                         writable=True)
        ResampleOptions.from_flags(self.flags)

    def src_samples(self) -> np.ndarray:
        """Source buffer viewed as ``(src_w, channels)``."""
        return self.src.reshape(self.src_w, self.channels)


@dataclasses.dataclass
class RegularRequest2D(_RequestMixin):
    """Request for 2D regular-grid resampling (validated, not resampled).

    Buffers are row-major, channel interleaved: ``src`` holds
    ``src_w * src_h * channels`` values and ``dst`` holds
    ``dst_w * dst_h * channels``.
    """

    a: int
    channels: int
    src_w: int
    src_h: int
    dst_w: int
    dst_h: int
    src: np.ndarray
    dst: np.ndarray
    flags: int = 0

    def __post_init__(self) -> None:
        _validate_count('a', self.a)
        _validate_count('channels', self.channels)
        _validate_count('src_w', self.src_w)
        _validate_count('src_h', self.src_h)
        _validate_count('dst_w', self.dst_w)
        _validate_count('dst_h', self.dst_h)
        _validate_buffer('src', self.src,
                         self.src_w * self.src_h * self.channels)
        _validate_buffer('dst', self.dst,
                         self.dst_w * self.dst_h * self.channels,
                         writable=True)
        ResampleOptions.from_flags(self.flags)


# ===================================================================
# Irregular requests
# ===================================================================

@dataclasses.dataclass
class IrregularRequest1D(_RequestMixin):
    """Request for 1D irregular-to-regular resampling.

    Parameters
    ----------
    a : int
        Kernel half-width, >= 1.
    channels : int
        Values per record, >= 1.
    src_count : int
        Number of source records, >= 0.
    x0, x1 : float
        Destination domain, ``x0 < x1``. Destination sample ``j`` sits at
        ``x0 + (x1 - x0) * (j + 0.5) / dst_w``.
    dst_w : int
        Destination sample count, >= 1.
    src : np.ndarray
        Source records ``(position, values...)``, length
        ``src_count * (1 + channels)``, any order.
    dst : np.ndarray
        Writable destination buffer, length ``dst_w * channels``.
    flags : int
        ``ResampleFlag`` bitmask. Default 0 (all defaults).
    """

    a: int
    channels: int
    src_count: int
    x0: float
    x1: float
    dst_w: int
    src: np.ndarray
    dst: np.ndarray
    flags: int = 0

    def __post_init__(self) -> None:
        _validate_count('a', self.a)
        _validate_count('channels', self.channels)
        _validate_count('src_count', self.src_count, minimum=0)
        _validate_count('dst_w', self.dst_w)
        _validate_bounds('x0', self.x0, 'x1', self.x1)
        _validate_buffer('src', self.src, self.src_count * self.stride)
        _validate_buffer('dst', self.dst, self.dst_w * self.channels,
                         writable=True)
        ResampleOptions.from_flags(self.flags)

    @property
    def stride(self) -> int:
        """Values per source record."""
        return 1 + self.channels

    def src_records(self) -> Tuple[np.ndarray, np.ndarray]:
        """Split the source buffer into positions and values.

        Returns
        -------
        positions : np.ndarray
            Shape ``(src_count,)``.
        values : np.ndarray
            Shape ``(src_count, channels)``.
        """
        records = self.src.reshape(self.src_count, self.stride)
        return records[:, 0], records[:, 1:]


@dataclasses.dataclass
class IrregularRequest2D(_RequestMixin):
    """Request for 2D irregular-to-regular resampling (validated, not
    resampled).

    Source records are ``(x, y, values...)`` (stride ``2 + channels``);
    the destination is ``dst_w * dst_h * channels`` values.
    """

    a: int
    channels: int
    src_count: int
    x0: float
    y0: float
    x1: float
    y1: float
    dst_w: int
    dst_h: int
    src: np.ndarray
    dst: np.ndarray
    flags: int = 0

    def __post_init__(self) -> None:
        _validate_count('a', self.a)
        _validate_count('channels', self.channels)
        _validate_count('src_count', self.src_count, minimum=0)
        _validate_count('dst_w', self.dst_w)
        _validate_count('dst_h', self.dst_h)
        _validate_bounds('x0', self.x0, 'x1', self.x1)
        _validate_bounds('y0', self.y0, 'y1', self.y1)
        _validate_buffer('src', self.src,
                         self.src_count * (2 + self.channels))
        _validate_buffer('dst', self.dst,
                         self.dst_w * self.dst_h * self.channels,
                         writable=True)
        ResampleOptions.from_flags(self.flags)
