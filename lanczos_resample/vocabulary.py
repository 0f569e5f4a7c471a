# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical flags and enums for Lanczos resampling.

Defines the single source of truth for the controlled vocabularies used
across the package: the ``ResampleFlag`` bitmask accepted by request
records, and the named option enums it resolves into (edge handling,
multidimensional interpolation, and missing-data synthesis).

The bit values of ``ResampleFlag`` are stable so that flag words written
by other implementations of the same resampler are interpreted
identically.

Author
------
Steven Siebert

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

from enum import Enum, IntFlag


class ResampleFlag(IntFlag):
    """Bitmask of resampling behaviors.

    Unset groups fall back to their default (``EDGE_CLAMPING``,
    ``MULTIDIM_2D_SEPARABLE``, ``NODATA_WEIGHTED``).
    """

    NONE = 0x0000

    # Edge handling
    EDGE_ZERO_PADDING = 0x0001
    EDGE_CLAMPING = 0x0002

    # Multidimensional interpolation
    MULTIDIM_2D_SEPARABLE = 0x0010
    MULTIDIM_2D_ISOTROPIC = 0x0020

    # Irregular data holes
    NODATA_ZERO = 0x0100
    NODATA_NEAREST = 0x0200
    NODATA_WEIGHTED = 0x0400


class EdgeMode(Enum):
    """How taps falling outside the source buffer are handled."""

    CLAMPING = "clamping"
    ZERO_PADDING = "zero_padding"


class MultidimMode(Enum):
    """Kernel construction for 2D resampling (reserved)."""

    SEPARABLE = "separable"
    ISOTROPIC = "isotropic"


class ResamplePath(Enum):
    """Convolution path selected for a regular resampling ratio.

    ``FAST`` reuses a per-phase coefficient table and requires an integer
    up- or downsampling ratio; ``SLOW`` evaluates the kernel per
    destination sample for any ratio.
    """

    FAST = "fast"
    SLOW = "slow"


class NodataMode(Enum):
    """How an empty irregular bin is given a representative sample.

    ``WEIGHTED`` interpolates linearly between the nearest left and right
    neighbors, falling back to the single neighbor found, then to zero.
    """

    ZERO = "zero"
    NEAREST = "nearest"
    WEIGHTED = "weighted"
