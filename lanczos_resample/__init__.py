# -*- coding: utf-8 -*-
"""
Lanczos Resample - Lanczos-windowed sinc resampling of 1D signals.

Resamples multi-channel sample sequences onto a new uniform grid, either
from a uniform source grid (``resample_regular1D``) or from scattered,
unordered samples (``resample_irregular1D``).  Both paths normalize by
the kernel weight actually applied, so flat signals stay flat up to the
boundaries.

Entry points come in two flavors:

- request-based functions taking a ``*Request*`` record with flat,
  channel-interleaved buffers and a ``ResampleFlag`` word, returning
  ``True``/``False``;
- ``RegularResampler`` / ``IrregularResampler`` objects operating on
  ``(n, channels)`` arrays and raising ``LanczosError`` subclasses.

Dependencies
------------
numpy

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from lanczos_resample.exceptions import (
    LanczosError,
    ValidationError,
    ResampleError,
    NotSupportedError,
)
from lanczos_resample.vocabulary import (
    ResampleFlag,
    EdgeMode,
    MultidimMode,
    NodataMode,
    ResamplePath,
)
from lanczos_resample.options import ResampleOptions
from lanczos_resample.kernel import lanczos, lanczos_weights, sinc
from lanczos_resample.requests import (
    RegularRequest1D,
    RegularRequest2D,
    IrregularRequest1D,
    IrregularRequest2D,
)
from lanczos_resample.regular import (
    RegularResampler,
    regular_resampler,
    resample_regular1D,
    resample_regular2D,
)
from lanczos_resample.irregular import (
    IrregularResampler,
    irregular_resampler,
    resample_irregular1D,
    resample_irregular2D,
)

__all__ = [
    'LanczosError',
    'ValidationError',
    'ResampleError',
    'NotSupportedError',
    'ResampleFlag',
    'EdgeMode',
    'MultidimMode',
    'NodataMode',
    'ResamplePath',
    'ResampleOptions',
    'sinc',
    'lanczos',
    'lanczos_weights',
    'RegularRequest1D',
    'RegularRequest2D',
    'IrregularRequest1D',
    'IrregularRequest2D',
    'RegularResampler',
    'regular_resampler',
    'resample_regular1D',
    'resample_regular2D',
    'IrregularResampler',
    'irregular_resampler',
    'resample_irregular1D',
    'resample_irregular2D',
]
