# -*- coding: utf-8 -*-
"""
Lanczos Resample Exception Hierarchy - Domain-specific exceptions.

Provides a small exception hierarchy that lets callers catch resampling
errors distinctly from Python built-in exceptions.  Every exception
subclasses both ``LanczosError`` and the appropriate built-in exception
for backward compatibility.

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


class LanczosError(Exception):
    """Base exception for all lanczos_resample errors."""


class ValidationError(LanczosError, ValueError):
    """Invalid request, buffer, or parameter.

    Raised for buffer length mismatches, out-of-range parameters
    (``a < 1``, ``dst_w < 1``, ``x0 >= x1``) and unknown option values.
    """


class ResampleError(LanczosError, RuntimeError):
    """Non-recoverable failure while resampling.

    Raised for a coefficient table overrun or a destination sample whose
    accumulated kernel weight is zero or non-finite.  The functional
    ``resample_*`` entry points convert it into a ``False`` result.
    """


class NotSupportedError(LanczosError, NotImplementedError):
    """Requested resampling mode has no implementation (2D paths)."""
