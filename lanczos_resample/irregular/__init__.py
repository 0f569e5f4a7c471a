# -*- coding: utf-8 -*-
"""
Irregular - Lanczos resampling of scattered samples onto a uniform grid.

Pipeline stages, each usable on its own:

- ``bin_samples``: partition samples into destination-aligned bins
  (``BinStructure``).
- ``fill_holes``: synthesize one sample per empty bin according to a
  ``NodataMode``.
- ``convolve_bins``: Lanczos-weighted, normalized average per
  destination sample.

``IrregularResampler`` / ``irregular_resampler`` chain the three, and
``resample_irregular1D`` / ``resample_irregular2D`` are the
request-based entry points.

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

from lanczos_resample.irregular.binning import BinStructure, bin_samples
from lanczos_resample.irregular.holes import (
    fill_holes,
    scan_left,
    scan_right,
    synthesize,
)
from lanczos_resample.irregular.resampler import (
    IrregularResampler,
    convolve_bins,
    irregular_resampler,
    resample_irregular1D,
    resample_irregular2D,
)

__all__ = [
    'BinStructure',
    'bin_samples',
    'fill_holes',
    'scan_left',
    'scan_right',
    'synthesize',
    'convolve_bins',
    'IrregularResampler',
    'irregular_resampler',
    'resample_irregular1D',
    'resample_irregular2D',
]
