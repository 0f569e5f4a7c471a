# -*- coding: utf-8 -*-
"""
Resample Options - Explicit configuration resolved from a flag bitmask.

``ResampleOptions`` replaces the raw ``ResampleFlag`` word with one named
choice per option group.  Combinations that set several flags of the
same group resolve with a fixed precedence:

- edge: ``EDGE_ZERO_PADDING`` over ``EDGE_CLAMPING`` (default clamping)
- multidim: ``MULTIDIM_2D_SEPARABLE`` over ``MULTIDIM_2D_ISOTROPIC``
  (default separable)
- nodata: ``NODATA_ZERO`` over ``NODATA_WEIGHTED`` over
  ``NODATA_NEAREST`` (default weighted)

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
from typing import Union

# Lanczos internal
from lanczos_resample.exceptions import ValidationError
from lanczos_resample.vocabulary import (
    EdgeMode,
    MultidimMode,
    NodataMode,
    ResampleFlag,
)


_ALL_FLAGS = sum(int(flag) for flag in ResampleFlag)


@dataclasses.dataclass(frozen=True)
class ResampleOptions:
    """Resolved resampling options.

    Parameters
    ----------
    edge : EdgeMode
        Out-of-range tap handling for regular resampling.
        Default ``EdgeMode.CLAMPING``.
    multidim : MultidimMode
        2D kernel construction (reserved). Default
        ``MultidimMode.SEPARABLE``.
    nodata : NodataMode
        Empty-bin synthesis for irregular resampling. Default
        ``NodataMode.WEIGHTED``.
    """

    edge: EdgeMode = EdgeMode.CLAMPING
    multidim: MultidimMode = MultidimMode.SEPARABLE
    nodata: NodataMode = NodataMode.WEIGHTED

    @classmethod
    def from_flags(cls, flags: Union[int, ResampleFlag]) -> 'ResampleOptions':
        """Resolve a flag bitmask into named options.

        Parameters
        ----------
        flags : int or ResampleFlag
            Bitwise OR of ``ResampleFlag`` members. ``0`` selects every
            default.

        Returns
        -------
        ResampleOptions

        Raises
        ------
        ValidationError
            If *flags* is negative or sets bits that no flag defines.
        """
        flags = int(flags)
        if flags < 0 or flags & ~_ALL_FLAGS:
            raise ValidationError(
                f"flags contains undefined bits: 0x{flags:04x}"
            )

        if flags & ResampleFlag.EDGE_ZERO_PADDING:
            edge = EdgeMode.ZERO_PADDING
        else:
            edge = EdgeMode.CLAMPING

        if (flags & ResampleFlag.MULTIDIM_2D_ISOTROPIC
                and not flags & ResampleFlag.MULTIDIM_2D_SEPARABLE):
            multidim = MultidimMode.ISOTROPIC
        else:
            multidim = MultidimMode.SEPARABLE

        if flags & ResampleFlag.NODATA_ZERO:
            nodata = NodataMode.ZERO
        elif (flags & ResampleFlag.NODATA_WEIGHTED
                or not flags & ResampleFlag.NODATA_NEAREST):
            nodata = NodataMode.WEIGHTED
        else:
            nodata = NodataMode.NEAREST

        return cls(edge=edge, multidim=multidim, nodata=nodata)

    def to_flags(self) -> ResampleFlag:
        """Encode these options as an explicit flag bitmask.

        Returns
        -------
        ResampleFlag
            Exactly one flag per option group.
        """
        edge = {
            EdgeMode.CLAMPING: ResampleFlag.EDGE_CLAMPING,
            EdgeMode.ZERO_PADDING: ResampleFlag.EDGE_ZERO_PADDING,
        }[self.edge]
        multidim = {
            MultidimMode.SEPARABLE: ResampleFlag.MULTIDIM_2D_SEPARABLE,
            MultidimMode.ISOTROPIC: ResampleFlag.MULTIDIM_2D_ISOTROPIC,
        }[self.multidim]
        nodata = {
            NodataMode.ZERO: ResampleFlag.NODATA_ZERO,
            NodataMode.NEAREST: ResampleFlag.NODATA_NEAREST,
            NodataMode.WEIGHTED: ResampleFlag.NODATA_WEIGHTED,
        }[self.nodata]
        return edge | multidim | nodata
