# -*- coding: utf-8 -*-
"""
Resampler Base Class - Abstract interface for Lanczos resamplers.

Defines the ``Resampler`` common base class.  Subclasses declare their
tunable parameters as ``typing.Annotated`` class-body fields using the
constraint markers from :mod:`lanczos_resample.params`;
``__init_subclass__`` collects them into ``__param_specs__`` and
auto-generates a keyword-only, validating ``__init__``.

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
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

# Third-party
import numpy as np

# Lanczos internal
from lanczos_resample.params import ParamSpec, collect_param_specs, make_init


class Resampler(ABC):
    """Common base class for regular and irregular resamplers.

    Every concrete resampler maps source samples onto a regular
    destination grid of ``dst_w`` samples and returns a new array.
    Parameters are plain attributes validated once at construction.
    """

    #: Tuple of :class:`~lanczos_resample.params.ParamSpec` built
    #: automatically by ``__init_subclass__`` from ``Annotated`` fields.
    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        if cls.__param_specs__ and '__init__' not in cls.__dict__:
            cls.__init__ = make_init(cls.__param_specs__)

    @property
    def params(self) -> Dict[str, Any]:
        """Current value of every declared parameter.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: value}`` in declaration order.
        """
        return {
            spec.name: getattr(self, spec.name)
            for spec in type(self).__param_specs__
        }

    def __repr__(self) -> str:
        args = ', '.join(f"{k}={v!r}" for k, v in self.params.items())
        return f"{type(self).__name__}({args})"

    @abstractmethod
    def resample(self, *args: Any, **kwargs: Any) -> np.ndarray:
        """Resample source data onto the destination grid."""
        ...
