# -*- coding: utf-8 -*-
"""
Resampler Parameters - Kernel and edge/nodata settings declared with
typing.Annotated.

A resampler declares each setting as a defaulted class-body field whose
``Annotated`` metadata carries the constraint::

    class RegularResampler(Resampler):
        a: Annotated[int, Range(min=1), Desc('Kernel half-width')] = 3
        edge_mode: Annotated[EdgeMode, Options(*EdgeMode)] = EdgeMode.CLAMPING

``collect_param_specs`` reads those fields into ``ParamSpec`` records
and ``make_init`` builds the keyword-only constructor that checks every
value before the resampler is used.  Settings are either integer kernel
sizes bounded by ``Range`` or enum modes restricted by ``Options``.

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

# Standard library
from dataclasses import dataclass
from typing import Annotated, Any, Optional, Tuple, get_origin, get_type_hints

# Lanczos internal
from lanczos_resample.exceptions import ValidationError


# =====================================================================
# Constraint markers  (used inside Annotated[...])
# =====================================================================

class ParamMeta:
    """Base marker for resampler setting metadata."""


class Range(ParamMeta):
    """Inclusive bounds on an integer setting such as the lobe count."""

    __slots__ = ('min', 'max')

    def __init__(self, min: Optional[int] = None,
                 max: Optional[int] = None) -> None:
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        return f"Range(min={self.min!r}, max={self.max!r})"


class Options(ParamMeta):
    """Allowed members of an enum mode setting."""

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """One-line description shown in ``ParamSpec``."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


# =====================================================================
# ParamSpec
# =====================================================================

@dataclass(frozen=True)
class ParamSpec:
    """A declared resampler setting and its constraint."""

    name: str
    param_type: type
    default: Any
    description: str = ''
    min_value: Optional[int] = None
    max_value: Optional[int] = None
    choices: Optional[Tuple[Any, ...]] = None

    def validate(self, value: Any) -> None:
        """Check *value* against the declared type and constraint.

        Raises
        ------
        TypeError
            If *value* is not an ``int`` (``bool`` excluded) for an
            integer setting, or not a member of the mode enum.
        ValidationError
            If *value* is outside the ``Range`` or not in ``Options``.
        """
        if self.param_type is int:
            ok = isinstance(value, int) and not isinstance(value, bool)
        else:
            ok = isinstance(value, self.param_type)
        if not ok:
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {type(value).__name__}"
            )

        if self.min_value is not None and value < self.min_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )
        if self.choices is not None and value not in self.choices:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not one of {self.choices!r}"
            )


# =====================================================================
# Collection and __init__ generation
# =====================================================================

def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Read the annotated settings of *cls*, base classes first.

    Raises
    ------
    TypeError
        If an annotated setting has no class-level default.
    """
    specs = []
    for name, hint in get_type_hints(cls, include_extras=True).items():
        if get_origin(hint) is not Annotated:
            continue
        metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not metas:
            continue
        if not hasattr(cls, name):
            raise TypeError(
                f"Parameter '{name}' on {cls.__qualname__} has no default"
            )

        bounds = next((m for m in metas if isinstance(m, Range)), None)
        options = next((m for m in metas if isinstance(m, Options)), None)
        desc = next((m for m in metas if isinstance(m, Desc)), None)
        specs.append(ParamSpec(
            name=name,
            param_type=hint.__origin__,
            default=getattr(cls, name),
            description=desc.text if desc else '',
            min_value=bounds.min if bounds else None,
            max_value=bounds.max if bounds else None,
            choices=options.choices if options else None,
        ))
    return tuple(specs)


def make_init(param_specs: Tuple[ParamSpec, ...]):
    """Build a keyword-only ``__init__`` that validates every setting."""

    def __init__(self, **kwargs):
        unexpected = set(kwargs) - {s.name for s in param_specs}
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected "
                f"keyword arguments: {', '.join(sorted(unexpected))}"
            )
        for spec in param_specs:
            value = kwargs.get(spec.name, spec.default)
            spec.validate(value)
            setattr(self, spec.name, value)

    return __init__
