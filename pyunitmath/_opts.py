from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Mapping

from ._format import format_number
from ._numeric import NumericType
from .exception import UnitConfigError

# Written by the pyunitmath developers, October 2026.

# ======================================================================


@dataclass(frozen=True, kw_only=True)
class Definitions:
    """
    Dataclass holding user supplied unit definitions.  These are merged
    with the built-in definitions when a unit factory is created.

    Parameters
    ----------
    skip_builtins : bool, default = False
        If `True`, the built-in prefixes, units and systems are not
        used at all.
    units : Mapping[str, Any], default = {}
        Unit definitions by name.  These replace any built-in unit of
        the same name.  A value of `None` removes a built-in unit.
    prefix_groups : Mapping[str, Mapping[str, float]], default = {}
        Prefix groups by name, replacing any built-in group of the same
        name.
    systems : Mapping[str, list[str]], default = {}
        Unit systems.  Units given for an existing built-in system are
        placed ahead of the built-in units so they are preferred.
    """
    skip_builtins: bool = False
    units: Mapping[str, Any] = field(default_factory=dict)
    prefix_groups: Mapping[str, Mapping[str, float]] = field(
        default_factory=dict)
    systems: Mapping[str, list[str]] = field(default_factory=dict)

    def merge(self, other: Definitions | Mapping[str, Any] | None
              ) -> Definitions:
        """
        Returns new ``Definitions`` where each field given in `other`
        replaces the field in this object.  If `other` is a
        ``Definitions`` object it is returned directly.
        """
        if other is None:
            return self
        if isinstance(other, Definitions):
            return other

        known = {f.name for f in fields(self)}
        unknown = set(other) - known
        if unknown:
            raise UnitConfigError(f"Unknown definitions fields: "
                                  f"{', '.join(sorted(unknown))}")
        return replace(self, **other)


# ----------------------------------------------------------------------

@dataclass(frozen=True, kw_only=True)
class UnitOptions:
    """
    Dataclass that holds the options used by a unit factory.  Options
    are never changed after creation; see ``UnitFactory.config`` to
    derive new options.

    Parameters
    ----------
    parentheses : bool, default = False
        When formatting, wrap a numerator or denominator of more than
        one unit in parentheses e.g. ``'(kg m) / s^2'``.
    precision : int, default = 15
        Number of significant digits used when formatting plain
        numbers.  If zero no rounding is done.
    auto_prefix : bool, default = True
        If `True`, ``simplify`` also chooses the best prefix.
    prefix_min, prefix_max : float, default = 0.1, 1000
        Range of magnitudes considered acceptable when choosing a
        prefix.
    format_prefix_default : str, default = 'none'
        Prefixes to consider for units that do not list
        `format_prefixes`: ``'none'`` (don't change the prefix) or
        ``'all'`` (any prefix in the unit's prefix group).
    system : str, default = 'auto'
        Unit system used by ``simplify``.  ``'auto'`` infers the
        system from the units of the value.
    formatter : Callable[[Any], str], default = format_number
        Formatter for values.  With the default formatter numbers are
        rounded to `precision` digits first.
    definitions : Definitions
        User unit definitions.
    type : NumericType
        Numeric operations.  Default is floating point.
    """
    parentheses: bool = False
    precision: int = 15
    auto_prefix: bool = True
    prefix_min: float = 0.1
    prefix_max: float = 1000
    format_prefix_default: str = 'none'
    system: str = 'auto'
    formatter: Callable[[Any], str] = format_number
    definitions: Definitions = field(default_factory=Definitions)
    type: NumericType = field(default_factory=NumericType)

    def __post_init__(self):
        """Check certain values"""
        if self.format_prefix_default not in ('all', 'none'):
            raise UnitConfigError(f"Invalid option for "
                                  f"format_prefix_default: "
                                  f"'{self.format_prefix_default}'.  "
                                  f"Valid options are all, none.")
        if not isinstance(self.precision, int) or self.precision < 0:
            raise UnitConfigError("Require integer 'precision' >= 0.")
        if not 0 < self.prefix_min <= self.prefix_max:
            raise UnitConfigError("Require 0 < 'prefix_min' <= "
                                  "'prefix_max'.")
        if not isinstance(self.definitions, Definitions):
            raise UnitConfigError(f"'definitions' must be a Definitions "
                                  f"object, got: {self.definitions!r}")
        if not isinstance(self.type, NumericType):
            raise UnitConfigError(f"'type' must be a NumericType object, "
                                  f"got: {self.type!r}")

        self.type.validate(self.auto_prefix)

    def updated(self, **kwargs) -> UnitOptions:
        """
        Returns new options with `kwargs` replacing the current values.
        ``definitions`` and ``type`` may be given as mappings, in which
        case they are merged with the current values field by field.
        """
        if 'definitions' in kwargs:
            kwargs['definitions'] = self.definitions.merge(
                kwargs['definitions'])
        if 'type' in kwargs:
            kwargs['type'] = self.type.merge(kwargs['type'])

        unknown = set(kwargs) - {f.name for f in fields(self)}
        if unknown:
            raise UnitConfigError(f"Unknown options: "
                                  f"{', '.join(sorted(unknown))}")
        return replace(self, **kwargs)
