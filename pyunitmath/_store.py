"""
The unit store resolves raw prefix, unit and system definitions into
an immutable database of ``UnitDef`` objects and provides the unit
lookup used by the parser.
"""
from __future__ import annotations

import re
import warnings
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Optional

from ._algebra import ParsedUnit, UnitDef, normalize
from ._defs import PREFIX_GROUPS, SYSTEMS, UNITS
from ._opts import UnitOptions
from ._parser import parse
from .exception import (UnitConfigError, UnitNotFoundError,
                        UnitSyntaxError, UnitTypeError)

# Written by the pyunitmath developers, October 2026.

# ======================================================================

_unitname_rx = re.compile(r'^[a-zA-Z][a-zA-Z0-9]*$')


class FoundUnit(NamedTuple):
    """Result of a unit lookup: the unit and the prefix used."""
    unit: UnitDef
    prefix: str


class _RawDefinitions(NamedTuple):
    """Merged built-in and user definitions, prior to resolution."""
    prefix_groups: Mapping[str, Mapping[str, float]]
    units: Mapping[str, Any]
    systems: Mapping[str, tuple[str, ...]]


# ----------------------------------------------------------------------

class UnitStore:
    """
    Immutable database of units, prefix groups and unit systems built
    from the definitions in a ``UnitOptions`` object.

    Parameters
    ----------
    options : UnitOptions
        Options holding the user definitions, numeric type and selected
        unit system.

    Raises
    ------
    UnitConfigError
        If the definitions cannot be resolved, a unit name is invalid
        or duplicated, a prefix group or the selected system is unknown.
    """

    def __init__(self, options: UnitOptions):
        self._ops = options.type.resolve()
        self._original = _merge_definitions(options)
        self._prefix_groups = MappingProxyType(
            {k: MappingProxyType(dict(v))
             for k, v in self._original.prefix_groups.items()})

        self._units: dict[str, UnitDef] = {}
        self._resolve_units()
        self._units = MappingProxyType(self._units)

        # Check the selected system exists.
        if (options.system != 'auto' and
                options.system not in self._original.systems):
            raise UnitConfigError(
                f"Unknown unit system {options.system}.  Available systems "
                f"are: auto, {', '.join(self._original.systems)}")

        # Systems are held as valueless parsed units.
        systems = {}
        for name, unit_strs in self._original.systems.items():
            try:
                systems[name] = tuple(self.parse(s) for s in unit_strs)
            except UnitSyntaxError as e:
                raise UnitConfigError(f"In unit system '{name}': {e.args[0]}",
                                      system=name) from e
        self._systems = MappingProxyType(systems)

        for unit in self._units.values():
            for p in unit.format_prefixes or ():
                if p not in unit.prefix_group:
                    raise UnitConfigError(
                        f"In unit {unit.name}, format prefix '{p}' was "
                        f"not found among the allowable prefixes.")

    # -- Public Methods ------------------------------------------------

    @property
    def original_definitions(self) -> _RawDefinitions:
        """Merged definitions that the store was built from."""
        return self._original

    @property
    def prefix_groups(self) -> Mapping[str, Mapping[str, float]]:
        return self._prefix_groups

    @property
    def systems(self) -> Mapping[str, tuple[ParsedUnit, ...]]:
        return self._systems

    @property
    def units(self) -> Mapping[str, UnitDef]:
        return self._units

    def exists(self, name: str) -> bool:
        """
        Returns `True` if `name` is a known unit, possibly with a
        prefix e.g. ``'km'``.
        """
        return self.find_unit(name) is not None

    def find_unit(self, name: str) -> Optional[FoundUnit]:
        """
        Find a unit by name.  An exact match is tried first (so a user
        may define e.g. 'mm' as a unit in its own right).  Otherwise the
        longest unit name matching the end of `name` is used, provided
        the remaining start of `name` is a prefix allowed for that unit.

        Parameters
        ----------
        name : str
            Unit name with optional prefix e.g. ``'cm'`` or ``'inch'``.

        Returns
        -------
        FoundUnit or None
            The unit and prefix, or `None` if not found.
        """
        if not isinstance(name, str):
            raise UnitTypeError(f"Unit name must be a string, got: "
                                f"{name!r}")

        try:
            return FoundUnit(self._units[name], '')
        except KeyError:
            pass

        for i in range(1, len(name)):
            prefix, unit = name[:i], self._units.get(name[i:])
            if unit is not None and prefix in unit.prefix_group:
                return FoundUnit(unit, prefix)

        return None

    def parse(self, text: str) -> ParsedUnit:
        """Parse `text` using the units in this store."""
        return parse(text, self.find_unit, self._ops)

    # -- Private Methods -----------------------------------------------

    def _resolve_units(self):
        # Units defined in terms of others may come before them, so
        # loop until no unit is left pending.
        raw_units, resolved = self._original.units, set()
        while True:
            n_added, skipped = 0, {}

            for key, unit_def in raw_units.items():
                if key in resolved or unit_def is None:
                    continue
                if key in self._units:
                    # Already taken as an alias of another unit.
                    raise UnitConfigError(
                        f"Unit '{key}' would override an existing unit "
                        f"of the same name.", name=key)
                if isinstance(unit_def, str):
                    unit_def = {'value': unit_def}
                if not isinstance(unit_def, Mapping):
                    raise UnitConfigError(
                        f"Unit definition for '{key}' must be a string or "
                        f"a mapping with a 'value' key, got: {unit_def!r}")

                try:
                    value, dimension = self._unit_value(key, unit_def)
                except UnitNotFoundError as e:
                    skipped[key] = e
                    continue

                n_added += self._add_unit(key, unit_def, value, dimension)
                resolved.add(key)

            if not skipped:
                break
            if n_added == 0:
                reasons = ' '.join(f"{k}: {e.args[0]}"
                                   for k, e in skipped.items())
                raise UnitConfigError(
                    f"Could not create the following units: "
                    f"{', '.join(skipped)}.  Reasons follow: {reasons}",
                    units=tuple(skipped))

    def _unit_value(self, key: str, unit_def: Mapping[str, Any]
                    ) -> tuple[Any, Mapping[str, float]]:
        """
        Returns normalized value and dimension of a unit definition.
        Raises ``UnitNotFoundError`` if the definition refers to a unit
        that is not yet resolved.
        """
        group = unit_def.get('prefix_group')
        if group is not None and group not in self._prefix_groups:
            raise UnitConfigError(f"Unknown prefix group '{group}' for "
                                  f"unit '{key}'.")

        value = unit_def.get('value')
        if unit_def.get('quantity') is not None and value is not None:
            return (self._ops.conv(value),
                    MappingProxyType({unit_def['quantity']: 1}))

        if isinstance(value, str):
            parsed = self.parse(value)
        elif isinstance(value, (list, tuple)) and len(value) == 2:
            parsed = self.parse(value[1])
            parsed = parsed._replace(value=self._ops.conv(value[0]))
        else:
            raise UnitConfigError(
                f"Unit definition for '{key}' must have a 'value' that is "
                f"a string or a two-element list, got: {value!r}")

        if parsed.value is None:
            raise UnitConfigError(f"Parsing value for '{key}' resulted "
                                  f"in invalid value: None.")

        return (normalize(parsed.unit_list, parsed.value, self._ops),
                MappingProxyType(dict(parsed.dimension)))

    def _add_unit(self, key: str, unit_def: Mapping[str, Any], value: Any,
                  dimension: Mapping[str, float]) -> int:
        """
        Store the unit and its aliases, which only differ by name.
        Returns the number of entries added.
        """
        group = unit_def.get('prefix_group')
        prefix_group = (self._prefix_groups[group] if group else
                        MappingProxyType({'': 1}))
        format_prefixes = unit_def.get('format_prefixes')
        if format_prefixes is not None:
            format_prefixes = tuple(format_prefixes)

        names = [key, *unit_def.get('aliases', ())]
        for name in names:
            if name in self._units:
                raise UnitConfigError(f"Alias '{name}' would override an "
                                      f"existing unit of the same name.",
                                      name=name)
            if not isinstance(name, str) or (name != '' and
                                             not _unitname_rx.match(name)):
                raise UnitConfigError(
                    f"Unit name contains non-alphanumeric characters or "
                    f"begins with a number: '{name}'")

            self._units[name] = UnitDef(
                name=name, value=value,
                offset=self._ops.conv(unit_def.get('offset', 0)),
                dimension=dimension, prefix_group=prefix_group,
                format_prefixes=format_prefixes,
                base_prefix=unit_def.get('base_prefix'),
                quantity=unit_def.get('quantity'))

        return len(names)


# ----------------------------------------------------------------------

def _merge_definitions(options: UnitOptions) -> _RawDefinitions:
    """
    Overlay the user definitions onto the built-in ones.  User systems
    are placed ahead of built-in systems with the same name.
    """
    defs = options.definitions
    if defs.skip_builtins:
        return _RawDefinitions(
            prefix_groups=dict(defs.prefix_groups),
            units=dict(defs.units),
            systems={k: tuple(v) for k, v in defs.systems.items()})

    for name in defs.units:
        if name in UNITS:
            warnings.warn(f"Built-in unit '{name}' is replaced by a user "
                          f"definition.")

    systems = {k: tuple(v) for k, v in SYSTEMS.items()}
    for name, unit_strs in defs.systems.items():
        systems[name] = (*unit_strs, *systems.get(name, ()))

    return _RawDefinitions(
        prefix_groups={**PREFIX_GROUPS, **defs.prefix_groups},
        units={**UNITS, **defs.units},
        systems=systems)
