"""
Data types describing units, and the rules for converting values between
a list of units and the base representation.

Values are always converted through their *normalized* form, which is
the value expressed in the base unit of each quantity (m, kg, s, K,
...).  ``normalize`` takes a value expressed in a unit list to its base
representation and ``denormalize`` does the reverse.

Offsets (e.g. °C -> K) are only applied for a *base* unit list, being a
single unit raised to the power one.  Once a unit is combined with
others an offset has no physical meaning (consider J/kg/degC), so
compound unit lists are treated as pure multipliers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Optional, Sequence

from ._numeric import NumericOps

# Written by the pyunitmath developers, October 2026.

# ======================================================================

# Powers and dimensions smaller than this are treated as zero.
ZERO_TOL = 1e-15

# Tolerance used when comparing dimension vectors.
DIM_TOL = 1e-12


# -- Type Definitions --------------------------------------------------

@dataclass(frozen=True, eq=False)
class UnitDef:
    """
    A fully resolved unit definition held by the unit store.  Aliases of
    a unit are separate ``UnitDef`` objects differing only by `name`.

    Parameters
    ----------
    name : str
        Unit name without any prefix, e.g. ``'m'``.
    value : Any
        Multiplier relative to the base unit of each quantity.
    offset : Any
        Offset added (after prefixing) when converting a base unit to
        its normalized value, e.g. 273.15 for ``degC``.
    dimension : Mapping[str, float]
        Power of each base quantity, e.g. ``{'LENGTH': 1, 'TIME': -1}``.
    prefix_group : Mapping[str, float]
        Prefixes that may be used with this unit and their multipliers.
    format_prefixes : tuple[str, ...], optional
        Prefixes to choose from when picking a prefix for display.
    base_prefix : str, optional
        Prefix used when this unit represents the base of its quantity
        (e.g. ``'k'`` for ``'g'``).
    quantity : str, optional
        Base quantity for units that define one directly.
    """
    name: str
    value: Any
    offset: Any = 0
    dimension: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType({}))
    prefix_group: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType({'': 1}))
    format_prefixes: Optional[tuple[str, ...]] = None
    base_prefix: Optional[str] = None
    quantity: Optional[str] = None

    def __repr__(self):
        return f"UnitDef({self.name!r})"


class AtomicUnit(NamedTuple):
    """A single unit with a prefix, raised to a power e.g. ``km^2``."""
    unit: UnitDef
    prefix: str
    power: float

    def __str__(self):
        return f"{self.prefix}{self.unit.name}"


class ParsedUnit(NamedTuple):
    """
    The result of parsing a unit string.  `value` is `None` if the
    string contained no number.
    """
    value: Any
    unit_list: tuple[AtomicUnit, ...]
    dimension: dict[str, float]


UnitList = Sequence[AtomicUnit]


# -- Predicates --------------------------------------------------------

def is_compound(unit_list: UnitList) -> bool:
    """
    Returns `True` if `unit_list` contains more than one unit or one
    unit with a power other than one (e.g. m/s, cm^2 but not N).
    """
    if not unit_list:
        return False
    return len(unit_list) > 1 or abs(unit_list[0].power - 1.0) > ZERO_TOL


def is_base(unit_list: UnitList) -> bool:
    """
    Returns `True` if `unit_list` is a single unit to the power one
    having a single base quantity e.g. kg or ft but not m/s, N or J.
    """
    if len(unit_list) != 1 or abs(unit_list[0].power - 1.0) >= ZERO_TOL:
        return False
    dimension = unit_list[0].unit.dimension
    return len(dimension) == 1 and next(iter(dimension.values())) == 1


def dimensions_equal(a: Mapping[str, float],
                     b: Mapping[str, float]) -> bool:
    """Returns `True` if every power in `a` and `b` is equal."""
    for dim in {**a, **b}:
        if abs(a.get(dim, 0) - b.get(dim, 0)) > DIM_TOL:
            return False
    return True


# -- Conversions -------------------------------------------------------

def normalize(unit_list: UnitList, value: Any, ops: NumericOps) -> Any:
    """
    Convert `value` expressed in `unit_list` to the normalized (base
    unit) value.  If `value` is `None` or `unit_list` is empty then
    `value` is returned unchanged.
    """
    if value is None or not unit_list:
        return value

    if is_compound(unit_list):
        # No offsets in compound units.
        result = value
        for atom in unit_list:
            unit_value = ops.conv(atom.unit.value)
            prefix_value = ops.conv(atom.unit.prefix_group[atom.prefix])
            power = ops.conv(atom.power)
            result = ops.mul(result, ops.pow(ops.mul(unit_value,
                                                     prefix_value), power))
        return result

    # Base unit: (value * prefix + offset) * unit_value.
    atom = unit_list[0]
    unit_value = ops.conv(atom.unit.value)
    offset = ops.conv(atom.unit.offset)
    prefix_value = ops.conv(atom.unit.prefix_group[atom.prefix])
    return ops.mul(ops.add(ops.mul(value, prefix_value), offset),
                   unit_value)


def denormalize(unit_list: UnitList, value: Any, ops: NumericOps) -> Any:
    """
    Convert a normalized (base unit) `value` to the equivalent value
    expressed in `unit_list`.  This is the inverse of ``normalize``.
    """
    if value is None or not unit_list:
        return value

    if is_compound(unit_list):
        result = value
        for atom in unit_list:
            unit_value = ops.conv(atom.unit.value)
            prefix_value = ops.conv(atom.unit.prefix_group[atom.prefix])
            power = ops.conv(atom.power)
            result = ops.div(result, ops.pow(ops.mul(unit_value,
                                                     prefix_value), power))
        return result

    # Base unit: (value / unit_value - offset) / prefix.
    atom = unit_list[0]
    unit_value = ops.conv(atom.unit.value)
    prefix_value = ops.conv(atom.unit.prefix_group[atom.prefix])
    offset = ops.conv(atom.unit.offset)
    return ops.div(ops.sub(ops.div(value, unit_value), offset),
                   prefix_value)


# -- Unit List Operations ----------------------------------------------

def combine_duplicate_units(unit_list: UnitList) -> tuple[AtomicUnit, ...]:
    """
    Returns a new unit list where repeated units (by name) are combined
    into the first occurrence by adding powers.  Any unit left with
    zero power is then removed.  Lists of less than two units are
    returned as-is.
    """
    if len(unit_list) < 2:
        return tuple(unit_list)

    combined: dict[str, AtomicUnit] = {}
    for atom in unit_list:
        first = combined.get(atom.unit.name)
        if first is None:
            combined[atom.unit.name] = atom
        else:
            combined[atom.unit.name] = first._replace(
                power=first.power + atom.power)

    return tuple(atom for atom in combined.values()
                 if abs(atom.power) >= ZERO_TOL)


def remove_zero_dimensions(dimension: Mapping[str, float]
                           ) -> dict[str, float]:
    """Returns a copy of `dimension` without any zero powers."""
    return {k: v for k, v in dimension.items() if abs(v) >= ZERO_TOL}


def get_complexity(unit_list: UnitList) -> int:
    """
    Returns a score for how complicated `unit_list` is to read.  Each
    unit counts as one symbol, each displayed power (``^n``) adds two
    and a ``/`` separator adds one.

    Examples
    --------
    ``N m`` -> 2, ``J / m`` -> 3, ``s^-1`` -> 3, ``kg m / s^2`` -> 6.
    """
    comp = len(unit_list)
    num = [a for a in unit_list if a.power > 1e-14]
    den = [a for a in unit_list if a.power < 1e-14]

    comp += 2 * sum(1 for a in num if abs(a.power - 1) > 1e-14)

    # Denominator powers are shown inverted if there is a numerator.
    invert = -1 if (den and num) else 1
    comp += 2 * sum(1 for a in den
                    if a.power < 0 and abs(a.power * invert - 1) > 1e-14)

    if den and num:
        comp += 1
    return comp
