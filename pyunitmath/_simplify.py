"""
Selection of "nicer" units and prefixes for presenting a value.  These
functions work on unit lists and values directly; the ``Unit`` methods
``simplify``, ``apply_best_prefix``, ``to_base_units`` and
``get_inferred_system`` are built on them.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from ._algebra import (AtomicUnit, ParsedUnit, UnitList, denormalize,
                       dimensions_equal, is_base, normalize)
from ._numeric import NumericOps
from ._opts import UnitOptions

# Written by the pyunitmath developers, October 2026.

# ======================================================================


def infer_system(unit_list: UnitList,
                 systems: Mapping[str, tuple[ParsedUnit, ...]]
                 ) -> Optional[str]:
    """
    Returns the unit system that `unit_list` is most likely expressed
    in, or `None` if no system matches any unit.  Each unit scores one
    point for a system containing the same prefixed unit (e.g. 'cm' in
    'cgs') and half a point if only the unit name matches (e.g. 'cm' in
    'si' which has 'm').  The first system to reach the highest score
    is chosen.
    """
    scores: dict[str, float] = {}
    for atom in unit_list:
        for system, system_units in systems.items():
            for su in system_units:
                if len(su.unit_list) != 1:
                    continue  # Only single unit entries are scored.
                sys_atom = su.unit_list[0]
                if str(sys_atom) == str(atom):
                    scores[system] = scores.get(system, 0) + 1
                elif sys_atom.unit.name == atom.unit.name:
                    scores[system] = scores.get(system, 0) + 0.5

    best = None
    for system, score in scores.items():
        if best is None or score > scores[best]:
            best = system
    return best


def simplified_unit_list(unit_list: UnitList,
                         dimension: Mapping[str, float],
                         system_units: tuple[ParsedUnit, ...],
                         all_units) -> Optional[tuple[AtomicUnit, ...]]:
    """
    Propose a simpler unit list having the same `dimension`.  In order
    of preference:

        1. A unit of the system with the same dimension.  If one of the
           current units appears in the system with the same dimension,
           that is used instead of the first match.
        2. One of the current units (without prefix) having the same
           dimension.
        3. A product of base units, one for each base quantity, taken
           from the system if possible, or otherwise the first unit in
           `all_units` defining that quantity.

    Returns `None` if some base quantity has no unit.
    """
    matching = [su for su in system_units
                if dimensions_equal(dimension, su.dimension)]

    match = matching[0].unit_list if matching else None
    for atom in unit_list:
        for su in matching:
            if len(su.unit_list) == 1 and str(su.unit_list[0]) == str(atom):
                match = su.unit_list
                break

    if match is None:
        for atom in unit_list:
            if atom.unit.name and dimensions_equal(dimension,
                                                   atom.unit.dimension):
                match = (AtomicUnit(atom.unit, '', 1),)
                break

    if match is not None:
        return tuple(match)

    proposed = []
    for dim, power in dimension.items():
        if abs(power) <= 1e-12:
            continue

        found = None
        for su in system_units:
            if is_base(su.unit_list) and su.dimension.get(dim) == 1:
                found = su.unit_list[0]._replace(power=power)
                break

        if found is None:
            for unit in all_units:
                if unit.quantity == dim:
                    found = AtomicUnit(unit, unit.base_prefix or '', power)
                    break

        if found is None:
            return None
        proposed.append(found)

    return tuple(proposed)


def base_unit_list(dimension: Mapping[str, float],
                   all_units) -> tuple[AtomicUnit, ...]:
    """
    Returns a unit list of base units for `dimension`, using the first
    unit in `all_units` defining each base quantity (with its base
    prefix, if any).
    """
    unit_list = []
    for dim, power in dimension.items():
        if abs(power) <= 1e-12:
            continue
        for unit in all_units:
            if unit.quantity == dim:
                unit_list.append(AtomicUnit(unit, unit.base_prefix or '',
                                            power))
                break
    return tuple(unit_list)


# ----------------------------------------------------------------------

def choose_prefix(unit_list: UnitList, value: Any, ops: NumericOps,
                  options: UnitOptions
                  ) -> Optional[tuple[tuple[AtomicUnit, ...], Any]]:
    """
    Choose the prefix giving the most readable magnitude for a value
    with a single unit.

    Returns
    -------
    (unit_list, value) or None
        The re-prefixed unit list and converted value, or `None` if
        the value is already in range ``[prefix_min, prefix_max]`` or no
        prefix can be chosen (compound units, no value, non-integer
        or zero power, tiny values, no format prefixes).

    Notes
    -----
    Each candidate prefix is scored by the resulting magnitude ``x``:

        - ``x < prefix_min``: ``prefix_min / x``
        - ``x > prefix_max``: ``x / prefix_max``
        - otherwise: ``1 - small / large`` comparing ``x`` with the
          original magnitude, i.e. smaller changes are preferred.

    The lowest score wins, with the current prefix and then the earliest
    candidates winning ties.
    """
    if len(unit_list) != 1 or value is None:
        return None

    atom = unit_list[0]
    if abs(atom.power - round(atom.power)) >= 1e-14:
        return None
    if abs(atom.power) < 1e-14:
        return None  # Prefix would have no effect.
    unit_value = ops.abs(value)
    prefix_min = ops.conv(options.prefix_min)
    prefix_max = ops.conv(options.prefix_max)
    if ops.lt(unit_value, ops.conv(1e-50)):
        return None
    if ops.le(unit_value, prefix_max) and ops.ge(unit_value, prefix_min):
        return None

    group = atom.unit.prefix_group

    def calc_score(prefix: str):
        ratio = ops.div(ops.conv(group[prefix]), ops.conv(group[atom.prefix]))
        this_value = ops.abs(ops.div(value, ops.pow(ratio,
                                                    ops.conv(atom.power))))
        if ops.lt(this_value, prefix_min):
            return ops.div(prefix_min, this_value)
        if ops.gt(this_value, prefix_max):
            return ops.div(this_value, prefix_max)

        if ops.le(this_value, unit_value):
            return ops.sub(ops.conv(1), ops.div(this_value, unit_value))
        return ops.sub(ops.conv(1), ops.div(unit_value, this_value))

    prefixes = atom.unit.format_prefixes
    if prefixes is None and options.format_prefix_default == 'all':
        prefixes = tuple(group)
    if prefixes is None:
        return None

    best_prefix, best_score = atom.prefix, calc_score(atom.prefix)
    for prefix in prefixes:
        score = calc_score(prefix)
        if ops.lt(score, best_score):
            best_prefix, best_score = prefix, score

    new_list = (atom._replace(prefix=best_prefix),)
    return new_list, denormalize(new_list, normalize(unit_list, value, ops),
                                 ops)
