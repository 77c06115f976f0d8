from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from numbers import Real
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Union

from ._algebra import (AtomicUnit, ParsedUnit, combine_duplicate_units,
                       denormalize, dimensions_equal, get_complexity,
                       is_base, is_compound, normalize,
                       remove_zero_dimensions)
from ._format import format_units, format_value
from ._numeric import NumericOps, NumericType
from ._opts import UnitOptions
from ._simplify import (base_unit_list, choose_prefix, infer_system,
                        simplified_unit_list)
from ._store import UnitStore
from .exception import (DimensionError, MissingValueError, UnitError,
                        UnitTypeError)

# Written by the pyunitmath developers, October 2026.

# ======================================================================

UnitLike = Union['Unit', str, Real, ParsedUnit]


@dataclass(frozen=True, eq=False, repr=False)
class Unit:
    """
    ``Unit`` represents a value (which may be absent) together with a
    list of units raised to powers, e.g. ``5 kg m / s^2``.  ``Unit``
    objects are immutable; every operation returns a new object.

    Arithmetic and comparisons are available as methods (``add``,
    ``less_than``, ...) or using the normal Python operators.  Where
    another unit is expected a ``Unit``, unit string or plain number can
    be given.

    .. note:: ``Unit`` objects are not normally created directly.  Refer
       to the unit factory ``unit()`` for normal construction methods.
    """
    value: Any
    unit_list: tuple[AtomicUnit, ...]
    dimension: Mapping[str, float]
    factory: UnitFactory = field(repr=False)

    # -- Unary Operators -----------------------------------------------

    def __abs__(self) -> Unit:
        return self.abs()

    def __float__(self) -> float:
        """
        Returns float(self.value).

        .. note:: Units are removed and checking ability is lost.
        """
        if self.value is None:
            raise MissingValueError(f"'{self}' has no value.")
        return float(self.value)

    # -- Binary Operators ----------------------------------------------

    def __add__(self, rhs: UnitLike) -> Unit:
        return self.add(rhs)

    def __radd__(self, lhs: UnitLike) -> Unit:
        return self.factory.to_unit(lhs).add(self)

    def __sub__(self, rhs: UnitLike) -> Unit:
        return self.sub(rhs)

    def __rsub__(self, lhs: UnitLike) -> Unit:
        return self.factory.to_unit(lhs).sub(self)

    def __mul__(self, rhs: UnitLike) -> Unit:
        return self.mul(rhs)

    def __rmul__(self, lhs: UnitLike) -> Unit:
        return self.factory.to_unit(lhs).mul(self)

    def __truediv__(self, rhs: UnitLike) -> Unit:
        return self.div(rhs)

    def __rtruediv__(self, lhs: UnitLike) -> Unit:
        return self.factory.to_unit(lhs).div(self)

    def __pow__(self, p) -> Unit:
        return self.pow(p)

    # -- Comparison Operators ------------------------------------------

    def __eq__(self, rhs) -> bool:
        if not isinstance(rhs, (Unit, str, Real)):
            return NotImplemented
        try:
            rhs = self.factory.to_unit(rhs)
        except UnitError:
            return False  # Strings that aren't units never match.
        return self.equals(rhs)

    def __ne__(self, rhs) -> bool:
        result = self.__eq__(rhs)
        return result if result is NotImplemented else not result

    def __lt__(self, rhs: UnitLike) -> bool:
        return self.less_than(rhs)

    def __le__(self, rhs: UnitLike) -> bool:
        return self.less_than_or_equal(rhs)

    def __gt__(self, rhs: UnitLike) -> bool:
        return self.greater_than(rhs)

    def __ge__(self, rhs: UnitLike) -> bool:
        return self.greater_than_or_equal(rhs)

    # -- String Conversion ---------------------------------------------

    def __format__(self, format_spec: str) -> str:
        """
        Format the value using `format_spec` (e.g. ``f"{x:.2f}"``)
        followed by the units.  An empty `format_spec` gives ``str()``.
        """
        if not format_spec or self.value is None:
            return self.to_string()
        return ' '.join(s for s in (format(self.value, format_spec),
                                    format_units(self.unit_list)) if s)

    def __repr__(self) -> str:
        return f"unit({self.value!r}, {format_units(self.unit_list)!r})"

    def __str__(self) -> str:
        return self.to_string()

    # -- Public Methods ------------------------------------------------

    def abs(self) -> Unit:
        """Returns the absolute value (taken using the base value)."""
        if self.value is None:
            return self.clone()
        ops = self._ops
        return self._replace(value=denormalize(
            self.unit_list, ops.abs(normalize(self.unit_list, self.value,
                                              ops)), ops))

    def add(self, other: UnitLike, unit_string: str = None) -> Unit:
        """
        Add another unit with the same dimensions.  The result is
        expressed in the units of this object.

        Raises
        ------
        MissingValueError
            If either unit has no value.
        DimensionError
            If the dimensions differ.
        """
        other = self.factory.to_unit(other, unit_string)
        self._check_addable(other, 'add')
        ops = self._ops
        return self._replace(value=denormalize(self.unit_list, ops.add(
            normalize(self.unit_list, self.value, ops),
            normalize(other.unit_list, other.value, ops)), ops))

    def sub(self, other: UnitLike, unit_string: str = None) -> Unit:
        """
        Subtract another unit with the same dimensions.  The result is
        expressed in the units of this object.  See ``add``.
        """
        other = self.factory.to_unit(other, unit_string)
        self._check_addable(other, 'subtract')
        ops = self._ops
        return self._replace(value=denormalize(self.unit_list, ops.sub(
            normalize(self.unit_list, self.value, ops),
            normalize(other.unit_list, other.value, ops)), ops))

    def mul(self, other: UnitLike, unit_string: str = None) -> Unit:
        """
        Multiply by another unit.  A unit without a value is treated as
        having a value of one; if neither has a value neither does the
        result.
        """
        other = self.factory.to_unit(other, unit_string)
        return self._combine(other, 1, self._ops.mul)

    def div(self, other: UnitLike, unit_string: str = None) -> Unit:
        """Divide by another unit.  See ``mul``."""
        other = self.factory.to_unit(other, unit_string)
        return self._combine(other, -1, self._ops.div)

    def pow(self, p) -> Unit:
        """Returns this unit raised to the power `p`."""
        value = (None if self.value is None else
                 self._ops.pow(self.value, self._ops.conv(p)))
        power = float(p)  # Unit powers are floats for any value type.
        return self._replace(
            value=value,
            unit_list=tuple(a._replace(power=a.power * power)
                            for a in self.unit_list),
            dimension=remove_zero_dimensions(
                {d: x * power for d, x in self.dimension.items()}))

    def sqrt(self) -> Unit:
        """Returns the square root of this unit."""
        return self.pow(0.5)

    def clone(self) -> Unit:
        value = None if self.value is None else self._ops.clone(self.value)
        return self._replace(value=value)

    def split(self, units: Sequence[UnitLike]) -> list[Unit]:
        """
        Split this value into a sum of values with the given units.
        Each unit except the last receives a whole number; the last
        receives the remainder.

        >>> from pyunitmath import unit
        >>> [str(u) for u in unit('1 m').split(['ft', 'in'])]
        ['3 ft', '3.37007874015748 in']

        Raises
        ------
        MissingValueError
            If this unit has no value.
        """
        self._type.requires('split', 'round', 'trunc')
        if self.value is None:
            raise MissingValueError(f"Cannot split {self}: unit has no "
                                    f"value.")

        ops = self._ops
        targets = [self.factory.to_unit(u) for u in units]
        x, result = self.clone(), []
        for i, target in enumerate(targets):
            x = x._convert_to(target)
            if i == len(targets) - 1:
                break

            # Use the rounded value if it is practically equal, as trunc
            # can incorrectly round down due to round-off error.
            x_rounded = ops.round(x.value)
            if ops.eq(x_rounded, x.value):
                x_fixed = x_rounded
            else:
                x_fixed = ops.trunc(x.value)

            y = target.set_value(x_fixed)
            result.append(y)
            x = x.sub(y)

        # Force the remainder to zero if the parts already add up to the
        # original value, instead of leaving a tiny round-off residue.
        test_sum = ops.conv(0)
        for y in result:
            test_sum = ops.add(test_sum, normalize(y.unit_list, y.value,
                                                   ops))
        if ops.eq(test_sum, normalize(self.unit_list, self.value, ops)):
            x = x._replace(value=ops.conv(0))

        result.append(x)
        return result

    def to(self, target: Union[Unit, str]) -> Unit:
        """
        Convert to `target` units, which must have no value.

        Raises
        ------
        UnitTypeError
            If `target` is not a ``Unit`` or string, or has a value.
        DimensionError
            If the dimensions differ.
        """
        if target is None:
            raise UnitTypeError("to() requires a unit as a parameter.")
        if not isinstance(target, (Unit, str)):
            raise UnitTypeError(f"Parameter must be a Unit or a string, "
                                f"got: {target!r}")
        return self._convert_to(self.factory.to_unit(target))

    def to_base_units(self) -> Unit:
        """
        Convert to the base unit of each quantity (e.g. N -> kg m /
        s^2), using the first unit registered for that quantity.
        """
        unit_list = base_unit_list(self.dimension,
                                   self._store.units.values())
        return self._relist(unit_list)

    def get_complexity(self) -> int:
        """
        Returns the number of symbols needed to show the units (see
        ``pyunitmath._algebra.get_complexity``).
        """
        return get_complexity(self.unit_list)

    def set_value(self, value) -> Unit:
        """Returns a copy of this unit with a new `value` (or `None`)."""
        return self._replace(
            value=None if value is None else self._ops.conv(value))

    def get_value(self):
        return self.value

    def get_normalized_value(self):
        """
        Returns the value this unit would have if converted to the base
        units of each quantity, or `None` if there is no value.
        """
        return normalize(self.unit_list, self.value, self._ops)

    def set_normalized_value(self, value) -> Unit:
        """Returns a copy of this unit having the given base `value`."""
        if value is None:
            return self.set_value(None)
        return self.set_value(denormalize(self.unit_list,
                                          self._ops.conv(value), self._ops))

    def get_inferred_system(self) -> Optional[str]:
        """
        Returns the name of the unit system this unit is most likely
        expressed in, or `None` if no system was recognised.
        """
        return infer_system(self.unit_list, self._store.systems)

    def apply_best_prefix(self, **options) -> Unit:
        """
        Returns a copy of this unit with the prefix giving the most
        readable value (see ``choose_prefix``).  `options` override the
        factory options e.g. ``prefix_max=100``.  Units that can't be
        prefixed are returned unchanged.
        """
        opts = self._updated_options(options)
        chosen = choose_prefix(self.unit_list, self.value, self._ops, opts)
        if chosen is None:
            return self
        unit_list, value = chosen
        return self._replace(value=value, unit_list=unit_list)

    def simplify(self, **options) -> Unit:
        """
        Returns a copy of this unit expressed in simpler units (e.g.
        ``kg m / s^2`` -> ``N``) chosen from unit system
        `options['system']`, followed by choosing the best prefix if
        `options['auto_prefix']` is set.  If no simpler units are found
        the units are unchanged.
        """
        opts = self._updated_options(options)
        system = opts.system
        if system == 'auto':
            system = self.get_inferred_system() or system

        unit_list = simplified_unit_list(self.unit_list, self.dimension,
                                         self._store.systems.get(system, ()),
                                         self._store.units.values())

        result = self if unit_list is None else self._relist(unit_list)
        if opts.auto_prefix:
            return result.apply_best_prefix(**options)
        return result

    def get_units(self) -> Unit:
        """Returns a copy of this unit without a value."""
        return self._replace(value=None)

    def is_compound(self) -> bool:
        """`True` for units like m/s or cm^2 but not kg or N."""
        return is_compound(self.unit_list)

    def is_base(self) -> bool:
        """`True` for a single base unit like kg or ft but not N or m/s."""
        return is_base(self.unit_list)

    def equals_quantity(self, other: UnitLike) -> bool:
        """`True` if `other` has the same dimensions."""
        other = self.factory.to_unit(other)
        return dimensions_equal(self.dimension, other.dimension)

    def equals(self, other: UnitLike) -> bool:
        """
        Returns `True` if `other` has the same dimensions and an equal
        value when both are converted to base units.  Two units without
        values are compared as if both had a value of one.
        """
        self._type.requires('equals', 'eq')
        other = self.factory.to_unit(other)
        if (self.value is None) != (other.value is None):
            return False
        value1, value2 = self._compare_prepare(other, False)
        return (self.equals_quantity(other) and
                bool(self._ops.eq(value1, value2)))

    def compare(self, other: UnitLike) -> int:
        """
        Returns -1, 0 or 1 if this unit is less than, equal to or
        greater than `other`.  NaN values compare as larger than any
        other value.

        Raises
        ------
        DimensionError
            If the dimensions differ.
        MissingValueError
            If only one of the units has a value.
        """
        self._type.requires('compare', 'gt', 'lt')
        other = self.factory.to_unit(other)
        value1, value2 = self._compare_prepare(other, True)
        if isinstance(value1, float) and math.isnan(value1):
            return 1
        if isinstance(value2, float) and math.isnan(value2):
            return -1
        if self._ops.lt(value1, value2):
            return -1
        if self._ops.gt(value1, value2):
            return 1
        return 0

    def less_than(self, other: UnitLike) -> bool:
        self._type.requires('less_than', 'lt')
        value1, value2 = self._compare_prepare(self.factory.to_unit(other),
                                               True)
        return bool(self._ops.lt(value1, value2))

    def less_than_or_equal(self, other: UnitLike) -> bool:
        self._type.requires('less_than_or_equal', 'le')
        value1, value2 = self._compare_prepare(self.factory.to_unit(other),
                                               True)
        return bool(self._ops.le(value1, value2))

    def greater_than(self, other: UnitLike) -> bool:
        self._type.requires('greater_than', 'gt')
        value1, value2 = self._compare_prepare(self.factory.to_unit(other),
                                               True)
        return bool(self._ops.gt(value1, value2))

    def greater_than_or_equal(self, other: UnitLike) -> bool:
        self._type.requires('greater_than_or_equal', 'ge')
        value1, value2 = self._compare_prepare(self.factory.to_unit(other),
                                               True)
        return bool(self._ops.ge(value1, value2))

    def to_string(self, **options) -> str:
        """
        Returns the string for this unit e.g. ``'5 kg m / s^2'``.  The
        units are not simplified.  `options` override the factory's
        formatting options (``precision``, ``parentheses``,
        ``formatter``).
        """
        opts = self._updated_options(options)
        parts = []
        if self.value is not None:
            parts.append(format_value(self.value, opts.precision,
                                      opts.formatter))
        unit_str = format_units(self.unit_list, opts.parentheses)
        if unit_str:
            parts.append(unit_str)
        return ' '.join(parts)

    def value_of(self) -> str:
        """Returns the string for this unit without any rounding."""
        return self.to_string(precision=0, parentheses=False)

    # -- Private Methods -----------------------------------------------

    @property
    def _ops(self) -> NumericOps:
        return self.factory.ops

    @property
    def _store(self) -> UnitStore:
        return self.factory.store

    @property
    def _type(self) -> NumericType:
        return self.factory.options.type

    def _updated_options(self, options: dict) -> UnitOptions:
        if not options:
            return self.factory.options
        return self.factory.options.updated(**options)

    def _replace(self, **changes) -> Unit:
        if 'dimension' in changes:
            changes['dimension'] = MappingProxyType(
                dict(changes['dimension']))
        if 'unit_list' in changes:
            changes['unit_list'] = tuple(changes['unit_list'])
        return replace(self, **changes)

    def _relist(self, unit_list: Sequence[AtomicUnit]) -> Unit:
        """Express the same value using `unit_list`."""
        ops = self._ops
        value = (None if self.value is None else
                 denormalize(unit_list, normalize(self.unit_list,
                                                  self.value, ops), ops))
        return self._replace(value=value, unit_list=unit_list)

    def _check_addable(self, other: Unit, action: str):
        if self.value is None or other.value is None:
            raise MissingValueError(f"Cannot {action} {self} and {other}: "
                                    f"both units must have values.")
        if not self.equals_quantity(other):
            raise DimensionError(f"Cannot {action} {self} and {other}: "
                                 f"dimensions do not match.")

    def _combine(self, other: Unit, sign: int, op) -> Unit:
        # Shared by mul (sign = 1) and div (sign = -1).
        dimension = remove_zero_dimensions({
            d: self.dimension.get(d, 0) + sign * other.dimension.get(d, 0)
            for d in {**self.dimension, **other.dimension}})
        unit_list = combine_duplicate_units(
            self.unit_list + tuple(a._replace(power=sign * a.power)
                                   for a in other.unit_list))

        value = None
        if self.value is not None or other.value is not None:
            ops = self._ops
            one = ops.conv(1)
            value1 = normalize(self.unit_list, one if self.value is None
                               else self.value, ops)
            value2 = normalize(other.unit_list, one if other.value is None
                               else other.value, ops)
            value = denormalize(unit_list, op(value1, value2), ops)

        return self._replace(value=value, unit_list=unit_list,
                             dimension=dimension)

    def _compare_prepare(self, other: Unit, require_match: bool
                         ) -> tuple[Any, Any]:
        if require_match and not self.equals_quantity(other):
            raise DimensionError(f"Cannot compare units {self} and "
                                 f"{other}; dimensions do not match.")

        ops = self._ops
        if self.value is None and other.value is None:
            # Only compare the unit lists.
            one = ops.conv(1)
            return (normalize(self.unit_list, one, ops),
                    normalize(other.unit_list, one, ops))
        if self.value is not None and other.value is not None:
            return (normalize(self.unit_list, self.value, ops),
                    normalize(other.unit_list, other.value, ops))

        raise MissingValueError(f"Cannot compare units {self} and {other}; "
                                f"one has a value and the other does not.")

    def _convert_to(self, target: Unit) -> Unit:
        if not self.equals_quantity(target):
            raise DimensionError(f"Cannot convert {self} to {target}: "
                                 f"dimensions do not match.")
        if target.value is not None:
            raise UnitTypeError(f"Cannot convert {self}: target unit must "
                                f"be valueless.")

        ops = self._ops
        value = ops.conv(1) if self.value is None else self.value
        return target._replace(value=denormalize(
            target.unit_list, normalize(self.unit_list, value, ops), ops))


# ----------------------------------------------------------------------

class UnitFactory:
    """
    Factory creating ``Unit`` objects according to a fixed set of
    options, unit definitions and numeric type.  Calling the factory
    creates a unit:

        - ``unit()``: No value and no units.
        - ``unit('5 m/s')``: Value and units parsed from the string.
        - ``unit(5, 'm/s')``: Value and unit string given separately.
        - ``unit(5)``: Dimensionless value.

    A factory never changes after creation.  Use ``config`` to create
    a new factory with different options.

    Parameters
    ----------
    options : UnitOptions, optional
        Options to use.  If omitted the defaults are used.

    Raises
    ------
    UnitConfigError
        If the unit definitions cannot be resolved.
    """

    def __init__(self, options: UnitOptions = None):
        self._options = options if options is not None else UnitOptions()
        self._ops = self._options.type.resolve()
        self._store = UnitStore(self._options)

    def __call__(self, value=None, unit_string: str = None) -> Unit:
        """
        Create a ``Unit``.  See class docstring for valid arguments.

        Raises
        ------
        UnitSyntaxError
            If a string can't be parsed.
        UnitTypeError
            For invalid argument types.
        """
        if value is None and unit_string is None:
            parsed = ParsedUnit(None, (), {})
        elif isinstance(value, str) and unit_string is None:
            parsed = self._store.parse(value)
        elif isinstance(value, ParsedUnit) and unit_string is None:
            parsed = value
        elif isinstance(unit_string, str):
            parsed = self._store.parse(unit_string)._replace(
                value=self._conv_value(value))
        elif unit_string is None:
            parsed = ParsedUnit(self._conv_value(value), (), {})
        else:
            raise UnitTypeError(
                "To construct a unit, you must supply a single string, two "
                "strings, a number and a string, or a custom type and a "
                "string.")

        dimension = remove_zero_dimensions(parsed.dimension)
        unit_list = combine_duplicate_units(parsed.unit_list)
        value = None
        if parsed.value is not None:
            value = denormalize(unit_list, normalize(
                parsed.unit_list, parsed.value, self._ops), self._ops)

        return Unit(value, unit_list, MappingProxyType(dimension), self)

    def __repr__(self):
        return f"UnitFactory({self._options!r})"

    # -- Public Methods ------------------------------------------------

    @property
    def options(self) -> UnitOptions:
        return self._options

    @property
    def ops(self) -> NumericOps:
        return self._ops

    @property
    def store(self) -> UnitStore:
        return self._store

    def config(self, **options) -> UnitFactory:
        """
        Returns a new factory using these options with `options`
        replacing the given values.  `definitions` and `type` may be
        mappings, which are merged field by field with the current
        ones.  This factory is not changed.

        Examples
        --------
        >>> from pyunitmath import unit
        >>> unit_us = unit.config(system='us')
        >>> str(unit_us('10 N').simplify())
        '2.2480894309971 lbf'
        """
        return UnitFactory(self._options.updated(**options))

    def get_config(self) -> UnitOptions:
        return self._options

    def definitions(self):
        """
        Returns the merged built-in and user definitions (prefix groups,
        units and systems) this factory was built from.
        """
        return self._store.original_definitions

    def exists(self, name: str) -> bool:
        """`True` if `name` is a known unit, with or without prefix."""
        return self._store.exists(name)

    def to_unit(self, x: UnitLike, unit_string: str = None) -> Unit:
        """
        Returns `x` unchanged if it is already a ``Unit``, otherwise
        creates one by calling the factory.
        """
        if isinstance(x, Unit) and unit_string is None:
            return x
        return self(x, unit_string)

    # Function style API.

    def add(self, a: UnitLike, b: UnitLike) -> Unit:
        return self.to_unit(a).add(b)

    def sub(self, a: UnitLike, b: UnitLike) -> Unit:
        return self.to_unit(a).sub(b)

    def mul(self, a: UnitLike, b: UnitLike) -> Unit:
        return self.to_unit(a).mul(b)

    def div(self, a: UnitLike, b: UnitLike) -> Unit:
        return self.to_unit(a).div(b)

    def pow(self, a: UnitLike, p) -> Unit:
        return self.to_unit(a).pow(p)

    def sqrt(self, a: UnitLike) -> Unit:
        return self.to_unit(a).sqrt()

    def abs(self, a: UnitLike) -> Unit:
        return self.to_unit(a).abs()

    def to(self, a: UnitLike, target: Union[Unit, str]) -> Unit:
        return self.to_unit(a).to(target)

    def to_base_units(self, a: UnitLike) -> Unit:
        return self.to_unit(a).to_base_units()

    # -- Private Methods -----------------------------------------------

    def _conv_value(self, value):
        if value is None:
            return None
        if not self._options.type.is_custom and not isinstance(
                value, (Real, str)):
            raise UnitTypeError(f"Unit value must be a number or numeric "
                                f"string, got: {value!r}")
        if isinstance(value, str):
            try:
                return self._ops.conv(value)
            except (ValueError, ArithmeticError) as e:
                raise UnitTypeError(f"Unit value string is not a number: "
                                    f"{value!r}", value=value) from e
        return self._ops.conv(value)
