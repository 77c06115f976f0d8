"""
The numeric type used for unit values.  By default values are floats,
but every arithmetic and comparison operation used by the engine can be
replaced so that another number type (e.g. ``decimal.Decimal``) is used
instead.
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Mapping, NamedTuple, Optional

import numpy as np

from .exception import UnitConfigError

# Written by the pyunitmath developers, October 2026.

# ======================================================================

# Operations that must all be supplied together by a custom type.
REQUIRED_OPS = ('conv', 'clone', 'add', 'sub', 'mul', 'div', 'pow')

# Additional operations required by automatic prefix selection.
PREFIX_OPS = ('lt', 'gt', 'le', 'ge', 'abs')


# -- Float Defaults ----------------------------------------------------

def _float_conv(a):
    return float(a) if isinstance(a, str) else a


def _float_clone(a):
    return a


def _float_add(a, b):
    return a + b


def _float_sub(a, b):
    return a - b


def _float_mul(a, b):
    return a * b


def _float_div(a, b):
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.divide(np.float64(a), np.float64(b)))


def _float_pow(a, b):
    with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
        return float(np.power(np.float64(a), np.float64(b)))


def _float_eq(a, b) -> bool:
    if a == b:
        return True
    with np.errstate(divide='ignore', invalid='ignore'):
        return bool(np.divide(abs(a - b), abs(a + b)) < 1e-15)


def _float_lt(a, b) -> bool:
    return a < b


def _float_le(a, b) -> bool:
    return a <= b


def _float_ge(a, b) -> bool:
    return a >= b


def _float_gt(a, b) -> bool:
    return a > b


def _float_round(a):
    # Halves go towards +inf, i.e. -2.5 -> -2.
    return float(np.floor(np.float64(a) + 0.5))


def _float_trunc(a):
    return float(np.trunc(a))


def _float_abs(a):
    return abs(a)


# ----------------------------------------------------------------------

class NumericOps(NamedTuple):
    """
    The resolved set of operations used by the engine on unit values.
    Each field is a callable taking one or two values.
    """
    conv: Callable[[Any], Any]
    clone: Callable[[Any], Any]
    add: Callable[[Any, Any], Any]
    sub: Callable[[Any, Any], Any]
    mul: Callable[[Any, Any], Any]
    div: Callable[[Any, Any], Any]
    pow: Callable[[Any, Any], Any]
    eq: Callable[[Any, Any], bool]
    lt: Callable[[Any, Any], bool]
    le: Callable[[Any, Any], bool]
    ge: Callable[[Any, Any], bool]
    gt: Callable[[Any, Any], bool]
    round: Callable[[Any], Any]
    trunc: Callable[[Any], Any]
    abs: Callable[[Any], Any]


FLOAT_OPS = NumericOps(
    conv=_float_conv, clone=_float_clone,
    add=_float_add, sub=_float_sub, mul=_float_mul, div=_float_div,
    pow=_float_pow,
    eq=_float_eq, lt=_float_lt, le=_float_le, ge=_float_ge, gt=_float_gt,
    round=_float_round, trunc=_float_trunc, abs=_float_abs)


# ----------------------------------------------------------------------

@dataclass(frozen=True, kw_only=True)
class NumericType:
    """
    Dataclass holding caller supplied replacements for the numeric
    operations.  A field left as `None` uses the float default; a field
    holding a callable overrides it.

    Parameters
    ----------
    conv : Callable[[Any], T], optional
        Convert a number or numeric string to type `T`.
    clone : Callable[[T], T], optional
        Return a copy of a value.
    add, sub, mul, div, pow : Callable[[T, T], T], optional
        Arithmetic operations.
    eq, lt, le, ge, gt : Callable[[T, T], bool], optional
        Comparison operations.
    round, trunc, abs : Callable[[T], T], optional
        Round to the nearest integer, truncate towards zero and take the
        absolute value.
    """
    conv: Optional[Callable] = None
    clone: Optional[Callable] = None
    add: Optional[Callable] = None
    sub: Optional[Callable] = None
    mul: Optional[Callable] = None
    div: Optional[Callable] = None
    pow: Optional[Callable] = None
    eq: Optional[Callable] = None
    lt: Optional[Callable] = None
    le: Optional[Callable] = None
    ge: Optional[Callable] = None
    gt: Optional[Callable] = None
    round: Optional[Callable] = None
    trunc: Optional[Callable] = None
    abs: Optional[Callable] = None

    def __post_init__(self):
        for f in fields(self):
            fn = getattr(self, f.name)
            if fn is not None and not callable(fn):
                raise UnitConfigError(f"Numeric type function '{f.name}' "
                                      f"must be callable, got: {fn!r}")

    def is_overridden(self, name: str) -> bool:
        """Returns `True` if operation `name` was supplied by the caller."""
        return getattr(self, name) is not None

    @property
    def is_custom(self) -> bool:
        """`True` if any operation has been overridden."""
        return any(self.is_overridden(f.name) for f in fields(self))

    def validate(self, auto_prefix: bool):
        """
        Check that a custom type is complete.  If any operation is
        overridden then all of ``conv, clone, add, sub, mul, div, pow``
        must be.  If `auto_prefix` is also set then ``lt, gt, le, ge,
        abs`` are needed as well.

        Raises
        ------
        UnitConfigError
            If the custom type is incomplete.
        """
        if not self.is_custom:
            return

        if not all(self.is_overridden(op) for op in REQUIRED_OPS):
            raise UnitConfigError(f"You must supply all required custom "
                                  f"type functions: "
                                  f"{', '.join(REQUIRED_OPS)}")

        if auto_prefix and not all(self.is_overridden(op)
                                   for op in PREFIX_OPS):
            raise UnitConfigError(f"The following custom type functions "
                                  f"are required when auto_prefix is "
                                  f"True: {', '.join(PREFIX_OPS)}")

    def requires(self, action: str, *names: str):
        """
        Raise `UnitConfigError` if a custom ``conv`` is in use but one
        of the operations `names` needed by `action` was not supplied.
        """
        if not self.is_overridden('conv'):
            return
        missing = [n for n in names if not self.is_overridden(n)]
        if missing:
            needs = ' and a '.join(f"type.{n}" for n in names)
            raise UnitConfigError(f"When using custom types, {action} "
                                  f"requires a {needs} function")

    def merge(self, other: NumericType | Mapping[str, Callable] | None
              ) -> NumericType:
        """
        Returns a new ``NumericType`` where the operations given in
        `other` replace those in this one.
        """
        if other is None:
            return self
        if isinstance(other, NumericType):
            other = {f.name: getattr(other, f.name) for f in fields(other)
                     if other.is_overridden(f.name)}

        known = {f.name for f in fields(self)}
        unknown = set(other) - known
        if unknown:
            raise UnitConfigError(f"Unknown numeric type functions: "
                                  f"{', '.join(sorted(unknown))}")
        return replace(self, **other)

    def resolve(self) -> NumericOps:
        """Returns the operations with defaults filled in."""
        return NumericOps(**{
            name: getattr(self, name) or getattr(FLOAT_OPS, name)
            for name in NumericOps._fields})
