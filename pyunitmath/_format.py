"""
Conversion of unit values and unit lists to strings.
"""
from __future__ import annotations

import math
from numbers import Real
from typing import Any

from ._algebra import UnitList

# Written by the pyunitmath developers, October 2026.

# ======================================================================


def format_number(x: Any) -> str:
    """
    Default formatter for values.  Whole numbers are shown without a
    decimal part and non-finite values use the same spelling accepted
    by the parser, so that the result can be parsed again.

    >>> format_number(8.0)
    '8'
    >>> format_number(0.25)
    '0.25'
    >>> format_number(float('-inf'))
    '-Infinity'
    """
    if not isinstance(x, Real) or isinstance(x, bool):
        return str(x)

    x = float(x)
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'Infinity' if x > 0 else '-Infinity'
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))

    # Shortest repr, with exponents shown as 1e-7 rather than 1e-07.
    mant, sep, exp = repr(x).partition('e')
    if sep:
        sign = '-' if exp.startswith('-') else '+'
        return f"{mant}e{sign}{exp.lstrip('+-').lstrip('0') or '0'}"
    return mant


def format_value(value: Any, precision: int, formatter) -> str:
    """
    Format `value`.  Plain numbers using the default formatter are first
    rounded to `precision` significant digits (unless `precision` is
    zero); otherwise `formatter` is used unchanged.
    """
    if (formatter is format_number and precision > 0 and
            isinstance(value, Real) and not isinstance(value, bool)):
        return format_number(float(f"{value:.{precision}g}"))
    return formatter(value)


def format_units(unit_list: UnitList, parentheses: bool = False) -> str:
    """
    Returns the string for a unit list, e.g. ``'kg m^2 / s^2'``.  If
    there is no numerator the denominator keeps its negative powers
    e.g. ``'s^-2'``.

    Parameters
    ----------
    unit_list : UnitList
        Units to format.
    parentheses : bool, default = False
        If `True` a numerator or denominator containing more than one
        unit is wrapped in parentheses when the other part is also
        present e.g. ``'(kg m^2) / (s^2 mol)'``.
    """
    num = [a for a in unit_list if a.power > 0]
    den = [a for a in unit_list if a.power < 0]

    str_num = ' '.join(
        f"{a}" + (f"^{format_number(a.power)}"
                  if abs(a.power - 1.0) > 1e-15 else '')
        for a in num)

    if num:
        str_den = ' '.join(
            f"{a}" + (f"^{format_number(-a.power)}"
                      if abs(a.power + 1.0) > 1e-15 else '')
            for a in den)
    else:
        str_den = ' '.join(f"{a}^{format_number(a.power)}" for a in den)

    if parentheses:
        if len(num) > 1 and den:
            str_num = f"({str_num})"
        if len(den) > 1 and num:
            str_den = f"({str_den})"

    if num and den:
        return f"{str_num} / {str_den}"
    return str_num + str_den
