"""
Parser for unit strings.  A unit string is an optional number followed
by zero or more unit terms::

    [sign] digits [. digits] [(e|E) [sign] digits]  unit[^power] ...

Examples are ``'5.2 inch'``, ``'4e2 cm/s^2'``, ``'1/s'`` and
``'kg m^2 / s^2'``.  Units following a single ``/`` are in the
denominator.  Spaces, tabs and ``*`` between terms are ignored.
Parentheses are not allowed.
"""
from __future__ import annotations

from typing import Callable, NamedTuple, Optional

from ._algebra import AtomicUnit, ParsedUnit
from ._numeric import NumericOps
from .exception import (UnitNotFoundError, UnitSyntaxError,
                        UnitTypeError)

# Written by the pyunitmath developers, October 2026.

# ======================================================================

IGNORED_CHARS = ' \t*'
NON_FINITE = ('NaN', 'Infinity', '-Infinity')

# Unit lookup callback: 'km' -> (unit, 'k') or None.
FindUnit = Callable[[str], Optional[tuple]]


# ----------------------------------------------------------------------

class _Cursor(NamedTuple):
    """Immutable parse position within `text`."""
    text: str
    pos: int = 0

    @property
    def char(self) -> str:
        """Current character, or '' at the end of the text."""
        return self.text[self.pos] if self.pos < len(self.text) else ''

    def advance(self, n: int = 1) -> _Cursor:
        return self._replace(pos=self.pos + n)

    def error(self, msg: str) -> UnitSyntaxError:
        return UnitSyntaxError(msg, text=self.text, position=self.pos)


def _is_digit(c: str) -> bool:
    return '0' <= c <= '9' if c else False


def _is_alnum(c: str) -> bool:
    # ASCII only; str.isalnum() would accept other scripts.
    return bool(c) and ('0' <= c <= '9' or 'A' <= c <= 'Z' or
                        'a' <= c <= 'z')


def _skip_ignored(cur: _Cursor) -> _Cursor:
    while cur.char:
        if cur.char in '()':
            raise cur.error(f'Unexpected "{cur.char}" in "{cur.text}" at '
                            f'index {cur.pos}; parentheses are not '
                            f'allowed')
        if cur.char not in IGNORED_CHARS:
            break
        cur = cur.advance()
    return cur


def _parse_char(cur: _Cursor, c: str) -> tuple[bool, _Cursor]:
    if cur.char == c:
        return True, cur.advance()
    return False, cur


def _parse_non_finite(cur: _Cursor) -> tuple[Optional[str], _Cursor]:
    for s in NON_FINITE:
        if cur.text.startswith(s, cur.pos):
            return s, cur.advance(len(s))
    return None, cur


def _parse_number(cur: _Cursor) -> tuple[Optional[str], _Cursor]:
    """
    Read a floating point number from the cursor position.  Returns
    ``(None, cur)`` with the cursor unchanged if there is no number.
    """
    start, number = cur, ''
    if cur.char == '+':
        cur = cur.advance()
    elif cur.char == '-':
        number += '-'
        cur = cur.advance()

    if not (_is_digit(cur.char) or cur.char == '.'):
        return None, start  # Sign must be followed by digit or dot.

    if cur.char == '.':
        number += '.'
        cur = cur.advance()
        if not _is_digit(cur.char):
            return None, start  # Just a dot.
    else:
        while _is_digit(cur.char):
            number += cur.char
            cur = cur.advance()
        if cur.char == '.':
            number += '.'
            cur = cur.advance()

    while _is_digit(cur.char):
        number += cur.char
        cur = cur.advance()

    # Exponent: this could also be a unit starting with e, e.g.
    # "4exabytes", so it only counts if a digit follows.
    if cur.char in ('e', 'E'):
        exp_cur, exponent = cur.advance(), cur.char
        if exp_cur.char in ('+', '-'):
            exponent += exp_cur.char
            exp_cur = exp_cur.advance()
        if not _is_digit(exp_cur.char):
            return number, cur

        number += exponent
        cur = exp_cur
        while _is_digit(cur.char):
            number += cur.char
            cur = cur.advance()

    return number, cur


def _parse_unit_name(cur: _Cursor) -> tuple[Optional[str], _Cursor]:
    """Read ``[A-Za-z0-9]+``, which must start with a letter."""
    name = ''
    while _is_alnum(cur.char):
        name += cur.char
        cur = cur.advance()
    if name and not _is_digit(name[0]):
        return name, cur
    return None, cur


# ----------------------------------------------------------------------

def parse(text: str, find_unit: FindUnit, ops: NumericOps) -> ParsedUnit:
    """
    Parse a unit string into its value, list of units and dimension.

    Parameters
    ----------
    text : str
        String to parse, e.g. ``"60 mi/h"``.
    find_unit : Callable
        Lookup for a unit name possibly including a prefix.  Returns
        ``(unit, prefix)`` or `None` if unknown.
    ops : NumericOps
        Numeric operations; ``ops.conv`` converts the number string.

    Returns
    -------
    ParsedUnit
        Value (or `None` if no number was given), tuple of
        ``AtomicUnit`` in the order given and summed dimension.

    Raises
    ------
    UnitSyntaxError
        If the string is malformed.
    UnitNotFoundError
        If a unit name is not known.
    UnitTypeError
        If `text` is not a string.
    """
    if not isinstance(text, str):
        raise UnitTypeError(f"Invalid argument in parse, string expected, "
                            f"got: {text!r}")

    value, unit_list, dimension = None, [], {}
    power_mult, expecting_unit = 1, False

    cur = _skip_ignored(_Cursor(text))

    # Optional number or non-finite string at the start.
    value_str, cur = _parse_non_finite(cur)
    if value_str is None:
        value_str, cur = _parse_number(cur)

    if value_str is not None:
        value = ops.conv(value_str)
        cur = _skip_ignored(cur)
        # Handle division right after the value, e.g. '1/s'.
        found_slash, cur = _parse_char(cur, '/')
        if found_slash:
            power_mult, expecting_unit = -1, True

    while True:
        cur = _skip_ignored(cur)
        if not cur.char:
            break  # End of input.

        name_cur = cur
        name, cur = _parse_unit_name(cur)
        if name is None:
            raise name_cur.error(f'Unexpected "{name_cur.char}" in '
                                 f'"{text}" at index {name_cur.pos}')

        found = find_unit(name)
        if found is None:
            raise UnitNotFoundError(f'Unit "{name}" not found.', text=text,
                                    position=name_cur.pos, name=name)
        unit, prefix = found

        # Optional '^ number'.
        power = power_mult
        cur = _skip_ignored(cur)
        found_caret, cur = _parse_char(cur, '^')
        if found_caret:
            cur = _skip_ignored(cur)
            p, cur = _parse_number(cur)
            if p is None:
                raise cur.error(f'In "{text}", "^" must be followed by a '
                                f'floating-point number')
            power *= float(p)

        unit_list.append(AtomicUnit(unit, prefix, power))
        for dim, dim_pwr in unit.dimension.items():
            dimension[dim] = dimension.get(dim, 0) + dim_pwr * power

        # Units after '/' are in the denominator.
        cur = _skip_ignored(cur)
        expecting_unit = False
        slash_cur = cur
        found_slash, cur = _parse_char(cur, '/')
        if found_slash:
            if power_mult == -1:
                raise slash_cur.error(f'Unexpected additional "/" in '
                                      f'"{text}" at index {slash_cur.pos}')
            power_mult, expecting_unit = -1, True

    if expecting_unit:
        raise cur.error(f'Trailing characters: "{text}"')

    return ParsedUnit(value, tuple(unit_list), dimension)
