"""
pyunitmath
==========

Units-aware calculations: values tagged with units that can be parsed
from strings, combined with dimensional checking, converted and shown
with automatically chosen units and prefixes.

Examples
--------

Units are created using the factory ``unit()`` from a string, a number
and a string, or a number alone (dimensionless):

>>> from pyunitmath import unit
>>> d = unit('60 mi')
>>> t = unit(1, 'hr')
>>> print(d / t)
60 mi / hr

Conversion requires the target to have the same dimensions:

>>> print(unit('60 mi/hr').to('m/s'))
26.8224 m / s

Multiplication and division combine units, which can then be simplified
to a known unit of the inferred unit system:

>>> print((unit('400 N') / unit('10 cm^2')).simplify())
400 kPa

Units with offsets (e.g. temperatures) are handled when they appear
alone:

>>> print(unit('0 degC') + unit('100 degC'))
373.15 degC

A value can be split into a sum of units:

>>> [str(u) for u in unit('12 in').split(['ft', 'in'])]
['1 ft', '0 in']

Custom options, unit definitions or a different numeric type are
applied by creating a new factory using ``config``.  The original
factory is not changed:

>>> unit_us = unit.config(system='us')
>>> print(unit_us('10 N').simplify())
2.2480894309971 lbf
>>> furlongs = unit.config(definitions={'units': {
...     'furlong': '220 yards'}})
>>> print(furlongs('1 furlong').to('m'))
201.168 m

Errors are raised as subclasses of ``UnitError``, which also derive from
the normal ``ValueError`` / ``TypeError`` where appropriate:

>>> unit('5 xyz')  # doctest: +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
pyunitmath.exception.UnitNotFoundError: Unit "xyz" not found.
"""

from ._format import format_number
from ._numeric import NumericOps, NumericType
from ._opts import Definitions, UnitOptions
from ._store import UnitStore
from ._unit import Unit, UnitFactory
from .exception import (DimensionError, MissingValueError,
                        UnitConfigError, UnitError, UnitNotFoundError,
                        UnitSyntaxError, UnitTypeError)

__version__ = "0.1.0"

# Default factory.
unit = UnitFactory()
