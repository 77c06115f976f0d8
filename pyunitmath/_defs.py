"""
Built-in prefix groups, units and unit systems.  These are plain data;
``UnitStore`` resolves them (together with any user definitions) when a
unit factory is created.

Each unit is either defined directly on a base quantity::

    'm': {'quantity': 'LENGTH', 'value': 1, ...}

or in terms of other units, using a unit string or a ``[multiplier,
unit string]`` pair::

    'inch': {'value': '0.0254 meter', ...}
    'deg': {'value': [math.pi / 180, 'rad'], ...}

Optional keys are ``prefix_group`` (name of the group of prefixes
allowed with the unit), ``format_prefixes`` (prefixes to pick from when
formatting), ``base_prefix`` (prefix of the base unit, e.g. 'k' for
'g'), ``offset`` and ``aliases``.
"""
import math

# Written by the pyunitmath developers, October 2026.

# ======================================================================

# -- Prefix Groups -----------------------------------------------------

_SHORT = {
    '': 1,
    'da': 1e1, 'h': 1e2, 'k': 1e3, 'M': 1e6, 'G': 1e9, 'T': 1e12,
    'P': 1e15, 'E': 1e18, 'Z': 1e21, 'Y': 1e24,
    'd': 1e-1, 'c': 1e-2, 'm': 1e-3, 'u': 1e-6, 'n': 1e-9, 'p': 1e-12,
    'f': 1e-15, 'a': 1e-18, 'z': 1e-21, 'y': 1e-24
}

_LONG = {
    '': 1,
    'deca': 1e1, 'hecto': 1e2, 'kilo': 1e3, 'mega': 1e6, 'giga': 1e9,
    'tera': 1e12, 'peta': 1e15, 'exa': 1e18, 'zetta': 1e21,
    'yotta': 1e24,
    'deci': 1e-1, 'centi': 1e-2, 'milli': 1e-3, 'micro': 1e-6,
    'nano': 1e-9, 'pico': 1e-12, 'femto': 1e-15, 'atto': 1e-18,
    'zepto': 1e-21, 'yocto': 1e-24
}

_BINARY_SHORT_SI = {
    '': 1,
    'k': 1e3, 'M': 1e6, 'G': 1e9, 'T': 1e12, 'P': 1e15, 'E': 1e18,
    'Z': 1e21, 'Y': 1e24
}

_BINARY_SHORT_IEC = {
    '': 1,
    'Ki': 1024, 'Mi': 1024 ** 2, 'Gi': 1024 ** 3, 'Ti': 1024 ** 4,
    'Pi': 1024 ** 5, 'Ei': 1024 ** 6, 'Zi': 1024 ** 7, 'Yi': 1024 ** 8
}

_BINARY_LONG_SI = {
    '': 1,
    'kilo': 1e3, 'mega': 1e6, 'giga': 1e9, 'tera': 1e12, 'peta': 1e15,
    'exa': 1e18, 'zetta': 1e21, 'yotta': 1e24
}

_BINARY_LONG_IEC = {
    '': 1,
    'kibi': 1024, 'mebi': 1024 ** 2, 'gibi': 1024 ** 3,
    'tebi': 1024 ** 4, 'pebi': 1024 ** 5, 'exi': 1024 ** 6,
    'zebi': 1024 ** 7, 'yobi': 1024 ** 8
}

PREFIX_GROUPS = {
    'NONE': {'': 1},
    'SHORT': _SHORT,
    'LONG': _LONG,
    'SQUARED': {p: v ** 2 for p, v in _SHORT.items()},
    'CUBIC': {p: v ** 3 for p, v in _SHORT.items()},
    'BINARY_SHORT_SI': _BINARY_SHORT_SI,
    'BINARY_SHORT_IEC': _BINARY_SHORT_IEC,
    'BINARY_LONG_SI': _BINARY_LONG_SI,
    'BINARY_LONG_IEC': _BINARY_LONG_IEC,
    'BTU': {'': 1, 'MM': 1e6},
    'SHORT_LONG': {**_SHORT, **_LONG},
    'BINARY_SHORT': {**_BINARY_SHORT_SI, **_BINARY_SHORT_IEC},
    'BINARY_LONG': {**_BINARY_LONG_SI, **_BINARY_LONG_IEC},
}

# == Unit Definitions ==================================================

UNITS = {
    '': {'quantity': 'UNITLESS', 'value': 1},

    # -- Length --------------------------------------------------------

    'm': {'quantity': 'LENGTH', 'value': 1, 'prefix_group': 'SHORT',
          'format_prefixes': ['n', 'u', 'm', 'c', '', 'k']},
    'meter': {'value': '1 m', 'prefix_group': 'LONG',
              'format_prefixes': ['nano', 'micro', 'milli', 'centi', '',
                                  'kilo'],
              'aliases': ['meters']},
    'inch': {'value': '0.0254 meter', 'aliases': ['inches', 'in']},
    'foot': {'value': '12 inch', 'aliases': ['ft', 'feet']},
    'yard': {'value': '3 foot', 'aliases': ['yd', 'yards']},
    'mile': {'value': '5280 ft', 'aliases': ['mi', 'miles']},
    'link': {'value': '7.92 in', 'aliases': ['li', 'links']},
    'rod': {'value': '25 link', 'aliases': ['rd', 'rods']},
    'chain': {'value': '100 link', 'aliases': ['ch', 'chains']},
    'angstrom': {'value': '1e-10 m', 'aliases': ['angstroms']},
    'mil': {'value': '1e-3 inch'},

    # -- Area ----------------------------------------------------------

    'sqin': {'value': '1 in^2'},
    'sqft': {'value': '1 ft^2'},
    'sqyd': {'value': '1 yd^2'},
    'sqmi': {'value': '1 mi^2'},
    'sqrd': {'value': '1 rod^2'},
    'sqch': {'value': '1 chain^2'},
    'sqmil': {'value': '1 mil^2'},
    'acre': {'value': '10 chain^2'},
    'hectare': {'value': '1e4 m^2'},

    # -- Volume --------------------------------------------------------

    'L': {'value': '1e-3 m^3', 'prefix_group': 'SHORT',
          'format_prefixes': ['n', 'u', 'm', ''],
          'aliases': ['l', 'lt']},
    'litre': {'value': '1 L', 'prefix_group': 'LONG',
              'format_prefixes': ['nano', 'micro', 'milli', ''],
              'aliases': ['liter', 'liters', 'litres']},
    'cuin': {'value': '1 in^3'},
    'cuft': {'value': '1 ft^3'},
    'cuyd': {'value': '1 yd^3'},
    'teaspoon': {'value': '4.92892159375 mL',
                 'aliases': ['teaspoons', 'tsp']},
    'tablespoon': {'value': '3 teaspoon',
                   'aliases': ['tablespoons', 'tbsp']},
    'drop': {'value': '0.05 mL'},
    'gtt': {'value': '0.05 mL'},

    # -- Liquid Volume -------------------------------------------------

    'minim': {'value': '0.0125 teaspoon', 'aliases': ['minims']},
    'fluidounce': {'value': '0.125 cups',
                   'aliases': ['floz', 'fluidounces']},
    'fluiddram': {'value': '0.125 floz',
                  'aliases': ['fldr', 'fluiddrams']},
    'cc': {'value': '1 cm^3'},
    'cup': {'value': '236.5882365 mL', 'aliases': ['cp', 'cups']},
    'pint': {'value': '2 cup', 'aliases': ['pt', 'pints']},
    'quart': {'value': '4 cup', 'aliases': ['qt', 'quarts']},
    'gallon': {'value': '16 cup', 'aliases': ['gal', 'gallons']},
    'oilbarrel': {'value': '42 gal', 'aliases': ['obl', 'oilbarrels']},

    # -- Mass ----------------------------------------------------------

    'g': {'quantity': 'MASS', 'value': 0.001, 'prefix_group': 'SHORT',
          'format_prefixes': ['n', 'u', 'm', '', 'k'],
          'base_prefix': 'k'},  # Base unit is kg, not g.
    'gram': {'value': '1 g', 'prefix_group': 'LONG',
             'format_prefixes': ['nano', 'micro', 'milli', '', 'kilo']},
    'poundmass': {'value': '0.45359237 kg',
                  'aliases': ['lb', 'lbs', 'lbm', 'poundmasses']},
    'ton': {'value': '2000 lbm'},
    'tonne': {'value': '1000 kg', 'prefix_group': 'LONG',
              'format_prefixes': ['', 'kilo', 'mega', 'giga']},
    't': {'value': '1 tonne', 'prefix_group': 'SHORT'},  # 'kt' ~ knot.
    'grain': {'value': '64.79891 mg', 'aliases': ['gr']},
    'ounce': {'value': '0.0625 lbm', 'aliases': ['oz', 'ounces']},
    'dram': {'value': '0.0625 oz', 'aliases': ['dr']},
    'hundredweight': {'value': '100 lbm',
                      'aliases': ['cwt', 'hundredweights']},
    'stick': {'value': '4 oz', 'aliases': ['sticks']},
    'stone': {'value': '14 lbm'},

    # -- Time ----------------------------------------------------------

    's': {'quantity': 'TIME', 'value': 1, 'prefix_group': 'SHORT',
          'format_prefixes': ['f', 'p', 'n', 'u', 'm', ''],
          'aliases': ['sec']},
    'min': {'value': '60 s', 'aliases': ['minute', 'minutes']},
    'h': {'value': '60 min', 'aliases': ['hr', 'hrs', 'hour', 'hours']},
    'second': {'value': '1 s', 'prefix_group': 'LONG',
               'format_prefixes': ['femto', 'pico', 'nano', 'micro',
                                   'milli', ''],
               'aliases': ['seconds']},
    'day': {'value': '24 hr', 'aliases': ['days']},
    'week': {'value': '7 day', 'aliases': ['weeks']},
    'month': {'value': '30.4375 day', 'aliases': ['months']},
    'year': {'value': '365.25 day', 'aliases': ['years']},
    'decade': {'value': '10 year', 'aliases': ['decades']},
    'century': {'value': '100 year', 'aliases': ['centuries']},
    'millennium': {'value': '1000 year', 'aliases': ['millennia']},

    # -- Frequency -----------------------------------------------------

    'hertz': {'value': '1/s', 'prefix_group': 'LONG',
              'format_prefixes': ['', 'kilo', 'mega', 'giga', 'tera']},
    'Hz': {'value': '1 hertz', 'prefix_group': 'SHORT',
           'format_prefixes': ['', 'k', 'M', 'G', 'T']},

    # -- Angle ---------------------------------------------------------

    'rad': {'quantity': 'ANGLE', 'value': 1, 'prefix_group': 'SHORT',
            'format_prefixes': ['m', '']},
    'radian': {'value': '1 rad', 'prefix_group': 'LONG',
               'format_prefixes': ['milli', ''], 'aliases': ['radians']},
    'sr': {'quantity': 'SOLID_ANGLE', 'value': 1, 'prefix_group': 'SHORT',
           'format_prefixes': ['u', 'm', '']},
    'steradian': {'value': '1 sr', 'prefix_group': 'LONG',
                  'format_prefixes': ['micro', 'milli', ''],
                  'aliases': ['steradians']},
    'deg': {'value': [math.pi / 180, 'rad'],
            'aliases': ['degree', 'degrees']},
    'grad': {'value': [math.pi / 200, 'rad'], 'prefix_group': 'SHORT',
             'format_prefixes': ['c']},
    'gradian': {'value': [math.pi / 200, 'rad'], 'prefix_group': 'LONG',
                'format_prefixes': ['centi', ''], 'aliases': ['gradians']},
    'cycle': {'value': [2 * math.pi, 'rad'], 'aliases': ['cycles']},
    'arcmin': {'value': '0.016666666666666666 deg',
               'aliases': ['arcminute', 'arcminutes']},
    'arcsec': {'value': '0.016666666666666666 arcmin',
               'aliases': ['arcsecond', 'arcseconds']},

    # -- Electric Current ----------------------------------------------

    'A': {'quantity': 'CURRENT', 'value': 1, 'prefix_group': 'SHORT',
          'format_prefixes': ['u', 'm', '', 'k']},
    'ampere': {'value': '1 A', 'prefix_group': 'LONG',
               'format_prefixes': ['micro', 'milli', '', 'kilo'],
               'aliases': ['amperes']},

    # -- Temperature ---------------------------------------------------

    # K = °C + 273.15
    # K = (°F + 459.67) / 1.8
    # K = °R / 1.8
    'K': {'quantity': 'TEMPERATURE', 'value': 1, 'prefix_group': 'SHORT',
          'format_prefixes': ['n', 'u', 'm', '']},
    'kelvin': {'value': '1 K', 'prefix_group': 'LONG',
               'format_prefixes': ['nano', 'micro', 'milli', '']},
    'degC': {'value': '1 K', 'offset': 273.15, 'aliases': ['celsius']},
    'degR': {'value': [1 / 1.8, 'K'], 'aliases': ['rankine', 'R']},
    'degF': {'value': '1 R', 'offset': 459.67,
             'aliases': ['fahrenheit']},

    # -- Amount of Substance -------------------------------------------

    'mol': {'quantity': 'AMOUNT_OF_SUBSTANCE', 'value': 1,
            'prefix_group': 'SHORT', 'format_prefixes': ['', 'k']},
    'mole': {'value': '1 mol', 'prefix_group': 'LONG',
             'format_prefixes': ['', 'kilo'], 'aliases': ['moles']},

    # -- Luminous ------------------------------------------------------

    'cd': {'quantity': 'LUMINOUS_INTENSITY', 'value': 1,
           'prefix_group': 'SHORT', 'format_prefixes': ['', 'm']},
    'candela': {'value': '1 cd', 'prefix_group': 'LONG',
                'format_prefixes': ['', 'milli']},
    'lumen': {'value': '1 cd sr', 'prefix_group': 'LONG',
              'aliases': ['lumens']},
    'lm': {'value': '1 lumen', 'prefix_group': 'SHORT'},
    'lux': {'value': '1 cd/m^2', 'prefix_group': 'LONG'},
    'lx': {'value': '1 lux', 'prefix_group': 'SHORT'},

    # -- Force ---------------------------------------------------------

    'N': {'value': '1 kg m/s^2', 'prefix_group': 'SHORT',
          'format_prefixes': ['u', 'm', '', 'k', 'M']},
    'newton': {'value': '1 N', 'prefix_group': 'LONG',
               'format_prefixes': ['micro', 'milli', '', 'kilo', 'mega'],
               'aliases': ['newtons']},
    'dyn': {'value': '1 g cm/s^2', 'prefix_group': 'SHORT',
            'format_prefixes': ['m', 'k', 'M']},
    'dyne': {'value': '1 dyn', 'prefix_group': 'LONG',
             'format_prefixes': ['milli', 'kilo', 'mega']},
    'lbf': {'value': '4.4482216152605 N', 'aliases': ['poundforce']},
    'kip': {'value': '1000 lbf', 'aliases': ['kips']},

    # -- Energy --------------------------------------------------------

    'J': {'value': '1 N m', 'prefix_group': 'SHORT',
          'format_prefixes': ['m', '', 'k', 'M', 'G']},
    'joule': {'value': '1 J', 'prefix_group': 'LONG',
              'format_prefixes': ['milli', '', 'kilo', 'mega', 'giga'],
              'aliases': ['joules']},
    'erg': {'value': '1 dyn cm'},
    'Wh': {'value': '1 W hr', 'prefix_group': 'SHORT',
           'format_prefixes': ['k', 'M', 'G', 'T']},
    'BTU': {'value': '1055.05585262 J', 'prefix_group': 'BTU',
            'format_prefixes': ['', 'MM'], 'aliases': ['BTUs']},
    'eV': {'value': '1.602176565e-19 J', 'prefix_group': 'SHORT',
           'format_prefixes': ['u', 'm', '', 'k', 'M', 'G']},
    'electronvolt': {'value': '1 eV', 'prefix_group': 'LONG',
                     'format_prefixes': ['micro', 'milli', '', 'kilo',
                                         'mega', 'giga'],
                     'aliases': ['electronvolts']},

    # -- Power ---------------------------------------------------------

    'W': {'value': '1 J/s', 'prefix_group': 'SHORT',
          'format_prefixes': ['p', 'n', 'u', 'm', '', 'k', 'M', 'G', 'T',
                              'P']},
    'watt': {'value': '1 W', 'prefix_group': 'LONG',
             'format_prefixes': ['pico', 'nano', 'micro', 'milli', '',
                                 'kilo', 'mega', 'tera', 'peta'],
             'aliases': ['watts']},
    'hp': {'value': '550 ft lbf / s'},
    'VA': {'value': '1 W', 'prefix_group': 'SHORT',
           'format_prefixes': ['', 'k']},

    # -- Pressure ------------------------------------------------------

    'Pa': {'value': '1 N / m^2', 'prefix_group': 'SHORT',
           'format_prefixes': ['', 'k', 'M', 'G']},
    'psi': {'value': '1 lbf/in^2'},  # kpsi is sometimes used.
    'atm': {'value': '101325 Pa'},
    'bar': {'value': '1e5 Pa', 'prefix_group': 'SHORT_LONG',
            'format_prefixes': ['m', '']},
    'torr': {'value': '133.32236842105263 Pa', 'prefix_group': 'LONG',
             'format_prefixes': ['milli', '']},
    'Torr': {'value': '1 torr', 'prefix_group': 'SHORT',
             'format_prefixes': ['m', '']},
    'mmHg': {'value': '133.322387415 Pa', 'aliases': ['mmhg']},
    'inH2O': {'value': '249.082 Pa', 'aliases': ['inh2o', 'inAq']},

    # -- Electrical ----------------------------------------------------

    'C': {'value': '1 A s', 'prefix_group': 'SHORT',
          'format_prefixes': ['p', 'n', 'u', 'm', '']},
    'coulomb': {'value': '1 C', 'prefix_group': 'LONG',
                'format_prefixes': ['pico', 'nano', 'micro', 'milli', ''],
                'aliases': ['coulombs']},
    'V': {'value': '1 W/A', 'prefix_group': 'SHORT',
          'format_prefixes': ['m', '', 'k', 'M']},
    'volt': {'value': '1 V', 'prefix_group': 'LONG',
             'format_prefixes': ['milli', '', 'kilo', 'mega'],
             'aliases': ['volts']},
    'F': {'value': '1 C/V', 'prefix_group': 'SHORT',
          'format_prefixes': ['p', 'n', 'u', 'm', '']},
    'farad': {'value': '1 F', 'prefix_group': 'LONG',
              'format_prefixes': ['pico', 'nano', 'micro', 'milli', ''],
              'aliases': ['farads']},
    'ohm': {'value': '1 V/A', 'prefix_group': 'SHORT_LONG',
            'format_prefixes': ['', 'k', 'M'], 'aliases': ['ohms']},
    'H': {'value': '1 V s / A', 'prefix_group': 'SHORT',
          'format_prefixes': ['u', 'm', '']},
    'henry': {'value': '1 H', 'prefix_group': 'LONG',
              'format_prefixes': ['micro', 'milli', ''],
              'aliases': ['henries']},
    'S': {'value': '1 / ohm', 'prefix_group': 'SHORT',
          'format_prefixes': ['u', 'm', '']},
    'siemens': {'value': '1 S', 'prefix_group': 'LONG',
                'format_prefixes': ['micro', 'milli', '']},

    # -- Magnetic ------------------------------------------------------

    'Wb': {'value': '1 V s', 'prefix_group': 'SHORT',
           'format_prefixes': ['n', 'u', 'm', '']},
    'weber': {'value': '1 Wb', 'prefix_group': 'LONG',
              'format_prefixes': ['nano', 'micro', 'milli', ''],
              'aliases': ['webers']},
    'T': {'value': '1 N s / C m', 'prefix_group': 'SHORT',
          'format_prefixes': ['n', 'u', 'm', '']},
    'tesla': {'value': '1 T', 'prefix_group': 'LONG',
              'format_prefixes': ['nano', 'micro', 'milli', ''],
              'aliases': ['teslas']},

    # -- Binary --------------------------------------------------------

    'b': {'quantity': 'BIT', 'value': 1, 'prefix_group': 'BINARY_SHORT'},
    'bits': {'value': '1 b', 'prefix_group': 'BINARY_LONG',
             'aliases': ['bit']},
    'B': {'value': '8 b', 'prefix_group': 'BINARY_SHORT'},
    'bytes': {'value': '1 B', 'prefix_group': 'BINARY_LONG',
              'aliases': ['byte']},
}

# == Unit Systems ======================================================

# Units conventionally used with each system, in order of preference.
SYSTEMS = {
    'si': ['m', 'meter', 's', 'A', 'kg', 'K', 'mol', 'rad', 'b', 'F', 'C',
           'S', 'V', 'J', 'N', 'Hz', 'ohm', 'H', 'cd', 'lm', 'lx', 'Wb',
           'T', 'W', 'Pa', 'ohm', 'sr'],
    'cgs': ['cm', 's', 'A', 'g', 'K', 'mol', 'rad', 'b', 'F', 'C', 'S', 'V',
            'erg', 'dyn', 'Hz', 'ohm', 'H', 'cd', 'lm', 'lx', 'Wb', 'T',
            'Pa', 'ohm', 'sr'],
    'us': ['ft', 'mi', 'mile', 'in', 'inch', 's', 'A', 'lbm', 'degF',
           'mol', 'rad', 'b', 'F', 'C', 'S', 'V', 'BTU', 'lbf', 'Hz', 'ohm',
           'H', 'cd', 'lm', 'lx', 'Wb', 'T', 'psi', 'ohm', 'sr', 'hp'],
}
