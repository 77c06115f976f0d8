import math
from unittest import TestCase


# ======================================================================

class TestFormatNumber(TestCase):
    def test_format_number(self):
        from decimal import Decimal
        from pyunitmath import format_number

        for x, result in [(8.0, '8'), (8, '8'), (0.25, '0.25'), (-3.5, '-3.5'),
                          (123456789012.5, '123456789012.5'),
                          (1e20, '100000000000000000000'), (1e21, '1e+21'),
                          (1e-7, '1e-7'), (4e-6, '4e-6'),
                          (1.5e300, '1.5e+300'), (math.nan, 'NaN'),
                          (math.inf, 'Infinity'), (-math.inf, '-Infinity')]:
            with self.subTest(x=x):
                self.assertEqual(format_number(x), result)

        # Anything else uses str().
        self.assertEqual(format_number(Decimal('1.50')), '1.50')
        self.assertEqual(format_number(True), 'True')

    def test_format_value(self):
        from pyunitmath import format_number
        from pyunitmath._format import format_value

        self.assertEqual(format_value(2 / 3, 3, format_number), '0.667')
        self.assertEqual(format_value(2 / 3, 0, format_number),
                         '0.6666666666666666')
        self.assertEqual(format_value(0.1 + 0.2, 15, format_number), '0.3')
        self.assertEqual(format_value(math.nan, 15, format_number), 'NaN')

        # Other formatters receive the value unrounded.
        self.assertEqual(format_value(2 / 3, 3, repr), '0.6666666666666666')

    def test_format_units(self):
        from pyunitmath import unit
        from pyunitmath._format import format_units

        for text, result in [('m', 'm'), ('kg m / s^2', 'kg m / s^2'),
                             ('kg m^2 / s^2 K mol', 'kg m^2 / s^2 K mol'),
                             ('s^-2', 's^-2'), ('1 / m s', 'm^-1 s^-1'),
                             ('m^0.5', 'm^0.5'), ('N / s^1.5', 'N / s^1.5'),
                             ('', '')]:
            with self.subTest(text=text):
                unit_list = unit.store.parse(text).unit_list
                self.assertEqual(format_units(unit_list), result)

        unit_list = unit.store.parse('kg m^2 / s^2 mol').unit_list
        self.assertEqual(format_units(unit_list, parentheses=True),
                         '(kg m^2) / (s^2 mol)')


# ----------------------------------------------------------------------

class TestUnitStrings(TestCase):
    def test_str(self):
        from pyunitmath import unit

        for text, result in [('5 m', '5 m'), ('5m', '5 m'),
                             ('5 kg m/s^2', '5 kg m / s^2'),
                             ('1000 m', '1000 m'), ('m / s', 'm / s'),
                             ('123456789 m', '123456789 m'),
                             ('1e+21 m', '1e+21 m'), ('2', '2'),
                             ('NaN m', 'NaN m'), ('Infinity m', 'Infinity m'),
                             ('-Infinity kg', '-Infinity kg')]:
            with self.subTest(text=text):
                self.assertEqual(str(unit(text)), result)
                self.assertEqual(unit(text).to_string(), result)

        self.assertEqual(str(unit()), '')

    def test_precision(self):
        from pyunitmath import unit

        x = unit(2 / 3, 'm')
        self.assertEqual(str(x), '0.666666666666667 m')
        self.assertEqual(x.to_string(precision=3), '0.667 m')
        self.assertEqual(x.to_string(precision=1), '0.7 m')
        self.assertEqual(x.to_string(precision=10), '0.6666666667 m')
        self.assertEqual(x.to_string(precision=0), '0.6666666666666666 m')
        self.assertEqual(str(unit.config(precision=3)(2 / 3, 'm')),
                         '0.667 m')

        # Round-off is hidden at the default precision.
        self.assertEqual(str(unit('0.1 m').add('0.2 m')), '0.3 m')

    def test_value_of(self):
        from pyunitmath import unit

        self.assertEqual(unit(2 / 3, 'm').value_of(), '0.6666666666666666 m')
        unit_par = unit.config(parentheses=True, precision=3)
        self.assertEqual(unit_par('0.1234567 kg m / s^2').value_of(),
                         '0.1234567 kg m / s^2')

    def test_parentheses(self):
        from pyunitmath import unit

        self.assertEqual(unit('kg m / s^2').to_string(parentheses=True),
                         '(kg m) / s^2')
        self.assertEqual(unit('8.314 J / mol K').to_string(parentheses=True),
                         '8.314 J / (mol K)')
        self.assertEqual(unit('m / s').to_string(parentheses=True), 'm / s')

        unit_par = unit.config(parentheses=True)
        self.assertEqual(str(unit_par('8.314 J / mol K')),
                         '8.314 J / (mol K)')

    def test_custom_formatter(self):
        from pyunitmath import unit

        def funny_format(a):
            return '$' + '_'.join(reversed(str(a)))

        unit_funny = unit.config(formatter=funny_format)
        self.assertEqual(str(unit_funny('3.14159 rad')), '$9_5_1_4_1_._3 rad')
        self.assertEqual(unit('3.14159 rad').to_string(formatter=funny_format),
                         '$9_5_1_4_1_._3 rad')

    def test_format_builtin(self):
        from pyunitmath import unit

        x = unit('3.14159 m / s')
        self.assertEqual(f"{x}", '3.14159 m / s')
        self.assertEqual(f"{x:.2f}", '3.14 m / s')
        self.assertEqual(f"{x:>8.3f}", '   3.142 m / s')
        self.assertEqual(f"{unit(5, ''):.1f}", '5.0')
        self.assertEqual(f"{unit('m'):.2f}", 'm')

    def test_repr(self):
        from pyunitmath import unit

        self.assertEqual(repr(unit('5.5 m')), "unit(5.5, 'm')")
        self.assertEqual(repr(unit('km / hr')), "unit(None, 'km / hr')")
        self.assertTrue(repr(unit).startswith('UnitFactory('))
