from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal
from unittest import TestCase

from pytest import approx


def _dec(a):
    if not isinstance(a, Decimal):
        raise AssertionError(f"Expected Decimal, got: {a!r}")
    return a


def _decimal_type(*omit):
    """
    Returns a mapping of Decimal operations for ``unit.config(type=...)``
    leaving out the operations named in `omit`.  Every operation except
    ``conv`` checks that it only receives Decimals.
    """
    ops = {
        'conv': lambda a: Decimal(repr(a)) if isinstance(a, float)
        else Decimal(a),
        'clone': lambda a: Decimal(_dec(a)),
        'add': lambda a, b: _dec(a) + _dec(b),
        'sub': lambda a, b: _dec(a) - _dec(b),
        'mul': lambda a, b: _dec(a) * _dec(b),
        'div': lambda a, b: _dec(a) / _dec(b),
        'pow': lambda a, b: _dec(a) ** _dec(b),
        'eq': lambda a, b: _dec(a) == _dec(b),
        'lt': lambda a, b: _dec(a) < _dec(b),
        'le': lambda a, b: _dec(a) <= _dec(b),
        'gt': lambda a, b: _dec(a) > _dec(b),
        'ge': lambda a, b: _dec(a) >= _dec(b),
        'abs': lambda a: abs(_dec(a)),
        'round': lambda a: _dec(a).to_integral_value(ROUND_HALF_UP),
        'trunc': lambda a: _dec(a).to_integral_value(ROUND_DOWN)}
    for name in omit:
        del ops[name]
    return ops


def _unit_dec(*omit, **options):
    from pyunitmath import unit
    return unit.config(type=_decimal_type(*omit), **options)


# ======================================================================

class TestNumericType(TestCase):
    def test_float_defaults(self):
        from pyunitmath import NumericType
        from pyunitmath._numeric import FLOAT_OPS

        t = NumericType()
        self.assertFalse(t.is_custom)
        self.assertEqual(t.resolve(), FLOAT_OPS)
        t.validate(auto_prefix=True)

    def test_float_ops(self):
        import math
        from pyunitmath._numeric import FLOAT_OPS as ops

        self.assertEqual(ops.conv('2.5'), 2.5)
        self.assertEqual(ops.conv(3), 3)
        self.assertEqual(ops.div(1, 4), 0.25)
        self.assertEqual(ops.div(1, 0), math.inf)
        self.assertTrue(math.isnan(ops.div(0, 0)))
        self.assertEqual(ops.pow(2, 10), 1024)

        # Relative tolerance.
        self.assertTrue(ops.eq(0.1 + 0.2, 0.3))
        self.assertFalse(ops.eq(1, 1.0001))
        self.assertTrue(ops.eq(0, 0))

        # Halves round up.
        for x, rounded in [(2.5, 3), (-2.5, -2), (2.4, 2), (-2.6, -3)]:
            with self.subTest(x=x):
                self.assertEqual(ops.round(x), rounded)
        self.assertEqual(ops.trunc(-2.7), -2)
        self.assertEqual(ops.trunc(2.7), 2)

    def test_merge(self):
        from pyunitmath import NumericType, UnitConfigError

        t = NumericType().merge({'add': lambda a, b: a + b})
        self.assertTrue(t.is_overridden('add'))
        self.assertFalse(t.is_overridden('sub'))
        self.assertIs(NumericType().merge(None).is_custom, False)

        with self.assertRaisesRegex(UnitConfigError,
                                    'Unknown numeric type functions'):
            NumericType().merge({'modulo': lambda a, b: a % b})

        with self.assertRaisesRegex(UnitConfigError, 'must be callable'):
            NumericType(add=42)

    def test_validate(self):
        from pyunitmath import UnitConfigError

        with self.assertRaisesRegex(
                UnitConfigError,
                'You must supply all required custom type functions'):
            _unit_dec('pow')

        with self.assertRaisesRegex(UnitConfigError,
                                    'required when auto_prefix is True'):
            _unit_dec('gt')

        # Comparisons are not needed without prefix selection.
        unit_dec = _unit_dec('gt', auto_prefix=False)
        self.assertIsInstance(unit_dec('3 m').value, Decimal)

        # Type given as a dataclass.
        from pyunitmath import NumericType, unit
        unit_dec = unit.config(type=NumericType(**_decimal_type()))
        self.assertTrue(unit_dec.get_config().type.is_custom)

    def test_requires(self):
        from pyunitmath import UnitConfigError

        unit_no_comp = _unit_dec('eq', 'lt', 'le', 'gt', 'ge',
                                 auto_prefix=False)
        x = unit_no_comp('3 m')
        for method, msg in [
                ('equals', 'equals requires a type.eq function'),
                ('compare', 'compare requires a type.gt and a type.lt '
                            'function'),
                ('less_than', 'less_than requires a type.lt function'),
                ('less_than_or_equal',
                 'less_than_or_equal requires a type.le function'),
                ('greater_than', 'greater_than requires a type.gt function'),
                ('greater_than_or_equal',
                 'greater_than_or_equal requires a type.ge function')]:
            with self.subTest(method=method):
                with self.assertRaisesRegex(
                        UnitConfigError, 'When using custom types, ' + msg):
                    getattr(x, method)('4 m')

        unit_no_round = _unit_dec('round')
        with self.assertRaisesRegex(
                UnitConfigError, 'When using custom types, split requires '
                                 'a type.round and a type.trunc function'):
            unit_no_round('3 m').split(['ft', 'in'])


# ----------------------------------------------------------------------

class TestDecimalUnits(TestCase):
    def setUp(self):
        self.unit_dec = _unit_dec()

    def test_construct(self):
        unit_dec = self.unit_dec

        x = unit_dec('3.14159265358979323846 rad')
        self.assertIsInstance(x.value, Decimal)
        self.assertEqual(x.value, Decimal('3.14159265358979323846'))
        self.assertEqual(str(x), '3.14159265358979323846 rad')

        self.assertIsInstance(unit_dec(3.1415, 'rad').value, Decimal)
        self.assertEqual(unit_dec(3.1415, 'rad').value, Decimal('3.1415'))
        x = unit_dec(Decimal('3.14159265358979323846'), 'rad')
        self.assertEqual(x.value, Decimal('3.14159265358979323846'))

        # Custom values may be given on their own.
        self.assertEqual(unit_dec(Decimal(3)).value, 3)

        x = unit_dec('rad')
        self.assertIsNone(x.value)
        self.assertEqual(str(x), 'rad')

    def test_construct_bad_string(self):
        from pyunitmath import UnitTypeError

        with self.assertRaisesRegex(UnitTypeError, 'is not a number'):
            self.unit_dec('abc', 'rad')

    def test_arithmetic(self):
        unit_dec = self.unit_dec
        u1 = unit_dec('0.3333333333333333333333 kg/m^3')
        u2 = unit_dec('0.6666666666666666666666 kg/m^3')

        u3 = u1.add(u2)
        self.assertIsInstance(u3.value, Decimal)
        self.assertEqual(u3.value, Decimal('0.9999999999999999999999'))

        u3 = u1.sub(u2)
        self.assertEqual(u3.value, Decimal('-0.3333333333333333333333'))

        u3 = u1.mul(unit_dec('3 m^3'))
        self.assertIsInstance(u3.value, Decimal)
        self.assertEqual(u3.value, Decimal('0.9999999999999999999999'))
        self.assertEqual(str(u3.get_units()), 'kg')

        u3 = unit_dec('1 kg').div(unit_dec('3 m^3'))
        self.assertEqual(u3.value, Decimal(1) / Decimal(3))
        self.assertEqual(str(u3.get_units()), 'kg / m^3')

    def test_pow_sqrt(self):
        unit_dec = self.unit_dec

        x = unit_dec('11 s').pow(30)
        self.assertIsInstance(x.value, Decimal)
        self.assertEqual(x.value, Decimal(11) ** 30)
        self.assertEqual(str(x.get_units()), 's^30')

        x = unit_dec('64 m^2/s^2').sqrt()
        self.assertEqual(x.value, 8)
        self.assertEqual(str(x.get_units()), 'm / s')

        x = unit_dec('2 W').sqrt()
        self.assertEqual(x.value, Decimal(2).sqrt())
        self.assertEqual(str(x.get_units()), 'W^0.5')

    def test_abs(self):
        x = self.unit_dec('-5 m').abs()
        self.assertIsInstance(x.value, Decimal)
        self.assertEqual(x.value, Decimal('5'))

    def test_split(self):
        unit_dec = self.unit_dec

        ft, inch = unit_dec(1, 'm').split(['ft', 'in'])
        self.assertIsInstance(ft.value, Decimal)
        self.assertEqual(ft.value, 3)
        assert float(inch.value) == approx(3.37007874015748)

        ft, inch = unit_dec(-1, 'm').split(['ft', 'in'])
        self.assertEqual(ft.value, -3)
        assert float(inch.value) == approx(-3.37007874015748)

        mi, ft, inch = unit_dec(10, 'km').split(['mi', 'ft', 'in'])
        self.assertEqual((mi.value, ft.value), (6, 1128))
        assert float(inch.value) == approx(4.78740157480315)

        ft, inch = unit_dec(100, 'in').split(['ft', 'in'])
        self.assertEqual(ft.value, 8)
        assert float(inch.value) == approx(4)

    def test_equals(self):
        unit_dec = self.unit_dec

        self.assertTrue(unit_dec(100, 'cm').equals(unit_dec(1, 'm')))
        self.assertFalse(unit_dec(100, 'cm').equals(unit_dec(2, 'm')))
        self.assertFalse(unit_dec(100, 'cm').equals(unit_dec(1, 'kg')))
        self.assertTrue(unit_dec(100, 'ft lbf').equals(
            unit_dec(1200, 'in lbf')))
        self.assertTrue(unit_dec(100, 'N').equals(
            unit_dec(100, 'kg m / s ^ 2')))
        self.assertFalse(unit_dec(100, 'N').equals(
            unit_dec(100, 'kg m / s')))
        self.assertTrue(unit_dec(100, 'Hz').equals(unit_dec(100, 's ^ -1')))

        self.assertTrue(unit_dec('cm').equals(unit_dec('cm')))
        self.assertFalse(unit_dec('cm').equals(unit_dec('m')))
        self.assertTrue(unit_dec(100, 'cm').equals('1 m'))
        self.assertTrue(unit_dec('3 kg / kg').equals(Decimal(3)))

    def test_comparisons(self):
        unit_dec = self.unit_dec

        self.assertTrue(unit_dec('10 m').less_than('1 km'))
        self.assertTrue(unit_dec('5 km').less_than_or_equal('500000 cm'))
        self.assertTrue(unit_dec('5 N').greater_than('5 dyne'))
        self.assertTrue(unit_dec('10 kg').greater_than_or_equal('1 kg'))
        self.assertEqual(unit_dec('60 min').compare('2 hour'), -1)
        self.assertEqual(unit_dec('60 min').compare('1 hour'), 0)
        self.assertEqual(unit_dec('60 min').compare('0.5 hour'), 1)

    def test_set_value(self):
        x = self.unit_dec('64 m^2/s^2').set_value(Decimal(10))
        self.assertEqual(x.value, 10)
        x = self.unit_dec('64 m^2/s^2').set_value(
            '1.414213562373095048801688724')
        self.assertIsInstance(x.value, Decimal)
        self.assertEqual(str(x), '1.414213562373095048801688724 m^2 / s^2')

    def test_conversion(self):
        x = self.unit_dec('1 ft').to('in')
        self.assertIsInstance(x.value, Decimal)
        self.assertEqual(x.value, 12)

        x = self.unit_dec('100 degC').to('degF')
        self.assertIsInstance(x.value, Decimal)
        self.assertAlmostEqual(float(x.value), 212)

    def test_best_prefix(self):
        unit_dec = self.unit_dec

        for text, value, units in [('0.000001 m', 1, 'um'),
                                   ('0.00001 m', 10, 'um'),
                                   ('0.0005 m', Decimal('0.5'), 'mm'),
                                   ('0.0006 m', Decimal('0.6'), 'mm'),
                                   ('0.001 m', Decimal('0.1'), 'cm'),
                                   ('0.01 m', 1, 'cm'),
                                   ('100000 m', 100, 'km'),
                                   ('500000 m', 500, 'km'),
                                   ('1000000 m', 1000, 'km'),
                                   ('10000000 m', 10000, 'km'),
                                   ('2000 ohm', 2, 'kohm')]:
            with self.subTest(text=text):
                x = unit_dec(text).simplify()
                self.assertIsInstance(x.value, Decimal)
                self.assertEqual(x.value, value)
                self.assertEqual(str(x.get_units()), units)

        x = unit_dec('1232123212321232123212321 m').simplify()
        self.assertEqual(x.value, Decimal('1232123212321232123212.321'))
        self.assertEqual(str(x.get_units()), 'km')
