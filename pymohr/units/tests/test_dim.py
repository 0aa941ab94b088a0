from unittest import TestCase

import numpy as np


# noinspection PyUnusedLocal
class TestDim(TestCase):
    def test___init__(self):
        from pymohr.units import dim, Dim

        # Test no arguments:  Value = 1, no units.
        x = dim()
        self.assertEqual(x.value, 1)
        self.assertIsInstance(x.value, int)
        self.assertEqual(x.units, '')

        # Test one positional argument: Dimensionless.
        x = dim(3)
        self.assertEqual(x.value, 3)
        self.assertEqual(x.units, '')

        # Test one positional argument: Units only.
        x = dim('MPa')
        self.assertEqual(x.value, 1)
        self.assertEqual(x.units, 'MPa')

        # Test Dim argument, with and without conversion.
        y = dim(x)
        self.assertIs(y, x)
        y = dim(x, 'kPa')
        self.assertIsInstance(y, Dim)
        self.assertAlmostEqual(y.value, 1000)
        self.assertEqual(y.units, 'kPa')

        # Test unknown units.
        with self.assertRaises(ValueError):
            x = dim(1, 'furlong')

        # Test string value warns.
        with self.assertWarns(UserWarning):
            x = dim('3', 'MPa')

    def test___add__(self):
        # Also tests __radd__
        from pymohr.units import dim

        x, y = dim('MPa'), dim(1000, 'kPa')
        x_p_y = x + y
        self.assertAlmostEqual(x_p_y.value, 2)
        self.assertEqual(x_p_y.units, 'MPa')

        x = 5 + dim(1, '')  # __radd__ for dimensionless.
        self.assertEqual(x, dim(6))

        # Test addition of incompatible units disallowed.
        with self.assertRaises(ValueError):
            x = dim(10, 'MPa') + 5

        with self.assertRaises(ValueError):
            x = 2 + dim(2, 'MPa')  # __radd__ check.

    def test___sub__(self):
        # Also tests __rsub__
        from pymohr.units import dim

        x = dim(1, 'MPa') - dim(250, 'kPa')
        self.assertAlmostEqual(x.value, 0.75)
        self.assertEqual(x.units, 'MPa')

        x = 5 - dim(1, '')
        self.assertEqual(x.value, 4)

    def test___mul__(self):
        # Also tests __rmul__, __truediv__
        from pymohr.units import dim

        x = dim(3, 'MPa') * 2
        self.assertEqual(x, dim(6, 'MPa'))
        x = 2 * dim(3, 'MPa')
        self.assertEqual(x, dim(6, 'MPa'))

        x = dim(3, 'MPa') / 2
        self.assertEqual(x, dim(1.5, 'MPa'))
        x = dim(3, 'MPa') / dim(1500, 'kPa')
        self.assertNotIsInstance(x, tuple)
        self.assertAlmostEqual(x, 2.0)

        with self.assertRaises(TypeError):
            x = dim(3, 'MPa') * dim(2, 'MPa')

    def test_unary(self):
        from pymohr.units import dim

        x = dim(-3, 'MPa')
        self.assertEqual(abs(x), dim(3, 'MPa'))
        self.assertEqual(-x, dim(3, 'MPa'))
        self.assertIs(+x, x)
        self.assertEqual(round(dim(1.2345, 'MPa'), 2), dim(1.23, 'MPa'))
        self.assertEqual(float(x), -3.0)

    def test_comparison(self):
        from pymohr.units import dim

        self.assertTrue(dim(1, 'GPa') > dim(999, 'MPa'))
        self.assertTrue(dim(1, 'MPa') >= dim(1000, 'kPa'))
        self.assertTrue(dim(1, 'kPa') < dim(1, 'MPa'))
        self.assertTrue(dim(1, 'MPa') == dim(1e6, 'Pa'))
        self.assertTrue(dim(1, 'MPa') != dim(1, 'kPa'))

        # Unrelated types are never equal.
        self.assertFalse(dim(1, 'MPa') == 'abc')
        self.assertTrue(dim(1, 'MPa') != 'abc')

        with self.assertRaises(ValueError):
            x = dim(1, 'MPa') < 2

    def test_format(self):
        from pymohr.units import dim

        self.assertEqual(str(dim(2.5, 'MPa')), '2.5 MPa')
        self.assertEqual(f"{dim(2.345, 'MPa'):.1f}", '2.3 MPa')
        self.assertEqual(repr(dim(2.5, 'MPa')), "dim(2.5, 'MPa')")

    def test___hash__(self):
        from pymohr.units import dim

        # Equal values in different units must not hash differently.
        self.assertEqual(dim(1, 'MPa'), dim(1000, 'kPa'))
        with self.assertRaises(TypeError):
            hash(dim(1, 'MPa'))
        with self.assertRaises(TypeError):
            x = {dim(1, 'MPa'), dim(1000, 'kPa')}

    def test_convert(self):
        from pymohr.units import convert, dim

        x = dim(1, 'ksi')
        self.assertAlmostEqual(x.convert('MPa').value, 6.894757, places=6)
        self.assertAlmostEqual(x.to_real('psi'), 1000)
        self.assertEqual(x.to_real(), 1)
        self.assertEqual(x.kind(), 'pressure')
        self.assertFalse(x.is_dimless())
        self.assertTrue(dim(2).is_dimless())

        # Plain values and arrays.
        self.assertEqual(convert(2.5, 'MPa', 'MPa'), 2.5)
        self.assertAlmostEqual(convert(2.5, 'MPa', 'N/mm^2'), 2.5)
        np.testing.assert_allclose(convert([1, 2], 'bar', 'kPa'),
                                   [100, 200])

        with self.assertRaises(ValueError):
            convert(1, 'MPa', '')
        with self.assertRaises(ValueError):
            convert(1, 'MPa', 'furlong')

    def test_add_unit(self):
        from pymohr.units import add_unit, dim, is_unit

        self.assertFalse(is_unit('test_Pa'))
        add_unit('test_Pa', 'pressure', 1.0)
        self.assertTrue(is_unit('test_Pa'))
        self.assertAlmostEqual(dim(1, 'MPa').to_real('test_Pa'), 1e6)

        with self.assertRaises(ValueError):
            add_unit('MPa', 'pressure', 1e6)  # Duplicate.
        with self.assertRaises(ValueError):
            add_unit('bad_Pa', 'pressure', 0.0)
