import math
import unittest
from decimal import Decimal
from fractions import Fraction

from horner import numeric


class TestNumeric(unittest.TestCase):
    def test_zero_of(self):
        self.assertIs(type(numeric.zero_of(5)), int)
        self.assertEqual(numeric.zero_of(5), 0)
        self.assertIs(type(numeric.zero_of(-2.5)), float)
        self.assertEqual(numeric.zero_of(-2.5), 0.0)
        self.assertEqual(numeric.zero_of(Fraction(3, 4)), Fraction(0))
        self.assertEqual(numeric.zero_of(Decimal("1.25")), Decimal(0))
        self.assertEqual(numeric.zero_of(3 + 4j), 0j)
        # Zero is independent of the value itself
        self.assertEqual(numeric.zero_of(float("inf")), 0.0)

    def test_multiply_accumulate(self):
        self.assertEqual(numeric.multiply_accumulate(72, 5, 81), 441)
        self.assertEqual(numeric.multiply_accumulate(2.0, -1.0, 0.5), -1.5)
        self.assertEqual(numeric.multiply_accumulate(Fraction(1, 2), Fraction(2, 3), Fraction(1, 6)), Fraction(1, 2))

    def test_fused_non_float_falls_back(self):
        self.assertEqual(numeric.fused_multiply_accumulate(72, 5, 81), 441)
        self.assertIs(type(numeric.fused_multiply_accumulate(72, 5, 81)), int)
        self.assertEqual(numeric.fused_multiply_accumulate(Decimal("0.1"), Decimal("10"), Decimal("-1")), Decimal("0.0"))

    @unittest.skipUnless(numeric.has_native_fma(), "math.fma needs Python 3.13+")
    def test_fused_single_rounding(self):
        # 0.1 * 10.0 rounds to exactly 1.0, fma keeps the representation error
        self.assertEqual(numeric.multiply_accumulate(0.1, 10.0, -1.0), 0.0)
        self.assertEqual(numeric.fused_multiply_accumulate(0.1, 10.0, -1.0), math.fma(0.1, 10.0, -1.0))
        self.assertNotEqual(numeric.fused_multiply_accumulate(0.1, 10.0, -1.0), 0.0)

    @unittest.skipIf(numeric.has_native_fma(), "only without math.fma")
    def test_fused_without_native_support(self):
        self.assertEqual(numeric.fused_multiply_accumulate(0.1, 10.0, -1.0), numeric.multiply_accumulate(0.1, 10.0, -1.0))


if __name__ == '__main__':
    unittest.main()
