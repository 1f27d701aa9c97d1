"""Unit tests for the SymPy cross-check."""

import unittest

import sympy as sp

from parfrac_pkg.partial_fraction import PartialFraction
from parfrac_pkg.types import UnsupportedTypeError
from parfrac_pkg.verify import X, reference_decomposition, to_sympy, verify_constants


class TestToSympy(unittest.TestCase):
    """Test parsing the engine's LaTeX subset."""

    def test_product_of_factors(self):
        self.assertEqual(sp.expand(to_sympy("(x + 2)(x - 2)")), X**2 - 4)

    def test_implicit_multiplication_and_exponent(self):
        self.assertEqual(to_sympy("5x + 3"), 5 * X + 3)
        self.assertEqual(to_sympy("x^{2} + 4"), X**2 + 4)


class TestVerifyConstants(unittest.TestCase):
    """Test that solved constants match the original fraction."""

    def test_linear(self):
        pf = PartialFraction(r"\frac{5x + 3}{(x + 2)(x - 2)}")
        self.assertTrue(verify_constants(pf))

    def test_implicit_irrational_roots(self):
        pf = PartialFraction(r"\frac{x + 1}{x^2 - 4x + 2}")
        self.assertTrue(verify_constants(pf))

    def test_quadratic(self):
        pf = PartialFraction(r"\frac{2x + 1}{(x^2 + 1)(x^2 + 4)}")
        self.assertTrue(verify_constants(pf))

    def test_quadratic_with_real_roots(self):
        pf = PartialFraction(r"\frac{x - 3}{(x^2 - 4)(x^2 + 1)}")
        self.assertTrue(verify_constants(pf))

    def test_scaled_denominators(self):
        for expression in (
            r"\frac{1}{2x^2 - 2}",
            r"\frac{1}{-x^2 + 4}",
            r"\frac{3}{2(x - 1)(x + 1)}",
            r"\frac{2x + 1}{4(x^2 + 1)(x^2 + 4)}",
        ):
            with self.subTest(expression=expression):
                self.assertTrue(verify_constants(PartialFraction(expression)))

    def test_bare_x_factor(self):
        pf = PartialFraction(r"\frac{1}{x(x - 1)}")
        self.assertTrue(verify_constants(pf))

    def test_mixed_is_rejected(self):
        pf = PartialFraction(r"\frac{1}{(x - 1)(x^2 + 1)}")
        with self.assertRaises(UnsupportedTypeError):
            verify_constants(pf)


class TestReferenceDecomposition(unittest.TestCase):
    """Test SymPy's own decomposition output."""

    def test_linear(self):
        pf = PartialFraction(r"\frac{5x + 3}{(x + 2)(x - 2)}")
        reference = reference_decomposition(pf)
        self.assertIsNotNone(reference)
        self.assertIn("x - 2", reference)


if __name__ == "__main__":
    unittest.main()
