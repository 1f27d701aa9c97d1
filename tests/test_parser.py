"""Unit tests for parser module."""

import unittest

from parfrac_pkg.parser import (
    coefficient_value,
    extract_coefficients,
    format_number,
    polynomial_coefficients,
    split_fraction,
    validate_input,
)
from parfrac_pkg.types import Coefficient, MalformedInputError


class TestSplitFraction(unittest.TestCase):
    """Test fraction splitting."""

    def test_bare_fraction(self):
        self.assertEqual(
            split_fraction(r"\frac{5x + 3}{(x + 2)(x - 2)}"),
            ("5x + 3", "(x + 2)(x - 2)"),
        )

    def test_surrounding_latex_is_ignored(self):
        numerator, denominator = split_fraction(
            r"\int \frac{ 5x + 3 }{ (x + 2)(x - 2) } ~\mathrm{d}x"
        )
        self.assertEqual(numerator, "5x + 3")
        self.assertEqual(denominator, "(x + 2)(x - 2)")

    def test_first_fraction_wins(self):
        numerator, denominator = split_fraction(r"\frac{1}{x} + \frac{2}{y}")
        self.assertEqual((numerator, denominator), ("1", "x"))

    def test_missing_fraction(self):
        with self.assertRaises(MalformedInputError) as ctx:
            split_fraction("5x + 3")
        self.assertEqual(ctx.exception.code, "NO_FRACTION")


class TestValidateInput(unittest.TestCase):
    """Test input validation."""

    def test_empty_input(self):
        with self.assertRaises(MalformedInputError) as ctx:
            validate_input("   ")
        self.assertEqual(ctx.exception.code, "EMPTY_INPUT")

    def test_too_long_input(self):
        from parfrac_pkg.config import MAX_INPUT_LENGTH

        with self.assertRaises(MalformedInputError) as ctx:
            validate_input("x" * (MAX_INPUT_LENGTH + 1))
        self.assertEqual(ctx.exception.code, "TOO_LONG")


class TestExtractCoefficients(unittest.TestCase):
    """Test numerator tokenizing."""

    def test_linear_numerator(self):
        self.assertEqual(
            extract_coefficients("12x + 3"),
            [Coefficient(power=1, value="+12"), Coefficient(power=0, value="+3")],
        )

    def test_implicit_coefficient_and_sign(self):
        self.assertEqual(
            extract_coefficients("-x - 7"),
            [Coefficient(power=1, value="-1"), Coefficient(power=0, value="-7")],
        )

    def test_explicit_exponent(self):
        self.assertEqual(
            extract_coefficients("x^2 + 4"),
            [Coefficient(power=2, value="+1"), Coefficient(power=0, value="+4")],
        )

    def test_braced_exponent_and_decimal(self):
        self.assertEqual(
            extract_coefficients("2.5x^{3}"),
            [Coefficient(power=3, value="+2.5")],
        )

    def test_unreadable_term_is_dropped(self):
        self.assertEqual(extract_coefficients("3 + *"), [Coefficient(power=0, value="+3")])

    def test_duplicate_powers_are_kept_in_order(self):
        coefficients = extract_coefficients("2x + 3x")
        self.assertEqual(
            coefficients,
            [Coefficient(power=1, value="+2"), Coefficient(power=1, value="+3")],
        )
        # Lookup returns the first match, duplicates are not summed
        self.assertEqual(coefficient_value(coefficients, 1), 2.0)

    def test_missing_power_defaults_to_zero(self):
        self.assertEqual(coefficient_value(extract_coefficients("7"), 1), 0.0)


class TestPolynomialCoefficients(unittest.TestCase):
    """Test second-degree polynomial reading."""

    def test_full_quadratic(self):
        self.assertEqual(polynomial_coefficients("x^2 - 4x + 2"), (1.0, -4.0, 2.0))

    def test_negative_leading_term(self):
        self.assertEqual(polynomial_coefficients("-x^2 + 9"), (-1.0, 0.0, 9.0))

    def test_linear_polynomial(self):
        self.assertEqual(polynomial_coefficients("2x - 4"), (0.0, 2.0, -4.0))

    def test_cubic_is_rejected(self):
        with self.assertRaises(MalformedInputError) as ctx:
            polynomial_coefficients("x^3 + 1")
        self.assertEqual(ctx.exception.code, "BAD_POLYNOMIAL")

    def test_non_numeric_term_is_rejected(self):
        with self.assertRaises(MalformedInputError):
            polynomial_coefficients("y + 1")


class TestFormatNumber(unittest.TestCase):
    """Test number formatting."""

    def test_integral_values(self):
        self.assertEqual(format_number(2.0), "2")
        self.assertEqual(format_number(-0.0), "0")

    def test_shortest_round_trip(self):
        self.assertEqual(format_number(1.75), "1.75")
        self.assertEqual(float(format_number(2 ** 0.5)), 2 ** 0.5)

    def test_precision(self):
        self.assertEqual(format_number(2 / 3, precision=4), "0.6667")


if __name__ == "__main__":
    unittest.main()
