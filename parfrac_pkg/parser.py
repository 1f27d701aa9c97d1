"""Input parsing module.

This module handles:
- Input validation (empty input, length limit)
- Splitting ``\\frac{A}{B}`` into numerator and denominator
- Tokenizing a numerator into signed (power, coefficient) pairs
- Reading the coefficients of a second-degree polynomial
- Number formatting for roots and solved constants
"""

from __future__ import annotations

from typing import Any

from .config import (
    FRACTION_REGEX,
    MAX_INPUT_LENGTH,
    POWER_REGEX,
    TERM_REGEX,
    TERM_SHAPE_REGEX,
    WHITESPACE_REGEX,
)
from .types import Coefficient, MalformedInputError


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a numeric value as a decimal string.

    Args:
        val: Numeric value to format
        precision: Number of significant digits; None keeps the shortest
            representation that round-trips

    Returns:
        Formatted string (integral values drop the fractional part: "2", not "2.0")
    """
    try:
        value = float(val)
    except (ValueError, TypeError):
        return str(val)
    if value.is_integer():
        return str(int(value))
    if precision:
        return f"{value:.{int(precision)}g}"
    return repr(value)


def validate_input(expression: str) -> str:
    """Reject blank or oversized input before any regex work."""
    if expression is None or not expression.strip():
        raise MalformedInputError.from_code("EMPTY_INPUT")
    if len(expression) > MAX_INPUT_LENGTH:
        raise MalformedInputError.from_code("TOO_LONG", limit=MAX_INPUT_LENGTH)
    return expression


def split_fraction(expression: str) -> tuple[str, str]:
    """Locate the first ``\\frac{A}{B}`` and return ``(A, B)`` trimmed.

    Braces are matched at a single nesting level only.

    Raises:
        MalformedInputError: If the input holds no fraction
    """
    match = FRACTION_REGEX.search(expression)
    if not match:
        raise MalformedInputError.from_code("NO_FRACTION")
    return match.group(1).strip(), match.group(2).strip()


def extract_coefficients(numerator: str) -> list[Coefficient]:
    """Tokenize a polynomial into signed (power, coefficient) pairs.

    Terms keep their order of appearance and duplicate powers are not
    merged. A term the grammar cannot read is skipped.

    Example:
        >>> extract_coefficients("12x + 3")
        [Coefficient(power=1, value='+12'), Coefficient(power=0, value='+3')]
    """
    normalized = WHITESPACE_REGEX.sub("", numerator)
    if not normalized.startswith(("+", "-")):
        normalized = "+" + normalized

    coefficients: list[Coefficient] = []
    for term in TERM_REGEX.findall(normalized):
        match = TERM_SHAPE_REGEX.search(term)
        if not match:
            continue
        sign, coeff_part, power_part, constant_part = match.groups()
        sign = "-" if sign == "-" else "+"

        if constant_part:
            coefficients.append(Coefficient(power=0, value=sign + constant_part))
            continue

        power = int(power_part) if power_part else 1
        coefficients.append(Coefficient(power=power, value=sign + (coeff_part or "1")))
    return coefficients


def coefficient_value(coefficients: list[Coefficient], power: int) -> float:
    """Return the first coefficient with the given power, or 0 if absent."""
    for coefficient in coefficients:
        if coefficient.power == power:
            return float(coefficient.value)
    return 0.0


def leading_number(text: str, term: str) -> float:
    # "" -> 1, "-" -> -1
    if text == "":
        return 1.0
    if text == "-":
        return -1.0
    try:
        return float(text)
    except ValueError:
        raise MalformedInputError.from_code("BAD_POLYNOMIAL", term=term) from None


def polynomial_coefficients(poly: str) -> tuple[float, float, float]:
    """Read ``(a, b, c)`` from a second-degree polynomial.

    Example:
        >>> polynomial_coefficients("x^2 - 4x + 2")
        (1.0, -4.0, 2.0)

    Raises:
        MalformedInputError: If a term is not a number or has a power above 2
    """
    normalized = WHITESPACE_REGEX.sub("", poly).replace("-", "+-")
    if normalized.startswith("+"):
        normalized = normalized[1:]

    found: dict[int, float] = {}
    for term in normalized.split("+"):
        if term == "":
            continue
        power_match = POWER_REGEX.search(term)
        if power_match:
            power = int(power_match.group(1))
            if power not in (0, 1, 2):
                raise MalformedInputError.from_code("BAD_POLYNOMIAL", term=term)
            found[power] = leading_number(term[: power_match.start()], term)
        elif "x" in term:
            found[1] = leading_number(term.split("x")[0], term)
        else:
            found[0] = leading_number(term, term)

    return found.get(2, 0.0), found.get(1, 0.0), found.get(0, 0.0)
