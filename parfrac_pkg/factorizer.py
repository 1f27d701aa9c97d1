"""Denominator factorization and expression classification.

Two modes:
- explicit: the denominator already lists bracketed factors, ``(x - 1)(x + 2)^{2}``
- implicit: a bare second-degree polynomial, factored with the quadratic formula
"""

from __future__ import annotations

import math

from .config import (
    FACTOR_REGEX,
    LINEAR_ROOT_REGEX,
    MULTIPLICATION_REGEX,
    OUTSIDE_FACTOR_REGEX,
    QUADRATIC_MARKER_REGEX,
    WHITESPACE_REGEX,
)
from .logging_config import get_logger
from .parser import format_number, leading_number, polynomial_coefficients
from .types import (
    LINEAR,
    MIXED,
    QUADRATIC,
    UNKNOWN,
    Factor,
    Factorization,
    MalformedInputError,
)

logger = get_logger("factorizer")


def linear_root(content: str) -> str | None:
    """Return the root of ``x ± k`` as ``∓k``, ``"0"`` for ``x``, else None."""
    normalized = WHITESPACE_REGEX.sub("", content)
    if normalized == "x":
        return "0"
    match = LINEAR_ROOT_REGEX.match(normalized)
    if not match:
        return None
    sign, value = match.groups()
    return ("-" if sign == "+" else "+") + value


def linear_factor(root: float, multiplicity: int = 1) -> Factor:
    """Build the factor ``x - root`` from a numeric root."""
    sign = "-" if root > 0 else "+"
    return Factor(
        type=LINEAR,
        content=f"x {sign} {format_number(abs(root))}",
        multiplicity=multiplicity,
        root=format_number(root),
    )


def _outside_factors(segment: str, leading: bool = False) -> tuple[float, list[Factor]]:
    """Read the text between bracketed factors: a multiplier and/or a bare ``x^n``.

    Only the text before the first bracket may carry a sign; anywhere else
    a sign means a sum, which is not a factored denominator.
    """
    text = MULTIPLICATION_REGEX.sub("", WHITESPACE_REGEX.sub("", segment))
    if not text:
        return 1.0, []
    match = OUTSIDE_FACTOR_REGEX.fullmatch(text)
    if not match or (not leading and text[0] in "+-"):
        raise MalformedInputError.from_code("BAD_POLYNOMIAL", term=segment.strip())
    number, variable, exponent = match.groups()
    scale = leading_number(number, segment.strip())
    if not variable:
        return scale, []
    multiplicity = int(exponent) if exponent else 1
    return scale, [Factor(LINEAR, "x", multiplicity, "0")]


def _bracketed_factor(content: str, multiplicity: int) -> Factor:
    if QUADRATIC_MARKER_REGEX.search(content):
        return Factor(QUADRATIC, content, multiplicity)
    return Factor(LINEAR, content, multiplicity, linear_root(content))


def _explicit_factors(denominator: str) -> tuple[float, list[Factor]]:
    matches = list(FACTOR_REGEX.finditer(denominator))
    if not matches:
        # Unclosed bracket: no factors, classified as unknown
        return 1.0, []

    scale = 1.0
    factors: list[Factor] = []
    position = 0
    for match in matches:
        multiplier, bare = _outside_factors(
            denominator[position : match.start()], leading=position == 0
        )
        scale *= multiplier
        factors.extend(bare)
        multiplicity = int(match.group(2)) if match.group(2) else 1
        factors.append(_bracketed_factor(match.group(1).strip(), multiplicity))
        position = match.end()

    multiplier, bare = _outside_factors(denominator[position:])
    scale *= multiplier
    factors.extend(bare)
    return scale, factors


def _implicit_factors(denominator: str) -> tuple[float, list[Factor]]:
    a, b, c = polynomial_coefficients(denominator)
    logger.debug("Implicit denominator coefficients a=%s b=%s c=%s", a, b, c)

    if a != 0:
        delta = b * b - 4 * a * c
        if delta > 0:
            r1 = (-b + math.sqrt(delta)) / (2 * a)
            r2 = (-b - math.sqrt(delta)) / (2 * a)
            return a, [linear_factor(r1), linear_factor(r2)]
        if delta == 0:
            return a, [linear_factor(-b / (2 * a), multiplicity=2)]
        return 1.0, [Factor(QUADRATIC, denominator, 1)]

    if b != 0:
        return b, [linear_factor(-c / b)]

    # Constant denominator: kept as a single quadratic factor so the
    # pipeline still completes.
    return 1.0, [Factor(QUADRATIC, denominator, 1)]


def factorize(denominator: str) -> Factorization:
    """Split a denominator into linear and quadratic factors.

    The constant multiplier in front of the factors (the leading coefficient
    in implicit mode, the numbers outside the brackets in explicit mode) is
    returned as ``scale``.

    Args:
        denominator: Raw LaTeX denominator (e.g., "(x - 1)(x + 2)", "x^2 - 4x + 2")

    Returns:
        Factorization with the factors, the scale and the linear/quadratic flags

    Raises:
        MalformedInputError: If a term cannot be read or the scale is zero
    """
    if "(" in denominator:
        scale, factors = _explicit_factors(denominator)
        mode = "explicit"
    else:
        scale, factors = _implicit_factors(denominator)
        mode = "implicit"

    if scale == 0:
        raise MalformedInputError.from_code("BAD_POLYNOMIAL", term=denominator)

    logger.debug("Factorized %r (%s mode, scale %s): %s", denominator, mode, scale, factors)
    return Factorization(
        factors=tuple(factors),
        scale=scale,
        has_linear=any(f.type == LINEAR for f in factors),
        has_quadratic=any(f.type == QUADRATIC for f in factors),
    )


def classify(has_linear: bool, has_quadratic: bool) -> str:
    """Derive the expression type from the factor flags."""
    if has_linear and has_quadratic:
        return MIXED
    if has_linear:
        return LINEAR
    if has_quadratic:
        return QUADRATIC
    return UNKNOWN
