"""Cross-check solved decompositions against SymPy."""

from __future__ import annotations

import re

import sympy as sp
from sympy import parse_expr

from .config import TRANSFORMATIONS, VERIFY_SAMPLE_POINTS, VERIFY_TOLERANCE
from .logging_config import get_logger
from .partial_fraction import PartialFraction
from .types import LINEAR

logger = get_logger("verify")

X = sp.Symbol("x")

_BRACED_EXPONENT = re.compile(r"\^\{([^{}]*)\}")


def to_sympy(latex_text: str) -> sp.Expr:
    """Parse a polynomial written in the engine's LaTeX subset.

    Args:
        latex_text: Text such as "x^{2} + 4", "(x + 2)(x - 2)" or "5x + 3"

    Returns:
        SymPy expression in the symbol ``x``
    """
    text = latex_text.replace("\\cdot", "*")
    text = _BRACED_EXPONENT.sub(r"^(\1)", text)
    text = text.replace("{", "(").replace("}", ")")
    return parse_expr(text, local_dict={"x": X}, transformations=TRANSFORMATIONS)


def original_expression(pf: PartialFraction) -> sp.Expr:
    return to_sympy(pf.numerator) / to_sympy(pf.denominator)


def decomposed_expression(pf: PartialFraction) -> sp.Expr:
    """Rebuild the solved decomposition as a SymPy sum."""
    values = list(pf.constants().values())
    factors = [to_sympy(f.content) for f in pf.factors]
    if pf.type == LINEAR:
        return values[0] / factors[0] + values[1] / factors[1]
    return (values[0] * X + values[1]) / factors[0] + (values[2] * X + values[3]) / factors[1]


def verify_constants(pf: PartialFraction, tolerance: float = VERIFY_TOLERANCE) -> bool:
    """Check that the solved decomposition equals the original fraction.

    Both sides are evaluated at a few sample points; points where the
    denominator vanishes are skipped.

    Raises:
        UnsupportedExpressionError, UnsupportedTypeError: As ``pf.constants()``
    """
    original = original_expression(pf)
    decomposed = decomposed_expression(pf)
    denominator = to_sympy(pf.denominator)

    for point in VERIFY_SAMPLE_POINTS:
        if abs(float(denominator.subs(X, point))) < tolerance:
            continue
        expected = float(original.subs(X, point))
        actual = float(decomposed.subs(X, point))
        if abs(expected - actual) > tolerance * max(1.0, abs(expected)):
            logger.warning(
                "Decomposition mismatch at x=%s: expected %s, got %s",
                point,
                expected,
                actual,
            )
            return False
    return True


def reference_decomposition(pf: PartialFraction) -> str | None:
    """SymPy's own partial-fraction decomposition as LaTeX, if it has one."""
    try:
        return sp.latex(sp.apart(sp.nsimplify(original_expression(pf)), X))
    except (sp.SympifyError, sp.PolynomialError, NotImplementedError, SyntaxError, TypeError) as e:
        logger.info(f"SymPy could not decompose {pf.raw_expression!r}: {e}")
        return None
