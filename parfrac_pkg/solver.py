"""Solve two-factor decompositions and build the integration trace.

Supported shapes are exactly two factors of multiplicity 1, either both
linear ``(x - r1)(x - r2)`` or both quadratic ``(x^2 + k1)(x^2 + k2)``.
"""

from __future__ import annotations

from .decomposition import symbol_label
from .expression import (
    Abs,
    Latex,
    Node,
    Num,
    Relation,
    Sum,
    cdot,
    frac,
    integral,
    product,
    sum_of,
)
from .logging_config import get_logger
from .parser import coefficient_value, extract_coefficients
from .types import (
    LINEAR,
    QUADRATIC,
    UNKNOWN,
    Coefficient,
    Factor,
    UnsupportedExpressionError,
    UnsupportedTypeError,
)

logger = get_logger("solver")

INTEGRATION_CONSTANT = "C"
# Used when C is already one of the solved placeholders
ALTERNATE_INTEGRATION_CONSTANT = "K"


def check_solvable(factors: tuple[Factor, ...], expression_type: str) -> None:
    """Raise unless the factors form one of the solved shapes."""
    if expression_type == UNKNOWN:
        raise UnsupportedTypeError.from_code("UNSUPPORTED_TYPE")
    if len(factors) != 2 or any(f.multiplicity > 1 for f in factors):
        logger.info(
            "Unsupported factor shape: %d factor(s), multiplicities %s",
            len(factors),
            [f.multiplicity for f in factors],
        )
        raise UnsupportedExpressionError.from_code("UNSUPPORTED_SHAPE")
    if expression_type not in (LINEAR, QUADRATIC):
        logger.info("Unsupported expression type: %s", expression_type)
        raise UnsupportedTypeError.from_code("UNSUPPORTED_TYPE")


def _numerator_terms(coefficients: list[Coefficient], scale: float = 1.0) -> tuple[float, float]:
    """``(c1, c2)``: coefficient of x and the constant term, divided by the
    denominator's constant multiplier."""
    degree = max((c.power for c in coefficients), default=0)
    if degree > 1:
        raise UnsupportedExpressionError.from_code("NUMERATOR_DEGREE", degree=degree)
    try:
        c1 = coefficient_value(coefficients, 1)
        c2 = coefficient_value(coefficients, 0)
    except ValueError:
        symbolic = next(c.value for c in coefficients if not _is_number(c.value))
        raise UnsupportedExpressionError.from_code(
            "SYMBOLIC_COEFFICIENT", term=symbolic
        ) from None
    return c1 / scale, c2 / scale


def _is_number(value: str) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True


def _root(factor: Factor) -> float:
    if factor.root is None or not _is_number(factor.root):
        raise UnsupportedExpressionError.from_code("MISSING_ROOT", factor=factor.content)
    return float(factor.root)


def quadratic_rate(factor: Factor) -> float:
    """Return ``-k`` for a factor ``x^2 + k``.

    Raises:
        UnsupportedExpressionError: If the factor has another shape or k is 0
    """
    coefficients = extract_coefficients(factor.content)
    powers = {c.power for c in coefficients}
    try:
        leading = coefficient_value(coefficients, 2)
        constant = coefficient_value(coefficients, 0)
    except ValueError:
        leading = constant = 0.0
    if not powers <= {0, 2} or leading != 1 or constant == 0:
        raise UnsupportedExpressionError.from_code(
            "UNSUPPORTED_QUADRATIC", factor=factor.content
        )
    return -constant


def linear_constants(
    coefficients: list[Coefficient], factors: tuple[Factor, ...], scale: float = 1.0
) -> dict[str, float]:
    """Cover-up solution for ``(c1 x + c2) / ((x - r1)(x - r2))``."""
    c1, c2 = _numerator_terms(coefficients, scale)
    r1, r2 = _root(factors[0]), _root(factors[1])
    if r1 == r2:
        raise UnsupportedExpressionError.from_code("REPEATED_FACTOR")
    return {
        symbol_label(0): (c1 * r1 + c2) / (r1 - r2),
        symbol_label(1): (c1 * r2 + c2) / (r2 - r1),
    }


def quadratic_constants(
    coefficients: list[Coefficient], factors: tuple[Factor, ...], scale: float = 1.0
) -> dict[str, float]:
    """Solve ``(c1 x + c2) / ((x^2 + k1)(x^2 + k2))`` with ``r = -k``."""
    c1, c2 = _numerator_terms(coefficients, scale)
    r1, r2 = quadratic_rate(factors[0]), quadratic_rate(factors[1])
    if r1 == r2:
        raise UnsupportedExpressionError.from_code("REPEATED_FACTOR")
    a = c1 / (r1 - r2)
    b = -c2 / (r2 - r1)
    return {
        symbol_label(0): a,
        symbol_label(1): b,
        symbol_label(2): -a,
        symbol_label(3): -b,
    }


def solve_constants(
    coefficients: list[Coefficient],
    factors: tuple[Factor, ...],
    expression_type: str,
    scale: float = 1.0,
) -> dict[str, float]:
    """Return the decomposition constants keyed by placeholder label.

    ``scale`` is the constant multiplier in front of the factors, so
    ``2(x - 1)(x + 1)`` is solved with factors ``(x - 1)(x + 1)`` and scale 2.
    """
    check_solvable(factors, expression_type)
    if expression_type == LINEAR:
        constants = linear_constants(coefficients, factors, scale)
    else:
        constants = quadratic_constants(coefficients, factors, scale)
    logger.debug("Solved constants: %s", constants)
    return constants


def _constants_line(constants: dict[str, float]) -> Node:
    return product(
        *(Relation(Latex(label), Num(value)) for label, value in constants.items()),
        sep=" \\qquad ",
    )


def integration_constant(constants: dict[str, float]) -> str:
    """Label for the constant of integration, distinct from every placeholder."""
    if INTEGRATION_CONSTANT in constants:
        return ALTERNATE_INTEGRATION_CONSTANT
    return INTEGRATION_CONSTANT


def _ln(argument: str) -> Node:
    return product("\\ln ", Abs(Latex(argument)))


def linear_trace(constants: dict[str, float], factors: tuple[Factor, ...]) -> list[Node]:
    """Steps from the solved constants to ``A ln|f1| + B ln|f2| + C``."""
    a, b = (Num(v) for v in constants.values())
    f1, f2 = factors[0].content, factors[1].content
    return [
        _constants_line(constants),
        Sum((frac(a, f1), frac(b, f2))),
        Sum((integral(frac(a, f1)), integral(frac(b, f2)))),
        Sum((cdot(a, integral(frac("1", f1))), cdot(b, integral(frac("1", f2))))),
        sum_of(cdot(a, _ln(f1)), cdot(b, _ln(f2)), integration_constant(constants)),
    ]


def _sqrt(value: float) -> Node:
    return product("\\sqrt{", Num(value), "}")


def reciprocal_antiderivative(rate: float) -> Node:
    """Antiderivative of ``1 / (x^2 + k)`` where ``rate = -k``.

    Real roots (k < 0) give the logarithmic ratio, otherwise the arctangent.
    """
    if -rate < 0:
        return product(
            frac("1", product("2 \\cdot ", _sqrt(rate)), display=True),
            " \\ln \\left| ",
            frac(product("x - ", _sqrt(rate)), product("x + ", _sqrt(rate)), display=True),
            " \\right|",
        )
    return product(
        frac("1", _sqrt(-rate), display=True),
        " \\arctan \\left( ",
        frac("x", _sqrt(-rate), display=True),
        " \\right)",
    )


def quadratic_trace(constants: dict[str, float], factors: tuple[Factor, ...]) -> list[Node]:
    """Steps through the ``u = x^2 + k`` substitution to the antiderivative."""
    a, b, c, d = (Num(v) for v in constants.values())
    f1, f2 = factors[0].content, factors[1].content
    r1, r2 = quadratic_rate(factors[0]), quadratic_rate(factors[1])

    def numerator(slope: Num, intercept: Num) -> Node:
        return sum_of(product(slope, "x"), intercept)

    def substituted(u: str) -> Node:
        return integral(
            cdot(frac("\\cancel{ x }", u, display=True), frac("1", "2\\cancel{ x }", display=True)),
            var="u",
        )

    def log_integral(u: str) -> Node:
        return integral(frac("1", u, display=True), var="u")

    def reciprocal_integral(content: str) -> Node:
        return integral(frac("1", content, display=True))

    def final_line(u1: str, u2: str) -> Node:
        return sum_of(
            cdot(Num(a.value / 2), _ln(u1)),
            cdot(b, reciprocal_antiderivative(r1)),
            cdot(Num(c.value / 2), _ln(u2)),
            cdot(d, reciprocal_antiderivative(r2)),
            integration_constant(constants),
        )

    return [
        _constants_line(constants),
        Sum((frac(numerator(a, b), f1), frac(numerator(c, d), f2))),
        Sum((integral(frac(numerator(a, b), f1)), integral(frac(numerator(c, d), f2)))),
        Sum(
            (
                integral(frac(product(a, "x"), f1, display=True)),
                integral(frac(b, f1, display=True)),
                integral(frac(product(c, "x"), f2, display=True)),
                integral(frac(d, f2, display=True)),
            )
        ),
        Sum(
            (
                cdot(a, integral(frac("x", f1, display=True))),
                cdot(b, reciprocal_integral(f1)),
                cdot(c, integral(frac("x", f2, display=True))),
                cdot(d, reciprocal_integral(f2)),
            )
        ),
        product(Relation(Latex("u_{1}"), Latex(f1)), Relation(Latex("u_{2}"), Latex(f2)), sep=" \\qquad "),
        Latex(
            "\\mathrm{d}u = 2x ~\\mathrm{d}x ~~\\implies~~ "
            "\\mathrm{d}x = \\dfrac{1}{2x} ~\\mathrm{d}u"
        ),
        Sum(
            (
                cdot(a, substituted("u_{1}")),
                cdot(b, reciprocal_integral(f1)),
                cdot(c, substituted("u_{2}")),
                cdot(d, reciprocal_integral(f2)),
            )
        ),
        Sum(
            (
                cdot(frac(a, "2", display=True), log_integral("u_{1}")),
                cdot(b, reciprocal_integral(f1)),
                cdot(frac(c, "2", display=True), log_integral("u_{2}")),
                cdot(d, reciprocal_integral(f2)),
            )
        ),
        final_line("u_{1}", "u_{2}"),
        final_line(f1, f2),
    ]


def solve_trace(
    coefficients: list[Coefficient],
    factors: tuple[Factor, ...],
    expression_type: str,
    scale: float = 1.0,
) -> list[Node]:
    """Solve the constants and return the trace lines that follow the identity."""
    constants = solve_constants(coefficients, factors, expression_type, scale)
    if expression_type == LINEAR:
        return linear_trace(constants, factors)
    return quadratic_trace(constants, factors)
