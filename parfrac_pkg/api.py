"""Public API for parfrac - returns structured objects without raising."""

from __future__ import annotations

from .logging_config import get_logger
from .partial_fraction import PartialFraction
from .types import PartialFractionError, TraceResult

logger = get_logger("api")


def _run(expression: str, operation: str) -> TraceResult:
    try:
        pf = PartialFraction(expression)
        latex = pf.expand() if operation == "expand" else pf.solve()
        return TraceResult(ok=True, latex=latex, expression_type=pf.type)
    except PartialFractionError as e:
        return TraceResult(ok=False, error=e.message, code=e.code)
    except (ValueError, TypeError, ZeroDivisionError) as e:
        logger.error(f"Unexpected {operation} error: {e}", exc_info=True)
        return TraceResult(ok=False, error=f"{operation.capitalize()} failed unexpectedly", code="INTERNAL_ERROR")


def expand_expression(expression: str) -> TraceResult:
    """Render the generic decomposition of an expression.

    Args:
        expression: LaTeX containing ``\\frac{numerator}{denominator}``

    Returns:
        TraceResult with the decomposition template as LaTeX

    Example:
        >>> from parfrac_pkg.api import expand_expression
        >>> result = expand_expression(r"\\frac{5x + 3}{(x + 2)(x - 2)}")
        >>> result.ok
        True
        >>> result.expression_type
        'linear'
    """
    return _run(expression, "expand")


def solve_expression(expression: str) -> TraceResult:
    """Solve the decomposition and integrate it step by step.

    Args:
        expression: LaTeX containing ``\\frac{numerator}{denominator}``

    Returns:
        TraceResult with the full derivation, or the error message and code

    Example:
        >>> from parfrac_pkg.api import solve_expression
        >>> result = solve_expression(r"\\frac{1}{(x - 1)(x + 1)(x + 2)}")
        >>> result.ok, result.code
        (False, 'UNSUPPORTED_SHAPE')
    """
    return _run(expression, "solve")


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Check that an expression parses, without rendering anything.

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        PartialFraction(expression)
        return True, None
    except PartialFractionError as e:
        return False, e.message
