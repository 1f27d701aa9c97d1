"""Test that API functions return typed dataclasses."""

from parfrac_pkg.api import expand_expression, solve_expression, validate_expression
from parfrac_pkg.types import TraceResult


class TestAPITypedReturns:
    """Test that all API functions return typed dataclasses."""

    def test_solve_returns_trace_result(self):
        result = solve_expression(r"\frac{5x + 3}{(x + 2)(x - 2)}")
        assert isinstance(result, TraceResult)
        assert result.ok is True
        assert result.expression_type == "linear"
        assert "1.75" in result.latex

    def test_expand_returns_trace_result(self):
        result = expand_expression(r"\frac{1}{(x - 1)(x + 1)(x + 2)}")
        assert isinstance(result, TraceResult)
        assert result.ok is True
        assert "\\frac{C}{x + 2}" in result.latex

    def test_solve_error_returns_trace_result(self):
        result = solve_expression(r"\frac{1}{(x - 1)(x + 1)(x + 2)}")
        assert isinstance(result, TraceResult)
        assert result.ok is False
        assert result.code == "UNSUPPORTED_SHAPE"
        assert result.error
        assert result.latex is None

    def test_error_codes_stay_distinguishable(self):
        malformed = solve_expression("x + 1")
        shape = solve_expression(r"\frac{1}{(x - 1)^2(x + 1)}")
        mixed = solve_expression(r"\frac{1}{(x - 1)(x^2 + 1)}")
        assert (malformed.code, shape.code, mixed.code) == (
            "NO_FRACTION",
            "UNSUPPORTED_SHAPE",
            "UNSUPPORTED_TYPE",
        )

    def test_validate_expression(self):
        assert validate_expression(r"\frac{1}{x - 1}") == (True, None)
        is_valid, error = validate_expression("1 / (x - 1)")
        assert is_valid is False
        assert error is not None

    def test_repr(self):
        result = solve_expression("x")
        assert repr(result).startswith("TraceResult(ok=False, code='NO_FRACTION'")
