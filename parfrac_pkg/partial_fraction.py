"""The PartialFraction aggregate: one instance per submitted expression."""

from __future__ import annotations

from .decomposition import identity_lines
from .expression import render_array
from .factorizer import classify, factorize
from .logging_config import get_logger
from .parser import extract_coefficients, split_fraction, validate_input
from .solver import solve_constants, solve_trace
from .types import Coefficient, Factor

logger = get_logger("partial_fraction")


class PartialFraction:
    """Parsed ``\\frac{numerator}{denominator}`` ready to expand or solve.

    Construction splits, tokenizes, factorizes and classifies the input once;
    ``expand`` and ``solve`` only read that state, so repeated calls return
    the same LaTeX.

    Example:
        >>> pf = PartialFraction(r"\\int \\frac{5x + 3}{(x + 2)(x - 2)} ~\\mathrm{d}x")
        >>> pf.type
        'linear'
        >>> pf.constants()
        {'A': 1.75, 'B': 3.25}

    Raises:
        MalformedInputError: If the expression holds no fraction
    """

    def __init__(self, raw_expression: str):
        self.raw_expression = validate_input(raw_expression)
        self.numerator, self.denominator = split_fraction(raw_expression)
        self._coefficients = tuple(extract_coefficients(self.numerator))

        factorization = factorize(self.denominator)
        self._factors = factorization.factors
        self.scale = factorization.scale
        self.type = classify(factorization.has_linear, factorization.has_quadratic)
        logger.debug(
            "Parsed %r / %r as %s with %d factor(s), scale %s",
            self.numerator,
            self.denominator,
            self.type,
            len(self._factors),
            self.scale,
        )

    @property
    def coefficients(self) -> list[Coefficient]:
        return list(self._coefficients)

    @property
    def factors(self) -> list[Factor]:
        return list(self._factors)

    def __repr__(self) -> str:
        return (
            f"PartialFraction(numerator={self.numerator!r}, "
            f"denominator={self.denominator!r}, type={self.type!r})"
        )

    def _identity(self):
        return identity_lines(self.numerator, self.denominator, self._factors, self.scale)

    def expand(self) -> str:
        """Generic decomposition template and the cleared-denominator identity."""
        return render_array(self._identity())

    def constants(self) -> dict[str, float]:
        """Solved decomposition constants keyed by placeholder label.

        Raises:
            UnsupportedExpressionError: If the factors are not two distinct,
                non-repeated factors of a supported shape
            UnsupportedTypeError: If the expression is mixed or unknown
        """
        return solve_constants(list(self._coefficients), self._factors, self.type, self.scale)

    def solve(self) -> str:
        """Full derivation: identity, constants and the integration trace."""
        trace = solve_trace(list(self._coefficients), self._factors, self.type, self.scale)
        return render_array(self._identity() + trace)
