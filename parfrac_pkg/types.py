"""Type definitions, result dataclasses and the error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import config

# Factor types
LINEAR = "linear"
QUADRATIC = "quadratic"

# Expression types: every factor linear, every factor quadratic, both, or none
MIXED = "mixed"
UNKNOWN = "unknown"


@dataclass(frozen=True)
class Coefficient:
    """One numerator term: ``power`` 0 is the constant, 1 the linear term."""

    power: int
    value: str


@dataclass(frozen=True)
class Factor:
    """A linear or irreducible quadratic divisor of the denominator."""

    type: str  # "linear" or "quadratic"
    content: str
    multiplicity: int = 1
    root: str | None = None

    def __repr__(self) -> str:
        parts = [f"type={self.type!r}", f"content={self.content!r}"]
        parts.append(f"multiplicity={self.multiplicity}")
        if self.root is not None:
            parts.append(f"root={self.root!r}")
        return f"Factor({', '.join(parts)})"


@dataclass(frozen=True)
class Factorization:
    """Factors found in a denominator, their constant multiplier and the
    flags the classifier reads."""

    factors: tuple[Factor, ...] = field(default_factory=tuple)
    scale: float = 1.0
    has_linear: bool = False
    has_quadratic: bool = False


@dataclass
class TraceResult:
    """Result of expanding or solving an expression through the api module."""

    ok: bool
    latex: str | None = None
    expression_type: str | None = None
    error: str | None = None
    code: str | None = None

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"TraceResult(ok=False, code={self.code!r}, error={self.error!r})"
        return (
            f"TraceResult(ok=True, expression_type={self.expression_type!r}, "
            f"latex={self.latex!r})"
        )


# Error messages are keyed by code, then by language
ERROR_MESSAGES = {
    "EMPTY_INPUT": {
        "pt": "A expressão está vazia.",
        "en": "The expression is empty.",
    },
    "TOO_LONG": {
        "pt": "A expressão é longa demais (máximo de {limit} caracteres).",
        "en": "The expression is too long (maximum {limit} characters).",
    },
    "NO_FRACTION": {
        "pt": "A expressão deve ter uma fração.",
        "en": "The expression must contain a fraction.",
    },
    "BAD_POLYNOMIAL": {
        "pt": "Não foi possível ler o termo '{term}' do denominador.",
        "en": "Could not read the denominator term '{term}'.",
    },
    "UNSUPPORTED_SHAPE": {
        "pt": "A expressão não é suportada.",
        "en": "The expression is not supported.",
    },
    "MISSING_ROOT": {
        "pt": "Não foi possível determinar a raiz do fator '{factor}'.",
        "en": "Could not determine the root of the factor '{factor}'.",
    },
    "NUMERATOR_DEGREE": {
        "pt": "O numerador tem grau {degree}; o grau máximo suportado é 1.",
        "en": "The numerator has degree {degree}; the highest supported degree is 1.",
    },
    "SYMBOLIC_COEFFICIENT": {
        "pt": "O coeficiente '{term}' do numerador não é numérico.",
        "en": "The numerator coefficient '{term}' is not numeric.",
    },
    "REPEATED_FACTOR": {
        "pt": "Os fatores do denominador são repetidos.",
        "en": "The denominator factors are repeated.",
    },
    "UNSUPPORTED_QUADRATIC": {
        "pt": "O fator quadrático '{factor}' não tem a forma x^2 + k.",
        "en": "The quadratic factor '{factor}' is not of the form x^2 + k.",
    },
    "UNSUPPORTED_TYPE": {
        "pt": "Tipo de expressão não suportado.",
        "en": "Unsupported expression type.",
    },
}


def error_message(code: str, **details: object) -> str:
    """Look up the message for an error code in the configured language."""
    messages = ERROR_MESSAGES.get(code)
    if messages is None:
        return code
    text = messages.get(config.LANG, messages["pt"])
    return text.format(**details)


class PartialFractionError(Exception):
    """Base class for every failure raised by the engine."""

    default_code = "PARTIAL_FRACTION_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_code(cls, code: str, **details: object) -> PartialFractionError:
        """Build the error with its localized message."""
        return cls(error_message(code, **details), code)


class MalformedInputError(PartialFractionError):
    """Raised when the input cannot be read as a fraction."""

    default_code = "NO_FRACTION"


class UnsupportedExpressionError(PartialFractionError):
    """Raised when the factor shape is outside the solved cases."""

    default_code = "UNSUPPORTED_SHAPE"


class UnsupportedTypeError(PartialFractionError):
    """Raised when solving a mixed or unknown expression."""

    default_code = "UNSUPPORTED_TYPE"
