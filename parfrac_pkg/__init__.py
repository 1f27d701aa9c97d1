"""parfrac package: partial-fraction decomposition and integration traces for LaTeX input."""

__all__ = [
    "config",
    "parser",
    "factorizer",
    "expression",
    "decomposition",
    "solver",
    "partial_fraction",
    "verify",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "expand_expression",
    "solve_expression",
    "validate_expression",
]
