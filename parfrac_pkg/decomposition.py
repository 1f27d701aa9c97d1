"""Generic partial-fraction template and its cleared-denominator identity.

Nothing is solved here: placeholders ``A, B, C...`` stand for the unknown
constants, one per linear factor level and two per quadratic factor level.
"""

from __future__ import annotations

import string

from .expression import (
    Group,
    Latex,
    Node,
    Num,
    Pow,
    Relation,
    Sum,
    frac,
    product,
    sum_of,
)
from .types import LINEAR, Factor

ALPHABET = string.ascii_uppercase


def symbol_label(index: int) -> str:
    """Return the placeholder label for a zero-based index.

    ``0..25`` map to ``A..Z``; later indices restart the alphabet with a
    numeric suffix (``26 -> A1``, ``52 -> A2``).
    """
    if index < 0:
        raise ValueError(f"Symbol index must be non-negative, got {index}")
    cycle, position = divmod(index, len(ALPHABET))
    return ALPHABET[position] + (str(cycle) if cycle else "")


def _placeholders(factors: tuple[Factor, ...]) -> list[list[Node]]:
    """Allocate one placeholder node per factor level, in factor order."""
    index = 0
    allocated = []
    for factor in factors:
        levels = []
        for _ in range(factor.multiplicity):
            if factor.type == LINEAR:
                levels.append(Latex(symbol_label(index)))
                index += 1
            else:
                levels.append(
                    sum_of(product(symbol_label(index), "x"), symbol_label(index + 1))
                )
                index += 2
        allocated.append(levels)
    return allocated


def _factor_power(factor: Factor, exponent: int) -> Node:
    return Pow(Group(Latex(factor.content)), exponent)


def template_terms(factors: tuple[Factor, ...]) -> Sum:
    """Sum of ``placeholder / factor^k`` over every factor and level."""
    terms = []
    for factor, levels in zip(factors, _placeholders(factors)):
        for level, placeholder in enumerate(levels, start=1):
            if level == 1:
                denominator: Node = Latex(factor.content)
            else:
                denominator = _factor_power(factor, level)
            terms.append(frac(placeholder, denominator))
    return Sum(tuple(terms))


def partial_fraction_form(numerator: str, denominator: str, factors: tuple[Factor, ...]) -> Relation:
    """``\\frac{N}{D} = \\frac{A}{f_1} + ...``"""
    return Relation(frac(numerator, denominator), template_terms(factors))


def expanded_form(factors: tuple[Factor, ...]) -> Sum:
    """Numerator identity after multiplying both sides by the denominator.

    The placeholder at level ``j`` of a factor with multiplicity ``m`` is
    multiplied by that factor to the power ``m - j`` and by every other
    factor to its full multiplicity.
    """
    terms = []
    for i, (factor, levels) in enumerate(zip(factors, _placeholders(factors))):
        others = [
            _factor_power(other, other.multiplicity)
            for j, other in enumerate(factors)
            if j != i
        ]
        for level, placeholder in enumerate(levels, start=1):
            head = placeholder if isinstance(placeholder, Latex) else Group(placeholder)
            own = factor.multiplicity - level
            parts = [head]
            if own > 0:
                parts.append(_factor_power(factor, own))
            parts.extend(others)
            terms.append(product(*parts))
    return Sum(tuple(terms))


def _scaled(expanded: Sum, scale: float) -> Node:
    if scale == 1:
        return expanded
    if scale == -1:
        return product("-", Group(expanded))
    return product(Num(scale), Group(expanded))


def identity_lines(
    numerator: str, denominator: str, factors: tuple[Factor, ...], scale: float = 1.0
) -> list[Node]:
    """The three lines shared by ``expand`` and ``solve`` traces.

    A denominator with a constant multiplier in front of its factors keeps
    that multiplier in front of the expanded identity: ``3 = 2(A(x + 1) + B(x - 1))``.
    """
    expanded = _scaled(expanded_form(factors), scale)
    return [
        partial_fraction_form(numerator, denominator, factors),
        Relation(frac(numerator, denominator), frac(expanded, denominator)),
        Relation(Latex(numerator), expanded),
    ]
