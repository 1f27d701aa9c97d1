"""Small expression tree for derivation steps and its LaTeX rendering pass.

Solver and decomposition code build nodes; only ``render`` turns them into
LaTeX, so sign handling and number formatting live in one place.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import config
from .parser import format_number


class Node:
    """Base class for expression tree nodes."""


@dataclass(frozen=True)
class Latex(Node):
    """A literal LaTeX fragment (a factor's content, ``x``, ``\\ln``...)."""

    text: str


@dataclass(frozen=True)
class Num(Node):
    value: float


@dataclass(frozen=True)
class Group(Node):
    """Parenthesized sub-expression."""

    inner: Node


@dataclass(frozen=True)
class Pow(Node):
    base: Node
    exponent: int


@dataclass(frozen=True)
class Product(Node):
    factors: tuple[Node, ...]
    sep: str = ""


@dataclass(frozen=True)
class Sum(Node):
    terms: tuple[Node, ...]


@dataclass(frozen=True)
class Frac(Node):
    numerator: Node
    denominator: Node
    display: bool = False


@dataclass(frozen=True)
class Abs(Node):
    inner: Node


@dataclass(frozen=True)
class Integral(Node):
    body: Node
    var: str = "x"


@dataclass(frozen=True)
class Relation(Node):
    lhs: Node
    rhs: Node
    op: str = "="


def text(value: str | Node) -> Node:
    """Wrap raw strings as Latex nodes, pass nodes through."""
    return value if isinstance(value, Node) else Latex(value)


def product(*factors: str | Node, sep: str = "") -> Product:
    return Product(tuple(text(f) for f in factors), sep)


def cdot(*factors: str | Node) -> Product:
    return product(*factors, sep=" \\cdot ")


def sum_of(*terms: str | Node) -> Sum:
    return Sum(tuple(text(t) for t in terms))


def frac(numerator: str | Node, denominator: str | Node, display: bool = False) -> Frac:
    return Frac(text(numerator), text(denominator), display)


def integral(body: Node, var: str = "x") -> Integral:
    return Integral(body, var)


def positive_part(node: Node) -> Node | None:
    """Return ``node`` without its leading minus sign, or None if it has none."""
    if isinstance(node, Num):
        return Num(-node.value) if node.value < 0 else None
    if isinstance(node, Product) and node.factors:
        head = positive_part(node.factors[0])
        if head is None:
            return None
        return Product((head,) + node.factors[1:], node.sep)
    if isinstance(node, Frac):
        numerator = positive_part(node.numerator)
        if numerator is None:
            return None
        return Frac(numerator, node.denominator, node.display)
    return None


def render(node: Node) -> str:
    """Render a node as LaTeX."""
    if isinstance(node, Latex):
        return node.text
    if isinstance(node, Num):
        return format_number(node.value, config.OUTPUT_PRECISION)
    if isinstance(node, Group):
        return f"({render(node.inner)})"
    if isinstance(node, Pow):
        if node.exponent == 1:
            return render(node.base)
        return f"{render(node.base)}^{{{node.exponent}}}"
    if isinstance(node, Product):
        return node.sep.join(render(f) for f in node.factors)
    if isinstance(node, Sum):
        return _render_sum(node)
    if isinstance(node, Frac):
        macro = "\\dfrac" if node.display else "\\frac"
        return f"{macro}{{{render(node.numerator)}}}{{{render(node.denominator)}}}"
    if isinstance(node, Abs):
        return f"| {render(node.inner)} |"
    if isinstance(node, Integral):
        return f"\\int {render(node.body)} ~\\mathrm{{d}}{node.var}"
    if isinstance(node, Relation):
        return f"{render(node.lhs)} {node.op} {render(node.rhs)}"
    raise TypeError(f"Cannot render node of type {type(node).__name__}")


def _render_sum(node: Sum) -> str:
    if not node.terms:
        return "0"
    parts = [render(node.terms[0])]
    for term in node.terms[1:]:
        positive = positive_part(term)
        if positive is None:
            parts.append(f"+ {render(term)}")
        else:
            parts.append(f"- {render(positive)}")
    return " ".join(parts)


def render_array(lines: list[Node]) -> str:
    """Join derivation lines into a left-aligned LaTeX array environment."""
    body = "\n\\\\ \\\\ \\displaystyle\n".join(render(line) for line in lines)
    return f"\\begin{{array}}{{l}} \\displaystyle\n{body}\n\\end{{array}}"
