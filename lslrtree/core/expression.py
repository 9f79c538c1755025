"""Query expressions and their evaluation.

Expressions form a closed family of immutable variants. They carry no
behaviour of their own; evaluate() is the single function that interprets
them against a node.
"""

from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Union

from .node import ListingNode, NodeType


@dataclass(frozen=True)
class NullExpression:
    """Matches every node. Produced by an empty query."""

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class NameExpression:
    pattern: str

    def __str__(self) -> str:
        return f"-name {self.pattern}"


@dataclass(frozen=True)
class TypeExpression:
    node_type: NodeType

    def __str__(self) -> str:
        return f"-type {self.node_type.value}"


@dataclass(frozen=True)
class SizeEqExpression:
    value: int

    def __str__(self) -> str:
        return f"-size {self.value}"


@dataclass(frozen=True)
class SizeLtExpression:
    value: int

    def __str__(self) -> str:
        return f"-size -{self.value}"


@dataclass(frozen=True)
class SizeGtExpression:
    value: int

    def __str__(self) -> str:
        return f"-size +{self.value}"


@dataclass(frozen=True)
class NotExpression:
    operand: 'Expression'

    def __str__(self) -> str:
        return f"! {_grouped(self.operand)}"


@dataclass(frozen=True)
class AndExpression:
    left: 'Expression'
    right: 'Expression'

    def __str__(self) -> str:
        return f"{_grouped(self.left)} -a {_grouped(self.right)}"


@dataclass(frozen=True)
class OrExpression:
    left: 'Expression'
    right: 'Expression'

    def __str__(self) -> str:
        return f"{self.left} -o {self.right}"


Expression = Union[
    NullExpression,
    NameExpression,
    TypeExpression,
    SizeEqExpression,
    SizeLtExpression,
    SizeGtExpression,
    NotExpression,
    AndExpression,
    OrExpression,
]


def _grouped(expr: 'Expression') -> str:
    # -o binds loosest, so it is the only operand that needs parentheses
    if isinstance(expr, OrExpression):
        return f"( {expr} )"
    return str(expr)


def _match_name(name: str, pattern: str) -> bool:
    # Wildcards never match a leading dot, as in the shell
    if name.startswith(".") and not pattern.startswith("."):
        return False
    return fnmatchcase(name, pattern)


def evaluate(expr: Expression, node: ListingNode) -> bool:
    """Check whether node satisfies expr.

    Args:
        expr: Parsed query expression
        node: Node to test

    Returns:
        True if the node matches

    Raises:
        TypeError: If expr is not one of the expression variants
    """
    if isinstance(expr, NullExpression):
        return True
    if isinstance(expr, NameExpression):
        return _match_name(node.name, expr.pattern)
    if isinstance(expr, TypeExpression):
        return node.node_type is expr.node_type
    if isinstance(expr, SizeEqExpression):
        return node.size == expr.value
    if isinstance(expr, SizeLtExpression):
        return node.size < expr.value
    if isinstance(expr, SizeGtExpression):
        return node.size > expr.value
    if isinstance(expr, NotExpression):
        return not evaluate(expr.operand, node)
    if isinstance(expr, AndExpression):
        return evaluate(expr.left, node) and evaluate(expr.right, node)
    if isinstance(expr, OrExpression):
        return evaluate(expr.left, node) or evaluate(expr.right, node)
    raise TypeError(f"not a query expression: {expr!r}")
