"""Recursive-descent parser for find-style query expressions.

Grammar (loosest binding first):

    exprs    := term*                      ; adjacent terms are ANDed
    term     := or_expr
    or_expr  := and_expr ( "-o" and_expr )*
    and_expr := not_expr ( [ "-a" ] not_expr )*
    not_expr := "!" not_expr | primary
    primary  := "-name" WORD
              | "-type" ( "f" | "d" )
              | "-size" [ "+" | "-" ] DIGITS
              | "(" exprs ")"

Tokens arrive already split, the way a shell would split them.
"""

import logging
import re
from typing import Callable, Dict, List, Optional, Sequence

from .core.expression import (
    AndExpression,
    Expression,
    NameExpression,
    NotExpression,
    NullExpression,
    OrExpression,
    SizeEqExpression,
    SizeGtExpression,
    SizeLtExpression,
    TypeExpression,
)
from .core.node import NodeType
from .errors import QueryParseError

logger = logging.getLogger(__name__)

SIZE_PATTERN = re.compile(r"([+-])?([0-9]+)")

SIZE_EXPRESSIONS = {
    None: SizeEqExpression,
    "+": SizeGtExpression,
    "-": SizeLtExpression,
}


class QueryParser:
    """Turns a token list into an Expression tree.

    A parser instance can be reused; each parse() call works on its own
    copy of the tokens.
    """

    def __init__(self):
        self._tokens: List[str] = []
        self._position = 0
        self._primaries: Dict[str, Callable[[], Expression]] = {
            "-name": self._name_expr,
            "-type": self._type_expr,
            "-size": self._size_expr,
            "(": self._paren_expr,
        }

    def parse(self, tokens: Sequence[str]) -> Expression:
        """Parse a complete query.

        Args:
            tokens: Pre-split query tokens, e.g. ["-name", "*.txt", "-o", ...]

        Returns:
            Expression tree; NullExpression for an empty query

        Raises:
            QueryParseError: On an unknown token, a bad -type/-size argument,
                a missing argument or unbalanced parentheses
        """
        self._tokens = list(tokens)
        self._position = 0

        result = self._exprs()
        leftover = self._lookahead()
        if leftover is not None:
            # _exprs only stops early on a ")" that has no "("
            raise QueryParseError(f"unbalanced parentheses - unexpected {leftover}", leftover)

        logger.debug("Parsed query %r as %s", self._tokens, result)
        return result

    # Grammar rules

    def _exprs(self) -> Expression:
        result: Expression = NullExpression()
        while True:
            token = self._lookahead()
            if token is None or token == ")":
                break
            term = self._or_expr()
            if isinstance(result, NullExpression):
                result = term
            else:
                result = AndExpression(result, term)
        return result

    def _or_expr(self) -> Expression:
        result = self._and_expr()
        while self._lookahead() == "-o":
            self._shift()
            result = OrExpression(result, self._and_expr())
        return result

    def _and_expr(self) -> Expression:
        result = self._not_expr()
        while True:
            token = self._lookahead()
            if token is None or token in (")", "-o"):
                break
            # Adjacent terms are an implicit -a with the same precedence
            if token == "-a":
                self._shift()
            result = AndExpression(result, self._not_expr())
        return result

    def _not_expr(self) -> Expression:
        if self._lookahead() == "!":
            self._shift()
            return NotExpression(self._not_expr())
        return self._primary()

    def _primary(self) -> Expression:
        token = self._lookahead()
        rule = self._primaries.get(token) if token is not None else None
        if rule is None:
            if token is None:
                raise QueryParseError("unexpected end of expression", None)
            raise QueryParseError(f"unknown expression - {token}", token)
        return rule()

    def _name_expr(self) -> Expression:
        pattern = self._argument()
        return NameExpression(pattern)

    def _type_expr(self) -> Expression:
        value = self._argument()
        if value not in ("f", "d"):
            raise QueryParseError(f"invalid argument for -type - {value}", value)
        return TypeExpression(NodeType(value))

    def _size_expr(self) -> Expression:
        value = self._argument()
        match = SIZE_PATTERN.fullmatch(value)
        if match is None:
            raise QueryParseError(f"invalid argument for -size - {value}", value)
        sign, digits = match.groups()
        return SIZE_EXPRESSIONS[sign](int(digits))

    def _paren_expr(self) -> Expression:
        self._shift()
        result = self._exprs()
        token = self._shift()
        if token != ")":
            raise QueryParseError("unbalanced parentheses - missing )", token)
        return result

    # Token helpers

    def _lookahead(self) -> Optional[str]:
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None

    def _shift(self) -> Optional[str]:
        token = self._lookahead()
        if token is not None:
            self._position += 1
        return token

    def _argument(self) -> str:
        """Consume an operator and return its mandatory argument."""
        operator = self._shift()
        value = self._shift()
        if value is None:
            raise QueryParseError(f"missing argument to {operator}", None)
        return value


def parse_query(tokens: Sequence[str]) -> Expression:
    """Parse tokens with a fresh QueryParser."""
    return QueryParser().parse(tokens)
