"""Lambda calculus grammar.

    expression  ::= application | term
    application ::= term (space+ term)*        -- folded to the left
    term        ::= variable | abstraction | grouping
    abstraction ::= "λ" name "." expression     -- body extends to the right
    grouping    ::= "(" expression ")"

Application is never a term, so parsing an application never starts by
parsing an application, and the left fold recovers `f x y = (f x) y`.

The recursive rules are plain functions calling each other directly. Each
level of parentheses or abstraction costs a handful of Python frames instead
of one per stacked combinator.
"""

import logging
from functools import reduce

from lambdaparse.lib.combinators import Parser, Result, literal_char, parse, satisfy, some, whitespace
from lambdaparse.lib.lexpr import LAMBDA, Abstraction, Application, LExpr, Variable

logger = logging.getLogger(__name__)

__all__ = [
    "ParseError",
    "abstraction",
    "application",
    "expression",
    "grouping",
    "literal",
    "parse",
    "parse_expression",
    "term",
    "variable",
]


class ParseError(SyntaxError):
    pass


def is_name_char(c: str) -> bool:
    # λ is a letter as far as str.isalnum is concerned.
    return c.isalnum() and c != LAMBDA


literal: Parser[str] = some(satisfy(is_name_char)).map("".join)

variable: Parser[LExpr] = literal.map(Variable)

lambda_sign: Parser[str] = literal_char(LAMBDA) | literal_char("\\")

open_paren = literal_char("(") << whitespace

close_paren = whitespace >> literal_char(")")

dot = whitespace >> literal_char(".") << whitespace

separator = some(satisfy(str.isspace))

binder = lambda_sign >> whitespace >> literal << dot


def _grouping(text: str) -> Result[LExpr]:
    opened = open_paren(text)
    if opened is None:
        return None
    inner = _expression(opened[1])
    if inner is None:
        return None
    expr, rest = inner
    closed = close_paren(rest)
    if closed is None:
        return None
    return expr, closed[1]


def _abstraction(text: str) -> Result[LExpr]:
    head = binder(text)
    if head is None:
        return None
    param, rest = head
    body = _expression(rest)
    if body is None:
        return None
    expr, rest = body
    return Abstraction(param, expr), rest


def _term(text: str) -> Result[LExpr]:
    result = variable(text)
    if result is None:
        result = _abstraction(text)
    if result is None:
        result = _grouping(text)
    return result


def _application(text: str) -> Result[LExpr]:
    result = _term(text)
    if result is None:
        return None
    first, rest = result
    terms = [first]
    while True:
        spaces = separator(rest)
        if spaces is None:
            break
        result = _term(spaces[1])
        if result is None:
            # Leave the trailing whitespace unconsumed.
            break
        value, rest = result
        terms.append(value)
    return reduce(Application, terms), rest


def _expression(text: str) -> Result[LExpr]:
    result = _application(text)
    if result is None:
        result = _term(text)
    return result


grouping: Parser[LExpr] = Parser(_grouping)

abstraction: Parser[LExpr] = Parser(_abstraction)

term: Parser[LExpr] = Parser(_term)

application: Parser[LExpr] = Parser(_application)

expression: Parser[LExpr] = Parser(_expression)


def parse_expression(text: str) -> LExpr:
    """Parse the whole of ``text`` as one expression.

    Unlike ``parse(expression, text)``, leftover input is an error here.
    Whitespace around the expression is ignored.
    """
    try:
        result = parse(expression, text.strip())
    except RecursionError as e:
        raise ParseError("expression nested too deeply") from e
    if result is None:
        raise ParseError(f"could not parse '{text}'")
    expr, rest = result
    logger.debug("Parsed %s, rest %r", expr, rest)
    if rest:
        raise ParseError(f"unexpected trailing input '{rest}'")
    return expr
