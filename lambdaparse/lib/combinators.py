"""Generic backtracking parser combinators.

A parser is a pure function from the remaining input to either ``None``
(failure) or a ``(value, rest)`` pair. Because strings are immutable and no
parser keeps a cursor, a failing branch always reports against the exact input
it was given, so alternation backtracks for free.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Result = Optional[Tuple[T, str]]


@dataclass(frozen=True)
class Parser(Generic[T]):
    run: Callable[[str], "Result[T]"]

    def __call__(self, text: str) -> "Result[T]":
        return self.run(text)

    def map(self, f: Callable[[T], U]) -> "Parser[U]":
        return fmap(self, f)

    def bind(self, f: "Callable[[T], Parser[U]]") -> "Parser[U]":
        return bind(self, f)

    def or_else(self, other: "Parser[T]") -> "Parser[T]":
        return or_else(self, other)

    def and_then(self, other: "Parser[U]") -> "Parser[Tuple[T, U]]":
        return and_then(self, other)

    # overrides `|`
    def __or__(self, other: "Parser[T]") -> "Parser[T]":
        return or_else(self, other)

    # overrides `+`
    def __add__(self, other: "Parser[U]") -> "Parser[Tuple[T, U]]":
        return and_then(self, other)

    # overrides `<<`
    def __lshift__(self, other: "Parser[Any]") -> "Parser[T]":
        return left(self, other)

    # overrides `>>`
    def __rshift__(self, other: "Parser[U]") -> "Parser[U]":
        return right(self, other)


def parse(parser: Parser[T], text: str) -> "Result[T]":
    """Run ``parser`` against ``text``.

    A non-empty remainder in a successful result means only a prefix of
    ``text`` was recognized; it is up to the caller to reject that.
    """
    return parser(text)


def pure(value: T) -> Parser[T]:
    return Parser(lambda text: (value, text))


def fail() -> Parser[Any]:
    return Parser(lambda text: None)


def satisfy(predicate: Callable[[str], bool]) -> Parser[str]:
    def run(text: str) -> Result[str]:
        if text and predicate(text[0]):
            return text[0], text[1:]
        return None

    return Parser(run)


def literal_char(c: str) -> Parser[str]:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return satisfy(lambda x: x == c)


def literal_string(s: str) -> Parser[str]:
    def run(text: str) -> Result[str]:
        if text.startswith(s):
            return s, text[len(s) :]
        return None

    return Parser(run)


def fmap(parser: Parser[T], f: Callable[[T], U]) -> Parser[U]:
    def run(text: str) -> Result[U]:
        result = parser(text)
        if result is None:
            return None
        value, rest = result
        return f(value), rest

    return Parser(run)


def bind(parser: Parser[T], f: Callable[[T], Parser[U]]) -> Parser[U]:
    """Sequence ``parser`` with a parser chosen from its result."""

    def run(text: str) -> Result[U]:
        result = parser(text)
        if result is None:
            return None
        value, rest = result
        return f(value)(rest)

    return Parser(run)


def and_then(first: Parser[T], second: Parser[U]) -> Parser[Tuple[T, U]]:
    def run(text: str) -> Result[Tuple[T, U]]:
        result = first(text)
        if result is None:
            return None
        a, rest = result
        result2 = second(rest)
        if result2 is None:
            return None
        b, rest = result2
        return (a, b), rest

    return Parser(run)


def left(first: Parser[T], second: Parser[Any]) -> Parser[T]:
    return fmap(and_then(first, second), lambda pair: pair[0])


def right(first: Parser[Any], second: Parser[U]) -> Parser[U]:
    return fmap(and_then(first, second), lambda pair: pair[1])


def between(opening: Parser[Any], parser: Parser[T], closing: Parser[Any]) -> Parser[T]:
    return opening >> parser << closing


def or_else(first: Parser[T], second: Parser[T]) -> Parser[T]:
    def run(text: str) -> Result[T]:
        result = first(text)
        if result is not None:
            return result
        return second(text)

    return Parser(run)


def many(parser: Parser[T]) -> Parser[list[T]]:
    def run(text: str) -> Result[list[T]]:
        values: list[T] = []
        while True:
            result = parser(text)
            if result is None:
                break
            value, rest = result
            if len(rest) == len(text):
                # No progress; repeating would loop forever.
                break
            values.append(value)
            text = rest
        return values, text

    return Parser(run)


def some(parser: Parser[T]) -> Parser[list[T]]:
    return fmap(and_then(parser, many(parser)), lambda pair: [pair[0], *pair[1]])


def sep_by_some(parser: Parser[T], sep: Parser[Any]) -> Parser[list[T]]:
    return fmap(and_then(parser, many(right(sep, parser))), lambda pair: [pair[0], *pair[1]])


def sep_by(parser: Parser[T], sep: Parser[Any]) -> Parser[list[T]]:
    return or_else(sep_by_some(parser, sep), pure([]))


def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until it is first run.

    Lets a recursive rule refer to a parser assigned after it.
    """
    return Parser(lambda text: thunk()(text))


whitespace: Parser[list[str]] = many(satisfy(str.isspace))
