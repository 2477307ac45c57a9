"""Backtracking parser combinators over `TokenCursor`.

A parser is a plain function from a cursor to a `ParseResult`. It returns
either a `Match` (the advanced cursor plus a value) or `NO_MATCH`, meaning
"this alternative does not apply here, try a sibling". A parser that has
committed to a production and then meets malformed input raises
`ParseError` instead. Combinators never catch it, so the error travels
straight to the entrypoint and sibling alternatives are not tried.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from moonparse.diagnostics.codes import (
    PARSER_EXPECTED_TOKEN,
    PARSER_NESTING_TOO_DEEP,
    DiagnosticSpec,
)
from moonparse.diagnostics.diagnostic import Diagnostic
from moonparse.lexer import Token, TokenKind
from moonparse.parser.cursor import TokenCursor


class NoMatch:
    """Type of the `NO_MATCH` sentinel."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH: Final[NoMatch] = NoMatch()


@dataclass(frozen=True, slots=True)
class Match[T]:
    cursor: TokenCursor
    value: T


type ParseResult[T] = Match[T] | NoMatch
type Parser[T] = Callable[[TokenCursor], ParseResult[T]]
# A parser that always matches, possibly consuming nothing.
type TotalParser[T] = Callable[[TokenCursor], Match[T]]


class ParseError(Exception):
    """A committed production met malformed input."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic


def syntax_error(cursor: TokenCursor, message: str, spec: DiagnosticSpec = PARSER_EXPECTED_TOKEN) -> ParseError:
    return ParseError(spec.at(cursor.current_range, message))


# -------------------------
# Single-token matchers
# -------------------------


def satisfy(predicate: Callable[[Token], bool]) -> Parser[Token]:
    def parse(cursor: TokenCursor) -> ParseResult[Token]:
        current = cursor.peek()
        if current is not None and predicate(current):
            return Match(cursor.advance(), current)
        return NO_MATCH

    return parse


def token(kind: TokenKind) -> Parser[Token]:
    return satisfy(lambda t: t.kind == kind)


def keyword(text: str) -> Parser[Token]:
    return satisfy(lambda t: t.is_keyword(text))


def operator(text: str) -> Parser[Token]:
    return satisfy(lambda t: t.is_operator(text))


identifier: Final[Parser[Token]] = token(TokenKind.IDENTIFIER)
number: Final[Parser[Token]] = token(TokenKind.NUMBER)
string_literal: Final[Parser[Token]] = token(TokenKind.STRING)


# -------------------------
# Structure
# -------------------------


def map_value[T, U](parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:
    def parse(cursor: TokenCursor) -> ParseResult[U]:
        result = parser(cursor)
        if isinstance(result, NoMatch):
            return NO_MATCH
        return Match(result.cursor, fn(result.value))

    return parse


def preceded[T](prefix: Parser[object], parser: Parser[T]) -> Parser[T]:
    """Match `prefix` then `parser`, keeping only the latter's value.

    Backtracks (NO_MATCH) if `parser` fails after `prefix` matched.
    """

    def parse(cursor: TokenCursor) -> ParseResult[T]:
        first = prefix(cursor)
        if isinstance(first, NoMatch):
            return NO_MATCH
        return parser(first.cursor)

    return parse


def optional[T](parser: Parser[T]) -> TotalParser[T | None]:
    def parse(cursor: TokenCursor) -> Match[T | None]:
        result = parser(cursor)
        if isinstance(result, NoMatch):
            return Match(cursor, None)
        return result

    return parse


def first_of[T](*parsers: Parser[T]) -> Parser[T]:
    """Ordered choice: the first alternative that matches wins."""

    def parse(cursor: TokenCursor) -> ParseResult[T]:
        for parser in parsers:
            result = parser(cursor)
            if not isinstance(result, NoMatch):
                return result
        return NO_MATCH

    return parse


# -------------------------
# Repetition
# -------------------------


def zero_or_more[T](parser: Parser[T]) -> TotalParser[tuple[T, ...]]:
    def parse(cursor: TokenCursor) -> Match[tuple[T, ...]]:
        items: list[T] = []
        while True:
            result = parser(cursor)
            if isinstance(result, NoMatch):
                break
            items.append(result.value)
            if result.cursor.position == cursor.position:
                # An item that consumes nothing would repeat forever.
                break
            cursor = result.cursor
        return Match(cursor, tuple(items))

    return parse


def one_or_more[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    repeated = zero_or_more(parser)

    def parse(cursor: TokenCursor) -> ParseResult[tuple[T, ...]]:
        result = repeated(cursor)
        if not result.value:
            return NO_MATCH
        return result

    return parse


def delimited_zero_or_more[T](
    parser: Parser[T],
    separator: Parser[Token],
    *,
    allow_trailing: bool = False,
    expected: str = "item",
) -> TotalParser[tuple[T, ...]]:
    """`item (sep item)*`, possibly empty.

    A separator with no item after it ends the list when `allow_trailing` is
    set; otherwise it raises `ParseError`, since the separator already
    promised another `expected`.
    """

    def parse(cursor: TokenCursor) -> Match[tuple[T, ...]]:
        first = parser(cursor)
        if isinstance(first, NoMatch):
            return Match(cursor, ())

        items = [first.value]
        cursor = first.cursor
        while True:
            sep = separator(cursor)
            if isinstance(sep, NoMatch):
                break
            item = parser(sep.cursor)
            if isinstance(item, NoMatch):
                if allow_trailing:
                    cursor = sep.cursor
                    break
                raise syntax_error(
                    sep.cursor,
                    f"expected {expected} after '{sep.value.text}', found {sep.cursor.describe_current()}",
                )
            items.append(item.value)
            cursor = item.cursor
        return Match(cursor, tuple(items))

    return parse


def delimited_one_or_more[T](
    parser: Parser[T],
    separator: Parser[Token],
    *,
    expected: str = "item",
) -> Parser[tuple[T, ...]]:
    delimited = delimited_zero_or_more(parser, separator, allow_trailing=False, expected=expected)

    def parse(cursor: TokenCursor) -> ParseResult[tuple[T, ...]]:
        result = delimited(cursor)
        if not result.value:
            return NO_MATCH
        return result

    return parse


# -------------------------
# Commitment
# -------------------------


def expect[T](parser: Parser[T], cursor: TokenCursor, expected: str, *, context: str | None = None) -> Match[T]:
    """Run `parser` at a point where the production is already committed.

    NO_MATCH is turned into a `ParseError` that names what was expected, the
    production (`context`) and the token actually found.
    """
    result = parser(cursor)
    if isinstance(result, NoMatch):
        where = f" {context}" if context else ""
        raise syntax_error(cursor, f"expected {expected}{where}, found {cursor.describe_current()}")
    return result


def nested[T](parser: Parser[T], *, max_depth: int) -> Parser[T]:
    """Run `parser` one nesting level deeper, failing once `max_depth` is reached."""

    def parse(cursor: TokenCursor) -> ParseResult[T]:
        if cursor.depth >= max_depth:
            raise syntax_error(
                cursor,
                f"nesting exceeds {max_depth} levels at {cursor.describe_current()}",
                PARSER_NESTING_TOO_DEEP,
            )
        result = parser(cursor.descend())
        if isinstance(result, NoMatch):
            return NO_MATCH
        return Match(result.cursor.at_depth(cursor.depth), result.value)

    return parse
