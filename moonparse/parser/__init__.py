"""Parser infrastructure (token cursor + combinators + Lua grammar)."""

from moonparse.parser.combinators import (
    NO_MATCH,
    Match,
    NoMatch,
    ParseError,
    Parser,
    ParseResult,
    TotalParser,
    delimited_one_or_more,
    delimited_zero_or_more,
    expect,
    first_of,
    identifier,
    keyword,
    map_value,
    nested,
    number,
    one_or_more,
    operator,
    optional,
    preceded,
    satisfy,
    string_literal,
    syntax_error,
    token,
    zero_or_more,
)
from moonparse.parser.cursor import TokenCursor
from moonparse.parser.grammar import LuaGrammar
from moonparse.parser.lua import ParsedChunk, ensure_recursion_headroom, parse, parse_result, parse_tokens
from moonparse.parser.options import LuaVersion, ParserOptions

__all__ = [
    "NO_MATCH",
    "LuaGrammar",
    "LuaVersion",
    "Match",
    "NoMatch",
    "ParseError",
    "ParseResult",
    "ParsedChunk",
    "Parser",
    "ParserOptions",
    "TokenCursor",
    "TotalParser",
    "delimited_one_or_more",
    "delimited_zero_or_more",
    "ensure_recursion_headroom",
    "expect",
    "first_of",
    "identifier",
    "keyword",
    "map_value",
    "nested",
    "number",
    "one_or_more",
    "operator",
    "optional",
    "parse",
    "parse_result",
    "parse_tokens",
    "preceded",
    "satisfy",
    "string_literal",
    "syntax_error",
    "token",
    "zero_or_more",
]
