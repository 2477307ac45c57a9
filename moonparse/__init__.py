"""Combinator-based parser for Lua source."""

from moonparse.parser import (
    LuaVersion,
    ParsedChunk,
    ParseError,
    ParserOptions,
    ensure_recursion_headroom,
    parse,
    parse_result,
    parse_tokens,
)

__all__ = [
    "LuaVersion",
    "ParseError",
    "ParsedChunk",
    "ParserOptions",
    "ensure_recursion_headroom",
    "parse",
    "parse_result",
    "parse_tokens",
]
