"""High-level parse entrypoints for Lua source text."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from moonparse.ast import DEFAULT_ID_ALLOCATOR, Chunk, IdAllocator
from moonparse.diagnostics import Diagnostic, collect_diagnostics
from moonparse.diagnostics.codes import PARSER_NESTING_TOO_DEEP
from moonparse.lexer import Lexer, Token
from moonparse.parser.combinators import ParseError
from moonparse.parser.grammar import LuaGrammar
from moonparse.parser.options import LuaVersion, ParserOptions
from moonparse.text import TextRange

if TYPE_CHECKING:
    from moonparse.pipeline import LuaParseResult

LOGGER = logging.getLogger(__name__)

# Upper bound on interpreter frames spent per nesting level, plus room for
# the caller's own stack.
_FRAMES_PER_LEVEL: Final[int] = 24
_BASE_FRAMES: Final[int] = 1000

_recursion_lock = threading.Lock()


@dataclass(frozen=True, slots=True)
class ParsedChunk:
    """Tokens, tree and diagnostics of one parse. `chunk` is None when parsing failed."""

    text: str
    tokens: tuple[Token, ...]
    chunk: Chunk | None
    diagnostics: list[Diagnostic]


def _resolve_options(
    options: ParserOptions | None,
    version: LuaVersion | None,
) -> ParserOptions:
    if version is not None and options is not None:
        raise ValueError("Pass either options or version, not both")

    if options is not None:
        return options

    if version is not None:
        return ParserOptions.for_version(version)

    return ParserOptions()


def ensure_recursion_headroom(max_depth: int) -> int:
    """Raise the interpreter recursion limit so that `max_depth` levels of nesting fit.

    Parsing never touches the limit itself. Without enough headroom, deeply
    nested input is reported as `PARSER_NESTING_TOO_DEEP` before `max_depth`
    is reached. Call this once at startup when a large `max_depth` must be
    honoured in full. The limit is only ever raised. Returns the limit now
    in effect.
    """
    if max_depth < 1:
        raise ValueError("max_depth must be at least 1")
    needed = max_depth * _FRAMES_PER_LEVEL + _BASE_FRAMES
    with _recursion_lock:
        if sys.getrecursionlimit() < needed:
            LOGGER.debug("raising recursion limit to %d for max_depth=%d", needed, max_depth)
            sys.setrecursionlimit(needed)
        return sys.getrecursionlimit()


def _run_grammar(grammar: LuaGrammar, tokens: tuple[Token, ...]) -> Chunk:
    try:
        return grammar.parse(tokens)
    except RecursionError:
        whole_input = tokens[0].range.cover(tokens[-1].range) if tokens else TextRange.empty(0)
        message = f"nesting exceeds the interpreter recursion limit of {sys.getrecursionlimit()} frames"
        raise ParseError(PARSER_NESTING_TOO_DEEP.at(whole_input, message)) from None


def parse_tokens(
    tokens: Iterable[Token],
    options: ParserOptions | None = None,
    *,
    version: LuaVersion | None = None,
    ids: IdAllocator | None = None,
) -> Chunk:
    """Parse a token stream into a `Chunk`, raising `ParseError` on malformed input."""
    resolved_options = _resolve_options(options=options, version=version)
    token_tuple = tuple(tokens)

    grammar = LuaGrammar(ids if ids is not None else DEFAULT_ID_ALLOCATOR, resolved_options)
    LOGGER.debug("parsing %d tokens (lua %s)", len(token_tuple), resolved_options.version)
    chunk = _run_grammar(grammar, token_tuple)
    LOGGER.debug("parsed %d top-level statements", len(chunk.statements))
    return chunk


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    version: LuaVersion | None = None,
    ids: IdAllocator | None = None,
) -> ParsedChunk:
    """Lex and parse `text`. Syntax errors become diagnostics instead of exceptions."""
    resolved_options = _resolve_options(options=options, version=version)

    lexer = Lexer(text, goto_is_keyword=resolved_options.allow_goto)
    tokens = tuple(lexer.lex())
    parser_diagnostics: list[Diagnostic] = []
    chunk: Chunk | None
    try:
        chunk = parse_tokens(tokens, options=resolved_options, ids=ids)
    except ParseError as error:
        LOGGER.debug("parse failed: %s", error)
        chunk = None
        parser_diagnostics.append(error.diagnostic)

    diagnostics = collect_diagnostics(lexer.diagnostics, parser_diagnostics)
    return ParsedChunk(text=text, tokens=tokens, chunk=chunk, diagnostics=diagnostics)


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    version: LuaVersion | None = None,
    ids: IdAllocator | None = None,
) -> LuaParseResult:
    from moonparse.pipeline import LuaParseResult

    resolved_options = _resolve_options(options=options, version=version)
    parsed = parse(text, options=resolved_options, ids=ids)
    return LuaParseResult(
        source_text=text,
        parsed=parsed,
        options=resolved_options,
    )
