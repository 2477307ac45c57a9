"""Parse carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from moonparse.diagnostics import format_diagnostic, has_errors
from moonparse.parser.lua import ParsedChunk
from moonparse.parser.options import ParserOptions
from moonparse.text import LineIndex

if TYPE_CHECKING:
    from moonparse.ast import Chunk
    from moonparse.ast.export import ExportedValue
    from moonparse.diagnostics import Diagnostic
    from moonparse.lexer import Token


@dataclass(slots=True)
class LuaParseResult:
    """Lua parse result with lazily built line index and export."""

    source_text: str
    parsed: ParsedChunk
    options: ParserOptions
    _line_index: LineIndex | None = field(default=None, init=False, repr=False)
    _exported: dict[str, ExportedValue] | None = field(default=None, init=False, repr=False)

    @property
    def chunk(self) -> Chunk | None:
        return self.parsed.chunk

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self.parsed.tokens

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.parsed.diagnostics)

    def line_index(self) -> LineIndex:
        if self._line_index is None:
            self._line_index = LineIndex.of(self.source_text)
        return self._line_index

    def render_diagnostics(self) -> list[str]:
        index = self.line_index()
        return [format_diagnostic(diagnostic, index) for diagnostic in self.diagnostics]

    def export(self) -> dict[str, ExportedValue]:
        """Plain-data form of the chunk; raises ValueError when parsing failed."""
        if self._exported is None:
            if self.parsed.chunk is None:
                raise ValueError("Cannot export a failed parse")
            from moonparse.ast.export import to_dict

            self._exported = to_dict(self.parsed.chunk)
        return self._exported
