"""Lexer and parser diagnostics anchored to source ranges."""

from dataclasses import dataclass
from typing import Literal

from moonparse.text import LineIndex, TextRange

Severity = Literal["error", "warning"]
Stage = Literal["lexer", "parser"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One problem found in Lua source.

    `code` is the stable identifier (`PARSER_EXPECTED_TOKEN`) and `message`
    the text shown to people, usually naming the token that was found.
    `category` says which stage reported it.
    """

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: Stage | None = None

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    def location(self, line_index: LineIndex) -> tuple[int, int]:
        """1-based `(line, column)` where the range starts."""
        return line_index.line_col(self.range.start)
