"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from moonparse.diagnostics.diagnostic import Diagnostic, Severity, Stage
from moonparse.text import TextRange


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: Stage | None = None

    def at(self, range: TextRange, message: str | None = None) -> Diagnostic:
        """Instantiate this spec at a source range, optionally overriding the message."""
        return Diagnostic(
            code=self.code,
            message=message if message is not None else self.message,
            range=range,
            severity=self.severity,
            hint=self.hint,
            category=self.category,
        )


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with the same quote it was opened with.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_COMMENT",
    message="Unterminated long comment.",
    hint="Close the comment with a matching `]]` (same number of `=` signs).",
    severity="error",
    category="lexer",
)

LEXER_INVALID_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_ESCAPE",
    message="Invalid escape sequence in string literal.",
    severity="error",
    category="lexer",
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character.",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_EXPRESSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_EXPRESSION",
    message="Expected an expression",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    severity="error",
    category="parser",
)

PARSER_MISPLACED_VARARG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISPLACED_VARARG",
    message="`...` must be the last parameter",
    severity="error",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Input is nested too deeply",
    hint="Raise ParserOptions.max_depth (with ensure_recursion_headroom for large values) or flatten the input.",
    severity="error",
    category="parser",
)

PARSER_INTERNAL_NO_MATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INTERNAL_NO_MATCH",
    message="Internal parser error: no grammar rule matched the input",
    severity="error",
    category="parser",
)
