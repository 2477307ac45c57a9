"""Diagnostics."""

from moonparse.diagnostics.codes import (
    LEXER_INVALID_ESCAPE,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_EXPRESSION,
    PARSER_EXPECTED_TOKEN,
    PARSER_INTERNAL_NO_MATCH,
    PARSER_MISPLACED_VARARG,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
)
from moonparse.diagnostics.diagnostic import Diagnostic, Severity, Stage
from moonparse.diagnostics.report import collect_diagnostics, format_diagnostic, has_errors

__all__ = [
    "LEXER_INVALID_ESCAPE",
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_COMMENT",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_EXPRESSION",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_INTERNAL_NO_MATCH",
    "PARSER_MISPLACED_VARARG",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_UNEXPECTED_TOKEN",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "Stage",
    "collect_diagnostics",
    "format_diagnostic",
    "has_errors",
]
