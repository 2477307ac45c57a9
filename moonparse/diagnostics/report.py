"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from moonparse.diagnostics.diagnostic import Diagnostic
from moonparse.text import LineIndex


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.is_error for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic, line_index: LineIndex) -> str:
    """Render `line:col: SEVERITY CODE message`, with the hint on a second line when present."""
    line, column = diagnostic.location(line_index)
    text = f"{line}:{column}: {diagnostic.severity} {diagnostic.code} {diagnostic.message}"
    if diagnostic.hint:
        text += f"\n  hint: {diagnostic.hint}"
    return text
