"""Shared debug printers for lexer/parser/ast tests."""

from __future__ import annotations

import json
import os

from moonparse.ast import Chunk, to_dict
from moonparse.diagnostics import Diagnostic
from moonparse.lexer import Token

_TRUTHY = {"1", "true", "yes", "on"}

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in _TRUTHY
PRINT_AST = os.getenv("PRINT_AST", "0").lower() in _TRUTHY
PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in _TRUTHY
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in _TRUTHY


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_tokens(test_name: str, source: str, tokens: list[Token] | tuple[Token, ...]) -> None:
    if not PRINT_TOKENS:
        return
    debug_print_source(test_name, source)
    print(f"\n===== {test_name} TOKENS =====")
    for index, tok in enumerate(tokens):
        print(f"{index:03d} {tok.kind.name:<10} range={tok.range.as_tuple()} text={tok.text!r}")


def debug_dump_ast(test_name: str, chunk: Chunk | None, source: str | None = None) -> None:
    if not PRINT_AST:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"\n===== {test_name} AST =====")
    if chunk is None:
        print("(no tree)")
        return
    print(json.dumps(to_dict(chunk, include_ids=False), indent=2))


def debug_dump_diagnostics(test_name: str, diagnostics: list[Diagnostic], source: str | None = None) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"===== {test_name} DIAGNOSTICS =====")
    if not diagnostics:
        print("(none)")
        return
    for diagnostic in diagnostics:
        print(diagnostic)
