"""Lexer."""

from moonparse.lexer.lexer import Lexer, dump_tokens, lex
from moonparse.lexer.tokens import (
    KEYWORDS,
    OPERATORS,
    StringLiteral,
    Token,
    TokenKind,
)

__all__ = [
    "KEYWORDS",
    "OPERATORS",
    "Lexer",
    "StringLiteral",
    "Token",
    "TokenKind",
    "dump_tokens",
    "lex",
]
