"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from moonparse.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Words / literals
    # -------------------------
    KEYWORD = 10
    IDENTIFIER = 11
    NUMBER = 12  # raw lexeme, never converted
    STRING = 13  # escapes already resolved into Token.string

    # -------------------------
    # Operators and separators (`+`, `..`, `=`, `,`, `;`, `::`, `...`)
    # -------------------------
    OPERATOR = 20

    # -------------------------
    # Brackets
    # -------------------------
    LPAREN = 30  # (
    RPAREN = 31  # )
    LBRACE = 32  # {
    RBRACE = 33  # }
    LBRACKET = 34  # [
    RBRACKET = 35  # ]


KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "and",
        "break",
        "do",
        "else",
        "elseif",
        "end",
        "false",
        "for",
        "function",
        "goto",
        "if",
        "in",
        "local",
        "nil",
        "not",
        "or",
        "repeat",
        "return",
        "then",
        "true",
        "until",
        "while",
    }
)

# Longest first so that maximal munch falls out of a linear scan.
OPERATORS: Final[tuple[str, ...]] = (
    "...",
    "..",
    "==",
    "~=",
    "<=",
    ">=",
    "//",
    "::",
    "<<",
    ">>",
    "+",
    "-",
    "*",
    "/",
    "%",
    "^",
    "#",
    "<",
    ">",
    "=",
    "&",
    "|",
    "~",
    ",",
    ";",
    ":",
    ".",
)

BRACKETS: Final[dict[str, TokenKind]] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
}


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """A string literal as written (`raw`, quotes included) and as interpreted (`value`)."""

    raw: str
    value: str


@dataclass(frozen=True, slots=True)
class Token:
    """A single non-trivia token."""

    kind: TokenKind
    text: str
    range: TextRange
    string: StringLiteral | None = None

    def is_keyword(self, text: str) -> bool:
        return self.kind == TokenKind.KEYWORD and self.text == text

    def is_operator(self, text: str) -> bool:
        return self.kind == TokenKind.OPERATOR and self.text == text

    def describe(self) -> str:
        """Short human-readable form used in diagnostics."""
        if self.kind == TokenKind.STRING:
            return f"string {self.text}"
        if self.kind == TokenKind.NUMBER:
            return f"number '{self.text}'"
        if self.kind == TokenKind.IDENTIFIER:
            return f"name '{self.text}'"
        return f"'{self.text}'"
