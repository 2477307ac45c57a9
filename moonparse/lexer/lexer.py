"""Lexer."""

from moonparse.diagnostics import Diagnostic
from moonparse.diagnostics.codes import (
    LEXER_INVALID_ESCAPE,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from moonparse.lexer.tokens import BRACKETS, KEYWORDS, OPERATORS, StringLiteral, Token, TokenKind
from moonparse.text import TextRange, slice_text_range

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "\n": "\n",
    "\r": "\n",
}

_DECIMAL_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class Lexer:
    """Lexer that drops trivia (whitespace, comments) and emits parser tokens."""

    def __init__(self, source: str, *, goto_is_keyword: bool = True) -> None:
        self._source = source
        self._position = 0
        self._token_start = 0
        self._keywords = KEYWORDS if goto_is_keyword else KEYWORDS - {"goto"}
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            self._skip_trivia()
            if self.is_eof:
                break
            token = self._lex_token()
            if token is not None:
                tokens.append(token)
        return tokens

    def _lex_token(self) -> Token | None:
        self._token_start = self._position
        ch = self._current_char()

        if ch == '"' or ch == "'":
            return self._lex_quoted_string(ch)

        if ch == "[":
            level = self._long_bracket_level()
            if level is not None:
                return self._lex_long_string(level)

        if ch in _DECIMAL_DIGITS or (ch == "." and self._peek_char() in _DECIMAL_DIGITS):
            return self._lex_number()

        if ch.isalpha() or ch == "_":
            return self._lex_name()

        kind = BRACKETS.get(ch)
        if kind is not None:
            self._advance(1)
            return self._make_token(kind)

        for op in OPERATORS:
            if self._source.startswith(op, self._position):
                self._advance(len(op))
                return self._make_token(TokenKind.OPERATOR)

        # Unknown character: report it and drop it.
        self._advance(1)
        self._error(LEXER_UNEXPECTED_CHARACTER, TextRange(self._token_start, self._position), f"Unexpected character {ch!r}.")
        return None

    def _skip_trivia(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch in " \t\r\n\v\f":
                self._advance(1)
                continue
            if ch == "-" and self._peek_char() == "-":
                self._skip_comment()
                continue
            break

    def _skip_comment(self) -> None:
        start = self._position
        self._advance(2)
        if self._current_char() == "[":
            level = self._long_bracket_level()
            if level is not None:
                self._advance(level + 2)
                if self._find_long_close(level) is None:
                    self._error(LEXER_UNTERMINATED_COMMENT, TextRange(start, self._position))
                return
        while not self.is_eof and self._current_char() not in "\r\n":
            self._advance(1)

    def _long_bracket_level(self) -> int | None:
        """Return the level of a `[==[` opener at the cursor, or None if there is none."""
        index = self._position + 1
        while index < len(self._source) and self._source[index] == "=":
            index += 1
        if index < len(self._source) and self._source[index] == "[":
            return index - self._position - 1
        return None

    def _find_long_close(self, level: int) -> int | None:
        """Advance past the matching `]==]` and return where its body ended."""
        closer = "]" + "=" * level + "]"
        end = self._source.find(closer, self._position)
        if end == -1:
            self._position = len(self._source)
            return None
        self._position = end + len(closer)
        return end

    def _lex_long_string(self, level: int) -> Token:
        self._advance(level + 2)
        body_start = self._position
        # A newline right after the opener is not part of the string.
        if self._source.startswith("\r\n", body_start) or self._source.startswith("\n\r", body_start):
            body_start += 2
        elif self._current_char() in "\r\n":
            body_start += 1
        body_end = self._find_long_close(level)
        if body_end is None:
            body_end = self._position
            self._error(LEXER_UNTERMINATED_STRING, TextRange(self._token_start, self._position))
        value = self._source[body_start:body_end] if body_end >= body_start else ""
        return self._make_token(TokenKind.STRING, value=value)

    def _lex_quoted_string(self, quote: str) -> Token:
        self._advance(1)
        parts: list[str] = []
        closed = False

        while not self.is_eof:
            ch = self._current_char()
            if ch == quote:
                self._advance(1)
                closed = True
                break
            if ch == "\r" or ch == "\n":
                break
            if ch == "\\":
                parts.append(self._lex_escape())
                continue
            parts.append(ch)
            self._advance(1)

        if not closed:
            self._error(LEXER_UNTERMINATED_STRING, TextRange(self._token_start, self._position))

        return self._make_token(TokenKind.STRING, value="".join(parts))

    def _lex_escape(self) -> str:
        escape_start = self._position
        self._advance(1)
        ch = self._current_char()

        simple = _SIMPLE_ESCAPES.get(ch)
        if simple is not None:
            self._advance(1)
            if ch == "\r" and self._current_char() == "\n":
                self._advance(1)
            return simple

        if ch == "z":
            self._advance(1)
            while not self.is_eof and self._current_char() in " \t\r\n\v\f":
                self._advance(1)
            return ""

        if ch == "x":
            digits = self._source[self._position + 1 : self._position + 3]
            if len(digits) == 2 and all(d in _HEX_DIGITS for d in digits):
                self._advance(3)
                return chr(int(digits, 16))
            return self._invalid_escape(escape_start)

        if ch in _DECIMAL_DIGITS:
            end = self._position
            while end < len(self._source) and end - self._position < 3 and self._source[end] in _DECIMAL_DIGITS:
                end += 1
            code = int(self._source[self._position : end])
            if code > 255:
                return self._invalid_escape(escape_start)
            self._position = end
            return chr(code)

        if ch == "u" and self._peek_char() == "{":
            close = self._source.find("}", self._position)
            digits = self._source[self._position + 2 : close] if close != -1 else ""
            if digits and all(d in _HEX_DIGITS for d in digits) and int(digits, 16) <= 0x10FFFF:
                self._position = close + 1
                return chr(int(digits, 16))
            return self._invalid_escape(escape_start)

        return self._invalid_escape(escape_start)

    def _invalid_escape(self, escape_start: int) -> str:
        # Keep the backslash and the following character verbatim.
        if not self.is_eof:
            self._advance(1)
        text = self._source[escape_start : self._position]
        self._error(LEXER_INVALID_ESCAPE, TextRange(escape_start, self._position), f"Invalid escape sequence {text!r}.")
        return text

    def _lex_number(self) -> Token:
        if self._current_char() == "0" and self._peek_char() in "xX":
            self._advance(2)
            self._consume_digits(_HEX_DIGITS)
            if self._current_char() == "." and self._peek_char() != ".":
                self._advance(1)
                self._consume_digits(_HEX_DIGITS)
            self._consume_exponent("pP")
        else:
            self._consume_digits(_DECIMAL_DIGITS)
            if self._current_char() == "." and self._peek_char() != ".":
                self._advance(1)
                self._consume_digits(_DECIMAL_DIGITS)
            self._consume_exponent("eE")
        return self._make_token(TokenKind.NUMBER)

    def _consume_digits(self, digits: frozenset[str]) -> None:
        while not self.is_eof and self._current_char() in digits:
            self._advance(1)

    def _consume_exponent(self, markers: str) -> None:
        if self.is_eof or self._current_char() not in markers:
            return
        ahead = 1
        if self._peek_char() in "+-":
            ahead = 2
        if self._peek_char(ahead) not in _DECIMAL_DIGITS:
            return
        self._advance(ahead)
        self._consume_digits(_DECIMAL_DIGITS)

    def _lex_name(self) -> Token:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            break
        text = self._source[self._token_start : self._position]
        return self._make_token(TokenKind.KEYWORD if text in self._keywords else TokenKind.IDENTIFIER)

    def _make_token(self, kind: TokenKind, *, value: str | None = None) -> Token:
        range = TextRange(self._token_start, self._position)
        text = slice_text_range(self._source, range)
        string = StringLiteral(raw=text, value=value) if value is not None else None
        return Token(kind, text, range, string)

    def _error(self, spec: DiagnosticSpec, range: TextRange, message: str | None = None) -> None:
        self._diagnostics.append(spec.at(range, message))

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def lex(source: str, *, goto_is_keyword: bool = True) -> tuple[list[Token], list[Diagnostic]]:
    """Lex `source` and return its tokens together with any lexer diagnostics."""
    lexer = Lexer(source, goto_is_keyword=goto_is_keyword)
    tokens = lexer.lex()
    return tokens, lexer.diagnostics


def dump_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<10} range={tok.range.as_tuple()} text={tok.text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
