"""Immutable position in a token stream."""

from dataclasses import dataclass

from moonparse.lexer import Token
from moonparse.text import TextRange


@dataclass(frozen=True, slots=True)
class TokenCursor:
    """A token tuple plus a position; every move returns a new cursor.

    Because cursors never change, any number of grammar alternatives can be
    tried from the same starting point without undo bookkeeping. `depth`
    counts how many nested productions are open and feeds the nesting guard.
    """

    tokens: tuple[Token, ...]
    position: int = 0
    depth: int = 0

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def peek(self, n: int = 0) -> Token | None:
        index = self.position + n
        if index < len(self.tokens):
            return self.tokens[index]
        return None

    def advance(self, amount: int = 1) -> "TokenCursor":
        return TokenCursor(self.tokens, self.position + amount, self.depth)

    def descend(self) -> "TokenCursor":
        return TokenCursor(self.tokens, self.position, self.depth + 1)

    def at_depth(self, depth: int) -> "TokenCursor":
        return TokenCursor(self.tokens, self.position, depth)

    @property
    def current_range(self) -> TextRange:
        token = self.peek()
        if token is not None:
            return token.range
        if self.tokens:
            return TextRange.empty(self.tokens[-1].range.end)
        return TextRange.empty(0)

    def describe_current(self) -> str:
        token = self.peek()
        return token.describe() if token is not None else "end of input"
