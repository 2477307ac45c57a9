from bisect import bisect_right
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) of character offsets into source text.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def at(offset: int, length: int) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset, offset + length)

    @staticmethod
    def empty(offset: int) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset, offset)

    def len(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both this range and another range."""
        return TextRange(min(self.start, other.start), max(self.end, other.end))

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Maps character offsets to 1-based (line, column) pairs."""

    line_starts: tuple[int, ...] = field(default=(0,))

    @staticmethod
    def of(text: str) -> "LineIndex":
        starts = [0]
        offset = 0
        while offset < len(text):
            ch = text[offset]
            if ch == "\r" and offset + 1 < len(text) and text[offset + 1] == "\n":
                offset += 1
            if ch in "\r\n":
                starts.append(offset + 1)
            offset += 1
        return LineIndex(tuple(starts))

    def line_col(self, offset: int) -> tuple[int, int]:
        line = bisect_right(self.line_starts, offset) - 1
        return (line + 1, offset - self.line_starts[line] + 1)


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange."""
    return source[range.start : range.end]
