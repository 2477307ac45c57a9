"""Source text positions."""

from moonparse.text.text import LineIndex, TextRange, slice_text_range

__all__ = [
    "LineIndex",
    "TextRange",
    "slice_text_range",
]
