"""Source text positions and physical line splitting."""

from deskentry.text.text import LineSpan, TextRange, slice_text_range, split_lines

__all__ = [
    "LineSpan",
    "TextRange",
    "slice_text_range",
    "split_lines",
]
