from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in source text, as string offsets.

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

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


@dataclass(frozen=True, slots=True)
class LineSpan:
    """One physical line: content offsets plus the line ending that closed it."""

    index: int
    start: int
    end: int
    ending: str

    @property
    def next_start(self) -> int:
        return self.end + len(self.ending)


def split_lines(source: str) -> list[LineSpan]:
    """Split source into physical lines terminated by `\\n`, `\\r\\n` or end of input.

    A final line ending does not open an extra empty line, and empty input has
    no lines at all.
    """
    lines: list[LineSpan] = []
    offset = 0
    length = len(source)
    while offset < length:
        newline = source.find("\n", offset)
        if newline == -1:
            lines.append(LineSpan(index=len(lines), start=offset, end=length, ending=""))
            break
        end = newline
        ending = "\n"
        if end > offset and source[end - 1] == "\r":
            end -= 1
            ending = "\r\n"
        lines.append(LineSpan(index=len(lines), start=offset, end=end, ending=ending))
        offset = newline + 1
    return lines


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange."""
    return source[range.start : range.end]
