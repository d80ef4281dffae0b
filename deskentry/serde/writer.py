"""Render a parsed document back to text, re-inserting its comment log."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
import logging

from deskentry.model import Comment, CommentLine, Document, EmptyLine, Value
from deskentry.serde.options import SerializerOptions
from deskentry.serde.ser import format_scalar, to_string

logger = logging.getLogger(__name__)


def write_document(document: Document, options: SerializerOptions | None = None) -> str:
    """Render `document`; without a comment log this is `to_string(document)`.

    Comments and blank lines are written at their recorded line index and
    group headers and entries fill the remaining lines in order. `options`
    only applies when there is no comment log, since blank lines are then
    taken from the log. A document with no groups and no log renders as "".
    """
    if document.comments is None:
        if not document:
            return ""
        return to_string(document, options)

    comments = document.comments
    structural = deque(_structural_lines(document))
    last_comment = max(comments, default=-1)

    lines: list[str] = []
    index = 0
    while structural or index <= last_comment:
        if index in comments:
            lines.append(_comment_text(comments[index]))
        elif structural:
            lines.append(structural.popleft())
        else:
            # the log has a gap past the last structural line
            lines.append("")
        index += 1

    logger.debug("Wrote %d lines with %d comment lines", len(lines), len(comments))
    return "\n".join(lines)


def _structural_lines(document: Document) -> Iterator[str]:
    for group in document.groups:
        yield f"[{group.header}]"
        for key, value in group.entries.items():
            yield f"{key}={_format_value(value)}"


def _format_value(value: Value) -> str:
    return format_scalar(value.value)


def _comment_text(line: CommentLine) -> str:
    match line:
        case Comment(text=text):
            return text
        case EmptyLine(whitespace=whitespace):
            return whitespace or ""
    raise AssertionError(f"unknown comment line {line!r}")
