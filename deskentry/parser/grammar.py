"""Fold parsed lines into a document, plus whole-fragment grammar helpers."""

from __future__ import annotations

from dataclasses import replace
import logging

from deskentry.diagnostics import PARSER_ENTRY_OUTSIDE_GROUP, PARSER_TRAILING_INPUT, ParseError
from deskentry.lexer import read_group_header, read_key
from deskentry.model import (
    Comment,
    CommentLine,
    Document,
    EmptyLine,
    EntryMap,
    Group,
    Key,
    Value,
)
from deskentry.parser.lines import (
    ParsedComment,
    ParsedEmptyLine,
    ParsedEntry,
    ParsedGroupHeader,
    parse_entry_value,
    parse_line,
)
from deskentry.parser.options import ParserOptions
from deskentry.text import TextRange, split_lines

logger = logging.getLogger(__name__)


def fold_lines(source: str, options: ParserOptions) -> tuple[Document, str]:
    """Fold lines left to right until one matches no line rule.

    Returns the document built so far and the unconsumed rest of the source.
    """
    groups: list[Group] = []
    seen_headers: set[str] = set()
    current_header: str | None = None
    current_entries: dict[Key, Value] = {}
    comments: dict[int, CommentLine] | None = {} if options.preserve_comments else None
    consumed = 0

    def commit() -> None:
        if current_header is None:
            return
        if current_header in seen_headers:
            logger.warning("Group [%s] declared again; the later group replaces the earlier one", current_header)
        seen_headers.add(current_header)
        groups.append(Group(current_header, EntryMap(current_entries)))

    for line in split_lines(source):
        try:
            parsed = parse_line(source, line, options)
        except ParseError as error:
            raise ParseError(replace(error.diagnostic, line=line.index)) from None

        if parsed is None:
            break

        match parsed:
            case ParsedGroupHeader(header=header):
                commit()
                current_header = header
                current_entries = {}
            case ParsedEntry(key=key, value=value, key_range=key_range):
                if current_header is None:
                    raise ParseError.from_spec(
                        PARSER_ENTRY_OUTSIDE_GROUP,
                        range=key_range,
                        line=line.index,
                    )
                current_entries[key] = value
            case ParsedComment(text=text):
                if comments is not None:
                    comments[line.index] = Comment(text)
            case ParsedEmptyLine(whitespace=whitespace):
                if comments is not None:
                    comments[line.index] = EmptyLine(whitespace or None)

        consumed = line.next_start

    commit()
    logger.debug("Folded %d groups from %d characters", len(groups), consumed)
    return Document(groups, comments), source[consumed:]


def parse_document(source: str, options: ParserOptions) -> Document:
    document, rest = fold_lines(source, options)
    if rest:
        offset = len(source) - len(rest)
        line_end = rest.find("\n")
        end = len(source) if line_end == -1 else offset + line_end
        raise ParseError.from_spec(
            PARSER_TRAILING_INPUT,
            range=TextRange(offset, end),
            line=source.count("\n", 0, offset),
        )
    return document


def parse_group_header(text: str) -> str:
    """`[header]` to `header`; an opened bracket that is never closed is an error."""
    header = read_group_header(text, 0, len(text))
    if header is None or header[1] != len(text):
        raise _not_consumed(text, 0 if header is None else header[1])
    return header[0]


def parse_key(text: str) -> Key:
    key = read_key(text, 0, len(text))
    if key is None or key[1] != len(text):
        raise _not_consumed(text, 0 if key is None else key[1])
    return key[0]


def parse_value(
    text: str,
    *,
    localized: bool = False,
    options: ParserOptions | None = None,
) -> Value:
    """Type a raw value as it would appear after `key=`."""
    return parse_entry_value(
        text,
        0,
        len(text),
        localized=localized,
        options=options or ParserOptions(),
    )


def _not_consumed(text: str, offset: int) -> ParseError:
    return ParseError.from_spec(PARSER_TRAILING_INPUT, range=TextRange(offset, len(text)))
