"""Line parsers composed from the lexical primitives."""

from __future__ import annotations

from dataclasses import dataclass

from deskentry.diagnostics import PARSER_NON_ASCII_STRING, PARSER_TRAILING_INPUT, ParseError
from deskentry.lexer import (
    read_blank,
    read_boolean,
    read_comment,
    read_group_header,
    read_key,
    read_numeric,
    read_separator,
    unescape,
)
from deskentry.model import (
    BooleanValue,
    Key,
    LocaleStringValue,
    LocalizedKey,
    NumericValue,
    StringValue,
    Value,
)
from deskentry.parser.options import ParserOptions
from deskentry.text import LineSpan, TextRange


@dataclass(frozen=True, slots=True)
class ParsedComment:
    text: str


@dataclass(frozen=True, slots=True)
class ParsedEmptyLine:
    whitespace: str


@dataclass(frozen=True, slots=True)
class ParsedGroupHeader:
    header: str


@dataclass(frozen=True, slots=True)
class ParsedEntry:
    key: Key
    value: Value
    key_range: TextRange


type ParsedLine = ParsedComment | ParsedEmptyLine | ParsedGroupHeader | ParsedEntry


def parse_line(source: str, line: LineSpan, options: ParserOptions) -> ParsedLine | None:
    """Parse one physical line: comment, group header, entry, then blank, first match wins."""
    comment = read_comment(source, line.start, line.end)
    if comment is not None:
        return ParsedComment(comment[0])

    header = read_group_header(source, line.start, line.end)
    if header is not None:
        header_text, index = header
        if index != line.end:
            raise ParseError.from_spec(
                PARSER_TRAILING_INPUT,
                range=TextRange(index, line.end),
                detail="Text follows the group header.",
            )
        return ParsedGroupHeader(header_text)

    entry = parse_entry(source, line.start, line.end, options)
    if entry is not None:
        return entry

    blank = read_blank(source, line.start, line.end)
    if blank is not None:
        return ParsedEmptyLine(blank[0])

    return None


def parse_entry(source: str, start: int, end: int, options: ParserOptions) -> ParsedEntry | None:
    key = read_key(source, start, end)
    if key is None:
        return None
    key_value, key_end = key

    value_start = read_separator(source, key_end, end)
    if value_start is None:
        return None

    value = parse_entry_value(
        source,
        value_start,
        end,
        localized=isinstance(key_value, LocalizedKey),
        options=options,
    )
    return ParsedEntry(key=key_value, value=value, key_range=TextRange(start, key_end))


def parse_entry_value(
    source: str,
    start: int,
    end: int,
    *,
    localized: bool,
    options: ParserOptions,
) -> Value:
    """Type the rest of the line: boolean, then numeric, then (locale) string."""
    raw = source[start:end]

    boolean = read_boolean(raw)
    if boolean is not None:
        return BooleanValue(boolean)

    numeric = read_numeric(raw)
    if numeric is not None:
        return NumericValue(numeric)

    decoded = unescape(raw, offset=start)
    if localized:
        return LocaleStringValue(decoded)
    if decoded.isascii():
        return StringValue(decoded)
    if not options.ascii_only_strings:
        return LocaleStringValue(decoded)

    raise ParseError.from_spec(PARSER_NON_ASCII_STRING, range=TextRange(start, end))
