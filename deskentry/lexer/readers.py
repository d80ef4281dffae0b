"""Token readers over a `(source, position, end)` cursor.

Each reader looks at `source[position:end]` and returns the decoded token with
the position just past it, or None when the text does not start with that
token. Readers that commit on their first character (`[` of a group header or
of a locale) raise `ParseError` instead of returning None once committed.
"""

from __future__ import annotations

import re
from typing import Final

from deskentry.diagnostics import (
    PARSER_EMPTY_GROUP_HEADER,
    PARSER_INVALID_ESCAPE,
    PARSER_INVALID_LOCALE,
    PARSER_UNTERMINATED_GROUP_HEADER,
    ParseError,
)
from deskentry.lexer.chars import ESCAPES, is_header_char, is_inline_whitespace, is_key_char
from deskentry.model import Key, Locale, LocalizedKey, SimpleKey
from deskentry.text import TextRange

_NUMERIC_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def read_comment(source: str, position: int, end: int) -> tuple[str, int] | None:
    if position >= end or source[position] != "#":
        return None
    return source[position:end], end


def read_blank(source: str, position: int, end: int) -> tuple[str, int] | None:
    """Whitespace-only rest of line, returned as the whitespace text."""
    index = skip_inline_whitespace(source, position, end)
    if index != end:
        return None
    return source[position:end], end


def read_group_header(source: str, position: int, end: int) -> tuple[str, int] | None:
    if position >= end or source[position] != "[":
        return None

    start = position + 1
    index = start
    while index < end and is_header_char(source[index]):
        index += 1

    if index < end and source[index] == "]":
        if index == start:
            raise ParseError.from_spec(
                PARSER_EMPTY_GROUP_HEADER,
                range=TextRange(position, index + 1),
            )
        return source[start:index], index + 1

    raise ParseError.from_spec(
        PARSER_UNTERMINATED_GROUP_HEADER,
        range=TextRange(position, index),
    )


def read_key_fragment(source: str, position: int, end: int) -> tuple[str, int] | None:
    index = position
    while index < end and is_key_char(source[index]):
        index += 1
    if index == position:
        return None
    return source[position:index], index


def read_locale(source: str, position: int, end: int) -> tuple[Locale, int] | None:
    """`[lang[_country][.encoding][@modifier]]`, segments in that order."""
    if position >= end or source[position] != "[":
        return None

    lang = read_key_fragment(source, position + 1, end)
    if lang is None:
        raise _invalid_locale(position, position + 1)
    lang_text, index = lang

    segments: dict[str, str | None] = {"_": None, ".": None, "@": None}
    for marker in segments:
        if index >= end or source[index] != marker:
            continue
        segment = read_key_fragment(source, index + 1, end)
        if segment is None:
            raise _invalid_locale(position, index + 1)
        segments[marker], index = segment

    if index >= end or source[index] != "]":
        raise _invalid_locale(position, index)

    locale = Locale(
        lang=lang_text,
        country=segments["_"],
        encoding=segments["."],
        modifier=segments["@"],
    )
    return locale, index + 1


def read_key(source: str, position: int, end: int) -> tuple[Key, int] | None:
    fragment = read_key_fragment(source, position, end)
    if fragment is None:
        return None
    name, index = fragment

    locale = read_locale(source, index, end)
    if locale is None:
        return SimpleKey(name), index
    locale_value, index = locale
    return LocalizedKey(name, locale_value), index


def read_separator(source: str, position: int, end: int) -> int | None:
    """`=` with optional surrounding spaces/tabs; returns the value start."""
    index = skip_inline_whitespace(source, position, end)
    if index >= end or source[index] != "=":
        return None
    return skip_inline_whitespace(source, index + 1, end)


def read_boolean(text: str) -> bool | None:
    if text == "true":
        return True
    if text == "false":
        return False
    return None


def read_numeric(text: str) -> float | None:
    if _NUMERIC_RE.fullmatch(text) is None:
        return None
    return float(text)


def unescape(text: str, *, offset: int = 0) -> str:
    """Decode `\\s \\n \\t \\r \\\\ \\;` escapes.

    Text without a backslash is returned as the same object. `offset` is the
    position of `text` in the source, used for error ranges.
    """
    if "\\" not in text:
        return text

    parts: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        backslash = text.find("\\", index)
        if backslash == -1:
            parts.append(text[index:])
            break
        parts.append(text[index:backslash])
        escaped = text[backslash + 1 : backslash + 2]
        decoded = ESCAPES.get(escaped) if escaped else None
        if decoded is None:
            detail = f"Found `\\{escaped}`." if escaped else "Found a trailing `\\`."
            raise ParseError.from_spec(
                PARSER_INVALID_ESCAPE,
                range=TextRange(offset + backslash, offset + backslash + 1 + len(escaped)),
                detail=detail,
            )
        parts.append(decoded)
        index = backslash + 2
    return "".join(parts)


def skip_inline_whitespace(source: str, position: int, end: int) -> int:
    index = position
    while index < end and is_inline_whitespace(source[index]):
        index += 1
    return index


def _invalid_locale(start: int, end: int) -> ParseError:
    return ParseError.from_spec(PARSER_INVALID_LOCALE, range=TextRange(start, end))
