"""Lexical primitives: character classes and cursor token readers."""

from deskentry.lexer.chars import (
    ESCAPES,
    is_header_char,
    is_inline_whitespace,
    is_key_char,
    is_valid_header,
)
from deskentry.lexer.readers import (
    read_blank,
    read_boolean,
    read_comment,
    read_group_header,
    read_key,
    read_key_fragment,
    read_locale,
    read_numeric,
    read_separator,
    skip_inline_whitespace,
    unescape,
)

__all__ = [
    "ESCAPES",
    "is_header_char",
    "is_inline_whitespace",
    "is_key_char",
    "is_valid_header",
    "read_blank",
    "read_boolean",
    "read_comment",
    "read_group_header",
    "read_key",
    "read_key_fragment",
    "read_locale",
    "read_numeric",
    "read_separator",
    "skip_inline_whitespace",
    "unescape",
]
