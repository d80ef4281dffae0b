"""Character classes of the desktop entry grammar."""

from typing import Final

INLINE_WHITESPACE: Final[frozenset[str]] = frozenset({" ", "\t"})

ESCAPES: Final[dict[str, str]] = {
    "s": " ",
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    ";": ";",
}


def is_key_char(ch: str) -> bool:
    """`[A-Za-z0-9-]`, shared by key names and locale segments."""
    return ch.isascii() and (ch.isalnum() or ch == "-")


def is_header_char(ch: str) -> bool:
    """Printable ASCII other than the brackets."""
    return ch.isascii() and ch.isprintable() and ch not in "[]"


def is_inline_whitespace(ch: str) -> bool:
    return ch in INLINE_WHITESPACE


def is_valid_header(text: str) -> bool:
    return bool(text) and all(is_header_char(ch) for ch in text)

