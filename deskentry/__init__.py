"""Parse and write freedesktop desktop entry files."""

from deskentry.diagnostics import DeskEntryError, ParseError, SerializeError
from deskentry.model import (
    BooleanValue,
    Comment,
    Document,
    EmptyLine,
    EntryMap,
    Group,
    Locale,
    LocaleStringValue,
    LocalizedKey,
    NumericValue,
    SimpleKey,
    StringValue,
)
from deskentry.parser import ParseMode, ParserOptions, parse, parse_result
from deskentry.serde import SerializerOptions, TaggedUnion, to_string, write_document

__all__ = [
    "BooleanValue",
    "Comment",
    "DeskEntryError",
    "Document",
    "EmptyLine",
    "EntryMap",
    "Group",
    "Locale",
    "LocaleStringValue",
    "LocalizedKey",
    "NumericValue",
    "ParseError",
    "ParseMode",
    "ParserOptions",
    "SerializeError",
    "SerializerOptions",
    "SimpleKey",
    "StringValue",
    "TaggedUnion",
    "parse",
    "parse_result",
    "to_string",
    "write_document",
]
