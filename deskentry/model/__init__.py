"""Document model for desktop entry files."""

from deskentry.model.document import (
    Comment,
    CommentLine,
    Document,
    EmptyLine,
    EntryMap,
    Group,
)
from deskentry.model.key import Key, Locale, LocalizedKey, SimpleKey
from deskentry.model.value import (
    VALUE_TYPES,
    BooleanValue,
    LocaleStringValue,
    NumericValue,
    StringValue,
    Value,
)

__all__ = [
    "VALUE_TYPES",
    "BooleanValue",
    "Comment",
    "CommentLine",
    "Document",
    "EmptyLine",
    "EntryMap",
    "Group",
    "Key",
    "Locale",
    "LocaleStringValue",
    "LocalizedKey",
    "NumericValue",
    "SimpleKey",
    "StringValue",
    "Value",
]
