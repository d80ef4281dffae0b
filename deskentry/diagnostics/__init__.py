"""Diagnostics."""

from deskentry.diagnostics.codes import (
    PARSER_EMPTY_GROUP_HEADER,
    PARSER_ENTRY_OUTSIDE_GROUP,
    PARSER_INVALID_ESCAPE,
    PARSER_INVALID_LOCALE,
    PARSER_NON_ASCII_STRING,
    PARSER_TRAILING_INPUT,
    PARSER_UNTERMINATED_GROUP_HEADER,
    SERIALIZER_EXPECTED_MAP,
    SERIALIZER_INVALID_HEADER,
    SERIALIZER_INVALID_KEY,
    SERIALIZER_NESTING_NOT_SUPPORTED,
    SERIALIZER_UNSUPPORTED_TYPE,
    DiagnosticSpec,
    Severity,
)
from deskentry.diagnostics.diagnostic import Diagnostic, make_diagnostic
from deskentry.diagnostics.errors import DeskEntryError, ParseError, SerializeError

__all__ = [
    "PARSER_EMPTY_GROUP_HEADER",
    "PARSER_ENTRY_OUTSIDE_GROUP",
    "PARSER_INVALID_ESCAPE",
    "PARSER_INVALID_LOCALE",
    "PARSER_NON_ASCII_STRING",
    "PARSER_TRAILING_INPUT",
    "PARSER_UNTERMINATED_GROUP_HEADER",
    "SERIALIZER_EXPECTED_MAP",
    "SERIALIZER_INVALID_HEADER",
    "SERIALIZER_INVALID_KEY",
    "SERIALIZER_NESTING_NOT_SUPPORTED",
    "SERIALIZER_UNSUPPORTED_TYPE",
    "DeskEntryError",
    "Diagnostic",
    "DiagnosticSpec",
    "ParseError",
    "SerializeError",
    "Severity",
    "make_diagnostic",
]
