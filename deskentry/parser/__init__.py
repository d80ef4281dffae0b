"""Grammar parser: line parsers and the fold into a `Document`."""

from deskentry.lexer import unescape
from deskentry.parser.desktop import parse, parse_result
from deskentry.parser.grammar import (
    fold_lines,
    parse_document,
    parse_group_header,
    parse_key,
    parse_value,
)
from deskentry.parser.lines import (
    ParsedComment,
    ParsedEmptyLine,
    ParsedEntry,
    ParsedGroupHeader,
    ParsedLine,
    parse_entry,
    parse_entry_value,
    parse_line,
)
from deskentry.parser.options import ParseMode, ParserOptions
from deskentry.parser.result import DesktopEntryParseResult

__all__ = [
    "DesktopEntryParseResult",
    "ParseMode",
    "ParsedComment",
    "ParsedEmptyLine",
    "ParsedEntry",
    "ParsedGroupHeader",
    "ParsedLine",
    "ParserOptions",
    "fold_lines",
    "parse",
    "parse_document",
    "parse_entry",
    "parse_entry_value",
    "parse_group_header",
    "parse_key",
    "parse_line",
    "parse_result",
    "parse_value",
    "unescape",
]
