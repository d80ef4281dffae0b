"""High-level parse entrypoints for desktop entry text."""

from __future__ import annotations

from deskentry.model import Document
from deskentry.parser.grammar import parse_document
from deskentry.parser.options import ParseMode, ParserOptions
from deskentry.parser.result import DesktopEntryParseResult


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
    preserve_comments: bool | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        if preserve_comments is not None:
            raise ValueError("Pass preserve_comments through options when options are given")
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode, preserve_comments=bool(preserve_comments))

    return ParserOptions(preserve_comments=bool(preserve_comments))


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    preserve_comments: bool | None = None,
) -> Document:
    """Parse a whole desktop entry file, raising `ParseError` on malformed input."""
    resolved_options = _resolve_options(options, mode, preserve_comments)
    return parse_document(text, resolved_options)


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    preserve_comments: bool | None = None,
) -> DesktopEntryParseResult:
    resolved_options = _resolve_options(options, mode, preserve_comments)
    return DesktopEntryParseResult(
        source_text=text,
        options=resolved_options,
        document=parse_document(text, resolved_options),
    )
