"""Parse result carrier."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from deskentry.model import CommentLine, Document, Group
from deskentry.parser.options import ParserOptions


@dataclass(frozen=True, slots=True)
class DesktopEntryParseResult:
    """Source text, options and the document parsed from them."""

    source_text: str
    options: ParserOptions
    document: Document

    @property
    def groups(self) -> tuple[Group, ...]:
        return self.document.groups

    @property
    def comments(self) -> Mapping[int, CommentLine] | None:
        return self.document.comments
