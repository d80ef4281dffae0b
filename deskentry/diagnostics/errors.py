"""Exceptions raised by the parser and the serializer."""

from __future__ import annotations

from typing import Self

from deskentry.diagnostics.codes import DiagnosticSpec
from deskentry.diagnostics.diagnostic import Diagnostic, make_diagnostic
from deskentry.text import TextRange


class DeskEntryError(Exception):
    """Base error carrying the diagnostic that describes the failure."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @classmethod
    def from_spec(
        cls,
        spec: DiagnosticSpec,
        *,
        range: TextRange | None = None,
        line: int | None = None,
        detail: str | None = None,
    ) -> Self:
        return cls(make_diagnostic(spec, range=range, line=line, detail=detail))


class ParseError(DeskEntryError):
    """Malformed desktop entry text."""


class SerializeError(DeskEntryError):
    """Value shape that cannot be written as a desktop entry file."""
