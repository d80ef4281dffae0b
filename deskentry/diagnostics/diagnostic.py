"""Diagnostics core types."""

from dataclasses import dataclass

from deskentry.diagnostics.codes import DiagnosticSpec, Severity
from deskentry.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic attached to parser and serializer failures."""

    code: str
    message: str
    range: TextRange | None = None
    line: int | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def __str__(self) -> str:
        location = f"line {self.line + 1}: " if self.line is not None else ""
        return f"{location}{self.message} [{self.code}]"


def make_diagnostic(
    spec: DiagnosticSpec,
    *,
    range: TextRange | None = None,
    line: int | None = None,
    detail: str | None = None,
) -> Diagnostic:
    message = f"{spec.message} {detail}" if detail else spec.message
    return Diagnostic(
        code=spec.code,
        message=message,
        range=range,
        line=line,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )
