"""Shared debug printers for parser/serializer tests."""

from __future__ import annotations

import os

from deskentry.diagnostics import Diagnostic
from deskentry.model import Document

PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DOCUMENT = os.getenv("PRINT_DOCUMENT", "0").lower() in {"1", "true", "yes", "on"}
PRINT_OUTPUT = os.getenv("PRINT_OUTPUT", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in {
    "1",
    "true",
    "yes",
    "on",
}


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_document(test_name: str, source: str, document: Document) -> None:
    if not PRINT_DOCUMENT:
        return
    debug_print_source(test_name, source)
    print(f"\n===== {test_name} DOCUMENT =====")
    for group in document.groups:
        print(f"[{group.header}]")
        for key, value in group.entries.items():
            print(f"  {key!r:<48} {value!r}")
    if document.comments is not None:
        print(f"===== {test_name} COMMENTS =====")
        for index, line in sorted(document.comments.items()):
            print(f"{index:03d} {line!r}")


def debug_print_output(test_name: str, output: str) -> None:
    if not PRINT_OUTPUT:
        return
    print(f"\n===== {test_name} OUTPUT =====")
    print(output)


def debug_print_diagnostic(test_name: str, diagnostic: Diagnostic) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    print(f"===== {test_name} DIAGNOSTIC =====")
    print(diagnostic)
    if diagnostic.hint:
        print(f"hint: {diagnostic.hint}")
