"""Serializer state machine.

| transition  | from                   | to          | prefix            |
|-------------|------------------------|-------------|-------------------|
| begin group | NO_HEADER              | HEADER      | ""                |
| begin group | NEW_SECTION            | HEADER      | "\\n\\n" or "\\n" |
| begin group | HEADER, KEY            | nesting error               |
| begin key   | HEADER                 | KEY         | "\\n"             |
| begin key   | NO_HEADER, NEW_SECTION | expected-map error          |
| begin key   | KEY                    | nesting error               |
| end value   | KEY                    | HEADER      |                   |
| end group   | HEADER                 | NEW_SECTION |                   |
"""

from __future__ import annotations

from enum import StrEnum

from deskentry.diagnostics import (
    SERIALIZER_EXPECTED_MAP,
    SERIALIZER_NESTING_NOT_SUPPORTED,
    SerializeError,
)


class SerializerState(StrEnum):
    NO_HEADER = "no_header"
    NEW_SECTION = "new_section"
    HEADER = "header"
    KEY = "key"


def begin_group(state: SerializerState, *, blank_line: bool = True) -> tuple[str, SerializerState]:
    if state == SerializerState.NO_HEADER:
        return "", SerializerState.HEADER
    if state == SerializerState.NEW_SECTION:
        return ("\n\n" if blank_line else "\n"), SerializerState.HEADER
    raise SerializeError.from_spec(SERIALIZER_NESTING_NOT_SUPPORTED)


def begin_key(state: SerializerState) -> tuple[str, SerializerState]:
    if state == SerializerState.HEADER:
        return "\n", SerializerState.KEY
    if state == SerializerState.KEY:
        raise SerializeError.from_spec(SERIALIZER_NESTING_NOT_SUPPORTED)
    raise SerializeError.from_spec(SERIALIZER_EXPECTED_MAP, detail="Entries must belong to a group.")


def end_value(state: SerializerState) -> SerializerState:
    if state != SerializerState.KEY:
        raise RuntimeError(f"end_value called in state {state}")
    return SerializerState.HEADER


def end_group(state: SerializerState) -> SerializerState:
    if state != SerializerState.HEADER:
        raise RuntimeError(f"end_group called in state {state}")
    return SerializerState.NEW_SECTION
