"""Emit desktop entry text from value shapes."""

from __future__ import annotations

import logging
import math
from typing import Final

from deskentry.diagnostics import (
    SERIALIZER_EXPECTED_MAP,
    SERIALIZER_INVALID_HEADER,
    SERIALIZER_INVALID_KEY,
    SERIALIZER_UNSUPPORTED_TYPE,
    ParseError,
    SerializeError,
)
from deskentry.lexer import is_valid_header
from deskentry.parser import parse_key
from deskentry.serde.options import SerializerOptions
from deskentry.serde.shape import (
    RecordShape,
    ScalarShape,
    ScalarValue,
    SequenceShape,
    Shape,
    VariantKind,
    VariantShape,
    to_shape,
)
from deskentry.serde.state import (
    SerializerState,
    begin_group,
    begin_key,
    end_group,
    end_value,
)

logger = logging.getLogger(__name__)

LIST_SEPARATOR: Final[str] = ";"

_ESCAPED_CHARS: Final[dict[str, str]] = {
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def escape_value(text: str, *, in_list: bool = False) -> str:
    """Escape text so it parses back to itself; `;` is escaped only inside lists."""
    parts: list[str] = []
    for index, ch in enumerate(text):
        if ch == " " and index == 0:
            parts.append("\\s")
        elif ch == LIST_SEPARATOR and in_list:
            parts.append("\\;")
        else:
            parts.append(_ESCAPED_CHARS.get(ch, ch))
    return "".join(parts)


def format_scalar(value: ScalarValue, *, in_list: bool = False) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise SerializeError.from_spec(
                SERIALIZER_UNSUPPORTED_TYPE,
                detail=f"Non-finite number `{value!r}`.",
            )
        return repr(value)
    return escape_value(value, in_list=in_list)


class Serializer:
    """Walks a shape and writes groups, entries and values into one buffer.

    Every `_emit_*` method takes the current state and returns the next one.
    """

    def __init__(self, options: SerializerOptions | None = None) -> None:
        self._options = options or SerializerOptions()
        self._output: list[str] = []

    def serialize(self, value: object) -> str:
        self._output = []
        state = self._emit_root(to_shape(value), SerializerState.NO_HEADER)
        if state == SerializerState.NO_HEADER:
            raise SerializeError.from_spec(SERIALIZER_EXPECTED_MAP, detail="No group was produced.")
        return "".join(self._output)

    def _write(self, *parts: str) -> None:
        self._output.extend(parts)

    def _emit_root(self, shape: Shape, state: SerializerState) -> SerializerState:
        match shape:
            case RecordShape(name=None, fields=entries):
                for header, content in entries:
                    if content == ScalarShape(None):
                        continue
                    state = self._emit_group(header, content, state)
                return state
            case RecordShape(name=str() as name):
                return self._emit_group(name, shape, state)
            case VariantShape(kind=VariantKind.UNIT, union=union, variant=variant):
                raise SerializeError.from_spec(
                    SERIALIZER_UNSUPPORTED_TYPE,
                    detail=f"Unit variant `{union}.{variant}` cannot form a group.",
                )
            case VariantShape(union=union):
                return self._emit_group(union, shape, state)
            case SequenceShape(items=items):
                for item in items:
                    state = self._emit_root(item, state)
                return state
            case ScalarShape():
                raise SerializeError.from_spec(SERIALIZER_EXPECTED_MAP, detail="Got a scalar.")
        raise AssertionError(f"unknown shape {shape!r}")

    def _emit_group(self, header: str, content: Shape, state: SerializerState) -> SerializerState:
        if not is_valid_header(header):
            raise SerializeError.from_spec(SERIALIZER_INVALID_HEADER, detail=f"Got `{header}`.")
        prefix, state = begin_group(state, blank_line=self._options.blank_line_between_groups)
        self._write(prefix, "[", header, "]")
        state = self._emit_section(content, state)
        return end_group(state)

    def _emit_section(self, shape: Shape, state: SerializerState) -> SerializerState:
        match shape:
            case RecordShape(fields=entries):
                for key, value in entries:
                    state = self._emit_entry(key, value, state)
                return state
            case VariantShape():
                return self._emit_variant_entry(shape, state)
            case SequenceShape(items=items):
                for item in items:
                    state = self._emit_section_item(item, state)
                return state
            case ScalarShape():
                raise SerializeError.from_spec(
                    SERIALIZER_EXPECTED_MAP,
                    detail="Group content must be a record, mapping or variant.",
                )
        raise AssertionError(f"unknown shape {shape!r}")

    def _emit_section_item(self, shape: Shape, state: SerializerState) -> SerializerState:
        match shape:
            case VariantShape():
                return self._emit_variant_entry(shape, state)
            case SequenceShape(items=items):
                for item in items:
                    state = self._emit_section_item(item, state)
                return state
            case RecordShape():
                # always raises: a group is already open
                begin_group(state)
            case ScalarShape():
                raise SerializeError.from_spec(
                    SERIALIZER_EXPECTED_MAP,
                    detail="Group content must be a record, mapping or variant.",
                )
        raise AssertionError(f"unknown shape {shape!r}")

    def _emit_variant_entry(self, shape: VariantShape, state: SerializerState) -> SerializerState:
        """A variant inside a group writes its name as the key."""
        match shape:
            case VariantShape(kind=VariantKind.UNIT, variant=variant):
                return self._emit_entry(variant, ScalarShape(""), state)
            case VariantShape(kind=VariantKind.STRUCT, payload=RecordShape() as payload):
                return self._emit_section(payload, state)
            case VariantShape(kind=VariantKind.NEWTYPE | VariantKind.TUPLE, variant=variant, payload=payload) if (
                payload is not None
            ):
                return self._emit_entry(variant, payload, state)
        raise SerializeError.from_spec(
            SERIALIZER_UNSUPPORTED_TYPE,
            detail=f"Variant `{shape.union}.{shape.variant}` has no payload for kind `{shape.kind}`.",
        )

    def _emit_entry(self, key: str, shape: Shape, state: SerializerState) -> SerializerState:
        if shape == ScalarShape(None):
            return state
        _check_key(key)
        prefix, state = begin_key(state)
        self._write(prefix, key, "=")
        state = self._emit_value(shape, state)
        return end_value(state)

    def _emit_value(self, shape: Shape, state: SerializerState) -> SerializerState:
        match shape:
            case ScalarShape(value=value):
                self._write(format_scalar(value))
                return state
            case SequenceShape(items=items):
                for item in items:
                    self._emit_list_item(item, state)
                    self._write(LIST_SEPARATOR)
                if self._output and self._output[-1] == LIST_SEPARATOR:
                    self._output.pop()
                return state
            case VariantShape(kind=VariantKind.UNIT, variant=variant):
                self._write(escape_value(variant))
                return state
            case RecordShape() | VariantShape(kind=VariantKind.STRUCT):
                # always raises: a group is already open
                begin_group(state)
            case VariantShape(union=union, variant=variant):
                raise SerializeError.from_spec(
                    SERIALIZER_UNSUPPORTED_TYPE,
                    detail=f"Variant `{union}.{variant}` with a payload cannot be a value.",
                )
        raise AssertionError(f"unknown shape {shape!r}")

    def _emit_list_item(self, shape: Shape, state: SerializerState) -> None:
        match shape:
            case ScalarShape(value=value):
                self._write(format_scalar(value, in_list=True))
            case VariantShape(kind=VariantKind.UNIT, variant=variant):
                self._write(escape_value(variant, in_list=True))
            case SequenceShape():
                raise SerializeError.from_spec(
                    SERIALIZER_UNSUPPORTED_TYPE,
                    detail="Lists cannot contain lists.",
                )
            case RecordShape() | VariantShape(kind=VariantKind.STRUCT):
                # always raises: a group is already open
                begin_group(state)
            case VariantShape(union=union, variant=variant):
                raise SerializeError.from_spec(
                    SERIALIZER_UNSUPPORTED_TYPE,
                    detail=f"Variant `{union}.{variant}` with a payload cannot be a list item.",
                )


def _check_key(key: str) -> None:
    try:
        parse_key(key)
    except ParseError as error:
        raise SerializeError.from_spec(SERIALIZER_INVALID_KEY, detail=f"Got `{key}`.") from error


def to_string(value: object, options: SerializerOptions | None = None) -> str:
    """Serialize a record, tagged union, mapping or sequence of them to desktop entry text."""
    text = Serializer(options).serialize(value)
    logger.debug("Serialized %s into %d characters", type(value).__name__, len(text))
    return text
