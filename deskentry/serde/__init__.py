"""Generic serializer: value shapes, the state machine and the text emitter."""

from deskentry.serde.options import SerializerOptions
from deskentry.serde.ser import (
    LIST_SEPARATOR,
    Serializer,
    escape_value,
    format_scalar,
    to_string,
)
from deskentry.serde.shape import (
    SHAPE_TYPES,
    RecordShape,
    ScalarShape,
    ScalarValue,
    SequenceShape,
    Shape,
    TaggedUnion,
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
from deskentry.serde.writer import write_document

__all__ = [
    "LIST_SEPARATOR",
    "SHAPE_TYPES",
    "RecordShape",
    "ScalarShape",
    "ScalarValue",
    "SequenceShape",
    "Serializer",
    "SerializerOptions",
    "SerializerState",
    "Shape",
    "TaggedUnion",
    "VariantKind",
    "VariantShape",
    "begin_group",
    "begin_key",
    "end_group",
    "end_value",
    "escape_value",
    "format_scalar",
    "to_shape",
    "to_string",
    "write_document",
]
