"""Intermediate shape representation for the serializer.

Any supported value is first converted into one of four node types and the
emitter only ever walks those nodes:

- `ScalarShape`: `None`, `bool`, `int`, `float` or `str`;
- `SequenceShape`: ordered items (`list`, `tuple`);
- `RecordShape`: named fields; a record with `name=None` is an anonymous
  mapping (a `dict`, a `Document`, an `EntryMap`);
- `VariantShape`: one alternative of a tagged union (`Enum` members and
  `TaggedUnion` subclasses).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, is_dataclass
from enum import Enum, StrEnum
from typing import ClassVar

from deskentry.diagnostics import SERIALIZER_UNSUPPORTED_TYPE, SerializeError
from deskentry.model import VALUE_TYPES, Group, Locale, LocalizedKey, SimpleKey

type ScalarValue = bool | int | float | str | None


class VariantKind(StrEnum):
    UNIT = "unit"
    NEWTYPE = "newtype"
    TUPLE = "tuple"
    STRUCT = "struct"


@dataclass(frozen=True, slots=True)
class ScalarShape:
    value: ScalarValue


@dataclass(frozen=True, slots=True)
class SequenceShape:
    items: tuple[Shape, ...]


@dataclass(frozen=True, slots=True)
class RecordShape:
    name: str | None
    fields: tuple[tuple[str, Shape], ...]


@dataclass(frozen=True, slots=True)
class VariantShape:
    """Variant `variant` of union `union`.

    `payload` is None for unit variants, the wrapped shape for newtype
    variants, a `SequenceShape` for tuple variants and a `RecordShape` for
    struct variants.
    """

    union: str
    variant: str
    kind: VariantKind
    payload: Shape | None = None


type Shape = ScalarShape | SequenceShape | RecordShape | VariantShape

SHAPE_TYPES: tuple[type, ...] = (ScalarShape, SequenceShape, RecordShape, VariantShape)


class TaggedUnion:
    """Base class for tagged unions whose variants are dataclasses.

    The direct subclass of `TaggedUnion` names the union; each dataclass
    deriving from it is one variant, with its kind given as a class keyword:

        class Action(TaggedUnion): ...

        @dataclass
        class Launch(Action, kind="newtype"):
            command: str

    Kinds are `unit`, `newtype` (exactly one field), `tuple` and `struct`
    (the default).
    """

    __union_name__: ClassVar[str]
    __variant_kind__: ClassVar[VariantKind] = VariantKind.STRUCT

    def __init_subclass__(cls, *, kind: VariantKind | str | None = None, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if TaggedUnion in cls.__bases__:
            cls.__union_name__ = cls.__name__
        if kind is not None:
            cls.__variant_kind__ = VariantKind(kind)


def to_shape(value: object) -> Shape:
    """Convert a value into its shape, raising `SerializeError` for unsupported types."""
    if isinstance(value, SHAPE_TYPES):
        return value  # type: ignore[return-value]

    if isinstance(value, Enum):
        return VariantShape(union=type(value).__name__, variant=value.name, kind=VariantKind.UNIT)

    if value is None or isinstance(value, (bool, int, float, str)):
        return ScalarShape(value)

    if isinstance(value, VALUE_TYPES):
        return ScalarShape(value.value)  # type: ignore[attr-defined]

    if isinstance(value, (SimpleKey, LocalizedKey, Locale)):
        return ScalarShape(str(value))

    if isinstance(value, TaggedUnion) and is_dataclass(value):
        return _variant_shape(value)

    if isinstance(value, Group):
        return RecordShape(name=value.header, fields=_mapping_fields(value.entries))

    if is_dataclass(value) and not isinstance(value, type):
        return RecordShape(name=_record_name(value), fields=_dataclass_fields(value))

    if isinstance(value, Mapping):
        return RecordShape(name=None, fields=_mapping_fields(value))

    if isinstance(value, (list, tuple)):
        return SequenceShape(tuple(to_shape(item) for item in value))

    raise _unsupported(value)


def _variant_shape(value: TaggedUnion) -> VariantShape:
    cls = type(value)
    kind = cls.__variant_kind__
    field_values = [getattr(value, field.name) for field in fields(value)]  # type: ignore[arg-type]

    payload: Shape | None
    if kind == VariantKind.UNIT:
        if field_values:
            raise _unsupported(value, detail=f"Unit variant `{cls.__name__}` declares fields.")
        payload = None
    elif kind == VariantKind.NEWTYPE:
        if len(field_values) != 1:
            raise _unsupported(value, detail=f"Newtype variant `{cls.__name__}` must have exactly one field.")
        payload = to_shape(field_values[0])
    elif kind == VariantKind.TUPLE:
        payload = SequenceShape(tuple(to_shape(item) for item in field_values))
    else:
        payload = RecordShape(name=cls.__name__, fields=_dataclass_fields(value))

    return VariantShape(union=cls.__union_name__, variant=cls.__name__, kind=kind, payload=payload)


def _record_name(value: object) -> str:
    cls = type(value)
    return getattr(cls, "__group_header__", cls.__name__)


def _dataclass_fields(value: object) -> tuple[tuple[str, Shape], ...]:
    return tuple(
        (field.metadata.get("key", field.name), to_shape(getattr(value, field.name)))
        for field in fields(value)  # type: ignore[arg-type]
    )


def _mapping_fields(mapping: Mapping[object, object]) -> tuple[tuple[str, Shape], ...]:
    return tuple((_mapping_key(key), to_shape(item)) for key, item in mapping.items())


def _mapping_key(key: object) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, (str, int, SimpleKey, LocalizedKey)):
        return str(key)
    raise _unsupported(key, detail="Mapping keys must be scalars.")


def _unsupported(value: object, *, detail: str | None = None) -> SerializeError:
    return SerializeError.from_spec(
        SERIALIZER_UNSUPPORTED_TYPE,
        detail=detail or f"Got `{type(value).__name__}`.",
    )


__all__ = [
    "SHAPE_TYPES",
    "RecordShape",
    "ScalarShape",
    "ScalarValue",
    "SequenceShape",
    "Shape",
    "TaggedUnion",
    "VariantKind",
    "VariantShape",
    "to_shape",
]
