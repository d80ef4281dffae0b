"""Typed entry values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BooleanValue:
    value: bool


@dataclass(frozen=True, slots=True)
class NumericValue:
    """Numeric literal; compared with plain float equality.

    Held at double precision, never narrowed to single precision, so `0.1`
    is not equal to its 32-bit rounding.
    """

    value: float


@dataclass(frozen=True, slots=True)
class StringValue:
    """Escape-decoded ASCII string."""

    value: str


@dataclass(frozen=True, slots=True)
class LocaleStringValue:
    """Escape-decoded string that may hold any Unicode text."""

    value: str


type Value = BooleanValue | NumericValue | StringValue | LocaleStringValue

VALUE_TYPES: tuple[type, ...] = (BooleanValue, NumericValue, StringValue, LocaleStringValue)


__all__ = [
    "VALUE_TYPES",
    "BooleanValue",
    "LocaleStringValue",
    "NumericValue",
    "StringValue",
    "Value",
]
