"""Serializer configuration options."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SerializerOptions:
    """Layout flags for emitted text."""

    blank_line_between_groups: bool = True
