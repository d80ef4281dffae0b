"""Ordered document model: groups of key/value entries plus an optional comment log."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from deskentry.model.key import Key, SimpleKey
from deskentry.model.value import Value


def _coerce_key(key: object) -> object:
    return SimpleKey(key) if isinstance(key, str) else key


class EntryMap(Mapping[Key, Value]):
    """Read-only ordered mapping of keys to values.

    Re-inserting a key keeps its original position and takes the newer value.
    Plain `str` lookups resolve to `SimpleKey`.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[Key, Value] | Iterable[tuple[Key, Value]] = ()) -> None:
        items = entries.items() if isinstance(entries, Mapping) else entries
        data: dict[Key, Value] = {}
        for key, value in items:
            data[key] = value
        self._entries = data

    def __getitem__(self, key: Key | str) -> Value:
        return self._entries[_coerce_key(key)]  # type: ignore[index]

    def __contains__(self, key: object) -> bool:
        return _coerce_key(key) in self._entries

    def __iter__(self) -> Iterator[Key]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntryMap):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"EntryMap({self._entries!r})"

    def with_entry(self, key: Key, value: Value) -> EntryMap:
        """Copy of this map with one entry inserted (overwriting in place)."""
        updated = dict(self._entries)
        updated[key] = value
        return EntryMap(updated)


@dataclass(frozen=True, slots=True)
class Group:
    header: str
    entries: EntryMap


@dataclass(frozen=True, slots=True)
class Comment:
    """Comment line, text includes the leading `#`."""

    text: str


@dataclass(frozen=True, slots=True)
class EmptyLine:
    """Blank line; `whitespace` holds the spaces/tabs it contained, if any."""

    whitespace: str | None = None


type CommentLine = Comment | EmptyLine


class Document(Mapping[str, EntryMap]):
    """Ordered mapping of group headers to their entries.

    A header declared again later becomes a new trailing group; the earlier
    group of the same name is replaced, never merged.
    """

    __slots__ = ("_groups", "_comments")

    def __init__(
        self,
        groups: Iterable[Group] = (),
        comments: Mapping[int, CommentLine] | None = None,
    ) -> None:
        by_header: dict[str, Group] = {}
        for group in groups:
            by_header.pop(group.header, None)
            by_header[group.header] = group
        self._groups = by_header
        self._comments = MappingProxyType(dict(comments)) if comments is not None else None

    @property
    def groups(self) -> tuple[Group, ...]:
        return tuple(self._groups.values())

    @property
    def comments(self) -> Mapping[int, CommentLine] | None:
        """Comment log keyed by physical line index, or None when not preserved."""
        return self._comments

    def group(self, header: str) -> Group:
        return self._groups[header]

    def __getitem__(self, header: str) -> EntryMap:
        return self._groups[header].entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        own_comments = dict(self._comments) if self._comments is not None else None
        other_comments = dict(other._comments) if other._comments is not None else None
        return self.groups == other.groups and own_comments == other_comments

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Document(groups={self.groups!r}, comments={self._comments!r})"


__all__ = [
    "Comment",
    "CommentLine",
    "Document",
    "EmptyLine",
    "EntryMap",
    "Group",
]
