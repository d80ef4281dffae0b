"""Entry keys, optionally qualified by a locale."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Locale:
    """`lang_COUNTRY.ENCODING@MODIFIER`, where only `lang` is required."""

    lang: str
    country: str | None = None
    encoding: str | None = None
    modifier: str | None = None

    def __str__(self) -> str:
        text = self.lang
        if self.country is not None:
            text += f"_{self.country}"
        if self.encoding is not None:
            text += f".{self.encoding}"
        if self.modifier is not None:
            text += f"@{self.modifier}"
        return text


@dataclass(frozen=True, slots=True)
class SimpleKey:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class LocalizedKey:
    """Key carrying a locale tag, e.g. `Name[de_DE]`.

    Distinct from the `SimpleKey` with the same name: both can live in one group.
    """

    name: str
    locale: Locale

    def __str__(self) -> str:
        return f"{self.name}[{self.locale}]"


type Key = SimpleKey | LocalizedKey


__all__ = [
    "Key",
    "Locale",
    "LocalizedKey",
    "SimpleKey",
]
