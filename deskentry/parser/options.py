"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling value typing and comment retention."""

    mode: ParseMode = ParseMode.STRICT
    preserve_comments: bool = False
    ascii_only_strings: bool = True

    @staticmethod
    def for_mode(mode: ParseMode, *, preserve_comments: bool = False) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(
                mode=mode,
                preserve_comments=preserve_comments,
                ascii_only_strings=False,
            )

        return ParserOptions(
            mode=mode,
            preserve_comments=preserve_comments,
            ascii_only_strings=True,
        )
