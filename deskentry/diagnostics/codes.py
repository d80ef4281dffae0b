"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_EMPTY_GROUP_HEADER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EMPTY_GROUP_HEADER",
    message="Group header has no name.",
    hint="Write the group name between the brackets, e.g. `[Desktop Entry]`.",
    category="parser",
)

PARSER_UNTERMINATED_GROUP_HEADER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_GROUP_HEADER",
    message="Expected `]` to close the group header.",
    hint="Group names may only contain printable ASCII characters other than `[` and `]`.",
    category="parser",
)

PARSER_INVALID_LOCALE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_LOCALE",
    message="Invalid locale in key. Expected `[lang_COUNTRY.ENCODING@MODIFIER]`.",
    hint="Only `lang` is required, e.g. `Name[de]` or `Name[sr_YU@Latn]`.",
    category="parser",
)

PARSER_INVALID_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_ESCAPE",
    message="Invalid escape sequence.",
    hint="Supported escapes are `\\s`, `\\n`, `\\t`, `\\r`, `\\\\` and `\\;`.",
    category="parser",
)

PARSER_NON_ASCII_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NON_ASCII_STRING",
    message="Value of a key without locale must be ASCII.",
    hint="Use a localized key such as `Name[de]`, or parse in permissive mode.",
    category="parser",
)

PARSER_ENTRY_OUTSIDE_GROUP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_ENTRY_OUTSIDE_GROUP",
    message="Entry appears before any group header.",
    hint="Add a group header such as `[Desktop Entry]` above the first entry.",
    category="parser",
)

PARSER_TRAILING_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_INPUT",
    message="Unrecognized line; input was not fully consumed.",
    hint="Lines must be a `# comment`, a `[group]` header, a `key=value` entry or blank.",
    category="parser",
)

SERIALIZER_EXPECTED_MAP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERIALIZER_EXPECTED_MAP",
    message="Expected a record or mapping that produces at least one group.",
    category="serializer",
)

SERIALIZER_NESTING_NOT_SUPPORTED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERIALIZER_NESTING_NOT_SUPPORTED",
    message="Records cannot be nested inside a group.",
    hint="Desktop entry files have exactly one level of sections.",
    category="serializer",
)

SERIALIZER_UNSUPPORTED_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERIALIZER_UNSUPPORTED_TYPE",
    message="Value has no representation in the desktop entry format.",
    category="serializer",
)

SERIALIZER_INVALID_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERIALIZER_INVALID_KEY",
    message="Key is not a valid desktop entry key.",
    hint='Keys match `[A-Za-z0-9-]+`; rename fields with `field(metadata={"key": ...})`.',
    category="serializer",
)

SERIALIZER_INVALID_HEADER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERIALIZER_INVALID_HEADER",
    message="Group header is not valid.",
    hint="Headers are non-empty printable ASCII without `[` or `]`; set `__group_header__` to override.",
    category="serializer",
)
