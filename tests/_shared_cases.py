"""Centralized desktop entry source cases used across lexer/parser/serializer tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap
from typing import Literal, cast


@dataclass(frozen=True, slots=True)
class DesktopCase:
    name: str
    source: str
    expected_error: str | None = None
    expected_line: int | None = None


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


FOO_VIEWER = _dedent(
    """
    [Desktop Entry]
    Version=1.0
    Type=Application
    Name=Foo Viewer
    Comment=The best viewer for Foo objects available!
    TryExec=fooview
    Exec=fooview %F
    Icon=fooview
    MimeType=image/x-foo
    Actions=Gallery;Create;

    [Desktop Action Gallery]
    Exec=fooview --gallery
    Name=Browse Gallery

    [Desktop Action Create]
    Exec=fooview --create-new
    Name=Create a new Foo!
    """
)

VALID_CASES: tuple[DesktopCase, ...] = (
    DesktopCase(name="foo_viewer", source=FOO_VIEWER),
    DesktopCase(name="empty_source", source=""),
    DesktopCase(name="only_comments_and_blanks", source="# a comment\n\n   \n# another\n"),
    DesktopCase(name="comment_before_first_group", source="# generated\n[Desktop Entry]\nName=x\n"),
    DesktopCase(name="group_without_entries", source="[Empty]\n[Desktop Entry]\nName=x\n"),
    DesktopCase(name="no_final_newline", source="[Desktop Entry]\nName=x"),
    DesktopCase(name="crlf_line_endings", source="[Desktop Entry]\r\nName=x\r\nHidden=false\r\n"),
    DesktopCase(name="spaces_around_separator", source="[Desktop Entry]\nName = x\nType\t=\tApplication\n"),
    DesktopCase(
        name="localized_keys",
        source=_dedent(
            """
            [Desktop Entry]
            Name=Files
            Name[de]=Dateien
            Name[sr_YU@Latn]=Datoteke
            Name[en_US.UTF-8@modifier]=Files
            Comment[ja]=ファイルを管理します
            """
        ),
    ),
    DesktopCase(name="escaped_values", source="[G]\nA=foo \\nbar\nB=foo\\;bar\nC=\\sleading\nD=back\\\\slash\n"),
    DesktopCase(name="empty_value", source="[G]\nA=\n"),
    DesktopCase(name="repeated_key_overwrites", source="[G]\nA=1\nB=2\nA=3\n"),
    DesktopCase(name="repeated_group_replaces", source="[G]\nA=1\n[H]\nB=1\n[G]\nC=1\n"),
)

INVALID_CASES: tuple[DesktopCase, ...] = (
    DesktopCase(
        name="entry_before_group",
        source="Name=x\n[Desktop Entry]\n",
        expected_error="PARSER_ENTRY_OUTSIDE_GROUP",
        expected_line=0,
    ),
    DesktopCase(
        name="empty_group_header",
        source="[Desktop Entry]\nName=x\n[]\n",
        expected_error="PARSER_EMPTY_GROUP_HEADER",
        expected_line=2,
    ),
    DesktopCase(
        name="unterminated_group_header",
        source="[Desktop Entry\nName=x\n",
        expected_error="PARSER_UNTERMINATED_GROUP_HEADER",
        expected_line=0,
    ),
    DesktopCase(
        name="bracket_inside_group_header",
        source="[Desktop [Entry]]\n",
        expected_error="PARSER_UNTERMINATED_GROUP_HEADER",
        expected_line=0,
    ),
    DesktopCase(
        name="text_after_group_header",
        source="[Desktop Entry] extra\n",
        expected_error="PARSER_TRAILING_INPUT",
        expected_line=0,
    ),
    DesktopCase(
        name="unrecognized_line",
        source="[Desktop Entry]\nName=x\nnot an entry\nType=Application\n",
        expected_error="PARSER_TRAILING_INPUT",
        expected_line=2,
    ),
    DesktopCase(
        name="indented_comment",
        source="[Desktop Entry]\n  # indented\n",
        expected_error="PARSER_TRAILING_INPUT",
        expected_line=1,
    ),
    DesktopCase(
        name="malformed_locale",
        source="[Desktop Entry]\nName[de=x\n",
        expected_error="PARSER_INVALID_LOCALE",
        expected_line=1,
    ),
    DesktopCase(
        name="locale_segments_out_of_order",
        source="[Desktop Entry]\nName[sr@Latn_YU]=x\n",
        expected_error="PARSER_INVALID_LOCALE",
        expected_line=1,
    ),
    DesktopCase(
        name="unknown_escape",
        source="[Desktop Entry]\nExec=foo\\x\n",
        expected_error="PARSER_INVALID_ESCAPE",
        expected_line=1,
    ),
    DesktopCase(
        name="trailing_backslash",
        source="[Desktop Entry]\nExec=foo\\\n",
        expected_error="PARSER_INVALID_ESCAPE",
        expected_line=1,
    ),
    DesktopCase(
        name="non_ascii_plain_string",
        source="[Desktop Entry]\nName=Grüße\n",
        expected_error="PARSER_NON_ASCII_STRING",
        expected_line=1,
    ),
)

ALL_CASES: tuple[DesktopCase, ...] = VALID_CASES + INVALID_CASES

type CaseName = Literal[
    "foo_viewer",
    "empty_source",
    "only_comments_and_blanks",
    "comment_before_first_group",
    "group_without_entries",
    "no_final_newline",
    "crlf_line_endings",
    "spaces_around_separator",
    "localized_keys",
    "escaped_values",
    "empty_value",
    "repeated_key_overwrites",
    "repeated_group_replaces",
    "entry_before_group",
    "empty_group_header",
    "unterminated_group_header",
    "bracket_inside_group_header",
    "text_after_group_header",
    "unrecognized_line",
    "indented_comment",
    "malformed_locale",
    "locale_segments_out_of_order",
    "unknown_escape",
    "trailing_backslash",
    "non_ascii_plain_string",
]

CASE_BY_NAME: dict[CaseName, DesktopCase] = cast(
    dict[CaseName, DesktopCase],
    {case.name: case for case in ALL_CASES},
)


def case_source(name: CaseName) -> str:
    return CASE_BY_NAME[name].source


def case_id(case: DesktopCase) -> str:
    return case.name
