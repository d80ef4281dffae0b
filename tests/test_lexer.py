import pytest

from deskentry.diagnostics import ParseError
from deskentry.lexer import (
    is_valid_header,
    read_blank,
    read_boolean,
    read_comment,
    read_group_header,
    read_key,
    read_locale,
    read_numeric,
    read_separator,
    unescape,
)
from deskentry.model import Locale, LocalizedKey, SimpleKey
from deskentry.text import TextRange, split_lines


def read_all(reader, text: str):
    return reader(text, 0, len(text))


def test_split_lines_handles_lf_crlf_and_missing_final_newline() -> None:
    source = "a\r\nb\n\nc"
    lines = split_lines(source)

    assert [source[line.start : line.end] for line in lines] == ["a", "b", "", "c"]
    assert [line.ending for line in lines] == ["\r\n", "\n", "\n", ""]
    assert [line.index for line in lines] == [0, 1, 2, 3]
    assert lines[0].next_start == 3


def test_split_lines_final_newline_does_not_open_an_extra_line() -> None:
    assert len(split_lines("a\nb\n")) == 2
    assert split_lines("") == []


def test_comment_reader_takes_whole_line() -> None:
    assert read_all(read_comment, "# hello [world]=1") == ("# hello [world]=1", 17)
    assert read_all(read_comment, "Name=#x") is None


def test_blank_reader_captures_whitespace() -> None:
    assert read_all(read_blank, " \t ") == (" \t ", 3)
    assert read_all(read_blank, "") == ("", 0)
    assert read_all(read_blank, "  x") is None


def test_group_header_reader() -> None:
    assert read_all(read_group_header, "[Desktop Entry]") == ("Desktop Entry", 15)
    assert read_all(read_group_header, "Name=[x]") is None


def test_group_header_reader_reports_unterminated_and_empty_headers() -> None:
    with pytest.raises(ParseError) as unterminated:
        read_all(read_group_header, "[unterminated")
    assert unterminated.value.code == "PARSER_UNTERMINATED_GROUP_HEADER"
    assert unterminated.value.diagnostic.range == TextRange(0, 13)

    with pytest.raises(ParseError) as empty:
        read_all(read_group_header, "[]")
    assert empty.value.code == "PARSER_EMPTY_GROUP_HEADER"


def test_locale_reader_accepts_all_segment_combinations() -> None:
    assert read_all(read_locale, "[de]") == (Locale("de"), 4)
    assert read_all(read_locale, "[de_DE]") == (Locale("de", country="DE"), 7)
    assert read_all(read_locale, "[sr@Latn]") == (Locale("sr", modifier="Latn"), 9)
    assert read_all(read_locale, "[en_US.UTF-8@modifier]") == (
        Locale("en", country="US", encoding="UTF-8", modifier="modifier"),
        22,
    )


@pytest.mark.parametrize("text", ["[]", "[de", "[de_]", "[de@Latn_DE]", "[de.]", "[de DE]"])
def test_locale_reader_rejects_malformed_locales(text: str) -> None:
    with pytest.raises(ParseError) as error:
        read_all(read_locale, text)
    assert error.value.code == "PARSER_INVALID_LOCALE"


def test_key_reader_with_and_without_locale() -> None:
    assert read_all(read_key, "Name=x") == (SimpleKey("Name"), 4)
    assert read_all(read_key, "X-GNOME-Bugzilla") == (SimpleKey("X-GNOME-Bugzilla"), 16)
    assert read_all(read_key, "Name[en_US.UTF-8@modifier]") == (
        LocalizedKey("Name", Locale("en", "US", "UTF-8", "modifier")),
        26,
    )
    assert read_all(read_key, "=x") is None
    assert read_all(read_key, "Grüße=x") == (SimpleKey("Gr"), 2)


def test_separator_reader_skips_inline_whitespace() -> None:
    assert read_separator("Name = x", 4, 8) == 7
    assert read_separator("Name\t=\tx", 4, 8) == 7
    assert read_separator("Name x", 4, 6) is None


def test_boolean_reader_is_case_sensitive() -> None:
    assert read_boolean("true") is True
    assert read_boolean("false") is False
    assert read_boolean("True") is None
    assert read_boolean("yes") is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1", 1.0),
        ("4.20", 4.2),
        ("-3", -3.0),
        ("+2.5", 2.5),
        (".5", 0.5),
        ("1.", 1.0),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
    ],
)
def test_numeric_reader_accepts_decimal_literals(text: str, expected: float) -> None:
    assert read_numeric(text) == expected


@pytest.mark.parametrize("text", ["", "inf", "nan", "1.2.3", "1 ", "0x10", "e5", "1e", "fooview"])
def test_numeric_reader_rejects_other_text(text: str) -> None:
    assert read_numeric(text) is None


def test_unescape_decodes_every_escape() -> None:
    assert unescape("foo \\nbar") == "foo \nbar"
    assert unescape("foo\\;bar") == "foo;bar"
    assert unescape("\\s\\t\\r\\\\") == " \t\r\\"


def test_unescape_returns_plain_text_unchanged() -> None:
    text = "just plain text"
    assert unescape(text) is text


def test_unescape_reports_offset_of_bad_escape() -> None:
    with pytest.raises(ParseError) as error:
        unescape("ab\\q", offset=10)
    assert error.value.code == "PARSER_INVALID_ESCAPE"
    assert error.value.diagnostic.range == TextRange(12, 14)

    with pytest.raises(ParseError, match="trailing"):
        unescape("ab\\")


def test_header_validator() -> None:
    assert is_valid_header("Desktop Action Gallery")
    assert not is_valid_header("a]b")
    assert not is_valid_header("Grüße")
    assert not is_valid_header("")
