import pytest
import yaml

from locale_keys.editor import ValueFormatter, format_value


def round_trip(value: str) -> object:
    return yaml.safe_load(f"k: {format_value(value)}\n")["k"]


@pytest.mark.parametrize(
    "value",
    ["My App", "simple text", "1.0.0", "Hello World", "Mi Aplicación", "中文"],
)
def test_plain_values_stay_unquoted(value: str) -> None:
    assert format_value(value) == value
    assert round_trip(value) == value


def test_colon_is_single_quoted() -> None:
    assert format_value("Text: colon") == "'Text: colon'"


def test_quotes_are_escaped() -> None:
    assert format_value("it's") == "'it''s'"
    assert (
        format_value('text with: colons and "quotes"')
        == "'text with: colons and \"quotes\"'"
    )


@pytest.mark.parametrize(
    "value",
    ["true", "Yes", "off", "null", "~", "123", "0x1F", "2024-01-01", "=", "<<"],
)
def test_values_a_loader_would_retype_are_quoted(value: str) -> None:
    assert format_value(value) == f"'{value}'"
    assert round_trip(value) == value


def test_multiline_uses_strip_literal_block() -> None:
    assert format_value("Line1\nLine2") == "|-\n  Line1\n  Line2"


def test_multiline_body_follows_key_indent() -> None:
    formatted = ValueFormatter().format("Line 1\nLine 2\nLine 3\n", "    ")

    assert formatted == "|\n      Line 1\n      Line 2\n      Line 3"


def test_leading_space_adds_indentation_indicator() -> None:
    assert format_value("  indented\nnext") == "|2-\n    indented\n  next"


def test_control_characters_use_double_quotes() -> None:
    assert format_value("tab\there") == '"tab\\there"'
    assert format_value("bell\x07") == '"bell\\x07"'


@pytest.mark.parametrize(
    "value",
    [
        "",
        " lead",
        "trail ",
        'He said "hi"',
        "50%",
        "#hash",
        "a, b",
        "[x]",
        "{x}",
        "*star",
        "&anchor",
        "!bang",
        "|pipe",
        ">gt",
        "@at",
        "`tick`",
        "- dash",
        "-",
        "?q",
        "---",
        "multi\nline",
        "multi\nline\n",
        "multi\n\n",
        "\n  after blank",
        "crlf\r\nx",
        "tab\there",
        "bell\x07",
        "emoji 🚀",
        "back\\slash",
    ],
)
def test_special_values_round_trip(value: str) -> None:
    assert round_trip(value) == value
