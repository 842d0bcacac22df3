import pytest

from deltaview.ansi import (
    ANSI_SGR_RESET,
    ansi_preserving_slice,
    measure_text_width,
    parse_first_style,
    string_starts_with_ansi_style_sequence,
    strip_ansi_codes,
    truncate_str,
)
from deltaview.colors import Color, TermStyle

HYPERLINK = (
    "\x1b[38;5;4m\x1b]8;;file:///Users/dan/src/delta/src/ansi/mod.rs\x1b\\"
    "src/ansi/mod.rs\x1b]8;;\x1b\\\x1b[0m"
)
HYPERLINK_NON_ASCII = (
    "\x1b[38;5;4m\x1b]8;;file:///Users/dan/src/delta/src/ansi/mod.rs\x1b\\"
    "src/ansi/modバー.rs\x1b]8;;\x1b\\\x1b[0m"
)


def red(text: str) -> str:
    return f"\x1b[31m{text}\x1b[0m"


@pytest.mark.parametrize("s", ["src/ansi/mod.rs", "バー", "src/ansi/modバー.rs"])
def test_strip_ansi_codes_plain(s):
    assert strip_ansi_codes(s) == s


def test_strip_ansi_codes_styled():
    assert strip_ansi_codes("\x1b[31mバー\x1b[0m") == "バー"


def test_measure_text_width():
    assert measure_text_width("src/ansi/mod.rs") == 15
    assert measure_text_width("バー") == 4
    assert measure_text_width("src/ansi/modバー.rs") == 19
    assert measure_text_width("\x1b[31mバー\x1b[0m") == 4
    assert measure_text_width("a\nb\n") == 2


def test_strip_ansi_codes_osc_hyperlink():
    assert strip_ansi_codes(HYPERLINK + "\n") == "src/ansi/mod.rs\n"


def test_measure_text_width_osc_hyperlink():
    assert measure_text_width(HYPERLINK) == measure_text_width("src/ansi/mod.rs")


def test_measure_text_width_osc_hyperlink_non_ascii():
    assert measure_text_width(HYPERLINK_NON_ASCII) == measure_text_width(
        "src/ansi/modバー.rs"
    )


def test_parse_first_style():
    style = parse_first_style("\x1b[31m-____\x1b[m\n")
    assert style == TermStyle(foreground=Color.RED)


def test_parse_first_style_none():
    assert parse_first_style("no escapes here") is None


def test_string_starts_with_ansi_escape_sequence():
    assert string_starts_with_ansi_style_sequence("") is False
    assert string_starts_with_ansi_style_sequence("-") is False
    assert string_starts_with_ansi_style_sequence("\x1b[31m-XXX\x1b[m\n") is True
    assert string_starts_with_ansi_style_sequence("\x1b[32m+XXX") is True


def test_ansi_preserving_slice():
    assert ansi_preserving_slice("", 0) == ""
    assert ansi_preserving_slice("a", 0) == "a"
    assert ansi_preserving_slice("a", 1) == ""
    assert (
        ansi_preserving_slice("\x1b[1;35m-2222.2222.2222.2222\x1b[0m", 1)
        == "\x1b[1;35m2222.2222.2222.2222\x1b[0m"
    )
    assert (
        ansi_preserving_slice("\x1b[1;35m-2222.2222.2222.2222\x1b[0m", 15)
        == "\x1b[1;35m.2222\x1b[0m"
    )
    assert (
        ansi_preserving_slice("\x1b[1;36m-\x1b[m\x1b[1;36m2222·2222·2222·2222\x1b[m\n", 1)
        == "\x1b[1;36m\x1b[m\x1b[1;36m2222·2222·2222·2222\x1b[m\n"
    )


def test_truncate_str():
    assert truncate_str("1", 1, "") == "1"
    assert truncate_str("12", 1, "") == "1"
    assert truncate_str("123", 2, "s") == "1s"
    assert truncate_str("123", 2, "→") == "1→"
    assert truncate_str("12ݶ", 1, "ݶ") == "ݶ"


def test_text_width_styled():
    s = "\x1b[31m\x1b[40m\x1b[1mfoo\x1b[0m"
    assert measure_text_width(s) == 3


def test_truncate_str_styled():
    s = f"foo {red('bar')}"
    assert truncate_str(s, 5, "") == f"foo {red('b')}"
    assert truncate_str(s, 5, "!") == f"foo {red('')}!"
    s = f"foo {red('bar')} baz"
    assert truncate_str(s, 10, "...") == f"foo {red('bar')}..."
    s = f"foo {red('バー')}"
    assert truncate_str(s, 5, "") == f"foo {red('')}"
    assert truncate_str(s, 6, "") == f"foo {red('バ')}"


def test_truncate_str_no_ansi():
    assert truncate_str("foo bar", 5, "") == "foo b"
    assert truncate_str("foo bar", 5, "!") == "foo !"
    assert truncate_str("foo bar baz", 10, "...") == "foo bar..."


@pytest.mark.parametrize("width", [0, 1, 3, 5, 8, 20])
def test_truncate_str_never_exceeds_width(width):
    s = f"foo {red('バーbaz')} qux"
    result = truncate_str(s, width, "→")
    assert measure_text_width(result) <= max(width, 0)
    assert result.endswith("→") or result == s


def test_truncate_str_keeps_escape_sequences():
    s = f"abc {red('defgh')}"
    result = truncate_str(s, 4, "")
    assert result == f"abc {red('')}"
    assert ANSI_SGR_RESET in result