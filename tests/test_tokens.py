import re

import pytest
import regex

from deltaview.tokens import tokenize

WORD = regex.compile(r"\w+")


def assert_tokenize(text, expected):
    actual = tokenize(text, WORD)
    assert "".join(expected) == text
    assert actual == expected


def test_tokenize_0():
    assert_tokenize("", [])
    assert_tokenize(";", ["", ";"])
    assert_tokenize(";;", ["", ";", ";"])
    assert_tokenize(";;a", ["", ";", ";", "a"])
    assert_tokenize(";;ab", ["", ";", ";", "ab"])
    assert_tokenize(";;ab;", ["", ";", ";", "ab", ";"])
    assert_tokenize(";;ab;;", ["", ";", ";", "ab", ";", ";"])


def test_tokenize_1():
    assert_tokenize("aaa bbb", ["aaa", " ", "bbb"])


def test_tokenize_2():
    assert_tokenize(
        "fn coalesce_edits<'a, EditOperation>(",
        ["fn", " ", "coalesce_edits", "<", "'", "a", ",", " ", "EditOperation", ">", "("],
    )


def test_tokenize_3():
    assert_tokenize(
        "fn coalesce_edits<'a, 'b, EditOperation>(",
        [
            "fn", " ", "coalesce_edits", "<", "'", "a", ",", " ", "'", "b", ",", " ",
            "EditOperation", ">", "(",
        ],
    )


def test_tokenize_4():
    assert_tokenize(
        "annotated_plus_lines.push(vec![(noop_insertion, plus_line)]);",
        [
            "annotated_plus_lines", ".", "push", "(", "vec", "!", "[", "(",
            "noop_insertion", ",", " ", "plus_line", ")", "]", ")", ";",
        ],
    )


def test_tokenize_5():
    assert_tokenize(
        "         let col = Color::from_str(s).unwrap_or_else(|_| die());",
        [
            "", " ", " ", " ", " ", " ", " ", " ", " ", " ",
            "let", " ", "col", " ", "=", " ", "Color", ":", ":", "from_str", "(",
            "s", ")", ".", "unwrap_or_else", "(", "|", "_", "|", " ", "die", "(",
            ")", ")", ";",
        ],
    )


def test_tokenize_6():
    assert_tokenize(
        '         (minus_file, plus_file) => format!("renamed: {} ⟶  {}", minus_file, plus_file),',
        [
            "", " ", " ", " ", " ", " ", " ", " ", " ", " ",
            "(", "minus_file", ",", " ", "plus_file", ")", " ", "=", ">", " ",
            "format", "!", "(", '"', "renamed", ":", " ", "{", "}", " ", "⟶",
            " ", " ", "{", "}", '"', ",", " ", "minus_file", ",", " ",
            "plus_file", ")", ",",
        ],
    )


@pytest.mark.parametrize("pattern", [r"\w+", re.compile(r"\w+")])
def test_tokenize_accepts_string_and_stdlib_pattern(pattern):
    assert tokenize("a-b", pattern) == ["a", "-", "b"]


def test_tokenize_keeps_combining_marks_together():
    text = "-e\u0301-"
    assert tokenize(text, regex.compile(r"x+")) == ["", "-", "e\u0301", "-"]


def test_tokenize_coarser_regex():
    assert tokenize("foo.bar baz", regex.compile(r"\S+")) == ["foo.bar", " ", "baz"]