"""Splitting lines into tokens for within-line alignment."""

from __future__ import annotations

import re
from typing import Union

import regex

Pattern = Union[str, "re.Pattern[str]", "regex.Pattern[str]"]

_GRAPHEME = regex.compile(r"\X")


def _graphemes(text: str) -> list[str]:
    return _GRAPHEME.findall(text)


def tokenize(line: str, regex: Pattern) -> list[str]:
    """Split ``line`` into tokens for alignment.

    Matches of ``regex`` become single tokens; the text between them is split
    into grapheme clusters. If the line does not begin with a match, the token
    list starts with an empty string. The tokens concatenate to ``line``.
    """
    pattern = _compile(regex)
    tokens: list[str] = []
    offset = 0
    for match in pattern.finditer(line):
        start, end = match.span()
        if offset == 0 and start > 0:
            tokens.append("")
        # Separating text is aligned as single-grapheme tokens.
        tokens.extend(_graphemes(line[offset:start]))
        tokens.append(line[start:end])
        offset = end
    if offset < len(line):
        if offset == 0:
            tokens.append("")
        tokens.extend(_graphemes(line[offset:]))
    return tokens


def _compile(pattern: Pattern):
    if isinstance(pattern, str):
        return regex.compile(pattern)
    return pattern