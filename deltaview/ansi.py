"""Operations on strings that may contain ANSI escape sequences.

Positions and lengths refer to code points of the visible (non-escape) text;
widths are terminal display columns.
"""

from __future__ import annotations

from typing import Iterator, Optional

import regex
from wcwidth import wcwidth

from deltaview.ansi_iterator import AnsiElementIterator, ElementKind
from deltaview.colors import TermStyle

ANSI_CSI_CLEAR_TO_EOL = "\x1b[0K"
ANSI_CSI_CLEAR_TO_BOL = "\x1b[1K"
ANSI_SGR_RESET = "\x1b[0m"
ANSI_SGR_REVERSE = "\x1b[7m"

_GRAPHEME = regex.compile(r"\X")


def _text_width(text: str) -> int:
    # Control characters and other non-printing code points take no columns.
    return sum(max(wcwidth(ch), 0) for ch in text)


def _ansi_strings(s: str) -> Iterator[tuple[str, bool]]:
    """Yield (piece, is_escape_sequence) for each element of ``s``."""
    for element in AnsiElementIterator(s):
        yield s[element.start:element.end], element.kind is not ElementKind.TEXT


def _strip(pieces: Iterator[tuple[str, bool]]) -> str:
    return "".join(piece for piece, is_ansi in pieces if not is_ansi)


def strip_ansi_codes(s: str) -> str:
    """Return ``s`` with every escape sequence removed."""
    return _strip(_ansi_strings(s))


def measure_text_width(s: str) -> int:
    """Display width of the visible text of ``s``."""
    return _text_width(strip_ansi_codes(s))


def truncate_str(s: str, display_width: int, tail: str) -> str:
    """Truncate ``s`` to ``display_width`` columns, ending with ``tail``.

    If ``s`` fits it is returned unchanged. Otherwise ``tail`` (itself cut to
    the width if needed) is appended to as much of ``s`` as still fits. All
    escape sequences of ``s`` are kept.
    """
    pieces = list(_ansi_strings(s))
    if _text_width(_strip(iter(pieces))) <= display_width:
        return s
    result_tail = truncate_str(tail, display_width, "") if tail else ""
    used = measure_text_width(result_tail)
    result: list[str] = []
    for piece, is_ansi in pieces:
        if is_ansi:
            result.append(piece)
            continue
        for grapheme in _GRAPHEME.findall(piece):
            width = _text_width(grapheme)
            if used + width > display_width:
                break
            result.append(grapheme)
            used += width
    return "".join(result) + result_tail


def parse_first_style(s: str) -> Optional[TermStyle]:
    """The style set by the first SGR sequence in ``s``, or None if there is none."""
    return next(
        (el.style for el in AnsiElementIterator(s) if el.kind is ElementKind.CSI),
        None,
    )


def string_starts_with_ansi_style_sequence(s: str) -> bool:
    """Whether ``s`` begins with an SGR style sequence."""
    first = next(AnsiElementIterator(s), None)
    return first is not None and first.kind is ElementKind.CSI


def ansi_preserving_slice(s: str, start: int) -> str:
    """Drop the first ``start`` characters of visible text, keeping all escape sequences."""
    parts: list[str] = []
    index = 0  # position within the visible text
    for element in AnsiElementIterator(s):
        a, b = element.start, element.end
        if element.kind is not ElementKind.TEXT:
            parts.append(s[a:b])
            continue
        begin = index
        index += b - a
        if index <= start:
            continue
        if begin > start:
            parts.append(s[a:b])
        else:
            parts.append(s[a + start - begin:b])
    return "".join(parts)