"""Iteration over the text and escape-sequence elements of a string.

Offsets are code-point indices into the string, so ``s[start:end]`` is the
element's text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from deltaview.colors import Color, TermStyle

_MAX_PARAMS = 32
_MAX_INTERMEDIATES = 2
_MAX_PARAM_VALUE = 0xFFFF

_BASIC_COLORS = (
    Color.BLACK,
    Color.RED,
    Color.GREEN,
    Color.YELLOW,
    Color.BLUE,
    Color.PURPLE,
    Color.CYAN,
    Color.WHITE,
)

_FLAG_ATTRIBUTES = {
    1: "is_bold",
    2: "is_dimmed",
    3: "is_italic",
    5: "is_blink",
    6: "is_blink",
    7: "is_reverse",
    8: "is_hidden",
    9: "is_strikethrough",
}


class ElementKind(Enum):
    """The kind of a string element."""

    CSI = "csi"
    ESC = "esc"
    OSC = "osc"
    TEXT = "text"


@dataclass(frozen=True)
class Element:
    """A span ``[start, end)`` of a string; CSI elements carry the SGR style they set."""

    kind: ElementKind
    start: int
    end: int
    style: Optional[TermStyle] = None


class _State(Enum):
    GROUND = "ground"
    ESCAPE = "escape"
    ESCAPE_INTERMEDIATE = "escape_intermediate"
    CSI_ENTRY = "csi_entry"
    CSI_PARAM = "csi_param"
    CSI_INTERMEDIATE = "csi_intermediate"
    CSI_IGNORE = "csi_ignore"
    OSC_STRING = "osc_string"
    # DCS and SOS/PM/APC strings: nothing inside them is reported.
    STRING_IGNORE = "string_ignore"


def _is_c0(code: int) -> bool:
    return code < 0x20 and code not in (0x18, 0x1A, 0x1B)


class _Parser:
    """An escape-sequence state machine fed one character at a time."""

    def __init__(self) -> None:
        self._state = _State.GROUND
        self._clear()
        self._element: Optional[tuple[ElementKind, Optional[TermStyle]]] = None
        self._text = 0

    def _clear(self) -> None:
        self._groups: list[list[int]] = []
        self._current: list[int] = []
        self._count = 0
        self._param = 0
        self._intermediates: list[str] = []
        self._ignoring = False

    def advance(self, ch: str) -> tuple[Optional[tuple[ElementKind, Optional[TermStyle]]], int]:
        """Feed one character; return any completed non-text element and the text counted."""
        self._element = None
        self._text = 0
        code = ord(ch)
        if self._state is _State.GROUND and code >= 0x80:
            self._text += 1
        elif code in (0x18, 0x1A):
            self._change(_State.GROUND, lambda: self._execute(code))
        elif code == 0x1B:
            self._change(_State.ESCAPE)
        else:
            self._dispatch(ch, code)
        return self._element, self._text

    def _change(self, new_state: _State, action=None) -> None:
        if self._state is _State.OSC_STRING:
            self._element = (ElementKind.OSC, None)
        if action is not None:
            action()
        if new_state in (_State.ESCAPE, _State.CSI_ENTRY, _State.STRING_IGNORE):
            self._clear()
        self._state = new_state

    def _dispatch(self, ch: str, code: int) -> None:
        state = self._state
        if state is _State.GROUND:
            self._text += 1  # C0 controls are executed, the rest printed
        elif state is _State.ESCAPE:
            self._escape(ch, code)
        elif state is _State.ESCAPE_INTERMEDIATE:
            if _is_c0(code):
                self._execute(code)
            elif 0x20 <= code <= 0x2F:
                self._collect(ch)
            elif 0x30 <= code <= 0x7E:
                self._change(_State.GROUND, self._esc_dispatch)
        elif state is _State.CSI_ENTRY:
            if _is_c0(code):
                self._execute(code)
            elif 0x20 <= code <= 0x2F:
                self._change(_State.CSI_INTERMEDIATE, lambda: self._collect(ch))
            elif 0x30 <= code <= 0x3B:
                self._change(_State.CSI_PARAM, lambda: self._add_param(ch))
            elif 0x3C <= code <= 0x3F:
                self._change(_State.CSI_PARAM, lambda: self._collect(ch))
            elif 0x40 <= code <= 0x7E:
                self._change(_State.GROUND, lambda: self._csi_dispatch(ch))
        elif state is _State.CSI_PARAM:
            if _is_c0(code):
                self._execute(code)
            elif 0x30 <= code <= 0x3B:
                self._add_param(ch)
            elif 0x3C <= code <= 0x3F:
                self._change(_State.CSI_IGNORE)
            elif 0x20 <= code <= 0x2F:
                self._change(_State.CSI_INTERMEDIATE, lambda: self._collect(ch))
            elif 0x40 <= code <= 0x7E:
                self._change(_State.GROUND, lambda: self._csi_dispatch(ch))
        elif state is _State.CSI_INTERMEDIATE:
            if _is_c0(code):
                self._execute(code)
            elif 0x20 <= code <= 0x2F:
                self._collect(ch)
            elif 0x30 <= code <= 0x3F:
                self._change(_State.CSI_IGNORE)
            elif 0x40 <= code <= 0x7E:
                self._change(_State.GROUND, lambda: self._csi_dispatch(ch))
        elif state is _State.CSI_IGNORE:
            if _is_c0(code):
                self._execute(code)
            elif 0x40 <= code <= 0x7E:
                self._change(_State.GROUND)
        elif state is _State.OSC_STRING:
            if code == 0x07:
                self._change(_State.GROUND)
        # STRING_IGNORE swallows everything until a terminator.

    def _escape(self, ch: str, code: int) -> None:
        if _is_c0(code):
            self._execute(code)
        elif 0x20 <= code <= 0x2F:
            self._change(_State.ESCAPE_INTERMEDIATE, lambda: self._collect(ch))
        elif code in (0x50, 0x58, 0x5E, 0x5F):
            self._change(_State.STRING_IGNORE)
        elif code == 0x5B:
            self._change(_State.CSI_ENTRY)
        elif code == 0x5D:
            self._change(_State.OSC_STRING)
        elif 0x30 <= code <= 0x7E:
            self._change(_State.GROUND, self._esc_dispatch)

    def _execute(self, code: int) -> None:
        if code < 128:
            self._text += 1

    def _collect(self, ch: str) -> None:
        if len(self._intermediates) == _MAX_INTERMEDIATES:
            self._ignoring = True
        else:
            self._intermediates.append(ch)

    def _push(self, value: int) -> None:
        self._current.append(value)
        self._groups.append(self._current)
        self._current = []
        self._count += 1

    def _add_param(self, ch: str) -> None:
        if self._count >= _MAX_PARAMS:
            self._ignoring = True
            return
        if ch == ";":
            self._push(self._param)
            self._param = 0
        elif ch == ":":
            self._current.append(self._param)
            self._count += 1
            self._param = 0
        else:
            self._param = min(self._param * 10 + int(ch), _MAX_PARAM_VALUE)

    def _esc_dispatch(self) -> None:
        self._element = (ElementKind.ESC, None)

    def _csi_dispatch(self, final: str) -> None:
        if self._count >= _MAX_PARAMS:
            self._ignoring = True
        else:
            self._push(self._param)
        if self._ignoring or len(self._intermediates) > 1:
            return
        if final == "m" and not self._intermediates and self._groups:
            self._element = (ElementKind.CSI, _style_from_sgr_parameters(self._groups))


def _parse_sgr_color(values: Iterator[int]) -> Optional[Color]:
    kind = next(values, None)
    if kind == 2:
        rgb = []
        for _ in range(3):
            value = next(values, None)
            if value is None or value > 255:
                return None
            rgb.append(value)
        return Color.rgb(*rgb)
    if kind == 5:
        value = next(values, None)
        if value is None or value > 255:
            return None
        return Color.fixed(value)
    return None


def _extended_color(rest: list[int]) -> Optional[Color]:
    rgb_start = 2 if len(rest) > 4 else 1
    return _parse_sgr_color(iter([rest[0], *rest[rgb_start:]]))


def _style_from_sgr_parameters(groups: list[list[int]]) -> TermStyle:
    attrs: dict = {}
    params = iter(groups)
    for group in params:
        head, rest = group[0], group[1:]
        if head == 4:
            attrs["is_underline"] = True
        elif not rest and head in _FLAG_ATTRIBUTES:
            attrs[_FLAG_ATTRIBUTES[head]] = True
        elif not rest and 30 <= head <= 37:
            attrs["foreground"] = _BASIC_COLORS[head - 30]
        elif not rest and 40 <= head <= 47:
            attrs["background"] = _BASIC_COLORS[head - 40]
        elif head in (38, 48):
            if rest:
                color = _extended_color(rest)
            else:
                color = _parse_sgr_color(g[0] for g in params)
            if color is not None:
                attrs["foreground" if head == 38 else "background"] = color
        elif not rest and 90 <= head <= 97:
            attrs["foreground"] = Color.fixed(head - 90 + 8)
        elif not rest and 100 <= head <= 107:
            attrs["background"] = Color.fixed(head - 100 + 8)
    return TermStyle(**attrs)


class AnsiElementIterator:
    """Iterate over the text runs and CSI, ESC and OSC sequences of a string."""

    def __init__(self, s: str) -> None:
        self._chars = iter(s)
        self._parser = _Parser()
        self._pending: Optional[tuple[ElementKind, Optional[TermStyle]]] = None
        self._text_length = 0
        self._start = 0
        self._pos = 0

    def __iter__(self) -> "AnsiElementIterator":
        return self

    def __next__(self) -> Element:
        while True:
            if self._pending is None:
                ch = next(self._chars, None)
                if ch is None:
                    if self._text_length > 0:
                        self._text_length = 0
                        return Element(ElementKind.TEXT, self._start, self._pos)
                    raise StopIteration
                self._pending, text = self._parser.advance(ch)
                self._text_length += text
                self._pos += 1
                if self._pending is None:
                    continue
            # Text preceding a completed sequence is emitted first.
            if self._text_length > 0:
                start = self._start
                self._start += self._text_length
                self._text_length = 0
                return Element(ElementKind.TEXT, start, self._start)
            kind, style = self._pending
            start = self._start
            self._start = self._pos
            self._pending = None
            return Element(kind, start, self._pos, style)