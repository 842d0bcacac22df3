"""Terminal colours and styles, named ANSI colours and default diff colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

_BASIC_NAMES = ("black", "red", "green", "yellow", "blue", "purple", "cyan", "white")


@dataclass(frozen=True)
class Color:
    """A terminal colour: one of the 8 basic colours, a 256-palette index, or 24-bit RGB.

    Exactly one of ``name``, ``index`` and ``triple`` is set.
    """

    name: Optional[str] = None
    index: Optional[int] = None
    triple: Optional[tuple[int, int, int]] = None

    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    PURPLE: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]

    def __post_init__(self) -> None:
        given = sum(v is not None for v in (self.name, self.index, self.triple))
        if given != 1:
            raise ValueError("exactly one of name, index and triple must be given")
        if self.name is not None and self.name not in _BASIC_NAMES:
            raise ValueError(f"not a basic colour name: {self.name!r}")
        if self.index is not None and not 0 <= self.index <= 255:
            raise ValueError(f"palette index out of range: {self.index}")
        if self.triple is not None:
            if len(self.triple) != 3 or not all(0 <= c <= 255 for c in self.triple):
                raise ValueError(f"invalid RGB components: {self.triple!r}")

    @classmethod
    def named(cls, name: str) -> "Color":
        """One of the 8 basic colours: black, red, green, yellow, blue, purple, cyan, white."""
        return cls(name=name)

    @classmethod
    def fixed(cls, index: int) -> "Color":
        """A colour from the 256-colour palette."""
        return cls(index=index)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        """A 24-bit colour."""
        return cls(triple=(r, g, b))

    def sgr_code(self, background: bool = False) -> str:
        """The SGR parameters selecting this colour as foreground or background."""
        if self.name is not None:
            return str((40 if background else 30) + _BASIC_NAMES.index(self.name))
        prefix = "48" if background else "38"
        if self.index is not None:
            return f"{prefix};5;{self.index}"
        r, g, b = self.triple  # type: ignore[misc]
        return f"{prefix};2;{r};{g};{b}"


Color.BLACK = Color(name="black")
Color.RED = Color(name="red")
Color.GREEN = Color(name="green")
Color.YELLOW = Color(name="yellow")
Color.BLUE = Color(name="blue")
Color.PURPLE = Color(name="purple")
Color.CYAN = Color(name="cyan")
Color.WHITE = Color(name="white")


@dataclass(frozen=True)
class RGBA:
    """A theme colour with an alpha channel.

    Alpha 0 marks ``r`` as a terminal palette number; alpha 1 marks the
    terminal's default colour.
    """

    r: int
    g: int
    b: int
    a: int = 255


@dataclass(frozen=True)
class TermStyle:
    """Foreground, background and attributes of styled terminal text."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False
    is_strikethrough: bool = False

    @property
    def is_plain(self) -> bool:
        return self == TermStyle()

    def _sgr_parameters(self) -> list[str]:
        flags = (
            (self.is_bold, "1"),
            (self.is_dimmed, "2"),
            (self.is_italic, "3"),
            (self.is_underline, "4"),
            (self.is_blink, "5"),
            (self.is_reverse, "7"),
            (self.is_hidden, "8"),
            (self.is_strikethrough, "9"),
        )
        params = [code for enabled, code in flags if enabled]
        if self.foreground is not None:
            params.append(self.foreground.sgr_code())
        if self.background is not None:
            params.append(self.background.sgr_code(background=True))
        return params

    def paint(self, text: str) -> str:
        """Wrap ``text`` in the escape sequences for this style; plain styles leave it alone."""
        if self.is_plain:
            return text
        return f"\x1b[{';'.join(self._sgr_parameters())}m{text}\x1b[0m"


_ANSI_16_COLORS: dict[str, int] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "purple": 5,
    "cyan": 6,
    "white": 7,
    "bright-black": 8,
    "brightblack": 8,
    "bright-red": 9,
    "brightred": 9,
    "bright-green": 10,
    "brightgreen": 10,
    "bright-yellow": 11,
    "brightyellow": 11,
    "bright-blue": 12,
    "brightblue": 12,
    "bright-magenta": 13,
    "brightmagenta": 13,
    "bright-purple": 13,
    "brightpurple": 13,
    "bright-cyan": 14,
    "brightcyan": 14,
    "bright-white": 15,
    "brightwhite": 15,
}


def ansi_16_color_name_to_number(name: str) -> Optional[int]:
    """Palette number of one of the 16 named ANSI colours, or None."""
    return _ANSI_16_COLORS.get(name)


def ansi_16_color_number_to_name(n: int) -> Optional[str]:
    """A name for palette number ``n`` (0-15), or None."""
    return next((name for name, number in _ANSI_16_COLORS.items() if number == n), None)


def color_to_string(color: Color) -> str:
    """Render a colour the way it would be written in a style string."""
    if color.index is not None:
        if color.index < 16:
            return ansi_16_color_number_to_name(color.index)  # type: ignore[return-value]
        return str(color.index)
    if color.triple is not None:
        r, g, b = color.triple
        return f'"#{r:02x}{g:02x}{b:02x}"'
    return color.name  # type: ignore[return-value]


LIGHT_THEME_MINUS_COLOR = Color.rgb(0xFF, 0xE0, 0xE0)
LIGHT_THEME_MINUS_COLOR_256 = Color.fixed(224)
LIGHT_THEME_MINUS_EMPH_COLOR = Color.rgb(0xFF, 0xC0, 0xC0)
LIGHT_THEME_MINUS_EMPH_COLOR_256 = Color.fixed(217)
LIGHT_THEME_PLUS_COLOR = Color.rgb(0xD0, 0xFF, 0xD0)
LIGHT_THEME_PLUS_COLOR_256 = Color.fixed(194)
LIGHT_THEME_PLUS_EMPH_COLOR = Color.rgb(0xA0, 0xEF, 0xA0)
LIGHT_THEME_PLUS_EMPH_COLOR_256 = Color.fixed(157)
DARK_THEME_MINUS_COLOR = Color.rgb(0x3F, 0x00, 0x01)
DARK_THEME_MINUS_COLOR_256 = Color.fixed(52)
DARK_THEME_MINUS_EMPH_COLOR = Color.rgb(0x90, 0x10, 0x11)
DARK_THEME_MINUS_EMPH_COLOR_256 = Color.fixed(124)
DARK_THEME_PLUS_COLOR = Color.rgb(0x00, 0x28, 0x00)
DARK_THEME_PLUS_COLOR_256 = Color.fixed(22)
DARK_THEME_PLUS_EMPH_COLOR = Color.rgb(0x00, 0x60, 0x00)
DARK_THEME_PLUS_EMPH_COLOR_256 = Color.fixed(28)


def _pick(is_light_mode: bool, is_true_color: bool, light: Color, light_256: Color,
          dark: Color, dark_256: Color) -> Color:
    if is_light_mode:
        return light if is_true_color else light_256
    return dark if is_true_color else dark_256


def get_minus_background_color_default(is_light_mode: bool, is_true_color: bool) -> Color:
    """Default background of removed lines."""
    return _pick(is_light_mode, is_true_color, LIGHT_THEME_MINUS_COLOR,
                 LIGHT_THEME_MINUS_COLOR_256, DARK_THEME_MINUS_COLOR,
                 DARK_THEME_MINUS_COLOR_256)


def get_minus_emph_background_color_default(is_light_mode: bool, is_true_color: bool) -> Color:
    """Default background of emphasised sections of removed lines."""
    return _pick(is_light_mode, is_true_color, LIGHT_THEME_MINUS_EMPH_COLOR,
                 LIGHT_THEME_MINUS_EMPH_COLOR_256, DARK_THEME_MINUS_EMPH_COLOR,
                 DARK_THEME_MINUS_EMPH_COLOR_256)


def get_plus_background_color_default(is_light_mode: bool, is_true_color: bool) -> Color:
    """Default background of added lines."""
    return _pick(is_light_mode, is_true_color, LIGHT_THEME_PLUS_COLOR,
                 LIGHT_THEME_PLUS_COLOR_256, DARK_THEME_PLUS_COLOR,
                 DARK_THEME_PLUS_COLOR_256)


def get_plus_emph_background_color_default(is_light_mode: bool, is_true_color: bool) -> Color:
    """Default background of emphasised sections of added lines."""
    return _pick(is_light_mode, is_true_color, LIGHT_THEME_PLUS_EMPH_COLOR,
                 LIGHT_THEME_PLUS_EMPH_COLOR_256, DARK_THEME_PLUS_EMPH_COLOR,
                 DARK_THEME_PLUS_EMPH_COLOR_256)


_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def _cube_index(v: int) -> int:
    return 0 if v < 48 else 1 if v < 115 else (v - 35) // 40


def _palette_rgb(index: int) -> tuple[int, int, int]:
    """RGB of a palette entry from 16 to 255."""
    if index >= 232:
        level = 8 + 10 * (index - 232)
        return level, level, level
    i = index - 16
    return _CUBE_LEVELS[i // 36], _CUBE_LEVELS[(i // 6) % 6], _CUBE_LEVELS[i % 6]


def _luminance(r: int, g: int, b: int) -> int:
    v = 3567664 * r + 11998547 * g + 1211005 * b
    return (v + (1 << 23)) >> 24


def _distance(x: tuple[int, int, int], y: tuple[int, int, int]) -> int:
    r_sum = x[0] + y[0]
    dr, dg, db = x[0] - y[0], x[1] - y[1], x[2] - y[2]
    return (1024 + r_sum) * dr * dr + 2048 * dg * dg + (1534 - r_sum) * db * db


# Palette entries that are pure greys: the greyscale ramp plus the cube's diagonal.
_GREY_ENTRIES = sorted(
    [(_palette_rgb(i)[0], i) for i in range(232, 256)]
    + [(level, 16 + 43 * k) for k, level in enumerate(_CUBE_LEVELS)]
)


def ansi256_from_rgb(r: int, g: int, b: int) -> int:
    """Closest entry (16-255) of the 256-colour palette to an RGB colour."""
    rgb = (r, g, b)
    luma = _luminance(r, g, b)
    grey_index = min(_GREY_ENTRIES, key=lambda entry: abs(entry[0] - luma))[1]
    grey_distance = _distance(rgb, _palette_rgb(grey_index))
    cube = 16 + 36 * _cube_index(r) + 6 * _cube_index(g) + _cube_index(b)
    return cube if _distance(rgb, _palette_rgb(cube)) < grey_distance else grey_index


def to_ansi_color(color: RGBA, true_color: bool) -> Optional[Color]:
    """Convert a theme colour to a terminal colour; None means the terminal default."""
    if color.a == 0:
        # The red channel holds a terminal palette number.
        if color.r < 8:
            return Color(name=_BASIC_NAMES[color.r])
        return Color.fixed(color.r)
    if color.a == 1:
        return None
    if true_color:
        return Color.rgb(color.r, color.g, color.b)
    return Color.fixed(ansi256_from_rgb(color.r, color.g, color.b))