"""Color representation for terminal styling."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Optional

from tui_styles.core.constants import COLORS_16, sgr

_HEX_COLOR = re.compile(r'#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})')
_COLOR_CODE = re.compile(r'[+-]?[0-9]+')


class ColorError(ValueError):
    """Raised when a color specification cannot be parsed."""


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    STANDARD_16 = "16"      # Named colors (SGR 30-37, 40-47, 90-97, 100-107)
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


def _normalize(spec: str) -> str:
    """Validate a color specification and return its canonical form."""
    if not spec:
        raise ColorError("color cannot be empty")

    if spec.startswith('#'):
        if not _HEX_COLOR.fullmatch(spec):
            raise ColorError(f"invalid hex color: {spec}")
        spec = spec.upper()
        if len(spec) == 4:
            # #RGB -> #RRGGBB
            spec = '#' + ''.join(c * 2 for c in spec[1:])
        return spec

    if spec.lower() in COLORS_16:
        return spec.lower()

    if not _COLOR_CODE.fullmatch(spec):
        raise ColorError(
            f"invalid color: {spec} (must be hex, ANSI name, or ANSI code 0-255)"
        )
    code = int(spec)
    if not 0 <= code <= 255:
        raise ColorError(f"ANSI color code out of range (0-255): {code}")
    return str(code)


@dataclass(frozen=True)
class Color:
    """
    A validated terminal color.

    Accepts a hex string (``#RGB`` or ``#RRGGBB``), an ANSI color name
    (``red``, ``bright-blue``, ``gray``...) or a 256-color code (``"0"`` to
    ``"255"``). The stored value is always canonical: uppercase six-digit
    hex, lowercase name, or a plain decimal code.

    Raises ColorError for anything else.
    """
    value: str

    # Named colors
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    BRIGHT_BLACK: ClassVar["Color"]
    BRIGHT_RED: ClassVar["Color"]
    BRIGHT_GREEN: ClassVar["Color"]
    BRIGHT_YELLOW: ClassVar["Color"]
    BRIGHT_BLUE: ClassVar["Color"]
    BRIGHT_MAGENTA: ClassVar["Color"]
    BRIGHT_CYAN: ClassVar["Color"]
    BRIGHT_WHITE: ClassVar["Color"]

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ColorError(f"color must be a string, got {type(self.value).__name__}")
        object.__setattr__(self, "value", _normalize(self.value))

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ColorError(f"256-color index must be 0-255, got {index}")
        return cls(str(index))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ColorError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(f"#{r:02X}{g:02X}{b:02X}")

    @property
    def mode(self) -> ColorMode:
        if self.value.startswith('#'):
            return ColorMode.TRUE_COLOR
        if self.value in COLORS_16:
            return ColorMode.STANDARD_16
        return ColorMode.EXTENDED_256

    def rgb(self) -> tuple[int, int, int]:
        """Return the (r, g, b) triple of a hex color."""
        if self.mode != ColorMode.TRUE_COLOR:
            raise ColorError(f"{self.value} is not a hex color")
        n = int(self.value[1:], 16)
        return (n >> 16) & 0xFF, (n >> 8) & 0xFF, n & 0xFF

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        if self.mode == ColorMode.STANDARD_16:
            index = COLORS_16[self.value]
            if index < 8:
                return str(30 + index)
            else:
                return str(90 + index - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"38;5;{self.value}"
        else:  # TRUE_COLOR
            r, g, b = self.rgb()
            return f"38;2;{r};{g};{b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for background color."""
        if self.mode == ColorMode.STANDARD_16:
            index = COLORS_16[self.value]
            if index < 8:
                return str(40 + index)
            else:
                return str(100 + index - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"48;5;{self.value}"
        else:  # TRUE_COLOR
            r, g, b = self.rgb()
            return f"48;2;{r};{g};{b}"

    def to_ansi(self) -> str:
        """Full escape sequence selecting this color as foreground."""
        return sgr(self.to_sgr_fg())

    def to_ansi_background(self) -> str:
        """Full escape sequence selecting this color as background."""
        return sgr(self.to_sgr_bg())


@dataclass(frozen=True)
class AdaptiveColor:
    """
    A pair of colors chosen between at render time.

    ``light`` is used on light terminal backgrounds, ``dark`` everywhere
    else, including when the background cannot be detected. Either side may
    be given as a color specification string; it is parsed on construction
    and ColorError names the side that failed.
    """
    light: Color
    dark: Color

    def __post_init__(self) -> None:
        for side in ("light", "dark"):
            value = getattr(self, side)
            if isinstance(value, str):
                try:
                    value = Color(value)
                except ColorError as e:
                    raise ColorError(f"invalid {side} color: {e}") from e
            elif not isinstance(value, Color):
                raise ColorError(f"invalid {side} color: expected Color or str, got {type(value).__name__}")
            object.__setattr__(self, side, value)

    @classmethod
    def parse(cls, light: str, dark: str) -> "AdaptiveColor":
        """Build an AdaptiveColor from two color specifications."""
        return cls(light, dark)

    def to_color(self, is_light: Optional[Callable[[], bool]] = None) -> Color:
        """Resolve against ``is_light`` (defaults to the environment heuristic)."""
        if is_light is None:
            from tui_styles.env import is_light_terminal
            is_light = is_light_terminal
        return self.light if is_light() else self.dark


ColorLike = Color | AdaptiveColor


def resolve(color: ColorLike, is_light: Optional[Callable[[], bool]] = None) -> Color:
    """Return a concrete Color, resolving adaptive colors."""
    if isinstance(color, AdaptiveColor):
        return color.to_color(is_light)
    return color


def coerce(color: ColorLike | str) -> ColorLike:
    """Accept a Color, AdaptiveColor, or a color specification string."""
    if isinstance(color, (Color, AdaptiveColor)):
        return color
    return Color(color)


# Initialize class-level color constants
Color.BLACK = Color("black")
Color.RED = Color("red")
Color.GREEN = Color("green")
Color.YELLOW = Color("yellow")
Color.BLUE = Color("blue")
Color.MAGENTA = Color("magenta")
Color.CYAN = Color("cyan")
Color.WHITE = Color("white")
Color.BRIGHT_BLACK = Color("bright-black")
Color.BRIGHT_RED = Color("bright-red")
Color.BRIGHT_GREEN = Color("bright-green")
Color.BRIGHT_YELLOW = Color("bright-yellow")
Color.BRIGHT_BLUE = Color("bright-blue")
Color.BRIGHT_MAGENTA = Color("bright-magenta")
Color.BRIGHT_CYAN = Color("bright-cyan")
Color.BRIGHT_WHITE = Color("bright-white")
