"""Terminal colors."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

_NAMES = (
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
)


class ColorMode(Enum):
    """How a color is encoded in SGR sequences."""
    DEFAULT = "default"     # Terminal default (SGR 39 / 49)
    STANDARD_16 = "16"      # SGR 30-37, 90-97 / 40-47, 100-107
    EXTENDED_256 = "256"    # SGR 38;5;n / 48;5;n
    TRUE_COLOR = "rgb"      # SGR 38;2;r;g;b / 48;2;r;g;b


@dataclass(frozen=True)
class Color:
    """A foreground or background text color."""
    mode: ColorMode
    value: Union[int, tuple[int, int, int]] = 0

    DEFAULT: ClassVar["Color"]
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

    @classmethod
    def standard(cls, index: int) -> Color:
        """Create one of the 16 standard colors (8-15 are bright)."""
        if not 0 <= index <= 15:
            raise ValueError(f"Standard color index must be 0-15, got {index}")
        return cls(ColorMode.STANDARD_16, index)

    @classmethod
    def from_256(cls, index: int) -> Color:
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED_256, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    @classmethod
    def parse(cls, text: Union[str, int]) -> Color:
        """
        Parse a color from theme data.

        Accepts:
            - "default"
            - Named colors: "red", "bright_cyan", "bright-white", ...
            - Hex colors: "#FF00FF", "#F0F"
            - 256-color indexes: 208 or "208"
        """
        if isinstance(text, int):
            return cls.from_256(text)
        name = text.strip().lower().replace("-", "_").replace(" ", "_")
        if name == "default":
            return cls.DEFAULT
        bright = name.startswith("bright_")
        base = name[len("bright_"):] if bright else name
        if base in _NAMES:
            return cls.standard(_NAMES.index(base) + (8 if bright else 0))
        if name.isdigit():
            return cls.from_256(int(name))
        match = re.fullmatch(r"#([0-9a-f]{3}|[0-9a-f]{6})", name)
        if match:
            digits = match.group(1)
            if len(digits) == 3:
                digits = "".join(ch * 2 for ch in digits)
            return cls.from_rgb(
                int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
            )
        raise ValueError(f"Cannot parse color: {text!r}")

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for a foreground color."""
        return self._sgr(30, 90, 38, 39)

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for a background color."""
        return self._sgr(40, 100, 48, 49)

    def _sgr(self, base: int, bright: int, extended: int, default: int) -> str:
        if self.mode == ColorMode.DEFAULT:
            return str(default)
        value = self.value
        if isinstance(value, tuple):
            r, g, b = value
            return f"{extended};2;{r};{g};{b}"
        if self.mode == ColorMode.STANDARD_16:
            if value < 8:
                return str(base + value)
            return str(bright + value - 8)
        return f"{extended};5;{value}"


Color.DEFAULT = Color(ColorMode.DEFAULT)
Color.BLACK = Color.standard(0)
Color.RED = Color.standard(1)
Color.GREEN = Color.standard(2)
Color.YELLOW = Color.standard(3)
Color.BLUE = Color.standard(4)
Color.MAGENTA = Color.standard(5)
Color.CYAN = Color.standard(6)
Color.WHITE = Color.standard(7)
Color.BRIGHT_BLACK = Color.standard(8)
Color.BRIGHT_RED = Color.standard(9)
Color.BRIGHT_GREEN = Color.standard(10)
Color.BRIGHT_YELLOW = Color.standard(11)
Color.BRIGHT_BLUE = Color.standard(12)
Color.BRIGHT_MAGENTA = Color.standard(13)
Color.BRIGHT_CYAN = Color.standard(14)
Color.BRIGHT_WHITE = Color.standard(15)
