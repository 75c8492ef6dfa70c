"""Text styles - colors plus appearance attributes."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ansi_grid.text.color import Color


class Weight(Enum):
    """
    Font weight.

    Some terminals treat this as intensity, altering the color rather than
    the font weight.
    """
    NORMAL = "normal"
    BOLD = "bold"
    THIN = "thin"   # faint / dim


_WEIGHT_SGR = {Weight.NORMAL: "22", Weight.BOLD: "1", Weight.THIN: "2"}

# (attribute, SGR on, SGR off)
_FLAGS = (
    ("italic", "3", "23"),
    ("underline", "4", "24"),
    ("strikethrough", "9", "29"),
    ("reverse", "7", "27"),
)


@dataclass(frozen=True)
class TextStyle:
    """Colors and appearance for a run of text."""
    background: Color = Color.BLACK
    foreground: Color = Color.BRIGHT_WHITE
    weight: Weight = Weight.NORMAL
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    reverse: bool = False

    def with_background(self, color: Color) -> TextStyle:
        return replace(self, background=color)

    def with_foreground(self, color: Color) -> TextStyle:
        return replace(self, foreground=color)

    def with_weight(self, weight: Weight) -> TextStyle:
        return replace(self, weight=weight)

    def with_italic(self, enable: bool = True) -> TextStyle:
        return replace(self, italic=enable)

    def with_underline(self, enable: bool = True) -> TextStyle:
        return replace(self, underline=enable)

    def with_strikethrough(self, enable: bool = True) -> TextStyle:
        return replace(self, strikethrough=enable)

    def with_reverse(self, enable: bool = True) -> TextStyle:
        return replace(self, reverse=enable)

    def sgr(self, before: Optional[TextStyle] = None) -> str:
        """
        Get the SGR sequence switching from `before` to this style.

        Only changed attributes are emitted; with no previous style the
        attributes are reset first. Returns "" when nothing changed.
        """
        parts: list[str] = []
        if before is None:
            parts.append("0")
            before = TextStyle(background=Color.DEFAULT, foreground=Color.DEFAULT)
            if self.weight != Weight.NORMAL:
                parts.append(_WEIGHT_SGR[self.weight])
        elif self.weight != before.weight:
            if before.weight != Weight.NORMAL:
                parts.append(_WEIGHT_SGR[Weight.NORMAL])
            if self.weight != Weight.NORMAL:
                parts.append(_WEIGHT_SGR[self.weight])
        for name, on, off in _FLAGS:
            enabled = getattr(self, name)
            if enabled != getattr(before, name):
                parts.append(on if enabled else off)
        if self.foreground != before.foreground:
            parts.append(self.foreground.to_sgr_fg())
        if self.background != before.background:
            parts.append(self.background.to_sgr_bg())
        if not parts:
            return ""
        return f"\x1b[{';'.join(parts)}m"
