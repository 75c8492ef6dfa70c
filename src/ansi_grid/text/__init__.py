"""Text styles, themes and border outlines."""

from ansi_grid.text.color import Color, ColorMode
from ansi_grid.text.outline import Border, Glyphs, LineStyle
from ansi_grid.text.style import TextStyle, Weight
from ansi_grid.text.theme import StyleGroup, Theme

__all__ = [
    "Color",
    "ColorMode",
    "Border",
    "Glyphs",
    "LineStyle",
    "TextStyle",
    "Weight",
    "StyleGroup",
    "Theme",
]
