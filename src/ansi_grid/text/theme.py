"""Style themes - an opaque lookup from style group to text style."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from enum import Enum, auto
from pathlib import Path
from typing import Any, Mapping, Union

from ansi_grid.text.color import Color
from ansi_grid.text.style import TextStyle


class StyleGroup(Enum):
    """Widget style groups."""
    ENABLED = auto()
    DISABLED = auto()
    HOVERED = auto()
    FOCUSED = auto()
    PRESSED = auto()


@dataclass(frozen=True)
class Theme:
    """
    Color theme.

    Widgets pick a StyleGroup; the theme decides what it looks like.
    Themes can be loaded from JSON, e.g.:

        {"background": "black", "secondary": "#ffaf00", "tertiary": 208}
    """
    background: Color = Color.BLACK
    foreground: Color = Color.BRIGHT_WHITE
    primary: Color = Color.BLUE
    secondary: Color = Color.BRIGHT_YELLOW
    tertiary: Color = Color.YELLOW
    dark_shadow: Color = Color.BRIGHT_BLACK
    light_shadow: Color = Color.WHITE

    def style(self, group: StyleGroup) -> TextStyle:
        """Get the text style for a style group."""
        base = TextStyle(background=self.background, foreground=self.foreground)
        if group == StyleGroup.DISABLED:
            return base.with_foreground(self.dark_shadow)
        if group == StyleGroup.HOVERED:
            return base.with_foreground(self.secondary)
        if group == StyleGroup.FOCUSED:
            return base.with_background(self.secondary).with_foreground(self.background)
        if group == StyleGroup.PRESSED:
            return base.with_background(self.tertiary).with_foreground(self.background)
        return base

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Theme:
        """
        Create a theme from a mapping of color names to color values.

        Missing colors keep their defaults.

        Raises:
            ValueError: for unknown keys or unparseable colors
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown theme colors: {', '.join(unknown)}")
        return cls(**{name: Color.parse(value) for name, value in data.items()})

    @classmethod
    def load(cls, path: Union[str, Path]) -> Theme:
        """Load a theme from a JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Theme file {path} must contain a JSON object")
        return cls.from_dict(data)
