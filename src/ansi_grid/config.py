"""Screen configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from ansi_grid.text.theme import Theme

ENV_TITLE = "ANSI_GRID_TITLE"
ENV_NO_MOUSE = "ANSI_GRID_NO_MOUSE"
ENV_THEME = "ANSI_GRID_THEME"

_TRUE = {"1", "true", "yes", "on"}


@dataclass
class ScreenConfig:
    """
    Settings for a Screen.

    Attributes:
        title: Terminal window title (None leaves it alone)
        alternate_screen: Draw on the alternate screen buffer
        mouse_capture: Enable mouse reporting
        poll_timeout: Seconds each blocking input poll waits
        poll_interval: Seconds the async loop sleeps between polls
        theme: Style theme
    """
    title: Optional[str] = None
    alternate_screen: bool = True
    mouse_capture: bool = True
    poll_timeout: float = 0.1
    poll_interval: float = 0.01
    theme: Theme = field(default_factory=Theme)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ScreenConfig:
        """
        Build a config from environment variables.

        ANSI_GRID_TITLE sets the title, ANSI_GRID_NO_MOUSE disables mouse
        capture, and ANSI_GRID_THEME names a JSON theme file.
        """
        env = os.environ if environ is None else environ
        config = cls()
        if title := env.get(ENV_TITLE):
            config.title = title
        if env.get(ENV_NO_MOUSE, "").strip().lower() in _TRUE:
            config.mouse_capture = False
        if theme_path := env.get(ENV_THEME):
            config.theme = Theme.load(Path(theme_path).expanduser())
        return config
