"""Interactive demo of a grid layout."""

from __future__ import annotations

import asyncio
import logging

from ansi_grid.config import ScreenConfig
from ansi_grid.core.geometry import Edge
from ansi_grid.input.events import Action, ActionKind, Key
from ansi_grid.input.keymap import KeyMap
from ansi_grid.layout.grid import GridArea, grid_area
from ansi_grid.screen import Screen
from ansi_grid.text.outline import Border, LineStyle
from ansi_grid.widget.button import Button
from ansi_grid.widget.label import Label
from ansi_grid.widget.spacer import Spacer

logger = logging.getLogger(__name__)

DEMO_TEMPLATE = """
    [t t t t]
    [a a . c]
    [. s . c]
    [o . x c]
    [m m m m]
"""


class DemoApp:
    """
    Demo application.

    - Click OK to count presses, Cancel (or Esc / q) to quit
    - Resize the terminal to watch the layout renegotiate
    """

    def __init__(self, config: ScreenConfig) -> None:
        self.config = config
        self.presses = 0
        self.status = Label(
            "Click a button, or press q to quit",
            border=Border(Edge.TOP, LineStyle.DASHED),
        )
        self.grid: GridArea = grid_area(
            DEMO_TEMPLATE,
            t=Label("ansi-grid demo", border=Border().with_accents(Edge.BOTTOM_RIGHT)),
            a=Label("This is a bit of text in a label"),
            c=Label(
                "This label has more text on the right side",
                border=Border(Edge.LEFT, LineStyle.SOLID),
            ),
            s=Spacer().with_fill('.'),
            o=Button("OK", Action.custom("ok")),
            x=Button("Cancel", Action.quit()),
            m=self.status,
        )
        self.keymap = KeyMap.default()
        self.keymap.bind(["q", "Q"], Action.quit(), label="Quit")
        self.keymap.bind(Key.ENTER, Action.custom("ok"), label="OK")

    def handle(self, action: Action) -> bool:
        """Apply an action; returns False when the demo should stop."""
        if action.is_quit:
            return False
        if action.kind == ActionKind.CUSTOM and action.name == "ok":
            self.presses += 1
            self.status.set_text(f"OK pressed {self.presses} time(s)")
        return True

    def run(self) -> None:
        """Run with blocking input waits."""
        with Screen(self.config) as screen:
            screen.set_keymap(self.keymap)
            while self.handle(screen.step(self.grid)):
                pass

    async def run_async(self) -> None:
        """Run inside an asyncio event loop."""
        with Screen(self.config) as screen:
            screen.set_keymap(self.keymap)
            while self.handle(await screen.step_async(self.grid)):
                pass


def run_demo(config: ScreenConfig, blocking: bool = False) -> None:
    """Run the demo until the user quits."""
    app = DemoApp(config)
    if blocking:
        app.run()
    else:
        asyncio.run(app.run_async())
    logger.info("Demo finished after %d OK presses", app.presses)
