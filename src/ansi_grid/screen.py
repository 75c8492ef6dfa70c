"""
Screen - the render and dispatch loop.

Each step solves the grid layout, draws every widget into a clipped view
of the screen buffer, flushes the buffer, then waits for input until some
event produces an Action for the caller:

    with Screen() as screen:
        while not screen.step(grid).is_quit:
            pass

Input is waited for either by blocking (step) or cooperatively inside an
asyncio event loop (step_async). Both share one polling primitive, so the
same events always produce the same actions.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import ExitStack
from enum import Enum, auto
from typing import Optional, Sequence

from ansi_grid.config import ScreenConfig
from ansi_grid.core.canvas import ScreenBuffer
from ansi_grid.core.errors import ScreenError
from ansi_grid.core.geometry import Area, Dim, Pos
from ansi_grid.input.events import (
    Action,
    Event,
    FocusEvent,
    KeyEvent,
    ModKeys,
    MouseEvent,
    MouseInput,
    MouseKind,
    ResizeEvent,
)
from ansi_grid.input.keymap import KeyMap
from ansi_grid.input.reader import EventSource, TerminalEvents
from ansi_grid.layout.grid import GridArea
from ansi_grid.layout.solver import LayoutSolver, Placement
from ansi_grid.render.cells import Cells
from ansi_grid.render.terminal import OutputSink, Terminal, TerminalSink
from ansi_grid.text.theme import StyleGroup, Theme

logger = logging.getLogger(__name__)


class ScreenState(Enum):
    """Where the loop is within a step."""
    IDLE = auto()
    RENDERING = auto()
    AWAITING_INPUT = auto()


def focus_event(event: MouseEvent, inside: bool) -> Optional[FocusEvent]:
    """Get the focus notification a mouse action means for one widget."""
    if event.kind == MouseKind.BUTTON_DOWN:
        return FocusEvent.OFFER if inside else FocusEvent.TAKE
    if event.kind == MouseKind.DRAG:
        if not inside:
            return FocusEvent.HOVER_OUTSIDE
        return FocusEvent.HOVER_INSIDE if event.button is None else None
    if event.kind == MouseKind.BUTTON_UP:
        return FocusEvent.HOVER_INSIDE if inside else FocusEvent.HOVER_OUTSIDE
    return None


def mouse_action(
    event: MouseEvent,
    mods: ModKeys,
    pos: Pos,
    placements: Sequence[Placement],
) -> Optional[Action]:
    """
    Dispatch a mouse action to placed widgets.

    Every widget gets a focus notification, so those not under the pointer
    can give up focus. Only widgets whose area contains the pointer get the
    mouse event itself. Returns the first action from a mouse event, else
    the first action from a focus notification.
    """
    action: Optional[Action] = None
    redraw: Optional[Action] = None
    for placement in placements:
        widget, area = placement.widget, placement.area
        inside = area.within(pos)
        fev = focus_event(event, inside is not None)
        if fev is not None:
            result = widget.focus(fev)
            redraw = redraw or result
        # Only widget within bounds receives event
        if inside is not None:
            result = widget.mouse_event(event, mods, area.dim, inside)
            action = action or result
    return action or redraw


class Screen:
    """
    Terminal screen.

    With no sink or event source given, the screen drives the real
    terminal: entering the context switches the terminal to managed mode
    (raw input, alternate screen, mouse capture) and leaving it always
    restores the terminal, however the loop exits.
    """

    def __init__(
        self,
        config: Optional[ScreenConfig] = None,
        *,
        sink: Optional[OutputSink] = None,
        events: Optional[EventSource] = None,
        dim: Optional[Dim] = None,
    ) -> None:
        self.config = config or ScreenConfig()
        self._managed = sink is None and events is None
        self._sink: OutputSink = sink or TerminalSink()
        self._events: EventSource = events or TerminalEvents()
        self._dim = dim or Terminal.size()
        self._theme = self.config.theme
        self._keymap = KeyMap.default()
        self._solver = LayoutSolver()
        self._buffer = ScreenBuffer(self._dim)
        self._placements: list[Placement] = []
        self._stack: Optional[ExitStack] = None
        self.state = ScreenState.IDLE

    def __enter__(self) -> Screen:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def open(self) -> None:
        """Set up the terminal (no-op for injected sinks and sources)."""
        if self._stack is not None:
            return
        stack = ExitStack()
        if self._managed:
            try:
                stack.enter_context(Terminal.managed_mode(
                    alternate_screen=self.config.alternate_screen,
                    mouse_capture=self.config.mouse_capture,
                ))
                if self.config.title:
                    Terminal.set_title(self.config.title)
            except OSError as err:
                stack.close()
                raise ScreenError("setup", err) from err
        self._stack = stack

    def close(self) -> None:
        """Restore the terminal."""
        if self._stack is None:
            return
        stack, self._stack = self._stack, None
        self.state = ScreenState.IDLE
        try:
            stack.close()
        except OSError as err:
            raise ScreenError("cleanup", err) from err

    @property
    def dim(self) -> Dim:
        return self._dim

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def keymap(self) -> KeyMap:
        return self._keymap

    @property
    def buffer(self) -> ScreenBuffer:
        return self._buffer

    @property
    def placements(self) -> list[Placement]:
        """Widget placements of the last rendered frame."""
        return list(self._placements)

    def bbox(self) -> Area:
        """Get the screen bounding box."""
        return Area.from_dim(self._dim)

    def set_keymap(self, keymap: KeyMap) -> None:
        """Set the key / action map."""
        self._keymap = keymap

    def set_theme(self, theme: Theme) -> None:
        """Set the theme."""
        self._theme = theme

    def set_title(self, title: str) -> None:
        """Set the screen title."""
        self.config.title = title
        if self._managed and self._stack is not None:
            try:
                Terminal.set_title(title)
            except OSError as err:
                raise ScreenError("output", err) from err

    def render(self, grid: GridArea) -> list[Placement]:
        """Lay out and draw a grid, then flush it to the sink."""
        self.state = ScreenState.RENDERING
        try:
            placements = self._solver.solve(grid, self.bbox())
            self._draw(placements)
            self._placements = placements
        finally:
            self.state = ScreenState.IDLE
        return placements

    def _draw(self, placements: Sequence[Placement]) -> None:
        """Draw widgets into the buffer and flush it."""
        self._buffer.clear(self._theme.style(StyleGroup.ENABLED))
        for placement in placements:
            widget = placement.widget
            cells = Cells(self._buffer, placement.area, self._theme)
            if cells.area.is_empty:
                continue
            cells.set_style(self._theme.style(widget.style_group()))
            cells.fill()
            border = widget.border()
            if border is not None:
                cells.draw_border(border)
                cells = cells.inset(border)
            if not cells.area.is_empty:
                widget.render(cells)
        self._flush()
        logger.debug("Rendered %d widgets in %s", len(placements), self._dim)

    def _flush(self) -> None:
        """Write the whole buffer to the sink."""
        sink = self._sink
        try:
            for row, cells in enumerate(self._buffer.rows()):
                sink.move_to(0, row)
                run: list[str] = []
                style = None
                for cell in cells:
                    if cell.style != style:
                        if run:
                            sink.write(''.join(run))
                            run = []
                        sink.set_style(cell.style)
                        style = cell.style
                    run.append(cell.char)
                if run:
                    sink.write(''.join(run))
            sink.flush()
        except OSError as err:
            raise ScreenError("output", err) from err

    def event_action(self, event: Event) -> Optional[Action]:
        """Translate an input event into an action (None to keep waiting)."""
        if isinstance(event, ResizeEvent):
            self._dim = event.dim
            self._buffer.resize(event.dim)
            return Action.resize(event.dim)
        if isinstance(event, KeyEvent):
            return self._keymap.lookup(event)
        if isinstance(event, MouseInput):
            return mouse_action(event.event, event.mods, event.pos, self._placements)
        return None

    def _poll_action(self, timeout: float) -> Optional[Action]:
        """Poll the event source once and translate what arrives."""
        self.state = ScreenState.AWAITING_INPUT
        try:
            event = self._events.poll(timeout)
        except OSError as err:
            self.state = ScreenState.IDLE
            raise ScreenError("input", err) from err
        if event is None:
            return None
        action = self.event_action(event)
        if action is not None:
            self.state = ScreenState.IDLE
            logger.debug("Event %s -> %s", event, action)
        return action

    def step(self, grid: GridArea) -> Action:
        """Render a grid and block until an action."""
        self.render(grid)
        while True:
            action = self._poll_action(self.config.poll_timeout)
            if action is not None:
                return action

    async def step_async(self, grid: GridArea) -> Action:
        """Render a grid and wait for an action without blocking the event loop."""
        self.render(grid)
        while True:
            action = self._poll_action(0.0)
            if action is not None:
                return action
            await asyncio.sleep(self.config.poll_interval)
