"""Shared test doubles: recording output sink, scripted event source, fixed-bound widget."""

from typing import Iterable, Optional

import pytest

from ansi_grid.core.bounds import AreaBound
from ansi_grid.core.geometry import Dim, Pos
from ansi_grid.input.events import Action, Event, FocusEvent, ModKeys, MouseEvent
from ansi_grid.render.cells import Cells
from ansi_grid.text.outline import Border
from ansi_grid.text.style import TextStyle
from ansi_grid.widget.base import BaseWidget


class RecordingSink:
    """Output sink keeping every call, for assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.text: list[str] = []
        self.flushes = 0
        self.fail_with: Optional[OSError] = None

    def clear(self) -> None:
        self.calls.append(("clear",))

    def move_to(self, col: int, row: int) -> None:
        self.calls.append(("move_to", col, row))

    def set_style(self, style: TextStyle) -> None:
        self.calls.append(("set_style", style))

    def write(self, text: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.calls.append(("write", text))
        self.text.append(text)

    def flush(self) -> None:
        self.flushes += 1


class ScriptedEvents:
    """Event source replaying a fixed script; None entries are empty polls."""

    def __init__(self, events: Iterable[Optional[Event]] = ()) -> None:
        self.events = list(events)
        self.timeouts: list[float] = []
        self.fail_with: Optional[OSError] = None

    def push(self, *events: Optional[Event]) -> None:
        self.events.extend(events)

    def poll(self, timeout: float) -> Optional[Event]:
        self.timeouts.append(timeout)
        if self.fail_with is not None:
            raise self.fail_with
        if not self.events:
            raise AssertionError("Event script exhausted")
        return self.events.pop(0)


class FixedWidget(BaseWidget):
    """Widget with given bounds that records every interaction."""

    def __init__(
        self,
        bounds: Optional[AreaBound] = None,
        fill: str = "#",
        border: Optional[Border] = None,
        mouse_action: Optional[Action] = None,
        focus_action: Optional[Action] = None,
    ) -> None:
        self._bounds = bounds or AreaBound()
        self._fill = fill
        self._border = border
        self.mouse_action = mouse_action
        self.focus_action = focus_action
        self.focus_events: list[FocusEvent] = []
        self.mouse_events: list[tuple[MouseEvent, ModKeys, Dim, Pos]] = []
        self.rendered: list[Cells] = []

    def bounds(self) -> AreaBound:
        return self._bounds

    def border(self) -> Optional[Border]:
        return self._border

    def render(self, cells: Cells) -> None:
        self.rendered.append(cells)
        cells.fill(self._fill)

    def focus(self, event: FocusEvent) -> Optional[Action]:
        self.focus_events.append(event)
        return self.focus_action

    def mouse_event(self, event: MouseEvent, mods: ModKeys, dim: Dim, pos: Pos) -> Optional[Action]:
        self.mouse_events.append((event, mods, dim, pos))
        return self.mouse_action


def fixed(columns: tuple[int, Optional[int]] = (0, None), rows: tuple[int, Optional[int]] = (0, None), **kwargs) -> FixedWidget:
    """Build a FixedWidget from (min, max) pairs."""
    return FixedWidget(AreaBound().with_columns(*columns).with_rows(*rows), **kwargs)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def events() -> ScriptedEvents:
    return ScriptedEvents()
