"""Button widget."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional

from ansi_grid.core.bounds import AreaBound
from ansi_grid.core.geometry import Dim, Pos
from ansi_grid.input.events import Action, FocusEvent, ModKeys, MouseEvent, MouseKind
from ansi_grid.render.cells import Cells
from ansi_grid.text.outline import Border, LineStyle
from ansi_grid.text.theme import StyleGroup
from ansi_grid.widget.base import BaseWidget
from ansi_grid.widget.label import Label


class ButtonState(Enum):
    DISABLED = auto()
    ENABLED = auto()
    HOVERED = auto()
    FOCUSED = auto()
    PRESSED = auto()


_STYLE_GROUPS = {
    ButtonState.DISABLED: StyleGroup.DISABLED,
    ButtonState.ENABLED: StyleGroup.ENABLED,
    ButtonState.HOVERED: StyleGroup.HOVERED,
    ButtonState.FOCUSED: StyleGroup.FOCUSED,
    ButtonState.PRESSED: StyleGroup.PRESSED,
}

# (focus event, current state) -> next state
_FOCUS_TRANSITIONS = {
    (FocusEvent.OFFER, ButtonState.ENABLED): ButtonState.FOCUSED,
    (FocusEvent.TAKE, ButtonState.FOCUSED): ButtonState.ENABLED,
    (FocusEvent.TAKE, ButtonState.HOVERED): ButtonState.ENABLED,
    (FocusEvent.TAKE, ButtonState.PRESSED): ButtonState.ENABLED,
    (FocusEvent.HOVER_INSIDE, ButtonState.ENABLED): ButtonState.HOVERED,
    (FocusEvent.HOVER_OUTSIDE, ButtonState.PRESSED): ButtonState.FOCUSED,
    (FocusEvent.HOVER_OUTSIDE, ButtonState.HOVERED): ButtonState.ENABLED,
}


class Button(BaseWidget):
    """
    A pressable button.

    Every visible state change returns Action.redraw(). Releasing the
    mouse over a pressed button returns `action` instead, if one was given.
    """

    def __init__(self, text: str, action: Optional[Action] = None) -> None:
        self._label = Label(text)
        self._action = action
        self._state = ButtonState.ENABLED

    @property
    def state(self) -> ButtonState:
        return self._state

    @property
    def text(self) -> str:
        return self._label.text

    def disable(self) -> None:
        """Disable the button."""
        self._state = ButtonState.DISABLED

    def enable(self) -> None:
        """Enable the button."""
        if self._state == ButtonState.DISABLED:
            self._state = ButtonState.ENABLED

    def bounds(self) -> AreaBound:
        return self._label.bounds()

    def border(self) -> Optional[Border]:
        if self._state == ButtonState.DISABLED:
            return Border(line_style=LineStyle.EMPTY)
        if self._state == ButtonState.PRESSED:
            return Border(line_style=LineStyle.HEAVY)
        return Border(line_style=LineStyle.SOLID)

    def style_group(self) -> StyleGroup:
        return _STYLE_GROUPS[self._state]

    def render(self, cells: Cells) -> None:
        self._label.render(cells)

    def _transition(self, state: Optional[ButtonState]) -> Optional[Action]:
        if state is None or state == self._state:
            return None
        self._state = state
        return Action.redraw()

    def focus(self, event: FocusEvent) -> Optional[Action]:
        return self._transition(_FOCUS_TRANSITIONS.get((event, self._state)))

    def mouse_event(
        self, event: MouseEvent, mods: ModKeys, dim: Dim, pos: Pos,
    ) -> Optional[Action]:
        if self._state == ButtonState.DISABLED:
            return None
        if event.kind == MouseKind.BUTTON_DOWN:
            return self._transition(ButtonState.PRESSED)
        if event.kind == MouseKind.BUTTON_UP and self._state == ButtonState.PRESSED:
            redraw = self._transition(ButtonState.FOCUSED)
            return self._action or redraw
        return None
