"""Semantic input events and actions, independent of the terminal encoding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Any, Optional, Union

from ansi_grid.core.geometry import Dim, Pos


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACK_TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    INSERT = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()


class ModKeys(Flag):
    """Modifier keys held during a key press or mouse action."""
    NONE = 0
    SHIFT = auto()
    CTRL = auto()
    ALT = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press."""
    key: Optional[Key] = None   # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""               # Raw escape sequence
    mods: ModKeys = ModKeys.NONE

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None


class MouseButton(Enum):
    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()


class MouseKind(Enum):
    BUTTON_DOWN = auto()
    BUTTON_UP = auto()
    DRAG = auto()
    SCROLL_UP = auto()
    SCROLL_DOWN = auto()


@dataclass(frozen=True)
class MouseEvent:
    """
    A mouse action.

    DRAG without a button is plain pointer motion.
    """
    kind: MouseKind
    button: Optional[MouseButton] = None

    @classmethod
    def button_down(cls, button: MouseButton = MouseButton.LEFT) -> MouseEvent:
        return cls(MouseKind.BUTTON_DOWN, button)

    @classmethod
    def button_up(cls, button: MouseButton = MouseButton.LEFT) -> MouseEvent:
        return cls(MouseKind.BUTTON_UP, button)

    @classmethod
    def drag(cls, button: Optional[MouseButton] = None) -> MouseEvent:
        return cls(MouseKind.DRAG, button)

    @property
    def is_motion(self) -> bool:
        """Pointer moved with no button held."""
        return self.kind == MouseKind.DRAG and self.button is None


@dataclass(frozen=True)
class MouseInput:
    """A mouse action at an absolute screen position."""
    event: MouseEvent
    mods: ModKeys
    pos: Pos


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed size."""
    dim: Dim


Event = Union[KeyEvent, MouseInput, ResizeEvent]


class FocusEvent(Enum):
    """Focus notifications delivered to widgets during mouse dispatch."""
    OFFER = auto()          # Pointer pressed inside the widget
    TAKE = auto()           # Pointer pressed elsewhere
    HOVER_INSIDE = auto()   # Pointer moved or released inside
    HOVER_OUTSIDE = auto()  # Pointer moved or released elsewhere


class ActionKind(Enum):
    REDRAW = auto()
    RESIZE = auto()
    QUIT = auto()
    CUSTOM = auto()


@dataclass(frozen=True)
class Action:
    """
    Result of input handling, returned to the application.

    CUSTOM actions carry an application-defined name and optional payload.
    """
    kind: ActionKind
    dim: Optional[Dim] = None
    name: Optional[str] = None
    payload: Any = None

    @classmethod
    def redraw(cls) -> Action:
        return cls(ActionKind.REDRAW)

    @classmethod
    def resize(cls, dim: Dim) -> Action:
        return cls(ActionKind.RESIZE, dim=dim)

    @classmethod
    def quit(cls) -> Action:
        return cls(ActionKind.QUIT)

    @classmethod
    def custom(cls, name: str, payload: Any = None) -> Action:
        return cls(ActionKind.CUSTOM, name=name, payload=payload)

    @property
    def is_quit(self) -> bool:
        return self.kind == ActionKind.QUIT
