"""Input vocabulary, key maps and terminal input decoding."""

from ansi_grid.input.events import (
    Action,
    ActionKind,
    Event,
    FocusEvent,
    Key,
    KeyEvent,
    ModKeys,
    MouseButton,
    MouseEvent,
    MouseInput,
    MouseKind,
    ResizeEvent,
)
from ansi_grid.input.keymap import KeyBinding, KeyMap
from ansi_grid.input.reader import EventSource, InputReader, TerminalEvents

__all__ = [
    "Action",
    "ActionKind",
    "Event",
    "FocusEvent",
    "Key",
    "KeyEvent",
    "ModKeys",
    "MouseButton",
    "MouseEvent",
    "MouseInput",
    "MouseKind",
    "ResizeEvent",
    "KeyBinding",
    "KeyMap",
    "EventSource",
    "InputReader",
    "TerminalEvents",
]
