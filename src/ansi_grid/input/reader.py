"""Terminal input decoding - keyboard, mouse and resize events."""

from __future__ import annotations

import logging
import os
import re
import select
import sys
import time
from typing import Callable, Optional, Protocol

from ansi_grid.core.geometry import Dim, Pos
from ansi_grid.input.events import (
    Event,
    Key,
    KeyEvent,
    ModKeys,
    MouseButton,
    MouseEvent,
    MouseInput,
    MouseKind,
    ResizeEvent,
)

logger = logging.getLogger(__name__)

# SGR (1006) mouse report, without the \x1b prefix
_SGR_MOUSE = re.compile(r'\[<(\d+);(\d+);(\d+)([Mm])')

# CSI sequence: parameters then a final byte
_CSI = re.compile(r'\[([0-9;]*)([A-Za-z~])')

_MOUSE_BUTTONS = {0: MouseButton.LEFT, 1: MouseButton.MIDDLE, 2: MouseButton.RIGHT}


def _xterm_mods(param: int) -> ModKeys:
    """Decode an xterm modifier parameter (1 + bit mask)."""
    bits = max(0, param - 1)
    mods = ModKeys.NONE
    if bits & 1:
        mods |= ModKeys.SHIFT
    if bits & (2 | 8):
        mods |= ModKeys.ALT
    if bits & 4:
        mods |= ModKeys.CTRL
    return mods


def decode_mouse(code: int, col: int, row: int, final: str) -> Optional[MouseInput]:
    """
    Decode an SGR mouse report.

    Args:
        code: Button code with modifier and motion bits
        col: 1-based column
        row: 1-based row
        final: 'M' for press/motion, 'm' for release

    Returns:
        MouseInput, or None for reports with no semantic meaning
        (e.g. horizontal wheel)
    """
    mods = ModKeys.NONE
    if code & 4:
        mods |= ModKeys.SHIFT
    if code & 8:
        mods |= ModKeys.ALT
    if code & 16:
        mods |= ModKeys.CTRL
    pos = Pos(max(0, col - 1), max(0, row - 1))
    low = code & 3

    if code & 64:
        if low == 0:
            return MouseInput(MouseEvent(MouseKind.SCROLL_UP), mods, pos)
        if low == 1:
            return MouseInput(MouseEvent(MouseKind.SCROLL_DOWN), mods, pos)
        return None

    button = _MOUSE_BUTTONS.get(low)
    if code & 32:
        return MouseInput(MouseEvent.drag(button), mods, pos)
    if button is None:
        return None
    if final == 'm':
        return MouseInput(MouseEvent.button_up(button), mods, pos)
    return MouseInput(MouseEvent.button_down(button), mods, pos)


class EventSource(Protocol):
    """Anything producing raw input events."""

    def poll(self, timeout: float) -> Optional[Event]:
        """Wait up to `timeout` seconds for one event."""
        ...


class InputReader:
    """
    Non-blocking terminal input reader.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
        # Navigation
        '[H': Key.HOME,
        '[F': Key.END,
        'OH': Key.HOME,
        'OF': Key.END,
        '[Z': Key.BACK_TAB,
        '[1~': Key.HOME,
        '[4~': Key.END,
        '[5~': Key.PAGE_UP,
        '[6~': Key.PAGE_DOWN,
        '[2~': Key.INSERT,
        '[3~': Key.DELETE,
        # Function keys
        'OP': Key.F1,
        'OQ': Key.F2,
        'OR': Key.F3,
        'OS': Key.F4,
        '[P': Key.F1,
        '[Q': Key.F2,
        '[R': Key.F3,
        '[S': Key.F4,
        '[15~': Key.F5,
        '[17~': Key.F6,
        '[18~': Key.F7,
        '[19~': Key.F8,
        '[20~': Key.F9,
        '[21~': Key.F10,
        '[23~': Key.F11,
        '[24~': Key.F12,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\t': Key.TAB,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
    }

    def __init__(self, fd: Optional[int] = None, escape_delay: float = 0.1) -> None:
        self._buffer = ""
        self._fd = fd
        self.escape_delay = escape_delay
        self._escape_deadline: Optional[float] = None

    @property
    def fd(self) -> int:
        if self._fd is None:
            self._fd = sys.stdin.fileno()
        return self._fd

    def feed(self, data: str) -> None:
        """Queue input as if it had been read from the terminal."""
        self._buffer += data

    def poll(self, timeout: float = 0.1) -> Optional[Event]:
        """
        Read a single event.

        Returns None if no input available within timeout. A lone ESC is
        held back until `escape_delay` has passed, in case the rest of
        an escape sequence follows; no single poll waits longer than
        `timeout` for it.
        """
        if not self._buffer:
            if not self._has_input(timeout):
                return None
            # Read all available input using os.read to bypass Python buffering
            self._read_available()
        if self._buffer != '\x1b':
            self._escape_deadline = None
        elif self._escape_pending(timeout):
            return None
        while self._buffer:
            event = self._process_buffer()
            if event is not None:
                return event
        return None

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        data = os.read(self.fd, 1024)
        self._buffer += data.decode('utf-8', errors='replace')

    def _escape_pending(self, timeout: float) -> bool:
        """Check whether a buffered lone ESC may still start a sequence."""
        now = time.monotonic()
        if self._escape_deadline is None:
            self._escape_deadline = now + self.escape_delay
        remaining = self._escape_deadline - now
        if remaining > 0 and self._has_input(min(remaining, timeout)):
            self._read_available()
        if self._buffer != '\x1b' or time.monotonic() >= self._escape_deadline:
            self._escape_deadline = None
            return False
        return True

    def _process_buffer(self) -> Optional[Event]:
        """Process buffered input and return the next event."""
        ch = self._buffer[0]

        if ch in self.SIMPLE_KEYS:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=self.SIMPLE_KEYS[ch], raw=ch)

        if ch == '\x1b':
            return self._parse_escape_sequence()

        self._buffer = self._buffer[1:]

        # Ctrl+letter
        if '\x01' <= ch <= '\x1a':
            return KeyEvent(char=chr(ord(ch) + 96), raw=ch, mods=ModKeys.CTRL)

        if ch.isprintable():
            return KeyEvent(char=ch, raw=ch)

        # Unknown control character - skip it
        logger.debug("Dropping control character %r", ch)
        return None

    def _parse_escape_sequence(self) -> Optional[Event]:
        """Parse an escape sequence from the buffer (starts with \\x1b)."""
        rest = self._buffer[1:]

        if not rest or rest[0] == '\x1b':
            # Just escape, no sequence
            self._buffer = rest
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        match = _SGR_MOUSE.match(rest)
        if match:
            self._buffer = rest[match.end():]
            code, col, row = (int(match.group(i)) for i in (1, 2, 3))
            return decode_mouse(code, col, row, match.group(4))

        if rest[0] == '[':
            match = _CSI.match(rest)
            if match is None:
                # Incomplete or malformed; drop the introducer
                self._buffer = rest[1:]
                return KeyEvent(raw='\x1b[')
            self._buffer = rest[match.end():]
            return self._csi_key(match.group(1), match.group(2), '\x1b' + match.group(0))

        if rest[0] == 'O' and len(rest) > 1:
            seq = rest[:2]
            self._buffer = rest[2:]
            return KeyEvent(key=self.SEQUENCES.get(seq), raw='\x1b' + seq)

        # Alt+key
        ch = rest[0]
        self._buffer = rest[1:]
        if ch in self.SIMPLE_KEYS:
            return KeyEvent(key=self.SIMPLE_KEYS[ch], raw='\x1b' + ch, mods=ModKeys.ALT)
        return KeyEvent(char=ch, raw='\x1b' + ch, mods=ModKeys.ALT)

    def _csi_key(self, params: str, final: str, raw: str) -> KeyEvent:
        """Decode a CSI key sequence, with an optional modifier parameter."""
        parts = [p for p in params.split(';') if p]
        mods = ModKeys.NONE
        if len(parts) >= 2 and parts[1].isdigit():
            mods = _xterm_mods(int(parts[1]))
        if final == '~':
            seq = f'[{parts[0]}~' if parts else '[~'
        else:
            seq = f'[{final}'
        return KeyEvent(key=self.SEQUENCES.get(seq), raw=raw, mods=mods)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        ready, _, _ = select.select([self.fd], [], [], timeout)
        return bool(ready)


class TerminalEvents:
    """
    Event source for a real terminal.

    Combines keyboard/mouse input with resize detection: the terminal size
    is compared between polls and a change becomes a ResizeEvent.
    """

    def __init__(
        self,
        reader: Optional[InputReader] = None,
        size: Optional[Callable[[], Dim]] = None,
    ) -> None:
        if size is None:
            from ansi_grid.render.terminal import Terminal
            size = Terminal.size
        self._reader = reader or InputReader()
        self._size = size
        self._dim = size()

    def poll(self, timeout: float) -> Optional[Event]:
        dim = self._size()
        if dim != self._dim:
            logger.debug("Terminal resized from %s to %s", self._dim, dim)
            self._dim = dim
            return ResizeEvent(dim)
        return self._reader.poll(timeout)
