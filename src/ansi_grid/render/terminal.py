"""Low-level terminal operations - output sink and terminal mode management."""

from __future__ import annotations

import logging
import os
import sys
from contextlib import ExitStack, contextmanager
from typing import Iterator, Optional, Protocol, TextIO

from ansi_grid.core.geometry import Dim
from ansi_grid.text.style import TextStyle

logger = logging.getLogger(__name__)


class OutputSink(Protocol):
    """Where a rendered frame goes."""

    def clear(self) -> None:
        """Clear the whole screen."""
        ...

    def move_to(self, col: int, row: int) -> None:
        """Move the cursor to a cell (0-indexed)."""
        ...

    def set_style(self, style: TextStyle) -> None:
        """Set the style of following writes."""
        ...

    def write(self, text: str) -> None:
        """Write text at the cursor."""
        ...

    def flush(self) -> None:
        """Send queued output."""
        ...


class TerminalSink:
    """
    Output sink writing ANSI escape sequences to a text stream.

    Output is queued and sent on flush(). SGR codes are only emitted
    when the style changes.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._queue: list[str] = []
        self._style: Optional[TextStyle] = None

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def clear(self) -> None:
        self._queue.append('\x1b[2J')

    def move_to(self, col: int, row: int) -> None:
        self._queue.append(f'\x1b[{row + 1};{col + 1}H')

    def set_style(self, style: TextStyle) -> None:
        sgr = style.sgr(self._style)
        if sgr:
            self._queue.append(sgr)
        self._style = style

    def write(self, text: str) -> None:
        self._queue.append(text)

    def flush(self) -> None:
        if self._queue:
            self.stream.write(''.join(self._queue))
            self._queue.clear()
        self.stream.flush()

    def reset(self) -> None:
        """Forget the current style (the next set_style resets attributes)."""
        self._style = None


class Terminal:
    """Terminal mode management."""

    @staticmethod
    def size() -> Dim:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return Dim(size.columns, size.lines)
        except OSError:
            return Dim(80, 24)

    @staticmethod
    def write(text: str, stream: Optional[TextIO] = None) -> None:
        """Write text to the terminal immediately."""
        stream = stream or sys.stdout
        stream.write(text)
        stream.flush()

    @staticmethod
    def set_title(title: str, stream: Optional[TextIO] = None) -> None:
        """Set the terminal window title."""
        Terminal.write(f'\x1b]0;{title}\x07', stream)

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows or no termios - just yield
            yield
            return
        fd = sys.stdin.fileno()
        try:
            old_settings = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as err:
            # termios.error is not an OSError subclass
            raise OSError(*err.args) from err
        try:
            yield
        finally:
            try:
                termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
            except termios.error as err:
                raise OSError(*err.args) from err

    @staticmethod
    @contextmanager
    def alternate_screen(stream: Optional[TextIO] = None) -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        Terminal.write('\x1b[?1049h', stream)
        try:
            yield
        finally:
            Terminal.write('\x1b[?1049l', stream)

    @staticmethod
    @contextmanager
    def mouse_capture(stream: Optional[TextIO] = None) -> Iterator[None]:
        """Report mouse presses, drags and motion in SGR (1006) encoding."""
        Terminal.write('\x1b[?1000h\x1b[?1003h\x1b[?1006h', stream)
        try:
            yield
        finally:
            Terminal.write('\x1b[?1006l\x1b[?1003l\x1b[?1000l', stream)

    @staticmethod
    @contextmanager
    def managed_mode(
        alternate_screen: bool = True,
        mouse_capture: bool = True,
        stream: Optional[TextIO] = None,
    ) -> Iterator[None]:
        """
        Full TUI mode: alternate screen, hidden cursor, no line wrap,
        raw input and mouse capture.

        Everything is restored on exit, including exit by exception.
        """
        with ExitStack() as stack:
            if alternate_screen:
                stack.enter_context(Terminal.alternate_screen(stream))
            Terminal.write('\x1b[?25l\x1b[?7l\x1b[2J', stream)
            stack.callback(Terminal.write, '\x1b[0m\x1b[?7h\x1b[?25h', stream)
            stack.enter_context(Terminal.raw_mode())
            if mouse_capture:
                stack.enter_context(Terminal.mouse_capture(stream))
            logger.debug("Entered managed terminal mode")
            yield
        logger.debug("Restored terminal mode")
