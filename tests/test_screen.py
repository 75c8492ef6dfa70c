"""Tests for the Screen render and dispatch loop."""

import asyncio
import contextlib
import io

import pytest

from conftest import RecordingSink, ScriptedEvents, fixed

from ansi_grid.config import ScreenConfig
from ansi_grid.core.errors import ScreenError
from ansi_grid.core.geometry import Area, Dim, Pos
from ansi_grid.input.events import (
    Action,
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
from ansi_grid.input.keymap import KeyMap
from ansi_grid.layout.grid import grid_area
from ansi_grid.render.terminal import Terminal
from ansi_grid.screen import Screen, ScreenState, focus_event
from ansi_grid.text.outline import Border
from ansi_grid.text.theme import StyleGroup
from ansi_grid.widget.button import Button, ButtonState


def make_screen(sink: RecordingSink, events: ScriptedEvents, width: int = 10, height: int = 1) -> Screen:
    return Screen(ScreenConfig(poll_timeout=0.5, poll_interval=0.0), sink=sink, events=events, dim=Dim(width, height))


def click(col: int, row: int, kind: MouseKind = MouseKind.BUTTON_DOWN) -> MouseInput:
    return MouseInput(MouseEvent(kind, MouseButton.LEFT), ModKeys.NONE, Pos(col, row))


class TestFocusEvent:
    """Tests for the focus notification table."""

    @pytest.mark.parametrize("event,inside,expected", [
        (MouseEvent.button_down(), True, FocusEvent.OFFER),
        (MouseEvent.button_down(), False, FocusEvent.TAKE),
        (MouseEvent.drag(), True, FocusEvent.HOVER_INSIDE),
        (MouseEvent.drag(), False, FocusEvent.HOVER_OUTSIDE),
        (MouseEvent.drag(MouseButton.LEFT), True, None),
        (MouseEvent.drag(MouseButton.LEFT), False, FocusEvent.HOVER_OUTSIDE),
        (MouseEvent.button_up(), True, FocusEvent.HOVER_INSIDE),
        (MouseEvent.button_up(), False, FocusEvent.HOVER_OUTSIDE),
        (MouseEvent(MouseKind.SCROLL_UP), True, None),
        (MouseEvent(MouseKind.SCROLL_DOWN), False, None),
    ])
    def test_table(self, event: MouseEvent, inside: bool, expected) -> None:
        assert focus_event(event, inside) == expected


class TestRender:
    """Tests for drawing frames."""

    def test_render_flushes_frame(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        screen = make_screen(sink, events)
        placements = screen.render(grid_area("a b", a=fixed(fill="a"), b=fixed(fill="b")))
        assert [p.area for p in placements] == [Area(0, 0, 5, 1), Area(5, 0, 5, 1)]
        assert screen.buffer.text() == ["aaaaabbbbb"]
        assert sink.calls[0] == ("move_to", 0, 0)
        assert sink.text == ["aaaaabbbbb"]
        assert sink.flushes == 1
        assert screen.state == ScreenState.IDLE

    def test_border_drawn_around_view(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        widget = fixed(border=Border())
        screen = make_screen(sink, events, width=4, height=3)
        screen.render(grid_area("a", a=widget))
        assert screen.buffer.text() == ["┌──┐", "│##│", "└──┘"]
        assert widget.rendered[0].area == Area(1, 1, 2, 1)

    def test_empty_area_not_rendered(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        a = fixed(columns=(10, 10))
        b = fixed()
        screen = make_screen(sink, events, width=6)
        screen.render(grid_area("a b", a=a, b=b))
        assert len(a.rendered) == 1
        assert b.rendered == []

    def test_style_group_applied(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        button = Button("OK")
        button.disable()
        screen = make_screen(sink, events, width=6, height=3)
        screen.render(grid_area("b", b=button))
        assert screen.buffer.get(1, 1).style == screen.theme.style(StyleGroup.DISABLED)

    def test_style_changes_set_once_per_run(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        button = Button("OK")
        button.disable()
        screen = make_screen(sink, events, width=8, height=3)
        screen.render(grid_area("b .", b=button))
        styles = [call for call in sink.calls if call[0] == "set_style"]
        # One switch per row into the button and one back out of it
        assert len(styles) == 3 * 2

    def test_whole_face_in_style_group(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        button = Button("OK")
        button.disable()
        screen = make_screen(sink, events, width=8, height=3)
        screen.render(grid_area("b .", b=button))
        disabled = screen.theme.style(StyleGroup.DISABLED)
        for row in range(3):
            assert [screen.buffer.get(col, row).style == disabled for col in range(8)] == [True] * 7 + [False]

    def test_output_failure(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        sink.fail_with = OSError("broken pipe")
        screen = make_screen(sink, events)
        with pytest.raises(ScreenError) as exc_info:
            screen.render(grid_area("a", a=fixed()))
        assert exc_info.value.operation == "output"
        assert isinstance(exc_info.value.cause, OSError)


class TestStep:
    """Tests for the blocking step."""

    def test_key_action(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        events.push(None, KeyEvent(char="x"), KeyEvent(key=Key.ESCAPE))
        screen = make_screen(sink, events)
        action = screen.step(grid_area("a", a=fixed()))
        assert action.is_quit
        assert events.timeouts == [0.5, 0.5, 0.5]
        assert screen.state == ScreenState.IDLE

    def test_custom_keymap(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        keymap = KeyMap()
        keymap.bind("s", Action.custom("save"), mods=ModKeys.CTRL)
        events.push(KeyEvent(char="s", mods=ModKeys.CTRL))
        screen = make_screen(sink, events)
        screen.set_keymap(keymap)
        assert screen.step(grid_area("a", a=fixed())) == Action.custom("save")

    def test_resize(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        events.push(ResizeEvent(Dim(20, 2)))
        screen = make_screen(sink, events)
        grid = grid_area("a b", a=fixed(), b=fixed())
        assert screen.step(grid) == Action.resize(Dim(20, 2))
        assert screen.dim == Dim(20, 2)
        assert screen.bbox() == Area(0, 0, 20, 2)
        assert screen.buffer.dim == Dim(20, 2)
        placements = screen.render(grid)
        assert placements[1].area == Area(10, 0, 10, 2)

    def test_input_failure(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        events.fail_with = OSError("bad fd")
        screen = make_screen(sink, events)
        with pytest.raises(ScreenError) as exc_info:
            screen.step(grid_area("a", a=fixed()))
        assert exc_info.value.operation == "input"
        assert exc_info.value.__cause__ is events.fail_with
        assert screen.state == ScreenState.IDLE

    def test_context_manager(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        events.push(KeyEvent(key=Key.ESCAPE))
        with make_screen(sink, events) as screen:
            assert screen.step(grid_area("a", a=fixed())).is_quit
        assert screen.state == ScreenState.IDLE


class TestMouseDispatch:
    """Tests for mouse hit testing and focus notifications."""

    def test_press_goes_to_widget_under_pointer(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        a = fixed()
        b = fixed(mouse_action=Action.custom("hit"))
        events.push(click(6, 0))
        screen = make_screen(sink, events)
        assert screen.step(grid_area("a b", a=a, b=b)) == Action.custom("hit")
        assert a.focus_events == [FocusEvent.TAKE]
        assert b.focus_events == [FocusEvent.OFFER]
        assert a.mouse_events == []
        assert b.mouse_events == [(MouseEvent.button_down(), ModKeys.NONE, Dim(5, 1), Pos(1, 0))]

    def test_focus_action_when_no_mouse_action(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        a = fixed(focus_action=Action.redraw())
        b = fixed()
        screen = make_screen(sink, events)
        screen.render(grid_area("a b", a=a, b=b))
        assert screen.event_action(click(6, 0)) == Action.redraw()

    def test_mouse_action_beats_focus_action(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        a = fixed(focus_action=Action.redraw())
        b = fixed(mouse_action=Action.quit())
        screen = make_screen(sink, events)
        screen.render(grid_area("a b", a=a, b=b))
        assert screen.event_action(click(9, 0)) == Action.quit()

    def test_motion(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        a, b = fixed(), fixed()
        screen = make_screen(sink, events)
        screen.render(grid_area("a b", a=a, b=b))
        motion = MouseInput(MouseEvent.drag(), ModKeys.NONE, Pos(1, 0))
        assert screen.event_action(motion) is None
        assert a.focus_events == [FocusEvent.HOVER_INSIDE]
        assert b.focus_events == [FocusEvent.HOVER_OUTSIDE]
        assert len(a.mouse_events) == 1

    def test_scroll_has_no_focus_events(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        a = fixed()
        screen = make_screen(sink, events)
        screen.render(grid_area("a", a=a))
        screen.event_action(MouseInput(MouseEvent(MouseKind.SCROLL_DOWN), ModKeys.ALT, Pos(3, 0)))
        assert a.focus_events == []
        assert a.mouse_events == [(MouseEvent(MouseKind.SCROLL_DOWN), ModKeys.ALT, Dim(10, 1), Pos(3, 0))]

    def test_outside_every_widget(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        a = fixed(columns=(0, 3))
        screen = make_screen(sink, events)
        screen.render(grid_area("a", a=a))
        assert screen.event_action(click(8, 0)) is None
        assert a.focus_events == [FocusEvent.TAKE]
        assert a.mouse_events == []

    def test_button_click(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        button = Button("OK", Action.custom("ok"))
        events.push(click(1, 1), click(1, 1, MouseKind.BUTTON_UP))
        screen = make_screen(sink, events, width=6, height=3)
        grid = grid_area("b", b=button)
        assert screen.step(grid) == Action.redraw()
        assert button.state == ButtonState.PRESSED
        assert screen.buffer.get(1, 1).style == screen.theme.style(StyleGroup.ENABLED)
        assert screen.step(grid) == Action.custom("ok")
        assert screen.buffer.get(1, 1).style == screen.theme.style(StyleGroup.PRESSED)
        assert button.state == ButtonState.FOCUSED


class TestStepAsync:
    """Tests for the cooperative step."""

    def test_polls_without_blocking(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        events.push(None, None, KeyEvent(key=Key.ESCAPE))
        screen = make_screen(sink, events)
        action = asyncio.run(screen.step_async(grid_area("a", a=fixed())))
        assert action.is_quit
        assert events.timeouts == [0.0, 0.0, 0.0]

    def test_other_tasks_run(self, sink: RecordingSink, events: ScriptedEvents) -> None:
        events.push(None, None, None, KeyEvent(key=Key.ESCAPE))
        screen = make_screen(sink, events)
        ticks: list[int] = []

        async def ticker() -> None:
            for i in range(3):
                ticks.append(i)
                await asyncio.sleep(0)

        async def main() -> Action:
            task = asyncio.create_task(ticker())
            action = await screen.step_async(grid_area("a", a=fixed()))
            await task
            return action

        assert asyncio.run(main()).is_quit
        assert ticks == [0, 1, 2]

    def test_same_actions_as_blocking(self) -> None:
        script = [None, KeyEvent(char="x"), click(2, 0), ResizeEvent(Dim(8, 2)), KeyEvent(key=Key.ESCAPE)]

        def run(use_async: bool) -> list[Action]:
            events = ScriptedEvents(script)
            screen = make_screen(RecordingSink(), events)
            grid = grid_area("a", a=fixed(mouse_action=Action.custom("m")))
            actions: list[Action] = []
            while not actions or not actions[-1].is_quit:
                if use_async:
                    actions.append(asyncio.run(screen.step_async(grid)))
                else:
                    actions.append(screen.step(grid))
            return actions

        assert run(True) == run(False) == [
            Action.custom("m"),
            Action.resize(Dim(8, 2)),
            Action.quit(),
        ]


class TestTerminalMode:
    """Tests for entering and restoring the real terminal."""

    def test_managed_mode_restores_on_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(Terminal, "raw_mode", staticmethod(contextlib.nullcontext))
        stream = io.StringIO()
        with pytest.raises(RuntimeError):
            with Terminal.managed_mode(stream=stream):
                assert "\x1b[?1049h" in stream.getvalue()
                raise RuntimeError("boom")
        output = stream.getvalue()
        for restore in ("\x1b[?1006l", "\x1b[?25h", "\x1b[?1049l"):
            assert restore in output
        # Mouse capture ends before the alternate screen is left
        assert output.index("\x1b[?1006l") < output.index("\x1b[?1049l")

    def test_raw_mode_failure_is_os_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        termios = pytest.importorskip("termios")

        def tcgetattr(fd: int) -> list:
            raise termios.error(25, "Inappropriate ioctl for device")

        monkeypatch.setattr(termios, "tcgetattr", tcgetattr)
        monkeypatch.setattr("sys.stdin", FakeStdin())
        with pytest.raises(OSError) as exc_info:
            with Terminal.raw_mode():
                pass
        assert exc_info.value.errno == 25
        assert isinstance(exc_info.value.__cause__, termios.error)

    def test_setup_failure_raises_screen_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        termios = pytest.importorskip("termios")

        def tcgetattr(fd: int) -> list:
            raise termios.error(25, "Inappropriate ioctl for device")

        monkeypatch.setattr(termios, "tcgetattr", tcgetattr)
        monkeypatch.setattr("sys.stdin", FakeStdin())
        screen = Screen(dim=Dim(10, 2))
        with pytest.raises(ScreenError) as exc_info:
            screen.open()
        assert exc_info.value.operation == "setup"
        assert isinstance(exc_info.value.cause, OSError)
        # Modes entered before the failure are left again
        assert "\x1b[?1049l" in capsys.readouterr().out


class FakeStdin:
    """Stand-in stdin with a file descriptor but no terminal behind it."""

    def fileno(self) -> int:
        return 0
