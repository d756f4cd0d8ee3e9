"""Unit tests for models/focus/ui.py.

Tests time formatting, TimerDisplay screens for each run state,
footer hints, LiveView wiring and the exit summary.
"""

from __future__ import annotations

from datetime import timedelta
from io import StringIO
from unittest.mock import MagicMock

import pytest
from rich.console import Console
from rich.layout import Layout
from rich.panel import Panel

from pomodoro_tui.models.focus.engine import InputEvent, RunState, SessionEngine
from pomodoro_tui.models.focus.ui import (
    LiveView,
    TimerDisplay,
    format_time_left,
    show_summary,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _string_console() -> tuple[Console, StringIO]:
    """Return a Console that writes to a StringIO buffer."""
    buf = StringIO()
    con = Console(file=buf, force_terminal=False, no_color=True, width=80, height=20)
    return con, buf


def _render(engine: SessionEngine, show_hints: bool = True) -> str:
    con, buf = _string_console()
    con.print(TimerDisplay(show_hints=show_hints).create_layout(engine.snapshot()))
    return buf.getvalue()


# ---------------------------------------------------------------------------
# format_time_left
# ---------------------------------------------------------------------------


class TestFormatTimeLeft:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (timedelta(0), "0s 000ms"),
            (timedelta(seconds=4, milliseconds=20), "4s 020ms"),
            (timedelta(minutes=1, seconds=5), "1m 05s 000ms"),
            (timedelta(minutes=25), "25m 00s 000ms"),
            (timedelta(hours=1, minutes=2, seconds=3, milliseconds=4), "1h 02m 03s 004ms"),
        ],
    )
    def test_formats(self, value, expected):
        assert format_time_left(value) == expected

    def test_sub_millisecond_truncated(self):
        assert format_time_left(timedelta(microseconds=1999)) == "0s 001ms"


# ---------------------------------------------------------------------------
# TimerDisplay
# ---------------------------------------------------------------------------


class TestSelectionScreen:
    def test_returns_layout_with_titled_panel(self, engine):
        layout = TimerDisplay().create_layout(engine.snapshot())

        assert isinstance(layout, Layout)
        panel = layout["body"].renderable
        assert isinstance(panel, Panel)
        assert panel.title == "Pomodoro"

    def test_lists_presets_with_highlight(self, engine):
        out = _render(engine)

        assert "Select Pomodoro session" in out
        assert "> 25min/5min" in out
        assert "5s/3s" in out
        assert "> 5s/3s" not in out

    def test_highlight_follows_selection(self, engine):
        engine.handle_event(InputEvent.MOVE_DOWN)

        out = _render(engine)

        assert "> 5s/3s" in out
        assert "> 25min/5min" not in out

    def test_completed_count_hidden_until_first_session(self, engine):
        assert "Session completed" not in _render(engine)

    def test_completed_count_shown(self, engine):
        engine.handle_event(InputEvent.MOVE_DOWN)
        engine.handle_event(InputEvent.CONFIRM)
        engine.advance(timedelta(seconds=5))
        engine.advance(timedelta(seconds=3))
        engine.advance(timedelta(seconds=3))
        engine.advance(timedelta(0))

        assert "Session completed: 1" in _render(engine)

    def test_selection_hints(self, engine):
        assert "enter start" in _render(engine)

    def test_hints_can_be_hidden(self, engine):
        assert "enter start" not in _render(engine, show_hints=False)


class TestTimerScreen:
    def test_running_shows_tomato_and_time(self, engine):
        engine.handle_event(InputEvent.CONFIRM)
        engine.advance(timedelta(seconds=1))

        out = _render(engine)

        assert "🍅 24m 59s 000ms" in out
        assert "Session" in out
        assert "p pause" in out

    def test_paused_shows_paused_message(self, engine):
        engine.handle_event(InputEvent.CONFIRM)
        engine.handle_event(InputEvent.TOGGLE_PAUSE)

        out = _render(engine)

        assert "Paused the timer: 25m 00s 000ms" in out
        assert "p resume" in out

    def test_ending_soon_notice_for_work(self, engine):
        engine.handle_event(InputEvent.MOVE_DOWN)
        engine.handle_event(InputEvent.CONFIRM)

        assert "Session ending in..." in _render(engine)

    def test_no_ending_notice_with_time_left(self, engine):
        engine.handle_event(InputEvent.CONFIRM)

        assert "ending in" not in _render(engine)

    def test_break_phase_label(self, engine):
        engine.handle_event(InputEvent.MOVE_DOWN)
        engine.handle_event(InputEvent.CONFIRM)
        engine.advance(timedelta(seconds=5))
        engine.advance(timedelta(0))

        out = _render(engine)

        assert "Break ending in..." in out
        assert "3s 000ms" in out


# ---------------------------------------------------------------------------
# LiveView
# ---------------------------------------------------------------------------


class TestLiveView:
    def test_render_updates_live(self, mocker, engine):
        live = MagicMock()
        mocker.patch("pomodoro_tui.models.focus.ui.Live", return_value=live)
        display = MagicMock()
        view = LiveView(console=MagicMock(), display=display)

        snap = engine.snapshot()
        view.render(snap)

        display.create_layout.assert_called_once_with(snap)
        live.update.assert_called_once_with(
            display.create_layout.return_value, refresh=True
        )

    def test_context_manager_starts_and_stops(self, mocker):
        live = MagicMock()
        live_cls = mocker.patch("pomodoro_tui.models.focus.ui.Live", return_value=live)
        console = MagicMock()

        with LiveView(console=console, screen=False) as view:
            assert isinstance(view, LiveView)
            live.start.assert_called_once()

        live.stop.assert_called_once()
        live_cls.assert_called_once_with(
            console=console, screen=False, auto_refresh=False
        )

def test_show_summary():
    con, buf = _string_console()

    show_summary(3, con)

    assert "Completed sessions: 3" in buf.getvalue()


def test_run_state_values_are_distinct():
    assert len({s.value for s in RunState}) == 3
