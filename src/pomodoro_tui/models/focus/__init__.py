"""Focus mode - Pomodoro session engine and its terminal front end."""

from .engine import (
    EngineSnapshot,
    EngineState,
    InputEvent,
    RunState,
    SessionEngine,
    SessionPhase,
)
from .exceptions import FocusTimerError, TerminalError
from .keyboard import KeyboardHandler, WindowsKeyboardHandler, create_keyboard_handler
from .keymap import KEY_BINDINGS, decode_key
from .loop import TICK_PERIOD, run_loop
from .presets import DEFAULT_PRESETS, DurationPreset
from .ui import LiveView, TimerDisplay, format_time_left, show_summary

__all__ = [
    "DEFAULT_PRESETS",
    "DurationPreset",
    "EngineSnapshot",
    "EngineState",
    "FocusTimerError",
    "InputEvent",
    "KEY_BINDINGS",
    "KeyboardHandler",
    "LiveView",
    "RunState",
    "SessionEngine",
    "SessionPhase",
    "TICK_PERIOD",
    "TerminalError",
    "TimerDisplay",
    "WindowsKeyboardHandler",
    "create_keyboard_handler",
    "decode_key",
    "format_time_left",
    "run_loop",
    "show_summary",
]
