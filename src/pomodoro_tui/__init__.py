"""pomodoro-tui - a terminal Pomodoro timer."""

__version__ = "0.1.0"
