"""Custom exceptions for the focus timer."""


class FocusTimerError(Exception):
    """Base exception for all focus timer errors."""


class TerminalError(FocusTimerError):
    """Raised when the terminal cannot be prepared for key input."""
