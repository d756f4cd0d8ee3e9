"""Cross-platform keyboard input handler for timer controls."""

import os
import sys
import time
from datetime import timedelta
from typing import Optional

from .exceptions import TerminalError

# Escape sequences sent by arrow keys in normal and application cursor mode
_ESCAPE_SEQUENCES = {
    "\x1b[A": "up",
    "\x1bOA": "up",
    "\x1b[B": "down",
    "\x1bOB": "down",
    "\x1b[C": "right",
    "\x1bOC": "right",
    "\x1b[D": "left",
    "\x1bOD": "left",
}

# Seconds to wait for the rest of an escape sequence after a lone ESC
ESCAPE_WAIT = 0.01

_CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\x1b": "esc",
    "\x03": "ctrl+c",
}

# Second byte after a Windows extended-key prefix
_WINDOWS_EXTENDED = {
    "H": "up",
    "P": "down",
    "M": "right",
    "K": "left",
}


def split_key(data: str) -> tuple[str, str]:
    """Split the first key off buffered input, returning (key, rest).

    A key is one character or one complete escape sequence.
    """
    if not data.startswith("\x1b") or len(data) == 1:
        return data[:1], data[1:]
    if data[1] not in "[O":
        # ESC followed by an ordinary key
        return data[:1], data[1:]
    # CSI/SS3 sequences end with a byte in the @ to ~ range
    for end in range(2, len(data)):
        if "@" <= data[end] <= "~":
            return data[: end + 1], data[end + 1 :]
    return data, ""


def decode_input(data: str) -> Optional[str]:
    """Turn raw terminal input into a key name.

    Returns names like 'up', 'enter', 'esc' or a lowercase character,
    or None for empty input.
    """
    if not data:
        return None
    if data[:3] in _ESCAPE_SEQUENCES:
        # Held arrow keys can arrive as several sequences in one read
        return _ESCAPE_SEQUENCES[data[:3]]
    if data.startswith("\x1b") and len(data) > 1:
        # Unknown escape sequence (function keys etc.)
        return data
    if data[0] in _CONTROL_KEYS:
        return _CONTROL_KEYS[data[0]]
    return data[0].lower()


class KeyboardHandler:
    """Non-blocking keyboard input handler."""

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings = None
        self._pending = ""
        self._setup()

    def _setup(self):
        """Put the terminal in cbreak mode, remembering the old settings."""
        import termios
        import tty

        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error as e:
            raise TerminalError(f"Cannot read keys from this terminal: {e}") from e

    def poll(self, timeout: timedelta) -> Optional[str]:
        """
        Wait up to *timeout* for a keypress.

        Keys already buffered from an earlier read are returned first, one
        per call. Returns the decoded key name or None if nothing was pressed.
        """
        if not self._pending and not self._read(timeout.total_seconds()):
            return None

        if self._pending == "\x1b":
            # A lone ESC may be the first byte of an arrow key
            self._read(ESCAPE_WAIT)

        key, self._pending = split_key(self._pending)
        return decode_input(key)

    def _read(self, timeout: float) -> bool:
        """Append whatever input arrives within *timeout* to the buffer."""
        import select

        try:
            ready = select.select([self.fd], [], [], timeout)[0]
        except InterruptedError:
            # Signal (e.g. window resize) arrived during the wait
            return False
        if not ready:
            return False
        self._pending += os.read(self.fd, 64).decode("utf-8", errors="ignore")
        return bool(self._pending)

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            import termios

            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None


class WindowsKeyboardHandler:
    """Keyboard handler for Windows using msvcrt."""

    _POLL_INTERVAL = 0.005

    def __init__(self):
        try:
            import msvcrt
        except ImportError as e:
            raise TerminalError("msvcrt is not available on this platform") from e
        self.msvcrt = msvcrt

    def poll(self, timeout: timedelta) -> Optional[str]:
        """Wait up to *timeout* for a keypress on Windows."""
        deadline = time.monotonic() + timeout.total_seconds()
        while not self.msvcrt.kbhit():
            if time.monotonic() >= deadline:
                return None
            time.sleep(self._POLL_INTERVAL)

        key = self.msvcrt.getwch()
        if key in ("\x00", "\xe0"):
            return _WINDOWS_EXTENDED.get(self.msvcrt.getwch())
        return decode_input(key)

    def stop(self):
        """No cleanup needed on Windows."""
        pass


def create_keyboard_handler():
    """Return the keyboard handler for the current platform."""
    if sys.platform == "win32":
        return WindowsKeyboardHandler()
    return KeyboardHandler()
