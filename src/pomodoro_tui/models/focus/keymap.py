"""Key bindings: decoded key names to engine input events."""

from .engine import InputEvent

KEY_BINDINGS: dict[str, InputEvent] = {
    "q": InputEvent.QUIT,
    "ctrl+c": InputEvent.QUIT,
    "enter": InputEvent.CONFIRM,
    "e": InputEvent.CONFIRM,
    "up": InputEvent.MOVE_UP,
    "k": InputEvent.MOVE_UP,
    "down": InputEvent.MOVE_DOWN,
    "j": InputEvent.MOVE_DOWN,
    "p": InputEvent.TOGGLE_PAUSE,
    "esc": InputEvent.RESET,
}


def decode_key(key: str | None) -> InputEvent | None:
    """Map a key name to an InputEvent, or None for unbound keys."""
    if key is None:
        return None
    return KEY_BINDINGS.get(key)
