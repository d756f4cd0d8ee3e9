"""Fixed-rate event/tick loop driving the session engine."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional, Protocol

from .engine import EngineSnapshot, SessionEngine
from .keymap import decode_key

logger = logging.getLogger(__name__)

# Poll-wait bound and per-cycle elapsed time. advance() assumes exactly this
# much time passes per cycle, so both must come from this one constant.
TICK_PERIOD = timedelta(seconds=1 / 50)


class EventSource(Protocol):
    def poll(self, timeout: timedelta) -> Optional[str]: ...


class View(Protocol):
    def render(self, snapshot: EngineSnapshot) -> None: ...


def run_loop(
    engine: SessionEngine,
    view: View,
    events: EventSource,
    tick: timedelta = TICK_PERIOD,
) -> int:
    """
    Run the timer until a quit is requested.

    Each cycle renders the previous state, waits up to one tick for a key,
    dispatches it, then advances the countdown unless paused.

    Returns the number of completed sessions.
    """
    logger.debug("loop started (tick=%.3fs)", tick.total_seconds())
    while True:
        view.render(engine.snapshot())

        event = decode_key(events.poll(tick))
        if event is not None:
            engine.handle_event(event)

        if not engine.is_paused:
            engine.advance(tick)

        if engine.exit_requested:
            break

    logger.debug("loop stopped")
    return engine.completed_sessions
