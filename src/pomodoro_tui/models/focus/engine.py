"""Session engine: the Pomodoro state machine.

The engine owns every piece of timer state. Input arrives as decoded
``InputEvent`` values through ``handle_event`` and time arrives through
``advance``; neither does any I/O. Views read an ``EngineSnapshot``.

States
------
SELECTING   Choosing a preset; ``remaining`` holds its pending work duration.
RUNNING     A work or break countdown is ticking.
PAUSED      Countdown frozen.

Transitions
-----------
SELECTING -> RUNNING/WORK       (confirm)
RUNNING  <-> PAUSED             (toggle pause)
WORK -> BREAK                   (remaining reaches zero)
BREAK -> SELECTING/IDLE         (remaining reaches zero, session counted)
Any -> SELECTING/IDLE           (reset)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum

from .presets import DEFAULT_PRESETS, DurationPreset

logger = logging.getLogger(__name__)

ZERO = timedelta(0)


class SessionPhase(Enum):
    IDLE = "idle"
    WORK = "work"
    BREAK = "break"


class RunState(Enum):
    SELECTING = "selecting"
    RUNNING = "running"
    PAUSED = "paused"


class InputEvent(Enum):
    QUIT = "quit"
    CONFIRM = "confirm"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    TOGGLE_PAUSE = "toggle_pause"
    RESET = "reset"


@dataclass
class EngineState:
    """Mutable timer state, owned by a single SessionEngine."""

    remaining: timedelta
    break_duration_cache: timedelta
    run_state: RunState = RunState.SELECTING
    phase: SessionPhase = SessionPhase.IDLE
    selected_index: int = 0
    completed_sessions: int = 0
    exit_requested: bool = False


@dataclass(frozen=True)
class EngineSnapshot:
    """Read-only copy of the engine state for the view layer."""

    run_state: RunState
    phase: SessionPhase
    selected_index: int
    remaining: timedelta
    break_duration_cache: timedelta
    completed_sessions: int
    exit_requested: bool
    presets: tuple[DurationPreset, ...] = field(default=())

    @property
    def selected_preset(self) -> DurationPreset:
        return self.presets[self.selected_index]


class SessionEngine:
    """Pomodoro state machine driven by input events and tick advances."""

    def __init__(self, presets: Sequence[DurationPreset] = DEFAULT_PRESETS) -> None:
        if not presets:
            raise ValueError("At least one duration preset is required")
        self._presets: tuple[DurationPreset, ...] = tuple(presets)
        first = self._presets[0]
        self._state = EngineState(
            remaining=first.work_duration,
            break_duration_cache=first.break_duration,
        )

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def presets(self) -> tuple[DurationPreset, ...]:
        return self._presets

    @property
    def run_state(self) -> RunState:
        return self._state.run_state

    @property
    def phase(self) -> SessionPhase:
        return self._state.phase

    @property
    def selected_index(self) -> int:
        return self._state.selected_index

    @property
    def remaining(self) -> timedelta:
        return self._state.remaining

    @property
    def break_duration_cache(self) -> timedelta:
        return self._state.break_duration_cache

    @property
    def completed_sessions(self) -> int:
        return self._state.completed_sessions

    @property
    def exit_requested(self) -> bool:
        return self._state.exit_requested

    @property
    def is_paused(self) -> bool:
        return self._state.run_state is RunState.PAUSED

    def snapshot(self) -> EngineSnapshot:
        """Return an immutable copy of the current state."""
        s = self._state
        return EngineSnapshot(
            run_state=s.run_state,
            phase=s.phase,
            selected_index=s.selected_index,
            remaining=s.remaining,
            break_duration_cache=s.break_duration_cache,
            completed_sessions=s.completed_sessions,
            exit_requested=s.exit_requested,
            presets=self._presets,
        )

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def handle_event(self, event: InputEvent) -> None:
        """Apply one decoded input event.

        Selection bindings are evaluated first, then the global ones
        (quit, pause, reset), so a single event may hit both.
        """
        s = self._state

        if s.run_state is RunState.SELECTING:
            if event is InputEvent.MOVE_UP:
                self._select((s.selected_index - 1) % len(self._presets))
            elif event is InputEvent.MOVE_DOWN:
                self._select((s.selected_index + 1) % len(self._presets))
            elif event is InputEvent.CONFIRM:
                s.run_state = RunState.RUNNING
                s.phase = SessionPhase.WORK
                logger.info(
                    "work phase started: %s", self._presets[s.selected_index].label
                )

        if event is InputEvent.QUIT:
            s.exit_requested = True
            logger.debug("quit requested")
        elif event is InputEvent.TOGGLE_PAUSE:
            self._toggle_pause()
        elif event is InputEvent.RESET:
            s.run_state = RunState.SELECTING
            s.phase = SessionPhase.IDLE
            self._load_pending()
            logger.info("session reset")

    def advance(self, elapsed: timedelta) -> None:
        """Advance the countdown by *elapsed*.

        A zero ``remaining`` is turned into at most one phase transition
        per call, before the decrement.
        """
        s = self._state

        if s.remaining == ZERO and s.phase is SessionPhase.WORK:
            s.phase = SessionPhase.BREAK
            s.remaining = s.break_duration_cache
            logger.info("break phase started")
        elif s.remaining == ZERO and s.phase is SessionPhase.BREAK:
            s.phase = SessionPhase.IDLE
            s.completed_sessions += 1
            s.run_state = RunState.SELECTING
            self._load_pending()
            logger.info("session completed (%d total)", s.completed_sessions)

        if s.run_state is RunState.RUNNING and s.phase is not SessionPhase.IDLE:
            s.remaining = max(ZERO, s.remaining - elapsed)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _select(self, index: int) -> None:
        self._state.selected_index = index
        self._load_pending()

    def _load_pending(self) -> None:
        preset = self._presets[self._state.selected_index]
        self._state.remaining = preset.work_duration
        self._state.break_duration_cache = preset.break_duration

    def _toggle_pause(self) -> None:
        s = self._state
        # No countdown exists while selecting
        if s.run_state is RunState.SELECTING:
            return
        if s.run_state is RunState.PAUSED:
            s.run_state = RunState.RUNNING
            logger.debug("resumed")
        else:
            s.run_state = RunState.PAUSED
            logger.debug("paused")
