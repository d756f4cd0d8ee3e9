"""Shared test fixtures and configuration.

Keeps tests away from the real log/config directories and provides
engines with a small, fast preset list.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from unittest.mock import patch

import pytest

from pomodoro_tui.models.focus.engine import SessionEngine
from pomodoro_tui.models.focus.presets import DurationPreset

LONG = DurationPreset(timedelta(minutes=25), timedelta(minutes=5))
DEMO = DurationPreset(timedelta(seconds=5), timedelta(seconds=3))


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Point the application logger at tmp_path and reset it between tests."""
    import pomodoro_tui.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("pomodoro_tui").handlers.clear()
    with patch("pomodoro_tui.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    logger_mod._logger = None
    logging.getLogger("pomodoro_tui").handlers.clear()


@pytest.fixture()
def presets() -> list[DurationPreset]:
    return [LONG, DEMO]


@pytest.fixture()
def engine(presets) -> SessionEngine:
    """Engine over [25m/5m, 5s/3s], freshly on the selection screen."""
    return SessionEngine(presets)
