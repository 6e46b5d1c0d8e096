"""Shared test fixtures and configuration.

Provides a controllable monotonic clock, scripted keyboard input, and
isolation of platformdirs paths so tests never touch real user files.
"""

from __future__ import annotations

from collections import deque
from unittest.mock import patch

import pytest


class FakeClock:
    """Callable stand-in for time.monotonic that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedKeys:
    """Key source that replays a fixed script.

    Each poll consumes one entry (a key name or None). Polls that return
    None advance the fake clock by the poll timeout, like a real wait would.
    """

    def __init__(self, clock: FakeClock, keys=()):
        self.clock = clock
        self.keys = deque(keys)
        self.timeouts: list[float] = []

    def poll(self, timeout: float):
        self.timeouts.append(timeout)
        key = self.keys.popleft() if self.keys else None
        if key is None:
            self.clock.advance(timeout)
        return key

    def stop(self):
        pass


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def scripted_keys(fake_clock):
    """Factory fixture: ``scripted_keys(["j", None, "q"])``."""

    def _make(keys=()):
        return ScriptedKeys(fake_clock, keys)

    return _make


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_user_dirs(tmp_path):
    """Point config and log directories at *tmp_path* and reset singletons."""
    import logging

    import countdown_cli.config as config_mod
    import countdown_cli.utils.logger as logger_mod

    config_mod._config_manager = None
    logger_mod._logger = None
    logging.getLogger("countdown_cli").handlers.clear()
    logging.getLogger("countdown_cli").propagate = True

    with patch(
        "countdown_cli.config.user_config_dir", return_value=str(tmp_path / "config")
    ):
        with patch(
            "countdown_cli.utils.logger.user_log_dir",
            return_value=str(tmp_path / "logs"),
        ):
            yield tmp_path

    for handler in logging.getLogger("countdown_cli").handlers:
        handler.close()
    logging.getLogger("countdown_cli").handlers.clear()
    logging.getLogger("countdown_cli").propagate = True
    logger_mod._logger = None
    config_mod._config_manager = None
