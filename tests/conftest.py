from __future__ import annotations

from typing import Callable

import pytest

from dateonly import DateTime, Env, Log, TimeZone


@pytest.fixture(autouse=True)
def isolated_runtime(monkeypatch: pytest.MonkeyPatch):
    """Each test starts with no config, a fresh log registry and no cached zone."""
    for var in ("DATEONLY_TZ", "DATEONLY_LOGLEVEL", "DATEONLY_HOME"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(Log, "_logs", {})
    monkeypatch.setattr(Log, "_handlers", [])
    Env._reset()
    TimeZone._reset()
    yield
    Env._reset()
    TimeZone._reset()


@pytest.fixture
def zone(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], TimeZone]:
    """Make the named zone current through the tz config key."""

    def _set(name: str) -> TimeZone:
        monkeypatch.setenv("DATEONLY_TZ", name)
        Env._reset()
        TimeZone._reset()
        return TimeZone.cur()

    return _set


@pytest.fixture
def clock_at() -> Callable[..., Callable[[], DateTime]]:
    """Build a clock frozen at the given UTC date."""

    def _make_clock(year: int, month: int = 6, day: int = 15) -> Callable[[], DateTime]:
        reference = DateTime.make_utc(year, month, day)

        def _clock() -> DateTime:
            return reference

        return _clock

    return _make_clock
