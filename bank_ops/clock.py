"""Timestamp sources for transaction records."""

from datetime import datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Clock returning a preset instant.

    Parameters
    ----------
    instant : datetime
        First value returned by ``now``.
    step : timedelta | None
        Amount added after every call, so successive timestamps differ.
    """

    def __init__(self, instant: datetime, step: timedelta | None = None) -> None:
        self._current = instant
        self._step = step

    def now(self) -> datetime:
        value = self._current
        if self._step is not None:
            self._current = value + self._step
        return value
