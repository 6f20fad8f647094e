"""Wall-clock time and sleeping."""

from __future__ import annotations

import time
from dataclasses import dataclass

_NS_PER_SEC = 1_000_000_000
_NS_PER_USEC = 1_000
_USEC_PER_SEC = 1_000_000


@dataclass(frozen=True)
class TimeVal:
    """A point in time as whole seconds and microseconds since the epoch."""

    tv_sec: int
    tv_usec: int

    def to_seconds(self) -> float:
        """Return the time as a float number of seconds."""
        return self.tv_sec + self.tv_usec / _USEC_PER_SEC


def get_current_time() -> TimeVal:
    """Return the current wall-clock time."""
    ns = time.time_ns()
    sec, rest = divmod(ns, _NS_PER_SEC)
    return TimeVal(sec, rest // _NS_PER_USEC)


def usleep(microseconds: int) -> None:
    """Sleep for the given number of microseconds."""
    if microseconds < 0:
        raise ValueError("microseconds must not be negative")
    time.sleep(microseconds / _USEC_PER_SEC)