"""Elapsed-time queries and the on-screen clock format."""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], int]

_EPOCH = time.monotonic()


def monotonic_ms() -> int:
    """Milliseconds elapsed since this module was first imported."""
    return int((time.monotonic() - _EPOCH) * 1000)


def _leading_field(value: int) -> str:
    """Format an hour or minute field: empty when zero, two digits plus ':' otherwise."""
    if value >= 10:
        return f"{value}:"
    if value >= 1:
        return f"0{value}:"
    return ""


def format_elapsed(ms: int) -> str:
    """Format a millisecond count as the game's stopwatch text."""
    if ms < 0:
        raise ValueError("elapsed time cannot be negative")

    hours = _leading_field(ms // 3_600_000 % 60)
    minutes = _leading_field(ms // 60_000 % 60)

    secs = ms // 1000 % 60
    seconds = str(secs) if secs >= 10 else f"0{secs}"
    centis = f":{ms % 1000 // 10}"

    if ms // 600_000 >= 1:
        pad = ""
    elif ms // 60_000 >= 1:
        pad = "  "
    else:
        pad = "    "

    return pad + hours + minutes + seconds + centis


class TimeHandler:
    """Reads a millisecond clock and reports it in several units."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock if clock is not None else monotonic_ms

    def ms(self) -> int:
        return int(self._clock())

    def seconds(self) -> int:
        return self.ms() // 1000

    def minutes(self) -> int:
        return self.ms() // 60_000

    def hours(self) -> int:
        return self.ms() // 3_600_000

    def full(self) -> str:
        """The elapsed time as stopwatch text."""
        return format_elapsed(self.ms())