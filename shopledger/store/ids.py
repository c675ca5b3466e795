"""
Record id generation.

Ids are derived from the clock (milliseconds since the epoch) but never
allowed to repeat or go backwards: two records created in the same
millisecond get consecutive ids, and a clock that jumps back is ignored.
Because the sequence starts above the largest id already stored, ids of
deleted records are never handed out again.
"""

from datetime import datetime
from typing import Callable


Clock = Callable[[], datetime]


class IdSequence:
    """Strictly increasing integer ids."""

    def __init__(self, clock: Clock, last_issued: int = 0):
        self._clock = clock
        self._last_issued = last_issued

    @property
    def last_issued(self) -> int:
        return self._last_issued

    def observe(self, existing_id: int) -> None:
        """Make sure later ids land above an id that already exists."""
        self._last_issued = max(self._last_issued, existing_id)

    def next_id(self) -> int:
        from_clock = int(self._clock().timestamp() * 1000)
        self._last_issued = max(from_clock, self._last_issued + 1)
        return self._last_issued
