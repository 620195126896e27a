"""Per-store id allocation and timestamp source."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Set

logger = logging.getLogger(__name__)

_TICK = timedelta(microseconds=1)


class IdAllocator:
    """Issues "0", "1", "2", ... and never hands out a reserved id."""

    def __init__(self, start: int = 0):
        self._next = start
        self._reserved: Set[str] = set()

    def reserve(self, entry_id: str) -> None:
        """Mark a caller-supplied id as taken without moving the counter."""
        self._reserved.add(entry_id)

    def allocate(self) -> str:
        candidate = str(self._next)
        self._next += 1
        while candidate in self._reserved:
            logger.debug(f"Skipping reserved id {candidate}")
            candidate = str(self._next)
            self._next += 1
        return candidate


class MonotonicClock:
    """
    UTC timestamp source that never repeats a value.

    Successive calls can land on the same microsecond; in that case the
    previous value is bumped by one microsecond so every mutation gets a
    strictly later `modified_at`.
    """

    def __init__(self, source: Optional[Callable[[], datetime]] = None):
        self._source = source or (lambda: datetime.now(timezone.utc))
        self._last: Optional[datetime] = None

    def now(self) -> datetime:
        current = self._source()
        if self._last is not None and current <= self._last:
            current = self._last + _TICK
        self._last = current
        return current
