"""Host-driven logical clock.

The host moves time forward explicitly, e.g. once per block or batch of
requests. Useful for tests and for embedding the ledger in a process that
keeps its own ordering counter.
"""

from ledger.clock.port import LogicalClock


class ManualClock(LogicalClock):
    """Logical clock advanced by its owner."""

    def __init__(self, start: int = 0) -> None:
        self._now: int = start

    def current_time(self) -> int:
        return self._now

    def advance(self, ticks: int = 1) -> int:
        """Move time forward by ``ticks`` and return the new value."""
        if ticks < 0:
            raise ValueError("Logical time cannot move backwards")
        self._now += ticks
        return self._now

    def set(self, value: int) -> None:
        """Pin the clock to an exact value (no monotonicity check)."""
        self._now = value
