"""Logical clock factory.

Provides get_clock() / set_clock() to swap the source of logical time.
Defaults to a ManualClock starting at 0.
"""

from ledger.clock.manual_adapter import ManualClock
from ledger.clock.port import LogicalClock

_current_clock: LogicalClock | None = None


def get_clock() -> LogicalClock:
    """Return the current logical clock. Defaults to ManualClock."""
    global _current_clock
    if _current_clock is None:
        _current_clock = ManualClock()
    return _current_clock


def set_clock(clock: LogicalClock) -> None:
    """Install the host's logical clock."""
    global _current_clock
    _current_clock = clock


def reset_clock() -> None:
    """Reset to default clock."""
    global _current_clock
    _current_clock = None
