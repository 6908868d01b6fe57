"""Logical clock port (abstract interface).

The host environment owns logical time and advances it independently of
request processing. The ledger only reads the current value, stamping it
on every accepted write.
"""

from abc import ABC, abstractmethod


class LogicalClock(ABC):
    """Abstract logical clock interface."""

    @abstractmethod
    def current_time(self) -> int:
        """Return the current logical time."""
        ...
