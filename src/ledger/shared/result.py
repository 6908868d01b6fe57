"""Tagged success/failure returned by every mutating ledger operation."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LedgerResult:
    """Outcome of a ledger request.

    ``value`` holds the success payload (``True`` or a new review id) or,
    on failure, an ``ErrorCode`` for submissions and ``False`` elsewhere.
    """

    ok: bool
    value: Any

    @classmethod
    def success(cls, value: Any = True) -> "LedgerResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, value: Any = False) -> "LedgerResult":
        return cls(ok=False, value=value)
