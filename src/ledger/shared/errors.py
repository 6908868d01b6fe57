"""Rejection codes returned by ledger operations.

The numeric values are part of the wire contract and must never be
renumbered. INVALID_HASH, COOLDOWN_ACTIVE and INVALID_REVIEW_ID are
reserved for future gates and are not produced today.
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    NOT_AUTHORIZED = 100
    INVALID_LOCATION = 101
    INVALID_REVIEW_TEXT = 102
    INVALID_RATING = 103
    INVALID_TIMESTAMP = 104
    REVIEW_ALREADY_EXISTS = 105
    USER_NOT_FOUND = 106
    LOCATION_NOT_FOUND = 107
    INVALID_HASH = 108
    COOLDOWN_ACTIVE = 109
    INVALID_REVIEW_ID = 110
