"""Domain events for the Review aggregate.

Every accepted write raises one event, forming the audit trail. The
fingerprint carried on each event lets auditors check the text that was
stored at that point in logical time.
"""

from protean.fields import Identifier, Integer, String

from ledger.domain import ledger


@ledger.event(part_of="Review")
class ReviewSubmitted:
    """A registered user submitted their review of a location."""

    __version__ = 1

    review_id = Integer(required=True)
    author = Identifier(required=True)
    location_id = Integer(required=True)
    text = String(required=True, max_length=500, sanitize=False)
    rating = Integer(required=True)
    fingerprint = String(required=True, max_length=64)
    timestamp = Integer(required=True)


@ledger.event(part_of="Review")
class ReviewUpdated:
    """The author replaced the text and rating of their review."""

    __version__ = 1

    review_id = Integer(required=True)
    author = Identifier(required=True)
    location_id = Integer(required=True)
    text = String(required=True, max_length=500, sanitize=False)
    rating = Integer(required=True)
    previous_fingerprint = String(required=True, max_length=64)
    fingerprint = String(required=True, max_length=64)
    timestamp = Integer(required=True)
