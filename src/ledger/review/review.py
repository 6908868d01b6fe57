"""Review aggregate — one user's rating and text for one location.

Reviews are identified by a sequential integer id handed out by the
ReviewCounter. Author and location are fixed at submission; only the
author may later replace the text and rating. There is no removal or
deactivation, so every assigned id stays present and active.
"""

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, Integer, String

from ledger.domain import ledger
from ledger.review.events import ReviewSubmitted, ReviewUpdated
from ledger.shared.fingerprint import fingerprint_for

MAX_TEXT_LENGTH = 500
MIN_RATING = 1
MAX_RATING = 5


# ---------------------------------------------------------------------------
# Field rules (shared by the aggregate invariants and the handler gates)
# ---------------------------------------------------------------------------
def is_valid_location_id(location_id) -> bool:
    return location_id is not None and location_id > 0


def is_valid_text(text) -> bool:
    # Length counts code points, so an emoji is one unit, not two UTF-16 units
    return bool(text) and len(text) <= MAX_TEXT_LENGTH


def is_valid_rating(rating) -> bool:
    return rating is not None and MIN_RATING <= rating <= MAX_RATING


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ledger.aggregate
class Review:
    review_id = Integer(identifier=True, required=True)
    author = Identifier(required=True)
    location_id = Integer(required=True)

    text = String(required=True, max_length=MAX_TEXT_LENGTH, sanitize=False)
    rating = Integer(required=True)
    fingerprint = String(required=True, max_length=64)

    # Logical time of the last write
    timestamp = Integer(required=True)
    is_active = Boolean(default=True)

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def location_must_be_positive(self):
        if not is_valid_location_id(self.location_id):
            raise ValidationError({"location_id": ["Location id must be a positive integer"]})

    @invariant.post
    def text_within_bounds(self):
        if not is_valid_text(self.text):
            raise ValidationError({"text": [f"Review text must be 1 to {MAX_TEXT_LENGTH} characters"]})

    @invariant.post
    def rating_in_range(self):
        if not is_valid_rating(self.rating):
            raise ValidationError({"rating": [f"Rating must be between {MIN_RATING} and {MAX_RATING}"]})

    @invariant.post
    def fingerprint_matches_text(self):
        if self.text and self.fingerprint != fingerprint_for(self.text):
            raise ValidationError({"fingerprint": ["Fingerprint does not match review text"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def submit(cls, review_id, author, location_id, text, rating, timestamp):
        """Create a review at logical time ``timestamp``."""
        fingerprint = fingerprint_for(text) if text else None

        review = cls(
            review_id=review_id,
            author=author,
            location_id=location_id,
            text=text,
            rating=rating,
            fingerprint=fingerprint,
            timestamp=timestamp,
            is_active=True,
        )

        review.raise_(
            ReviewSubmitted(
                review_id=review_id,
                author=str(author),
                location_id=location_id,
                text=text,
                rating=rating,
                fingerprint=fingerprint,
                timestamp=timestamp,
            )
        )

        return review

    # -------------------------------------------------------------------
    # Update
    # -------------------------------------------------------------------
    def is_authored_by(self, identity) -> bool:
        return str(self.author) == str(identity)

    def revise(self, text, rating, timestamp):
        """Replace text and rating. Author, location and id stay as they are."""
        previous_fingerprint = self.fingerprint

        with atomic_change(self):
            self.text = text
            self.rating = rating
            self.fingerprint = fingerprint_for(text) if text else None
            self.timestamp = timestamp

        self.raise_(
            ReviewUpdated(
                review_id=self.review_id,
                author=str(self.author),
                location_id=self.location_id,
                text=self.text,
                rating=self.rating,
                previous_fingerprint=previous_fingerprint,
                fingerprint=self.fingerprint,
                timestamp=timestamp,
            )
        )
