"""UserReview aggregate — the (author, location) uniqueness index.

The presence of a UserReview for a pair is the only test for "this user
already reviewed this location". It points at the review and remembers
the logical time of the author's latest write for the pair.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from ledger.domain import ledger


def user_review_key(author, location_id) -> str:
    """Compose the index key; location ids never contain '-' so keys are unique."""
    return f"{author}-{location_id}"


@ledger.aggregate
class UserReview:
    key = String(identifier=True, required=True, max_length=300)
    author = Identifier(required=True)
    location_id = Integer(required=True)
    review_id = Integer(required=True)
    last_submitted = Integer(required=True)

    @classmethod
    def record(cls, author, location_id, review_id, submitted_at):
        return cls(
            key=user_review_key(author, location_id),
            author=author,
            location_id=location_id,
            review_id=review_id,
            last_submitted=submitted_at,
        )

    def touch(self, submitted_at):
        self.last_submitted = submitted_at


def find_user_review(author, location_id) -> UserReview | None:
    try:
        return current_domain.repository_for(UserReview).get(user_review_key(author, location_id))
    except ObjectNotFoundError:
        return None
