"""ReviewCounter aggregate — hands out review ids densely from 0.

Incremented exactly once per accepted submission, never on update.
"""

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from ledger.domain import ledger

COUNTER_KEY = "reviews"


@ledger.aggregate
class ReviewCounter:
    counter_id = String(identifier=True, required=True, max_length=50)
    next_id = Integer(default=0)

    @invariant.post
    def counter_cannot_be_negative(self):
        if self.next_id is not None and self.next_id < 0:
            raise ValidationError({"next_id": ["Review counter cannot be negative"]})

    def allocate(self) -> int:
        """Return the next review id and advance the counter."""
        review_id = self.next_id
        self.next_id = review_id + 1
        return review_id


def load_counter() -> ReviewCounter:
    repo = current_domain.repository_for(ReviewCounter)
    try:
        return repo.get(COUNTER_KEY)
    except ObjectNotFoundError:
        return ReviewCounter(counter_id=COUNTER_KEY, next_id=0)
