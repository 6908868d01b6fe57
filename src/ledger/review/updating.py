"""UpdateReview — the author replaces the text and rating of their review.

Fails with a bare ``False`` when the review does not exist, the caller is
not its author, or the new text or rating is out of bounds. Callers that
need the cause re-read the review with get_review().

The review id counter is never touched.
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ledger.clock import get_clock
from ledger.domain import ledger
from ledger.review.review import Review, is_valid_rating, is_valid_text
from ledger.review.user_review import UserReview, find_user_review
from ledger.shared.result import LedgerResult

logger = structlog.get_logger(__name__)


@ledger.command(part_of="Review")
class UpdateReview:
    caller = Identifier(required=True)  # Must match the stored author
    review_id = Integer()
    text = Text(sanitize=False)
    rating = Integer()


@ledger.command_handler(part_of=Review)
class UpdateReviewHandler:
    @handle(UpdateReview)
    def update_review(self, command):
        repo = current_domain.repository_for(Review)

        if command.review_id is None:
            return LedgerResult.failure()
        try:
            review = repo.get(command.review_id)
        except ObjectNotFoundError:
            logger.info("Review update rejected: unknown review", review_id=command.review_id)
            return LedgerResult.failure()

        if not review.is_authored_by(command.caller):
            logger.info(
                "Review update rejected: caller is not the author",
                review_id=command.review_id,
                caller=str(command.caller),
            )
            return LedgerResult.failure()

        if not is_valid_text(command.text) or not is_valid_rating(command.rating):
            logger.info("Review update rejected: invalid text or rating", review_id=command.review_id)
            return LedgerResult.failure()

        now = get_clock().current_time()
        review.revise(text=command.text, rating=command.rating, timestamp=now)
        repo.add(review)

        index_entry = find_user_review(review.author, review.location_id)
        if index_entry is None:
            # Index entries are written with their review; rebuild if missing
            index_entry = UserReview.record(
                author=str(review.author),
                location_id=review.location_id,
                review_id=review.review_id,
                submitted_at=now,
            )
        else:
            index_entry.touch(now)
        current_domain.repository_for(UserReview).add(index_entry)

        logger.info("Review updated", review_id=review.review_id, timestamp=now)
        return LedgerResult.success()
