"""SubmitReview — record a user's first review of a location.

Gates run in a fixed order and the first failure decides the error code:

    1. location id is positive                  INVALID_LOCATION
    2. text is 1..500 characters                INVALID_REVIEW_TEXT
    3. rating is 1..5                           INVALID_RATING
    4. logical time is not negative             INVALID_TIMESTAMP
    5. caller is a registered user              USER_NOT_FOUND
    6. location is registered                   LOCATION_NOT_FOUND
    7. caller has not reviewed this location    REVIEW_ALREADY_EXISTS
    8. an authority has been set                NOT_AUTHORIZED

Nothing is written until every gate has passed. On success the review,
its UserReview index entry and the advanced counter are stored together.
"""

import structlog
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ledger.clock import get_clock
from ledger.configuration.configuration import load_configuration
from ledger.domain import ledger
from ledger.projections.registries import is_registered_location, is_registered_user
from ledger.review.counter import ReviewCounter, load_counter
from ledger.review.review import Review, is_valid_location_id, is_valid_rating, is_valid_text
from ledger.review.user_review import UserReview, find_user_review
from ledger.shared.errors import ErrorCode
from ledger.shared.result import LedgerResult

logger = structlog.get_logger(__name__)


@ledger.command(part_of="Review")
class SubmitReview:
    caller = Identifier(required=True)  # Authenticated upstream
    location_id = Integer()
    text = Text(sanitize=False)
    rating = Integer()


def _first_failed_gate(command, now) -> ErrorCode | None:
    if not is_valid_location_id(command.location_id):
        return ErrorCode.INVALID_LOCATION
    if not is_valid_text(command.text):
        return ErrorCode.INVALID_REVIEW_TEXT
    if not is_valid_rating(command.rating):
        return ErrorCode.INVALID_RATING
    if now is None or now < 0:
        return ErrorCode.INVALID_TIMESTAMP
    if not is_registered_user(command.caller):
        return ErrorCode.USER_NOT_FOUND
    if not is_registered_location(command.location_id):
        return ErrorCode.LOCATION_NOT_FOUND
    if find_user_review(command.caller, command.location_id) is not None:
        return ErrorCode.REVIEW_ALREADY_EXISTS
    if not load_configuration().has_authority:
        return ErrorCode.NOT_AUTHORIZED
    return None


@ledger.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        now = get_clock().current_time()

        error = _first_failed_gate(command, now)
        if error is not None:
            logger.info(
                "Review submission rejected",
                caller=str(command.caller),
                location_id=command.location_id,
                error_code=int(error),
                error=error.name,
            )
            return LedgerResult.failure(error)

        counter = load_counter()
        review_id = counter.allocate()

        review = Review.submit(
            review_id=review_id,
            author=str(command.caller),
            location_id=command.location_id,
            text=command.text,
            rating=command.rating,
            timestamp=now,
        )
        index_entry = UserReview.record(
            author=str(command.caller),
            location_id=command.location_id,
            review_id=review_id,
            submitted_at=now,
        )

        current_domain.repository_for(Review).add(review)
        current_domain.repository_for(UserReview).add(index_entry)
        current_domain.repository_for(ReviewCounter).add(counter)

        logger.info(
            "Review submitted",
            review_id=review_id,
            caller=str(command.caller),
            location_id=command.location_id,
            timestamp=now,
        )
        return LedgerResult.success(review_id)
