"""Point lookups over the ledger. Pure reads, no authorization."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ledger.configuration.configuration import LedgerConfiguration, load_configuration
from ledger.review.counter import load_counter
from ledger.review.review import Review
from ledger.review.user_review import UserReview, find_user_review
from ledger.shared.result import LedgerResult


def get_review(review_id) -> Review | None:
    if review_id is None:
        return None
    try:
        return current_domain.repository_for(Review).get(review_id)
    except ObjectNotFoundError:
        return None


def get_user_review(author, location_id) -> UserReview | None:
    return find_user_review(author, location_id)


def get_review_count() -> LedgerResult:
    return LedgerResult.success(load_counter().next_id)


def get_configuration() -> LedgerConfiguration:
    """Current authority and cooldown period (defaults if never configured)."""
    return load_configuration()
