"""Host call surface for the Review Ledger.

The host authenticates callers and advances the logical clock; these
functions take the caller identity explicitly and dispatch the matching
command synchronously. Lookups are re-exported unchanged.

Must be called inside an active ledger domain context.
"""

from protean.utils.globals import current_domain

from ledger.configuration.authority import SetAuthorityContract
from ledger.configuration.cooldown import SetCooldownPeriod
from ledger.review.lookups import get_configuration, get_review, get_review_count, get_user_review
from ledger.review.submission import SubmitReview
from ledger.review.updating import UpdateReview
from ledger.shared.result import LedgerResult
from ledger.utils.logging import add_context, clear_context

__all__ = [
    "get_configuration",
    "get_review",
    "get_review_count",
    "get_user_review",
    "set_authority_contract",
    "set_cooldown_period",
    "submit_review",
    "update_review",
]


def _process(command, **context) -> LedgerResult:
    add_context(**context)
    try:
        return current_domain.process(command, asynchronous=False)
    finally:
        clear_context()


def set_authority_contract(candidate) -> LedgerResult:
    return _process(SetAuthorityContract(candidate=candidate), operation="set_authority_contract")


def set_cooldown_period(new_period: int) -> LedgerResult:
    return _process(SetCooldownPeriod(new_period=new_period), operation="set_cooldown_period")


def submit_review(caller, location_id: int, text: str, rating: int) -> LedgerResult:
    return _process(
        SubmitReview(caller=caller, location_id=location_id, text=text, rating=rating),
        operation="submit_review",
        caller=str(caller),
    )


def update_review(caller, review_id: int, text: str, rating: int) -> LedgerResult:
    return _process(
        UpdateReview(caller=caller, review_id=review_id, text=text, rating=rating),
        operation="update_review",
        caller=str(caller),
    )
