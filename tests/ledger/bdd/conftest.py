"""Shared BDD fixtures and step definitions for the Ledger domain."""

import pytest
from ledger.api import get_review, get_review_count, set_authority_contract, submit_review
from pytest_bdd import given, parsers, then


@pytest.fixture()
def outcome():
    """Container for the result of the last ledger request."""
    return {"result": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('user "{user_id}" is registered'))
def user_is_registered(register_user, user_id):
    register_user(user_id)


@given(parsers.cfparse("location {location_id:d} is registered"))
def location_is_registered(register_location, location_id):
    register_location(location_id)


@given(parsers.cfparse('the authority is "{authority}"'))
def authority_is_set(authority):
    assert set_authority_contract(authority).ok


@given(parsers.cfparse('user "{user_id}" has reviewed location {location_id:d}'))
def user_has_reviewed(user_id, location_id):
    assert submit_review(user_id, location_id, "Great place!", 4).ok


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the review count is {count:d}"))
def review_count_is(count):
    assert get_review_count().value == count


@then(parsers.cfparse("review {review_id:d} has rating {rating:d}"))
def review_has_rating(review_id, rating):
    assert get_review(review_id).rating == rating
