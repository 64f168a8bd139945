"""Shared BDD fixtures and step definitions for the Ratings domain."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from pytest_bdd import given, parsers, then, when
from ratings.standings.board import RatingBoard


@pytest.fixture()
def board():
    return RatingBoard()


@pytest.fixture()
def users():
    """Registered user ids by username."""
    return {}


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalog has items "{locators}"'))
def catalog_items(locators, make_item):
    for locator in locators.split(","):
        make_item(locator.strip())


@given(parsers.cfparse('user "{username}" is registered'))
def registered_user(username, users, make_user):
    users[username] = make_user(username)


@given(parsers.cfparse('"{username}" rated "{locator}" {rating:d}'))
def existing_rating(username, locator, rating, board, users, make_user):
    if username not in users:
        users[username] = make_user(username)
    board.submit_rating(locator, users[username], rating)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('"{username}" rates "{locator}" {rating:d}'))
def rate(username, locator, rating, board, users, error):
    try:
        board.submit_rating(locator, users[username], rating)
    except (ValidationError, ObjectNotFoundError) as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{locator}" has score {score:g} from {count:d} reviews'))
def item_score(locator, score, count, board):
    standing = board.standing_for(locator)
    assert standing.score == pytest.approx(score)
    assert standing.review_count == count


@then(parsers.cfparse('"{locator}" is ranked {rank:d} by score'))
def item_rank(locator, rank, board):
    assert board.standing_for(locator).rank == rank


@then(parsers.cfparse('"{locator}" is ranked {popularity:d} by popularity'))
def item_popularity(locator, popularity, board):
    assert board.standing_for(locator).popularity == popularity


@then("the rating is rejected")
def rating_rejected(error):
    assert isinstance(error["exc"], ValidationError)


@then("the item is not found")
def item_not_found(error):
    assert isinstance(error["exc"], ObjectNotFoundError)
