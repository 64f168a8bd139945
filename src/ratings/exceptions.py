"""Errors raised by the Ratings domain beyond Protean's own.

Protean's ``ValidationError`` covers bad input (rating out of bound, illegal
usernames or locators, duplicates) and ``ObjectNotFoundError`` covers unknown
items and users. The two classes here describe storage-level outcomes.
"""


class ConflictError(Exception):
    """A review insert collided with a concurrent insert for the same pair.

    Absorbed by ``RatingBoard.submit_rating``; never surfaces to callers.
    """


class StorageUnavailable(Exception):
    """The storage layer could not be reached. Safe to retry."""
