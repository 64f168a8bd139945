"""Read models returned by the ratings board.

All of them are computed on request from a review snapshot and never stored.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ItemStanding:
    """An item together with its score, review count and both ranks."""

    item_id: str
    locator: str
    title: str
    description: str
    score: float
    review_count: int
    rank: int
    popularity: int


@dataclass(frozen=True)
class UserCard:
    user_id: str
    username: str
    is_admin: bool
    has_avatar: bool
    avatar_hue: int


@dataclass(frozen=True)
class ItemRatingEntry:
    """One rating of an item, shown with the user who gave it."""

    user: UserCard
    rating: int
    rated_at: datetime


@dataclass(frozen=True)
class UserRatingEntry:
    """One rating given by a user, shown with the rated item's standing."""

    item: ItemStanding
    rating: int
    rated_at: datetime
