"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, Integer

from ratings.domain import ratings


@ratings.event(part_of="Review")
class RatingSubmitted:
    """A user rated an item for the first time."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    item_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    rated_at = DateTime(required=True)


@ratings.event(part_of="Review")
class RatingChanged:
    """A user resubmitted their rating of an item, replacing the old one."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    item_id = Identifier(required=True)
    user_id = Identifier(required=True)
    previous_rating = Integer(required=True)
    rating = Integer(required=True)
    rated_at = DateTime(required=True)
