"""Review aggregate — one user's rating of one item.

A review's identity is derived from its (item, user) pair, so the storage
primary key is what guarantees at most one review per pair. Resubmitting
re-rates the existing review instead of adding a second one.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Identifier, Integer, ValueObject

from ratings import config
from ratings.domain import ratings
from ratings.review.events import RatingChanged, RatingSubmitted


def review_key(item_id, user_id) -> str:
    """Identity of the review ``user_id`` gives ``item_id``."""
    return f"{item_id}:{user_id}"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ratings.value_object(part_of="Review")
class Rating:
    """An integer rating within the configured bound (1 to 10 by default)."""

    score = Integer(required=True)

    @invariant.post
    def score_must_be_in_range(self):
        if self.score is not None and not (config.RATING_MIN <= self.score <= config.RATING_MAX):
            raise ValidationError(
                {"score": [f"Rating must be between {config.RATING_MIN} and {config.RATING_MAX}"]}
            )


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ratings.aggregate
class Review:
    review_id = Identifier(identifier=True)
    item_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = ValueObject(Rating, required=True)
    rated_at = DateTime(required=True)

    @classmethod
    def submit(cls, item_id, user_id, rating):
        """First rating of ``item_id`` by ``user_id``."""
        now = datetime.now(UTC)

        review = cls(
            review_id=review_key(item_id, user_id),
            item_id=item_id,
            user_id=user_id,
            rating=Rating(score=rating),
            rated_at=now,
        )
        review.raise_(
            RatingSubmitted(
                review_id=review.review_id,
                item_id=str(item_id),
                user_id=str(user_id),
                rating=rating,
                rated_at=now,
            )
        )
        return review

    def rerate(self, rating):
        """Overwrite the rating and its timestamp."""
        previous = self.rating.score
        now = datetime.now(UTC)

        self.rating = Rating(score=rating)
        self.rated_at = now

        self.raise_(
            RatingChanged(
                review_id=self.review_id,
                item_id=str(self.item_id),
                user_id=str(self.user_id),
                previous_rating=previous,
                rating=rating,
                rated_at=now,
            )
        )


@ratings.repository(part_of=Review)
class ReviewRepository:
    """Review storage: lookups by pair, cascades, and the aggregation snapshot."""

    def find_for(self, item_id, user_id) -> Review | None:
        try:
            return self.get(review_key(item_id, user_id))
        except ObjectNotFoundError:
            return None

    def for_item(self, item_id) -> list[Review]:
        return self._dao.query.filter(item_id=str(item_id)).limit(None).all().items

    def for_user(self, user_id) -> list[Review]:
        return self._dao.query.filter(user_id=str(user_id)).limit(None).all().items

    def snapshot(self) -> list[Review]:
        """Every committed review, read in a single query."""
        return self._dao.query.limit(None).all().items

    def remove_for_item(self, item_id) -> int:
        return self._remove_all(self.for_item(item_id))

    def remove_for_user(self, user_id) -> int:
        return self._remove_all(self.for_user(user_id))

    def _remove_all(self, reviews) -> int:
        for review in reviews:
            self._dao.delete(review)
        return len(reviews)
