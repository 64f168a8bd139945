"""SubmitRating — rate an item, replacing any earlier rating by the same user.

The handler upserts: it re-rates the review stored under the (item, user)
identity when there is one, and creates it otherwise.
"""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from ratings.domain import ratings
from ratings.item.item import Item
from ratings.review.review import Rating, Review
from ratings.user.user import User
from ratings.utils.logging import add_context, get_logger

logger = get_logger(__name__)


@ratings.command(part_of="Review")
class SubmitRating:
    item_locator = String(required=True, max_length=100)
    user_id = Identifier(required=True)
    rating = Integer(required=True)


@ratings.command_handler(part_of=Review)
class SubmitRatingHandler:
    @handle(SubmitRating)
    def submit_rating(self, command):
        add_context(item_locator=command.item_locator, user_id=str(command.user_id))

        # Bound check before any lookup
        Rating(score=command.rating)

        item = current_domain.repository_for(Item).get_by_locator(command.item_locator)
        user = current_domain.repository_for(User).get(command.user_id)

        repo = current_domain.repository_for(Review)
        review = repo.find_for(item.id, user.id)
        if review is None:
            review = Review.submit(item_id=str(item.id), user_id=str(user.id), rating=command.rating)
        else:
            review.rerate(command.rating)
        repo.add(review)

        logger.info("Rating submitted", rating=command.rating)
        return review.review_id
