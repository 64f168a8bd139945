"""WithdrawRating — a user takes back their rating of an item."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ratings.domain import ratings
from ratings.item.item import Item
from ratings.review.review import Review
from ratings.utils.logging import get_logger

logger = get_logger(__name__)


@ratings.command(part_of="Review")
class WithdrawRating:
    item_locator = String(required=True, max_length=100)
    user_id = Identifier(required=True)


@ratings.command_handler(part_of=Review)
class WithdrawRatingHandler:
    @handle(WithdrawRating)
    def withdraw_rating(self, command):
        item = current_domain.repository_for(Item).get_by_locator(command.item_locator)

        repo = current_domain.repository_for(Review)
        review = repo.find_for(item.id, command.user_id)
        if review is None:
            return  # Nothing to withdraw

        repo._dao.delete(review)
        logger.info("Rating withdrawn", item_locator=item.locator, user_id=str(command.user_id))
