"""RemoveItem — delete an item together with every rating of it.

Reviews go first, then the item, all inside the command's unit of work, so a
failure part-way leaves both untouched.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ratings.domain import ratings
from ratings.item.item import Item
from ratings.review.review import Review
from ratings.utils.logging import get_logger

logger = get_logger(__name__)


@ratings.command(part_of="Item")
class RemoveItem:
    item_id = Identifier(required=True)


@ratings.command_handler(part_of=Item)
class RemoveItemHandler:
    @handle(RemoveItem)
    def remove_item(self, command):
        item_repo = current_domain.repository_for(Item)
        item = item_repo.get(command.item_id)

        removed = current_domain.repository_for(Review).remove_for_item(str(item.id))
        item_repo._dao.delete(item)

        logger.info("Item removed", item_id=str(item.id), locator=item.locator, reviews_removed=removed)
