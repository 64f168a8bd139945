"""AddItem — administrators add items to the catalog."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from ratings.domain import ratings
from ratings.item.item import Item
from ratings.utils.logging import get_logger

logger = get_logger(__name__)


@ratings.command(part_of="Item")
class AddItem:
    locator = String(required=True, max_length=100)
    title = String(required=True, max_length=255)
    description = Text(required=True)


@ratings.command_handler(part_of=Item)
class AddItemHandler:
    @handle(AddItem)
    def add_item(self, command):
        repo = current_domain.repository_for(Item)

        if repo.find_by_locator(command.locator) is not None:
            raise ValidationError({"locator": ["Item with this locator already exists!"]})

        item = Item.add(
            locator=command.locator,
            title=command.title,
            description=command.description,
        )
        repo.add(item)

        logger.info("Item added", item_id=str(item.id), locator=item.locator)
        return str(item.id)
