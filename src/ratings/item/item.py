"""Item aggregate — something users can rate."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, String, Text

from ratings.domain import ratings
from ratings.item.events import ItemAdded
from ratings.shared.handles import validate_handle


@ratings.aggregate
class Item:
    """A catalog item, addressed externally by its ``locator`` slug."""

    locator = String(required=True, max_length=100, unique=True)
    title = String(required=True, max_length=255)
    description = Text(required=True)
    added_at = DateTime()

    @invariant.post
    def locator_must_be_a_handle(self):
        validate_handle(
            "locator",
            self.locator,
            "Only alphanumerical characters and underscores are allowed in item locator!",
        )

    @invariant.post
    def title_and_description_must_not_be_blank(self):
        if self.title is not None and not self.title.strip():
            raise ValidationError({"title": ["Some fields are empty!"]})
        if self.description is not None and not self.description.strip():
            raise ValidationError({"description": ["Some fields are empty!"]})

    @classmethod
    def add(cls, locator, title, description):
        now = datetime.now(UTC)
        item = cls(locator=locator, title=title, description=description, added_at=now)
        item.raise_(
            ItemAdded(
                item_id=str(item.id),
                locator=locator,
                title=title,
                added_at=now,
            )
        )
        return item


@ratings.repository(part_of=Item)
class ItemRepository:
    def find_by_locator(self, locator: str) -> Item | None:
        items = self._dao.query.filter(locator=locator).all().items
        return items[0] if items else None

    def get_by_locator(self, locator: str) -> Item:
        """Like ``find_by_locator`` but raises ``ObjectNotFoundError`` when absent."""
        item = self.find_by_locator(locator)
        if item is None:
            raise ObjectNotFoundError({"item": [f"Item '{locator}' does not exist"]})
        return item

    def everything(self) -> list[Item]:
        return self._dao.query.limit(None).all().items
