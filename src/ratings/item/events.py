"""Domain events for the Item aggregate."""

from protean.fields import DateTime, Identifier, String

from ratings.domain import ratings


@ratings.event(part_of="Item")
class ItemAdded:
    """An administrator added an item to the catalog."""

    __version__ = "v1"

    item_id = Identifier(required=True)
    locator = String(required=True)
    title = String(required=True)
    added_at = DateTime(required=True)
