"""Domain events for the User aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from ratings.domain import ratings


@ratings.event(part_of="User")
class UserRegistered:
    """A new user joined and can now submit ratings."""

    __version__ = "v1"

    user_id = Identifier(required=True)
    username = String(required=True)
    is_admin = Boolean(default=False)
    registered_at = DateTime(required=True)


@ratings.event(part_of="User")
class AvatarChanged:
    """A user uploaded or removed their avatar picture."""

    __version__ = "v1"

    user_id = Identifier(required=True)
    has_avatar = Boolean(default=False)
