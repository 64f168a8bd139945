"""User aggregate — a person who rates items.

Usernames are unique and immutable, which is what lets the avatar hue be a
plain function of the name rather than a stored column.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.fields import Boolean, DateTime, String

from ratings.domain import ratings
from ratings.shared.handles import validate_handle
from ratings.user.events import AvatarChanged, UserRegistered
from ratings.user.hue import hue


@ratings.aggregate
class User:
    """A registered user.

    ``password_hash`` is opaque here; hashing and verification belong to
    the authentication layer in front of this domain.
    """

    username = String(required=True, max_length=64, unique=True)
    password_hash = String(required=True, max_length=255)
    is_admin = Boolean(default=False)
    has_avatar = Boolean(default=False)
    registered_at = DateTime()

    @invariant.post
    def username_must_be_a_handle(self):
        validate_handle(
            "username",
            self.username,
            "Only alphanumerical characters and underscores are allowed in usernames!",
        )

    @property
    def avatar_hue(self) -> int:
        return hue(self.username)

    @classmethod
    def register(cls, username, password_hash, is_admin=False, has_avatar=False):
        """Register a new user."""
        now = datetime.now(UTC)
        user = cls(
            username=username,
            password_hash=password_hash,
            is_admin=is_admin,
            has_avatar=has_avatar,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                username=username,
                is_admin=is_admin,
                registered_at=now,
            )
        )
        return user

    def set_avatar(self, has_avatar):
        if self.has_avatar == has_avatar:
            return

        self.has_avatar = has_avatar
        self.raise_(AvatarChanged(user_id=str(self.id), has_avatar=has_avatar))


@ratings.repository(part_of=User)
class UserRepository:
    def find_by_username(self, username: str) -> User | None:
        users = self._dao.query.filter(username=username).all().items
        return users[0] if users else None

    def everything(self) -> list[User]:
        return self._dao.query.limit(None).all().items
