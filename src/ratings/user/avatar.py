"""SetAvatar — record whether a user has uploaded an avatar picture."""

from protean import handle
from protean.fields import Boolean, Identifier
from protean.utils.globals import current_domain

from ratings.domain import ratings
from ratings.user.user import User


@ratings.command(part_of="User")
class SetAvatar:
    user_id = Identifier(required=True)
    has_avatar = Boolean(default=False)


@ratings.command_handler(part_of=User)
class SetAvatarHandler:
    @handle(SetAvatar)
    def set_avatar(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.set_avatar(command.has_avatar)
        repo.add(user)
