"""RegisterUser — create a user account."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, String
from protean.utils.globals import current_domain

from ratings.domain import ratings
from ratings.user.user import User
from ratings.utils.logging import get_logger

logger = get_logger(__name__)


@ratings.command(part_of="User")
class RegisterUser:
    username = String(required=True, max_length=64)
    password_hash = String(required=True, max_length=255)
    is_admin = Boolean(default=False)
    has_avatar = Boolean(default=False)


@ratings.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)

        if repo.find_by_username(command.username) is not None:
            raise ValidationError({"username": ["User with this username already exists!"]})

        user = User.register(
            username=command.username,
            password_hash=command.password_hash,
            is_admin=command.is_admin,
            has_avatar=command.has_avatar,
        )
        repo.add(user)

        logger.info("User registered", user_id=str(user.id), username=user.username)
        return str(user.id)
