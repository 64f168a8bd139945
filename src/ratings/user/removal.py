"""RemoveUser — delete a user together with every rating they gave."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ratings.domain import ratings
from ratings.review.review import Review
from ratings.user.user import User
from ratings.utils.logging import get_logger

logger = get_logger(__name__)


@ratings.command(part_of="User")
class RemoveUser:
    user_id = Identifier(required=True)


@ratings.command_handler(part_of=User)
class RemoveUserHandler:
    @handle(RemoveUser)
    def remove_user(self, command):
        user_repo = current_domain.repository_for(User)
        user = user_repo.get(command.user_id)

        # Dependent reviews first, then the user, in the same unit of work
        removed = current_domain.repository_for(Review).remove_for_user(str(user.id))
        user_repo._dao.delete(user)

        logger.info("User removed", user_id=str(user.id), username=user.username, reviews_removed=removed)
