"""RatingBoard — the single entry point callers use to rate items and read standings.

Every read builds its answer from one review snapshot, so the score, review
count and both ranks in a response always agree with each other. Nothing is
cached: standings are recomputed on each call.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ratings.exceptions import ConflictError
from ratings.item.item import Item
from ratings.item.removal import RemoveItem
from ratings.review.review import Review
from ratings.review.submission import SubmitRating
from ratings.review.withdrawal import WithdrawRating
from ratings.standings.aggregation import aggregate
from ratings.standings.ranking import rank_by_popularity, rank_by_score
from ratings.standings.views import ItemRatingEntry, ItemStanding, UserCard, UserRatingEntry
from ratings.user.hue import hue
from ratings.user.removal import RemoveUser
from ratings.user.user import User
from ratings.utils.logging import get_logger
from ratings.utils.storage import storage_errors

logger = get_logger(__name__)


def compute_standings(items, reviews) -> dict[str, ItemStanding]:
    """Standing of every item in ``items`` given one review snapshot."""
    aggregates = aggregate(
        ((str(review.item_id), review.rating.score) for review in reviews),
        (str(item.id) for item in items),
    )
    score_ranks = rank_by_score(aggregates)
    popularity_ranks = rank_by_popularity(aggregates)

    return {
        str(item.id): ItemStanding(
            item_id=str(item.id),
            locator=item.locator,
            title=item.title,
            description=item.description,
            score=aggregates[str(item.id)].mean,
            review_count=aggregates[str(item.id)].count,
            rank=score_ranks[str(item.id)],
            popularity=popularity_ranks[str(item.id)],
        )
        for item in items
    }


def _card(user) -> UserCard:
    return UserCard(
        user_id=str(user.id),
        username=user.username,
        is_admin=user.is_admin,
        has_avatar=user.has_avatar,
        avatar_hue=user.avatar_hue,
    )


def _newest_first(reviews):
    return sorted(reviews, key=lambda review: review.rated_at, reverse=True)


class RatingBoard:
    """Writes go through domain commands; reads are computed on demand.

    Must be used inside an active ``ratings`` domain context.
    """

    # -------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------
    def submit_rating(self, item_locator: str, user_id: str, rating: int) -> Review:
        """Upsert ``user_id``'s rating of the item at ``item_locator``.

        A conflicting concurrent insert for the same pair is retried once;
        the retry finds the stored review and re-rates it.
        """
        command = SubmitRating(item_locator=item_locator, user_id=user_id, rating=rating)
        try:
            with storage_errors(conflict_on="review_id"):
                review_id = current_domain.process(command, asynchronous=False)
        except ConflictError:
            logger.warning("Concurrent rating insert, retrying as update", item_locator=item_locator, user_id=user_id)
            with storage_errors():
                review_id = current_domain.process(command, asynchronous=False)

        with storage_errors():
            return current_domain.repository_for(Review).get(review_id)

    def withdraw_rating(self, item_locator: str, user_id: str) -> None:
        with storage_errors():
            current_domain.process(WithdrawRating(item_locator=item_locator, user_id=user_id), asynchronous=False)

    def delete_item_cascade(self, item_id: str) -> None:
        with storage_errors():
            current_domain.process(RemoveItem(item_id=item_id), asynchronous=False)

    def delete_user_cascade(self, user_id: str) -> None:
        with storage_errors():
            current_domain.process(RemoveUser(user_id=user_id), asynchronous=False)

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def list_standings(self) -> list[ItemStanding]:
        """Every item with its standing, best score first (ties by locator)."""
        with storage_errors():
            reviews = current_domain.repository_for(Review).snapshot()
            items = current_domain.repository_for(Item).everything()

        standings = compute_standings(items, reviews)
        return sorted(standings.values(), key=lambda standing: (-standing.score, standing.locator))

    def standing_for(self, locator: str) -> ItemStanding:
        with storage_errors():
            reviews = current_domain.repository_for(Review).snapshot()
            items = current_domain.repository_for(Item).everything()

        for standing in compute_standings(items, reviews).values():
            if standing.locator == locator:
                return standing
        raise ObjectNotFoundError({"item": [f"Item '{locator}' does not exist"]})

    def rating_of(self, item_locator: str, user_id: str) -> int | None:
        """The rating ``user_id`` currently gives the item, if any."""
        with storage_errors():
            item = current_domain.repository_for(Item).get_by_locator(item_locator)
            review = current_domain.repository_for(Review).find_for(item.id, user_id)
        return review.rating.score if review else None

    def ratings_for_item(self, locator: str) -> list[ItemRatingEntry]:
        """Ratings of one item with their authors, newest first."""
        with storage_errors():
            item = current_domain.repository_for(Item).get_by_locator(locator)
            reviews = current_domain.repository_for(Review).for_item(item.id)
            users = {str(user.id): user for user in current_domain.repository_for(User).everything()}

        return [
            ItemRatingEntry(user=_card(users[str(review.user_id)]), rating=review.rating.score, rated_at=review.rated_at)
            for review in _newest_first(reviews)
            if str(review.user_id) in users
        ]

    def ratings_by_user(self, username: str) -> list[UserRatingEntry]:
        """Ratings given by one user with each item's standing, newest first."""
        with storage_errors():
            user = self._user_named(username)
            reviews = current_domain.repository_for(Review).snapshot()
            items = current_domain.repository_for(Item).everything()

        standings = compute_standings(items, reviews)
        return [
            UserRatingEntry(item=standings[str(review.item_id)], rating=review.rating.score, rated_at=review.rated_at)
            for review in _newest_first(reviews)
            if str(review.user_id) == str(user.id) and str(review.item_id) in standings
        ]

    def user_card(self, username: str) -> UserCard:
        with storage_errors():
            return _card(self._user_named(username))

    def hue_for(self, username: str) -> int:
        return hue(username)

    def _user_named(self, username: str) -> User:
        user = current_domain.repository_for(User).find_by_username(username)
        if user is None:
            raise ObjectNotFoundError({"user": [f"User '{username}' does not exist"]})
        return user
