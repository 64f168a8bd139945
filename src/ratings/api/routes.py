"""FastAPI routes for the Ratings bounded context.

Writes translate Pydantic schemas into Protean commands; reads go through
``RatingBoard``, which computes standings on every request.
"""

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from ratings.api.schemas import (
    AddItemRequest,
    HueResponse,
    ItemIdResponse,
    ItemRatingResponse,
    ItemStandingResponse,
    OwnRatingResponse,
    RegisterUserRequest,
    SetAvatarRequest,
    StatusResponse,
    SubmitRatingRequest,
    UserCardResponse,
    UserIdResponse,
    UserRatingResponse,
)
from ratings.item.management import AddItem
from ratings.standings.board import RatingBoard
from ratings.user.avatar import SetAvatar
from ratings.user.registration import RegisterUser
from ratings.utils.storage import storage_errors

board = RatingBoard()

user_router = APIRouter(prefix="/users", tags=["users"])
item_router = APIRouter(prefix="/items", tags=["items"])
hue_router = APIRouter(prefix="/hues", tags=["hues"])


# --- User endpoints ---


@user_router.post("", status_code=201, response_model=UserIdResponse)
async def register_user(body: RegisterUserRequest) -> UserIdResponse:
    command = RegisterUser(
        username=body.username,
        password_hash=body.password_hash,
        is_admin=body.is_admin,
        has_avatar=body.has_avatar,
    )
    with storage_errors():
        user_id = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=user_id)


@user_router.get("/{username}", response_model=UserCardResponse)
async def get_user(username: str) -> UserCardResponse:
    return UserCardResponse.model_validate(board.user_card(username))


@user_router.get("/{username}/ratings", response_model=list[UserRatingResponse])
async def get_user_ratings(username: str) -> list[UserRatingResponse]:
    return [UserRatingResponse.model_validate(entry) for entry in board.ratings_by_user(username)]


@user_router.put("/{user_id}/avatar", response_model=StatusResponse)
async def set_avatar(user_id: str, body: SetAvatarRequest) -> StatusResponse:
    with storage_errors():
        current_domain.process(SetAvatar(user_id=user_id, has_avatar=body.has_avatar), asynchronous=False)
    return StatusResponse()


@user_router.delete("/{user_id}", response_model=StatusResponse)
async def remove_user(user_id: str) -> StatusResponse:
    board.delete_user_cascade(user_id)
    return StatusResponse()


# --- Item endpoints ---


@item_router.post("", status_code=201, response_model=ItemIdResponse)
async def add_item(body: AddItemRequest) -> ItemIdResponse:
    command = AddItem(locator=body.locator, title=body.title, description=body.description)
    with storage_errors():
        item_id = current_domain.process(command, asynchronous=False)
    return ItemIdResponse(item_id=item_id)


@item_router.get("", response_model=list[ItemStandingResponse])
async def list_items() -> list[ItemStandingResponse]:
    return [ItemStandingResponse.model_validate(standing) for standing in board.list_standings()]


@item_router.get("/{locator}", response_model=ItemStandingResponse)
async def get_item(locator: str) -> ItemStandingResponse:
    return ItemStandingResponse.model_validate(board.standing_for(locator))


@item_router.delete("/{item_id}", response_model=StatusResponse)
async def remove_item(item_id: str) -> StatusResponse:
    board.delete_item_cascade(item_id)
    return StatusResponse()


@item_router.get("/{locator}/ratings", response_model=list[ItemRatingResponse])
async def get_item_ratings(locator: str) -> list[ItemRatingResponse]:
    return [ItemRatingResponse.model_validate(entry) for entry in board.ratings_for_item(locator)]


@item_router.get("/{locator}/rating", response_model=OwnRatingResponse)
async def get_own_rating(locator: str, user_id: str = Query(...)) -> OwnRatingResponse:
    return OwnRatingResponse(rating=board.rating_of(locator, user_id))


@item_router.put("/{locator}/rating", response_model=ItemStandingResponse)
async def submit_rating(locator: str, body: SubmitRatingRequest) -> ItemStandingResponse:
    """Rate an item (or replace an earlier rating) and return its new standing."""
    board.submit_rating(locator, body.user_id, body.rating)
    return ItemStandingResponse.model_validate(board.standing_for(locator))


@item_router.delete("/{locator}/rating", response_model=StatusResponse)
async def withdraw_rating(locator: str, user_id: str = Query(...)) -> StatusResponse:
    board.withdraw_rating(locator, user_id)
    return StatusResponse()


# --- Hue endpoint ---


@hue_router.get("/{username}", response_model=HueResponse)
async def get_hue(username: str) -> HueResponse:
    return HueResponse(username=username, hue=board.hue_for(username))
