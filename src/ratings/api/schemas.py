"""Pydantic request/response schemas for the Ratings API.

These are separate from Protean commands (anti-corruption pattern). Rating
values are deliberately left unconstrained here: the accepted bound is a
domain setting, enforced by the ``Rating`` value object.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class RegisterUserRequest(BaseModel):
    username: str = Field(max_length=64)
    password_hash: str = Field(max_length=255)
    is_admin: bool = False
    has_avatar: bool = False


class SetAvatarRequest(BaseModel):
    has_avatar: bool


class AddItemRequest(BaseModel):
    locator: str = Field(max_length=100)
    title: str = Field(max_length=255)
    description: str


class SubmitRatingRequest(BaseModel):
    user_id: str
    rating: int


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class UserIdResponse(BaseModel):
    user_id: str


class ItemIdResponse(BaseModel):
    item_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class HueResponse(BaseModel):
    username: str
    hue: int


class OwnRatingResponse(BaseModel):
    rating: int | None = None


class ItemStandingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    item_id: str
    locator: str
    title: str
    description: str
    score: float
    review_count: int
    rank: int
    popularity: int


class UserCardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    username: str
    is_admin: bool
    has_avatar: bool
    avatar_hue: int


class ItemRatingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user: UserCardResponse
    rating: int
    rated_at: datetime


class UserRatingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    item: ItemStandingResponse
    rating: int
    rated_at: datetime
