from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# BASE SCHEMAS
# ============================================================================


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    error: str


class SuccessResponse(BaseModel):
    """Acknowledgement returned by write endpoints."""

    success: bool = True


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok"] = "ok"
    uptime_s: float | None = None


# ============================================================================
# CONTENT SCHEMAS
# ============================================================================


class Member(BaseModel):
    """Team member profile."""

    id: int
    name: str
    role: str | None = None
    avatar_url: str | None = None
    intro: str | None = None
    work_detail: str | None = None
    group_type: str

    model_config = ConfigDict(from_attributes=True)


class Post(BaseModel):
    """Team production."""

    id: int
    title: str
    content: str | None = None
    media_url: str | None = None
    media_type: Literal["image", "video"] = "image"
    group_type: str

    model_config = ConfigDict(from_attributes=True)


class PostCreate(BaseModel):
    """Upload form payload. The form has no media type field."""

    title: str = Field(..., min_length=1, max_length=200)
    content: str | None = None
    media_url: str | None = Field(None, max_length=500)
    group_type: str = Field(..., min_length=1, max_length=50)


class GalleryImage(BaseModel):
    """Gallery picture."""

    id: int
    image_url: str
    group_name: str

    model_config = ConfigDict(from_attributes=True)


class TeamResponse(BaseModel):
    """Members and posts of one group."""

    members: list[Member]
    posts: list[Post]


# ============================================================================
# INTERACTION SCHEMAS
# ============================================================================


class Comment(BaseModel):
    """Stored comment."""

    id: int
    content: str
    user_name: str
    created_at: datetime
    post_id: int | None = None
    member_id: int | None = None
    gallery_group: str | None = None

    model_config = ConfigDict(from_attributes=True)


class CommentCreate(BaseModel):
    """Comment payload; exactly one of the target fields must be set."""

    post_id: int | None = None
    member_id: int | None = None
    gallery_group: str | None = Field(None, max_length=50)
    user_name: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1)


class RatingCreate(BaseModel):
    """Rating payload. The value range is not enforced."""

    target_id: int | str
    target_type: str
    rating: int


class DetailResponse(BaseModel):
    """Average rating and comments for one target."""

    avg_rating: str = Field(..., alias="avgRating")
    comments: list[Comment]

    model_config = ConfigDict(populate_by_name=True)
