"""Render-ready view models for members, posts and gallery pictures."""

from __future__ import annotations

from dataclasses import dataclass

from .. import schemas
from .media import API_MOUNT, resolve_media_url


@dataclass(frozen=True)
class MemberCard:
    id: int
    name: str
    role: str
    avatar_src: str
    intro: str
    work_detail: str


@dataclass(frozen=True)
class PostCard:
    id: int
    title: str
    content: str
    media_src: str
    is_video: bool


def member_card(member: schemas.Member, mount: str = API_MOUNT) -> MemberCard:
    return MemberCard(
        id=member.id,
        name=member.name,
        role=member.role or "",
        avatar_src=resolve_media_url(member.avatar_url, mount),
        intro=member.intro or "",
        work_detail=member.work_detail or "",
    )


def post_card(post: schemas.Post, mount: str = API_MOUNT) -> PostCard:
    # Only an explicit "video" renders a player; uploads never set it
    return PostCard(
        id=post.id,
        title=post.title,
        content=post.content or "",
        media_src=resolve_media_url(post.media_url, mount),
        is_video=post.media_type == "video",
    )


def gallery_sources(images: list[schemas.GalleryImage], mount: str = API_MOUNT) -> list[str]:
    return [resolve_media_url(image.image_url, mount) for image in images]
