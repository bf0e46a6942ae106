from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .db import Base


# ============================================================================
# SHOWCASE CONTENT
# ============================================================================


class Member(Base):
    """Team member profile. Rows are maintained directly in the store or by the seed loader."""

    __tablename__ = "team_members"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False)
    role = Column(String(100), nullable=True)
    avatar_url = Column(String(500), nullable=True)
    intro = Column(Text, nullable=True)
    work_detail = Column(Text, nullable=True)
    group_type = Column(String(50), nullable=False, index=True)  # "ai", "anime", ...

    comments = relationship("Comment", back_populates="member")


class Post(Base):
    """Team production (project). Immutable once created."""

    __tablename__ = "team_posts"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=True)
    media_url = Column(String(500), nullable=True)
    media_type = Column(
        String(10), nullable=False, default="image", server_default="image"
    )  # "image" | "video"
    group_type = Column(String(50), nullable=False, index=True)

    comments = relationship("Comment", back_populates="post")


class GalleryImage(Base):
    """Read-only gallery picture belonging to a group."""

    __tablename__ = "gallery"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    image_url = Column(String(500), nullable=False)
    group_name = Column(String(50), nullable=False, index=True)


# ============================================================================
# INTERACTIONS
# ============================================================================


class Comment(Base):
    """Anonymous comment on exactly one target: a post, a member or a gallery group."""

    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    post_id = Column(Integer, ForeignKey("team_posts.id"), nullable=True, index=True)
    member_id = Column(Integer, ForeignKey("team_members.id"), nullable=True, index=True)
    gallery_group = Column(String(50), nullable=True, index=True)

    user_name = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)

    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), index=True
    )

    # Relationships
    post = relationship("Post", back_populates="comments")
    member = relationship("Member", back_populates="comments")


class Rating(Base):
    """Append-only rating sample. Averages are computed on read."""

    __tablename__ = "ratings"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    # Member/post ids are stored as text so gallery group names share the column
    target_id = Column(String(64), nullable=False)
    target_type = Column(String(20), nullable=False)  # "member" | "post" | "gallery"
    rating = Column(Integer, nullable=False)

    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), index=True
    )

    __table_args__ = (Index("ix_ratings_target", target_type, target_id),)
