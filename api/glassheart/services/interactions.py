"""Rating and comment queries shared by the detail and write endpoints."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from .. import models
from ..targets import GalleryTarget, Target, comment_fields

logger = logging.getLogger(__name__)

DEFAULT_AVG_RATING = "5.0"


def format_average(value) -> str:
    """
    Format an average rating to one decimal, rounding halves up.

    Returns the default display value when there is no rating data.
    """
    if value is None:
        return DEFAULT_AVG_RATING
    # str() first so binary floats (SQLite) and Decimals (Postgres) round alike
    return str(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def average_rating(db: Session, target: Target) -> str:
    """Mean of all rating samples recorded for the target."""
    avg = (
        db.query(func.avg(models.Rating.rating))
        .filter(
            models.Rating.target_id == target.key,
            models.Rating.target_type == target.kind,
        )
        .scalar()
    )
    return format_average(avg)


def list_comments(db: Session, target: Target) -> list[models.Comment]:
    """
    Comments for a target, newest first.

    A gallery group collects its own comments plus every comment on a member
    or post of that group.
    """
    query = db.query(models.Comment)
    if isinstance(target, GalleryTarget):
        query = (
            query.outerjoin(models.Member, models.Comment.member_id == models.Member.id)
            .outerjoin(models.Post, models.Comment.post_id == models.Post.id)
            .filter(
                or_(
                    models.Comment.gallery_group == target.group,
                    models.Member.group_type == target.group,
                    models.Post.group_type == target.group,
                )
            )
        )
    else:
        column = getattr(models.Comment, target.comment_field)
        query = query.filter(column == target.id)

    return query.order_by(models.Comment.created_at.desc(), models.Comment.id.desc()).all()


def add_comment(db: Session, target: Target, user_name: str, content: str) -> models.Comment:
    comment = models.Comment(user_name=user_name, content=content, **comment_fields(target))
    db.add(comment)
    db.commit()
    logger.info(f"Comment {comment.id} added to {target.kind} {target.key}")
    return comment


def add_rating(db: Session, target: Target, value: int) -> models.Rating:
    """Record one anonymous rating sample; values are stored as given."""
    rating = models.Rating(target_id=target.key, target_type=target.kind, rating=value)
    db.add(rating)
    db.commit()
    logger.info(f"Rating {value} recorded for {target.kind} {target.key}")
    return rating
