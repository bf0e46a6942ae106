"""Team and gallery read endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .. import models, schemas
from ..deps import get_db

router = APIRouter(tags=["Team"])


@router.get("/team/{group}", response_model=schemas.TeamResponse)
def get_team(group: str, db: Session = Depends(get_db)) -> schemas.TeamResponse:
    """
    Members and posts of a group.

    Unpaginated; groups are small.
    """
    members = (
        db.query(models.Member)
        .filter(models.Member.group_type == group)
        .order_by(models.Member.id.asc())
        .all()
    )
    posts = (
        db.query(models.Post)
        .filter(models.Post.group_type == group)
        .order_by(models.Post.id.asc())
        .all()
    )
    return schemas.TeamResponse(
        members=[schemas.Member.model_validate(m) for m in members],
        posts=[schemas.Post.model_validate(p) for p in posts],
    )


@router.get("/gallery/{group}", response_model=list[schemas.GalleryImage])
def get_gallery(group: str, db: Session = Depends(get_db)) -> list[schemas.GalleryImage]:
    """Gallery pictures of a group, newest first."""
    rows = (
        db.query(models.GalleryImage)
        .filter(models.GalleryImage.group_name == group)
        .order_by(models.GalleryImage.id.desc())
        .all()
    )
    return [schemas.GalleryImage.model_validate(r) for r in rows]
