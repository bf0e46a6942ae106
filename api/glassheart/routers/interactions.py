"""Detail, comment and rating endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from .. import schemas, targets
from ..deps import get_db
from ..services import interactions

router = APIRouter(tags=["Interactions"])


@router.get("/detail/{type}/{id}", response_model=schemas.DetailResponse)
def get_detail(type: str, id: str, db: Session = Depends(get_db)) -> schemas.DetailResponse:
    """
    Average rating and comments for a member, a post or a gallery group.

    For ``gallery`` the id is the group name and the comment list covers the
    whole group.
    """
    try:
        target = targets.from_type(type, id)
    except targets.InvalidTarget as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    avg_rating = interactions.average_rating(db, target)
    comments = interactions.list_comments(db, target)
    return schemas.DetailResponse(
        avg_rating=avg_rating,
        comments=[schemas.Comment.model_validate(c) for c in comments],
    )


@router.post("/comments", response_model=schemas.SuccessResponse)
def create_comment(
    payload: schemas.CommentCreate,
    db: Session = Depends(get_db),
) -> schemas.SuccessResponse:
    """
    Create an anonymous comment on exactly one target.

    Exactly one of post_id, member_id and gallery_group must be set. A body
    with none of them, or with more than one, is rejected with 400.
    """
    try:
        target = targets.from_comment_fields(
            post_id=payload.post_id,
            member_id=payload.member_id,
            gallery_group=payload.gallery_group,
        )
    except targets.InvalidTarget as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    interactions.add_comment(db, target, payload.user_name, payload.content)
    return schemas.SuccessResponse()


@router.post("/rate", response_model=schemas.SuccessResponse)
def create_rating(
    payload: schemas.RatingCreate,
    db: Session = Depends(get_db),
) -> schemas.SuccessResponse:
    """
    Record a rating sample. No per-visitor deduplication.

    target_type must be member, post or gallery, and member and post ids must
    be integers; anything else is rejected with 400. The rating value itself
    is stored as sent.
    """
    try:
        target = targets.from_type(payload.target_type, payload.target_id)
    except targets.InvalidTarget as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    interactions.add_rating(db, target, payload.rating)
    return schemas.SuccessResponse()
