"""Project upload endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .. import models, schemas
from ..deps import get_db

router = APIRouter(tags=["Posts"])
logger = logging.getLogger(__name__)


@router.post("/upload-post", response_model=schemas.SuccessResponse)
def upload_post(
    payload: schemas.PostCreate,
    db: Session = Depends(get_db),
) -> schemas.SuccessResponse:
    """
    Create a team post from the upload form.

    The form sends no media type, so the stored post keeps the column
    default ("image").
    """
    post = models.Post(
        title=payload.title,
        content=payload.content,
        media_url=payload.media_url,
        group_type=payload.group_type,
    )
    db.add(post)
    db.commit()
    logger.info(f"Post {post.id} uploaded to group {post.group_type}")
    return schemas.SuccessResponse()
