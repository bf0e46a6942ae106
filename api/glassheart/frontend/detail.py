"""Rating and comment section shown under every profile and gallery grid."""

from __future__ import annotations

import asyncio
import logging

from .. import schemas
from ..targets import Target
from .api_client import CLIENT_ERRORS, ShowcaseClient
from .component import Component

logger = logging.getLogger(__name__)

DEFAULT_RATING = 5.0
DEFAULT_USER_NAME = "Anonymous Researcher"
RATING_CHOICES = range(1, 6)

# Delay before re-reading comments after a successful post
COMMENT_REFRESH_DELAY = 0.1


class DetailAggregator(Component):
    """
    Average rating and comment list for one target.

    Fetches on start and after each successful submission. Failed fetches
    keep the previous state (5.0 and no comments until something loads).
    """

    def __init__(
        self,
        client: ShowcaseClient,
        target: Target,
        refresh_delay: float = COMMENT_REFRESH_DELAY,
    ):
        super().__init__()
        self.client = client
        self.target = target
        self.refresh_delay = refresh_delay
        self.avg_rating: float = DEFAULT_RATING
        self.comments: list[schemas.Comment] = []
        self.draft = ""

    def start(self) -> asyncio.Task:
        return self.spawn(self._fetch())

    async def refresh(self) -> None:
        await self.run(self._fetch())

    async def _fetch(self) -> None:
        try:
            detail = await self.client.get_detail(self.target)
            avg_rating = float(detail.avg_rating) if detail.avg_rating else DEFAULT_RATING
        except CLIENT_ERRORS as e:
            logger.error(f"Failed to refresh {self.target.kind} {self.target.key}: {e}")
            return
        self.avg_rating = avg_rating
        self.comments = detail.comments

    async def _refresh_later(self) -> None:
        await asyncio.sleep(self.refresh_delay)
        await self._fetch()

    async def submit_comment(self, user_name: str = DEFAULT_USER_NAME) -> bool:
        """
        Post the current draft. Blank drafts are ignored.

        On success the draft is cleared at once and the comment list is
        re-read after ``refresh_delay`` instead of trusting the insert.
        """
        content = self.draft
        if not content.strip():
            return False

        try:
            await self.client.post_comment(self.target, user_name, content)
        except CLIENT_ERRORS as e:
            logger.error(f"Failed to post comment on {self.target.kind} {self.target.key}: {e}")
            return False

        self.draft = ""
        if not self.closed:
            self.spawn(self._refresh_later())
        return True

    async def rate(self, value: int) -> bool:
        if value not in RATING_CHOICES:
            raise ValueError(f"Rating must be between 1 and 5, got {value}")

        try:
            await self.client.post_rating(self.target, value)
        except CLIENT_ERRORS as e:
            logger.error(f"Failed to rate {self.target.kind} {self.target.key}: {e}")
            return False

        await self.refresh()
        return True
