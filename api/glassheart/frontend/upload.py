"""Project upload form."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from .api_client import CLIENT_ERRORS, ShowcaseClient

logger = logging.getLogger(__name__)

DEFAULT_GROUP = "ai"
REQUIRED_FIELDS = ("title", "media_url", "content")


class UploadForm:
    """
    Form state for submitting a new team post.

    There is deliberately no media type field: uploaded posts render as images.
    """

    def __init__(
        self,
        client: ShowcaseClient,
        default_group: str | None = None,
        on_success: Callable[[], Awaitable[None]] | None = None,
    ):
        self.client = client
        self.default_group = default_group or DEFAULT_GROUP
        self.on_success = on_success
        self.reset()

    def reset(self) -> None:
        self.title = ""
        self.content = ""
        self.media_url = ""
        self.group_type = self.default_group

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not getattr(self, name).strip()]

    async def submit(self) -> bool:
        missing = self.missing_fields()
        if missing:
            logger.info(f"Upload form incomplete, missing: {', '.join(missing)}")
            return False

        try:
            await self.client.upload_post(
                title=self.title,
                content=self.content,
                media_url=self.media_url,
                group_type=self.group_type,
            )
        except CLIENT_ERRORS as e:
            logger.error(f"Upload failed: {e}")
            return False

        logger.info(f"Uploaded project {self.title!r} to group {self.group_type}")
        self.reset()
        if self.on_success is not None:
            await self.on_success()
        return True
