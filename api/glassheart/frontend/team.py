"""Team page: members, productions and the gallery entry point of one group."""

from __future__ import annotations

import asyncio
import enum
import logging

from .. import schemas
from .api_client import CLIENT_ERRORS, ShowcaseClient
from .cards import MemberCard, PostCard, gallery_sources, member_card, post_card
from .component import Component
from .upload import UploadForm

logger = logging.getLogger(__name__)

# More posts than this switch the production list to a grid
GRID_THRESHOLD = 4


class Layout(str, enum.Enum):
    GRID = "grid"
    LIST = "list"


def select_layout(post_count: int) -> Layout:
    return Layout.GRID if post_count > GRID_THRESHOLD else Layout.LIST


class TeamView(Component):
    """Loads a group's team data and gallery independently of each other."""

    def __init__(self, client: ShowcaseClient, group: str):
        super().__init__()
        self.client = client
        self.group = group
        self.team: schemas.TeamResponse | None = None
        self.gallery: list[schemas.GalleryImage] = []

    @property
    def loaded(self) -> bool:
        return self.team is not None

    @property
    def members(self) -> list[schemas.Member]:
        return self.team.members if self.team else []

    @property
    def posts(self) -> list[schemas.Post]:
        return self.team.posts if self.team else []

    @property
    def layout(self) -> Layout | None:
        """Derived on every access; None while the team data is still loading."""
        if not self.loaded:
            return None
        return select_layout(len(self.posts))

    @property
    def has_gallery(self) -> bool:
        return bool(self.gallery)

    def member_cards(self) -> list[MemberCard]:
        return [member_card(m, self.client.api_prefix) for m in self.members]

    def post_cards(self) -> list[PostCard]:
        return [post_card(p, self.client.api_prefix) for p in self.posts]

    def gallery_sources(self) -> list[str]:
        return gallery_sources(self.gallery, self.client.api_prefix)

    def start(self) -> asyncio.Task:
        return self.spawn(self.load())

    async def reload(self) -> None:
        await self.run(self.load())

    async def load(self) -> None:
        await asyncio.gather(self._load_team(), self._load_gallery())

    async def _load_team(self) -> None:
        try:
            self.team = await self.client.get_team(self.group)
        except CLIENT_ERRORS as e:
            logger.error(f"Failed to load team {self.group}: {e}")

    async def _load_gallery(self) -> None:
        try:
            self.gallery = await self.client.get_gallery(self.group)
        except CLIENT_ERRORS as e:
            logger.error(f"Failed to load gallery {self.group}: {e}")

    def upload_form(self) -> UploadForm:
        """Upload form preset to this group; a successful upload reloads the page data."""
        return UploadForm(self.client, default_group=self.group, on_success=self.reload)
