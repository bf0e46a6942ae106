"""Front-end shell: owns the navigation state and the components of the current screen."""

from __future__ import annotations

import logging

from .. import schemas
from ..targets import GalleryTarget, MemberTarget, PostTarget, Target
from .api_client import ShowcaseClient
from .cards import MemberCard, PostCard, gallery_sources, member_card, post_card
from .detail import COMMENT_REFRESH_DELAY, DetailAggregator
from .navigation import (
    INITIAL_STATE,
    Back,
    Enter,
    Event,
    Screen,
    SelectItem,
    SelectUnit,
    SubType,
    ViewState,
    transition,
)
from .team import TeamView

logger = logging.getLogger(__name__)


def detail_target(state: ViewState) -> Target | None:
    """Target whose ratings and comments the current screen shows, if any."""
    if state.screen is Screen.GALLERY_GRID:
        return GalleryTarget(state.group)
    if state.screen is Screen.PROFILE:
        if state.sub_type is SubType.MEMBER:
            return MemberTarget(state.sub_item.id)
        return PostTarget(state.sub_item.id)
    return None


class ShowcaseApp:
    """
    Drives navigation and mounts one component per screen.

    Leaving a screen closes its components, which cancels their pending
    fetches. Mounting starts fetches in the background; ``dispatch`` never
    waits for them.
    """

    def __init__(self, client: ShowcaseClient, refresh_delay: float = COMMENT_REFRESH_DELAY):
        self.client = client
        self.refresh_delay = refresh_delay
        self.state: ViewState = INITIAL_STATE
        self.team_view: TeamView | None = None
        self.detail: DetailAggregator | None = None

    @property
    def screen(self) -> Screen:
        return self.state.screen

    async def dispatch(self, event: Event) -> ViewState:
        # Validate first so an illegal event leaves the mounted components alone
        new_state = transition(self.state, event)
        await self._unmount()
        logger.debug(f"Navigation: {self.state.screen.value} -> {new_state.screen.value}")
        self.state = new_state
        self._mount()
        return new_state

    def _mount(self) -> None:
        screen = self.state.screen
        if screen is Screen.TEAM:
            self.team_view = TeamView(self.client, self.state.group)
            self.team_view.start()
            return

        target = detail_target(self.state)
        if target is not None:
            self.detail = DetailAggregator(self.client, target, refresh_delay=self.refresh_delay)
            self.detail.start()

    async def _unmount(self) -> None:
        if self.team_view is not None:
            await self.team_view.close()
            self.team_view = None
        if self.detail is not None:
            await self.detail.close()
            self.detail = None

    async def close(self) -> None:
        await self._unmount()

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------

    async def enter(self) -> ViewState:
        return await self.dispatch(Enter())

    async def select_unit(self, unit: str) -> ViewState:
        return await self.dispatch(SelectUnit(unit))

    async def select_member(self, member: schemas.Member) -> ViewState:
        return await self.dispatch(SelectItem(member, SubType.MEMBER))

    async def select_post(self, post: schemas.Post) -> ViewState:
        return await self.dispatch(SelectItem(post, SubType.POST))

    async def open_gallery(self) -> ViewState:
        """Open the gallery grid with the pictures the team page has loaded."""
        gallery = list(self.team_view.gallery) if self.team_view else []
        return await self.dispatch(SelectItem(gallery, SubType.GALLERY_GROUP))

    async def back(self) -> ViewState:
        return await self.dispatch(Back())

    def profile_card(self) -> MemberCard | PostCard | None:
        if self.screen is not Screen.PROFILE:
            return None
        if self.state.sub_type is SubType.MEMBER:
            return member_card(self.state.sub_item, self.client.api_prefix)
        return post_card(self.state.sub_item, self.client.api_prefix)

    def gallery_grid_sources(self) -> list[str]:
        if self.screen is not Screen.GALLERY_GRID:
            return []
        return gallery_sources(self.state.sub_item, self.client.api_prefix)
