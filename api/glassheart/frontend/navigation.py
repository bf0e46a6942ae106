"""
Front-end navigation as a finite state machine.

``transition(state, event)`` is the only way to move between screens. The
table below lists every legal ``(screen, event)`` pair; anything else raises
``InvalidTransition`` instead of producing a half-valid state.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Union


class Page(str, enum.Enum):
    WELCOME = "welcome"
    HUB = "hub"
    OVERVIEW = "overview"
    TEAM = "team"


class SubType(str, enum.Enum):
    MEMBER = "member"
    POST = "post"
    GALLERY_GROUP = "gallery_group"


class Screen(str, enum.Enum):
    """What is actually rendered for a state."""

    WELCOME = "welcome"
    HUB = "hub"
    OVERVIEW = "overview"
    TEAM = "team"
    PROFILE = "profile"
    GALLERY_GRID = "gallery_grid"


@dataclass(frozen=True)
class Unit:
    id: str
    title: str
    subtitle: str


# Entries of the hub; every id except "overview" is a group key
HUB_UNITS = (
    Unit("overview", "Laboratory Overview", "Lab mission and introduction"),
    Unit("anime", "Animation Unit", "Animation production group"),
    Unit("ai", "Light AI Unit", "AI research group"),
)


class InvalidTransition(Exception):
    """Raised for an event that has no meaning on the current screen."""


# ============================================================================
# STATE & EVENTS
# ============================================================================


@dataclass(frozen=True)
class ViewState:
    page: Page = Page.WELCOME
    group: str | None = None
    sub_item: Any = None
    sub_type: SubType | None = None

    @property
    def screen(self) -> Screen:
        if self.page is not Page.TEAM:
            return Screen(self.page.value)
        if self.sub_type is None:
            return Screen.TEAM
        if self.sub_type is SubType.GALLERY_GROUP:
            return Screen.GALLERY_GRID
        return Screen.PROFILE


INITIAL_STATE = ViewState()


@dataclass(frozen=True)
class Enter:
    pass


@dataclass(frozen=True)
class SelectUnit:
    unit: str


@dataclass(frozen=True)
class SelectItem:
    item: Any
    sub_type: SubType


@dataclass(frozen=True)
class Back:
    pass


Event = Union[Enter, SelectUnit, SelectItem, Back]


# ============================================================================
# TRANSITIONS
# ============================================================================


def _to_hub(state: ViewState, event: Event) -> ViewState:
    return ViewState(Page.HUB)


def _select_unit(state: ViewState, event: SelectUnit) -> ViewState:
    unit = event.unit.strip()
    if unit == Page.OVERVIEW.value:
        return ViewState(Page.OVERVIEW)
    if not unit or unit in (Page.WELCOME.value, Page.HUB.value):
        raise InvalidTransition(f"Not a selectable unit: {event.unit!r}")
    return ViewState(Page.TEAM, group=unit)


def _select_item(state: ViewState, event: SelectItem) -> ViewState:
    return ViewState(
        Page.TEAM,
        group=state.group,
        sub_item=event.item,
        sub_type=SubType(event.sub_type),
    )


def _close_detail(state: ViewState, event: Event) -> ViewState:
    return ViewState(Page.TEAM, group=state.group)


TRANSITIONS: dict[tuple[Screen, type], Callable[[ViewState, Any], ViewState]] = {
    (Screen.WELCOME, Enter): _to_hub,
    (Screen.HUB, SelectUnit): _select_unit,
    (Screen.OVERVIEW, Back): _to_hub,
    (Screen.TEAM, SelectItem): _select_item,
    (Screen.TEAM, Back): _to_hub,
    (Screen.PROFILE, Back): _close_detail,
    (Screen.GALLERY_GRID, Back): _close_detail,
}


def transition(state: ViewState, event: Event) -> ViewState:
    handler = TRANSITIONS.get((state.screen, type(event)))
    if handler is None:
        raise InvalidTransition(
            f"{type(event).__name__} is not allowed on the {state.screen.value} screen"
        )
    return handler(state, event)
