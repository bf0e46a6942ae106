"""Comment and rating targets.

A target is one of a member, a post or a whole gallery group. On the wire it
shows up in two shapes: a ``(type, id)`` pair (detail and rating endpoints)
and three nullable comment columns. Both shapes are parsed here so an
ambiguous or empty target never reaches the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union


class InvalidTarget(ValueError):
    """Raised when a wire value does not name exactly one target."""


@dataclass(frozen=True)
class MemberTarget:
    id: int

    kind: ClassVar[str] = "member"
    comment_field: ClassVar[str] = "member_id"

    @property
    def key(self) -> str:
        return str(self.id)


@dataclass(frozen=True)
class PostTarget:
    id: int

    kind: ClassVar[str] = "post"
    comment_field: ClassVar[str] = "post_id"

    @property
    def key(self) -> str:
        return str(self.id)


@dataclass(frozen=True)
class GalleryTarget:
    group: str

    kind: ClassVar[str] = "gallery"
    comment_field: ClassVar[str] = "gallery_group"

    @property
    def key(self) -> str:
        return self.group


Target = Union[MemberTarget, PostTarget, GalleryTarget]


def _parse_id(value: Any, kind: str) -> int:
    if isinstance(value, bool):
        raise InvalidTarget(f"Invalid {kind} id: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value)
    raise InvalidTarget(f"Invalid {kind} id: {value!r}")


def from_type(target_type: str, target_id: Any) -> Target:
    """Build a target from the ``(type, id)`` wire pair."""
    if target_type == GalleryTarget.kind:
        group = str(target_id).strip() if target_id is not None else ""
        if not group:
            raise InvalidTarget("Gallery group must not be empty")
        return GalleryTarget(group)
    if target_type == MemberTarget.kind:
        return MemberTarget(_parse_id(target_id, target_type))
    if target_type == PostTarget.kind:
        return PostTarget(_parse_id(target_id, target_type))
    raise InvalidTarget(f"Unknown target type: {target_type!r}")


def from_comment_fields(
    post_id: Any = None,
    member_id: Any = None,
    gallery_group: Any = None,
) -> Target:
    """Build a target from the three comment columns; exactly one must be set."""
    # Empty strings and zero ids count as unset
    provided = {
        name: value
        for name, value in (
            (PostTarget.kind, post_id),
            (MemberTarget.kind, member_id),
            (GalleryTarget.kind, gallery_group),
        )
        if value not in (None, "", 0)
    }
    if len(provided) != 1:
        raise InvalidTarget(
            "Exactly one of post_id, member_id, gallery_group must be set"
        )
    (kind, value), = provided.items()
    return from_type(kind, value)


def comment_fields(target: Target) -> dict[str, Any]:
    """Comment columns for a target, with the unused ones set to None."""
    fields: dict[str, Any] = {"post_id": None, "member_id": None, "gallery_group": None}
    if isinstance(target, GalleryTarget):
        fields["gallery_group"] = target.group
    else:
        fields[target.comment_field] = target.id
    return fields
