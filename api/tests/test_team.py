"""Test team and gallery read endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from glassheart.models import GalleryImage, Member, Post


@pytest.fixture
def two_groups(db: Session) -> None:
    """Members, posts and gallery pictures split across the ai and anime groups."""
    db.add_all([
        Member(name="Lin", role="Lead", avatar_url="/uploads/lin.png", group_type="ai"),
        Member(name="Kai", role="Engineer", group_type="ai"),
        Member(name="Mio", role="Animator", group_type="anime"),
        Post(title="Vision model", content="A model", media_url="https://cdn.example.com/v.png", group_type="ai"),
        Post(title="Short film", content="A film", media_url="/uploads/film.mp4", media_type="video", group_type="anime"),
        GalleryImage(image_url="/uploads/g1.png", group_name="ai"),
        GalleryImage(image_url="/uploads/g2.png", group_name="ai"),
        GalleryImage(image_url="/uploads/g3.png", group_name="anime"),
    ])
    db.commit()


def test_team_returns_only_matching_group(client: TestClient, two_groups):
    response = client.get("/api/team/ai")

    assert response.status_code == 200
    data = response.json()
    assert [m["name"] for m in data["members"]] == ["Lin", "Kai"]
    assert [p["title"] for p in data["posts"]] == ["Vision model"]
    assert all(m["group_type"] == "ai" for m in data["members"])
    assert all(p["group_type"] == "ai" for p in data["posts"])


def test_team_member_fields(client: TestClient, two_groups):
    member = client.get("/api/team/ai").json()["members"][0]

    assert set(member) == {"id", "name", "role", "avatar_url", "intro", "work_detail", "group_type"}
    assert member["avatar_url"] == "/uploads/lin.png"


def test_team_unknown_group_is_empty(client: TestClient, two_groups):
    response = client.get("/api/team/music")

    assert response.status_code == 200
    assert response.json() == {"members": [], "posts": []}


def test_post_media_type_round_trips(client: TestClient, two_groups):
    posts = client.get("/api/team/anime").json()["posts"]

    assert posts[0]["media_type"] == "video"


def test_gallery_newest_first(client: TestClient, two_groups):
    response = client.get("/api/gallery/ai")

    assert response.status_code == 200
    rows = response.json()
    assert [r["image_url"] for r in rows] == ["/uploads/g2.png", "/uploads/g1.png"]
    assert rows[0]["id"] > rows[1]["id"]
    assert all(r["group_name"] == "ai" for r in rows)


def test_gallery_unknown_group_is_empty(client: TestClient, two_groups):
    response = client.get("/api/gallery/music")

    assert response.status_code == 200
    assert response.json() == []
