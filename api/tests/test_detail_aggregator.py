"""Tests for the rating and comment section."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from glassheart.frontend.detail import DEFAULT_USER_NAME, DetailAggregator
from glassheart.targets import GalleryTarget, MemberTarget, PostTarget

COMMENT = {
    "id": 1,
    "content": "ok",
    "user_name": "x",
    "created_at": "2026-10-19T10:00:00",
    "post_id": 7,
    "member_id": None,
    "gallery_group": None,
}


def run(coro):
    return asyncio.run(coro)


def test_start_loads_rating_and_comments(fake_api):
    fake_api.route("GET", "/api/detail/post/7", {"avgRating": "4.5", "comments": [COMMENT]})

    async def scenario():
        async with fake_api.client() as client:
            detail = DetailAggregator(client, PostTarget(7))
            await detail.start()
            return detail

    detail = run(scenario())

    assert detail.avg_rating == 4.5
    assert [c.content for c in detail.comments] == ["ok"]


def test_failed_fetch_keeps_defaults(fake_api):
    fake_api.route("GET", "/api/detail/member/3", {"error": "boom"}, status=500)

    async def scenario():
        async with fake_api.client() as client:
            detail = DetailAggregator(client, MemberTarget(3))
            await detail.start()
            return detail

    detail = run(scenario())

    assert detail.avg_rating == 5.0
    assert detail.comments == []


def test_network_error_is_absorbed(fake_api):
    fake_api.route("GET", "/api/detail/member/3", httpx.ConnectError("refused"))

    async def scenario():
        async with fake_api.client() as client:
            detail = DetailAggregator(client, MemberTarget(3))
            await detail.refresh()
            return detail

    assert run(scenario()).avg_rating == 5.0


def test_malformed_payload_is_absorbed(fake_api):
    fake_api.route("GET", "/api/detail/post/7", {"comments": "nope"})

    async def scenario():
        async with fake_api.client() as client:
            detail = DetailAggregator(client, PostTarget(7))
            await detail.refresh()
            return detail

    detail = run(scenario())
    assert detail.avg_rating == 5.0
    assert detail.comments == []


def test_comment_clears_draft_then_refreshes_after_delay(fake_api):
    fake_api.route("GET", "/api/detail/gallery/ai", {"avgRating": "5.0", "comments": []})
    fake_api.route("POST", "/api/comments", {"success": True})

    async def scenario():
        async with fake_api.client() as client:
            detail = DetailAggregator(client, GalleryTarget("ai"), refresh_delay=0.01)
            detail.draft = "lovely"

            assert await detail.submit_comment() is True
            assert detail.draft == ""
            # The refresh is scheduled, not awaited
            assert fake_api.calls("GET", "/api/detail/gallery/ai") == []

            await detail.settle()

    run(scenario())

    posted = json.loads(fake_api.calls("POST", "/api/comments")[0].content)
    assert posted == {"gallery_group": "ai", "user_name": DEFAULT_USER_NAME, "content": "lovely"}
    assert len(fake_api.calls("GET", "/api/detail/gallery/ai")) == 1


def test_blank_comment_is_not_sent(fake_api):
    async def scenario():
        async with fake_api.client() as client:
            detail = DetailAggregator(client, PostTarget(7))
            detail.draft = "   "
            return await detail.submit_comment()

    assert run(scenario()) is False
    assert fake_api.requests == []


def test_rejected_comment_keeps_draft(fake_api):
    fake_api.route("POST", "/api/comments", {"error": "db down"}, status=500)

    async def scenario():
        async with fake_api.client() as client:
            detail = DetailAggregator(client, MemberTarget(3))
            detail.draft = "hello"
            ok = await detail.submit_comment(user_name="x")
            await detail.settle()
            return ok, detail

    ok, detail = run(scenario())

    assert ok is False
    assert detail.draft == "hello"
    assert fake_api.calls("GET", "/api/detail/member/3") == []


def test_rating_refreshes_immediately(fake_api):
    fake_api.route("POST", "/api/rate", {"success": True})
    fake_api.route("GET", "/api/detail/member/3", {"avgRating": "3.0", "comments": []})

    async def scenario():
        async with fake_api.client() as client:
            detail = DetailAggregator(client, MemberTarget(3))
            ok = await detail.rate(4)
            return ok, detail

    ok, detail = run(scenario())

    assert ok is True
    assert detail.avg_rating == 3.0
    posted = json.loads(fake_api.calls("POST", "/api/rate")[0].content)
    assert posted == {"target_id": "3", "target_type": "member", "rating": 4}


def test_failed_rating_skips_refresh(fake_api):
    fake_api.route("POST", "/api/rate", httpx.ReadTimeout("slow"))

    async def scenario():
        async with fake_api.client() as client:
            return await DetailAggregator(client, PostTarget(7)).rate(5)

    assert run(scenario()) is False
    assert fake_api.calls("GET", "/api/detail/post/7") == []


@pytest.mark.parametrize("value", [0, 6])
def test_rating_outside_choices(fake_api, value):
    async def scenario():
        async with fake_api.client() as client:
            await DetailAggregator(client, PostTarget(7)).rate(value)

    with pytest.raises(ValueError):
        run(scenario())


def test_close_cancels_in_flight_fetch(fake_api):
    fake_api.route("GET", "/api/detail/post/7", {"avgRating": "1.0", "comments": [COMMENT]})

    async def scenario():
        fake_api.gate = asyncio.Event()
        async with fake_api.client() as client:
            detail = DetailAggregator(client, PostTarget(7))
            task = detail.start()
            await asyncio.sleep(0)
            await detail.close()
            # A late response must not land on the closed component
            fake_api.gate.set()
            await asyncio.sleep(0)
            return task, detail

    task, detail = run(scenario())

    assert task.cancelled()
    assert detail.avg_rating == 5.0
    assert detail.comments == []


def test_close_cancels_delayed_refresh(fake_api):
    fake_api.route("POST", "/api/comments", {"success": True})
    fake_api.route("GET", "/api/detail/post/7", {"avgRating": "5.0", "comments": []})

    async def scenario():
        async with fake_api.client() as client:
            detail = DetailAggregator(client, PostTarget(7), refresh_delay=10)
            detail.draft = "bye"
            await detail.submit_comment()
            await detail.close()
            await detail.refresh()

    run(scenario())

    assert fake_api.calls("GET", "/api/detail/post/7") == []
