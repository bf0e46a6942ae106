from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path
from typing import Any, Generator

# Point the app at a throwaway SQLite database before anything imports glassheart.db
_TMP_DIR = Path(tempfile.mkdtemp(prefix="glassheart-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"
os.environ["UPLOADS_DIR"] = str(_TMP_DIR / "uploads")
os.environ.pop("SEED_FILE", None)

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from glassheart import models
from glassheart.db import SessionLocal
from glassheart.frontend.api_client import ShowcaseClient
from glassheart.main import app, run_startup_tasks


@pytest.fixture(scope="session", autouse=True)
def bootstrap() -> None:
    run_startup_tasks()


@pytest.fixture(autouse=True)
def clean_tables() -> Generator[None, None, None]:
    """Start every test from empty tables."""
    yield
    session = SessionLocal()
    try:
        for model in (models.Comment, models.Rating, models.Post, models.Member, models.GalleryImage):
            session.query(model).delete()
        session.commit()
    finally:
        session.close()


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db() -> Generator[Session, None, None]:
    """Create a database session for testing."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture()
def uploads_dir() -> Path:
    return _TMP_DIR / "uploads"


class FakeApi:
    """
    In-memory stand-in for the HTTP API, plugged in through ``httpx.MockTransport``.

    Routes map ``(method, path)`` to ``(status, payload)``. A payload may be a
    callable taking the request, or an exception instance to raise. Setting
    ``gate`` to an ``asyncio.Event`` holds every response until it is set.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.gate: asyncio.Event | None = None

    def route(self, method: str, path: str, payload: Any = None, status: int = 200) -> None:
        self.routes[(method, path)] = (status, payload)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"error": "Not Found"})
        status, payload = self.routes[key]
        if isinstance(payload, Exception):
            raise payload
        if callable(payload):
            payload = payload(request)
        return httpx.Response(status, json=payload)

    def client(self) -> ShowcaseClient:
        return ShowcaseClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture()
def fake_api() -> FakeApi:
    return FakeApi()
