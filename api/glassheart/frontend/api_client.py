"""Async HTTP client for the showcase API."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from .. import schemas
from ..targets import Target, comment_fields
from .media import API_MOUNT

DEFAULT_BASE_URL = "http://localhost:3001"
DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    """Non-2xx response from the API, carrying the server's error message."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


# Failures a component absorbs: transport errors, error statuses, bad payloads.
# pydantic's ValidationError and json decoding errors are ValueErrors.
CLIENT_ERRORS = (ApiError, httpx.HTTPError, ValueError)


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


class ShowcaseClient:
    """
    Thin wrapper over ``httpx.AsyncClient``; one instance is shared by every component.

    Responses are parsed into the same pydantic schemas the server emits.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_prefix: str = API_MOUNT,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.api_prefix = api_prefix.rstrip("/")
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "ShowcaseClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, json: dict | None = None) -> Any:
        response = await self._http.request(method, f"{self.api_prefix}{path}", json=json)
        if response.is_error:
            try:
                data = response.json()
            except ValueError:
                data = None
            message = data.get("error") if isinstance(data, dict) else None
            raise ApiError(response.status_code, message or response.text or response.reason_phrase)
        return response.json()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_team(self, group: str) -> schemas.TeamResponse:
        data = await self._request("GET", f"/team/{_segment(group)}")
        return schemas.TeamResponse.model_validate(data)

    async def get_gallery(self, group: str) -> list[schemas.GalleryImage]:
        data = await self._request("GET", f"/gallery/{_segment(group)}")
        return [schemas.GalleryImage.model_validate(row) for row in data]

    async def get_detail(self, target: Target) -> schemas.DetailResponse:
        data = await self._request("GET", f"/detail/{target.kind}/{_segment(target.key)}")
        return schemas.DetailResponse.model_validate(data)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def post_comment(self, target: Target, user_name: str, content: str) -> None:
        body = {
            key: value for key, value in comment_fields(target).items() if value is not None
        }
        body.update(user_name=user_name, content=content)
        await self._request("POST", "/comments", json=body)

    async def post_rating(self, target: Target, rating: int) -> None:
        body = {"target_id": target.key, "target_type": target.kind, "rating": rating}
        await self._request("POST", "/rate", json=body)

    async def upload_post(
        self,
        title: str,
        content: str,
        media_url: str,
        group_type: str,
    ) -> None:
        body = {
            "title": title,
            "content": content,
            "media_url": media_url,
            "group_type": group_type,
        }
        await self._request("POST", "/upload-post", json=body)
