"""Media URL resolution for everything the front end renders."""

from __future__ import annotations

import re

# Path the API (and its uploads directory) is reachable under from the browser
API_MOUNT = "/api"

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def resolve_media_url(url: str | None, mount: str = API_MOUNT) -> str:
    """
    Turn a stored media URL into something the browser can load.

    Absolute URLs are returned unchanged. Anything else is a path relative
    to the API mount, e.g. ``/uploads/a.png`` -> ``/api/uploads/a.png``.
    Empty values stay empty; no placeholder is substituted.
    """
    if not url:
        return ""
    if _SCHEME_RE.match(url):
        return url
    if not url.startswith("/"):
        url = "/" + url
    return mount.rstrip("/") + url
