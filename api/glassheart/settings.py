"""Centralized environment-driven settings.

Keep this module lightweight: no app imports, to avoid circular deps.
Values from .env.local and .env are loaded first; real environment variables win.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(".env.local")
load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _list_env(name: str, default: str) -> list[str]:
    raw = os.getenv(name) or default
    return [item.strip() for item in raw.split(",") if item.strip()]


# Mount path shared by every JSON endpoint and the uploads directory.
API_PREFIX: str = os.getenv("API_PREFIX", "/api").rstrip("/")

# Directory served read-only under {API_PREFIX}/uploads
UPLOADS_DIR: Path = Path(os.getenv("UPLOADS_DIR", "uploads"))

CORS_ORIGINS: list[str] = _list_env("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000")

DB_POOL_SIZE: int = _int_env("DB_POOL_SIZE", 10)

# Optional JSON file loaded into an empty store at startup
SEED_FILE: str | None = os.getenv("SEED_FILE") or None

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
