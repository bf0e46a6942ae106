from __future__ import annotations

import os
from functools import lru_cache
from typing import Generator
from urllib.parse import quote_plus

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from . import settings


def get_database_url() -> str:
    """Get the database URL, either verbatim or built from DB_* components."""
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit

    db_user = os.getenv("DB_USER", "root")
    db_pass = os.getenv("DB_PASSWORD")
    db_name = os.getenv("DB_NAME", "lixin_lab_db")
    db_host = os.getenv("DB_HOST", "localhost")
    db_port = os.getenv("DB_PORT", "5432")

    credentials = db_user
    if db_pass:
        # URL-encode the password in case it contains special characters
        credentials = f"{db_user}:{quote_plus(db_pass)}"
    return f"postgresql+psycopg://{credentials}@{db_host}:{db_port}/{db_name}"


DATABASE_URL = get_database_url()


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # TestClient and the ASGI server call handlers from worker threads
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_size": settings.DB_POOL_SIZE, "max_overflow": 0}


engine = create_engine(
    DATABASE_URL,
    future=True,
    echo=settings.LOG_LEVEL == "DEBUG",
    pool_pre_ping=True,
    **_engine_options(DATABASE_URL),
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@lru_cache(maxsize=1)
def get_engine():
    return engine


def get_session() -> Generator[Session, None, None]:
    session: Session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
