from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

from . import settings
from .db import DATABASE_URL, get_engine
from .middleware import RequestLoggingMiddleware
from .routers import interactions, posts, system, team
from .seed import ensure_seed_data

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

_STARTUP_COMPLETE = False


def _alembic_config() -> Config:
    base_dir = Path(__file__).resolve().parent.parent
    cfg = Config()
    cfg.set_main_option("script_location", str(base_dir / "alembic"))
    # ConfigParser interpolation treats % specially (URL-encoded passwords)
    cfg.set_main_option("sqlalchemy.url", DATABASE_URL.replace("%", "%%"))
    return cfg


def run_migrations() -> None:
    logger.info("run_migrations: Starting...")
    try:
        alembic_cfg = _alembic_config()
        engine = get_engine()

        try:
            with engine.connect() as connection:
                context = MigrationContext.configure(connection)
                current_heads = set(context.get_current_heads())
            heads = set(ScriptDirectory.from_config(alembic_cfg).get_heads())
        finally:
            # Ensure pooled connections are closed before command.upgrade
            engine.dispose()

        if current_heads == heads:
            logger.info(f"Database is up to date (revision: {sorted(heads)}), skipping migrations.")
            return

        logger.info(f"Current revision(s): {sorted(current_heads)}, target: {sorted(heads)}. Running migrations...")
        command.upgrade(alembic_cfg, "head")
        logger.info("run_migrations: Completed successfully.")
    except Exception as e:
        logger.error(f"run_migrations: Error occurred: {e}", exc_info=True)
        raise


def run_startup_tasks() -> None:
    global _STARTUP_COMPLETE
    if _STARTUP_COMPLETE:
        logger.info("run_startup_tasks: Already completed, skipping.")
        return
    try:
        run_migrations()
        ensure_seed_data()
        _STARTUP_COMPLETE = True
        logger.info("Startup tasks completed.")
    except Exception as e:
        logger.error(f"Startup tasks failed: {e}", exc_info=True)
        raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application...")
    # Server won't start until these complete
    run_startup_tasks()
    logger.info(f"Showcase API ready at {settings.API_PREFIX}, uploads at {settings.API_PREFIX}/uploads")
    yield
    logger.info("Shutting down application...")


app = FastAPI(
    title="Glass Heart Showcase API",
    version="1.0.0",
    description="Team units, profiles, galleries, ratings and comments",
    lifespan=lifespan,
)

if settings.CORS_ORIGINS == ["*"]:
    logger.warning("CORS is configured to allow all origins.")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
    max_age=600,  # Cache preflight requests for 10 minutes
)
app.add_middleware(RequestLoggingMiddleware)


# ============================================================================
# ERROR RESPONSES: every failure is {"error": message}
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={"error": "; ".join(messages)},
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Database query failed on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc) or type(exc).__name__},
    )


app.include_router(system.router, prefix=settings.API_PREFIX)
app.include_router(team.router, prefix=settings.API_PREFIX)
app.include_router(interactions.router, prefix=settings.API_PREFIX)
app.include_router(posts.router, prefix=settings.API_PREFIX)

# Mount uploads directory for serving media referenced by posts and gallery rows
settings.UPLOADS_DIR.mkdir(parents=True, exist_ok=True)
app.mount(
    f"{settings.API_PREFIX}/uploads",
    StaticFiles(directory=str(settings.UPLOADS_DIR)),
    name="uploads",
)
