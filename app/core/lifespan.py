"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, the shared outbound
HTTP client used by the notifier, and the database engine.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence.database import dispose_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the shared HTTP client on startup; close it and dispose the engine on exit."""
    settings = get_settings()

    # ---- Startup ----
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.notification_timeout_seconds
    )
    logger.info(
        "%s %s started (notifier: %s)",
        settings.app_name,
        settings.app_version,
        settings.notifier_backend.value,
    )

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")

    await dispose_engine()
