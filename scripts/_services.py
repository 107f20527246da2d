"""Service wiring shared by the maintenance commands.

Builds the same services as the web app around one transactional session
(get_db_transactional semantics: commit on success, rollback on error,
counted activation attempts kept).
"""

import logging
import sys
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import timedelta
from typing import AsyncIterator

import httpx

from app.application.services.activation_code_service import ActivationCodeManager
from app.application.services.auth_service import AuthService
from app.core.config import get_settings
from app.domain.exceptions import FiretrackException
from app.infrastructure.external.notifications import (
    ActivationTemplateRenderer,
    NotifierFactory,
)
from app.infrastructure.persistence.database import dispose_engine, get_db_transactional
from app.infrastructure.persistence.repositories import (
    ActivationCodeRepository,
    RevokedSessionRepository,
    UserRepository,
)
from app.infrastructure.security import build_password_hasher, build_session_components
from app.shared.telemetry.logging import setup_logging
from app.shared.utils.datetime import SystemClock


@dataclass
class CliServices:
    auth: AuthService
    activation: ActivationCodeManager


@asynccontextmanager
async def open_services() -> AsyncIterator[CliServices]:
    """Yield services bound to one transaction; dispose the engine afterwards."""
    settings = get_settings()
    setup_logging(logging.WARNING)
    transaction = asynccontextmanager(get_db_transactional)
    try:
        async with httpx.AsyncClient(timeout=settings.notification_timeout_seconds) as http:
            async with transaction() as session:
                users = UserRepository(session)
                activation = ActivationCodeManager(
                    ActivationCodeRepository(session),
                    users,
                    NotifierFactory.create_notifier(settings, http_client=http),
                    ActivationTemplateRenderer(app_name=settings.app_name),
                    SystemClock(),
                    lifetime=timedelta(minutes=settings.activation_code_lifetime_minutes),
                    max_attempts=settings.activation_max_attempts,
                    notification_timeout=settings.notification_timeout_seconds,
                )
                session_ids, token_codec = build_session_components(settings)
                auth = AuthService(
                    users,
                    RevokedSessionRepository(session),
                    activation,
                    build_password_hasher(settings),
                    session_ids,
                    token_codec,
                )
                yield CliServices(auth=auth, activation=activation)
    finally:
        await dispose_engine()


def fail(message: str) -> None:
    """Print message to stderr and exit with status 1."""
    print(message, file=sys.stderr)
    sys.exit(1)


def usage(text: str) -> None:
    fail(f"Usage: python -m {text}")


async def run_or_fail(coro) -> None:
    """Await coro; report domain errors on stderr with exit status 1."""
    try:
        await coro
    except FiretrackException as e:
        fail(e.message)
