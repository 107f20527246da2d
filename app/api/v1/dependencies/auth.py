"""Auth dependencies (composition root).

Hasher, session id generator and token codec are built once from settings
and shared by every request. Notifier, activation manager and auth service
are built per request on top of the request's repositories.
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from app.application.interfaces.services import IClock, INotifier
from app.application.services.activation_code_service import ActivationCodeManager
from app.application.services.auth_service import AuthService
from app.core.config import get_settings
from app.infrastructure.external.notifications import (
    ActivationTemplateRenderer,
    NotifierFactory,
)
from app.infrastructure.persistence.repositories import (
    ActivationCodeRepository,
    RevokedSessionRepository,
    UserRepository,
)
from app.infrastructure.security import (
    Argon2PasswordHasher,
    SessionIdGenerator,
    SessionTokenCodec,
    build_password_hasher,
    build_session_components,
)
from app.shared.utils.datetime import SystemClock

from .db import get_activation_code_repo, get_revoked_session_repo, get_user_repo


@lru_cache
def get_password_hasher() -> Argon2PasswordHasher:
    """Process-wide argon2id hasher (cost parameters from settings)."""
    return build_password_hasher(get_settings())


@lru_cache
def _session_components() -> tuple[SessionIdGenerator, SessionTokenCodec]:
    return build_session_components(get_settings())


def get_session_id_generator() -> SessionIdGenerator:
    return _session_components()[0]


def get_session_token_codec() -> SessionTokenCodec:
    return _session_components()[1]


def get_clock() -> IClock:
    """Wall clock; tests override this dependency with a frozen clock."""
    return SystemClock()


@lru_cache
def get_activation_renderer() -> ActivationTemplateRenderer:
    return ActivationTemplateRenderer(app_name=get_settings().app_name)


def get_notifier(request: Request) -> INotifier:
    """Configured notifier using the shared HTTP client from lifespan."""
    http_client = getattr(request.app.state, "http_client", None)
    return NotifierFactory.create_notifier(get_settings(), http_client=http_client)


async def get_activation_manager(
    code_repo: Annotated[ActivationCodeRepository, Depends(get_activation_code_repo)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    notifier: Annotated[INotifier, Depends(get_notifier)],
    renderer: Annotated[ActivationTemplateRenderer, Depends(get_activation_renderer)],
    clock: Annotated[IClock, Depends(get_clock)],
) -> ActivationCodeManager:
    settings = get_settings()
    return ActivationCodeManager(
        code_repo,
        user_repo,
        notifier,
        renderer,
        clock,
        lifetime=timedelta(minutes=settings.activation_code_lifetime_minutes),
        max_attempts=settings.activation_max_attempts,
        notification_timeout=settings.notification_timeout_seconds,
    )


async def get_auth_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    revoked_repo: Annotated[RevokedSessionRepository, Depends(get_revoked_session_repo)],
    activation: Annotated[ActivationCodeManager, Depends(get_activation_manager)],
    hasher: Annotated[Argon2PasswordHasher, Depends(get_password_hasher)],
    session_ids: Annotated[SessionIdGenerator, Depends(get_session_id_generator)],
    token_codec: Annotated[SessionTokenCodec, Depends(get_session_token_codec)],
) -> AuthService:
    return AuthService(
        user_repo,
        revoked_repo,
        activation,
        hasher,
        session_ids,
        token_codec,
    )
