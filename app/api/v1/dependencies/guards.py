"""Route guards: require_session and require_anonymous.

Both are plain dependencies, so they run before the handler body. The
session token is read from the session cookie or an Authorization: Bearer
header (cookie first).
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.dtos.auth import AuthenticatedSession
from app.application.services.auth_service import AuthService
from app.core.config import get_settings
from app.domain.exceptions import AlreadyAuthenticatedException, AuthenticationException

from .auth import get_auth_service

_http_bearer = HTTPBearer(auto_error=False)


def get_session_token(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str | None:
    """Return the raw session token from cookie or bearer header, or None."""
    token = request.cookies.get(get_settings().session_cookie_name)
    if token:
        return token
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return None


async def get_optional_session(
    token: Annotated[str | None, Depends(get_session_token)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthenticatedSession | None:
    """Resolve the session if a valid one is presented; else None."""
    if token is None:
        return None
    try:
        return await auth.resolve_session(token)
    except AuthenticationException:
        return None


async def require_session(
    session: Annotated[AuthenticatedSession | None, Depends(get_optional_session)],
) -> AuthenticatedSession:
    """Reject anonymous requests with 401 "Please log in to access this page."."""
    if session is None:
        raise AuthenticationException()
    return session


async def require_anonymous(
    session: Annotated[AuthenticatedSession | None, Depends(get_optional_session)],
) -> None:
    """Reject requests that already carry a valid session with 403."""
    if session is not None:
        raise AlreadyAuthenticatedException()


CurrentSession = Annotated[AuthenticatedSession, Depends(require_session)]
