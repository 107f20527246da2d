"""DTOs for sessions issued and resolved by the auth service."""

from dataclasses import dataclass
from datetime import datetime

from app.application.dtos.user import UserResult


@dataclass(frozen=True)
class IssuedSession:
    """Result of a successful login: signed token plus its session id and expiry."""

    token: str
    session_id: str
    expires_at: datetime
    user: UserResult


@dataclass(frozen=True)
class AuthenticatedSession:
    """A verified, unrevoked session and the user it belongs to."""

    user: UserResult
    session_id: str
    expires_at: datetime
