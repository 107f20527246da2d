"""Service interfaces (ports) for the application layer.

Protocols define contracts for collaborators of the auth core (DIP):
hashing, session ids and tokens, notification delivery and the clock.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.infrastructure.security.session import SessionClaims


class IClock(Protocol):
    """Supplies the current time (UTC aware). Substituted by a frozen clock in tests."""

    def now(self) -> datetime:
        """Return the current UTC datetime."""


class IPasswordHasher(Protocol):
    """Protocol for memory-hard password hashing."""

    def hash(self, password: str) -> str:
        """Return a self-describing encoded hash with a fresh salt."""

    def verify(self, password: str, encoded_hash: str) -> bool:
        """Constant-time check; False (never raises) on malformed hashes."""

    def needs_rehash(self, encoded_hash: str) -> bool:
        """Return True if the hash uses outdated parameters."""


class ISessionIdGenerator(Protocol):
    """Protocol for unpredictable session id generation."""

    def generate(self) -> str:
        """Return a new fixed-length session id."""


class ISessionTokenCodec(Protocol):
    """Protocol for signing and verifying session tokens."""

    def encode(self, email: str, session_id: str) -> tuple[str, datetime]:
        """Return (token, expires_at)."""

    def decode(self, token: str) -> SessionClaims:
        """Return verified claims; raise AuthenticationException if invalid."""


class INotifier(Protocol):
    """Protocol for outbound notifications (best effort)."""

    async def send(self, to: str, subject: str, body: str) -> None:
        """Deliver a message. Raise NotificationDeliveryException on failure."""


class IActivationMessageRenderer(Protocol):
    """Renders the activation notification for a freshly issued code."""

    def render_activation(self, code: str, expires_at: datetime) -> tuple[str, str]:
        """Return (subject, body)."""
