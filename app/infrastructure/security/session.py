"""Session ids and signed session tokens.

A session is not a stored row. At login a fresh session id is drawn from
SessionIdGenerator and wrapped, together with the user's email, in a JWT
signed with the process-wide secret. The token is tamper-evident and
self-contained; logout revokes it by recording its session id.
"""

import hashlib
import hmac
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.domain.exceptions import AuthenticationException
from app.shared.utils.datetime import from_timestamp_utc, utc_now

# Bytes of OS randomness mixed into every session id.
_SESSION_ENTROPY_BYTES = 32
SESSION_ID_LENGTH = 64


class SessionIdGenerator:
    """Issues unpredictable, fixed-length session ids keyed by the process-wide secret.

    Each id is HMAC-SHA256(secret, 32 random bytes) as 64 hex characters.
    Ids are independent across calls and cannot be reproduced without the secret.
    """

    def __init__(self, secret: bytes) -> None:
        if not secret:
            raise ValueError("Session secret must not be empty")
        self._secret = bytes(secret)

    def generate(self) -> str:
        nonce = secrets.token_bytes(_SESSION_ENTROPY_BYTES)
        return hmac.new(self._secret, nonce, hashlib.sha256).hexdigest()


@dataclass(frozen=True)
class SessionClaims:
    """Decoded, verified session token."""

    email: str
    session_id: str
    issued_at: datetime
    expires_at: datetime


class SessionTokenCodec:
    """Encode and verify session JWTs (HS256 by default)."""

    def __init__(self, secret: str, algorithm: str, ttl: timedelta) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    def encode(self, email: str, session_id: str) -> tuple[str, datetime]:
        """Return (token, expires_at) for the given user and session id."""
        issued_at = utc_now()
        expires_at = issued_at + self._ttl
        claims: dict[str, Any] = {
            "sub": email,
            "sid": session_id,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        return cast(str, token), expires_at

    def decode(self, token: str) -> SessionClaims:
        """Verify signature and expiry and return the claims.

        Raises:
            AuthenticationException: If the token is malformed, tampered with,
                expired, or missing sub/sid.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require_exp": True, "require_sub": True, "require_iat": True},
            )
        except JWTError as e:
            raise AuthenticationException() from e
        sid = payload.get("sid")
        sub = payload.get("sub")
        if not isinstance(sid, str) or len(sid) != SESSION_ID_LENGTH or not sub:
            raise AuthenticationException()
        return SessionClaims(
            email=sub,
            session_id=sid,
            issued_at=from_timestamp_utc(payload["iat"]),
            expires_at=from_timestamp_utc(payload["exp"]),
        )


def build_session_components(settings) -> tuple[SessionIdGenerator, SessionTokenCodec]:
    """Build id generator and token codec from settings (secret, algorithm, TTL)."""
    secret = settings.secret_key.get_secret_value()
    return (
        SessionIdGenerator(secret.encode("utf-8")),
        SessionTokenCodec(
            secret=secret,
            algorithm=settings.algorithm,
            ttl=timedelta(minutes=settings.session_ttl_minutes),
        ),
    )
