"""Security: password hashing, session ids and signed session tokens."""

from app.infrastructure.security.password import (
    Argon2PasswordHasher,
    build_password_hasher,
)
from app.infrastructure.security.session import (
    SessionClaims,
    SessionIdGenerator,
    SessionTokenCodec,
    build_session_components,
)

__all__ = [
    "Argon2PasswordHasher",
    "SessionClaims",
    "SessionIdGenerator",
    "SessionTokenCodec",
    "build_password_hasher",
    "build_session_components",
]
