"""Auth service: registration, activation, login, logout and session resolution.

Every failure that could reveal whether an account exists is collapsed into
a single outcome: login raises one InvalidCredentialsException for unknown,
unvalidated and wrong-password cases, and activation or resend for an
unknown address behave as if no code were pending.
"""

from __future__ import annotations

import asyncio
import logging

from email_validator import EmailNotValidError, validate_email

from app.application.dtos.auth import AuthenticatedSession, IssuedSession
from app.application.dtos.user import UserResult
from app.application.interfaces.repositories import (
    IRevokedSessionRepository,
    IUserRepository,
)
from app.application.interfaces.services import (
    IPasswordHasher,
    ISessionIdGenerator,
    ISessionTokenCodec,
)
from app.application.services.activation_code_service import ActivationCodeManager
from app.domain.enums import ActivationState
from app.domain.exceptions import (
    AuthenticationException,
    InvalidCredentialsException,
    NoPendingCodeException,
    UserNotFoundException,
    ValidationException,
)
from app.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

# Lazy dummy hash so an unknown email costs one full verify, like a real one.
_dummy_hash_cache: str | None = None


async def _get_dummy_hash(hasher: IPasswordHasher) -> str:
    """Return a valid hash for dummy comparison; computed once in thread pool."""
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(hasher.hash, "not-a-real-password")
    return _dummy_hash_cache


def normalize_email(email: str) -> str:
    """Lower-case and strip an address without validating it (lookups only)."""
    return email.strip().lower()


def validate_registration_email(email: str) -> str:
    """Validate format and return the normalized, lower-cased address.

    Raises:
        ValidationException: If the address is not a well-formed email.
    """
    try:
        info = validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationException(f"Invalid email address: {e}", field="email") from e
    return info.normalized.lower()


class AuthService:
    """Account lifecycle and sessions on top of the hasher, session ids and activation codes."""

    def __init__(
        self,
        user_repo: IUserRepository,
        revoked_repo: IRevokedSessionRepository,
        activation: ActivationCodeManager,
        hasher: IPasswordHasher,
        session_ids: ISessionIdGenerator,
        token_codec: ISessionTokenCodec,
    ) -> None:
        self._users = user_repo
        self._revoked = revoked_repo
        self._activation = activation
        self._hasher = hasher
        self._session_ids = session_ids
        self._tokens = token_codec

    async def register(self, email: str, password: str) -> UserResult:
        """Create an unvalidated user and issue its first activation code.

        Raises:
            ValidationException: Malformed email or empty password.
            UserAlreadyExistsException: Email already registered.
        """
        normalized = validate_registration_email(email)
        if not password:
            raise ValidationException("Password must not be empty", field="password")
        password_hash = await asyncio.to_thread(self._hasher.hash, password)
        user = await self._users.create_user(normalized, password_hash)
        logger.info("User registered: %s", normalized)
        await self._activation.issue(normalized)
        return user

    async def verify_activation(self, email: str, code: str) -> ActivationState:
        """Verify an activation code. Unknown addresses look like 'no pending code'."""
        normalized = normalize_email(email)
        user = await self._users.get_by_email(normalized)
        if user is None or user.validated:
            raise NoPendingCodeException()
        return await self._activation.verify(normalized, code)

    async def resend_activation(self, email: str) -> None:
        """Reissue a code for an existing unvalidated user; silently no-op otherwise."""
        normalized = normalize_email(email)
        user = await self._users.get_by_email(normalized)
        if user is None or user.validated:
            logger.info("Activation resend ignored for %s", normalized)
            return
        await self._activation.issue(normalized)

    async def login(self, email: str, password: str) -> IssuedSession:
        """Check credentials and issue a new session token.

        Raises:
            InvalidCredentialsException: Unknown email, unvalidated account or wrong
                password; the three are indistinguishable to the caller.
        """
        normalized = normalize_email(email)
        credentials = await self._users.get_credentials(normalized)
        if credentials is None:
            dummy_hash = await _get_dummy_hash(self._hasher)
            await asyncio.to_thread(self._hasher.verify, password, dummy_hash)
            logger.info("Login failed")
            raise InvalidCredentialsException()

        matches = await asyncio.to_thread(
            self._hasher.verify, password, credentials.password_hash
        )
        if not matches or not credentials.validated:
            logger.info("Login failed")
            raise InvalidCredentialsException()

        if self._hasher.needs_rehash(credentials.password_hash):
            new_hash = await asyncio.to_thread(self._hasher.hash, password)
            await self._users.update_password_hash(normalized, new_hash)
            logger.info("Password hash upgraded for %s", normalized)

        user = await self._users.get_by_email(normalized)
        if user is None:
            raise InvalidCredentialsException()
        session_id = self._session_ids.generate()
        token, expires_at = self._tokens.encode(normalized, session_id)
        logger.info("User logged in: %s", normalized)
        return IssuedSession(
            token=token, session_id=session_id, expires_at=expires_at, user=user
        )

    async def resolve_session(self, token: str) -> AuthenticatedSession:
        """Return the session behind token.

        Raises:
            AuthenticationException: Bad signature, expired, revoked, or the user
                no longer exists or is not validated.
        """
        claims = self._tokens.decode(token)
        if await self._revoked.is_revoked(claims.session_id):
            raise AuthenticationException()
        user = await self._users.get_by_email(claims.email)
        if user is None or not user.validated:
            raise AuthenticationException()
        return AuthenticatedSession(
            user=user, session_id=claims.session_id, expires_at=claims.expires_at
        )

    async def logout(self, session: AuthenticatedSession) -> None:
        """Revoke the session id; repeating it is harmless."""
        await self._revoked.revoke(session.session_id, session.expires_at)
        logger.info("User logged out: %s", session.user.email)

    async def delete_account(self, email: str) -> None:
        """Delete the user and everything it owns.

        Raises:
            UserNotFoundException: If the user does not exist.
        """
        normalized = normalize_email(email)
        if not await self._users.delete_user(normalized):
            raise UserNotFoundException(normalized)
        logger.info("User deleted: %s", normalized)

    async def purge_revoked_sessions(self) -> int:
        """Forget revoked session ids whose tokens have expired anyway."""
        count = await self._revoked.purge_expired(utc_now())
        logger.info("Purged %d expired revoked sessions", count)
        return count
