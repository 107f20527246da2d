"""Activation code lifecycle: issue, verify, lockout.

Per user the code moves NO_CODE -> CODE_ACTIVE -> ACTIVATED | EXPIRED | LOCKED.
Only a successful verify validates the account. LOCKED is left only by
reissuing a code; there is no time-based unlock.
"""

from __future__ import annotations

import asyncio
import hmac
import logging
from datetime import timedelta

from app.application.dtos.activation_code import ActivationCodeResult
from app.application.interfaces.repositories import (
    IActivationCodeRepository,
    IUserRepository,
)
from app.application.interfaces.services import (
    IActivationMessageRenderer,
    IClock,
    INotifier,
)
from app.domain.enums import ActivationState
from app.domain.exceptions import (
    ActivationCodeExpiredException,
    ActivationLockedException,
    IncorrectActivationCodeException,
    InfrastructureException,
    NoPendingCodeException,
    UserAlreadyActivatedException,
    UserNotFoundException,
)
from app.shared.utils.generators import generate_numeric_code

logger = logging.getLogger(__name__)

ACTIVATION_CODE_DIGITS = 6


class ActivationCodeManager:
    """Issues and verifies emailed activation codes with a saturating attempt counter."""

    def __init__(
        self,
        code_repo: IActivationCodeRepository,
        user_repo: IUserRepository,
        notifier: INotifier,
        renderer: IActivationMessageRenderer,
        clock: IClock,
        *,
        lifetime: timedelta,
        max_attempts: int,
        notification_timeout: float = 10.0,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self._codes = code_repo
        self._users = user_repo
        self._notifier = notifier
        self._renderer = renderer
        self._clock = clock
        self._lifetime = lifetime
        self._max_attempts = max_attempts
        self._notification_timeout = notification_timeout

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    async def issue(self, email: str) -> ActivationCodeResult:
        """Replace any pending code for email with a fresh one and notify the user.

        The new row starts at attempts=0, so reissuing also clears a lockout.
        Notification is best effort: any rendering or delivery error, and a
        timeout, is logged and the issued code is still returned.

        The message is sent before the caller's transaction commits. If that
        commit then fails, the user holds a code with no stored row; verify
        reports NoPendingCodeException and a resend issues a working code.

        Raises:
            UserNotFoundException: If no user has this email.
            UserAlreadyActivatedException: If the user is already validated.
        """
        user = await self._users.get_by_email(email)
        if user is None:
            raise UserNotFoundException(email)
        if user.validated:
            raise UserAlreadyActivatedException(email)

        code = generate_numeric_code(ACTIVATION_CODE_DIGITS)
        expires_at = self._clock.now() + self._lifetime
        issued = await self._codes.replace(email, code, expires_at)
        logger.info("Activation code issued for %s (expires %s)", email, expires_at.isoformat())

        await self._notify(email, issued)
        return issued

    async def verify(self, email: str, submitted_code: str) -> ActivationState:
        """Check submitted_code against the pending code for email.

        Returns ActivationState.ACTIVATED on success; the user is validated and
        the code row deleted. Every failure raises an ActivationException
        subclass. Only a wrong code counts as an attempt.

        Raises:
            NoPendingCodeException: No code is pending.
            ActivationLockedException: attempts already at the maximum (even for
                the correct code), or the counter reached it concurrently.
            ActivationCodeExpiredException: The code is past its expiration time.
            IncorrectActivationCodeException: Wrong code; the attempt was counted.
        """
        pending = await self._codes.get(email, for_update=True)
        if pending is None:
            raise NoPendingCodeException()

        if pending.is_locked(self._max_attempts):
            logger.warning("Activation attempt for locked account %s", email)
            raise ActivationLockedException()

        if pending.is_expired(self._clock.now()):
            logger.info("Expired activation code submitted for %s", email)
            raise ActivationCodeExpiredException()

        if hmac.compare_digest(pending.code, submitted_code):
            if not await self._users.mark_validated(email):
                raise NoPendingCodeException()
            await self._codes.delete(email)
            logger.info("Account activated: %s", email)
            return ActivationState.ACTIVATED

        attempts = await self._codes.increment_attempts(email, self._max_attempts)
        if attempts is None:
            logger.warning("Activation attempt for locked account %s", email)
            raise ActivationLockedException()
        if attempts >= self._max_attempts:
            logger.warning(
                "Activation locked for %s after %d incorrect attempts", email, attempts
            )
        else:
            logger.info("Incorrect activation code for %s (attempt %d)", email, attempts)
        raise IncorrectActivationCodeException(self._max_attempts - attempts)

    async def get_state(self, email: str) -> ActivationState:
        """Return where email currently is in the activation lifecycle."""
        user = await self._users.get_by_email(email)
        if user is not None and user.validated:
            return ActivationState.ACTIVATED
        pending = await self._codes.get(email)
        if pending is None:
            return ActivationState.NO_CODE
        if pending.is_locked(self._max_attempts):
            return ActivationState.LOCKED
        if pending.is_expired(self._clock.now()):
            return ActivationState.EXPIRED
        return ActivationState.CODE_ACTIVE

    async def get_pending(self, email: str) -> ActivationCodeResult | None:
        """Return the pending code for email, or None."""
        return await self._codes.get(email)

    async def delete(self, email: str) -> bool:
        """Remove the pending code for email. Return False if there was none."""
        deleted = await self._codes.delete(email)
        if deleted:
            logger.info("Activation code deleted for %s", email)
        return deleted

    async def purge_expired(self) -> int:
        """Delete expired codes that are not locked; locked rows are kept."""
        count = await self._codes.purge_expired(self._clock.now(), self._max_attempts)
        logger.info("Purged %d expired activation codes", count)
        return count

    async def _notify(self, email: str, issued: ActivationCodeResult) -> None:
        try:
            subject, body = self._renderer.render_activation(issued.code, issued.expiration_time)
            await asyncio.wait_for(
                self._notifier.send(email, subject, body),
                timeout=self._notification_timeout,
            )
        except TimeoutError:
            logger.warning("Activation notification to %s timed out", email)
        except InfrastructureException as e:
            logger.warning("Activation notification to %s failed: %s", email, e.message)
        except Exception:
            logger.exception("Activation notification to %s failed", email)
