"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.activation_code import ActivationCodeResult
    from app.application.dtos.category import CategoryResult
    from app.application.dtos.expense import ExpenseCreate, ExpenseResult
    from app.application.dtos.user import UserCredentials, UserResult


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_email(self, email: str) -> UserResult | None:
        """Return user by email, or None."""

    async def get_credentials(self, email: str) -> UserCredentials | None:
        """Return stored hash and validation state for login, or None."""

    async def create_user(self, email: str, password_hash: str) -> UserResult:
        """Persist a new unvalidated user. Raise UserAlreadyExistsException on duplicate email."""

    async def mark_validated(self, email: str) -> bool:
        """Set validated=true. Return False if the user does not exist."""

    async def update_password_hash(self, email: str, password_hash: str) -> None:
        """Replace the stored hash (transparent rehash on login)."""

    async def delete_user(self, email: str) -> bool:
        """Delete user and everything it owns. Return False if not found."""


class IActivationCodeRepository(Protocol):
    """Protocol for activation code storage, including the atomic attempt counter."""

    async def get(self, email: str, *, for_update: bool = False) -> ActivationCodeResult | None:
        """Return the pending code for email; lock the row when for_update is True."""

    async def replace(
        self, email: str, code: str, expiration_time: datetime
    ) -> ActivationCodeResult:
        """Delete any existing row for email and insert a new one with attempts=0."""

    async def delete(self, email: str) -> bool:
        """Delete the pending code. Return False if there was none."""

    async def increment_attempts(self, email: str, max_attempts: int) -> int | None:
        """Atomically add one attempt if attempts < max_attempts.

        Returns the new attempt count, or None when no row was updated (row
        missing or already at the cap). Check and increment are one statement
        so concurrent callers cannot both pass the check.
        """

    async def purge_expired(self, now: datetime, max_attempts: int) -> int:
        """Delete expired codes that are not locked. Return number of rows deleted."""


class IRevokedSessionRepository(Protocol):
    """Protocol for the logout revocation list."""

    async def revoke(self, session_id: str, expires_at: datetime) -> None:
        """Record session_id as revoked (idempotent)."""

    async def is_revoked(self, session_id: str) -> bool:
        """Return True if session_id was revoked."""

    async def purge_expired(self, now: datetime) -> int:
        """Delete revocations whose token has expired anyway."""


class ICategoryRepository(Protocol):
    """Protocol for the read-only category dataset."""

    async def list_for_user(self, email: str) -> list[CategoryResult]:
        """Return all categories owned by the user."""

    async def get_for_user(self, category_id: str, email: str) -> CategoryResult | None:
        """Return the category if it exists and is owned by the user."""


class IExpenseRepository(Protocol):
    """Protocol for expense repository."""

    async def create_expense(self, email: str, data: ExpenseCreate) -> ExpenseResult:
        """Persist an expense for the user."""

    async def list_for_user(
        self, email: str, skip: int = 0, limit: int = 100
    ) -> list[ExpenseResult]:
        """Return the user's expenses, newest first."""
