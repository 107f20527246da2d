"""User repository. Interface methods return application DTOs."""

from __future__ import annotations

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserCredentials, UserResult
from app.domain.exceptions import UserAlreadyExistsException
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        email=u.email,
        validated=u.validated,
        created_at=ensure_utc(u.created_at),
    )


class UserRepository(BaseRepository[User]):
    """User repository: lookup, create, validate, rehash, delete."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_email(self, email: str) -> UserResult | None:
        user = await self.get_by_pk(email)
        return _user_to_result(user) if user else None

    async def get_credentials(self, email: str) -> UserCredentials | None:
        user = await self.get_by_pk(email)
        if not user:
            return None
        return UserCredentials(
            email=user.email,
            password_hash=user.password_hash,
            validated=user.validated,
        )

    async def create_user(self, email: str, password_hash: str) -> UserResult:
        """Create an unvalidated user; raise UserAlreadyExistsException on duplicate email."""
        if await self.get_by_pk(email) is not None:
            raise UserAlreadyExistsException()
        user = User(email=email, password_hash=password_hash, validated=False)
        try:
            created = await self.create(user)
        except IntegrityError:
            raise UserAlreadyExistsException() from None
        return _user_to_result(created)

    async def mark_validated(self, email: str) -> bool:
        result = await self.db.execute(
            update(User).where(User.email == email).values(validated=True)
        )
        await self.db.flush()
        return result.rowcount > 0

    async def update_password_hash(self, email: str, password_hash: str) -> None:
        await self.db.execute(
            update(User).where(User.email == email).values(password_hash=password_hash)
        )
        await self.db.flush()

    async def delete_user(self, email: str) -> bool:
        """Delete user; activation code, categories and expenses go with it (ON DELETE CASCADE)."""
        result = await self.db.execute(delete(User).where(User.email == email))
        await self.db.flush()
        return result.rowcount > 0
