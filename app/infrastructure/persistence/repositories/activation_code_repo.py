"""Activation code repository with an atomic, saturating attempt counter."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.activation_code import ActivationCodeResult
from app.infrastructure.persistence.models.activation_code import ActivationCode
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc


def _code_to_result(row: ActivationCode) -> ActivationCodeResult:
    return ActivationCodeResult(
        email=row.email,
        code=row.code,
        expiration_time=ensure_utc(row.expiration_time),
        attempts=row.attempts,
    )


class ActivationCodeRepository(BaseRepository[ActivationCode]):
    """One pending code per email. Runs inside the caller's transaction."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, ActivationCode)

    async def get(self, email: str, *, for_update: bool = False) -> ActivationCodeResult | None:
        """Return the pending code; SELECT ... FOR UPDATE when for_update (no-op on SQLite)."""
        stmt = select(ActivationCode).where(ActivationCode.email == email)
        if for_update:
            stmt = stmt.with_for_update()
        # populate_existing: a row cached in the identity map may be stale after a bulk UPDATE.
        result = await self.db.execute(stmt.execution_options(populate_existing=True))
        row = result.scalar_one_or_none()
        return _code_to_result(row) if row else None

    async def replace(
        self, email: str, code: str, expiration_time: datetime
    ) -> ActivationCodeResult:
        await self.db.execute(delete(ActivationCode).where(ActivationCode.email == email))
        row = ActivationCode(
            email=email,
            code=code,
            expiration_time=expiration_time,
            attempts=0,
        )
        created = await self.create(row)
        return _code_to_result(created)

    async def delete(self, email: str) -> bool:
        result = await self.db.execute(
            delete(ActivationCode).where(ActivationCode.email == email)
        )
        await self.db.flush()
        return result.rowcount > 0

    async def increment_attempts(self, email: str, max_attempts: int) -> int | None:
        """Add one attempt unless already at max_attempts; return the new count or None.

        The guard and the increment are a single UPDATE so concurrent callers
        serialize on the row and the counter cannot pass max_attempts.
        """
        result = await self.db.execute(
            update(ActivationCode)
            .where(
                ActivationCode.email == email,
                ActivationCode.attempts < max_attempts,
            )
            .values(attempts=ActivationCode.attempts + 1)
            .returning(ActivationCode.attempts)
            .execution_options(synchronize_session=False)
        )
        attempts = result.scalar_one_or_none()
        await self.db.flush()
        return attempts

    async def purge_expired(self, now: datetime, max_attempts: int) -> int:
        """Delete expired rows that are not locked (locked rows stay until reissue)."""
        result = await self.db.execute(
            delete(ActivationCode)
            .where(
                ActivationCode.expiration_time < now,
                ActivationCode.attempts < max_attempts,
            )
            .execution_options(synchronize_session=False)
        )
        await self.db.flush()
        return result.rowcount
