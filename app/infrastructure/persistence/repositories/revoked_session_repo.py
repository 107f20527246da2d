"""Revoked session repository (logout list)."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.models.revoked_session import RevokedSession
from app.infrastructure.persistence.repositories.base import BaseRepository


class RevokedSessionRepository(BaseRepository[RevokedSession]):
    """Session ids invalidated by logout."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, RevokedSession)

    async def revoke(self, session_id: str, expires_at: datetime) -> None:
        if await self.get_by_pk(session_id) is not None:
            return
        await self.create(RevokedSession(session_id=session_id, expires_at=expires_at))

    async def is_revoked(self, session_id: str) -> bool:
        result = await self.db.execute(
            select(RevokedSession.session_id).where(RevokedSession.session_id == session_id)
        )
        return result.scalar_one_or_none() is not None

    async def purge_expired(self, now: datetime) -> int:
        result = await self.db.execute(
            delete(RevokedSession)
            .where(RevokedSession.expires_at < now)
            .execution_options(synchronize_session=False)
        )
        await self.db.flush()
        return result.rowcount
