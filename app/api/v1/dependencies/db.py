"""Repository dependencies (composition root).

Every repository in a request shares the one transactional session from
get_db_transactional: commit on success, rollback on error.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import get_db_transactional
from app.infrastructure.persistence.repositories import (
    ActivationCodeRepository,
    CategoryRepository,
    ExpenseRepository,
    RevokedSessionRepository,
    UserRepository,
)

DbSession = Annotated[AsyncSession, Depends(get_db_transactional)]


async def get_user_repo(db: DbSession) -> UserRepository:
    return UserRepository(db)


async def get_activation_code_repo(db: DbSession) -> ActivationCodeRepository:
    return ActivationCodeRepository(db)


async def get_revoked_session_repo(db: DbSession) -> RevokedSessionRepository:
    return RevokedSessionRepository(db)


async def get_category_repo(db: DbSession) -> CategoryRepository:
    return CategoryRepository(db)


async def get_expense_repo(db: DbSession) -> ExpenseRepository:
    return ExpenseRepository(db)
