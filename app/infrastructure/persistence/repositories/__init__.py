"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.activation_code_repo import (
    ActivationCodeRepository,
)
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.category_repo import CategoryRepository
from app.infrastructure.persistence.repositories.expense_repo import ExpenseRepository
from app.infrastructure.persistence.repositories.revoked_session_repo import (
    RevokedSessionRepository,
)
from app.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "ActivationCodeRepository",
    "BaseRepository",
    "CategoryRepository",
    "ExpenseRepository",
    "RevokedSessionRepository",
    "UserRepository",
]
