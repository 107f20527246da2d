"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.activation_code import ActivationCode
from app.infrastructure.persistence.models.category import Category
from app.infrastructure.persistence.models.expense import Expense
from app.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
    OwnedByUserMixin,
)
from app.infrastructure.persistence.models.revoked_session import RevokedSession
from app.infrastructure.persistence.models.user import User

__all__ = [
    "ActivationCode",
    "Category",
    "CreatedAtMixin",
    "CuidMixin",
    "Expense",
    "OwnedByUserMixin",
    "RevokedSession",
    "User",
]
