"""Application layer: interfaces, DTOs and services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, notifier, hasher).
"""

from app.application.interfaces import (
    IActivationCodeRepository,
    IClock,
    INotifier,
    IPasswordHasher,
    IUserRepository,
)
from app.application.services import (
    ActivationCodeManager,
    AuthService,
    CategoryService,
    ExpenseService,
)

__all__ = [
    "ActivationCodeManager",
    "AuthService",
    "CategoryService",
    "ExpenseService",
    "IActivationCodeRepository",
    "IClock",
    "INotifier",
    "IPasswordHasher",
    "IUserRepository",
]
