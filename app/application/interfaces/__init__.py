"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IActivationCodeRepository,
    ICategoryRepository,
    IExpenseRepository,
    IRevokedSessionRepository,
    IUserRepository,
)
from app.application.interfaces.services import (
    IActivationMessageRenderer,
    IClock,
    INotifier,
    IPasswordHasher,
    ISessionIdGenerator,
    ISessionTokenCodec,
)

__all__ = [
    "IActivationMessageRenderer",
    "IActivationCodeRepository",
    "ICategoryRepository",
    "IClock",
    "IExpenseRepository",
    "INotifier",
    "IPasswordHasher",
    "IRevokedSessionRepository",
    "ISessionIdGenerator",
    "ISessionTokenCodec",
    "IUserRepository",
]
