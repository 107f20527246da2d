"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import ActivationState, NotifierBackend
from app.domain.exceptions import (
    ActivationCodeExpiredException,
    ActivationException,
    ActivationLockedException,
    AlreadyAuthenticatedException,
    AuthenticationException,
    FiretrackException,
    IncorrectActivationCodeException,
    InfrastructureException,
    InvalidCredentialsException,
    NoPendingCodeException,
    UserAlreadyActivatedException,
    UserAlreadyExistsException,
    UserNotFoundException,
    ValidationException,
)

__all__ = [
    # Enums
    "ActivationState",
    "NotifierBackend",
    # Exceptions
    "ActivationCodeExpiredException",
    "ActivationException",
    "ActivationLockedException",
    "AlreadyAuthenticatedException",
    "AuthenticationException",
    "FiretrackException",
    "IncorrectActivationCodeException",
    "InfrastructureException",
    "InvalidCredentialsException",
    "NoPendingCodeException",
    "UserAlreadyActivatedException",
    "UserAlreadyExistsException",
    "UserNotFoundException",
    "ValidationException",
]
