"""Domain exceptions for the Firetrack application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any

# Single generic login failure message; never disambiguated (no account enumeration).
INVALID_CREDENTIALS_MESSAGE = "Incorrect email address or password"


class FiretrackException(Exception):
    """Base exception for all Firetrack application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, attempts_remaining).
    """

    # When True, the request transaction is committed even though this is raised.
    keep_changes: bool = False

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        content: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            content["details"] = self.details
        return content


class ValidationException(FiretrackException):
    """Raised when input validation fails (e.g. invalid email or empty password)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure, returned verbatim.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(FiretrackException):
    """Raised when a request carries no valid session (missing, tampered, expired or revoked)."""

    def __init__(self, message: str = "Please log in to access this page.") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class InvalidCredentialsException(FiretrackException):
    """Raised on any login failure: unknown email, unvalidated account, or wrong password.

    The message is identical for every cause so callers cannot tell whether
    an account exists.
    """

    def __init__(self) -> None:
        super().__init__(INVALID_CREDENTIALS_MESSAGE, "INVALID_CREDENTIALS")


class AlreadyAuthenticatedException(FiretrackException):
    """Raised when a logged-in user requests a route reserved for anonymous visitors."""

    def __init__(self) -> None:
        super().__init__("You are already logged in.", "ALREADY_AUTHENTICATED")


class UserAlreadyExistsException(FiretrackException):
    """Raised when registering an email address that is already taken."""

    def __init__(self) -> None:
        super().__init__(
            "This email address is already registered",
            "USER_ALREADY_EXISTS",
            {},
        )


class UserNotFoundException(FiretrackException):
    """Raised by maintenance paths (CLI, account deletion) when a user does not exist."""

    def __init__(self, email: str) -> None:
        super().__init__(
            f"User not found: {email}",
            "USER_NOT_FOUND",
            {"email": email},
        )


class UserAlreadyActivatedException(FiretrackException):
    """Raised when an activation code is requested for an already validated user."""

    def __init__(self, email: str) -> None:
        super().__init__(
            f"The user with email {email} is already activated",
            "USER_ALREADY_ACTIVATED",
            {"email": email},
        )


class ActivationException(FiretrackException):
    """Base class for activation-code verification failures."""


class NoPendingCodeException(ActivationException):
    """Raised when no activation code is pending for the address."""

    def __init__(self) -> None:
        super().__init__(
            "There is no pending activation for this account.",
            "NO_PENDING_ACTIVATION",
        )


class IncorrectActivationCodeException(ActivationException):
    """Raised when the submitted code does not match; the attempt has been counted."""

    keep_changes = True

    def __init__(self, attempts_remaining: int) -> None:
        super().__init__(
            "Incorrect activation code. Please try again.",
            "INCORRECT_ACTIVATION_CODE",
            {"attempts_remaining": attempts_remaining},
        )


class ActivationCodeExpiredException(ActivationException):
    """Raised when the pending code is past its expiration time."""

    def __init__(self) -> None:
        super().__init__(
            "The activation code has expired. Please re-send the activation email and try again.",
            "ACTIVATION_CODE_EXPIRED",
        )


class ActivationLockedException(ActivationException):
    """Raised when the maximum number of incorrect attempts has been reached.

    Only a reissued code clears this state; there is no time-based unlock.
    """

    def __init__(self) -> None:
        super().__init__(
            "You have exceeded the maximum number of activation attempts. Please try again later.",
            "ACTIVATION_LOCKED",
        )


class InfrastructureException(FiretrackException):
    """Raised when the store or another backing service is unreachable."""

    def __init__(
        self,
        message: str = "A backing service is unavailable.",
        error_code: str = "SERVICE_UNAVAILABLE",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)
