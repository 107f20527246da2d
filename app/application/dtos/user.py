"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_email, create_user, etc.). No password hash."""

    email: str
    validated: bool
    created_at: datetime


@dataclass(frozen=True)
class UserCredentials:
    """What login needs: the stored hash and validation state. Never leaves the auth service."""

    email: str
    password_hash: str
    validated: bool
