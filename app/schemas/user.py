"""User API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """User response (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    email: str
    validated: bool


class CurrentUserResponse(UserResponse):
    """GET /auth/me: the user plus the expiry of the current session."""

    created_at: datetime
    session_expires_at: datetime
