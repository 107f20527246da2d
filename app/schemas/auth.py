"""Auth API schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

ACTIVATION_CODE_PATTERN = r"^[0-9]{6}$"


class RegisterRequest(BaseModel):
    """Request body for registration. An empty password is rejected by the service (400)."""

    email: EmailStr = Field(..., max_length=100)
    password: str = Field(..., max_length=1024)


class LoginRequest(BaseModel):
    """Request body for login. Email is not format-checked so all failures look the same."""

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=1024)


class ActivateRequest(BaseModel):
    """Request body for POST /auth/activate."""

    email: str = Field(..., max_length=254)
    code: str = Field(
        ...,
        pattern=ACTIVATION_CODE_PATTERN,
        description="Six-digit activation code from the email (leading zeros kept)",
    )


class ResendActivationRequest(BaseModel):
    """Request body for POST /auth/activate/resend."""

    email: str = Field(..., max_length=254)


class ActivationResponse(BaseModel):
    """Result of a successful activation."""

    status: str = Field(default="activated")


class TokenResponse(BaseModel):
    """Session token response (the same token is also set as an httponly cookie)."""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
