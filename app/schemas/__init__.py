"""Pydantic request/response schemas for the API."""

from app.schemas.auth import (
    ActivateRequest,
    ActivationResponse,
    LoginRequest,
    RegisterRequest,
    ResendActivationRequest,
    TokenResponse,
)
from app.schemas.category import CategoryDropdownItemResponse
from app.schemas.expense import ExpenseCreateRequest, ExpenseResponse
from app.schemas.health import HealthResponse, ReadinessErrorResponse
from app.schemas.user import CurrentUserResponse, UserResponse

__all__ = [
    "ActivateRequest",
    "ActivationResponse",
    "CategoryDropdownItemResponse",
    "CurrentUserResponse",
    "ExpenseCreateRequest",
    "ExpenseResponse",
    "HealthResponse",
    "LoginRequest",
    "ReadinessErrorResponse",
    "RegisterRequest",
    "ResendActivationRequest",
    "TokenResponse",
    "UserResponse",
]
