"""Application services: activation codes, auth, categories, expenses."""

from app.application.services.activation_code_service import ActivationCodeManager
from app.application.services.auth_service import AuthService
from app.application.services.category_service import (
    CategoryService,
    flatten_categories,
)
from app.application.services.expense_service import ExpenseService

__all__ = [
    "ActivationCodeManager",
    "AuthService",
    "CategoryService",
    "ExpenseService",
    "flatten_categories",
]
