"""Application DTOs (no ORM dependency)."""

from app.application.dtos.activation_code import ActivationCodeResult
from app.application.dtos.auth import AuthenticatedSession, IssuedSession
from app.application.dtos.category import CategoryDropdownItem, CategoryResult
from app.application.dtos.expense import ExpenseCreate, ExpenseResult
from app.application.dtos.user import UserCredentials, UserResult

__all__ = [
    "ActivationCodeResult",
    "AuthenticatedSession",
    "CategoryDropdownItem",
    "CategoryResult",
    "ExpenseCreate",
    "ExpenseResult",
    "IssuedSession",
    "UserCredentials",
    "UserResult",
]
