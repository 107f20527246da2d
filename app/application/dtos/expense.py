"""DTOs for expenses."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class ExpenseCreate:
    """Input for creating an expense for the current user."""

    amount: Decimal
    category_id: str
    date: date
    description: str | None = None


@dataclass(frozen=True)
class ExpenseResult:
    """Expense read-model."""

    id: str
    amount: Decimal
    category_id: str
    date: date
    description: str | None
