"""Expense application service: record and list the current user's expenses."""

from __future__ import annotations

import logging

from app.application.dtos.expense import ExpenseCreate, ExpenseResult
from app.application.interfaces.repositories import (
    ICategoryRepository,
    IExpenseRepository,
)
from app.domain.exceptions import ValidationException

logger = logging.getLogger(__name__)


class ExpenseService:
    """Create and list expenses; the category must belong to the same user."""

    def __init__(
        self,
        expense_repo: IExpenseRepository,
        category_repo: ICategoryRepository,
    ) -> None:
        self._expenses = expense_repo
        self._categories = category_repo

    async def create_expense(self, email: str, data: ExpenseCreate) -> ExpenseResult:
        """Raises ValidationException for a non-positive amount or an unknown category."""
        if data.amount <= 0:
            raise ValidationException("Amount must be greater than zero", field="amount")
        if await self._categories.get_for_user(data.category_id, email) is None:
            raise ValidationException("Unknown category", field="category_id")
        expense = await self._expenses.create_expense(email, data)
        logger.info("Expense %s recorded for %s", expense.id, email)
        return expense

    async def list_expenses(
        self, email: str, skip: int = 0, limit: int = 100
    ) -> list[ExpenseResult]:
        return await self._expenses.list_for_user(email, skip=skip, limit=limit)
