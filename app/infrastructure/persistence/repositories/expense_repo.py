"""Expense repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.expense import ExpenseCreate, ExpenseResult
from app.infrastructure.persistence.models.expense import Expense
from app.infrastructure.persistence.repositories.base import BaseRepository


def _expense_to_result(e: Expense) -> ExpenseResult:
    return ExpenseResult(
        id=e.id,
        amount=e.amount,
        category_id=e.category_id,
        date=e.date,
        description=e.description,
    )


class ExpenseRepository(BaseRepository[Expense]):
    """Expenses scoped to their owning user."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Expense)

    async def create_expense(self, email: str, data: ExpenseCreate) -> ExpenseResult:
        expense = Expense(
            user_email=email,
            amount=data.amount,
            category_id=data.category_id,
            description=data.description,
            date=data.date,
        )
        created = await self.create(expense)
        return _expense_to_result(created)

    async def list_for_user(
        self, email: str, skip: int = 0, limit: int = 100
    ) -> list[ExpenseResult]:
        result = await self.db.execute(
            select(Expense)
            .where(Expense.user_email == email)
            .order_by(Expense.date.desc(), Expense.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        return [_expense_to_result(e) for e in result.scalars().all()]
