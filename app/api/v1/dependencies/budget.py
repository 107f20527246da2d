"""Category and expense service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.services.category_service import CategoryService
from app.application.services.expense_service import ExpenseService
from app.infrastructure.persistence.repositories import (
    CategoryRepository,
    ExpenseRepository,
)

from .db import get_category_repo, get_expense_repo


async def get_category_service(
    category_repo: Annotated[CategoryRepository, Depends(get_category_repo)],
) -> CategoryService:
    return CategoryService(category_repo)


async def get_expense_service(
    expense_repo: Annotated[ExpenseRepository, Depends(get_expense_repo)],
    category_repo: Annotated[CategoryRepository, Depends(get_category_repo)],
) -> ExpenseService:
    return ExpenseService(expense_repo, category_repo)
