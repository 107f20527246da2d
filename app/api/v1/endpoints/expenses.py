"""Expenses API: list and record expenses for the current user."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import CurrentSession, get_expense_service
from app.application.dtos.expense import ExpenseCreate
from app.application.services.expense_service import ExpenseService
from app.core.limiter import limit_writes
from app.schemas.expense import ExpenseCreateRequest, ExpenseResponse

router = APIRouter()

Expenses = Annotated[ExpenseService, Depends(get_expense_service)]


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses(
    session: CurrentSession,
    expenses: Expenses,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    """Return the current user's expenses, newest first."""
    results = await expenses.list_expenses(session.user.email, skip=skip, limit=limit)
    return [ExpenseResponse.model_validate(e) for e in results]


@router.post("", response_model=ExpenseResponse, status_code=201)
@limit_writes
async def create_expense(
    request: Request,
    body: ExpenseCreateRequest,
    session: CurrentSession,
    expenses: Expenses,
):
    """Record an expense in one of the user's categories."""
    created = await expenses.create_expense(
        session.user.email,
        ExpenseCreate(
            amount=body.amount,
            category_id=body.category_id,
            date=body.date,
            description=body.description,
        ),
    )
    return ExpenseResponse.model_validate(created)
