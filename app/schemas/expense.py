"""Expense API schemas."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.shared.utils.datetime import utc_now


def _today() -> dt.date:
    return utc_now().date()


class ExpenseCreateRequest(BaseModel):
    """Request body for POST /expenses. Date defaults to today (UTC)."""

    amount: Decimal = Field(..., gt=0, max_digits=9, decimal_places=2)
    category_id: str = Field(..., min_length=1)
    description: str | None = Field(default=None, max_length=255)
    date: dt.date = Field(default_factory=_today)


class ExpenseResponse(BaseModel):
    """Expense response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    amount: Decimal
    category_id: str
    description: str | None
    date: dt.date
