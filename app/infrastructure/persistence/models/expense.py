"""Expense ORM model."""

import datetime as dt
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
    OwnedByUserMixin,
)


class Expense(CuidMixin, OwnedByUserMixin, CreatedAtMixin, Base):
    """Expense model. Table: expense. Amount is NUMERIC(9, 2) and strictly positive."""

    __tablename__ = "expense"

    amount: Mapped[Decimal] = mapped_column(Numeric(9, 2), nullable=False)
    category_id: Mapped[str] = mapped_column(
        String, ForeignKey("category.id", ondelete="CASCADE"), nullable=False, index=True
    )
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)

    __table_args__ = (CheckConstraint("amount > 0", name="ck_expense_amount_positive"),)
