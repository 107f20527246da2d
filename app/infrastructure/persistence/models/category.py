"""Expense category (hierarchical, per user)."""

from sqlalchemy import ForeignKey, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, OwnedByUserMixin


class Category(CuidMixin, OwnedByUserMixin, Base):
    """Category model. Table: category. parent_id is NULL for root categories.

    Names are unique per user among siblings (partial unique indexes for
    root and child categories).
    """

    __tablename__ = "category"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    parent_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("category.id", ondelete="CASCADE"), nullable=True
    )

    __table_args__ = (
        Index(
            "uq_category_root_name",
            "user_email",
            "name",
            unique=True,
            postgresql_where=text("parent_id IS NULL"),
            sqlite_where=text("parent_id IS NULL"),
        ),
        Index(
            "uq_category_child_name",
            "user_email",
            "parent_id",
            "name",
            unique=True,
            postgresql_where=text("parent_id IS NOT NULL"),
            sqlite_where=text("parent_id IS NOT NULL"),
        ),
    )
