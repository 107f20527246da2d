"""SQLAlchemy mixins for common model patterns.

Provides: CuidMixin, CreatedAtMixin, OwnedByUserMixin.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from app.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class CreatedAtMixin:
    """Mixin for created_at (server default, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )


class OwnedByUserMixin:
    """Mixin for rows owned by a user. FK to app_user.email with CASCADE delete."""

    @declared_attr
    def user_email(cls) -> Mapped[str]:
        return mapped_column(
            String(100),
            ForeignKey("app_user.email", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
