"""Pending activation code, one row per unvalidated user."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, SmallInteger, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base


class ActivationCode(Base):
    """Activation code keyed by the owning user's email.

    code is stored as text so leading zeros survive. attempts counts incorrect
    guesses only; it is reset only by deleting and reissuing the row.
    """

    __tablename__ = "activation_code"

    email: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("app_user.email", ondelete="CASCADE"),
        primary_key=True,
    )
    code: Mapped[str] = mapped_column(String(6), nullable=False)
    expiration_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    attempts: Mapped[int] = mapped_column(
        SmallInteger, nullable=False, default=0, server_default=text("0")
    )

    __table_args__ = (
        CheckConstraint("length(code) = 6", name="ck_activation_code_length"),
        CheckConstraint("attempts >= 0", name="ck_activation_code_attempts"),
    )
