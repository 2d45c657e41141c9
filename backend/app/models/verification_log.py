"""
Banknote Verifier Backend — VerificationLog SQLAlchemy Model
=============================================================

What:  ORM model for the append-only `verification_logs` table.
Why:   Every verify call leaves exactly one row; statistics are derived by
       scanning this table on demand.
Lifecycle:
    Inserted once per successful lookup + check. Never updated or deleted,
    so aggregate counts only depend on the rows that exist.
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class VerificationLog(Base):
    """One recorded verification. `is_authentic == format_valid and length_valid`."""

    __tablename__ = "verification_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    country_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("countries.id"), nullable=False
    )
    denomination_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("denominations.id"), nullable=False
    )

    # Stored exactly as submitted (no trimming, no case folding)
    serial_number: Mapped[str] = mapped_column(Text, nullable=False)

    is_authentic: Mapped[bool] = mapped_column(Boolean, nullable=False)
    format_valid: Mapped[bool] = mapped_column(Boolean, nullable=False)
    length_valid: Mapped[bool] = mapped_column(Boolean, nullable=False)

    # UTC creation time
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return (
            f"<VerificationLog(id={self.id}, denomination_id={self.denomination_id}, "
            f"is_authentic={self.is_authentic})>"
        )
