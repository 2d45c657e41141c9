"""
Banknote Verifier Backend — Country SQLAlchemy Model
=====================================================

What:  ORM model for the `countries` reference table.
Why:   Verify requests and denomination listings are keyed by country code.
When:  Rows are written once by the seeder and never changed afterwards.
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Country(Base):
    """
    A currency-issuing country (or union, for EU).

    Query Patterns:
        - List all: SELECT ... ORDER BY id
        - By code:  SELECT ... WHERE code = :code (unique index, case-sensitive)
    """

    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Short code as used by the frontend ("US", "UK", "EU"); not strictly ISO 3166
    code: Mapped[str] = mapped_column(String(3), nullable=False, unique=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    # ISO 4217 code ("USD") and display symbol ("$", "CHF", "HK$")
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    currency_symbol: Mapped[str] = mapped_column(String(5), nullable=False)

    def __repr__(self) -> str:
        return f"<Country(id={self.id}, code='{self.code}', currency='{self.currency}')>"
