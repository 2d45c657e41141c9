"""
Banknote Verifier Backend — Denomination SQLAlchemy Model
==========================================================

What:  ORM model for the `denominations` table: one serial rule per note.
Why:   Each face value carries its own serial format and expected length.
How:   `serial_format` is stored as text; the compiled rule is obtained
       through `Denomination.rule`, backed by the engine's compile cache.

Rule validation:
    `@validates` compiles the pattern whenever `serial_format` or
    `serial_length` is assigned, so a malformed rule is rejected when the
    row is built (at seed time) rather than on the first verify request.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column, validates

from app.database import Base
from app.services.verification_engine import SerialRule, compile_rule


class Denomination(Base):
    """
    A specific face-value banknote of a country's currency.

    `(country_id, value)` is the natural lookup key used by verify requests.
    `serial_format` and `serial_length` are authored independently; both
    must pass for a serial to be considered authentic.
    """

    __tablename__ = "denominations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    country_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("countries.id"),
        nullable=False,
        index=True,
    )

    # Face value as a string ("5", "1000"); matched exactly
    value: Mapped[str] = mapped_column(Text, nullable=False)

    display_name: Mapped[str] = mapped_column(Text, nullable=False)

    # Anchored regular expression, e.g. ^[A-L]\d{8}[A-Z]$
    serial_format: Mapped[str] = mapped_column(Text, nullable=False)
    serial_length: Mapped[int] = mapped_column(Integer, nullable=False)

    # Human-readable version of serial_format, echoed in verify responses
    pattern_description: Mapped[str] = mapped_column(Text, nullable=False)

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
    )

    __table_args__ = (
        UniqueConstraint("country_id", "value", name="uq_denominations_country_value"),
    )

    @validates("serial_format")
    def _validate_serial_format(self, key: str, serial_format: str) -> str:
        length = self.__dict__.get("serial_length")
        # Length may not be assigned yet; validate the pattern on its own
        compile_rule(serial_format, length if length is not None else 1)
        return serial_format

    @validates("serial_length")
    def _validate_serial_length(self, key: str, serial_length: int) -> int:
        serial_format = self.__dict__.get("serial_format")
        compile_rule(serial_format if serial_format is not None else "", serial_length)
        return serial_length

    @property
    def rule(self) -> SerialRule:
        """Compiled rule for this denomination (cached per pattern/length)."""
        return compile_rule(self.serial_format, self.serial_length)

    def __repr__(self) -> str:
        return (
            f"<Denomination(id={self.id}, country_id={self.country_id}, "
            f"value='{self.value}')>"
        )
