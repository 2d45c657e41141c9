"""
Banknote Verifier Backend — ORM Models
=======================================

Importing this package registers every table with `Base.metadata`
(used by Alembic autogenerate and `create_all_tables()`).
"""

from app.models.country import Country
from app.models.denomination import Denomination
from app.models.verification_log import VerificationLog

__all__ = ["Country", "Denomination", "VerificationLog"]
