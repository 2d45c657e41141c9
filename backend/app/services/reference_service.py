"""
Banknote Verifier Backend — Reference Data Lookup Service
==========================================================

What:  Read access to countries and denominations.
Why:   Verify requests and the listing endpoints all start with these lookups.
How:   Exact, case-sensitive equality queries through an AsyncSession.

Not-found vs. failure:
    `find_*` return None when no row matches. Driver/connection problems
    raise DatabaseError. Callers that need a 404 use `require_*`, which turns
    None into NotFoundError.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, NotFoundError
from app.models.country import Country
from app.models.denomination import Denomination

logger = logging.getLogger(__name__)


class ReferenceService:
    """Stateless lookups; every method receives the request's session."""

    async def list_countries(self, db: AsyncSession) -> List[Country]:
        """All countries in seed order (by id). Raises DatabaseError on store failure."""
        try:
            result = await db.execute(select(Country).order_by(Country.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing countries: %s", str(e))
            raise DatabaseError(
                message="Failed to fetch countries",
                context={"error_type": type(e).__name__},
            )

    async def find_country(self, db: AsyncSession, code: str) -> Optional[Country]:
        """
        Look up a country by its exact, case-sensitive code.

        Args:
            db: Async database session
            code: Country code as sent by the client ("US", "UK", ...)

        Returns:
            The Country, or None when no row has this code

        Raises:
            DatabaseError: The query itself failed. Never raised for a
                missing row, so callers can tell 404 from 500.
        """
        try:
            result = await db.execute(select(Country).where(Country.code == code))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error looking up country %r: %s", code, str(e))
            raise DatabaseError(
                message="Failed to look up country",
                context={"country_code": code, "error_type": type(e).__name__},
            )

    async def find_denomination(
        self, db: AsyncSession, country_id: int, value: str
    ) -> Optional[Denomination]:
        """
        Look up one denomination of a country by its face value.

        Args:
            db: Async database session
            country_id: Primary key of the owning country
            value: Face value string, matched exactly ("20" but not "20.00")

        Returns:
            The Denomination (active or not), or None when absent

        Raises:
            DatabaseError: The query itself failed
        """
        try:
            result = await db.execute(
                select(Denomination).where(
                    Denomination.country_id == country_id,
                    Denomination.value == value,
                )
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(
                "Database error looking up denomination %r for country %s: %s",
                value, country_id, str(e),
            )
            raise DatabaseError(
                message="Failed to look up denomination",
                context={"country_id": country_id, "value": value, "error_type": type(e).__name__},
            )

    async def list_denominations(self, db: AsyncSession, country_id: int) -> List[Denomination]:
        """Denominations of one country ordered by id; empty list if it has none."""
        try:
            result = await db.execute(
                select(Denomination)
                .where(Denomination.country_id == country_id)
                .order_by(Denomination.id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing denominations for country %s: %s", country_id, str(e))
            raise DatabaseError(
                message="Failed to fetch denominations",
                context={"country_id": country_id, "error_type": type(e).__name__},
            )

    async def require_country(self, db: AsyncSession, code: str) -> Country:
        """find_country, but a missing code raises NotFoundError (404)."""
        country = await self.find_country(db, code)
        if country is None:
            raise NotFoundError(resource="country", resource_id=code)
        return country

    async def require_denomination(
        self, db: AsyncSession, country: Country, value: str
    ) -> Denomination:
        denomination = await self.find_denomination(db, country.id, value)
        if denomination is None:
            raise NotFoundError(
                resource="denomination",
                resource_id=value,
                context={"country_code": country.code},
            )
        return denomination


reference_service = ReferenceService()
