"""
Banknote Verifier Backend — Reference Data Seeder
==================================================

What:  Loads the country and denomination rule table into the database.
When:  Once during application startup (lifespan), before traffic is served.

Idempotency:
    Rows are matched on their natural keys (country code; country + face
    value) and only missing ones are inserted. Running the seeder again, or
    after a partial earlier run, inserts nothing that already exists.
    Two instances starting at the same moment can still race on the same
    insert; the unique constraints make one of them fail instead of
    duplicating rows. Deploy a single instance for the first start.

Fail fast:
    Every serial pattern is compiled before anything is written. A malformed
    rule raises SeedDataError and startup stops.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.data.reference_data import COUNTRIES, DENOMINATIONS, CountrySeed, DenominationSeed
from app.exceptions import DatabaseError, SeedDataError
from app.models.country import Country
from app.models.denomination import Denomination
from app.services.verification_engine import compile_rule

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    countries_created: int = 0
    denominations_created: int = 0


def validate_reference_data(
    countries: Sequence[CountrySeed],
    denominations: Iterable[DenominationSeed],
) -> None:
    """Compile every rule and check every denomination points at a known country."""
    codes = {c.code for c in countries}
    if len(codes) != len(countries):
        raise SeedDataError("Duplicate country codes in reference data")

    seen = set()
    for d in denominations:
        if d.country_code not in codes:
            raise SeedDataError(
                f"Denomination {d.display_name} references unknown country {d.country_code}",
                context={"country_code": d.country_code},
            )
        key = (d.country_code, d.value)
        if key in seen:
            raise SeedDataError(
                f"Duplicate denomination {d.value} for {d.country_code}",
                context={"country_code": d.country_code, "value": d.value},
            )
        seen.add(key)
        try:
            compile_rule(d.serial_format, d.serial_length)
        except ValueError as e:
            raise SeedDataError(
                f"Invalid serial rule for {d.country_code} {d.value}: {e}",
                context={"country_code": d.country_code, "value": d.value},
            ) from e


async def seed_reference_data(
    db: AsyncSession,
    countries: Optional[Sequence[CountrySeed]] = None,
    denominations: Optional[Sequence[DenominationSeed]] = None,
) -> SeedResult:
    """
    Insert missing reference rows. The caller owns the transaction.

    Returns the number of rows created per table.
    """
    countries = COUNTRIES if countries is None else countries
    denominations = DENOMINATIONS if denominations is None else denominations

    validate_reference_data(countries, denominations)
    result = SeedResult()

    try:
        existing = await db.execute(select(Country))
        by_code: Dict[str, Country] = {c.code: c for c in existing.scalars().all()}

        for seed in countries:
            if seed.code in by_code:
                continue
            country = Country(
                code=seed.code,
                name=seed.name,
                currency=seed.currency,
                currency_symbol=seed.currency_symbol,
            )
            db.add(country)
            by_code[seed.code] = country
            result.countries_created += 1

        # Assigns ids to new countries
        await db.flush()

        existing = await db.execute(select(Denomination.country_id, Denomination.value))
        present = {(row.country_id, row.value) for row in existing}

        for seed in denominations:
            country_id = by_code[seed.country_code].id
            if (country_id, seed.value) in present:
                continue
            db.add(
                Denomination(
                    country_id=country_id,
                    value=seed.value,
                    display_name=seed.display_name,
                    serial_format=seed.serial_format,
                    serial_length=seed.serial_length,
                    pattern_description=seed.pattern_description,
                    is_active=True,
                )
            )
            present.add((country_id, seed.value))
            result.denominations_created += 1

        await db.flush()
    except SQLAlchemyError as e:
        logger.error("Seeding reference data failed: %s", str(e))
        raise DatabaseError(
            message="Failed to seed reference data",
            context={"error_type": type(e).__name__},
        )

    if result.countries_created or result.denominations_created:
        logger.info(
            "Seeded %d countries and %d denominations",
            result.countries_created,
            result.denominations_created,
        )
    else:
        logger.info("Reference data already present; nothing to seed")
    return result
