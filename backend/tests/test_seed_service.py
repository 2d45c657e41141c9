"""
Banknote Verifier Backend — Seeder Tests
=========================================

What:  Loading of the reference rule table.
What we test:
    ✅ First run inserts every country and denomination
    ✅ Re-running inserts nothing; a partial table is completed
    ✅ A malformed rule aborts before anything is written
    ✅ The Denomination model itself rejects malformed rules
"""

import pytest
from sqlalchemy import func, select

from app.data.reference_data import COUNTRIES, DENOMINATIONS, CountrySeed, DenominationSeed
from app.exceptions import SeedDataError
from app.models import Country, Denomination
from app.services.seed_service import seed_reference_data, validate_reference_data


async def _count(session, model) -> int:
    return (await session.execute(select(func.count(model.id)))).scalar_one()


class TestReferenceData:

    def test_table_sizes(self):
        assert len(COUNTRIES) == 25
        assert len(DENOMINATIONS) == 49

    def test_display_names(self):
        names = {(d.country_code, d.value): d.display_name for d in DENOMINATIONS}
        assert names[("US", "100")] == "$100"
        assert names[("CH", "1000")] == "CHF 1000"
        assert names[("LK", "20")] == "Rs 20"
        assert names[("SA", "10")] == "R10"

    def test_bundled_rules_are_valid(self):
        validate_reference_data(COUNTRIES, DENOMINATIONS)

    def test_unknown_country_rejected(self):
        bad = [DenominationSeed("XX", "5", "X5", r"^\d$", 1, "digit")]
        with pytest.raises(SeedDataError, match="unknown country"):
            validate_reference_data(COUNTRIES, bad)

    def test_duplicate_denomination_rejected(self):
        dup = [DENOMINATIONS[0], DENOMINATIONS[0]]
        with pytest.raises(SeedDataError, match="Duplicate denomination"):
            validate_reference_data(COUNTRIES, dup)


class TestSeedReferenceData:

    @pytest.mark.asyncio
    async def test_first_run_inserts_everything(self, session_factory):
        async with session_factory() as session:
            result = await seed_reference_data(session)
            await session.commit()

            assert result.countries_created == 25
            assert result.denominations_created == 49
            assert await _count(session, Country) == 25
            assert await _count(session, Denomination) == 49

    @pytest.mark.asyncio
    async def test_second_run_is_a_no_op(self, seeded_factory):
        async with seeded_factory() as session:
            result = await seed_reference_data(session)
            await session.commit()

            assert result.countries_created == 0
            assert result.denominations_created == 0
            assert await _count(session, Country) == 25
            assert await _count(session, Denomination) == 49

    @pytest.mark.asyncio
    async def test_partial_table_is_completed(self, session_factory):
        us_only = [c for c in COUNTRIES if c.code == "US"]
        us_notes = [d for d in DENOMINATIONS if d.country_code == "US"][:3]

        async with session_factory() as session:
            await seed_reference_data(session, us_only, us_notes)
            await session.commit()

        async with session_factory() as session:
            result = await seed_reference_data(session)
            await session.commit()

            assert result.countries_created == 24
            assert result.denominations_created == 46
            assert await _count(session, Denomination) == 49

    @pytest.mark.asyncio
    async def test_malformed_rule_writes_nothing(self, session_factory):
        countries = [CountrySeed("ZZ", "Nowhere", "ZZZ", "z")]
        denominations = [DenominationSeed("ZZ", "1", "z1", r"^[A-Z", 5, "broken")]

        async with session_factory() as session:
            with pytest.raises(SeedDataError, match="Invalid serial rule"):
                await seed_reference_data(session, countries, denominations)
            assert await _count(session, Country) == 0


class TestDenominationModel:

    def test_malformed_pattern_rejected_on_assignment(self):
        with pytest.raises(ValueError):
            Denomination(
                country_id=1,
                value="5",
                display_name="X5",
                serial_format=r"^[A-Z",
                serial_length=5,
                pattern_description="broken",
            )

    def test_non_positive_length_rejected_on_assignment(self):
        with pytest.raises(ValueError):
            Denomination(
                country_id=1,
                value="5",
                display_name="X5",
                serial_format=r"^\d{5}$",
                serial_length=0,
                pattern_description="5 digits",
            )

    def test_rule_property_uses_compiled_pattern(self):
        denomination = Denomination(
            country_id=1,
            value="5",
            display_name="X5",
            serial_format=r"^\d{5}$",
            serial_length=5,
            pattern_description="5 digits",
        )
        assert denomination.rule.pattern.fullmatch("12345")
        assert denomination.rule.length == 5
