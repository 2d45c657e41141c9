"""
Banknote Verifier Backend — Verification Service (Orchestrator)
================================================================

What:  Runs one verify request end to end.
Why:   Keeps the route thin and the sequence of steps in one place.

Orchestration Flow (POST /api/verify):
    ┌──────────┐   ┌──────────┐   ┌──────────────┐   ┌──────────┐   ┌──────────┐
    │ Country  │──▶│  Denom.  │──▶│    Engine    │──▶│ Log row  │──▶│ Response │
    │ lookup   │   │  lookup  │   │ (pure check) │   │ (commit) │   │          │
    └──────────┘   └──────────┘   └──────────────┘   └──────────┘   └──────────┘

    Either lookup missing → NotFoundError (404), nothing written.
    Log write failing     → DatabaseError (500), even though the check ran;
                            the session dependency rolls back.

The log row is committed here, before the response is built. FastAPI may run
the exit half of a yield dependency after the response has gone out, so a
commit left to get_db_session could fail behind a 200.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.schemas.banknote import VerifyRequest, VerifyResponse
from app.services.reference_service import reference_service
from app.services.verification_engine import verify_serial
from app.services.verification_log_service import verification_log_service

logger = logging.getLogger(__name__)


class VerificationService:
    """
    Business logic for POST /api/verify.

    Stateless: the request's session is passed into every call. Lookups and
    the log write go through ReferenceService and VerificationLogService;
    this class owns the ordering and the commit of the log row, so a caller
    only ever sees a verdict that has been durably recorded.
    """

    async def verify_banknote(self, db: AsyncSession, request: VerifyRequest) -> VerifyResponse:
        """
        Look up the rule, check the serial, record the outcome.

        Args:
            db: Async database session (injected by FastAPI)
            request: Validated verify body

        Returns:
            VerifyResponse combining the country, denomination and both checks

        Raises:
            NotFoundError: unknown country code or denomination value
            DatabaseError: lookup, log write or commit failed
        """
        country = await reference_service.require_country(db, request.country_code)
        denomination = await reference_service.require_denomination(
            db, country, request.denomination
        )

        result = verify_serial(denomination.rule, request.serial_number)

        await verification_log_service.record_verification(
            db,
            country_id=country.id,
            denomination_id=denomination.id,
            serial_number=request.serial_number,
            format_valid=result.format_valid,
            length_valid=result.length_valid,
            is_authentic=result.is_authentic,
        )

        try:
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to commit verification log: %s", str(e))
            raise DatabaseError(
                message="Verification failed",
                context={"denomination_id": denomination.id, "error_type": type(e).__name__},
            )

        logger.info(
            "Verified %s %s serial: format_valid=%s length_valid=%s authentic=%s",
            country.code,
            denomination.display_name,
            result.format_valid,
            result.length_valid,
            result.is_authentic,
        )

        return VerifyResponse(
            country=country.name,
            country_code=country.code,
            currency=country.currency,
            denomination=denomination.display_name,
            serial_number=request.serial_number,
            format_valid=result.format_valid,
            length_valid=result.length_valid,
            is_authentic=result.is_authentic,
            pattern_description=denomination.pattern_description,
            timestamp=datetime.now(timezone.utc),
        )


verification_service = VerificationService()
