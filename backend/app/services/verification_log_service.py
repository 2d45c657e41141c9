"""
Banknote Verifier Backend — Verification Log Service
=====================================================

What:  Appends verification outcomes and derives statistics from them.
Why:   The log is the only mutable state in the service; stats are a view of it.
How:   One INSERT per verify call; one aggregate SELECT per stats request.

Stats are recomputed from the full table on every request. There are no
running counters and no cache, so the numbers are correct as long as the log
itself is complete (rows are never updated or deleted).
"""

import logging
import math

from sqlalchemy import case, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.models.verification_log import VerificationLog
from app.schemas.banknote import StatsResponse

logger = logging.getLogger(__name__)


def build_stats(total_verified: int, authentic: int) -> StatsResponse:
    """
    Turn raw counts into the stats payload.

    success_rate is the float percentage rounded to one decimal with halves
    going up, i.e. floor(x * 10 + 0.5) / 10 on the float value. Ties are
    decided on the float, so 23 of 80 gives 28.7 (28.749999...) while
    1 of 16 gives 6.3 (exactly 6.25). An empty log yields a rate of 0 rather
    than a division error.
    """
    if total_verified > 0:
        rate = authentic / total_verified * 100
        success_rate = math.floor(rate * 10 + 0.5) / 10
    else:
        success_rate = 0.0

    return StatsResponse(
        total_verified=total_verified,
        authentic=authentic,
        suspicious=total_verified - authentic,
        success_rate=success_rate,
    )


class VerificationLogService:
    """
    Append-only access to the verification_logs table.

    Responsibilities:
        - record_verification(): add and flush one entry
        - compute_stats(): aggregate the whole log into a StatsResponse

    Neither method commits. Database errors are wrapped in DatabaseError so
    driver messages never reach the client.
    """

    async def record_verification(
        self,
        db: AsyncSession,
        country_id: int,
        denomination_id: int,
        serial_number: str,
        format_valid: bool,
        length_valid: bool,
        is_authentic: bool,
    ) -> VerificationLog:
        """
        Append one log entry and return it with id and timestamp assigned.

        The row is flushed, not committed; VerificationService commits it
        once the whole verify call has succeeded.
        """
        entry = VerificationLog(
            country_id=country_id,
            denomination_id=denomination_id,
            serial_number=serial_number,
            format_valid=format_valid,
            length_valid=length_valid,
            is_authentic=is_authentic,
        )
        try:
            db.add(entry)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to record verification: %s", str(e))
            raise DatabaseError(
                message="Verification failed",
                context={"denomination_id": denomination_id, "error_type": type(e).__name__},
            )
        return entry

    async def compute_stats(self, db: AsyncSession) -> StatsResponse:
        """Count all log rows and the authentic ones in a single scan."""
        try:
            result = await db.execute(
                select(
                    func.count(VerificationLog.id),
                    func.coalesce(
                        func.sum(case((VerificationLog.is_authentic, 1), else_=0)), 0
                    ),
                )
            )
            total_verified, authentic = result.one()
        except SQLAlchemyError as e:
            logger.error("Database error computing stats: %s", str(e))
            raise DatabaseError(
                message="Failed to fetch statistics",
                context={"error_type": type(e).__name__},
            )

        return build_stats(int(total_verified or 0), int(authentic or 0))


verification_log_service = VerificationLogService()
