"""
Banknote Verifier Backend — Statistics Route
=============================================

What:  GET /api/stats, aggregate counts over the verification log.
Why:   Recomputed on every call; never cached (the log grows with each verify).
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.banknote import ErrorResponse, StatsResponse
from app.services.verification_log_service import verification_log_service

router = APIRouter(prefix="/api", tags=["Statistics"])


@router.get(
    "/stats",
    response_model=StatsResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Verification statistics",
)
async def get_stats(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> StatsResponse:
    response.headers["Cache-Control"] = "no-store"
    return await verification_log_service.compute_stats(db)
