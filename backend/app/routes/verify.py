"""
Banknote Verifier Backend — Verify Route Handler
=================================================

What:  Handles POST /api/verify.
How:   FastAPI validates the body against VerifyRequest (400 on failure, see
       main.py), then VerificationService does lookup → check → log.

Error responses (handled by global exception handlers):
    HTTP 400: Malformed body (lengths, missing fields, wrong types)
    HTTP 404: Unknown country code or denomination value
    HTTP 500: Store failure, generic message only
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.banknote import ErrorResponse, VerifyRequest, VerifyResponse
from app.services.verification_service import verification_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Verification"])


@router.post(
    "/verify",
    response_model=VerifyResponse,
    responses={
        400: {"description": "Invalid request data", "model": ErrorResponse},
        404: {"description": "Country or denomination not found", "model": ErrorResponse},
        500: {"description": "Verification failed", "model": ErrorResponse},
    },
    summary="Check a banknote serial number",
    description=(
        "Checks the serial number against the denomination's format pattern and "
        "expected length, records the outcome, and returns both checks. This is a "
        "structural check only; it does not detect physical counterfeits."
    ),
)
async def verify_banknote(
    payload: VerifyRequest,
    db: AsyncSession = Depends(get_db_session),
) -> VerifyResponse:
    return await verification_service.verify_banknote(db, payload)
