"""
Banknote Verifier Backend — Reference Data Routes
==================================================

What:  GET /api/countries and GET /api/countries/{code}/denominations.
Why:   The frontend fills its country and denomination pickers from these.

Reference data never changes after seeding, so both responses may be cached
by the browser for a while.
"""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.banknote import CountryList, DenominationList, ErrorResponse
from app.services.reference_service import reference_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Reference Data"])


@router.get(
    "/countries",
    response_model=CountryList,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List supported countries",
)
async def list_countries(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
):
    countries = await reference_service.list_countries(db)
    response.headers["Cache-Control"] = "public, max-age=300"
    return countries


@router.get(
    "/countries/{code}/denominations",
    response_model=DenominationList,
    responses={
        404: {"description": "Country not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List denominations and serial rules for a country",
)
async def list_denominations(
    code: str,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
):
    """Code match is exact and case-sensitive ("us" is not "US")."""
    country = await reference_service.require_country(db, code)
    denominations = await reference_service.list_denominations(db, country.id)
    response.headers["Cache-Control"] = "public, max-age=300"
    return denominations
