"""Loyalty routes: monthly report and all-months report."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException

from db.models import LoyaltyPattern, LoyaltyReport
from services.loyalty.service import Service

router = APIRouter(prefix="/api/loyalty", tags=["loyalty"])

service = Service()


@router.get("/monthly", response_model=LoyaltyReport)
async def monthly(month: Optional[int] = None, year: Optional[int] = None):
    """Loyal customers for a month (defaults to the current UTC month)."""
    try:
        return await service.monthly(month, year)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/all", response_model=List[LoyaltyPattern])
async def all_months():
    """Loyal customers for every month that has visits."""
    return await service.all_months()
