"""Loyalty service - monthly and all-months loyal customer reports."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from loguru import logger

from db.models.loyalty import LoyaltyAnalytics, LoyaltyPattern, LoyaltyReport
from services.loyalty import patterns, repo
from services.loyalty.constants import LOYALTY_CRITERIA, MAX_YEAR, MIN_YEAR


def resolve_period(month: Optional[int], year: Optional[int]) -> tuple[int, int]:
    """Fill in the current UTC month/year for missing values."""
    now = datetime.now(timezone.utc)
    return (month if month is not None else now.month, year if year is not None else now.year)


def validate_year(year: int) -> None:
    """Raise ValueError unless year is inside the supported window."""
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValueError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")


class IService(ABC):
    """Loyalty Service - Find customers with a recurring weekly hotel habit."""

    @abstractmethod
    async def monthly(self, month: Optional[int] = None, year: Optional[int] = None) -> LoyaltyReport:
        """Loyal customers for one month (defaults to the current month).

        Raises:
            ValueError: month outside 1-12 or year outside the supported window
        """
        pass

    @abstractmethod
    async def all_months(self) -> List[LoyaltyPattern]:
        """Loyal patterns for every month that has visits, oldest month first."""
        pass

    @abstractmethod
    async def analytics(self, month: Optional[int] = None, year: Optional[int] = None) -> LoyaltyAnalytics:
        """Loyalty analytics for one month, including the rule description.

        Raises:
            ValueError: month outside 1-12
        """
        pass


class Service(IService):
    """Implementation of the loyalty service."""

    def __init__(self) -> None:
        pass

    async def monthly(self, month: Optional[int] = None, year: Optional[int] = None) -> LoyaltyReport:
        month, year = resolve_period(month, year)
        patterns.validate_month(month)
        validate_year(year)

        snapshot = await repo.get_snapshot()
        report = patterns.analyze_month(
            snapshot.visitations, snapshot.customers, snapshot.hotels, month, year
        )
        logger.info(f"Loyalty {report.month} {year}: {report.total_loyal_customers} loyal patterns")
        return report.model_copy(update={"analysis_date": datetime.now(timezone.utc)})

    async def all_months(self) -> List[LoyaltyPattern]:
        snapshot = await repo.get_snapshot()
        results = patterns.analyze_all_months(
            snapshot.visitations, snapshot.customers, snapshot.hotels
        )
        logger.info(f"Loyalty across all months: {len(results)} loyal patterns")
        return results

    async def analytics(self, month: Optional[int] = None, year: Optional[int] = None) -> LoyaltyAnalytics:
        month, year = resolve_period(month, year)
        patterns.validate_month(month)

        snapshot = await repo.get_snapshot()
        report = patterns.analyze_month(
            snapshot.visitations, snapshot.customers, snapshot.hotels, month, year
        )
        return LoyaltyAnalytics(
            month=report.month,
            year=report.year,
            total_loyal_customers=report.total_loyal_customers,
            loyalty_patterns=report.loyal_customers,
            analysis_date=datetime.now(timezone.utc),
            criteria=LOYALTY_CRITERIA,
        )
