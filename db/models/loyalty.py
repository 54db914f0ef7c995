"""Pydantic models for loyalty analysis results."""

from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LoyaltyPattern(BaseModel):
    """A loyal (customer, hotel, weekday) pattern within one month."""

    customer_id: int
    customer_name: str
    customer_email: str = ""
    hotel_id: int
    hotel_name: str
    hotel_location: str = ""
    day_of_week: str  # "Monday" .. "Sunday"
    month: str  # English month name
    year: int
    visit_dates: List[date]
    visit_count: int
    first_visit: date
    last_visit: date
    is_loyal: bool = True

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class LoyaltyReport(BaseModel):
    """Monthly loyalty analysis response."""

    loyal_customers: List[LoyaltyPattern] = []
    month: str
    year: int
    total_loyal_customers: int = 0
    analysis_date: Optional[datetime] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoyaltyAnalytics(BaseModel):
    """Same analysis as LoyaltyReport, shaped for the customer analytics view."""

    month: str
    year: int
    total_loyal_customers: int = 0
    loyalty_patterns: List[LoyaltyPattern] = []
    analysis_date: Optional[datetime] = None
    criteria: str = ""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
