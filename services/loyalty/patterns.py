"""Loyalty-pattern analysis.

A customer is loyal to a hotel in a given month when they keep visiting it on
the same weekday: at least three visits, covering at least 75% of that
weekday's occurrences in the month.

Pipeline (all pure, no I/O):

    visits -> group_visits -> classify_groups -> assemble_patterns -> report

Every entry point that reports loyalty (monthly report, all-months report,
customer analytics, CLI) goes through analyze_month() so the rule lives in
exactly one place.
"""

import calendar
import math
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Union

from loguru import logger

from db.models.loyalty import LoyaltyPattern, LoyaltyReport
from db.models.visitation import to_naive_utc
from services.loyalty.constants import (
    DAY_NAMES,
    LOYALTY_RATIO,
    MIN_LOYAL_VISITS,
    MONTH_NAMES,
)

VisitDate = Union[datetime, date]


class GroupKey(NamedTuple):
    """Composite key for a visit group. weekday follows date.weekday() (Monday=0)."""

    customer_id: int
    hotel_id: int
    weekday: int


def validate_month(month: int) -> None:
    """Raise ValueError unless month is in 1..12."""
    if not isinstance(month, int) or month < 1 or month > 12:
        raise ValueError("Month must be between 1 and 12")


def month_name(month: int) -> str:
    validate_month(month)
    return MONTH_NAMES[month]


def _as_date(value: VisitDate) -> date:
    # datetime is a date subclass, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def _visit_time(visit) -> VisitDate:
    # Aware and naive datetimes cannot be compared, so bring both to naive UTC
    value = visit.visit_date
    if isinstance(value, datetime):
        return to_naive_utc(value)
    return value


# =============================================================================
# Weekday occurrences
# =============================================================================


def possible_dates(weekday: int, month: int, year: int) -> List[date]:
    """Every date in the month that falls on the given weekday, ascending.

    Returns 4 or 5 dates for any real month.
    """
    validate_month(month)

    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])

    current = first
    while current.weekday() != weekday and current <= last:
        current += timedelta(days=1)

    dates = []
    while current <= last:
        dates.append(current)
        current += timedelta(days=7)
    return dates


def loyalty_threshold(occurrences: int) -> int:
    """Minimum qualifying visits for a month with this many weekday occurrences."""
    return max(MIN_LOYAL_VISITS, math.ceil(occurrences * LOYALTY_RATIO))


# =============================================================================
# Grouping
# =============================================================================


def group_visits(visits: Iterable, month: int, year: int) -> Dict[GroupKey, List[VisitDate]]:
    """Group a month's visits by (customer, hotel, weekday).

    Visits outside the month/year are dropped. Dates in each group are sorted
    ascending; duplicate visits are kept and each one counts.
    """
    validate_month(month)

    groups: Dict[GroupKey, List[VisitDate]] = defaultdict(list)
    for visit in visits:
        visit_date = _visit_time(visit)
        if visit_date.month != month or visit_date.year != year:
            continue
        key = GroupKey(visit.customer_id, visit.hotel_id, visit_date.weekday())
        groups[key].append(visit_date)

    for dates in groups.values():
        dates.sort()
    return dict(groups)


# =============================================================================
# Classification
# =============================================================================


def is_loyal_pattern(visit_dates: Sequence[VisitDate], weekday: int, month: int, year: int) -> bool:
    """Decide whether a group's visit dates form a loyal weekly pattern."""
    if len(visit_dates) < MIN_LOYAL_VISITS:
        return False

    possible = set(possible_dates(weekday, month, year))
    visited = sum(1 for d in visit_dates if _as_date(d) in possible)

    return visited >= loyalty_threshold(len(possible))


def classify_groups(groups: Dict[GroupKey, List[VisitDate]], month: int, year: int) -> Dict[GroupKey, bool]:
    """Classify every group, keyed the same way as the input."""
    classifications = {}
    for key, dates in groups.items():
        loyal = is_loyal_pattern(dates, key.weekday, month, year)
        logger.debug(
            f"customer={key.customer_id} hotel={key.hotel_id} "
            f"{DAY_NAMES[key.weekday]}: {len(dates)} visits -> {'loyal' if loyal else 'not loyal'}"
        )
        classifications[key] = loyal
    return classifications


# =============================================================================
# Report assembly
# =============================================================================


def _index_by_id(records: Optional[Iterable]) -> dict:
    # First record wins when ids repeat
    index = {}
    for record in records or []:
        index.setdefault(record.id, record)
    return index


def assemble_patterns(
    groups: Dict[GroupKey, List[VisitDate]],
    classifications: Dict[GroupKey, bool],
    customers: Iterable,
    hotels: Iterable,
    month: int,
    year: int,
) -> List[LoyaltyPattern]:
    """Build LoyaltyPattern records for the loyal groups.

    Missing customers/hotels get a "Customer #<id>" / "Hotel #<id>" label.
    Output is ordered by (customer_id, hotel_id, weekday).
    """
    customers_by_id = _index_by_id(customers)
    hotels_by_id = _index_by_id(hotels)
    name = month_name(month)

    patterns = []
    for key in sorted(groups):
        if not classifications.get(key):
            continue

        customer = customers_by_id.get(key.customer_id)
        hotel = hotels_by_id.get(key.hotel_id)
        if customer is None:
            logger.warning(f"Customer {key.customer_id} not found, using placeholder")
        if hotel is None:
            logger.warning(f"Hotel {key.hotel_id} not found, using placeholder")

        visit_dates = sorted(_as_date(d) for d in groups[key])
        patterns.append(
            LoyaltyPattern(
                customer_id=key.customer_id,
                customer_name=customer.name if customer else f"Customer #{key.customer_id}",
                customer_email=customer.email if customer else "",
                hotel_id=key.hotel_id,
                hotel_name=hotel.name if hotel else f"Hotel #{key.hotel_id}",
                hotel_location=hotel.location if hotel else "",
                day_of_week=DAY_NAMES[key.weekday],
                month=name,
                year=year,
                visit_dates=visit_dates,
                visit_count=len(visit_dates),
                first_visit=visit_dates[0],
                last_visit=visit_dates[-1],
                is_loyal=True,
            )
        )
    return patterns


# =============================================================================
# Entry points
# =============================================================================


def analyze_month(visits: Iterable, customers: Iterable, hotels: Iterable, month: int, year: int) -> LoyaltyReport:
    """Run the full pipeline for one month.

    Raises:
        ValueError: month is not in 1..12 (checked before any grouping)
    """
    validate_month(month)

    groups = group_visits(visits, month, year)
    classifications = classify_groups(groups, month, year)
    patterns = assemble_patterns(groups, classifications, customers, hotels, month, year)

    return LoyaltyReport(
        loyal_customers=patterns,
        month=month_name(month),
        year=year,
        total_loyal_customers=len(patterns),
    )


def observed_months(visits: Iterable) -> List[tuple]:
    """Distinct (year, month) pairs present in the visits, oldest first."""
    return sorted({(d.year, d.month) for d in map(_visit_time, visits)})


def analyze_all_months(visits: Iterable, customers: Iterable, hotels: Iterable) -> List[LoyaltyPattern]:
    """Analyze every observed month independently and concatenate the results."""
    visits = list(visits)
    customers = list(customers)
    hotels = list(hotels)

    patterns: List[LoyaltyPattern] = []
    for year, month in observed_months(visits):
        report = analyze_month(visits, customers, hotels, month, year)
        patterns.extend(report.loyal_customers)
    return patterns
