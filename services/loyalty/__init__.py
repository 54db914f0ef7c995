"""Loyalty service - public interface."""

from services.loyalty.patterns import (
    analyze_all_months,
    analyze_month,
    group_visits,
    is_loyal_pattern,
    possible_dates,
)
from services.loyalty.service import Service
