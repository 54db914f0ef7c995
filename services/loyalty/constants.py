"""Constants for the loyalty service."""

# Classification rule: at least MIN_LOYAL_VISITS visits, and at least
# LOYALTY_RATIO of the month's occurrences of that weekday.
MIN_LOYAL_VISITS = 3
LOYALTY_RATIO = 0.75

# Year window accepted by the monthly endpoint
MIN_YEAR = 2020
MAX_YEAR = 2030

# Fixed English names, indexed by month number (1-12) and date.weekday() (0-6).
# Never derived from the host locale.
MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

LOYALTY_CRITERIA = (
    "Customers who visit the same hotel on the same day of week for at least "
    "75% of possible days in the month (minimum 3 visits)"
)
