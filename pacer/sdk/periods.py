"""Pay schedule helpers.

Estimates how many pay periods are left in the calendar year and resolves the
number of periods per year from a pay frequency name.
"""

import math
from datetime import date, datetime
from typing import Optional, Union

from .contribution import require_positive_periods


# Pay periods by frequency
PAY_PERIODS = {
    "weekly": 52,
    "biweekly": 26,
    "semimonthly": 24,
    "monthly": 12,
}

DEFAULT_TOTAL_PERIODS = PAY_PERIODS["biweekly"]

# Fixed-length year; leap years are not special-cased.
DAYS_PER_YEAR = 365
SECONDS_PER_DAY = 60 * 60 * 24


def _as_datetime(now: Union[date, datetime]) -> datetime:
    """Treat a plain date as midnight of that day."""
    if isinstance(now, datetime):
        return now
    return datetime(now.year, now.month, now.day)


def days_until_year_end(now: Union[date, datetime]) -> float:
    """Fractional days from now until midnight starting December 31.

    The year-end boundary has no time-of-day component; now keeps its own,
    so a partial day is included. Aware datetimes use their own tzinfo for
    the boundary.
    """
    now = _as_datetime(now)
    year_end = datetime(now.year, 12, 31, tzinfo=now.tzinfo)
    return (year_end - now).total_seconds() / SECONDS_PER_DAY


def estimate_remaining_periods(now: Union[date, datetime], total_periods: int) -> int:
    """Estimate the number of pay periods remaining in the year.

    Args:
        now: Current date or datetime
        total_periods: Number of pay periods in the year

    Returns:
        Estimated remaining pay periods, never less than 1

    Raises:
        PeriodCountError: If total_periods is zero or negative

    Example:
        >>> estimate_remaining_periods(date(2026, 12, 1), 26)
        2
    """
    require_positive_periods("total_periods", total_periods)

    days_left = days_until_year_end(now)
    days_in_period = DAYS_PER_YEAR / total_periods
    estimate = math.floor(days_left / days_in_period)
    return max(1, estimate)


def resolve_total_periods(frequency: Optional[str] = None, periods: Optional[int] = None) -> int:
    """Resolve pay periods per year.

    Resolution order:
    1. Explicit period count
    2. Named pay frequency
    3. DEFAULT_TOTAL_PERIODS (biweekly)

    Raises:
        ValueError: If frequency is not a known pay frequency
        PeriodCountError: If periods is zero or negative
    """
    if periods is not None:
        require_positive_periods("total_periods", periods)
        return periods

    if frequency is not None:
        try:
            return PAY_PERIODS[frequency]
        except KeyError:
            valid = ", ".join(PAY_PERIODS)
            raise ValueError(f"Unknown pay frequency '{frequency}'. Expected one of: {valid}")

    return DEFAULT_TOTAL_PERIODS
