"""Tests for pay period estimation and pay frequency resolution."""

from datetime import date, datetime, timedelta, timezone

import pytest

from pacer.sdk.contribution import PeriodCountError
from pacer.sdk.periods import (
    DEFAULT_TOTAL_PERIODS,
    PAY_PERIODS,
    days_until_year_end,
    estimate_remaining_periods,
    resolve_total_periods,
)


class TestDaysUntilYearEnd:
    """Tests for days_until_year_end."""

    def test_plain_date_is_midnight(self):
        assert days_until_year_end(date(2026, 12, 1)) == 30

    def test_partial_day_is_fractional(self):
        assert days_until_year_end(datetime(2026, 12, 30, 18, 0)) == pytest.approx(0.25)

    def test_negative_during_december_31(self):
        """Dec 31 after midnight is past the boundary."""
        assert days_until_year_end(datetime(2026, 12, 31, 12, 0)) == pytest.approx(-0.5)

    def test_aware_datetime_uses_own_timezone(self):
        tz = timezone(timedelta(hours=-5))
        assert days_until_year_end(datetime(2026, 12, 1, tzinfo=tz)) == 30


class TestEstimateRemainingPeriods:
    """Tests for estimate_remaining_periods."""

    def test_december_first_biweekly(self):
        """30 days left / (365 / 26) days per period -> 2."""
        assert estimate_remaining_periods(date(2026, 12, 1), 26) == 2

    def test_datetime_at_midnight_matches_date(self):
        assert estimate_remaining_periods(datetime(2026, 12, 1), 26) == 2

    @pytest.mark.parametrize("frequency,expected", [
        ("weekly", 51),
        ("biweekly", 25),
        ("semimonthly", 23),
        ("monthly", 11),
    ])
    def test_start_of_year(self, frequency, expected):
        assert estimate_remaining_periods(date(2026, 1, 1), PAY_PERIODS[frequency]) == expected

    def test_time_of_day_can_cross_a_period_boundary(self):
        """Two biweekly periods need 28.077 days; an hour decides it."""
        assert estimate_remaining_periods(datetime(2026, 12, 2, 22, 0), 26) == 2
        assert estimate_remaining_periods(datetime(2026, 12, 2, 23, 0), 26) == 1

    def test_uses_fixed_365_day_year(self):
        """Leap years are not special-cased."""
        assert estimate_remaining_periods(date(2024, 1, 1), 365) == 365
        assert estimate_remaining_periods(date(2025, 1, 1), 365) == 364

    @pytest.mark.parametrize("now", [
        datetime(2026, 12, 30),
        datetime(2026, 12, 31),
        datetime(2026, 12, 31, 23, 59, 59),
        date(2026, 12, 31),
    ])
    def test_floor_of_one_at_year_end(self, now):
        assert estimate_remaining_periods(now, 26) == 1

    @pytest.mark.parametrize("total_periods", [1, 12, 24, 26, 52])
    def test_never_below_one_for_any_day(self, total_periods):
        day = date(2026, 1, 1)
        while day.year == 2026:
            assert estimate_remaining_periods(day, total_periods) >= 1
            day += timedelta(days=1)

    def test_counts_down_through_the_year(self):
        estimates = [estimate_remaining_periods(date(2026, m, 1), 26) for m in range(1, 13)]

        assert estimates == sorted(estimates, reverse=True)

    @pytest.mark.parametrize("total_periods", [0, -12])
    def test_rejects_non_positive_total_periods(self, total_periods):
        with pytest.raises(PeriodCountError):
            estimate_remaining_periods(date(2026, 6, 1), total_periods)


class TestResolveTotalPeriods:
    """Tests for resolve_total_periods."""

    def test_defaults_to_biweekly(self):
        assert resolve_total_periods() == DEFAULT_TOTAL_PERIODS == 26

    def test_named_frequency(self):
        assert resolve_total_periods("semimonthly") == 24

    def test_explicit_periods_win(self):
        assert resolve_total_periods("monthly", 27) == 27

    def test_unknown_frequency(self):
        with pytest.raises(ValueError, match="Unknown pay frequency 'fortnightly'"):
            resolve_total_periods("fortnightly")

    def test_rejects_zero_periods(self):
        with pytest.raises(PeriodCountError):
            resolve_total_periods(periods=0)
