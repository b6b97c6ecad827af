"""Unit tests for the contribution pacing calculations.

Covers:
1. Required rate and per-paycheck amount (compute_contribution)
2. Guard policy: no rate when the goal is met or there is no pay left
3. What-if projection (compute_scenario) and its linearity
"""

import pytest

from pacer.sdk.contribution import (
    ContributionResult,
    PeriodCountError,
    ScenarioResult,
    compute_contribution,
    compute_scenario,
)


class TestComputeContribution:
    """Tests for compute_contribution."""

    def test_worked_example(self):
        """$130k salary, $10k in, $23.5k goal, 20 of 26 periods left."""
        result = compute_contribution(130000, 10000, 23500, 26, 20)

        assert result.remaining_gross_pay == pytest.approx(100000)
        assert result.remaining_amount == 13500
        assert result.required_percent == pytest.approx(13.5)
        assert result.per_check == pytest.approx(675)

    def test_goal_exceeded_reports_zero_rate(self):
        """Contributions past the goal give 0, never a negative rate."""
        result = compute_contribution(130000, 25000, 23500, 26, 20)

        assert result.remaining_amount == -1500
        assert result.required_percent == 0
        assert result.per_check == 0
        assert result.remaining_gross_pay == pytest.approx(100000)

    def test_goal_exactly_met_reports_zero_rate(self):
        result = compute_contribution(130000, 23500, 23500, 26, 20)

        assert result.remaining_amount == 0
        assert result.required_percent == 0
        assert result.per_check == 0

    @pytest.mark.parametrize("ytd", [23500, 23500.01, 40000])
    @pytest.mark.parametrize("remaining_periods", [1, 13, 26])
    def test_no_rate_whenever_ytd_reaches_goal(self, ytd, remaining_periods):
        result = compute_contribution(90000, ytd, 23500, 26, remaining_periods)

        assert result.required_percent == 0
        assert result.per_check == 0

    def test_guarded_results_are_floats(self):
        """Zero results serialise the same way as computed ones."""
        result = compute_contribution(130000, 25000, 23500, 26, 20)

        assert isinstance(result.required_percent, float)
        assert isinstance(result.per_check, float)
        assert result.to_dict()["required_percent"] == 0.0

    def test_no_pay_left_reports_zero_rate(self):
        """Zero salary means no remaining gross pay, so nothing is required."""
        result = compute_contribution(0, 1000, 23500, 26, 10)

        assert result.remaining_gross_pay == 0
        assert result.remaining_amount == 22500
        assert result.required_percent == 0
        assert result.per_check == 0

    def test_required_rate_is_not_capped(self):
        """A goal larger than remaining pay yields a rate above 100."""
        result = compute_contribution(26000, 0, 23500, 26, 10)

        assert result.remaining_gross_pay == pytest.approx(10000)
        assert result.required_percent == pytest.approx(235)
        assert result.per_check == pytest.approx(2350)

    def test_remaining_gross_pay_is_linear_in_remaining_periods(self):
        salary, total_periods = 98765.43, 24
        per_period = salary / total_periods

        for remaining in range(1, total_periods + 1):
            result = compute_contribution(salary, 0, 23500, total_periods, remaining)
            assert result.remaining_gross_pay == pytest.approx(per_period * remaining)

    def test_per_check_times_periods_closes_gap(self):
        result = compute_contribution(150000, 7250, 31000, 24, 9)

        assert result.per_check * 9 == pytest.approx(31000 - 7250)

    @pytest.mark.parametrize("total_periods", [0, -26])
    def test_rejects_non_positive_total_periods(self, total_periods):
        with pytest.raises(PeriodCountError, match="total_periods"):
            compute_contribution(130000, 0, 23500, total_periods, 10)

    @pytest.mark.parametrize("remaining_periods", [0, -1])
    def test_rejects_non_positive_remaining_periods(self, remaining_periods):
        with pytest.raises(PeriodCountError, match="remaining_periods"):
            compute_contribution(130000, 0, 23500, 26, remaining_periods)

    def test_period_count_error_is_value_error(self):
        with pytest.raises(ValueError):
            compute_contribution(130000, 0, 23500, 0, 10)

    def test_deterministic(self):
        first = compute_contribution(130000, 10000, 23500, 26, 20)
        compute_contribution(1, 2, 3, 4, 5)
        second = compute_contribution(130000, 10000, 23500, 26, 20)

        assert first == second

    def test_to_dict(self):
        result = ContributionResult(13.5, 675, 13500, 100000)

        assert result.to_dict() == {
            "required_percent": 13.5,
            "per_check": 675,
            "remaining_amount": 13500,
            "remaining_gross_pay": 100000,
        }


class TestComputeScenario:
    """Tests for compute_scenario."""

    def test_worked_example_shortfall(self):
        """10% of $100k on top of $10k leaves $3.5k short of $23.5k."""
        result = compute_scenario(10, 100000, 10000, 23500)

        assert result.contribution_from_now == pytest.approx(10000)
        assert result.total_year_end == pytest.approx(20000)
        assert result.diff == pytest.approx(-3500)
        assert result.goal_met is False

    def test_surplus(self):
        result = compute_scenario(15, 100000, 10000, 23500)

        assert result.total_year_end == pytest.approx(25000)
        assert result.diff == pytest.approx(1500)
        assert result.goal_met is True

    def test_exact_goal_counts_as_met(self):
        result = compute_scenario(50, 20000, 13500, 23500)

        assert result.diff == 0
        assert result.goal_met is True

    @pytest.mark.parametrize("remaining_gross_pay", [0, 1234.56, 100000])
    @pytest.mark.parametrize("goal", [0, 23500, 1e6])
    def test_zero_rate_keeps_ytd(self, remaining_gross_pay, goal):
        result = compute_scenario(0, remaining_gross_pay, 8200, goal)

        assert result.total_year_end == 8200
        assert result.diff == 8200 - goal

    @pytest.mark.parametrize("rate", [-5, 0.5, 7, 60, 250])
    def test_doubling_rate_doubles_contribution(self, rate):
        single = compute_scenario(rate, 87000, 4000, 23500)
        double = compute_scenario(rate * 2, 87000, 4000, 23500)

        assert double.contribution_from_now == pytest.approx(2 * single.contribution_from_now)

    def test_rates_are_not_clamped(self):
        negative = compute_scenario(-10, 100000, 10000, 23500)
        above_pay = compute_scenario(150, 100000, 10000, 23500)

        assert negative.total_year_end == pytest.approx(0)
        assert above_pay.total_year_end == pytest.approx(160000)

    def test_to_dict_includes_goal_met(self):
        result = ScenarioResult(contribution_from_now=10000, total_year_end=20000, diff=-3500)

        assert result.to_dict() == {
            "contribution_from_now": 10000,
            "total_year_end": 20000,
            "diff": -3500,
            "goal_met": False,
        }


class TestComposition:
    """Planner output feeds the projector."""

    def test_required_rate_reaches_goal(self):
        plan = compute_contribution(130000, 10000, 23500, 26, 20)
        result = compute_scenario(plan.required_percent, plan.remaining_gross_pay, 10000, 23500)

        assert result.total_year_end == pytest.approx(23500)
        assert result.diff == pytest.approx(0, abs=1e-6)
