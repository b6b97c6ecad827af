"""Contribution pacing calculations.

Pure arithmetic: no config, no I/O. Callers supply validated numbers and get
results back; nothing here caches or depends on call order.

- compute_contribution: rate and per-paycheck amount needed to reach the goal
- compute_scenario: year-end projection at a what-if rate

Usage:
    from pacer.sdk.contribution import compute_contribution, compute_scenario

    plan = compute_contribution(130000, 10000, 23500, 26, 20)
    what_if = compute_scenario(10, plan.remaining_gross_pay, 10000, 23500)
"""

from dataclasses import asdict, dataclass


class PeriodCountError(ValueError):
    """Raised when a pay period count is zero or negative."""
    pass


def require_positive_periods(name: str, value: int) -> None:
    """Reject non-positive period counts before they reach a division."""
    if value <= 0:
        raise PeriodCountError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class ContributionResult:
    """Required pace to close the gap between ytd and goal."""

    required_percent: float  # % of remaining gross pay, uncapped
    per_check: float
    remaining_amount: float  # goal - ytd, negative once the goal is exceeded
    remaining_gross_pay: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ScenarioResult:
    """Year-end outcome at a what-if contribution rate."""

    contribution_from_now: float
    total_year_end: float
    diff: float  # positive = surplus, negative = shortfall

    @property
    def goal_met(self) -> bool:
        return self.diff >= 0

    def to_dict(self) -> dict:
        return {**asdict(self), "goal_met": self.goal_met}


def compute_contribution(
    salary: float,
    ytd: float,
    goal: float,
    total_periods: int,
    remaining_periods: int,
) -> ContributionResult:
    """Compute the required contribution rate and per-paycheck amount.

    Rate and per-check amount are only computed when there is both gross pay
    left and an unmet goal. Otherwise both are 0, including when the goal is
    already exceeded (no negative rates).

    Args:
        salary: Annual gross salary
        ytd: Amount already contributed year-to-date
        goal: Target contribution amount for the year
        total_periods: Number of pay periods in the year
        remaining_periods: Number of pay periods left in the year

    Returns:
        ContributionResult

    Raises:
        PeriodCountError: If either period count is zero or negative
    """
    require_positive_periods("total_periods", total_periods)
    require_positive_periods("remaining_periods", remaining_periods)

    remaining_amount = goal - ytd
    gross_per_period = salary / total_periods
    remaining_gross_pay = gross_per_period * remaining_periods

    required_percent = 0.0
    per_check = 0.0

    if remaining_gross_pay > 0 and remaining_amount > 0:
        required_percent = (remaining_amount / remaining_gross_pay) * 100
        per_check = remaining_amount / remaining_periods

    return ContributionResult(
        required_percent=required_percent,
        per_check=per_check,
        remaining_amount=remaining_amount,
        remaining_gross_pay=remaining_gross_pay,
    )


def compute_scenario(
    adjusted_rate: float,
    remaining_gross_pay: float,
    ytd: float,
    goal: float,
) -> ScenarioResult:
    """Project the year-end total if adjusted_rate is contributed from now on.

    Linear in adjusted_rate; no clamping, so negative or >100 rates project
    as given.

    Args:
        adjusted_rate: Contribution rate in percent (e.g., 10 for 10%)
        remaining_gross_pay: Gross pay left for the year
        ytd: Amount already contributed year-to-date
        goal: Target contribution amount for the year
    """
    contribution_from_now = (adjusted_rate / 100) * remaining_gross_pay
    total_year_end = ytd + contribution_from_now
    diff = total_year_end - goal
    return ScenarioResult(
        contribution_from_now=contribution_from_now,
        total_year_end=total_year_end,
        diff=diff,
    )
