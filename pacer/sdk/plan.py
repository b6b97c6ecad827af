"""Pace plan composition.

Wires the pure calculations together the way a caller is expected to:

1. Estimate remaining pay periods from the as-of date (unless given)
2. Compute the required contribution pace
3. Project the year-end outcome at the what-if rate

The calculations never call each other; values flow through here. Display
concerns (capping the rate at "100%+", clamping progress) are derived here
as separate fields and never fed back into the calculations.
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .contribution import (
    ContributionResult,
    ScenarioResult,
    compute_contribution,
    compute_scenario,
)
from .periods import estimate_remaining_periods
from .schemas import PaceInputs

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.INFO),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)


@dataclass
class PacePlan:
    """Result of composing estimate, contribution and scenario."""

    inputs: PaceInputs
    as_of: datetime
    remaining_periods: int
    periods_estimated: bool
    adjusted_rate: float
    contribution: ContributionResult
    scenario: ScenarioResult

    @property
    def progress_percent(self) -> float:
        """Share of goal already contributed, clamped to 100."""
        if self.inputs.goal <= 0:
            return 0
        return min(100, (self.inputs.ytd / self.inputs.goal) * 100)

    @property
    def remaining_dollars(self) -> float:
        """Dollars left to contribute, never negative."""
        return max(0, self.contribution.remaining_amount)

    @property
    def exceeds_pay(self) -> bool:
        """True when the goal needs more than all remaining gross pay."""
        return self.contribution.required_percent > 100

    def to_dict(self) -> dict:
        return {
            "as_of": self.as_of.isoformat(),
            "inputs": {
                "salary": self.inputs.salary,
                "ytd": self.inputs.ytd,
                "goal": self.inputs.goal,
                "total_periods": self.inputs.total_periods,
                "remaining_periods": self.remaining_periods,
                "periods_estimated": self.periods_estimated,
                "adjusted_rate": self.adjusted_rate,
            },
            "contribution": self.contribution.to_dict(),
            "scenario": self.scenario.to_dict(),
            "progress_percent": self.progress_percent,
            "remaining_dollars": self.remaining_dollars,
            "exceeds_pay": self.exceeds_pay,
        }


def default_adjusted_rate(contribution: ContributionResult) -> float:
    """What-if rate when none is chosen: the required rate to one decimal."""
    return round(contribution.required_percent, 1)


def build_pace_plan(inputs: PaceInputs, now: Optional[datetime] = None) -> PacePlan:
    """Build a full pace plan from validated inputs.

    Args:
        inputs: Validated PaceInputs
        now: Reference time for estimating remaining periods. inputs.as_of
             wins when set; defaults to datetime.now().

    Returns:
        PacePlan

    Raises:
        PeriodCountError: If a period count is not positive
    """
    as_of = inputs.as_of or now or datetime.now()

    if inputs.remaining_periods is None:
        remaining_periods = estimate_remaining_periods(as_of, inputs.total_periods)
        periods_estimated = True
        logger.debug(
            f"estimated {remaining_periods} of {inputs.total_periods} periods left as of {as_of:%Y-%m-%d}"
        )
    else:
        remaining_periods = inputs.remaining_periods
        periods_estimated = False

    contribution = compute_contribution(
        inputs.salary,
        inputs.ytd,
        inputs.goal,
        inputs.total_periods,
        remaining_periods,
    )

    if inputs.adjusted_rate is None:
        adjusted_rate = default_adjusted_rate(contribution)
    else:
        adjusted_rate = inputs.adjusted_rate

    scenario = compute_scenario(
        adjusted_rate,
        contribution.remaining_gross_pay,
        inputs.ytd,
        inputs.goal,
    )

    logger.debug(
        f"plan: required={contribution.required_percent:.2f}% per_check={contribution.per_check:.2f} "
        f"what_if={adjusted_rate}% diff={scenario.diff:.2f}"
    )

    return PacePlan(
        inputs=inputs,
        as_of=as_of,
        remaining_periods=remaining_periods,
        periods_estimated=periods_estimated,
        adjusted_rate=adjusted_rate,
        contribution=contribution,
        scenario=scenario,
    )
