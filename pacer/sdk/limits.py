"""Annual contribution limits and goal selection.

Limits are year-specific and loaded from contribution-limits/{year}.yaml
shipped inside the package. A goal is either the limit for an age bracket
(elective limit plus catch-up) or a custom amount.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

from .schemas import ContributionLimits

logger = logging.getLogger(__name__)

AGE_BRACKETS = ("under_50", "50_plus", "60_63")
CUSTOM_BRACKET = "custom"
DEFAULT_AGE_BRACKET = "under_50"

AGE_BRACKET_LABELS = {
    "under_50": "Under 50",
    "50_plus": "50-59 or 64+",
    "60_63": "60-63",
}


def _get_limits_dir() -> Path:
    """Get the contribution-limits directory path."""
    package_root = Path(__file__).parent.parent  # sdk -> pacer
    return package_root / "contribution-limits"


def get_available_years() -> list[int]:
    """Get sorted list of available limit years (descending)."""
    limits_dir = _get_limits_dir()
    years = [int(p.stem) for p in limits_dir.glob("*.yaml") if p.stem.isdigit()]
    return sorted(years, reverse=True)


def load_contribution_limits(year: int) -> ContributionLimits:
    """Load contribution limits for exactly this year.

    Raises:
        FileNotFoundError: If no limits file exists for the year
        pydantic.ValidationError: If the file does not match the schema
    """
    limits_file = _get_limits_dir() / f"{year}.yaml"
    if not limits_file.exists():
        raise FileNotFoundError(f"Contribution limits not found for year {year}: {limits_file}")

    with open(limits_file, "r") as f:
        return ContributionLimits.model_validate(yaml.safe_load(f))


def get_contribution_limits(year: int) -> ContributionLimits:
    """Get contribution limits with fallback to prior years.

    Uses the requested year when on file, otherwise the newest earlier year.
    If the year precedes every file, falls back to the oldest one.

    Raises:
        FileNotFoundError: If no limit files are available at all
    """
    available_years = get_available_years()
    if not available_years:
        raise FileNotFoundError(f"No contribution limit files in {_get_limits_dir()}")

    if year in available_years:
        return load_contribution_limits(year)

    candidate_years = [y for y in available_years if y < year]
    fallback_year = candidate_years[0] if candidate_years else available_years[-1]
    logger.warning(f"No contribution limits for {year}, using {fallback_year}")
    return load_contribution_limits(fallback_year)


def goal_for_age_bracket(year: int, bracket: str) -> float:
    """Annual goal for an age bracket: elective limit plus its catch-up.

    Raises:
        ValueError: If bracket is not one of AGE_BRACKETS
    """
    limits = get_contribution_limits(year)

    if bracket == "under_50":
        return limits.employee_elective_limit
    elif bracket == "50_plus":
        return limits.employee_elective_limit + limits.catch_up.age_50_plus
    elif bracket == "60_63":
        return limits.employee_elective_limit + limits.catch_up.age_60_63

    valid = ", ".join(AGE_BRACKETS)
    raise ValueError(f"Unknown age bracket '{bracket}'. Expected one of: {valid}, {CUSTOM_BRACKET}")


def goals_by_age_bracket(year: int) -> dict[str, float]:
    """Goal for every age bracket in a year, keyed by bracket name."""
    return {bracket: goal_for_age_bracket(year, bracket) for bracket in AGE_BRACKETS}


def resolve_goal(
    year: int,
    age_bracket: Optional[str] = None,
    custom_goal: Optional[float] = None,
) -> float:
    """Resolve the annual goal.

    Resolution order:
    1. custom_goal when age_bracket is "custom" or not given
    2. Goal for age_bracket
    3. Goal for DEFAULT_AGE_BRACKET

    Raises:
        ValueError: If age_bracket is "custom" without a custom_goal, or unknown
    """
    if age_bracket == CUSTOM_BRACKET:
        if custom_goal is None:
            raise ValueError("Age bracket 'custom' requires a custom goal amount")
        return custom_goal

    if age_bracket is None and custom_goal is not None:
        return custom_goal

    return goal_for_age_bracket(year, age_bracket or DEFAULT_AGE_BRACKET)
