"""Pacer SDK - Core functionality for contribution pacing."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    get_profile_path,
    load_profile,
    save_profile,
    get_profile_value,
    set_profile_value,
    load_profile_defaults,
    validate_profile,
    ProfileNotFoundError,
    ProfileValidationError,
)

from .contribution import (
    ContributionResult,
    ScenarioResult,
    PeriodCountError,
    compute_contribution,
    compute_scenario,
)

from .periods import (
    PAY_PERIODS,
    DEFAULT_TOTAL_PERIODS,
    days_until_year_end,
    estimate_remaining_periods,
    resolve_total_periods,
)

from .limits import (
    AGE_BRACKETS,
    AGE_BRACKET_LABELS,
    CUSTOM_BRACKET,
    get_available_years,
    get_contribution_limits,
    load_contribution_limits,
    goal_for_age_bracket,
    goals_by_age_bracket,
    resolve_goal,
)

from .plan import (
    PacePlan,
    build_pace_plan,
)

from .schemas import (
    ContributionLimits,
    PaceInputs,
    PacerProfile,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "get_profile_path",
    "load_profile",
    "save_profile",
    "get_profile_value",
    "set_profile_value",
    "load_profile_defaults",
    "validate_profile",
    "ProfileNotFoundError",
    "ProfileValidationError",
    # Calculations
    "ContributionResult",
    "ScenarioResult",
    "PeriodCountError",
    "compute_contribution",
    "compute_scenario",
    # Pay periods
    "PAY_PERIODS",
    "DEFAULT_TOTAL_PERIODS",
    "days_until_year_end",
    "estimate_remaining_periods",
    "resolve_total_periods",
    # Limits
    "AGE_BRACKETS",
    "AGE_BRACKET_LABELS",
    "CUSTOM_BRACKET",
    "get_available_years",
    "get_contribution_limits",
    "load_contribution_limits",
    "goal_for_age_bracket",
    "goals_by_age_bracket",
    "resolve_goal",
    # Plan
    "PacePlan",
    "build_pace_plan",
    # Schemas
    "ContributionLimits",
    "PaceInputs",
    "PacerProfile",
]
