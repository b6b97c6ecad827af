"""Pydantic schemas for pacer data validation.

Config-facing schemas use extra='forbid' to reject unknown fields, ensuring
typos in profile.yaml or limit files cause clear errors rather than silent
ignoring.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


PayFrequencyName = Literal["weekly", "biweekly", "semimonthly", "monthly"]
AgeBracketName = Literal["under_50", "50_plus", "60_63", "custom"]


# =============================================================================
# Contribution limits (contribution-limits/YYYY.yaml)
# =============================================================================


class CatchUpLimits(BaseModel):
    """Additional elective deferrals allowed by age."""
    model_config = ConfigDict(extra="forbid")

    age_50_plus: float = Field(..., ge=0, description="Catch-up for ages 50-59 and 64+")
    age_60_63: float = Field(..., ge=0, description="Enhanced catch-up for ages 60-63")


class ContributionLimits(BaseModel):
    """Employee 401(k) contribution limits for a year."""
    model_config = ConfigDict(extra="ignore")  # Allow unknown fields for forward compat

    year: int = Field(..., ge=1978)
    employee_elective_limit: float = Field(..., gt=0, description="Pre-tax + Roth employee limit")
    catch_up: CatchUpLimits


# =============================================================================
# Profile (profile.yaml)
# =============================================================================


class PacerProfile(BaseModel):
    """User defaults for contribution planning.

    Every field is optional; CLI options override whatever is set here.
    """
    model_config = ConfigDict(extra="forbid")

    salary: Optional[float] = Field(default=None, ge=0, description="Annual gross salary")
    ytd: Optional[float] = Field(default=None, description="Contributions so far this year")
    pay_frequency: Optional[PayFrequencyName] = None
    total_periods: Optional[int] = Field(default=None, gt=0, description="Pay periods per year")
    age_bracket: Optional[AgeBracketName] = None
    custom_goal: Optional[float] = Field(default=None, ge=0, description="Goal when age_bracket is custom")
    adjusted_rate: Optional[float] = Field(default=None, description="Default what-if rate (percent)")

    @model_validator(mode="after")
    def check_custom_goal(self) -> "PacerProfile":
        """A custom age bracket needs a custom goal to go with it."""
        if self.age_bracket == "custom" and self.custom_goal is None:
            raise ValueError("age_bracket 'custom' requires custom_goal")
        return self


# =============================================================================
# Planning inputs
# =============================================================================


class PaceInputs(BaseModel):
    """Validated inputs for a pace plan.

    remaining_periods left unset means "estimate from as_of".
    adjusted_rate left unset means "use the required rate".
    """
    model_config = ConfigDict(extra="forbid")

    salary: float = Field(..., ge=0, allow_inf_nan=False)
    ytd: float = Field(default=0, allow_inf_nan=False)
    goal: float = Field(..., allow_inf_nan=False)
    total_periods: int = Field(default=26, gt=0)
    remaining_periods: Optional[int] = Field(default=None, gt=0)
    adjusted_rate: Optional[float] = Field(default=None, allow_inf_nan=False)
    as_of: Optional[datetime] = None
