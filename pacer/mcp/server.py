"""Pacer MCP Server - FastMCP implementation for contribution pacing tools."""

import logging
from datetime import datetime
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from pacer.sdk import (
    PaceInputs,
    build_pace_plan,
    compute_scenario,
    estimate_remaining_periods,
    goals_by_age_bracket,
    resolve_goal,
    resolve_total_periods,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("pacer")


def _parse_as_of(as_of: str | None) -> datetime:
    """Parse an optional YYYY-MM-DD date, defaulting to now."""
    if not as_of:
        return datetime.now()
    return datetime.strptime(as_of, "%Y-%m-%d")


# --- Tools ---

@mcp.tool()
async def plan_contribution(
    salary: float = Field(description="Annual gross salary"),
    ytd: float = Field(default=0, description="Amount contributed so far this year"),
    goal: float | None = Field(default=None, description="Custom annual goal; overrides age_bracket"),
    age_bracket: str = Field(default="under_50", description="'under_50', '50_plus' or '60_63' (ignored when goal is set)"),
    pay_frequency: str | None = Field(default=None, description="'weekly', 'biweekly', 'semimonthly' or 'monthly'"),
    total_periods: int | None = Field(default=None, description="Pay periods per year (overrides pay_frequency)"),
    remaining_periods: int | None = Field(default=None, description="Pay periods left; estimated from as_of when omitted"),
    adjusted_rate: float | None = Field(default=None, description="What-if rate in percent; defaults to the required rate"),
    as_of: str | None = Field(default=None, description="Date (YYYY-MM-DD) to estimate remaining periods from; defaults to today"),
) -> dict[str, Any]:
    """Compute the contribution rate and per-paycheck amount needed to reach the annual goal, plus a what-if projection."""
    try:
        as_of_dt = _parse_as_of(as_of)
        inputs = PaceInputs(
            salary=salary,
            ytd=ytd,
            goal=resolve_goal(as_of_dt.year, None if goal is not None else age_bracket, goal),
            total_periods=resolve_total_periods(pay_frequency, total_periods),
            remaining_periods=remaining_periods,
            adjusted_rate=adjusted_rate,
            as_of=as_of_dt,
        )
        return build_pace_plan(inputs).to_dict()

    except Exception as e:
        logger.error(f"Error planning contribution: {e}")
        return {"error": str(e)}


@mcp.tool()
async def project_scenario(
    adjusted_rate: float = Field(description="What-if contribution rate in percent"),
    remaining_gross_pay: float = Field(description="Gross pay left for the year (from plan_contribution)"),
    ytd: float = Field(description="Amount contributed so far this year"),
    goal: float = Field(description="Annual goal"),
) -> dict[str, Any]:
    """Project the year-end total and surplus/shortfall at a what-if contribution rate."""
    try:
        return compute_scenario(adjusted_rate, remaining_gross_pay, ytd, goal).to_dict()
    except Exception as e:
        logger.error(f"Error projecting scenario: {e}")
        return {"error": str(e)}


@mcp.tool()
async def estimate_periods(
    pay_frequency: str | None = Field(default=None, description="'weekly', 'biweekly', 'semimonthly' or 'monthly'"),
    total_periods: int | None = Field(default=None, description="Pay periods per year (overrides pay_frequency)"),
    as_of: str | None = Field(default=None, description="Date (YYYY-MM-DD); defaults to today"),
) -> dict[str, Any]:
    """Estimate how many pay periods are left in the calendar year."""
    try:
        as_of_dt = _parse_as_of(as_of)
        periods_per_year = resolve_total_periods(pay_frequency, total_periods)
        return {
            "as_of": as_of_dt.date().isoformat(),
            "total_periods": periods_per_year,
            "remaining_periods": estimate_remaining_periods(as_of_dt, periods_per_year),
        }
    except Exception as e:
        logger.error(f"Error estimating periods: {e}")
        return {"error": str(e)}


@mcp.tool()
async def get_age_bracket_goals(
    year: int | None = Field(default=None, description="Calendar year; defaults to the current year"),
) -> dict[str, Any]:
    """Get the annual 401(k) goal (elective limit plus catch-up) for each age bracket."""
    try:
        year = year or datetime.now().year
        return {"year": year, "goals": goals_by_age_bracket(year)}
    except Exception as e:
        logger.error(f"Error loading goals: {e}")
        return {"error": str(e)}


def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
