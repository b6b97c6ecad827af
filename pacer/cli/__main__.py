"""Pacer CLI - Command-line interface for contribution pacing."""

import json
from datetime import datetime
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console

from pacer import __version__
from pacer.sdk import (
    AGE_BRACKETS,
    CUSTOM_BRACKET,
    PAY_PERIODS,
    PaceInputs,
    PeriodCountError,
    ProfileValidationError,
    build_pace_plan,
    compute_contribution,
    compute_scenario,
    estimate_remaining_periods,
    get_setting,
    goals_by_age_bracket,
    load_profile_defaults,
    resolve_goal,
    resolve_total_periods,
)

from .profile_commands import profile as profile_group
from .settings_commands import settings as settings_group
from .renderers.plan_renderer import (
    format_currency,
    format_diff,
    render_goals,
    render_pace_plan,
)


OUTPUT_FORMATS = ["text", "json"]


@click.group()
@click.version_option(version=__version__, prog_name="pacer")
def cli():
    """Pacer - Retirement contribution pacing tools.

    Works out the contribution rate and per-paycheck amount needed to
    reach an annual 401(k) goal by year end, and projects what-if rates.

    Defaults are loaded from (in order):

    \b
    1. Command-line options
    2. profile.yaml (PACER_CONFIG_PATH or ~/.config/pacer/)
    3. Built-in fallbacks (biweekly pay, under-50 goal)

    Run 'pacer profile show' to see saved defaults.
    """
    pass


cli.add_command(profile_group)
cli.add_command(settings_group)


# =============================================================================
# Shared options
# =============================================================================

def _schedule_options(func):
    """Options shared by every command that needs a pay schedule."""
    func = click.option("--as-of", "as_of", type=click.DateTime(formats=["%Y-%m-%d"]),
                        help="Date to estimate remaining periods from (default: today).")(func)
    func = click.option("--periods", "total_periods", type=int,
                        help="Pay periods per year (overrides --frequency).")(func)
    func = click.option("--frequency", type=click.Choice(list(PAY_PERIODS)),
                        help="Pay frequency (default: biweekly).")(func)
    return func


def _plan_options(func):
    """Options shared by plan and scenario."""
    func = _schedule_options(func)
    func = click.option("--remaining", "remaining_periods", type=int,
                        help="Pay periods left this year (default: estimated from --as-of).")(func)
    func = click.option("--age-bracket", type=click.Choice(list(AGE_BRACKETS) + [CUSTOM_BRACKET]),
                        help="Age bracket that sets the goal (default: under_50).")(func)
    func = click.option("--goal", type=float,
                        help="Custom annual goal (overrides --age-bracket).")(func)
    func = click.option("--ytd", type=float, help="Amount contributed so far this year.")(func)
    func = click.option("--salary", type=float, help="Annual gross salary.")(func)
    func = click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None,
                        help="Output format (default: settings default_output_format or text).")(func)
    return func


def _output_format(requested: Optional[str]) -> str:
    """Requested format, else the settings default, else text."""
    return requested or get_setting("default_output_format", "text")


def _load_defaults():
    """Load profile defaults, surfacing problems as CLI errors."""
    try:
        return load_profile_defaults()
    except ProfileValidationError as e:
        raise click.ClickException(str(e))


def _resolve_schedule(frequency: Optional[str], total_periods: Optional[int], defaults) -> int:
    """Pay periods per year: CLI options first, then profile, then biweekly."""
    if total_periods is None and frequency is None:
        frequency, total_periods = defaults.pay_frequency, defaults.total_periods
    return resolve_total_periods(frequency, total_periods)


def _resolve_inputs(
    salary: Optional[float],
    ytd: Optional[float],
    goal: Optional[float],
    age_bracket: Optional[str],
    frequency: Optional[str],
    total_periods: Optional[int],
    remaining_periods: Optional[int],
    as_of: Optional[datetime],
    adjusted_rate: Optional[float] = None,
) -> PaceInputs:
    """Merge CLI options over profile defaults into validated PaceInputs."""
    defaults = _load_defaults()
    as_of = as_of or datetime.now()

    if goal is not None:
        age_bracket = CUSTOM_BRACKET
    if age_bracket is None:
        age_bracket = defaults.age_bracket
    custom_goal = goal if goal is not None else defaults.custom_goal

    try:
        resolved_goal = resolve_goal(as_of.year, age_bracket, custom_goal)
        resolved_periods = _resolve_schedule(frequency, total_periods, defaults)
    except (ValueError, FileNotFoundError) as e:
        raise click.BadParameter(str(e))

    if adjusted_rate is None:
        adjusted_rate = defaults.adjusted_rate

    try:
        return PaceInputs(
            salary=salary if salary is not None else (defaults.salary or 0),
            ytd=ytd if ytd is not None else (defaults.ytd or 0),
            goal=resolved_goal,
            total_periods=resolved_periods,
            remaining_periods=remaining_periods,
            adjusted_rate=adjusted_rate,
            as_of=as_of,
        )
    except ValidationError as e:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        raise click.BadParameter(problems)


# =============================================================================
# Commands
# =============================================================================

@cli.command("plan")
@_plan_options
@click.option("--rate", "adjusted_rate", type=float,
              help="What-if contribution rate in percent (default: the required rate).")
def plan(output_format, salary, ytd, goal, age_bracket, frequency, total_periods,
         remaining_periods, as_of, adjusted_rate):
    """Show the contribution pace needed to reach the annual goal.

    Examples:

    \b
        pacer plan --salary 130000 --ytd 10000 --remaining 20
        pacer plan --salary 130000 --ytd 10000 --goal 23500 --rate 10
        pacer plan --age-bracket 60_63 --frequency semimonthly --format json
    """
    inputs = _resolve_inputs(salary, ytd, goal, age_bracket, frequency, total_periods,
                             remaining_periods, as_of, adjusted_rate)

    try:
        result = build_pace_plan(inputs)
    except PeriodCountError as e:
        raise click.BadParameter(str(e))

    if _output_format(output_format) == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    render_pace_plan(Console(), result)


@cli.command("scenario")
@click.argument("rate", type=float)
@_plan_options
def scenario(rate, output_format, salary, ytd, goal, age_bracket, frequency, total_periods,
             remaining_periods, as_of):
    """Project the year-end total if RATE percent is contributed from now on.

    RATE is not clamped: 0 keeps the year-to-date total, values above 100
    project contributions larger than pay.
    """
    inputs = _resolve_inputs(salary, ytd, goal, age_bracket, frequency, total_periods,
                             remaining_periods, as_of)

    try:
        periods_left = inputs.remaining_periods or estimate_remaining_periods(
            inputs.as_of, inputs.total_periods
        )
        contribution = compute_contribution(
            inputs.salary, inputs.ytd, inputs.goal, inputs.total_periods, periods_left
        )
    except PeriodCountError as e:
        raise click.BadParameter(str(e))

    result = compute_scenario(rate, contribution.remaining_gross_pay, inputs.ytd, inputs.goal)

    if _output_format(output_format) == "json":
        click.echo(json.dumps({
            "adjusted_rate": rate,
            "remaining_gross_pay": contribution.remaining_gross_pay,
            "remaining_periods": periods_left,
            **result.to_dict(),
        }, indent=2))
        return

    status = "Goal Met" if result.goal_met else "Shortfall"
    click.echo(f"At {rate:g}% for the remaining {periods_left} pay period(s):")
    click.echo(f"  Contributed from now: {format_currency(result.contribution_from_now, cents=False)}")
    click.echo(f"  Year-end total:       {format_currency(result.total_year_end, cents=False)}")
    click.echo(f"  Versus goal:          {format_diff(result.diff)} ({status})")


@cli.command("periods")
@_schedule_options
def periods(frequency, total_periods, as_of):
    """Estimate how many pay periods are left this year."""
    defaults = _load_defaults()
    as_of = as_of or datetime.now()

    try:
        periods_per_year = _resolve_schedule(frequency, total_periods, defaults)
        estimate = estimate_remaining_periods(as_of, periods_per_year)
    except ValueError as e:
        raise click.BadParameter(str(e))

    click.echo(estimate)


@cli.command("limits")
@click.argument("year", required=False, type=int)
@click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None,
              help="Output format (default: settings default_output_format or text).")
def limits(year, output_format):
    """Show the annual goal for each age bracket.

    YEAR defaults to the current year. Years without published limits fall
    back to the most recent earlier year on file.
    """
    year = year or datetime.now().year

    try:
        goals = goals_by_age_bracket(year)
    except FileNotFoundError as e:
        raise click.ClickException(str(e))

    if _output_format(output_format) == "json":
        click.echo(json.dumps({"year": year, "goals": goals}, indent=2))
        return

    render_goals(Console(), year, goals)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
