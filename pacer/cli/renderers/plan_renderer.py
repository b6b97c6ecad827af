"""Rich renderer for pace plans.

Formats SDK results for the terminal. All capping and clamping for display
happens here; the SDK values stay uncapped.
"""

import math

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from pacer.sdk.limits import AGE_BRACKET_LABELS
from pacer.sdk.plan import PacePlan


def format_percent(percent: float) -> str:
    """Format a required rate, showing anything above 100 as '100%+'."""
    if percent > 100:
        return "100%+"
    return f"{percent:.1f}%"


def format_currency(amount: float | None, cents: bool = True) -> str:
    """Format currency amount."""
    if amount is None:
        return "-"
    if cents:
        return f"${amount:,.2f}"
    return f"${amount:,.0f}"


def format_progress(percent: float) -> str:
    """Format goal progress as a whole percent, rounding halves up."""
    return f"{math.floor(percent + 0.5)}% Complete"


def format_diff(diff: float) -> str:
    """Format a surplus/shortfall with an explicit sign."""
    sign = "+" if diff >= 0 else "-"
    return f"{sign}{format_currency(abs(diff), cents=False)}"


def render_pace_plan(console: Console, plan: PacePlan) -> None:
    """Render a pace plan as Rich tables.

    Args:
        console: Rich Console instance
        plan: Result of build_pace_plan()
    """
    _render_required_table(console, plan)
    _render_scenario_table(console, plan)

    if plan.exceeds_pay:
        console.print(Panel(
            "[yellow]Reaching the goal needs more than your remaining gross pay. "
            "The goal cannot be met from payroll contributions alone.[/yellow]",
            title="Warning",
            border_style="yellow"
        ))


def _render_required_table(console: Console, plan: PacePlan) -> None:
    """Render the required pace table."""
    inputs = plan.inputs
    contribution = plan.contribution
    periods_note = "estimated" if plan.periods_estimated else "given"

    table = Table(
        title=f"Contribution Pace as of {plan.as_of:%Y-%m-%d}",
        box=box.ROUNDED,
    )
    table.add_column("", style="bold", min_width=24)
    table.add_column("Value", justify="right", min_width=14)

    table.add_row("Annual Salary", format_currency(inputs.salary))
    table.add_row("Goal", format_currency(inputs.goal))
    table.add_row("Contributed YTD", format_currency(inputs.ytd))
    table.add_row(
        "Pay Periods Left",
        f"{plan.remaining_periods} of {inputs.total_periods} [dim]({periods_note})[/dim]",
    )
    table.add_row("Remaining Gross Pay", format_currency(contribution.remaining_gross_pay))
    table.add_row("", "")
    table.add_row(
        "[bold green]Required Rate[/bold green]",
        f"[bold green]{format_percent(contribution.required_percent)}[/bold green]",
    )
    table.add_row("Per Paycheck", f"{format_currency(contribution.per_check)} / paycheck")
    table.add_row("", "")
    table.add_row("Progress", format_progress(plan.progress_percent))
    table.add_row("Left to Contribute", f"{format_currency(plan.remaining_dollars, cents=False)} left")

    console.print(table)


def _render_scenario_table(console: Console, plan: PacePlan) -> None:
    """Render the what-if scenario table."""
    scenario = plan.scenario

    table = Table(title=f"What If: {plan.adjusted_rate:g}% From Now On", box=box.ROUNDED)
    table.add_column("", style="bold", min_width=24)
    table.add_column("Value", justify="right", min_width=14)

    table.add_row("Year-End Total", format_currency(scenario.total_year_end, cents=False))
    if scenario.goal_met:
        table.add_row("Versus Goal", format_diff(scenario.diff))
        table.add_row("Status", "[bold]Goal Met[/bold]")
    else:
        table.add_row("Versus Goal", f"[red]{format_diff(scenario.diff)}[/red]")
        table.add_row("Status", "[bold red]Shortfall[/bold red]")

    console.print(table)


def render_goals(console: Console, year: int, goals: dict[str, float]) -> None:
    """Render goals per age bracket for a year."""
    table = Table(title=f"401(k) Employee Goals for {year}", box=box.ROUNDED)
    table.add_column("Age Bracket", style="bold")
    table.add_column("Key", style="dim")
    table.add_column("Goal", justify="right")

    for bracket, goal in goals.items():
        table.add_row(AGE_BRACKET_LABELS.get(bracket, bracket), bracket, format_currency(goal, cents=False))

    console.print(table)
