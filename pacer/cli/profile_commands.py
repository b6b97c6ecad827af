"""Profile CLI commands for Pacer.

Manages profile.yaml - salary, pay schedule and goal defaults.
"""

import click
import yaml

from pacer.sdk import (
    AGE_BRACKETS,
    CUSTOM_BRACKET,
    PAY_PERIODS,
    PacerProfile,
    get_profile_path,
    load_profile,
    save_profile,
    set_profile_value,
    validate_profile,
    ProfileNotFoundError,
    ProfileValidationError,
)


PROFILE_KEYS = list(PacerProfile.model_fields)


@click.group()
def profile():
    """Manage profile defaults (profile.yaml)."""
    pass


@profile.command("show")
def profile_show():
    """Show profile location and saved defaults."""
    profile_path = get_profile_path()
    click.echo(f"Profile: {profile_path}")

    if not profile_path.exists():
        click.echo("Profile does not exist. Create one with: pacer profile init")
        return

    data = load_profile(require_exists=True)
    if not data:
        click.echo("Profile is empty.")
        return

    click.echo()
    click.echo(yaml.dump(data, default_flow_style=False, sort_keys=False).rstrip())

    try:
        validate_profile(data)
    except ProfileValidationError as e:
        click.echo()
        click.echo(str(e), err=True)


@profile.command("init")
@click.option("--salary", type=float, help="Annual gross salary.")
@click.option("--frequency", "pay_frequency", type=click.Choice(list(PAY_PERIODS)),
              default="biweekly", show_default=True, help="Pay frequency.")
@click.option("--age-bracket", type=click.Choice(list(AGE_BRACKETS) + [CUSTOM_BRACKET]),
              default="under_50", show_default=True, help="Age bracket that sets the goal.")
@click.option("--goal", "custom_goal", type=float, help="Custom goal (required with --age-bracket custom).")
@click.option("--force", is_flag=True, help="Overwrite an existing profile.")
def profile_init(salary, pay_frequency, age_bracket, custom_goal, force):
    """Create a new profile with starting defaults."""
    profile_path = get_profile_path()
    if profile_path.exists() and not force:
        raise click.ClickException(f"Profile already exists: {profile_path}\nUse --force to overwrite.")

    data = {
        "salary": salary,
        "pay_frequency": pay_frequency,
        "age_bracket": age_bracket,
        "custom_goal": custom_goal,
    }

    try:
        validated = validate_profile({k: v for k, v in data.items() if v is not None})
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    saved_to = save_profile(validated.model_dump(exclude_none=True))
    click.echo(f"Created profile: {saved_to}")


@profile.command("set")
@click.argument("key", type=click.Choice(PROFILE_KEYS))
@click.argument("value")
def profile_set(key, value):
    """Set a profile value.

    Examples:
        pacer profile set salary 130000
        pacer profile set ytd 10000
        pacer profile set age_bracket 50_plus
    """
    try:
        saved_to = set_profile_value(key, value)
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key}: {value}")
    click.echo(f"Saved to: {saved_to}")


@profile.command("validate")
def profile_validate():
    """Check profile.yaml against the profile schema."""
    try:
        validate_profile()
    except (ProfileNotFoundError, ProfileValidationError) as e:
        raise click.ClickException(str(e))

    click.echo(f"Profile is valid: {get_profile_path()}")
