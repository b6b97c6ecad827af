"""Settings CLI commands for Pacer.

Manages settings.json - output preferences and profile location.
"""

import click
from pathlib import Path

from pacer.sdk import (
    load_settings,
    set_setting,
    unset_setting,
    get_settings_path,
    get_profile_path,
)


KNOWN_SETTINGS = {
    "default_output_format": ("text", "json"),
    "profile": None,
}


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - default_output_format: text or json
    - profile: path to profile.yaml (if not in the config directory)
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective paths:")
    click.echo(f"  profile: {get_profile_path()}")


@settings.command("set")
@click.argument("key", type=click.Choice(list(KNOWN_SETTINGS)))
@click.argument("value")
def settings_set(key, value):
    """Set a setting.

    Examples:
        pacer settings set default_output_format json
        pacer settings set profile ~/finance/pacer-profile.yaml
    """
    allowed = KNOWN_SETTINGS[key]
    if allowed and value not in allowed:
        raise click.BadParameter(f"{key} must be one of: {', '.join(allowed)}")

    if key == "profile":
        profile_path = Path(value).expanduser().resolve()
        if profile_path.suffix not in (".yaml", ".yml"):
            raise click.ClickException(f"Profile must be a YAML file: {profile_path}")
        value = str(profile_path)

    saved_to = set_setting(key, value)
    click.echo(f"Set {key}: {value}")
    click.echo(f"Saved to: {saved_to}")


@settings.command("unset")
@click.argument("key", type=click.Choice(list(KNOWN_SETTINGS)))
def settings_unset(key):
    """Clear a setting, reverting to its default."""
    if unset_setting(key):
        click.echo(f"Cleared {key} setting.")
    else:
        click.echo(f"{key} was not set.")
