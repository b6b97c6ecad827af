"""Configuration management for Pacer.

Configuration is split into two files:

1. settings.json - Machine-specific, ephemeral settings
   - profile: path to profile.yaml (optional, if not colocated)
   - default_output_format: "text" or "json"

2. profile.yaml - User's personal defaults
   - salary, ytd: annual gross salary and contributions so far
   - pay_frequency / total_periods: pay schedule
   - age_bracket / custom_goal: how the annual goal is chosen
   - adjusted_rate: default what-if contribution rate

Config directory resolution:
1. PACER_CONFIG_PATH environment variable (if set)
2. ~/.config/pacer/ (XDG_CONFIG_HOME fallback)

Profile resolution:
1. settings.json "profile" key (if set via CLI)
2. profile.yaml in same config directory
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from .schemas import PacerProfile


APP_NAME = "pacer"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"


class ProfileNotFoundError(Exception):
    """Raised when no profile is found."""
    pass


class ProfileValidationError(Exception):
    """Raised when profile.yaml does not match the profile schema."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. PACER_CONFIG_PATH environment variable
    2. ~/.config/pacer/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("PACER_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json."""
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting from settings.json.

    Returns:
        True if the key was present and removed
    """
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def get_profile_path(require_exists: bool = False) -> Path:
    """Get the path to the profile.yaml file.

    Resolution order:
    1. settings.json "profile" key (if set)
    2. profile.yaml in config directory

    Args:
        require_exists: If True, raises ProfileNotFoundError if not found

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    custom_profile = load_settings().get("profile")
    if custom_profile:
        profile_path = Path(custom_profile)
        if require_exists and not profile_path.exists():
            raise ProfileNotFoundError(
                f"Profile not found at configured path: {profile_path}\n\n"
                f"Update with: pacer settings set profile /path/to/profile.yaml"
            )
        return profile_path

    profile_path = get_config_dir() / PROFILE_FILENAME
    if require_exists and not profile_path.exists():
        raise ProfileNotFoundError(
            f"No profile found. Checked:\n"
            f"  1. settings.json 'profile' key (not set)\n"
            f"  2. {profile_path} (not found)\n\n"
            f"Create a profile with: pacer profile init"
        )

    return profile_path


def load_profile(require_exists: bool = True) -> dict:
    """Load user profile from profile.yaml.

    Args:
        require_exists: If True, raises ProfileNotFoundError if not found

    Returns:
        Profile dictionary (empty dict if not required and not found)
    """
    profile_path = get_profile_path(require_exists=require_exists)

    if not profile_path.exists():
        return {}

    with open(profile_path, "r") as f:
        return yaml.safe_load(f) or {}


def save_profile(profile: dict, path: Optional[Path] = None) -> Path:
    """Save user profile to profile.yaml.

    Args:
        profile: Profile dictionary to save
        path: Optional custom path (uses default if not specified)

    Returns:
        Path to the saved profile file
    """
    if path is None:
        path = get_profile_path(require_exists=False)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(profile, f, default_flow_style=False, sort_keys=False)

    return path


def validate_profile(profile: Optional[dict] = None) -> PacerProfile:
    """Validate a profile dict against the profile schema.

    Args:
        profile: Optional profile dict (loads from file if not provided)

    Returns:
        Parsed PacerProfile

    Raises:
        ProfileNotFoundError: If no profile is given and none exists
        ProfileValidationError: If the profile has unknown keys or bad values
    """
    if profile is None:
        profile = load_profile(require_exists=True)

    try:
        return PacerProfile.model_validate(profile)
    except ValidationError as e:
        problems = "\n  ! ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '(root)'}: {err['msg']}"
            for err in e.errors()
        )
        raise ProfileValidationError(
            f"Profile has validation errors:\n\n  ! {problems}\n\n"
            f"Profile: {get_profile_path()}"
        ) from e


def get_profile_value(key: str, default: Any = None) -> Any:
    """Get a profile value by key.

    Args:
        key: Profile key (e.g., "salary", "pay_frequency")
        default: Default value if key not found
    """
    profile = load_profile(require_exists=False)
    return profile.get(key, default)


def set_profile_value(key: str, value: Any) -> Path:
    """Set a profile value, validating the resulting profile before saving.

    Raises:
        ProfileValidationError: If the new value makes the profile invalid
    """
    profile = load_profile(require_exists=False)
    profile[key] = value
    validated = validate_profile(profile)
    return save_profile(validated.model_dump(exclude_none=True))


def load_profile_defaults() -> PacerProfile:
    """Load the profile as a validated model, empty when no profile exists."""
    profile = load_profile(require_exists=False)
    return validate_profile(profile)
