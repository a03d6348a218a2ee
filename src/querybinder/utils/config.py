"""Configuration management for querybinder.

Loads configuration from querybinder.toml in the current working directory.
"""

import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)

CONFIG_FILE_NAME = "querybinder.toml"
CONFIG_SECTION = "querybinder"


class ConfigSettings(BaseModel):
    """Configuration settings for querybinder.

    All fields are optional. None values indicate the setting was not
    specified in the config file.
    """

    output_format: Optional[str] = None
    args_file: Optional[str] = None
    consume_skipped: Optional[bool] = None
    validate_sql: Optional[bool] = None
    dialect: Optional[str] = None


def find_config_file(start_path: Optional[Path] = None) -> Optional[Path]:
    """Find querybinder.toml in the given directory.

    Args:
        start_path: Directory to look in. Defaults to the current working
                   directory.

    Returns:
        Path to config file if found, None otherwise.
    """
    if start_path is None:
        start_path = Path.cwd()

    config_path = start_path / CONFIG_FILE_NAME

    if config_path.is_file():
        return config_path

    return None


def load_config(config_path: Optional[Path] = None) -> ConfigSettings:
    """Load configuration from querybinder.toml.

    Priority order:
    1. Explicit config_path parameter
    2. querybinder.toml in current working directory
    3. Empty ConfigSettings (all None)

    Args:
        config_path: Optional explicit path to config file.

    Returns:
        ConfigSettings with values from the ``[querybinder]`` table. Always
        returns a valid ConfigSettings object, even on errors.

    Error Handling:
        - Missing file: Returns empty ConfigSettings (silent)
        - Malformed TOML: Warns user and returns empty ConfigSettings
        - Invalid values: Warns user and returns empty ConfigSettings
        - Unknown keys: Ignored (forward compatibility)
    """
    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        return ConfigSettings()

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        return _fallback(f"Failed to parse {config_path}: {e}")
    except OSError as e:
        return _fallback(f"Could not read {config_path}: {e}")

    section = toml_data.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        return _fallback(f"[{CONFIG_SECTION}] in {config_path} must be a table")

    try:
        return ConfigSettings(**section)
    except ValueError as e:
        # pydantic.ValidationError is a ValueError
        return _fallback(f"Invalid configuration in {config_path}: {e}")


def _fallback(message: str) -> ConfigSettings:
    console.print(f"[yellow]Warning:[/yellow] {escape(message)}")
    console.print("[yellow]Using default settings[/yellow]")
    return ConfigSettings()
