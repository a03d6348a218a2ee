"""Positional argument loading for the command line.

Arguments can come from two sources:
1. CLI ``--arg`` values (highest priority)
2. An arguments file (JSON/YAML/TOML), given on the CLI or in the config file

Unlike named variables, positional arguments cannot be merged, so the CLI
values replace the file contents entirely when both are given.
"""

import json
import math
import tomllib
from pathlib import Path
from typing import Any, List, Optional

from rich.console import Console

from querybinder.binding.skip import SKIP

console = Console(stderr=True)

SKIP_TOKEN = ":skip"
TOML_ARGS_KEY = "args"


def load_arguments_file(path: Path) -> List[Any]:
    """Load positional arguments from a JSON, YAML, or TOML file.

    JSON and YAML files must hold a top-level list. TOML files must define an
    ``args`` array, since TOML documents are always tables.

    Args:
        path: Path to the arguments file.

    Returns:
        The list of arguments, in placeholder order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is not supported or cannot be parsed.
    """
    if not path.exists():
        raise FileNotFoundError(f"Arguments file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json_file(path)
    elif suffix in (".yaml", ".yml"):
        return _load_yaml_file(path)
    elif suffix == ".toml":
        return _load_toml_file(path)
    else:
        raise ValueError(
            f"Unsupported arguments file format: {suffix}. "
            "Use .json, .yaml, .yml, or .toml"
        )


def _load_json_file(path: Path) -> List[Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise ValueError(
            f"Arguments file {path} must contain a JSON array, "
            f"got {type(data).__name__}"
        )
    return data


def _load_yaml_file(path: Path) -> List[Any]:
    """Load arguments from a YAML file.

    Requires PyYAML to be installed.
    """
    try:
        import yaml
    except ImportError:
        raise ValueError(
            f"Cannot load YAML file {path}: PyYAML is not installed. "
            "Install it with: pip install 'querybinder[yaml]'"
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return []

    if not isinstance(data, list):
        raise ValueError(
            f"Arguments file {path} must contain a YAML sequence, "
            f"got {type(data).__name__}"
        )
    return data


def _load_toml_file(path: Path) -> List[Any]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e

    args = data.get(TOML_ARGS_KEY, [])
    if not isinstance(args, list):
        raise ValueError(
            f"'{TOML_ARGS_KEY}' in {path} must be an array, "
            f"got {type(args).__name__}"
        )
    return args


def parse_cli_arguments(arg_values: Optional[List[str]]) -> List[Any]:
    """Parse CLI ``--arg`` values into typed arguments.

    Supports basic type inference:
    - Booleans: true, false (case-insensitive)
    - Null: null (case-insensitive)
    - Integers: 123
    - Floats: 12.34
    - Lists and mappings: JSON text starting with ``[`` or ``{``
    - The skip sentinel: ``:skip``, also inside JSON lists and mappings
    - Strings: everything else

    Args:
        arg_values: Raw CLI values, in placeholder order.

    Returns:
        The parsed arguments.

    Raises:
        ValueError: If a value looks like a JSON list or mapping but is not
            valid JSON.
    """
    if not arg_values:
        return []

    return resolve_skip_tokens([_infer_type(value) for value in arg_values])


def _infer_type(value: str) -> Any:
    if value == SKIP_TOKEN:
        return SKIP

    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered == "null":
        return None

    try:
        return int(value)
    except ValueError:
        pass

    try:
        number = float(value)
    except ValueError:
        pass
    else:
        # "nan" and "inf" stay strings
        if math.isfinite(number):
            return number

    if value.startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON argument '{value}': {e}") from e

    return value


def load_all_arguments(
    cli_args: Optional[List[str]] = None,
    args_file: Optional[Path] = None,
) -> List[Any]:
    """Load positional arguments from the CLI or an arguments file.

    Args:
        cli_args: Raw ``--arg`` values.
        args_file: Path to an arguments file (JSON, YAML, or TOML).

    Returns:
        The CLI arguments if any were given, otherwise the file arguments,
        otherwise an empty list.

    Raises:
        FileNotFoundError: If the arguments file does not exist.
        ValueError: If a CLI value is invalid JSON or the arguments file
            cannot be parsed.
    """
    if cli_args:
        if args_file:
            console.print(
                f"[yellow]Warning:[/yellow] Ignoring arguments file {args_file} "
                "because --arg values were given"
            )
        return parse_cli_arguments(cli_args)

    if args_file:
        return resolve_skip_tokens(load_arguments_file(args_file))

    return []


def resolve_skip_tokens(args: List[Any]) -> List[Any]:
    """Replace ``:skip`` strings loaded from a file with the skip sentinel.

    Top-level arguments and the values of top-level lists and mappings are
    replaced; deeper values are left alone.
    """
    resolved: List[Any] = []
    for arg in args:
        if isinstance(arg, list):
            arg = [SKIP if item == SKIP_TOKEN else item for item in arg]
        elif isinstance(arg, dict):
            arg = {k: SKIP if v == SKIP_TOKEN else v for k, v in arg.items()}
        elif arg == SKIP_TOKEN:
            arg = SKIP
        resolved.append(arg)
    return resolved
