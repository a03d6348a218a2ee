"""Loading of positional query arguments for the command line."""

from querybinder.arguments.loader import (
    SKIP_TOKEN,
    load_all_arguments,
    load_arguments_file,
    parse_cli_arguments,
    resolve_skip_tokens,
)

__all__ = [
    "SKIP_TOKEN",
    "load_all_arguments",
    "load_arguments_file",
    "parse_cli_arguments",
    "resolve_skip_tokens",
]
