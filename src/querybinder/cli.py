"""CLI entry point for querybinder."""

from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from querybinder.arguments import load_all_arguments
from querybinder.database import Database
from querybinder.errors import (
    ArgumentCountMismatch,
    MalformedTemplate,
    QueryBuilderError,
    QueryValidationError,
)
from querybinder.formatters import JsonFormatter, OutputWriter, TextFormatter
from querybinder.global_models import OutputFormat
from querybinder.utils.config import load_config
from querybinder.utils.file_utils import read_template_file
from querybinder.validation import DEFAULT_DIALECT, validate_query

app = typer.Typer(
    name="querybinder",
    help="Build literal SQL queries from placeholder templates.",
    invoke_without_command=False,
)
console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


@app.callback()
def main():
    """querybinder - SQL placeholder template builder."""
    pass


@app.command()
def build(
    template_file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to the query template file",
    ),
    arg: Optional[List[str]] = typer.Option(
        None,
        "--arg",
        "-a",
        help="Positional argument per placeholder (repeatable, ':skip' drops a block)",
    ),
    args_file: Optional[Path] = typer.Option(
        None,
        "--args-file",
        exists=True,
        help="Path to arguments file (JSON, YAML, or TOML)",
    ),
    consume_skipped: Optional[bool] = typer.Option(
        None,
        "--consume-skipped/--no-consume-skipped",
        help="Let a dropped block consume the arguments of all its placeholders",
    ),
    validate: Optional[bool] = typer.Option(
        None,
        "--validate/--no-validate",
        help="Check that the built query parses as SQL",
    ),
    dialect: Optional[str] = typer.Option(
        None,
        "--dialect",
        "-d",
        help="SQL dialect used by --validate (default: mysql, or from config)",
    ),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output-file",
        "-o",
        help="Write output to file instead of stdout",
    ),
) -> None:
    """
    Build a literal SQL query from a template file and positional arguments.

    Configuration can be set in querybinder.toml in the current directory.
    CLI arguments override configuration file values.

    Examples:

        # Bind one integer placeholder
        querybinder build query.sql --arg 42

        # Drop a conditional block
        querybinder build query.sql --arg name --arg :skip

        # Read arguments from a file
        querybinder build query.sql --args-file args.json

        # Check the result with SQLGlot
        querybinder build query.sql --arg 42 --validate
    """
    # Load configuration from querybinder.toml (if it exists)
    config = load_config()

    # Apply priority resolution: CLI args > config > defaults
    if args_file is None and config.args_file:
        args_file = Path(config.args_file)
        if not args_file.exists():
            err_console.print(
                f"[yellow]Warning:[/yellow] Arguments file from config "
                f"not found: {args_file}"
            )
            args_file = None
    if consume_skipped is None:
        consume_skipped = bool(config.consume_skipped)
    if validate is None:
        validate = bool(config.validate_sql)
    dialect = dialect or config.dialect or DEFAULT_DIALECT

    try:
        template = read_template_file(template_file)
        args = load_all_arguments(cli_args=arg, args_file=args_file)

        database = Database(consume_skipped=consume_skipped)
        query = database.build_query(template, args)

        if validate:
            validate_query(query, dialect=dialect)

        OutputWriter.write(query, output_file)
        if output_file:
            console.print(f"[green]Success:[/green] Query written to {output_file}")

    except FileNotFoundError as e:
        _fail(str(e))

    except MalformedTemplate as e:
        _fail(f"Malformed template: {e}")

    except (ArgumentCountMismatch, QueryValidationError) as e:
        _fail(str(e))

    except QueryBuilderError as e:
        _fail(f"Cannot format argument: {e}")

    except ValueError as e:
        _fail(str(e))


@app.command()
def parse(
    template_file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to the query template file",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--output-format",
        "-f",
        help="Output format: 'text' or 'json' (default: text, or from config)",
    ),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output-file",
        "-o",
        help="Write output to file instead of stdout",
    ),
) -> None:
    """
    Show the placeholders and conditional blocks of a template file.

    Examples:

        # Inspect a template
        querybinder parse query.sql

        # Export the node structure as JSON
        querybinder parse query.sql --output-format json
    """
    config = load_config()
    output_format = output_format or config.output_format or OutputFormat.TEXT.value

    valid_formats = [f.value for f in OutputFormat]
    if output_format not in valid_formats:
        _fail(
            f"Invalid output format '{output_format}'. "
            f"Use {' or '.join(repr(f) for f in valid_formats)}."
        )

    try:
        template = read_template_file(template_file)
        parsed = Database().parse(template)

        if output_format == OutputFormat.JSON.value:
            OutputWriter.write(JsonFormatter.format(parsed), output_file)
        elif output_file:
            # For file output, use a string-based console to capture output
            from io import StringIO

            string_buffer = StringIO()
            file_console = Console(file=string_buffer, force_terminal=False)
            TextFormatter.format(parsed, file_console)
            output_file.write_text(string_buffer.getvalue(), encoding="utf-8")
        else:
            TextFormatter.format(parsed, console)

        if output_file:
            console.print(f"[green]Success:[/green] Nodes written to {output_file}")

    except FileNotFoundError as e:
        _fail(str(e))

    except MalformedTemplate as e:
        _fail(f"Malformed template: {e}")

    except ValueError as e:
        _fail(str(e))


if __name__ == "__main__":
    app()
