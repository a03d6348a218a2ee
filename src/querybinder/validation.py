"""Syntax validation of built queries using SQLGlot."""

from sqlglot import parse
from sqlglot.errors import ParseError

from querybinder.errors import QueryValidationError

DEFAULT_DIALECT = "mysql"


def validate_query(sql: str, dialect: str = DEFAULT_DIALECT) -> None:
    """Check that a built query parses in the given dialect.

    Args:
        sql: The built SQL query.
        dialect: SQLGlot dialect name (default: mysql, which matches the
            backtick identifier quoting used by the formatter).

    Raises:
        QueryValidationError: If the query is empty or does not parse.
    """
    try:
        statements = [s for s in parse(sql, dialect=dialect) if s is not None]
    except ParseError as e:
        raise QueryValidationError(f"Built query is not valid SQL: {e}") from e
    except ValueError as e:
        # Raised by SQLGlot for unknown dialect names
        raise QueryValidationError(f"Cannot validate query: {e}") from e

    if not statements:
        raise QueryValidationError("Built query is empty")
