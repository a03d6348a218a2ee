"""Build literal SQL queries from placeholder templates.

Placeholders:
- ``?``: string, number, boolean or NULL
- ``?d``: integer
- ``?f``: float
- ``?a``: list of values, or ``key = value`` pairs from a mapping
- ``?#``: identifier or list of identifiers

Text between ``{`` and ``}`` is a conditional block, dropped when one of its
placeholders receives ``skip()``.

Example:
    >>> from querybinder import build_query, skip
    >>> build_query("SELECT ?# FROM users WHERE id = ?d", [["id", "name"], 7])
    'SELECT `id`, `name` FROM users WHERE id = 7'
    >>> build_query("SELECT * FROM users {WHERE block = ?d}", [skip()])
    'SELECT * FROM users '
"""

from querybinder.binding.skip import SKIP, skip
from querybinder.database import Database, DatabaseInterface, build_query
from querybinder.errors import (
    ArgumentCountMismatch,
    BadArrayArgument,
    MalformedTemplate,
    NestedConditionalBlock,
    QueryBuilderError,
    QueryValidationError,
    UnknownSpecifier,
    UnsupportedArgumentType,
    UnterminatedConditionalBlock,
)
from querybinder.global_models import Specifier

__all__ = [
    # Entry points
    "build_query",
    "skip",
    "SKIP",
    "Database",
    "DatabaseInterface",
    "Specifier",
    # Errors
    "QueryBuilderError",
    "MalformedTemplate",
    "NestedConditionalBlock",
    "UnterminatedConditionalBlock",
    "ArgumentCountMismatch",
    "UnknownSpecifier",
    "UnsupportedArgumentType",
    "BadArrayArgument",
    "QueryValidationError",
]
