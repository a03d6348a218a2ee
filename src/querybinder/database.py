"""Public entry points for building queries.

This module defines the abstract database interface and the default
implementation that runs the parse, bind and serialize pipeline.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from querybinder.binding.binder import ParameterBinder
from querybinder.binding.skip import SKIP, _SkipType
from querybinder.template.models import ParsedTemplate
from querybinder.template.parser import TemplateParser
from querybinder.template.serializer import serialize_nodes


class DatabaseInterface(ABC):
    """Abstract base class for query builders.

    Example:
        >>> class MyDatabase(DatabaseInterface):
        ...     def build_query(self, query, args=()):
        ...         return query
        ...
        ...     def skip(self):
        ...         return SKIP
    """

    @abstractmethod
    def build_query(self, query: str, args: Sequence[Any] = ()) -> str:
        """Build a literal SQL query from a template and its arguments.

        Args:
            query: The template with placeholders and conditional blocks.
            args: One positional argument per placeholder.

        Returns:
            The final SQL string.

        Raises:
            QueryBuilderError: If the template is malformed, the argument
                count is wrong, or an argument cannot be formatted.
        """
        pass

    @abstractmethod
    def skip(self) -> Any:
        """Return the value that drops the enclosing conditional block."""
        pass


class Database(DatabaseInterface):
    """Default query builder.

    The connection is an external collaborator kept for callers that want
    to execute the built query; query building itself never touches it.
    """

    def __init__(self, connection: Optional[Any] = None, consume_skipped: bool = False):
        """Initialize the builder.

        Args:
            connection: Optional DB-API connection owned by the caller.
            consume_skipped: Whether a dropped conditional block consumes the
                arguments of all its placeholders rather than just one.
        """
        self.connection = connection
        self.consume_skipped = consume_skipped

    def parse(self, query: str) -> ParsedTemplate:
        """Parse a template without binding it."""
        return TemplateParser(query).parse()

    def build_query(self, query: str, args: Sequence[Any] = ()) -> str:
        parsed = self.parse(query)
        nodes = ParameterBinder(consume_skipped=self.consume_skipped).bind(parsed, args)
        return serialize_nodes(nodes)

    def skip(self) -> _SkipType:
        return SKIP


def build_query(
    query: str, args: Sequence[Any] = (), consume_skipped: bool = False
) -> str:
    """Build a literal SQL query without a Database instance.

    Example:
        >>> build_query("SELECT * FROM users WHERE id = ?d", [5])
        'SELECT * FROM users WHERE id = 5'
    """
    return Database(consume_skipped=consume_skipped).build_query(query, args)
