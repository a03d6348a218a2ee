"""Exceptions raised while building queries."""

from typing import Optional


class QueryBuilderError(Exception):
    """Base exception for all query building failures."""

    pass


class MalformedTemplate(QueryBuilderError):
    """Raised when a template cannot be parsed."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)


class NestedConditionalBlock(MalformedTemplate):
    """A ``{`` was found inside an unterminated conditional block."""

    def __init__(self, position: Optional[int] = None):
        super().__init__("Nested conditional blocks are not allowed", position)


class UnterminatedConditionalBlock(MalformedTemplate):
    """The template ended before a conditional block was closed."""

    def __init__(self, position: Optional[int] = None):
        super().__init__("Unterminated conditional block", position)


class ArgumentCountMismatch(QueryBuilderError):
    """The number of arguments does not match the number of placeholders."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Template expects {expected} argument(s), got {actual}"
        )


class UnknownSpecifier(QueryBuilderError):
    """A placeholder carries a specifier the formatter does not know."""

    pass


class UnsupportedArgumentType(QueryBuilderError):
    """An argument value cannot be rendered as a SQL literal."""

    pass


class BadArrayArgument(UnsupportedArgumentType):
    """``?a`` was given something other than a sequence or mapping."""

    pass


class QueryValidationError(QueryBuilderError):
    """The built query failed SQL syntax validation."""

    pass
