"""Shared models and enums used across querybinder modules."""

from enum import Enum
from typing import Optional


class Specifier(str, Enum):
    """Placeholder token selecting how an argument is formatted."""

    PLAIN = "?"
    INT = "?d"
    FLOAT = "?f"
    ARRAY = "?a"
    IDENTIFIER = "?#"

    @classmethod
    def from_letter(cls, letter: Optional[str]) -> "Specifier":
        """Resolve the specifier for the character following a ``?``.

        Args:
            letter: The character after ``?``, or None at end of input.

        Returns:
            The matching Specifier, or PLAIN if the character is not a
            specifier letter.
        """
        if letter is None or letter not in SPECIFIER_LETTERS:
            return cls.PLAIN
        return cls(PARAMETER_SYMBOL + letter)


class OutputFormat(str, Enum):
    """Output format for the ``parse`` command."""

    TEXT = "text"
    JSON = "json"


PARAMETER_SYMBOL = "?"
SPECIFIER_LETTERS = frozenset({"d", "f", "a", "#"})
