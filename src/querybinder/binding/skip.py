"""The skip sentinel used to drop conditional blocks."""

from collections.abc import Mapping, Sequence
from typing import Any


class _SkipType:
    """Type of the ``SKIP`` singleton."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIP"

    def __reduce__(self):
        return (_SkipType, ())


SKIP = _SkipType()


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def skip() -> _SkipType:
    """Return the sentinel that suppresses the enclosing conditional block.

    Example:
        >>> build_query("SELECT * FROM t {WHERE id = ?d}", [skip()])
        'SELECT * FROM t '
    """
    return SKIP


def needs_skip(value: Any) -> bool:
    """Check whether an argument asks for its conditional block to be dropped.

    Args:
        value: A positional argument.

    Returns:
        True if ``value`` is the sentinel, or is a sequence or mapping with
        the sentinel among its element values.
    """
    if value is SKIP:
        return True

    if is_mapping(value):
        return any(item is SKIP for item in value.values())

    if is_sequence(value):
        return any(item is SKIP for item in value)

    return False
