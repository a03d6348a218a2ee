"""Convert argument values into literal SQL text.

Quoting rules:

- Strings are wrapped in single quotes (data) or backticks (identifiers).
  No escaping is done inside the quotes.
- Booleans render as ``1``/``0`` and None as ``NULL``.
- Numbers render as unquoted decimal text.

Sequences and mappings are only accepted at the top level of ``?a`` and
``?#`` arguments.
"""

import math
import re
from typing import Any, NoReturn

from querybinder.binding.skip import SKIP, is_mapping, is_sequence
from querybinder.errors import (
    BadArrayArgument,
    UnknownSpecifier,
    UnsupportedArgumentType,
)
from querybinder.global_models import Specifier

STRING_QUOTE = "'"
IDENTIFIER_QUOTE = "`"
LIST_SEPARATOR = ", "

# Integral floats below this magnitude print without a fractional part
MAX_INTEGRAL_FLOAT = 1e15

_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)(?![\d.eE])")
_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def format_value(specifier: Specifier, value: Any) -> str:
    """Format one argument for the given placeholder specifier.

    Args:
        specifier: The placeholder's specifier.
        value: The positional argument bound to the placeholder.

    Returns:
        Literal SQL text to splice into the query.

    Raises:
        UnknownSpecifier: If ``specifier`` is not a known specifier.
        BadArrayArgument: If ``?a`` is given a non-container value.
        UnsupportedArgumentType: If the value (or a container element) is
            not a string, integer, float, boolean or None.
    """
    try:
        specifier = Specifier(specifier)
    except ValueError as e:
        raise UnknownSpecifier(f"Unknown placeholder specifier: {specifier!r}") from e

    if specifier is Specifier.PLAIN:
        return quote_scalar(value, STRING_QUOTE)

    if specifier is Specifier.INT:
        if value is None:
            return "NULL"
        return str(to_int(value))

    if specifier is Specifier.FLOAT:
        return format_float(to_float(value))

    if specifier is Specifier.ARRAY:
        if not (is_sequence(value) or is_mapping(value)):
            raise BadArrayArgument(
                f"?a expects a list or mapping, got {type(value).__name__}"
            )
        return expand(value, STRING_QUOTE)

    # Specifier.IDENTIFIER
    if is_sequence(value) or is_mapping(value):
        return expand(value, IDENTIFIER_QUOTE)
    return IDENTIFIER_QUOTE + scalar_text(value) + IDENTIFIER_QUOTE


def expand(container: Any, quote: str) -> str:
    """Render a sequence or mapping as a comma-separated list.

    Sequence elements that are strings are wrapped in ``quote``. Mapping
    entries render as ```key` = value`` with the key always in backticks and
    the value always treated as data, whatever ``quote`` is.

    Args:
        container: A sequence or mapping argument.
        quote: Quote character for string elements of a sequence.

    Returns:
        The joined list text.
    """
    if is_mapping(container):
        return LIST_SEPARATOR.join(
            f"{IDENTIFIER_QUOTE}{_key_text(key)}{IDENTIFIER_QUOTE} = "
            f"{quote_scalar(item, STRING_QUOTE)}"
            for key, item in container.items()
        )

    return LIST_SEPARATOR.join(quote_scalar(item, quote) for item in container)


def quote_scalar(value: Any, quote: str) -> str:
    """Wrap strings in ``quote``; render other scalars as plain text."""
    if isinstance(value, str):
        return f"{quote}{value}{quote}"
    return scalar_text(value)


def scalar_text(value: Any) -> str:
    """Render a scalar without quotes.

    Raises:
        UnsupportedArgumentType: For containers and any other type.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if value is None:
        return "NULL"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, str):
        return value
    _reject(value)


def _reject(value: Any) -> NoReturn:
    if value is SKIP:
        raise UnsupportedArgumentType(
            "skip() can only be used for placeholders inside a conditional block"
        )
    raise UnsupportedArgumentType(
        f"Unsupported argument type: {type(value).__name__}"
    )


def format_float(value: float) -> str:
    """Render a float as decimal text, dropping ``.0`` from integral values."""
    if not math.isfinite(value):
        raise UnsupportedArgumentType(f"Cannot render non-finite float: {value!r}")
    if value.is_integer() and abs(value) < MAX_INTEGRAL_FLOAT:
        return str(int(value))
    return repr(value)


def to_int(value: Any) -> int:
    """Cast a scalar to int the loose way: ``"12abc"`` is 12, ``"abc"`` is 0."""
    if isinstance(value, int):
        return int(value)

    if isinstance(value, str):
        match = _INTEGER_PREFIX.match(value)
        if match:
            return int(match.group(1))
        number = _string_to_float(value)
    else:
        number = to_float(value)

    if not math.isfinite(number):
        raise UnsupportedArgumentType(f"Cannot cast non-finite float to int: {number!r}")
    return int(number)


def to_float(value: Any) -> float:
    """Cast a scalar to float; None casts to 0.0."""
    if value is None:
        return 0.0
    if isinstance(value, str):
        return _string_to_float(value)
    if isinstance(value, (int, float)):
        return float(value)
    _reject(value)


def _string_to_float(value: str) -> float:
    match = _NUMERIC_PREFIX.match(value)
    if not match:
        return 0.0
    return float(match.group(1))


def _key_text(key: Any) -> str:
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        raise UnsupportedArgumentType(
            f"Mapping keys must be strings or integers, got {type(key).__name__}"
        )
    return str(key)
