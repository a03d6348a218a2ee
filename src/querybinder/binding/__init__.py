"""Argument binding and value formatting for querybinder."""

from querybinder.binding.binder import ParameterBinder, bind_parameters
from querybinder.binding.formatter import expand, format_value
from querybinder.binding.skip import SKIP, needs_skip, skip

__all__ = [
    # Binding
    "ParameterBinder",
    "bind_parameters",
    # Formatting
    "format_value",
    "expand",
    # Skip sentinel
    "SKIP",
    "skip",
    "needs_skip",
]
