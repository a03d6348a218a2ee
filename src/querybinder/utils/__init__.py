"""Utility functions for querybinder."""

from querybinder.utils.config import ConfigSettings, find_config_file, load_config
from querybinder.utils.file_utils import read_template_file

__all__ = [
    "ConfigSettings",
    "find_config_file",
    "load_config",
    "read_template_file",
]
