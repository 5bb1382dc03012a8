"""
Utility functions for configuration management.
"""

import os


def get_working_root() -> str:
    """
    Returns the directory relative paths are resolved against.

    This is the current working directory, never the install location, so an
    installed package does not write logs or docs into site-packages.
    """
    return os.path.abspath(os.getcwd())


def parse_bool(value: str | None, default: bool) -> bool:
    """Interprets an environment flag such as '1', 'true', 'no'."""
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")
