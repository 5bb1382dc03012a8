"""
Configuration loader that loads settings from environment variables.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

from .models import AppSettings, DocsSettings, PathSettings
from .utils import parse_bool


@lru_cache(maxsize=None)
def get_settings() -> AppSettings:
    """
    Loads the application settings from environment variables.
    Uses a cache to ensure settings are loaded only once.
    """
    load_dotenv()

    # --- Path Settings ---
    path_settings = PathSettings()

    # --- Docs Settings ---
    docs_settings = DocsSettings(
        output_file=os.getenv(
            "DOCS_OUTPUT_FILE",
            os.path.join(path_settings.docs_dir, "creational_patterns.md"),
        ),
        title=os.getenv("DOCS_TITLE", "Creational Design Patterns"),
        include_source=parse_bool(os.getenv("DOCS_INCLUDE_SOURCE"), True),
        include_output=parse_bool(os.getenv("DOCS_INCLUDE_OUTPUT"), True),
    )

    settings = AppSettings(
        paths=path_settings,
        docs=docs_settings,
        console_log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )

    # --- Validate Configuration ---
    from .validator import validate_configuration

    validate_configuration(settings)

    return settings
