"""
Configuration validator that validates settings values.
"""

import logging

from .models import AppSettings

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def validate_configuration(settings: AppSettings) -> None:
    """Validate configuration values and provide helpful warnings."""

    if settings.console_log_level not in VALID_LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, "
            f"got {settings.console_log_level!r}"
        )

    if not settings.docs.title.strip():
        raise ValueError("DOCS_TITLE must not be empty")

    if not settings.docs.output_file.endswith(".md"):
        logger = logging.getLogger(__name__)
        logger.warning(
            f"DOCS_OUTPUT_FILE ({settings.docs.output_file}) does not end with '.md'. "
            f"The rendered document is markdown regardless of the file name."
        )
