"""
Centralized application initialization.

This module provides a single point of entry for initializing the application's
core services, such as configuration and logging. The CLI calls
`initialize_app` to get a fully configured application environment.
"""

import punq
import structlog

from creational.core.config import AppSettings, get_settings
from creational.core.container import create_container
from creational.core.logger import setup_logging

_logger = structlog.get_logger(__name__)


class AppContext:
    """
    Centralized application context.
    """

    def __init__(self, settings: AppSettings):
        self.settings = settings
        setup_logging(self.settings)
        self.container: punq.Container = create_container(self.settings)
        _logger.info("Application context initialized.")

    @classmethod
    def create(cls) -> "AppContext":
        """
        Creates a new instance of the application context.
        """
        settings = get_settings()
        return cls(settings)


def initialize_app() -> AppContext:
    """
    Initializes the application by creating the application context.
    """
    return AppContext.create()
