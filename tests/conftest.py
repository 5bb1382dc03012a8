import logging

import pytest
import structlog

from creational.core.config import get_settings
from creational.patterns.singleton import Singleton, SingletonMeta


@pytest.fixture(scope="function", autouse=True)
def set_test_environment(monkeypatch, tmp_path):
    """
    Pins the environment for every test so settings never depend on the
    developer's shell or a local .env file.
    """
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("DOCS_OUTPUT_FILE", str(tmp_path / "docs" / "patterns.md"))
    for name in ("DOCS_TITLE", "DOCS_INCLUDE_SOURCE", "DOCS_INCLUDE_OUTPUT"):
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="function", autouse=True)
def remove_logging_handlers():
    """Detach handlers installed by setup_logging once a test is done."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_creational_handler", False):
            root_logger.removeHandler(handler)
            handler.close()


@pytest.fixture(scope="function", autouse=True)
def reset_singletons():
    """Singletons outlive a test; start each one from a clean slate."""
    Singleton._instance = None
    SingletonMeta._instances.clear()
    yield
    Singleton._instance = None
    SingletonMeta._instances.clear()


@pytest.fixture(scope="function")
def settings():
    return get_settings()


@pytest.fixture(scope="session", autouse=True)
def route_structlog_through_stdlib():
    """
    Until setup_logging runs, structlog prints to stdout, which would mix
    log lines into the captured example output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    yield
    structlog.reset_defaults()
