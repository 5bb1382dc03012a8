"""
Simple, standardized error handling for the application.

This module provides basic error handling utilities that can be used throughout
the application to ensure consistent error logging and handling.
"""

import functools
from typing import Any, Callable, Tuple

import structlog

logger = structlog.get_logger(__name__)


def log_exception(func: Callable) -> Callable:
    """
    Decorator to log exceptions with full traceback information.

    Any exception raised by the wrapped function is logged with traceback
    information before being re-raised.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.error(
                f"Exception in {func.__name__}: {str(e)}",
                exc_info=True,
                func_name=func.__name__,
            )
            raise

    return wrapper


def safe_call(func: Callable, *args, **kwargs) -> Tuple[bool, Any]:
    """
    Safely call a function and return (success, result_or_exception).

    Returns:
        tuple: (success: bool, result: Any)
            - If successful: (True, result)
            - If failed: (False, exception)
    """
    try:
        result = func(*args, **kwargs)
        return True, result
    except Exception as e:
        logger.error(
            f"Safe call failed for {func.__name__}: {str(e)}",
            exc_info=True,
            func_name=func.__name__,
        )
        return False, e
