"""
Centralized configuration management.
"""

from .loader import get_settings as get_settings
from .models import AppSettings as AppSettings
from .models import DocsSettings as DocsSettings
from .models import PathSettings as PathSettings

__all__ = [
    "AppSettings",
    "DocsSettings",
    "PathSettings",
    "get_settings",
]
