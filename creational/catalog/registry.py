"""
Ordered registry of catalog entries.
"""

import importlib
import re
from types import ModuleType
from typing import Dict, Iterable, List

import structlog

from creational.core.data_models import PatternEntry
from creational.core.exceptions import (
    DuplicatePatternError,
    ExampleExecutionError,
    PatternNotFoundError,
)

logger = structlog.get_logger(__name__)


def normalize_name(name: str) -> str:
    """'Factory Method', 'factory_method' and 'FACTORY-METHOD' all normalize alike."""
    return re.sub(r"[\s_\-]+", "-", name.strip().lower())


class PatternCatalog:
    """
    Holds the documented patterns in registration order and resolves lookups
    by slug, display name or alias.
    """

    def __init__(self, entries: Iterable[PatternEntry] = ()):
        self._entries: Dict[str, PatternEntry] = {}
        self._lookup: Dict[str, str] = {}
        for entry in entries:
            self.register(entry)

    def register(self, entry: PatternEntry) -> None:
        keys = {normalize_name(k) for k in [entry.slug, entry.name, *entry.aliases]}
        taken = sorted(k for k in keys if k in self._lookup)
        if taken:
            raise DuplicatePatternError(
                f"Cannot register '{entry.slug}': {', '.join(taken)} already registered"
            )

        self._entries[entry.slug] = entry
        for key in keys:
            self._lookup[key] = entry.slug
        logger.debug(f"Registered pattern '{entry.slug}'", module=entry.module)

    def get(self, name: str) -> PatternEntry:
        slug = self._lookup.get(normalize_name(name))
        if slug is None:
            raise PatternNotFoundError(name)
        return self._entries[slug]

    def entries(self) -> List[PatternEntry]:
        return list(self._entries.values())

    def slugs(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._lookup

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def load_module(entry: PatternEntry) -> ModuleType:
        """Imports the example module behind an entry."""
        try:
            return importlib.import_module(entry.module)
        except ImportError as e:
            raise ExampleExecutionError(
                f"Example module '{entry.module}' could not be imported: {e}"
            ) from e
