"""
Exception hierarchy for the catalog tooling.

Errors raised by the example snippets themselves live beside the snippet
that raises them.
"""


class CatalogError(Exception):
    """Base class for catalog errors."""


class PatternNotFoundError(CatalogError, KeyError):
    """Raised when a name does not resolve to a catalog entry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"No pattern named '{self.name}' in the catalog"


class DuplicatePatternError(CatalogError):
    """Raised when registering a slug or alias that is already taken."""


class ExampleExecutionError(CatalogError):
    """Raised when an example module cannot be executed."""
