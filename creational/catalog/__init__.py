"""
Catalog of the creational pattern examples.

The catalog ties each example module to its prose and references, runs the
examples and renders the whole collection as a markdown document.
"""

from .entries import default_entries
from .registry import PatternCatalog
from .renderer import MarkdownRenderer
from .runner import ExampleRunner

__all__ = ["ExampleRunner", "MarkdownRenderer", "PatternCatalog", "default_entries"]
