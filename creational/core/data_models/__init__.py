"""
Standardized data models for the application.

This package contains Pydantic models describing catalog entries and the
results of running the example snippets.
"""

from .catalog import ExampleResult, PatternEntry, Reference

__all__ = ["ExampleResult", "PatternEntry", "Reference"]
