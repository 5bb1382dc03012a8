"""
Creational pattern examples.

Every module here is self-contained and exposes a ``main()`` that prints the
lines documented in the catalog. No example imports another.
"""

__all__ = [
    "abstract_factory",
    "builder",
    "factory_method",
    "prototype",
    "singleton",
]
