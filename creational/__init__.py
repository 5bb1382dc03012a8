"""
Creational design patterns catalog.

Short, runnable examples of Singleton, Factory Method, Abstract Factory,
Prototype and Builder, plus the tooling to browse, run and render them.
"""

__version__ = "0.1.0"
