import punq

from creational.catalog.entries import default_entries
from creational.catalog.registry import PatternCatalog
from creational.catalog.renderer import MarkdownRenderer
from creational.catalog.runner import ExampleRunner
from creational.core.config import AppSettings


def create_container(settings: AppSettings) -> punq.Container:
    """
    Creates and configures the dependency injection container.
    """
    container = punq.Container()

    # Register settings
    container.register(AppSettings, instance=settings)

    # Register catalog components
    container.register(
        PatternCatalog,
        factory=lambda: PatternCatalog(default_entries()),
        scope=punq.Scope.singleton,
    )
    container.register(ExampleRunner, scope=punq.Scope.singleton)
    container.register(
        MarkdownRenderer,
        factory=lambda: MarkdownRenderer(
            container.resolve(PatternCatalog),
            container.resolve(ExampleRunner),
            settings.docs,
        ),
    )

    return container
