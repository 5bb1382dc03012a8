import pytest

from creational.catalog import PatternCatalog, default_entries
from creational.core.data_models import PatternEntry
from creational.core.exceptions import (
    CatalogError,
    DuplicatePatternError,
    PatternNotFoundError,
)


@pytest.fixture
def catalog():
    return PatternCatalog(default_entries())


def test_default_entries_in_teaching_order(catalog):
    assert catalog.slugs() == [
        "singleton",
        "factory-method",
        "abstract-factory",
        "prototype",
        "builder",
    ]
    assert len(catalog) == 5


def test_every_entry_has_references_and_module(catalog):
    for entry in catalog.entries():
        assert entry.category == "creational"
        assert entry.references
        module = catalog.load_module(entry)
        assert callable(module.main)


@pytest.mark.parametrize(
    "name",
    ["factory-method", "Factory Method", "factory_method", "FACTORY-METHOD", " factory  method ", "factory"],
)
def test_get_normalizes_names(catalog, name):
    assert catalog.get(name).slug == "factory-method"


def test_contains(catalog):
    assert "Abstract Factory" in catalog
    assert "visitor" not in catalog
    assert 42 not in catalog


def test_unknown_name_raises(catalog):
    with pytest.raises(PatternNotFoundError) as exc_info:
        catalog.get("visitor")

    assert exc_info.value.name == "visitor"
    assert str(exc_info.value) == "No pattern named 'visitor' in the catalog"
    assert isinstance(exc_info.value, KeyError)
    assert isinstance(exc_info.value, CatalogError)


def test_duplicate_slug_raises(catalog):
    duplicate = catalog.get("builder").model_copy(update={"name": "Another Builder"})

    with pytest.raises(DuplicatePatternError, match="builder"):
        catalog.register(duplicate)


def test_alias_collision_raises(catalog):
    entry = PatternEntry(
        slug="object-pool",
        name="Object Pool",
        summary="Reuses expensive objects.",
        intent="Keeps initialized objects ready for use.",
        module="creational.patterns.singleton",
        aliases=["singleton"],
    )

    with pytest.raises(DuplicatePatternError, match="singleton"):
        catalog.register(entry)
    assert "object-pool" not in catalog


def test_entries_returns_copy(catalog):
    catalog.entries().clear()

    assert len(catalog.entries()) == 5
