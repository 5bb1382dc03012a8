"""
Prose and references for each pattern in the catalog.
"""

from typing import List

from creational.core.data_models import PatternEntry, Reference


def _refs(guru_slug: str, wiki_title: str) -> List[Reference]:
    return [
        Reference(
            title="Refactoring.Guru",
            url=f"https://refactoring.guru/design-patterns/{guru_slug}",
        ),
        Reference(
            title="Wikipedia",
            url=f"https://en.wikipedia.org/wiki/{wiki_title}",
        ),
    ]


def default_entries() -> List[PatternEntry]:
    """Returns the five classic creational patterns in teaching order."""
    return [
        PatternEntry(
            slug="singleton",
            name="Singleton",
            summary="Ensures a class has only one instance and provides a global point of access to it.",
            intent=(
                "Some objects must exist exactly once: a configuration store, a "
                "connection pool, a logger. The class itself controls construction "
                "and hands back the same instance to every caller, so state written "
                "through one reference is visible through all of them."
            ),
            participants=[
                "Singleton: caches its sole instance and returns it on construction",
                "SingletonMeta: metaclass that applies the same rule to any class",
                "Client: constructs the class as usual and receives the shared instance",
            ],
            references=_refs("singleton", "Singleton_pattern"),
            module="creational.patterns.singleton",
        ),
        PatternEntry(
            slug="factory-method",
            name="Factory Method",
            summary="Defines a single creation point that decides which concrete product to instantiate.",
            intent=(
                "Callers ask for a product by kind and receive an object typed by the "
                "abstract product. The factory method maps every supported kind to a "
                "concrete class and rejects kinds it has no product for, so adding a "
                "product never touches the callers."
            ),
            participants=[
                "Product (Shape): the interface callers depend on",
                "ConcreteProduct (Circle, Square): the classes being instantiated",
                "Creator (ShapeCreator): declares factory_method() and uses its result",
                "ConcreteCreator (CircleCreator, SquareCreator): overrides factory_method()",
            ],
            references=_refs("factory-method", "Factory_method_pattern"),
            module="creational.patterns.factory_method",
            aliases=["factory"],
        ),
        PatternEntry(
            slug="abstract-factory",
            name="Abstract Factory",
            summary="Creates families of related objects without specifying their concrete classes.",
            intent=(
                "A user interface has to look native on each platform. An abstract "
                "factory exposes one creation method per widget; every concrete "
                "factory produces a whole family, so a screen built from one factory "
                "can never mix Material and Cupertino widgets."
            ),
            participants=[
                "AbstractFactory (WidgetFactory): one creation method per product",
                "ConcreteFactory (MaterialWidgetFactory, CupertinoWidgetFactory)",
                "AbstractProduct (Button, Checkbox)",
                "Client (Screen): uses only the abstract interfaces",
            ],
            references=_refs("abstract-factory", "Abstract_factory_pattern"),
            module="creational.patterns.abstract_factory",
        ),
        PatternEntry(
            slug="prototype",
            name="Prototype",
            summary="Creates new objects by cloning an existing instance.",
            intent=(
                "When an object is costly or awkward to configure from scratch, keep "
                "a configured prototype and copy it. Each clone is independent: "
                "changing a field on the copy leaves the prototype untouched. A "
                "registry of named prototypes turns cloning into a lookup."
            ),
            participants=[
                "Prototype (Shape): declares clone()",
                "ConcretePrototype (Circle, Rectangle): copies itself",
                "PrototypeRegistry: hands out clones of named prototypes",
            ],
            references=_refs("prototype", "Prototype_pattern"),
            module="creational.patterns.prototype",
        ),
        PatternEntry(
            slug="builder",
            name="Builder",
            summary="Separates the construction of a composite object from its representation.",
            intent=(
                "A burger is assembled in the same order every time: buns, cheese, "
                "patties, sauces, seasoning, vegetables. The director owns that "
                "order; each builder decides what a step adds, including nothing. "
                "Swapping the builder yields a different burger from the same recipe."
            ),
            participants=[
                "Director (BurgerMaker): runs the fixed sequence of steps",
                "Builder (BurgerBuilderBase): declares the steps",
                "ConcreteBuilder (HamburgerBuilder, CheeseburgerBuilder, BigMacBuilder)",
                "Product (Burger) built from Ingredient parts",
            ],
            references=_refs("builder", "Builder_pattern"),
            module="creational.patterns.builder",
        ),
    ]
