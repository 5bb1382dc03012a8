from creational.patterns.singleton import (
    ConfigurationManager,
    Singleton,
    SingletonMeta,
    main,
)


def test_singleton_returns_same_instance():
    """Constructing the class twice yields the identical object."""
    assert Singleton() is Singleton()


def test_metaclass_keeps_one_instance_per_class():
    class Registry(metaclass=SingletonMeta):
        pass

    assert Registry() is Registry()
    assert Registry() is not ConfigurationManager()


def test_configuration_manager_ignores_later_arguments():
    """Arguments after the first construction have no effect."""
    first = ConfigurationManager({"locale": "en"})
    second = ConfigurationManager({"locale": "fr"})

    assert first is second
    assert second.get("locale") == "en"


def test_configuration_manager_shares_state():
    ConfigurationManager().set("theme", "light")

    assert ConfigurationManager().get("theme") == "light"
    assert ConfigurationManager().get("missing", "fallback") == "fallback"


def test_main_output(capsys):
    main()

    assert capsys.readouterr().out.splitlines() == [
        "Singleton works, both variables contain the same instance.",
        "ConfigurationManager shares state: theme=dark",
    ]


def test_subclass_gets_its_own_instance():
    class SpecialSingleton(Singleton):
        pass

    base = Singleton()
    special = SpecialSingleton()

    assert special is not base
    assert type(special) is SpecialSingleton
    assert SpecialSingleton() is special
    assert Singleton() is base
