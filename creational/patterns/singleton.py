"""
Singleton: ensure a class has only one instance and give global access to it.
"""

from typing import Any, Dict


class Singleton:
    """The textbook shape: construction always returns the cached instance."""

    _instance = None

    def __new__(cls):
        # Looked up on cls itself so a subclass never reuses its parent's instance
        if cls.__dict__.get("_instance") is None:
            cls._instance = super().__new__(cls)
        return cls._instance


class SingletonMeta(type):
    """Metaclass keeping one instance per class that uses it."""

    _instances: Dict[type, Any] = {}

    def __call__(cls, *args, **kwargs):
        # Arguments after the first construction are ignored
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


class ConfigurationManager(metaclass=SingletonMeta):
    """Application-wide key/value settings."""

    def __init__(self, defaults: Dict[str, str] | None = None):
        self._values: Dict[str, str] = dict(defaults or {})

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)


def main():
    s1 = Singleton()
    s2 = Singleton()

    if s1 is s2:
        print("Singleton works, both variables contain the same instance.")
    else:
        print("Singleton failed, variables contain different instances.")

    ConfigurationManager().set("theme", "dark")
    theme = ConfigurationManager().get("theme")
    print(f"ConfigurationManager shares state: theme={theme}")


if __name__ == "__main__":
    main()
