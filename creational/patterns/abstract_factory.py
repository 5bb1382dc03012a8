"""
Abstract Factory: create families of related widgets without naming their
concrete classes, so one screen renders consistently on every platform.
"""

from abc import ABC, abstractmethod
from typing import List


class UnsupportedPlatformError(ValueError):
    """Raised when no widget family exists for a platform."""


class Button(ABC):
    @abstractmethod
    def render(self) -> str:
        pass


class Checkbox(ABC):
    def __init__(self):
        self.checked = False

    def toggle(self) -> None:
        self.checked = not self.checked

    @abstractmethod
    def render(self) -> str:
        pass


class MaterialButton(Button):
    def render(self) -> str:
        return "Rendering Material button"


class MaterialCheckbox(Checkbox):
    def render(self) -> str:
        return f"Rendering Material checkbox (checked: {self.checked})"


class CupertinoButton(Button):
    def render(self) -> str:
        return "Rendering Cupertino button"


class CupertinoCheckbox(Checkbox):
    def render(self) -> str:
        return f"Rendering Cupertino checkbox (checked: {self.checked})"


class WidgetFactory(ABC):
    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        pass


class MaterialWidgetFactory(WidgetFactory):
    def create_button(self) -> Button:
        return MaterialButton()

    def create_checkbox(self) -> Checkbox:
        return MaterialCheckbox()


class CupertinoWidgetFactory(WidgetFactory):
    def create_button(self) -> Button:
        return CupertinoButton()

    def create_checkbox(self) -> Checkbox:
        return CupertinoCheckbox()


def factory_for_platform(platform: str) -> WidgetFactory:
    factories = {"android": MaterialWidgetFactory, "ios": CupertinoWidgetFactory}
    try:
        return factories[platform.lower()]()
    except KeyError:
        raise UnsupportedPlatformError(f"unsupported platform '{platform}'") from None


class Screen:
    """Client code: knows only the abstract factory and products."""

    def __init__(self, factory: WidgetFactory):
        self.button = factory.create_button()
        self.checkbox = factory.create_checkbox()

    def render(self) -> List[str]:
        return [self.button.render(), self.checkbox.render()]


def main():
    for platform in ("android", "ios"):
        screen = Screen(factory_for_platform(platform))
        for line in screen.render():
            print(line)
        screen.checkbox.toggle()
        print(screen.checkbox.render())


if __name__ == "__main__":
    main()
