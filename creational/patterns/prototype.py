"""
Prototype: create new objects by copying an existing instance instead of
building them from scratch.
"""

import copy
from abc import ABC, abstractmethod
from typing import Dict


class Shape(ABC):
    def __init__(self, color: str):
        self.color = color

    def clone(self) -> "Shape":
        # Deep copy so a clone never shares mutable state with its prototype
        return copy.deepcopy(self)

    @abstractmethod
    def describe(self) -> str:
        pass


class Circle(Shape):
    def __init__(self, color: str, radius: int):
        super().__init__(color)
        self.radius = radius

    def describe(self) -> str:
        return f"Circle(color={self.color}, radius={self.radius})"


class Rectangle(Shape):
    def __init__(self, color: str, width: int, height: int):
        super().__init__(color)
        self.width = width
        self.height = height

    def describe(self) -> str:
        return f"Rectangle(color={self.color}, width={self.width}, height={self.height})"


class PrototypeRegistry:
    """Named prototypes that are cloned on request."""

    def __init__(self):
        self._prototypes: Dict[str, Shape] = {}

    def register(self, name: str, prototype: Shape) -> None:
        self._prototypes[name] = prototype

    def create(self, name: str, **overrides) -> Shape:
        if name not in self._prototypes:
            raise KeyError(f"No prototype registered under '{name}'")
        shape = self._prototypes[name].clone()
        for field_name, value in overrides.items():
            if not hasattr(shape, field_name):
                raise AttributeError(
                    f"{type(shape).__name__} has no field '{field_name}'"
                )
            setattr(shape, field_name, value)
        return shape


def main():
    original = Circle("red", 10)
    clone = original.clone()
    print(f"Original: {original.describe()}")
    print(f"Clone: {clone.describe()}")

    clone.radius = 20
    print(f"Original after changing the clone: {original.describe()}")
    print(f"Clone after change: {clone.describe()}")

    registry = PrototypeRegistry()
    registry.register("banner", Rectangle("blue", 300, 50))
    print(f"From registry: {registry.create('banner', color='green').describe()}")


if __name__ == "__main__":
    main()
