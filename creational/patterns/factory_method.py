"""
Factory Method: let a single creation point decide which concrete class to
instantiate, so callers depend only on the abstract product.
"""

from abc import ABC, abstractmethod
from enum import Enum


class UnsupportedShapeError(ValueError):
    """Raised when no concrete product exists for the requested shape type."""


class ShapeType(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"


class Shape(ABC):
    @abstractmethod
    def draw(self) -> str:
        pass

    @staticmethod
    def create(shape_type: "ShapeType | str") -> "Shape":
        """The factory method."""
        try:
            shape_type = ShapeType(shape_type)
        except ValueError:
            try:
                shape_type = ShapeType[str(shape_type).strip().upper()]
            except KeyError:
                raise UnsupportedShapeError(
                    f"unsupported shape type '{shape_type}'"
                ) from None

        if shape_type is ShapeType.CIRCLE:
            return Circle()
        elif shape_type is ShapeType.SQUARE:
            return Square()
        else:
            raise UnsupportedShapeError(
                f"unsupported shape type '{shape_type.value}'"
            )


class Circle(Shape):
    def draw(self) -> str:
        return "Drawing a circle."


class Square(Shape):
    def draw(self) -> str:
        return "Drawing a square."


class ShapeCreator(ABC):
    """GoF creator: subclasses override factory_method() to pick the product."""

    @abstractmethod
    def factory_method(self) -> Shape:
        pass

    def render(self) -> str:
        return self.factory_method().draw()


class CircleCreator(ShapeCreator):
    def factory_method(self) -> Shape:
        return Circle()


class SquareCreator(ShapeCreator):
    def factory_method(self) -> Shape:
        return Square()


def main():
    for shape_type in (ShapeType.CIRCLE, ShapeType.SQUARE):
        print(Shape.create(shape_type).draw())

    try:
        Shape.create(ShapeType.TRIANGLE)
    except UnsupportedShapeError as e:
        print(f"Cannot create shape: {e}")


if __name__ == "__main__":
    main()
