import pytest

from creational.patterns.factory_method import (
    Circle,
    CircleCreator,
    Shape,
    ShapeType,
    Square,
    SquareCreator,
    UnsupportedShapeError,
    main,
)


@pytest.mark.parametrize(
    "shape_type, expected_class",
    [
        (ShapeType.CIRCLE, Circle),
        (ShapeType.SQUARE, Square),
        ("circle", Circle),
        ("square", Square),
    ],
)
def test_create_returns_concrete_product(shape_type, expected_class):
    shape = Shape.create(shape_type)

    assert isinstance(shape, expected_class)
    assert isinstance(shape, Shape)


def test_unhandled_enum_case_raises():
    """TRIANGLE exists in the enum but has no product."""
    with pytest.raises(UnsupportedShapeError, match="unsupported shape type 'triangle'"):
        Shape.create(ShapeType.TRIANGLE)


def test_unknown_string_raises():
    with pytest.raises(UnsupportedShapeError, match="'hexagon'"):
        Shape.create("hexagon")


def test_unsupported_shape_error_is_value_error():
    assert issubclass(UnsupportedShapeError, ValueError)


def test_creators_render_their_product():
    assert CircleCreator().render() == "Drawing a circle."
    assert SquareCreator().render() == "Drawing a square."


def test_main_output(capsys):
    main()

    assert capsys.readouterr().out.splitlines() == [
        "Drawing a circle.",
        "Drawing a square.",
        "Cannot create shape: unsupported shape type 'triangle'",
    ]


@pytest.mark.parametrize("name", ["CIRCLE", "Circle", " circle "])
def test_create_accepts_member_names_in_any_case(name):
    assert isinstance(Shape.create(name), Circle)
