"""
Point arithmetic tests.

Run with: pytest tests/test_geometry.py -v
"""

import pytest

from bombhopper.domain.geometry import Circle, Point, Polygon


def test_default_point_is_origin():
    assert Point() == Point(0.0, 0.0)


def test_add_and_subtract_are_component_wise():
    a = Point(1.5, -2.0)
    b = Point(3.0, 4.0)

    assert a + b == Point(4.5, 2.0)
    assert b - a == Point(1.5, 6.0)
    # operands untouched
    assert a == Point(1.5, -2.0)
    assert b == Point(3.0, 4.0)


def test_scale_multiplies_both_components():
    p = Point(2.0, -3.0)

    assert p * 2.5 == Point(5.0, -7.5)
    assert p.scale(0.0) == Point(0.0, 0.0)
    assert p == Point(2.0, -3.0)


def test_shapes_compare_structurally():
    assert Polygon(vertices=(Point(0, 0), Point(1, 1))) == Polygon(vertices=(Point(0, 0), Point(1, 1)))
    assert Circle(x=1.0, y=2.0, radius=3.0) != Circle(x=1.0, y=2.0, radius=4.0)


def test_scalar_on_the_left():
    assert 2 * Point(1.0, -1.0) == Point(2.0, -2.0)


@pytest.mark.parametrize("op", [
    lambda: Point(1, 2) + 1,
    lambda: Point(1, 2) - (1, 2),
    lambda: Point(1, 2) * Point(3, 4),
    lambda: Point(1, 2) * "3",
])
def test_foreign_operands_are_rejected(op):
    with pytest.raises(TypeError):
        op()
