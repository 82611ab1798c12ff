import dataclasses

import pytest

from playground.liskov import Polygon, Rectangle, Square, legacy, print_area


def test_legacy_printer_shows_the_broken_substitution():
    # Same calls, different semantics: 2 x 5 for the rectangle, width * 10 for the square
    assert legacy.Printer().print_areas() == [10.0, 20.0]


def test_legacy_square_width_mutates_length():
    square = legacy.Square()
    square.length = 5
    square.width = 2
    assert square.length == 2
    assert isinstance(square, legacy.Rectangle)


def test_refactored_areas():
    assert print_area(Rectangle(width=2, length=5)) == 10.0
    assert print_area(Square(side=2)) == 4.0


def test_refactored_polygons_are_flat_and_immutable():
    assert not issubclass(Square, Rectangle)
    assert isinstance(Square(2), Polygon) and isinstance(Rectangle(2, 5), Polygon)
    with pytest.raises(dataclasses.FrozenInstanceError):
        Rectangle(2, 5).width = 3


def test_print_area_is_idempotent():
    square = Square(3)
    assert print_area(square) == print_area(square) == 9.0


def test_legacy_printer_reports_float_areas():
    areas = legacy.Printer().print_areas()
    assert areas == [10.0, 20.0]
    assert all(isinstance(area, float) for area in areas)
