"""
Tests for the primitive models.

Tests cover:
- Rectangle edges derived from the center
- Strict overlap and containment
- Validation of dimensions, colors and resolutions
"""

import pytest
from pydantic import ValidationError

from models import Color, Point2D, Rectangle, Resolution


def rect(x, y, w, h):
    return Rectangle(position=Point2D(x=x, y=y), dimensions=Point2D(x=w, y=h))


class TestRectangleEdges:
    """Edges are half the size away from the center."""

    def test_edges(self):
        """Test left/right/top/bottom for a 60x50 box at (300, 85)."""
        r = rect(300, 85, 60, 50)
        assert r.left == 270
        assert r.right == 330
        assert r.top == 60
        assert r.bottom == 110

    def test_as_pygame_rect(self):
        """Test conversion to a top-left based pygame tuple."""
        assert rect(250, 250, 40, 40).as_pygame_rect() == (230, 230, 40, 40)

    def test_rectangle_is_immutable(self):
        """Rectangles are frozen."""
        r = rect(0, 0, 10, 10)
        with pytest.raises(ValidationError):
            r.position = Point2D(x=1, y=1)


class TestRectangleCollision:
    """Strict axis-aligned overlap."""

    PAIRS = [
        (rect(0, 0, 10, 10), rect(5, 5, 10, 10)),
        (rect(0, 0, 10, 10), rect(10, 0, 10, 10)),   # touching edges
        (rect(0, 0, 10, 10), rect(100, 100, 10, 10)),
        (rect(0, 0, 100, 2), rect(0, 0, 2, 100)),    # cross shape
        (rect(0, 0, 10, 10), rect(9.99, 0, 10, 10)),
    ]

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_collision_is_symmetric(self, a, b):
        """a.collides_with(b) always equals b.collides_with(a)."""
        assert a.collides_with(b) == b.collides_with(a)

    @pytest.mark.parametrize("r", [rect(0, 0, 1, 1), rect(300, 85, 60, 50), rect(-5, 7, 0.5, 200)])
    def test_rectangle_collides_with_itself(self, r):
        """Any rectangle with positive size overlaps itself."""
        assert r.collides_with(r)

    def test_overlap_detected(self):
        assert rect(0, 0, 10, 10).collides_with(rect(5, 5, 10, 10))

    def test_touching_edges_do_not_collide(self):
        """Sharing an edge exactly is not a collision."""
        assert not rect(0, 0, 10, 10).collides_with(rect(10, 0, 10, 10))
        assert not rect(0, 0, 10, 10).collides_with(rect(0, 10, 10, 10))

    def test_overlap_on_one_axis_only(self):
        """Overlapping x ranges alone are not enough."""
        assert not rect(0, 0, 10, 10).collides_with(rect(0, 50, 10, 10))

    def test_contained_rectangle_collides(self):
        assert rect(0, 0, 100, 100).collides_with(rect(0, 0, 2, 2))


class TestRectangleContainsPoint:
    """Strict point containment."""

    def test_contains_own_center(self):
        r = rect(250, 250, 40, 40)
        assert r.contains_point(r.position)

    def test_point_inside(self):
        assert rect(0, 0, 10, 10).contains_point(Point2D(x=4.9, y=-4.9))

    def test_point_on_boundary_not_contained(self):
        """Edges and corners are outside."""
        r = rect(0, 0, 10, 10)
        assert not r.contains_point(Point2D(x=5, y=0))
        assert not r.contains_point(Point2D(x=0, y=-5))
        assert not r.contains_point(Point2D(x=5, y=5))

    def test_point_outside(self):
        assert not rect(0, 0, 10, 10).contains_point(Point2D(x=50, y=0))


class TestValidation:
    """Invalid primitives are rejected at construction."""

    @pytest.mark.parametrize("w,h", [(0, 10), (10, 0), (-1, 10)])
    def test_rectangle_rejects_non_positive_dimensions(self, w, h):
        with pytest.raises(ValidationError):
            rect(0, 0, w, h)

    def test_color_range(self):
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)

    def test_color_tuples(self):
        c = Color(r=139, g=0, b=0)
        assert c.as_tuple == (139, 0, 0, 255)
        assert c.as_rgb_tuple == (139, 0, 0)

    def test_resolution_parse(self):
        res = Resolution.parse("640x480")
        assert res.size == (640, 480)

    @pytest.mark.parametrize("text", ["640", "axb", "0x480", "640x480x2"])
    def test_resolution_parse_rejects_garbage(self, text):
        with pytest.raises(ValueError):
            Resolution.parse(text)
