"""
Unit tests for line and arc parts and the shared part contract.

Run with: pytest test/test_parts.py
"""

import pytest
import math
from pathsmoother.models.geometry import Point, ORIGIN
from pathsmoother.models.parts import PathPart, LinePart, ArcPart
from pathsmoother.models.cubic import CubicPart
from pathsmoother.models.clothoid import ClothoidPart


def close(p, q, tol=1e-9):
    return abs(p[0] - q[0]) < tol and abs(p[1] - q[1]) < tol


class TestLinePart:
    """Tests for straight segments."""

    def test_length(self, diagonal_line):
        """Test length is the end point distance."""
        assert abs(diagonal_line.length - 5.0) < 1e-12

    def test_point_at_ends(self, diagonal_line):
        """Test point_at(0) and point_at(length) hit the end points."""
        assert close(diagonal_line.point_at(0.0), diagonal_line.from_point)
        assert close(diagonal_line.point_at(diagonal_line.length), diagonal_line.to_point)

    def test_point_at_middle(self, diagonal_line):
        """Test interpolation by arc length."""
        assert close(diagonal_line.point_at(2.5), (2.5, 4.0))

    def test_zero_length(self):
        """Test a degenerate line returns its start point."""
        line = LinePart(Point(2, 2), Point(2, 2))
        assert line.length == 0.0
        assert line.point_at(1.0) == Point(2, 2)

    def test_is_path_part(self, diagonal_line):
        """Test the line satisfies the part contract."""
        assert isinstance(diagonal_line, PathPart)


class TestArcPart:
    """Tests for circular arcs."""

    def test_quarter_circle_measures(self, quarter_arc):
        """Test radius, swept angle and length."""
        assert abs(quarter_arc.radius - 1.0) < 1e-12
        assert abs(quarter_arc.angle - math.pi / 2) < 1e-12
        assert abs(quarter_arc.length - math.pi / 2) < 1e-12

    def test_counter_clockwise_midpoint(self, quarter_arc):
        """Test a counter-clockwise arc passes through the first quadrant."""
        middle = quarter_arc.point_at(quarter_arc.length / 2)
        assert close(middle, (math.sqrt(0.5), math.sqrt(0.5)))

    def test_clockwise_traversal(self):
        """Test a clockwise arc reaches its end point."""
        arc = ArcPart(ORIGIN, Point(0, 1), Point(1, 0), direction=False)
        assert close(arc.point_at(arc.length / 2), (math.sqrt(0.5), math.sqrt(0.5)))
        assert close(arc.point_at(arc.length), arc.to_point)

    def test_signed_angle(self, quarter_arc):
        """Test signed angle follows the direction."""
        clockwise = ArcPart(quarter_arc.center, quarter_arc.from_point,
                            quarter_arc.to_point, direction=False)
        assert quarter_arc.signed_angle > 0
        assert clockwise.signed_angle < 0

    def test_half_circle(self):
        """Test a half circle does not overflow asin."""
        arc = ArcPart(ORIGIN, Point(1, 0), Point(-1, 0), direction=True)
        assert abs(arc.angle - math.pi) < 1e-9
        assert close(arc.point_at(arc.length / 2), (0, 1))

    def test_zero_length(self):
        """Test an arc with coincident end points."""
        arc = ArcPart(ORIGIN, Point(1, 0), Point(1, 0), direction=True)
        assert arc.length == 0.0
        assert arc.point_at(0.5) == Point(1, 0)

    def test_is_path_part(self, quarter_arc):
        """Test the arc satisfies the part contract."""
        assert isinstance(quarter_arc, PathPart)


class TestRigidMotions:
    """Tests that shifting and rotating commute with point lookup."""

    @pytest.mark.parametrize("part", [
        LinePart(Point(1, 2), Point(-3, 5)),
        ArcPart(Point(1, 1), Point(2, 1), Point(1, 2), direction=True),
        ClothoidPart(Point(0.5, -0.5), 0.8, angle=0.3, direction=False),
        ClothoidPart(Point(0.5, -0.5), 0.8, angle=1.1, is_reversed=True),
    ])
    def test_exact_parts(self, part):
        """Test closed-form parts transform exactly."""
        delta = Point(3.0, -2.0)
        angle = 0.7
        for fraction in (0.0, 0.3, 1.0):
            position = part.length * fraction
            shifted = part.shift(delta).point_at(position)
            rotated = part.rotate(angle).point_at(position)

            assert close(shifted, part.point_at(position).shift(delta))
            assert close(rotated, part.point_at(position).rotate(angle))

    @pytest.mark.parametrize("reversed_", [False, True])
    def test_cubic(self, reversed_):
        """Test tabulated cubics transform within their sample spacing."""
        cubic = CubicPart(Point(1, 1), 0.5, angle=0.4, is_reversed=reversed_, k=1.5)
        tolerance = 1e-3 * cubic.width
        delta = Point(-2.0, 4.0)
        angle = -1.3
        for fraction in (0.0, 0.5, 1.0):
            position = cubic.length * fraction
            shifted = cubic.shift(delta).point_at(position)
            rotated = cubic.rotate(angle).point_at(position)

            assert close(shifted, cubic.point_at(position).shift(delta), tolerance)
            assert close(rotated, cubic.point_at(position).rotate(angle), tolerance)

    def test_transforms_keep_length(self):
        """Test rigid motions preserve length."""
        arc = ArcPart(Point(1, 1), Point(2, 1), Point(1, 2), direction=False)
        moved = arc.shift(Point(5, 5)).rotate(2.0)
        assert abs(moved.length - arc.length) < 1e-12


# Test fixtures
@pytest.fixture
def diagonal_line():
    """Line from (1, 2) to (4, 6)."""
    return LinePart(Point(1, 2), Point(4, 6))


@pytest.fixture
def quarter_arc():
    """Counter-clockwise unit quarter circle from (1, 0) to (0, 1)."""
    return ArcPart(ORIGIN, Point(1, 0), Point(0, 1), direction=True)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
