"""
Unit tests for path assembly and arc-length queries.

Run with: pytest test/test_path.py
"""

import pytest
from pathsmoother.models.geometry import Point
from pathsmoother.models.parts import ArcPart, LinePart
from pathsmoother.models.smoothing import NoSmoothing
from pathsmoother.planning.algorithms import SmoothingKind, smooth
from pathsmoother.planning.path import (
    triplets,
    join_smoothings,
    total_length,
    find_position_in_path,
    tabulate_path,
)


def close(p, q, tol=1e-9):
    return abs(p[0] - q[0]) < tol and abs(p[1] - q[1]) < tol


class TestTriplets:
    """Tests for the sliding window over waypoints."""

    def test_four_items(self):
        """Test overlapping windows."""
        assert list(triplets([1, 2, 3, 4])) == [(1, 2, 3), (2, 3, 4)]

    def test_too_short(self):
        """Test fewer than three items give no windows."""
        assert list(triplets([1, 2])) == []
        assert list(triplets([])) == []

    def test_generator_input(self):
        """Test any iterable is accepted."""
        assert len(list(triplets(iter(range(6))))) == 4


class TestJoinSmoothings:
    """Tests for merging per-corner smoothings."""

    def test_empty(self):
        """Test no smoothings give an empty path."""
        assert join_smoothings([]) == []

    @pytest.mark.parametrize("mode", list(SmoothingKind))
    def test_single_smoothing(self, mode):
        """Test one corner is emitted unchanged."""
        smoothing = smooth(mode, (0, 0), (0, 1), (1, 1), 1.0)
        assert join_smoothings([smoothing]) == list(smoothing.parts())

    def test_shared_segment_emitted_once(self, square_corners):
        """Test the segment between two corners becomes one line."""
        first, second = square_corners
        path = join_smoothings([first, second])

        assert len(path) == 5
        assert path[0] == first.line1
        assert path[1] == first.arc
        assert path[3] == second.arc
        assert path[4] == second.line2

        shared = path[2]
        assert isinstance(shared, LinePart)
        assert shared.from_point == first.line2.from_point
        assert shared.to_point == second.line1.to_point
        assert close(shared.from_point, (0.5, 2))
        assert close(shared.to_point, (1.5, 2))

    def test_sharp_corners(self):
        """Test unsmoothed corners chain the waypoints."""
        waypoints = [Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0)]
        smoothings = [NoSmoothing(LinePart(a, b), LinePart(b, c))
                      for a, b, c in triplets(waypoints)]
        path = join_smoothings(smoothings)
        assert path == [LinePart(a, b) for a, b in zip(waypoints, waypoints[1:])]

    def test_continuity(self, square_corners):
        """Test the joined path is continuous."""
        path = join_smoothings(square_corners)
        for previous, current in zip(path, path[1:]):
            assert close(previous.to_point, current.from_point)


class TestArcLengthQueries:
    """Tests for length, position lookup and tabulation."""

    def test_total_length(self, l_path):
        """Test lengths add up."""
        assert abs(total_length(l_path) - 2.0) < 1e-12
        assert total_length([]) == 0.0

    def test_find_position(self, l_path):
        """Test lookup across part boundaries."""
        assert close(find_position_in_path(l_path, 0.5), (0.5, 0))
        assert close(find_position_in_path(l_path, 1.5), (1, 0.5))
        assert close(find_position_in_path(l_path, 2.0), (1, 1))

    def test_find_position_beyond_end(self, l_path):
        """Test positions past the end give None."""
        assert find_position_in_path(l_path, 3.0) is None

    def test_find_position_negative(self, l_path):
        """Test positions before the start are rejected."""
        with pytest.raises(ValueError):
            find_position_in_path(l_path, -0.1)

    def test_find_position_at_start(self, l_path):
        """Test position zero is the first waypoint."""
        assert close(find_position_in_path(l_path, 0.0), (0, 0))

    def test_find_position_on_arc(self):
        """Test lookup inside an arc."""
        arc = ArcPart(Point(0, 0), Point(1, 0), Point(0, 1), direction=True)
        path = [LinePart(Point(1, -1), Point(1, 0)), arc]
        point = find_position_in_path(path, 1.0 + arc.length / 2)
        assert close(point, (2 ** -0.5, 2 ** -0.5))

    def test_tabulate_path(self, l_path):
        """Test sampling keeps a constant spacing across parts."""
        samples = list(tabulate_path(l_path, 0.25))
        assert len(samples) == 8
        assert samples[0][1] is l_path[0]
        assert samples[-1][1] is l_path[1]
        assert close(samples[4][0], (1, 0))
        assert close(samples[5][0], (1, 0.25))

    def test_tabulate_uneven_spacing(self, l_path):
        """Test the first sample on a part carries over the remainder."""
        samples = list(tabulate_path(l_path, 0.3))
        on_second = [point for point, part in samples if part is l_path[1]]
        assert close(on_second[0], (1, 0.2))

    def test_tabulate_invalid_delta(self, l_path):
        """Test tabulation needs a positive step."""
        with pytest.raises(ValueError):
            list(tabulate_path(l_path, 0.0))


# Test fixtures
@pytest.fixture
def l_path():
    """Two unit lines forming an L: (0,0) -> (1,0) -> (1,1)."""
    return [LinePart(Point(0, 0), Point(1, 0)), LinePart(Point(1, 0), Point(1, 1))]


@pytest.fixture
def square_corners():
    """C1 fillets of the corners at (0, 2) and (2, 2) with factor 0.5."""
    waypoints = [(0, 0), (0, 2), (2, 2), (2, 0)]
    return [smooth(SmoothingKind.C1_ARC, a, b, c, 0.5) for a, b, c in triplets(waypoints)]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
