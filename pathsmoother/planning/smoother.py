"""
Path smoothing module for curvature-controlled paths.

Turns an ordered list of waypoints into a sequence of path parts by replacing
every interior corner with a fillet (C1) or a transition-arc-transition blend
(C2) and stitching the corners together along the shared straight segments.
"""

import logging
from typing import List, Sequence, Tuple, Union

from .. import config
from ..models.geometry import Point
from ..models.parts import LinePart, PathPart
from ..models.smoothing import Smoothing
from .algorithms import SmoothingKind, smooth
from .curvature import CurvaturePlot
from .path import join_smoothings, total_length, triplets

logger = logging.getLogger(__name__)


class PathSmoother:
    """
    Smooths waypoint sequences into continuous paths.

    Attributes:
        mode: Corner smoothing method
        smoothing_factor: Smoothing intensity in [0, 1]
    """

    def __init__(self, mode: Union[SmoothingKind, str] = SmoothingKind.C2_CLOTHOID,
                 smoothing_factor: float = config.DEFAULT_SMOOTHING_FACTOR):
        """
        Initialize path smoother.

        Args:
            mode: SmoothingKind member or its value ('c1_arc', 'c2_cubic', 'c2_clothoid')
            smoothing_factor: 0 keeps sharp corners, 1 uses half of the shorter segment
        """
        try:
            self.mode = SmoothingKind(mode)
        except ValueError:
            raise ValueError(f"Unknown smoothing mode: {mode}") from None

        if not 0.0 <= smoothing_factor <= 1.0:
            raise ValueError(f"Smoothing factor must be within [0, 1], got {smoothing_factor}")
        self.smoothing_factor = smoothing_factor

    def smoothings(self, waypoints: Sequence[Tuple[float, float]]) -> List[Smoothing]:
        """Per-corner smoothing results, one for each interior waypoint."""
        points = [Point(float(x), float(y)) for x, y in waypoints]
        return [smooth(self.mode, p1, p2, p3, self.smoothing_factor)
                for p1, p2, p3 in triplets(points)]

    def smooth_path(self, waypoints: Sequence[Tuple[float, float]]) -> List[PathPart]:
        """
        Smooth a waypoint sequence into a continuous path.

        Args:
            waypoints: Ordered (x, y) waypoints

        Returns:
            Path parts from the first waypoint to the last. Two waypoints give a
            single line, fewer give an empty path.
        """
        if len(waypoints) < 2:
            return []
        if len(waypoints) == 2:
            return [LinePart(Point(*waypoints[0]), Point(*waypoints[1]))]

        path = join_smoothings(self.smoothings(waypoints))
        logger.debug("Smoothed %d waypoints (%s, factor %.3f) into %d parts, length %.6g",
                     len(waypoints), self.mode.value, self.smoothing_factor,
                     len(path), total_length(path))
        return path

    def curvature_plot(self, waypoints: Sequence[Tuple[float, float]],
                       points_count: int = 500) -> CurvaturePlot:
        """Curvature profile of the smoothed path."""
        return CurvaturePlot.create(self.smooth_path(waypoints), points_count)

    def __repr__(self) -> str:
        return f"PathSmoother(mode={self.mode.value}, smoothing_factor={self.smoothing_factor})"


def smooth_path_simple(waypoints: Sequence[Tuple[float, float]],
                       mode: Union[SmoothingKind, str] = SmoothingKind.C2_CLOTHOID,
                       smoothing_factor: float = config.DEFAULT_SMOOTHING_FACTOR) -> List[PathPart]:
    """
    Quick path smoothing function (convenience wrapper).

    Args:
        waypoints: Ordered (x, y) waypoints
        mode: Corner smoothing method
        smoothing_factor: Smoothing intensity in [0, 1]

    Returns:
        Smoothed path parts
    """
    smoother = PathSmoother(mode=mode, smoothing_factor=smoothing_factor)
    return smoother.smooth_path(waypoints)
