"""
Cubic spiral transition curve.

The curve is the cubic parabola y = K * x^3 for x in [0, width], rotated by
`angle` and placed at `from_point`. Its curvature grows almost linearly with
x, so it can ease a straight line into a circular arc. There is no closed
form for its arc length, so the curve is tabulated once and looked up by
cumulative chord length.
"""

import logging
import math
from dataclasses import dataclass, replace
from functools import cached_property
from typing import List, Tuple

import numpy as np

from .. import config
from .geometry import ORIGIN, Point, normalize_angle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CubicPart:
    """
    Cubic parabola segment.

    Attributes:
        from_point: Start point of the curve
        width: Extent of the curve along its local X axis (>= 0)
        angle: Rotation of the local frame in radians
        is_reversed: Traverse from the high-curvature end to the flat end
        k: Shape coefficient K of y = K*x^3 (non-zero)
    """
    from_point: Point
    width: float
    angle: float = 0.0
    is_reversed: bool = False
    k: float = 2.0

    def __post_init__(self):
        if self.width < 0:
            raise ValueError(f"Cubic width must be non-negative, got {self.width}")
        if self.k == 0:
            raise ValueError("Cubic shape coefficient K must be non-zero")

    @classmethod
    def from_radius(cls, radius: float, k: float) -> 'CubicPart':
        """
        Build a cubic from the origin whose end radius of curvature is `radius`.

        The width comes from the small-slope relation 1/R = 6*K*x. That relation
        is only first-order accurate, so while the true end radius is more than
        CUBIC_RADIUS_TOLERANCE above the target, K is grown by CUBIC_K_GROWTH
        (which flattens the curve) and the width recomputed.

        Args:
            radius: Target radius of curvature at the end point (> 0)
            k: Initial shape coefficient (non-zero, sign selects the bend side)

        Returns:
            CubicPart starting at the origin with angle 0
        """
        if radius <= 0:
            raise ValueError(f"Radius must be positive, got {radius}")
        if k == 0:
            raise ValueError("Cubic shape coefficient K must be non-zero")

        def candidate(k):
            return cls(ORIGIN, 1.0 / (radius * abs(k) * 6.0), 0.0, is_reversed=False, k=k)

        limit = radius * (1.0 + config.CUBIC_RADIUS_TOLERANCE)
        cubic = candidate(k)
        iteration = 0
        while cubic.end_radius() > limit:
            if iteration >= config.MAX_RADIUS_ITERATIONS:
                logger.warning("Cubic radius correction did not converge for radius %.6g "
                               "after %d steps (end radius %.6g)",
                               radius, iteration, cubic.end_radius())
                return cubic
            k *= config.CUBIC_K_GROWTH
            cubic = candidate(k)
            iteration += 1

        logger.debug("Cubic for radius %.6g: K=%.6g after %d corrections",
                     radius, k, iteration)
        return cubic

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def _compute_y(self, x):
        return self.k * x * x * x

    def _local_points(self, s: np.ndarray) -> np.ndarray:
        """Local-frame points for X offsets s measured from the start of travel."""
        if self.is_reversed:
            # point reflection of the forward curve about its far end
            ys = self._compute_y(self.width) - self._compute_y(self.width - s)
        else:
            ys = self._compute_y(s)
        return np.column_stack([s, ys])

    def _place(self, local: np.ndarray) -> np.ndarray:
        """Rotate local points by `angle` and move them to `from_point`."""
        cos = math.cos(self.angle)
        sin = math.sin(self.angle)
        x = local[:, 0] * cos - local[:, 1] * sin + self.from_point.x
        y = local[:, 0] * sin + local[:, 1] * cos + self.from_point.y
        return np.column_stack([x, y])

    @property
    def to_point(self) -> Point:
        end = Point(self.width, self._compute_y(self.width))
        return end.rotate(self.angle).shift(self.from_point)

    @cached_property
    def _table(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Arc-length lookup table: (positions, points).

        Built on first use and frozen; recomputing it concurrently gives the
        same arrays, and readers only ever see the finished tuple.
        """
        xs = np.linspace(0.0, self.width, config.CUBIC_TABLE_SAMPLES)
        points = self._place(self._local_points(xs))
        steps = np.sqrt(((points[1:] - points[:-1]) ** 2).sum(axis=1))
        positions = np.concatenate([[0.0], np.add.accumulate(steps)])
        positions.setflags(write=False)
        points.setflags(write=False)
        return positions, points

    @property
    def length(self) -> float:
        positions, _ = self._table
        return float(positions[-1])

    def point_at(self, position: float) -> Point:
        """
        Table lookup of the first sample at or beyond `position`.

        Positions past the end clamp to the last sample. The error is bounded by
        the sample spacing, width / CUBIC_TABLE_SAMPLES along X.
        """
        positions, points = self._table
        index = int(np.searchsorted(positions, position, side='left'))
        index = min(index, len(positions) - 1)
        return Point(float(points[index, 0]), float(points[index, 1]))

    def tabulate(self, delta: float) -> List[Point]:
        """
        Points along the curve spaced `delta` apart along its local X axis.

        Args:
            delta: Spacing along X (> 0)

        Returns:
            Points from start to end, both included
        """
        if delta <= 0:
            raise ValueError(f"Tabulation step must be positive, got {delta}")

        count = max(1, int(self.width / delta))
        xs = np.linspace(0.0, self.width, count + 1)
        points = self._place(self._local_points(xs))
        return [Point(float(x), float(y)) for x, y in points]

    def get_center(self) -> Point:
        """
        Center of the osculating circle at the high-curvature end.

        For a forward cubic that is the end point, for a reversed one the start
        point. Closed form for y = K*x^3 at x = width:
            cx = x * (1 - 9*K^2*x^4) / 2
            cy = (15*K^2*x^4 + 1) / (6*K*x)
        """
        x = self.width
        if x == 0:
            raise ValueError("Osculating circle is undefined for a zero-width cubic")

        k2x4 = self.k * self.k * x ** 4
        center = Point(x * (1.0 - 9.0 * k2x4) / 2.0,
                       (15.0 * k2x4 + 1.0) / (6.0 * self.k * x))
        if self.is_reversed:
            center = Point(x, self._compute_y(x)).difference(center)
        return center.rotate(self.angle).shift(self.from_point)

    def end_radius(self) -> float:
        """True radius of curvature at the high-curvature end."""
        if self.width == 0:
            return math.inf
        anchor = self.from_point if self.is_reversed else self.to_point
        return self.get_center().distance_to(anchor)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def shift(self, delta: Point) -> 'CubicPart':
        return replace(self, from_point=self.from_point.shift(delta))

    def rotate(self, angle: float) -> 'CubicPart':
        return replace(self,
                       from_point=self.from_point.rotate(angle),
                       angle=self.angle + angle)

    def flip(self) -> 'CubicPart':
        """Mirror the curve across its local line y = x."""
        return replace(self, angle=normalize_angle(self.angle + math.pi / 2), k=-self.k)

    def reverse(self) -> 'CubicPart':
        return replace(self, is_reversed=not self.is_reversed)

    def with_angle(self, angle: float) -> 'CubicPart':
        return replace(self, angle=normalize_angle(angle))

    def move_end_to(self, point: Point) -> 'CubicPart':
        difference = Point(*point).difference(self.to_point)
        return replace(self, from_point=self.from_point.shift(difference))

    def extend(self) -> 'CubicPart':
        """Longer copy of the curve for drawing guides; a reversed one keeps its end."""
        extended = replace(self, width=self.width * config.CUBIC_GUIDE_SCALE)
        return extended.move_end_to(self.to_point) if self.is_reversed else extended

    def rotate180(self) -> 'CubicPart':
        """Continuation of the curve through its flat end (point reflection there)."""
        normalized = self.shift(self.from_point.invert_signs())
        rotated = replace(normalized, angle=self.angle + math.pi)
        if self.is_reversed:
            return rotated.move_end_to(self.to_point)
        return rotated.shift(self.from_point)
