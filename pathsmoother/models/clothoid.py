"""
Clothoid (Euler spiral) transition curve.

A clothoid's curvature grows linearly with arc length, which makes it the
natural easement between a straight line (zero curvature) and a circular arc
(constant curvature). The curve is the normalized Fresnel spiral
(S(s), C(s)), whose curvature at arc length s is pi * s, so a clothoid of
length L ends with curvature pi * L.
"""

import math
from dataclasses import dataclass, replace
from functools import cached_property
from typing import List

from .. import config
from .geometry import Point, normalize_angle
from .special import fresnel, tri_point_curvature


@dataclass(frozen=True)
class ClothoidPart:
    """
    Euler spiral segment starting with zero curvature.

    Attributes:
        from_point: Start point
        length: Arc length of the spiral (>= 0)
        angle: Rotation of the local frame in radians (local travel starts along +Y)
        direction: True bends towards local +X (clockwise), False towards -X
        is_reversed: Traverse from the high-curvature end back to zero curvature
    """
    from_point: Point
    length: float
    angle: float = 0.0
    direction: bool = True
    is_reversed: bool = False

    def __post_init__(self):
        if self.length < 0:
            raise ValueError(f"Clothoid length must be non-negative, got {self.length}")

    @classmethod
    def from_curvature(cls, origin: Point, curvature: float) -> 'ClothoidPart':
        """
        Clothoid from `origin` that ends with the given curvature.

        Positive curvature bends towards +X, negative towards -X.
        """
        length = curvature / config.CURVATURE_SCALE
        if length < 0:
            return cls(origin, -length, angle=0.0, direction=False, is_reversed=False)
        return cls(origin, length, angle=0.0, direction=True, is_reversed=False)

    @cached_property
    def end_delta(self) -> Point:
        """Local offset of the far end of the unit spiral."""
        return fresnel(self.length)

    @property
    def to_point(self) -> Point:
        return self.point_at(self.length)

    def point_at(self, position: float) -> Point:
        """Closed-form point at arc length `position` from the start."""
        p = self.length - position if self.is_reversed else position
        x, y = fresnel(p)
        end = self.end_delta

        if self.direction:
            if self.is_reversed:
                x -= end.x
        else:
            x = -x
            if self.is_reversed:
                x += end.x

        if self.is_reversed:
            y = end.y - y

        return Point(x, y).rotate(self.angle).shift(self.from_point)

    def tabulate(self, delta: float) -> List[Point]:
        """Points every `delta` of arc length from the start up to the end."""
        if delta <= 0:
            raise ValueError(f"Tabulation step must be positive, got {delta}")

        count = int(self.length / delta)
        return [self.point_at(index * delta) for index in range(count + 1)]

    def _end_samples(self):
        step = config.CLOTHOID_SAMPLE_STEP
        return (self.point_at(self.length - step),
                self.point_at(self.length),
                self.point_at(self.length + step))

    def curvature_at_end(self) -> float:
        """Signed curvature at the end point (counter-clockwise positive)."""
        return tri_point_curvature(*self._end_samples())

    def get_center(self) -> Point:
        """
        Center of the osculating circle at the end point.

        Curvature comes from three closely spaced samples around the end; the
        center sits 1/curvature along the left normal of the end tangent.
        """
        a, b, c = self._end_samples()
        curvature = tri_point_curvature(a, b, c)
        if curvature == 0.0 or math.isnan(curvature):
            raise ValueError("Osculating circle is undefined where the clothoid is straight")

        chord = c.difference(a)
        norm = math.hypot(chord.x, chord.y)
        left_normal = Point(-chord.y / norm, chord.x / norm)

        return b.move(left_normal.x / curvature, left_normal.y / curvature)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def shift(self, delta: Point) -> 'ClothoidPart':
        return replace(self, from_point=self.from_point.shift(delta))

    def rotate(self, angle: float) -> 'ClothoidPart':
        return replace(self,
                       from_point=self.from_point.rotate(angle),
                       angle=self.angle + angle)

    def flip(self) -> 'ClothoidPart':
        """Mirror the bend to the other side."""
        return replace(self, direction=not self.direction)

    def reverse(self) -> 'ClothoidPart':
        return replace(self, is_reversed=not self.is_reversed)

    def with_angle(self, angle: float) -> 'ClothoidPart':
        return replace(self, angle=normalize_angle(angle))

    def move_end_to(self, point: Point) -> 'ClothoidPart':
        difference = Point(*point).difference(self.to_point)
        return replace(self, from_point=self.from_point.shift(difference))

    def expand(self, length: float = config.CLOTHOID_GUIDE_LENGTH) -> 'ClothoidPart':
        """Longer copy of the spiral for drawing guides; a reversed one keeps its end."""
        expanded = replace(self, length=length)
        return expanded.move_end_to(self.to_point) if self.is_reversed else expanded
