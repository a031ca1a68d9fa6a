"""
@Description: Plane geometry primitives. A Point is an immutable (x, y) pair and
every transform returns a new value.
"""

import math
from typing import NamedTuple

TWO_PI = 2.0 * math.pi


class Point(NamedTuple):
    """
    Immutable point on the plane.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """
    x: float
    y: float

    def move(self, dx: float, dy: float) -> 'Point':
        """Shift the point by separate X and Y offsets."""
        return Point(self.x + dx, self.y + dy)

    def shift(self, delta: 'Point') -> 'Point':
        """Shift the point by a delta vector."""
        return Point(self.x + delta[0], self.y + delta[1])

    def scale(self, factor_x: float, factor_y: float) -> 'Point':
        """Multiply the coordinates by per-axis factors."""
        return Point(self.x * factor_x, self.y * factor_y)

    def rotate(self, angle: float) -> 'Point':
        """
        Rotate the point counter-clockwise about the origin.

        Args:
            angle: Rotation angle in radians

        Returns:
            Rotated point
        """
        cos = math.cos(angle)
        sin = math.sin(angle)
        return Point(self.x * cos - self.y * sin,
                     self.x * sin + self.y * cos)

    def rotate_about(self, origin: 'Point', angle: float) -> 'Point':
        """
        Rotate the point counter-clockwise about an arbitrary pivot.

        Args:
            origin: Pivot point
            angle: Rotation angle in radians

        Returns:
            Rotated point
        """
        cos = math.cos(angle)
        sin = math.sin(angle)
        px = self.x - origin[0]
        py = self.y - origin[1]
        return Point(px * cos - py * sin + origin[0],
                     px * sin + py * cos + origin[1])

    def distance_to(self, other: 'Point') -> float:
        """Euclidean distance between two points."""
        return math.hypot(self.x - other[0], self.y - other[1])

    def difference(self, other: 'Point') -> 'Point':
        """Coordinate-wise difference self - other."""
        return Point(self.x - other[0], self.y - other[1])

    def invert_signs(self) -> 'Point':
        """Negate both coordinates."""
        return Point(-self.x, -self.y)

    def angle_between(self, other: 'Point') -> float:
        """
        Angle of the ray self -> other, measured counter-clockwise from the
        downward vertical ray.

        A segment that continues straight up after an upward segment gives pi,
        a right turn gives an angle below pi and a left turn an angle above pi.

        Returns:
            Angle in radians in [0, 2*pi)
        """
        dx = other[0] - self.x
        dy = other[1] - self.y
        return normalize_angle(math.atan2(dy, dx) + math.pi / 2)

    def heading_angle(self, other: 'Point') -> float:
        """Heading of the ray self -> other from the +Y axis, clockwise positive."""
        dx = other[0] - self.x
        dy = other[1] - self.y
        return math.atan2(dx, dy)


ORIGIN = Point(0.0, 0.0)


def normalize_angle(radians: float) -> float:
    """Reduce an angle into [0, 2*pi)."""
    normalized = radians % TWO_PI
    # -1e-20 % 2pi rounds up to exactly 2pi
    return 0.0 if normalized == TWO_PI else normalized


def normalization_angle(point1: Point, point2: Point) -> float:
    """
    Rotation angle that turns the ray point1 -> point2 to point straight up (+Y).
    """
    dx = point2[0] - point1[0]
    dy = point2[1] - point1[1]
    return math.pi / 2 - math.atan2(dy, dx)


def to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0
