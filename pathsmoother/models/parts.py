"""
Path parts: the geometric segments a smoothed path is assembled from.

Every part exposes the same contract (PathPart): start and end points,
arc length, rigid transforms (shift, rotate) and point lookup by distance
travelled from the start. Parts are immutable; transforms return new parts.
"""

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .geometry import Point


@runtime_checkable
class PathPart(Protocol):
    """
    Capability shared by LinePart, ArcPart, CubicPart and ClothoidPart.

    Invariants:
        length >= 0
        point_at(0) == from_point and point_at(length) == to_point
        point_at on a shifted/rotated part equals the shifted/rotated point_at
    """

    from_point: Point

    @property
    def to_point(self) -> Point: ...

    @property
    def length(self) -> float: ...

    def shift(self, delta: Point) -> 'PathPart': ...
    def rotate(self, angle: float) -> 'PathPart': ...
    def point_at(self, position: float) -> Point: ...


@dataclass(frozen=True)
class LinePart:
    """
    Straight segment.

    Attributes:
        from_point: Start point
        to_point: End point
    """
    from_point: Point
    to_point: Point

    @property
    def length(self) -> float:
        return self.from_point.distance_to(self.to_point)

    def shift(self, delta: Point) -> 'LinePart':
        return LinePart(self.from_point.shift(delta), self.to_point.shift(delta))

    def rotate(self, angle: float) -> 'LinePart':
        return LinePart(self.from_point.rotate(angle), self.to_point.rotate(angle))

    def point_at(self, position: float) -> Point:
        """Linear interpolation between the end points by arc length."""
        length = self.length
        if length == 0.0:
            return self.from_point

        ratio = position / length
        dx = (self.to_point.x - self.from_point.x) * ratio
        dy = (self.to_point.y - self.from_point.y) * ratio
        return Point(self.from_point.x + dx, self.from_point.y + dy)


@dataclass(frozen=True)
class ArcPart:
    """
    Circular arc of at most half a turn.

    Attributes:
        center: Circle center
        from_point: Start point on the circle
        to_point: End point on the circle
        direction: True for counter-clockwise travel, False for clockwise
    """
    center: Point
    from_point: Point
    to_point: Point
    direction: bool

    @property
    def radius(self) -> float:
        return self.center.distance_to(self.from_point)

    @property
    def angle(self) -> float:
        """Swept angle from the chord length, 2*asin(chord / 2r)."""
        radius = self.radius
        if radius == 0.0:
            return 0.0
        chord = self.from_point.distance_to(self.to_point)
        # rounding can push the ratio a hair past 1 for half circles
        return 2.0 * math.asin(min(1.0, chord / (2.0 * radius)))

    @property
    def signed_angle(self) -> float:
        return self.angle if self.direction else -self.angle

    @property
    def length(self) -> float:
        return self.angle * self.radius

    def shift(self, delta: Point) -> 'ArcPart':
        return ArcPart(self.center.shift(delta),
                       self.from_point.shift(delta),
                       self.to_point.shift(delta),
                       self.direction)

    def rotate(self, angle: float) -> 'ArcPart':
        return ArcPart(self.center.rotate(angle),
                       self.from_point.rotate(angle),
                       self.to_point.rotate(angle),
                       self.direction)

    def point_at(self, position: float) -> Point:
        """Rotate the start point about the center by the travelled fraction of the sweep."""
        length = self.length
        if length == 0.0:
            return self.from_point
        return self.from_point.rotate_about(self.center,
                                            self.signed_angle * position / length)
