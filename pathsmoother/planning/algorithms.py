"""
Corner smoothing algorithms.

@Description: Each algorithm takes three consecutive waypoints and a smoothing
factor in [0, 1] and replaces the corner at the middle waypoint with a curve.

All three work in a normalized frame: the first waypoint is moved to the
origin and the first segment is rotated to point straight up (+Y). The corner
then sits at (0, L1) and the second segment leaves it at `angle` measured
counter-clockwise from the downward ray, so angle < pi is a right turn and
angle > pi a left turn. The result is built there and transformed back.

    C1 arc:       line -> arc -> line              (curvature jumps)
    C2 cubic:     line -> cubic -> arc -> cubic -> line
    C2 clothoid:  line -> clothoid -> arc -> clothoid -> line
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Tuple, Union

from .. import config
from ..models.clothoid import ClothoidPart
from ..models.cubic import CubicPart
from ..models.geometry import ORIGIN, Point, normalization_angle
from ..models.parts import ArcPart, LinePart
from ..models.smoothing import (C1Smoothing, C2Smoothing, NoSmoothing,
                                Smoothing, Transition)

logger = logging.getLogger(__name__)

PointLike = Union[Point, Tuple[float, float]]


class SmoothingKind(str, Enum):
    """Available corner smoothing methods."""
    C1_ARC = 'c1_arc'
    C2_CUBIC = 'c2_cubic'
    C2_CLOTHOID = 'c2_clothoid'


@dataclass(frozen=True)
class _Corner:
    """A corner expressed in the normalized frame."""
    origin: Point       # first waypoint in world coordinates
    psi: float          # rotation applied to reach the normalized frame
    point2: Point       # corner waypoint, normalized: (0, L1)
    point3: Point       # exit waypoint, normalized
    angle: float        # angle between the segments
    tangent_length: float  # distance from the corner to the fillet tangency points

    @property
    def half_angle(self) -> float:
        return self.angle / 2.0

    def to_world(self, smoothing: Smoothing) -> Smoothing:
        return smoothing.rotate(-self.psi).shift(self.origin)


def _validate_factor(smoothing_factor: float):
    if not 0.0 <= smoothing_factor <= 1.0:
        raise ValueError(f"Smoothing factor must be within [0, 1], got {smoothing_factor}")


def _normalize_corner(point1: Point, point2: Point, point3: Point,
                      smoothing_factor: float) -> _Corner:
    psi = normalization_angle(point1, point2)

    shift = point1.invert_signs()
    point2_normalized = point2.shift(shift).rotate(psi)
    point3_normalized = point3.shift(shift).rotate(psi)

    angle = point2_normalized.angle_between(point3_normalized)

    # the fillet may use at most half of the shorter segment
    tangent_length = smoothing_factor * min(point1.distance_to(point2),
                                            point2.distance_to(point3)) / 2.0

    return _Corner(point1, psi, point2_normalized, point3_normalized,
                   angle, tangent_length)


def _no_smoothing(point1: Point, point2: Point, point3: Point) -> NoSmoothing:
    return NoSmoothing(LinePart(point1, point2), LinePart(point2, point3))


def _as_points(*points: PointLike):
    return tuple(Point(float(p[0]), float(p[1])) for p in points)


def smooth_c1_arc(point1: PointLike, point2: PointLike, point3: PointLike,
                  smoothing_factor: float) -> Smoothing:
    """
    Round the corner at point2 with a circular fillet.

    Args:
        point1: Waypoint before the corner
        point2: Corner waypoint
        point3: Waypoint after the corner
        smoothing_factor: Share of the shorter half-segment used by the fillet, in [0, 1]

    Returns:
        C1Smoothing, or NoSmoothing for a negligible corner or zero factor
    """
    _validate_factor(smoothing_factor)
    point1, point2, point3 = _as_points(point1, point2, point3)

    corner = _normalize_corner(point1, point2, point3, smoothing_factor)

    if abs(corner.angle - math.pi) < config.NEGLIGIBLE_ANGLE_RAD:
        logger.debug("Corner at %s is negligible (angle %.6f), not smoothed",
                     point2, corner.angle)
        return _no_smoothing(point1, point2, point3)

    h = corner.tangent_length
    tan_half = math.tan(corner.half_angle)
    if h == 0.0 or tan_half == 0.0:
        logger.debug("Corner at %s has a zero fillet radius, not smoothed", point2)
        return _no_smoothing(point1, point2, point3)

    y2 = corner.point2.y
    center = Point(tan_half * h, y2 - h)

    # tangency points at distance h from the corner on both segments
    contact1 = Point(0.0, y2 - h)
    contact2 = Point(h * math.sin(corner.angle), y2 - h * math.cos(corner.angle))

    smoothing = C1Smoothing(
        line1=LinePart(ORIGIN, contact1),
        arc=ArcPart(center, contact1, contact2, direction=tan_half < 0),
        line2=LinePart(contact2, corner.point3))

    return corner.to_world(smoothing)


def _c2_radius(corner: _Corner) -> Tuple[float, bool]:
    """Signed X of the fillet center: its magnitude is the arc radius, a negative value a left turn."""
    center_x = math.tan(corner.half_angle) * corner.tangent_length
    return center_x, center_x < 0


def _assemble_c2(corner: _Corner, transition: Transition, direction: bool,
                 mirror: Callable[[Transition, Point], Transition]) -> Smoothing:
    """
    Place a transition built at the origin and mirror it onto the exit segment.

    The transition's osculating circle is slid along the first segment until
    its center lies on the corner bisector; that circle becomes the arc. The
    second transition ends on the exit segment at the same distance from the
    corner as the first one starts.
    """
    tan_half = math.tan(corner.half_angle)
    center_at_end = transition.get_center()

    arc_center = Point(center_at_end.x,
                       corner.point2.y - center_at_end.x / tan_half)
    delta_y = arc_center.y - center_at_end.y

    transition1 = transition.shift(Point(0.0, delta_y))

    exit_point = transition1.from_point.rotate_about(corner.point2, corner.angle)
    transition2 = mirror(transition, exit_point)

    smoothing = C2Smoothing(
        line1=LinePart(ORIGIN, transition1.from_point),
        transition1=transition1,
        arc=ArcPart(arc_center, transition1.to_point, transition2.from_point, direction),
        transition2=transition2,
        line2=LinePart(transition2.to_point, corner.point3))

    return corner.to_world(smoothing)


def _is_straight(corner: _Corner) -> bool:
    return abs(corner.angle - math.pi) < config.STRAIGHT_ANGLE_RAD


def smooth_c2_cubic(point1: PointLike, point2: PointLike, point3: PointLike,
                    smoothing_factor: float) -> Smoothing:
    """
    Blend the corner at point2 with cubic spirals on both sides of an arc.

    The cubic's shape coefficient K is interpolated from the smoothing
    factor: 20 at factor 0 (short, sharp transitions) down to 0.2 at
    factor 1 (long, gentle ones).

    Args:
        point1: Waypoint before the corner
        point2: Corner waypoint
        point3: Waypoint after the corner
        smoothing_factor: Smoothing intensity in [0, 1]

    Returns:
        C2Smoothing, or NoSmoothing when the arc radius resolves to zero
    """
    _validate_factor(smoothing_factor)
    point1, point2, point3 = _as_points(point1, point2, point3)

    corner = _normalize_corner(point1, point2, point3, smoothing_factor)
    center_x, direction = _c2_radius(corner)
    radius = abs(center_x)
    if radius == 0.0 or _is_straight(corner):
        logger.debug("Corner at %s resolves to no smoothing (radius %.6g)", point2, radius)
        return _no_smoothing(point1, point2, point3)

    k = (1.0 - smoothing_factor) * (config.CUBIC_K_MAX - config.CUBIC_K_MIN) + config.CUBIC_K_MIN
    if direction:
        k = -k

    # built along +X, flipped to leave the origin along +Y
    cubic = CubicPart.from_radius(radius, k).flip()

    def mirror(cubic_from_origin: CubicPart, exit_point: Point) -> CubicPart:
        return (cubic_from_origin
                .flip()
                .reverse()
                .with_angle(corner.angle - math.pi / 2)
                .move_end_to(exit_point))

    return _assemble_c2(corner, cubic, direction, mirror)


def smooth_c2_clothoid(point1: PointLike, point2: PointLike, point3: PointLike,
                       smoothing_factor: float) -> Smoothing:
    """
    Blend the corner at point2 with clothoids on both sides of an arc.

    The clothoid reaches the fillet curvature exactly in closed form, so no
    iterative correction is needed.

    Args:
        point1: Waypoint before the corner
        point2: Corner waypoint
        point3: Waypoint after the corner
        smoothing_factor: Smoothing intensity in [0, 1]

    Returns:
        C2Smoothing, or NoSmoothing when the arc radius resolves to zero
    """
    _validate_factor(smoothing_factor)
    point1, point2, point3 = _as_points(point1, point2, point3)

    corner = _normalize_corner(point1, point2, point3, smoothing_factor)
    center_x, direction = _c2_radius(corner)
    if center_x == 0.0 or _is_straight(corner):
        logger.debug("Corner at %s resolves to no smoothing (radius %.6g)",
                     point2, abs(center_x))
        return _no_smoothing(point1, point2, point3)

    clothoid = ClothoidPart.from_curvature(ORIGIN, curvature=1.0 / center_x)

    def mirror(clothoid_from_origin: ClothoidPart, exit_point: Point) -> ClothoidPart:
        return (clothoid_from_origin
                .reverse()
                .with_angle(corner.angle - math.pi)
                .move_end_to(exit_point))

    return _assemble_c2(corner, clothoid, direction, mirror)


_ALGORITHMS = {
    SmoothingKind.C1_ARC: smooth_c1_arc,
    SmoothingKind.C2_CUBIC: smooth_c2_cubic,
    SmoothingKind.C2_CLOTHOID: smooth_c2_clothoid,
}


def smooth(mode: Union[SmoothingKind, str], point1: PointLike, point2: PointLike,
           point3: PointLike, smoothing_factor: float) -> Smoothing:
    """
    Smooth one corner with the selected method.

    Args:
        mode: SmoothingKind member or its value ('c1_arc', 'c2_cubic', 'c2_clothoid')
        point1: Waypoint before the corner
        point2: Corner waypoint
        point3: Waypoint after the corner
        smoothing_factor: Smoothing intensity in [0, 1]

    Returns:
        Smoothing result for the corner
    """
    try:
        kind = SmoothingKind(mode)
    except ValueError:
        raise ValueError(f"Unknown smoothing mode: {mode}") from None
    return _ALGORITHMS[kind](point1, point2, point3, smoothing_factor)
