"""
Special functions used by the transition curves and the curvature analysis.

This module provides the normalized Fresnel integrals that parametrize the
Euler spiral and the three-point (Menger) curvature estimate.
"""

import math
from typing import Tuple

import numpy as np
from scipy.special import fresnel as _fresnel

from .geometry import Point


def fresnel(t: float) -> Point:
    """
    Evaluate the normalized Fresnel integrals at t.

    S(t) = integral_0^t sin(pi*u^2/2) du
    C(t) = integral_0^t cos(pi*u^2/2) du

    The curve (S(t), C(t)) starts at the origin heading along +Y, has arc
    length t and curvature pi*t, bending towards +X.

    Args:
        t: Fresnel argument (arc length along the unit spiral)

    Returns:
        Point(S(t), C(t))
    """
    s, c = _fresnel(t)
    return Point(float(s), float(c))


def tri_point_curvature(p0: Tuple[float, float],
                        p1: Tuple[float, float],
                        p2: Tuple[float, float]) -> float:
    """
    Signed curvature of the circle through three points (Menger curvature).

    k = 4 * signed_area / (|p0p1| * |p1p2| * |p2p0|)

    Counter-clockwise (left-turning) triples are positive. Collinear points
    give 0.0 and coincident points give NaN.

    Args:
        p0: First point
        p1: Second point
        p2: Third point

    Returns:
        Signed curvature in 1/units
    """
    dx1 = p1[0] - p0[0]
    dy1 = p1[1] - p0[1]
    dx2 = p2[0] - p0[0]
    dy2 = p2[1] - p0[1]

    # cross product is twice the signed triangle area
    cross = dx1 * dy2 - dy1 * dx2

    len0 = math.hypot(dx1, dy1)
    len1 = math.hypot(p2[0] - p1[0], p2[1] - p1[1])
    len2 = math.hypot(dx2, dy2)

    denominator = len0 * len1 * len2
    if denominator == 0.0:
        return math.nan
    return 2.0 * cross / denominator


def tri_point_curvatures(points: np.ndarray) -> np.ndarray:
    """
    Vectorised tri_point_curvature over every consecutive triple of a polyline.

    Args:
        points: Array of shape (n, 2)

    Returns:
        Array of n - 2 signed curvatures (NaN where a triple is degenerate)
    """
    points = np.asarray(points, dtype=float)
    p0 = points[:-2]
    p1 = points[1:-1]
    p2 = points[2:]

    d1 = p1 - p0
    d2 = p2 - p0
    cross = d1[:, 0] * d2[:, 1] - d1[:, 1] * d2[:, 0]

    len0 = np.hypot(d1[:, 0], d1[:, 1])
    len1 = np.hypot(*(p2 - p1).T)
    len2 = np.hypot(d2[:, 0], d2[:, 1])

    with np.errstate(divide='ignore', invalid='ignore'):
        return 2.0 * cross / (len0 * len1 * len2)
