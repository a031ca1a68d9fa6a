"""
Models module for plane geometry, path parts and smoothing results.
"""

from .geometry import Point, normalize_angle
from .special import fresnel, tri_point_curvature
from .parts import PathPart, LinePart, ArcPart
from .cubic import CubicPart
from .clothoid import ClothoidPart
from .smoothing import Smoothing, NoSmoothing, C1Smoothing, C2Smoothing

__all__ = [
    'Point',
    'normalize_angle',
    'fresnel',
    'tri_point_curvature',
    'PathPart',
    'LinePart',
    'ArcPart',
    'CubicPart',
    'ClothoidPart',
    'Smoothing',
    'NoSmoothing',
    'C1Smoothing',
    'C2Smoothing',
]
