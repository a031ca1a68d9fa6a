"""
Path Smoother

A Python library for curvature-controlled smoothing of waypoint paths with
circular fillets, cubic spirals and clothoids.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Import main classes for easy access
from .models.geometry import Point
from .models.parts import PathPart, LinePart, ArcPart
from .models.cubic import CubicPart
from .models.clothoid import ClothoidPart
from .models.smoothing import Smoothing, NoSmoothing, C1Smoothing, C2Smoothing
from .planning.algorithms import SmoothingKind, smooth
from .planning.path import join_smoothings, total_length, find_position_in_path
from .planning.curvature import CurvaturePlot
from .planning.smoother import PathSmoother, smooth_path_simple

__all__ = [
    'Point',
    'PathPart',
    'LinePart',
    'ArcPart',
    'CubicPart',
    'ClothoidPart',
    'Smoothing',
    'NoSmoothing',
    'C1Smoothing',
    'C2Smoothing',
    'SmoothingKind',
    'smooth',
    'join_smoothings',
    'total_length',
    'find_position_in_path',
    'CurvaturePlot',
    'PathSmoother',
    'smooth_path_simple',
]
