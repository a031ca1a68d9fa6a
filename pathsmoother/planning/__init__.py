"""
Planning module for corner smoothing and path assembly.
"""

from .algorithms import (SmoothingKind, smooth, smooth_c1_arc,
                         smooth_c2_cubic, smooth_c2_clothoid)
from .path import (triplets, join_smoothings, total_length,
                   find_position_in_path, tabulate_path)
from .curvature import CurvaturePlot
from .smoother import PathSmoother, smooth_path_simple

__all__ = [
    'SmoothingKind',
    'smooth',
    'smooth_c1_arc',
    'smooth_c2_cubic',
    'smooth_c2_clothoid',
    'triplets',
    'join_smoothings',
    'total_length',
    'find_position_in_path',
    'tabulate_path',
    'CurvaturePlot',
    'PathSmoother',
    'smooth_path_simple',
]
