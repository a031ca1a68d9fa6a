"""
Visualization module for smoothed paths and curvature profiles.
"""

from .screen import ScreenTransform
from .visualizer import (
    part_polyline,
    path_polyline,
    part_guides,
    plot_smoothed_path,
    plot_curvature,
    plot_mode_comparison
)

__all__ = [
    'ScreenTransform',
    'part_polyline',
    'path_polyline',
    'part_guides',
    'plot_smoothed_path',
    'plot_curvature',
    'plot_mode_comparison',
]
