"""
Visualization module for smoothed paths.

This module provides functions to draw smoothed paths with their
construction guides and to plot curvature along the path.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from ..models.clothoid import ClothoidPart
from ..models.cubic import CubicPart
from ..models.geometry import Point
from ..models.parts import ArcPart, LinePart, PathPart
from ..planning.curvature import CurvaturePlot
from .screen import ScreenTransform

logger = logging.getLogger(__name__)

# drawn circles larger than this (in world units) are nearly straight arcs
MAX_GUIDE_RADIUS = 5.0


def part_polyline(part: PathPart, segments: int = 100) -> List[Point]:
    """Polyline approximation of a single part."""
    if isinstance(part, LinePart):
        return [part.from_point, part.to_point]
    positions = np.linspace(0.0, part.length, segments + 1)
    return [part.point_at(float(position)) for position in positions]


def path_polyline(parts: Sequence[PathPart], segments: int = 100) -> List[Point]:
    """Polyline approximation of a whole path."""
    points: List[Point] = []
    for part in parts:
        polyline = part_polyline(part, segments)
        points.extend(polyline[1:] if points else polyline)
    return points


def part_guides(part: PathPart) -> List[List[Point]]:
    """
    Construction guides of a transition part: the curve continued past its ends.
    """
    if isinstance(part, CubicPart):
        if part.width == 0:
            return []
        delta = part.width / 100
        return [part.extend().tabulate(delta),
                part.rotate180().extend().tabulate(delta)]
    if isinstance(part, ClothoidPart):
        if part.length == 0:
            return []
        return [part.expand().tabulate(part.length / 100)]
    return []


def _xy(points, screen: Optional[ScreenTransform]):
    if screen is not None:
        points = [screen.to_screen(p) for p in points]
    return [p[0] for p in points], [p[1] for p in points]


def _finish(fig, save_path: Optional[str], show: bool):
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')
        logger.info("Figure saved to %s", save_path)

    if show:
        plt.show()
    else:
        plt.close(fig)


def plot_smoothed_path(parts: Sequence[PathPart],
                       waypoints: Sequence[Tuple[float, float]],
                       show_guides: bool = True,
                       screen: Optional[ScreenTransform] = None,
                       title: str = "Smoothed Path",
                       save_path: Optional[str] = None,
                       show: bool = True):
    """
    Draw a smoothed path over its waypoints.

    Args:
        parts: Smoothed path parts
        waypoints: Original waypoints
        show_guides: Draw arc circles, transition joints and guide arms
        screen: Optional world-to-pixel mapping; axes are in pixels when given
        title: Plot title
        save_path: Optional path to save figure
        show: Whether to display the plot
    """
    fig, ax = plt.subplots(figsize=(12, 8))

    # Waypoints and the sharp polyline through them
    wp_x, wp_y = _xy(waypoints, screen)
    ax.plot(wp_x, wp_y, 'r--', alpha=0.3, linewidth=1, label='Waypoint Polyline')
    ax.plot(wp_x, wp_y, 'rs', markersize=10, label='Waypoints', zorder=5)

    if show_guides:
        _plot_guides(ax, parts, screen)

    # Smoothed path
    if parts:
        path_x, path_y = _xy(path_polyline(parts), screen)
        ax.plot(path_x, path_y, 'b-', linewidth=2, label='Smoothed Path', zorder=4)

    unit = 'px' if screen is not None else 'units'
    ax.set_xlabel(f'X Position ({unit})', fontsize=12)
    ax.set_ylabel(f'Y Position ({unit})', fontsize=12)
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.legend(loc='best')
    ax.grid(True, alpha=0.3)
    ax.set_aspect('equal')
    if screen is not None:
        ax.invert_yaxis()

    _finish(fig, save_path, show)


def _plot_guides(ax, parts: Sequence[PathPart], screen: Optional[ScreenTransform]):
    """Plot arc circles, guide arms and joints of transition curves."""
    scale = abs(screen.zoom) if screen is not None else 1.0
    labelled = set()

    def label(name):
        if name in labelled:
            return ''
        labelled.add(name)
        return name

    for part in parts:
        if isinstance(part, ArcPart) and part.radius < MAX_GUIDE_RADIUS:
            cx, cy = _xy([part.center], screen)
            circle = plt.Circle((cx[0], cy[0]), part.radius * scale,
                                fill=False, color='gray', alpha=0.4,
                                linestyle=':', label=label('Arc Circle'))
            ax.add_patch(circle)

        for guide in part_guides(part):
            gx, gy = _xy(guide, screen)
            ax.plot(gx, gy, color='orange', alpha=0.5, linewidth=1,
                    label=label('Guide'))

        if isinstance(part, (CubicPart, ClothoidPart)):
            jx, jy = _xy([part.from_point, part.to_point], screen)
            ax.plot(jx, jy, 'ko', markersize=4, label=label('Joint'), zorder=6)


def plot_curvature(plot: CurvaturePlot,
                   title: str = "Curvature Along Path",
                   save_path: Optional[str] = None,
                   show: bool = True):
    """
    Plot curvature against distance along the path.

    Args:
        plot: Curvature profile
        title: Plot title
        save_path: Optional save path
        show: Whether to display
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    xs = [p.x for p in plot.points]
    ys = [p.y for p in plot.points]
    ax.plot(xs, ys, 'b-', linewidth=2)
    ax.fill_between(xs, ys, plot.zero_y, alpha=0.3)
    ax.axhline(plot.zero_y, color='black', linewidth=0.8)

    ax.set_xlim(plot.min_x, plot.max_x)
    margin = 0.05 * (plot.max_y - plot.min_y) or 1.0
    ax.set_ylim(plot.min_y - margin, plot.max_y + margin)

    ax.set_xlabel('Distance Along Path', fontsize=12)
    ax.set_ylabel('Curvature (1/units)', fontsize=12)
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.grid(True, alpha=0.3)

    _finish(fig, save_path, show)


def plot_mode_comparison(paths_dict: Dict[str, Sequence[PathPart]],
                         waypoints: Sequence[Tuple[float, float]],
                         title: str = "Smoothing Mode Comparison",
                         save_path: Optional[str] = None,
                         show: bool = True):
    """
    Compare smoothed paths and their curvature profiles side by side.

    Args:
        paths_dict: Dictionary mapping mode names to path parts
        waypoints: Original waypoints
        title: Plot title
        save_path: Optional save path
        show: Whether to display
    """
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 7))

    wp_x = [wp[0] for wp in waypoints]
    wp_y = [wp[1] for wp in waypoints]
    ax1.plot(wp_x, wp_y, 'rs', markersize=10, label='Waypoints', zorder=5)
    ax1.plot(wp_x, wp_y, 'r--', alpha=0.3, linewidth=1)

    colors = ['blue', 'green', 'orange', 'purple', 'cyan']
    styles = ['-', '--', '-.', ':']

    for i, (name, parts) in enumerate(paths_dict.items()):
        if not parts:
            continue
        color = colors[i % len(colors)]
        style = styles[i % len(styles)]

        path_x, path_y = _xy(path_polyline(parts), None)
        ax1.plot(path_x, path_y, color=color, linestyle=style,
                 linewidth=2, label=name, zorder=4)

        profile = CurvaturePlot.create(parts, points_count=300)
        ax2.plot([p.x for p in profile.points], [p.y for p in profile.points],
                 color=color, linestyle=style, linewidth=2, label=name)

    ax1.set_xlabel('X Position', fontsize=12)
    ax1.set_ylabel('Y Position', fontsize=12)
    ax1.set_title(title, fontsize=14, fontweight='bold')
    ax1.legend(loc='best')
    ax1.grid(True, alpha=0.3)
    ax1.set_aspect('equal')

    ax2.axhline(0.0, color='black', linewidth=0.8)
    ax2.set_xlabel('Distance Along Path', fontsize=12)
    ax2.set_ylabel('Curvature (1/units)', fontsize=12)
    ax2.set_title('Curvature Profiles', fontsize=14, fontweight='bold')
    ax2.legend(loc='best')
    ax2.grid(True, alpha=0.3)

    _finish(fig, save_path, show)
