"""
Corner smoothing comparison demo.

Smooths the same waypoints with all three methods and compares the
resulting paths and their curvature profiles. C1 fillets show curvature
steps at the tangency points; the C2 blends ramp curvature continuously.
"""

import logging
import sys
sys.path.append('..')

from pathsmoother import config
from pathsmoother.planning.algorithms import SmoothingKind
from pathsmoother.planning.path import total_length
from pathsmoother.planning.smoother import PathSmoother
from pathsmoother.visualizer.screen import ScreenTransform
from pathsmoother.visualizer.visualizer import (plot_curvature,
                                                plot_mode_comparison,
                                                plot_smoothed_path)


def compare_modes(smoothing_factor: float = config.DEFAULT_SMOOTHING_FACTOR):
    """Smooth the demo mission with every method and plot the results."""

    print("=" * 80)
    print("CORNER SMOOTHING COMPARISON")
    print("=" * 80)

    waypoints = config.DEFAULT_WAYPOINTS

    paths = {}
    for i, mode in enumerate(SmoothingKind, start=1):
        print(f"\n[{i}/{len(SmoothingKind)}] Smoothing with {mode.value}...")
        smoother = PathSmoother(mode=mode, smoothing_factor=smoothing_factor)
        parts = smoother.smooth_path(waypoints)
        plot = smoother.curvature_plot(waypoints, points_count=400)

        paths[mode.value] = parts
        print(f"   [OK] {len(parts)} parts, length {total_length(parts):.3f}")
        print(f"   Curvature range: {plot.min_y:.3f} .. {plot.max_y:.3f}")

    print("\nCreating visualizations...")
    plot_mode_comparison(paths, waypoints,
                         save_path='smoothing_modes.png', show=False)
    print("   [OK] Saved: smoothing_modes.png")

    clothoid_path = paths[SmoothingKind.C2_CLOTHOID.value]
    plot_smoothed_path(clothoid_path, waypoints, show_guides=True,
                       screen=ScreenTransform(),
                       title="C2 Clothoid Smoothing (screen coordinates)",
                       save_path='clothoid_path.png', show=False)
    print("   [OK] Saved: clothoid_path.png")

    smoother = PathSmoother(mode=SmoothingKind.C2_CLOTHOID,
                            smoothing_factor=smoothing_factor)
    plot_curvature(smoother.curvature_plot(waypoints, points_count=400),
                   title="C2 Clothoid Curvature",
                   save_path='clothoid_curvature.png', show=False)
    print("   [OK] Saved: clothoid_curvature.png")

    print("\n" + "=" * 80)
    print("COMPARISON COMPLETE")
    print("=" * 80)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')
    factor = float(sys.argv[1]) if len(sys.argv) > 1 else config.DEFAULT_SMOOTHING_FACTOR
    compare_modes(factor)
