"""
Curvature profile of an assembled path.

Curvature is measured with the three-point formula on densely tabulated
samples of each part and averaged over CURVATURE_WINDOW measurements per plot
point, which suppresses the quantization noise of tabulated parts. Left turns
are positive, right turns negative.
"""

import logging
from dataclasses import dataclass, field
from itertools import groupby
from typing import Iterable, Tuple

import numpy as np

from .. import config
from ..models.geometry import Point
from ..models.parts import PathPart
from ..models.special import tri_point_curvatures
from .path import tabulate_path, total_length

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurvaturePlot:
    """
    Curvature versus arc length.

    Attributes:
        min_x: Smallest X (path offset) of the plot box
        max_x: Largest X of the plot box
        min_y: Smallest Y of the plot box (never above the zero line)
        max_y: Largest Y of the plot box (never below the zero line)
        zero_y: Y of the zero-curvature line
        points: (offset, curvature) plot points
    """
    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0
    zero_y: float = 0.0
    points: Tuple[Point, ...] = field(default_factory=tuple)

    @classmethod
    def create(cls, parts: Iterable[PathPart], points_count: int) -> 'CurvaturePlot':
        """
        Build the curvature profile of a path.

        Args:
            parts: Path parts in travel order
            points_count: Number of plot points along the whole path (> 0)

        Returns:
            CurvaturePlot spanning [0, total length]
        """
        if points_count <= 0:
            raise ValueError(f"Plot needs a positive number of points, got {points_count}")

        parts = list(parts)
        length = total_length(parts)
        if length == 0:
            return cls()

        window = config.CURVATURE_WINDOW
        delta = length / points_count
        samples = tabulate_path(parts, delta / window)

        # only triples lying on a single part are measured
        measures = []
        for _, group in groupby(samples, key=lambda sample: id(sample[1])):
            points = np.array([point for point, _ in group])
            if len(points) >= 3:
                measures.append(tri_point_curvatures(points))

        if not measures:
            return cls(max_x=length)

        curvatures = np.concatenate(measures)
        # coincident samples have no measurable curvature
        curvatures = np.where(np.isnan(curvatures), 0.0, curvatures)

        full = len(curvatures) // window
        averages = curvatures[:full * window].reshape(full, window).mean(axis=1)

        logger.debug("Curvature plot: %d measurements -> %d points over length %.6g",
                     len(curvatures), full, length)

        plot_points = tuple(Point(index * delta, float(value))
                            for index, value in enumerate(averages))

        return cls(min_x=0.0,
                   max_x=length,
                   min_y=min(0.0, float(averages.min())) if full else 0.0,
                   max_y=max(0.0, float(averages.max())) if full else 0.0,
                   zero_y=0.0,
                   points=plot_points)

    def scale(self, min_y: float, max_y: float, min_x: float, max_x: float) -> 'CurvaturePlot':
        """
        Map the plot into a new bounding box (e.g. a drawing area in pixels).

        A degenerate old axis (zero extent) collapses onto the new lower bound.
        """
        if min_y >= max_y:
            raise ValueError(f"Plot Y bounds must be increasing, got {min_y} >= {max_y}")

        old_height = self.max_y - self.min_y
        new_height = max_y - min_y
        old_width = self.max_x - self.min_x
        new_width = max_x - min_x

        def scale_y(y):
            if old_height == 0:
                return min_y
            return (y - self.min_y) / old_height * new_height + min_y

        def scale_x(x):
            if old_width == 0:
                return min_x
            return (x - self.min_x) / old_width * new_width + min_x

        return CurvaturePlot(min_x=min_x,
                             max_x=max_x,
                             min_y=min_y,
                             max_y=max_y,
                             zero_y=scale_y(self.zero_y),
                             points=tuple(Point(scale_x(p.x), scale_y(p.y))
                                          for p in self.points))

    def curvature_at(self, position: float) -> float:
        """Plotted curvature nearest to a path offset; NaN for an empty plot."""
        if not self.points:
            return float('nan')
        xs = np.array([p.x for p in self.points])
        index = int(np.argmin(np.abs(xs - position)))
        return self.points[index].y
