"""
Mapping between world coordinates and screen (pixel) coordinates.

Screen Y grows downwards, so the world Y axis is flipped:
    screen = (x * zoom, -y * zoom) + shift
"""

from dataclasses import dataclass
from typing import Tuple

from .. import config
from ..models.geometry import Point


@dataclass(frozen=True)
class ScreenTransform:
    """
    Uniform scale plus offset from world units to pixels.

    Attributes:
        zoom: Pixels per world unit (non-zero)
        shift: Pixel position of the world origin
    """
    zoom: float = config.DEFAULT_ZOOM
    shift: Tuple[float, float] = config.DEFAULT_SHIFT

    def __post_init__(self):
        if self.zoom == 0:
            raise ValueError("Zoom factor must be non-zero")

    def to_screen(self, point: Tuple[float, float]) -> Point:
        return Point(point[0] * self.zoom + self.shift[0],
                     -point[1] * self.zoom + self.shift[1])

    def to_world(self, point: Tuple[float, float]) -> Point:
        return Point((point[0] - self.shift[0]) / self.zoom,
                     -(point[1] - self.shift[1]) / self.zoom)

    def with_zoom(self, zoom: float) -> 'ScreenTransform':
        return ScreenTransform(zoom, self.shift)

    def panned(self, dx: float, dy: float) -> 'ScreenTransform':
        """Move the view by a pixel offset."""
        return ScreenTransform(self.zoom, (self.shift[0] + dx, self.shift[1] + dy))
