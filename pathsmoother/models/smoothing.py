"""
Results of smoothing one corner.

Each result keeps the straight entry line (line1), the straight exit line
(line2) and the curve parts bridging them. NoSmoothing has no bridge: its
lines meet exactly at the corner waypoint.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple, Union

from .clothoid import ClothoidPart
from .cubic import CubicPart
from .geometry import Point
from .parts import ArcPart, LinePart

Transition = Union[CubicPart, ClothoidPart]


class Smoothing(ABC):
    """Common interface of NoSmoothing, C1Smoothing and C2Smoothing."""

    line1: LinePart
    line2: LinePart

    @abstractmethod
    def inner_parts(self) -> tuple:
        """Curve parts between line1 and line2, in travel order."""

    @abstractmethod
    def shift(self, delta: Point) -> 'Smoothing':
        ...

    @abstractmethod
    def rotate(self, angle: float) -> 'Smoothing':
        ...

    def parts(self) -> tuple:
        """All parts from line1 to line2."""
        return (self.line1,) + tuple(self.inner_parts()) + (self.line2,)


@dataclass(frozen=True)
class NoSmoothing(Smoothing):
    """Corner left sharp: the original two segments."""
    line1: LinePart
    line2: LinePart

    def inner_parts(self) -> Tuple[()]:
        return ()

    def shift(self, delta: Point) -> 'NoSmoothing':
        return NoSmoothing(self.line1.shift(delta), self.line2.shift(delta))

    def rotate(self, angle: float) -> 'NoSmoothing':
        return NoSmoothing(self.line1.rotate(angle), self.line2.rotate(angle))


@dataclass(frozen=True)
class C1Smoothing(Smoothing):
    """
    Line, circular fillet, line.

    Tangent direction is continuous; curvature jumps between 0 and 1/R at
    both ends of the arc.
    """
    line1: LinePart
    arc: ArcPart
    line2: LinePart

    def inner_parts(self) -> Tuple[ArcPart]:
        return (self.arc,)

    def shift(self, delta: Point) -> 'C1Smoothing':
        return C1Smoothing(self.line1.shift(delta),
                           self.arc.shift(delta),
                           self.line2.shift(delta))

    def rotate(self, angle: float) -> 'C1Smoothing':
        return C1Smoothing(self.line1.rotate(angle),
                           self.arc.rotate(angle),
                           self.line2.rotate(angle))


@dataclass(frozen=True)
class C2Smoothing(Smoothing):
    """
    Line, transition curve, circular arc, transition curve, line.

    The transitions (cubic spirals or clothoids) ramp curvature from 0 up to
    1/R and back down, so curvature is continuous along the corner.
    """
    line1: LinePart
    transition1: Transition
    arc: ArcPart
    transition2: Transition
    line2: LinePart

    def inner_parts(self) -> tuple:
        return (self.transition1, self.arc, self.transition2)

    def shift(self, delta: Point) -> 'C2Smoothing':
        return C2Smoothing(self.line1.shift(delta),
                           self.transition1.shift(delta),
                           self.arc.shift(delta),
                           self.transition2.shift(delta),
                           self.line2.shift(delta))

    def rotate(self, angle: float) -> 'C2Smoothing':
        return C2Smoothing(self.line1.rotate(angle),
                           self.transition1.rotate(angle),
                           self.arc.rotate(angle),
                           self.transition2.rotate(angle),
                           self.line2.rotate(angle))
