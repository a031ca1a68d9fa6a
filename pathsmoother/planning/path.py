"""
Operations on whole paths, i.e. ordered sequences of path parts.

This module turns per-corner smoothing results into one continuous path and
provides arc-length queries over the assembled sequence.
"""

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from ..models.geometry import Point
from ..models.parts import LinePart, PathPart
from ..models.smoothing import Smoothing

T = TypeVar('T')


def triplets(items: Iterable[T]) -> Iterator[Tuple[T, T, T]]:
    """
    Consecutive overlapping triples: (a, b, c), (b, c, d), ...

    Fewer than three items yield nothing.
    """
    window: List[T] = []
    for item in items:
        window.append(item)
        if len(window) > 3:
            window.pop(0)
        if len(window) == 3:
            yield window[0], window[1], window[2]


def join_smoothings(smoothings: Iterable[Smoothing]) -> List[PathPart]:
    """
    Merge per-corner smoothings into one continuous sequence of parts.

    Consecutive smoothings share the straight segment between their corner
    waypoints: the previous smoothing's exit line and the next one's entry
    line lie on it. They are replaced by a single line from the start of the
    previous exit line to the end of the next entry line.

    Args:
        smoothings: One smoothing per interior waypoint, in path order

    Returns:
        Path parts from the first waypoint to the last; empty for no input
    """
    path: List[PathPart] = []
    last: Optional[LinePart] = None

    for smoothing in smoothings:
        if last is None:
            path.append(smoothing.line1)
        else:
            path.append(LinePart(last.from_point, smoothing.line1.to_point))

        path.extend(smoothing.inner_parts())
        last = smoothing.line2

    if last is not None:
        path.append(last)

    return path


def total_length(parts: Iterable[PathPart]) -> float:
    """Sum of the part lengths."""
    return sum(part.length for part in parts)


def find_position_in_path(parts: Iterable[PathPart], position: float) -> Optional[Point]:
    """
    Point at arc length `position` from the start of the path.

    Returns:
        The point, or None when the position lies beyond the end of the path
    """
    if position < 0:
        raise ValueError(f"Path position must be non-negative, got {position}")

    for part in parts:
        part_length = part.length
        if part_length >= position:
            return part.point_at(position)
        position -= part_length
    return None


def tabulate_path(parts: Sequence[PathPart],
                  delta: float) -> Iterator[Tuple[Point, PathPart]]:
    """
    Sample the path every `delta` of arc length.

    Spacing is kept across part boundaries, so the first sample on a part is
    generally not its start point.

    Args:
        parts: Path parts in travel order
        delta: Arc-length step (> 0)

    Yields:
        (point, part) pairs in travel order
    """
    if delta <= 0:
        raise ValueError(f"Tabulation step must be positive, got {delta}")

    position = 0.0
    for part in parts:
        part_length = part.length
        while position < part_length:
            yield part.point_at(position), part
            position += delta
        position -= part_length
