"""Post-processing operations on point sequences.

This module provides the operations that condition rasterizer output for
rendering:
- Lexicographic sorting and adjacent-duplicate removal
- Greedy nearest-neighbour reordering into a traversable polyline
- Reflection about a vertical or horizontal axis
- Conversion of an ordered sequence into polyline segments

All functions are pure and return a new PointSequence.
"""

import math
from collections.abc import Sequence

from rasterlab.domain import Ordering, Point, PointSequence, Segment


def _ordering_of(seq: Sequence[Point]) -> Ordering:
    if isinstance(seq, PointSequence):
        return seq.ordering
    return Ordering.NATIVE


def lex_sort(seq: Sequence[Point]) -> PointSequence:
    """Order points by x, then y, then z.

    The sort is stable, so equal points keep their relative input order.
    """
    return PointSequence(sorted(seq, key=Point.sort_key), Ordering.LEXICOGRAPHIC)


def dedup(seq: Sequence[Point]) -> PointSequence:
    """Drop every point equal to its predecessor.

    Applied to a lexicographically sorted sequence this leaves a set.
    The ordering regime of the input is preserved.
    """
    result: list[Point] = []
    for point in seq:
        if not result or result[-1] != point:
            result.append(point)
    return PointSequence(result, _ordering_of(seq))


def reorder_adjacent(seq: Sequence[Point]) -> PointSequence:
    """Reorder points into a greedy nearest-neighbour traversal.

    Starts from the first point; each following point is the closest
    not-yet-visited input point to the last one emitted. Ties go to the
    point that comes first in the input. Visits are tracked by index, so
    repeated points are all kept and the result is a permutation of the
    input.

    Args:
        seq: Points in any order

    Returns:
        The same points in adjacency order

    Examples:
        >>> pts = PointSequence.of([(0, 0), (2, 0), (1, 0)])
        >>> [p.x for p in reorder_adjacent(pts)]
        [0, 1, 2]
    """
    points = list(seq)
    if not points:
        return PointSequence((), Ordering.ADJACENT)

    remaining = list(range(1, len(points)))
    result = [points[0]]

    while remaining:
        last = result[-1]
        best_pos = 0
        best_distance = math.inf
        for pos, index in enumerate(remaining):
            distance = last.distance_to(points[index])
            if distance < best_distance:
                best_distance = distance
                best_pos = pos
        result.append(points[remaining.pop(best_pos)])

    return PointSequence(result, Ordering.ADJACENT)


def _reflected_ordering(seq: Sequence[Point]) -> Ordering:
    # A mirror image of a traversal is still a traversal; a sorted run is not sorted.
    return Ordering.ADJACENT if _ordering_of(seq) is Ordering.ADJACENT else Ordering.NATIVE


def reflect_horizontal(seq: Sequence[Point], cx: float) -> PointSequence:
    """Mirror points across the vertical line x = cx."""
    return PointSequence(
        (Point(2 * cx - p.x, p.y, p.z) for p in seq),
        _reflected_ordering(seq),
    )


def reflect_vertical(seq: Sequence[Point], cy: float) -> PointSequence:
    """Mirror points across the horizontal line y = cy."""
    return PointSequence(
        (Point(p.x, 2 * cy - p.y, p.z) for p in seq),
        _reflected_ordering(seq),
    )


def polyline(seq: Sequence[Point], closed: bool = False) -> list[Segment]:
    """Connect consecutive points with segments.

    Args:
        seq: Points in traversal order
        closed: Also connect the last point back to the first

    Returns:
        len(seq) - 1 segments, plus the closing one when requested and the
        sequence holds more than one point
    """
    points = list(seq)
    segments = [Segment(points[i - 1], points[i]) for i in range(1, len(points))]
    if closed and len(points) > 1:
        segments.append(Segment(points[-1], points[0]))
    return segments
