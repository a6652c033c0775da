"""Line and circle rasterization kernels.

Every kernel takes real-valued parameters and returns a fresh
PointSequence of integer lattice points (z = 0) in its native emission
order. Kernels are deterministic and keep no state between calls.

Kernels:
- basic_incremental_line: y += m per unit step in x
- dda_line: unit steps along the major axis, fractional along the minor
- bresenham_line: integer decision variable, all octants
- midpoint_circle: one quadrant arc from the midpoint decision variable
- bresenham_circle: full ring from eight-way symmetry

Rounding is half away from zero throughout, never banker's rounding.
"""

import math
from collections.abc import Iterator

from rasterlab.core.point_ops import dedup, lex_sort
from rasterlab.domain import CircleInput, Ordering, Point, PointSequence
from rasterlab.exceptions import DomainError


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Examples:
        >>> round_half_away(2.5), round_half_away(-2.5), round_half_away(0.4)
        (3, -3, 0)
    """
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def _lattice(name: str, value: float) -> int:
    if not math.isfinite(value):
        raise DomainError(name, value, "must be a finite number")
    return math.floor(value)


def _emit(x: float, y: float) -> Point:
    return Point(float(x), float(y), 0.0)


def basic_incremental_line(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    inclusive_end: bool = False,
) -> PointSequence:
    """Rasterize a line by adding the slope to y once per unit step in x.

    Emits (floor(x1), floor(y1)) and then one point per x while x < x2.
    With ``inclusive_end`` the loop runs while x <= floor(x2) instead, so the
    final column is never dropped.

    Args:
        x1: X coordinate of the start point
        y1: Y coordinate of the start point
        x2: X coordinate of the end point (must exceed x1)
        y2: Y coordinate of the end point
        inclusive_end: Emit the column at floor(x2) as well

    Returns:
        Points in increasing x order

    Raises:
        DomainError: If x2 <= x1

    Examples:
        >>> [p.to_tuple()[:2] for p in basic_incremental_line(0, 0, 4, 4)]
        [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0)]
    """
    x_start, y_start = _lattice("x1", x1), _lattice("y1", y1)
    _lattice("x2", x2)
    _lattice("y2", y2)
    if x2 <= x1:
        raise DomainError("x2", x2, f"must be greater than x1 ({x1})")

    m = (y2 - y1) / (x2 - x1)
    points = [_emit(x_start, y_start)]

    y = float(y1)
    x = x_start + 1
    x_last = math.floor(x2)
    while (x <= x_last) if inclusive_end else (x < x2):
        y = float(round_half_away(y + m))
        points.append(_emit(x, y))
        x += 1

    return PointSequence(points, Ordering.NATIVE)


def dda_line(x1: float, y1: float, x2: float, y2: float) -> PointSequence:
    """Rasterize a line with a digital differential analyzer.

    Endpoints are snapped to the lattice with floor. The kernel takes one
    unit step per point along the major axis (the axis with the larger
    extent; x on ties) and a fractional step of minor/major along the other,
    rounding both coordinates half away from zero. Positions are computed as
    ``start + i * increment`` so no error accumulates. Works in every octant
    and always ends exactly on the snapped end point.

    Returns:
        max(|dx|, |dy|) + 1 points from start to end
    """
    sx, sy = _lattice("x1", x1), _lattice("y1", y1)
    ex, ey = _lattice("x2", x2), _lattice("y2", y2)
    dx, dy = ex - sx, ey - sy
    steps = max(abs(dx), abs(dy))

    if steps == 0:
        return PointSequence([_emit(sx, sy)], Ordering.NATIVE)

    x_inc = dx / steps
    y_inc = dy / steps
    points = [
        _emit(sx + round_half_away(i * x_inc), sy + round_half_away(i * y_inc))
        for i in range(steps + 1)
    ]
    return PointSequence(points, Ordering.NATIVE)


def _first_octant_steps(dx: int, dy: int) -> Iterator[tuple[int, int]]:
    """Yield (u, v) offsets of a Bresenham line with 0 <= dy <= dx."""
    p = 2 * dy - dx
    v = 0
    for u in range(dx + 1):
        yield u, v
        if p >= 0:
            v += 1
            p += 2 * (dy - dx)
        else:
            p += 2 * dy


def bresenham_line(x1: float, y1: float, x2: float, y2: float) -> PointSequence:
    """Rasterize a line with Bresenham's integer decision variable.

    The first-octant core (x2 >= x1, 0 <= dy <= dx) runs on offsets; any
    other octant is mapped onto it by swapping axes and flipping signs, and
    the offsets are mapped back. Endpoints are snapped to the lattice.

    Returns:
        max(|dx|, |dy|) + 1 points from (x1, y1) to (x2, y2)

    Examples:
        >>> [p.to_tuple()[:2] for p in bresenham_line(0, 0, 5, 2)]
        [(0.0, 0.0), (1.0, 0.0), (2.0, 1.0), (3.0, 1.0), (4.0, 2.0), (5.0, 2.0)]
    """
    x0, y0 = _lattice("x1", x1), _lattice("y1", y1)
    xe, ye = _lattice("x2", x2), _lattice("y2", y2)

    sx = 1 if xe >= x0 else -1
    sy = 1 if ye >= y0 else -1
    dx, dy = abs(xe - x0), abs(ye - y0)
    steep = dy > dx
    if steep:
        dx, dy = dy, dx

    points = []
    for u, v in _first_octant_steps(dx, dy):
        if steep:
            points.append(_emit(x0 + sx * v, y0 + sy * u))
        else:
            points.append(_emit(x0 + sx * u, y0 + sy * v))

    return PointSequence(points, Ordering.NATIVE)


def midpoint_circle(cx: float, cy: float, r: float) -> PointSequence:
    """Rasterize the first-quadrant arc of a circle with the midpoint rule.

    Emits the two axis crossings (cx + r, cy) and (cx, cy + r), or just the
    center when r is zero, then walks the octant above the x axis and
    mirrors each step across y = x. The other three quadrants are left to
    the caller.

    Raises:
        DomainError: On a negative or fractional radius or a fractional center

    Examples:
        >>> [p.to_tuple()[:2] for p in midpoint_circle(0, 0, 2)]
        [(2.0, 0.0), (0.0, 2.0), (2.0, 1.0), (1.0, 2.0)]
    """
    params = CircleInput(cx, cy, r)
    xc, yc, radius = int(params.cx), int(params.cy), int(params.r)

    if radius > 0:
        points = [_emit(xc + radius, yc), _emit(xc, yc + radius)]
    else:
        points = [_emit(xc, yc)]

    x, y = radius, 0
    p = 1 - radius
    while x > y:
        y += 1
        if p <= 0:
            # midpoint inside or on the circle
            p += 2 * y + 1
        else:
            x -= 1
            p += 2 * y - 2 * x + 1

        if x < y:
            break

        points.append(_emit(xc + x, yc + y))
        if x != y:
            points.append(_emit(xc + y, yc + x))

    return PointSequence(points, Ordering.NATIVE)


def _eight_way(xc: int, yc: int, x: int, y: int) -> list[Point]:
    return [
        _emit(xc + x, yc + y),
        _emit(xc - x, yc + y),
        _emit(xc + x, yc - y),
        _emit(xc - x, yc - y),
        _emit(xc + y, yc + x),
        _emit(xc - y, yc + x),
        _emit(xc + y, yc - x),
        _emit(xc - y, yc - x),
    ]


def bresenham_circle_raw(cx: float, cy: float, r: float) -> PointSequence:
    """Emit the eight-way symmetric Bresenham circle points, duplicates included.

    Each step plots the current point, updates the decision term from that
    same ``(x, y)`` and only then advances ``x``. Advancing ``x`` before the
    update pulls points inside the circle as the radius grows, so this order
    differs from the advance-then-update listing some references give.
    """
    params = CircleInput(cx, cy, r)
    xc, yc = int(params.cx), int(params.cy)

    points: list[Point] = []
    x, y = 0, int(params.r)
    d = 3 - 2 * y
    while y >= x:
        points.extend(_eight_way(xc, yc, x, y))
        # decision terms use x and y of the point just emitted
        if d > 0:
            d += 4 * (x - y) + 10
            y -= 1
        else:
            d += 4 * x + 6
        x += 1

    return PointSequence(points, Ordering.NATIVE)


def bresenham_circle(cx: float, cy: float, r: float) -> PointSequence:
    """Rasterize a full circle with Bresenham's circle algorithm.

    The raw eight-way emission repeats the axis and diagonal points, so the
    result is sorted lexicographically and deduplicated.

    Returns:
        The closed ring in lexicographic order with no repeated point

    Raises:
        DomainError: On a negative or fractional radius or a fractional center
    """
    return dedup(lex_sort(bresenham_circle_raw(cx, cy, r)))
