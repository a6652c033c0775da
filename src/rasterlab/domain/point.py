"""Core geometric types for rasterization output.

This module defines the value types every kernel produces and consumes:
- Point: A lattice point in 3-space
- Ordering: Enum for the ordering regime of a point sequence
- PointSequence: An immutable, ordered sequence of points
- Segment: An oriented pair of points
"""

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, overload


class Ordering(Enum):
    """Ordering regime of a point sequence.

    - NATIVE: the order in which a kernel emitted the points
    - LEXICOGRAPHIC: sorted by x, then y, then z
    - ADJACENT: greedy nearest-neighbour traversal
    """

    NATIVE = auto()
    LEXICOGRAPHIC = auto()
    ADJACENT = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 3-space.

    Immutable and hashable for use in sets/dicts. Rasterizers only ever
    produce integer-valued coordinates with z = 0.

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate
    """

    x: float
    y: float
    z: float = 0.0

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to simple (x, y, z) tuple."""
        return (self.x, self.y, self.z)

    def sort_key(self) -> tuple[float, float, float]:
        """Key for lexicographic ordering (x, then y, then z)."""
        return (self.x, self.y, self.z)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.dist(self.to_tuple(), other.to_tuple())

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y, and z fields
        """
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y and optional z fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"], z=data.get("z", 0.0))


class PointSequence(Sequence[Point]):
    """An immutable, ordered sequence of points.

    The ordering regime travels with the points so consumers can tell a
    kernel's native emission order from a sorted or adjacency-ordered one.
    Two sequences are equal when they hold the same points in the same
    order, regardless of the regime tag.
    """

    __slots__ = ("_points", "_ordering")

    def __init__(
        self,
        points: Iterable[Point] = (),
        ordering: Ordering = Ordering.NATIVE,
    ) -> None:
        self._points: tuple[Point, ...] = tuple(points)
        self._ordering = ordering

    @classmethod
    def of(
        cls,
        coords: Iterable[tuple[float, ...]],
        ordering: Ordering = Ordering.NATIVE,
    ) -> "PointSequence":
        """Build a sequence from (x, y) or (x, y, z) tuples."""
        return cls((Point(*c) for c in coords), ordering)

    @property
    def ordering(self) -> Ordering:
        """The ordering regime of this sequence."""
        return self._ordering

    @property
    def points(self) -> tuple[Point, ...]:
        """The underlying points."""
        return self._points

    def to_tuples(self) -> list[tuple[float, float, float]]:
        """Flatten to a list of (x, y, z) tuples."""
        return [p.to_tuple() for p in self._points]

    @overload
    def __getitem__(self, index: int) -> Point: ...

    @overload
    def __getitem__(self, index: slice) -> "PointSequence": ...

    def __getitem__(self, index: int | slice) -> "Point | PointSequence":
        if isinstance(index, slice):
            return PointSequence(self._points[index], self._ordering)
        return self._points[index]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PointSequence):
            return self._points == other._points
        if isinstance(other, (list, tuple)):
            return list(self._points) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"PointSequence({list(self._points)!r}, ordering={self._ordering.name})"


@dataclass(frozen=True, slots=True)
class Segment:
    """An oriented pair of points.

    Attributes:
        origin: Start of the segment
        tip: End of the segment
    """

    origin: Point
    tip: Point

    def length(self) -> float:
        """Euclidean length of the segment."""
        return self.origin.distance_to(self.tip)

    def reversed(self) -> "Segment":
        """Return the segment with origin and tip swapped."""
        return Segment(self.tip, self.origin)
