"""Domain models for rasterlab.

This module contains the value types passed between the rasterization
kernels, the point-set operations and the render layer. All models are:

- Immutable (frozen dataclasses or read-only sequences)
- Free of rendering concerns
- Hashable so points can be deduplicated through sets and dicts

Key classes:
- Point: A point in 3-space
- PointSequence: An ordered sequence of points with its ordering regime
- Segment: An oriented pair of points
- Algorithm: The kernel selector, keyed by prompt token
- LineInput / CircleInput: Kernel parameters
"""

from rasterlab.domain.algorithm import Algorithm, CircleInput, KernelInput, LineInput
from rasterlab.domain.point import Ordering, Point, PointSequence, Segment

__all__: list[str] = [
    # Enums
    "Algorithm",
    "Ordering",
    # Core types
    "Point",
    "PointSequence",
    "Segment",
    # Parameters
    "CircleInput",
    "KernelInput",
    "LineInput",
]
