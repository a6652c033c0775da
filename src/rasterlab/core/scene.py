"""Scene assembly for the rasterization pipeline.

This module turns a selected algorithm and its parameters into everything
the render layer draws:

- The rasterized pixels, as a PointSequence
- A polyline through those pixels, as segments
- The Cartesian axes overlay

Key components:
- build_scene: Top-level function for one-shot scene construction
- SceneAssembler: Holds settings and a logger across builds
- cartesian_axes: The fixed axes overlay
"""

import math
import time
from collections.abc import Sequence
from dataclasses import dataclass

from rasterlab.config import MIN_AXIS_EXTENT, RasterLabSettings
from rasterlab.core.point_ops import (
    dedup,
    lex_sort,
    polyline,
    reflect_horizontal,
    reflect_vertical,
    reorder_adjacent,
)
from rasterlab.core.rasterizer import (
    basic_incremental_line,
    bresenham_circle,
    bresenham_line,
    dda_line,
    midpoint_circle,
)
from rasterlab.domain import (
    Algorithm,
    CircleInput,
    KernelInput,
    LineInput,
    Point,
    PointSequence,
    Segment,
)
from rasterlab.exceptions import DomainError, RasterLabError
from rasterlab.utils import SceneLogger, configure_logging


@dataclass(frozen=True)
class Scene:
    """Everything needed to draw one rasterization result.

    Attributes:
        algorithm: Kernel that produced the pixels
        params: Kernel parameters
        points: Pixels to draw as point primitives
        segments: Polyline to draw as line primitives
        axes: X, Y and Z axis segments
        closed: Whether the polyline forms a closed ring
    """

    algorithm: Algorithm
    params: KernelInput
    points: PointSequence
    segments: tuple[Segment, ...]
    axes: tuple[Segment, ...]
    closed: bool = False

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def segment_count(self) -> int:
        return len(self.segments)


def cartesian_axes(
    x_extent: float,
    y_extent: float,
    z_extent: float,
) -> tuple[Segment, Segment, Segment]:
    """Build the X, Y and Z axis segments, each from -extent to +extent.

    Raises:
        DomainError: If any extent is not greater than MIN_AXIS_EXTENT
    """
    for name, extent in (("x extent", x_extent), ("y extent", y_extent), ("z extent", z_extent)):
        if not extent > MIN_AXIS_EXTENT:
            raise DomainError(name, extent, f"must be greater than {MIN_AXIS_EXTENT:g}")

    return (
        Segment(Point(-x_extent, 0.0, 0.0), Point(x_extent, 0.0, 0.0)),
        Segment(Point(0.0, -y_extent, 0.0), Point(0.0, y_extent, 0.0)),
        Segment(Point(0.0, 0.0, -z_extent), Point(0.0, 0.0, z_extent)),
    )


def coerce_params(algorithm: Algorithm, params: KernelInput | Sequence[float]) -> KernelInput:
    """Turn raw numbers into the parameter type the algorithm expects.

    Raises:
        DomainError: On a parameter type or count that does not fit the algorithm
    """
    if isinstance(params, (LineInput, CircleInput)):
        expected = LineInput if algorithm.is_line else CircleInput
        if not isinstance(params, expected):
            raise DomainError(
                "parameters", params, f"{algorithm.value} expects {expected.__name__}"
            )
        return params

    values = tuple(float(v) for v in params)
    if algorithm.is_line:
        if len(values) != 4:
            raise DomainError("parameters", values, "line algorithms take x1 y1 x2 y2")
        return LineInput(*values)
    if len(values) != 3:
        raise DomainError("parameters", values, "circle algorithms take cx cy r")
    return CircleInput(*values)


class SceneAssembler:
    """Builds scenes from an algorithm choice and its parameters.

    Example:
        assembler = SceneAssembler(RasterLabSettings())
        scene = assembler.build(Algorithm.BRESENHAM_LINE, (0, 0, 5, 2))
    """

    def __init__(
        self,
        settings: RasterLabSettings | None = None,
        scene_logger: SceneLogger | None = None,
    ) -> None:
        self.settings = settings if settings is not None else RasterLabSettings()
        if scene_logger is None:
            scene_logger = SceneLogger(
                configure_logging(
                    log_file=self.settings.logging.log_file,
                    console_level=self.settings.logging.log_level,
                    file_level=self.settings.logging.file_log_level,
                )
            )
        self.scene_logger = scene_logger

    def build(self, algorithm: Algorithm, params: KernelInput | Sequence[float]) -> Scene:
        """Rasterize and assemble a scene.

        Errors from the kernels are logged and re-raised unchanged.

        Raises:
            DomainError: On invalid parameters, a line or circle larger than
                ``raster.max_extent``, or bad axes extents
        """
        stats = self.scene_logger.stats
        stats.start_time = time.time()
        try:
            kernel_input = coerce_params(algorithm, params)
            self._check_extent(kernel_input)
            axes = cartesian_axes(
                self.settings.axes.x_extent,
                self.settings.axes.y_extent,
                self.settings.axes.z_extent,
            )
            if isinstance(kernel_input, LineInput):
                points, segments, closed = self._assemble_line(algorithm, kernel_input)
            else:
                points, segments, closed = self._assemble_circle(algorithm, kernel_input)
        except RasterLabError as e:
            self.scene_logger.log_scene_error(algorithm.value, e)
            raise
        finally:
            stats.end_time = time.time()

        self.scene_logger.log_scene_built(algorithm.value, len(points), len(segments), closed)
        return Scene(
            algorithm=algorithm,
            params=kernel_input,
            points=points,
            segments=tuple(segments),
            axes=axes,
            closed=closed,
        )

    def _check_extent(self, kernel_input: KernelInput) -> None:
        limit = self.settings.raster.max_extent
        if isinstance(kernel_input, LineInput):
            span = max(abs(kernel_input.dx), abs(kernel_input.dy))
            # non-finite spans are left for the kernel to reject
            if math.isfinite(span) and span > limit:
                raise DomainError("line span", span, f"must not exceed {limit}")
        elif kernel_input.r > limit:
            raise DomainError("radius", kernel_input.r, f"must not exceed {limit}")

    def _run_kernel(self, algorithm: Algorithm, kernel_input: KernelInput) -> PointSequence:
        start = time.time()
        self.scene_logger.log_kernel_start(algorithm.value, kernel_input.to_tuple())

        if algorithm is Algorithm.BASIC_INCREMENTAL_LINE:
            points = basic_incremental_line(
                *kernel_input.to_tuple(),
                inclusive_end=self.settings.raster.inclusive_end,
            )
        elif algorithm is Algorithm.DDA_LINE:
            points = dda_line(*kernel_input.to_tuple())
        elif algorithm is Algorithm.BRESENHAM_LINE:
            points = bresenham_line(*kernel_input.to_tuple())
        elif algorithm is Algorithm.MIDPOINT_CIRCLE:
            points = midpoint_circle(*kernel_input.to_tuple())
        else:
            points = bresenham_circle(*kernel_input.to_tuple())

        duration_ms = (time.time() - start) * 1000
        self.scene_logger.log_kernel_complete(algorithm.value, len(points), duration_ms)
        return points

    def _assemble_line(
        self, algorithm: Algorithm, line: LineInput
    ) -> tuple[PointSequence, list[Segment], bool]:
        points = self._run_kernel(algorithm, line)
        return points, polyline(points), False

    def _assemble_circle(
        self, algorithm: Algorithm, circle: CircleInput
    ) -> tuple[PointSequence, list[Segment], bool]:
        raw = self._run_kernel(algorithm, circle)

        if algorithm is Algorithm.BRESENHAM_CIRCLE:
            # Already the full sorted ring; only the traversal order is missing.
            ring = reorder_adjacent(raw)
            return raw, polyline(ring, closed=True), len(ring) > 1

        # Midpoint: mirror the first-quadrant arc into quadrants 2, 3 and 4,
        # reordering each mirror image so every arc is traversable.
        first = reorder_adjacent(raw)
        second = reorder_adjacent(reflect_horizontal(first, circle.cx))
        third = reorder_adjacent(reflect_vertical(second, circle.cy))
        fourth = reorder_adjacent(reflect_horizontal(third, circle.cx))
        arcs = (first, second, third, fourth)

        segments = [segment for arc in arcs for segment in polyline(arc)]
        points = dedup(lex_sort([p for arc in arcs for p in arc]))
        return points, segments, len(points) > 1


def build_scene(
    algorithm: Algorithm,
    params: KernelInput | Sequence[float],
    settings: RasterLabSettings | None = None,
) -> Scene:
    """Build a scene with a throwaway assembler.

    Args:
        algorithm: Kernel to run
        params: LineInput/CircleInput, or the raw numbers for one
        settings: Application settings (defaults if None)

    Returns:
        The assembled scene
    """
    return SceneAssembler(settings).build(algorithm, params)
