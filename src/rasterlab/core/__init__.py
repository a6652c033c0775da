"""Core algorithms for rasterlab.

This module contains:

- Vector arithmetic (sum, difference, dot, cross, normalize, translation)
- Rasterization kernels (basic incremental, DDA and Bresenham lines;
  midpoint and Bresenham circles)
- Point-set operations (sorting, deduplication, adjacency reordering,
  reflection, polyline construction)
- Scene assembly (kernel + post-processing + axes overlay)

All functions are pure; SceneAssembler only keeps settings and a logger.
"""

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
    bresenham_circle_raw,
    bresenham_line,
    dda_line,
    midpoint_circle,
    round_half_away,
)
from rasterlab.core.scene import (
    Scene,
    SceneAssembler,
    build_scene,
    cartesian_axes,
    coerce_params,
)

__all__ = [
    # Scene assembly
    "Scene",
    "SceneAssembler",
    # Rasterizers
    "basic_incremental_line",
    "bresenham_circle",
    "bresenham_circle_raw",
    "bresenham_line",
    "build_scene",
    "cartesian_axes",
    "coerce_params",
    "dda_line",
    # Point-set operations
    "dedup",
    "lex_sort",
    "midpoint_circle",
    "polyline",
    "reflect_horizontal",
    "reflect_vertical",
    "reorder_adjacent",
    "round_half_away",
]
