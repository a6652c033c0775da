"""RasterLab - Classical 2D rasterization on a Cartesian grid.

RasterLab demonstrates the textbook line and circle rasterizers (basic
incremental, DDA and Bresenham lines; midpoint and Bresenham circles),
turns their pixels into polylines and hands both to a render host.

Example:
    $ rasterlab --algorithm BA --params "0 0 5 2" --show-points

This prints the six Bresenham pixels between (0, 0) and (5, 2) and renders
the scene headlessly.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
