"""Utility functions for rasterlab.

This module provides logging setup and the scene logger that tracks kernel
runs, scene builds and render-host activity.
"""

from rasterlab.utils.logging import (
    SceneLogger,
    SceneStats,
    configure_logging,
)

__all__ = [
    "SceneLogger",
    "SceneStats",
    "configure_logging",
]
