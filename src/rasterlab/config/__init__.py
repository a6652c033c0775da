"""Configuration management for rasterlab.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- WindowConfig: Size of the coordinate space
- AxesConfig: Cartesian axes overlay extents
- RasterConfig: Kernel options
- LoggingConfig: Logging settings
- RasterLabSettings: Main application settings
"""

from rasterlab.config.settings import (
    MIN_AXIS_EXTENT,
    PLANE_SIZE,
    AxesConfig,
    LoggingConfig,
    RasterConfig,
    RasterLabSettings,
    WindowConfig,
    get_default_settings,
)

__all__ = [
    "MIN_AXIS_EXTENT",
    "PLANE_SIZE",
    "AxesConfig",
    "LoggingConfig",
    "RasterConfig",
    "RasterLabSettings",
    "WindowConfig",
    "get_default_settings",
]
