"""Configuration settings for RasterLab."""

from pathlib import Path

from pydantic import BaseModel, Field

# Depth of the view volume: |far plane - near plane|.
NEAR_PLANE = 0.1
FAR_PLANE = 100.0
PLANE_SIZE = abs(FAR_PLANE - NEAR_PLANE)

# Axes no longer than this are rejected by the overlay builder.
MIN_AXIS_EXTENT = 50.0


class WindowConfig(BaseModel):
    """Size of the coordinate space shown by the render host."""

    width: int = Field(
        default=800,
        gt=0,
        description="Width of the coordinate space in pixels",
    )
    height: int = Field(
        default=600,
        gt=0,
        description="Height of the coordinate space in pixels",
    )


class AxesConfig(BaseModel):
    """Extents of the Cartesian axes overlay.

    Each axis is drawn from -extent to +extent. Extents must exceed
    MIN_AXIS_EXTENT; the check lives in the overlay builder so that a bad
    value surfaces as a DomainError rather than a validation error.
    """

    x_extent: float = Field(
        default=51.0,
        description="Half-length of the X axis",
    )
    y_extent: float = Field(
        default=PLANE_SIZE,
        description="Half-length of the Y axis",
    )
    z_extent: float = Field(
        default=PLANE_SIZE,
        description="Half-length of the Z axis",
    )


class RasterConfig(BaseModel):
    """Configuration for the rasterization kernels."""

    inclusive_end: bool = Field(
        default=False,
        description="Basic incremental line: also emit the column at floor(x2)",
    )
    max_extent: int = Field(
        default=100_000,
        gt=0,
        description="Largest line span or circle radius accepted, in cells",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RasterLabSettings(BaseModel):
    """Main application settings."""

    window: WindowConfig = Field(default_factory=WindowConfig)
    axes: AxesConfig = Field(default_factory=AxesConfig)
    raster: RasterConfig = Field(default_factory=RasterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RasterLabSettings:
    """Get default application settings."""
    return RasterLabSettings()
