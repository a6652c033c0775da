"""Logging utilities for RasterLab."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_NAME = "rasterlab"


@dataclass
class SceneStats:
    """Statistics from building and rendering a scene."""

    kernel_runs: int = 0
    points_emitted: int = 0
    segments_built: int = 0
    meshes_uploaded: int = 0
    frames_rendered: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate build duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by an earlier call are replaced, so calling this more
    than once does not duplicate output.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("rasterlab")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class SceneLogger:
    """Logger for tracking scene construction and rendering."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("rasterlab")
        self._stats = SceneStats()

    def log_kernel_start(self, algorithm: str, params: tuple[float, ...]) -> None:
        """Log start of a rasterization kernel."""
        self._logger.debug("Running kernel", algorithm=algorithm, params=list(params))

    def log_kernel_complete(self, algorithm: str, point_count: int, duration_ms: float) -> None:
        """Log a finished rasterization kernel."""
        self._logger.info(
            "Kernel complete",
            algorithm=algorithm,
            points=point_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.kernel_runs += 1
        self._stats.points_emitted += point_count

    def log_scene_built(self, algorithm: str, points: int, segments: int, closed: bool) -> None:
        """Log an assembled scene."""
        self._logger.info(
            "Scene built",
            algorithm=algorithm,
            points=points,
            segments=segments,
            closed=closed,
        )
        self._stats.segments_built += segments

    def log_scene_error(self, algorithm: str, error: Exception) -> None:
        """Log a failed scene build."""
        self._logger.error(
            "Scene build failed",
            algorithm=algorithm,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((algorithm, str(error)))

    def log_mesh_upload(self, mesh_id: int, mode: str, index_count: int) -> None:
        """Log a mesh handed to the render host."""
        self._logger.debug("Mesh uploaded", mesh_id=mesh_id, mode=mode, indices=index_count)
        self._stats.meshes_uploaded += 1

    def log_frame(self, frame: int, draw_calls: int) -> None:
        """Log a rendered frame."""
        self._logger.debug("Frame rendered", frame=frame, draw_calls=draw_calls)
        self._stats.frames_rendered += 1

    @property
    def stats(self) -> SceneStats:
        """Get current scene statistics."""
        return self._stats
