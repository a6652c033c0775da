"""Unit tests for console output helpers and logging setup."""

import logging

from rasterlab.cli.output import _format_time, format_preview
from rasterlab.domain import Point
from rasterlab.utils import SceneStats, configure_logging


class TestFormatPreview:
    """Tests for format_preview."""

    def test_rows_are_top_first(self):
        rows = format_preview([Point(0, 0), Point(2, 1)])
        assert rows == ["..#", "#.."]

    def test_offset_points(self):
        rows = format_preview([Point(-5, -5), Point(-4, -5)])
        assert rows == ["##"]

    def test_empty(self):
        assert format_preview([]) == []

    def test_too_wide(self):
        assert format_preview([Point(0, 0), Point(100, 0)]) == []

    def test_too_tall(self):
        assert format_preview([Point(0, 0), Point(0, 10)], max_height=5) == []


class TestFormatTime:
    """Tests for _format_time."""

    def test_milliseconds(self):
        assert _format_time(0.25) == "250ms"

    def test_seconds(self):
        assert _format_time(3.04) == "3.0s"


class TestSceneStats:
    """Tests for SceneStats."""

    def test_duration(self):
        stats = SceneStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == 2.5

    def test_duration_unfinished(self):
        assert SceneStats(start_time=10.0).duration_seconds == 0.0


class TestConfigureLogging:
    """Tests for configure_logging."""

    def _rasterlab_handlers(self) -> list[logging.Handler]:
        return [h for h in logging.getLogger().handlers if h.get_name() == "rasterlab"]

    def test_repeated_calls_do_not_stack_handlers(self):
        configure_logging()
        configure_logging()
        assert len(self._rasterlab_handlers()) == 1

    def test_file_handler_added(self, tmp_path):
        configure_logging(log_file=tmp_path / "run.log")
        handlers = self._rasterlab_handlers()
        assert len(handlers) == 2
        assert any(isinstance(h, logging.FileHandler) for h in handlers)

    def test_quiet_raises_console_level(self):
        configure_logging(console_level="DEBUG", quiet=True)
        (handler,) = self._rasterlab_handlers()
        assert handler.level == logging.ERROR
