"""Shared pytest fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def detach_log_handlers():
    """Remove the log handlers installed by configure_logging during a test."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == "rasterlab":
            root.removeHandler(handler)
            handler.close()
