"""Tests for package logging setup."""

import io
import logging

import pytest

from point_struct import Point
from point_struct.config import Settings
from point_struct.log import PACKAGE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Restore the package logger after each test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers


class TestSetupLogging:
    def test_sets_level(self):
        logger = setup_logging(Settings(log_level="debug"), stream=io.StringIO())
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logging(Settings(log_level="verbose"), stream=io.StringIO())
        assert logger.level == logging.INFO

    def test_non_level_attribute_falls_back_to_info(self):
        logger = setup_logging(Settings(log_level="basic_format"), stream=io.StringIO())
        assert logger.level == logging.INFO

    def test_repeat_calls_replace_handler(self):
        setup_logging(Settings(log_level="info"), stream=io.StringIO())
        logger = setup_logging(Settings(log_level="info"), stream=io.StringIO())
        owned = [h for h in logger.handlers if h.get_name() == PACKAGE_LOGGER]
        assert len(owned) == 1

    def test_leaves_root_logger_alone(self):
        root_handlers = list(logging.getLogger().handlers)
        setup_logging(Settings(log_level="debug"), stream=io.StringIO())
        assert logging.getLogger().handlers == root_handlers

    def test_neighbor_search_is_logged(self):
        stream = io.StringIO()
        setup_logging(Settings(log_level="debug"), stream=stream)
        Point(0, 0).get_neighbors(1, [Point(1, 0), Point(5, 5)])
        output = stream.getvalue()
        assert "point_struct.geometry" in output
        assert "Found 1 neighbors of (0,0) within distance 1" in output

    def test_queries_quiet_at_default_level(self):
        stream = io.StringIO()
        setup_logging(Settings(log_level="warning"), stream=stream)
        Point(0, 0).get_neighbors(1, [Point(1, 0)])
        Point.try_parse("bad")
        assert stream.getvalue() == ""
