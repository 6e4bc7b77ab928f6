"""Tests for logging utilities."""

import logging
from io import StringIO

from adjgraph.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a namespaced logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "adjgraph.test_module"


def test_get_logger_keeps_package_names():
    """Test that module names inside the package are not re-prefixed."""
    assert get_logger("adjgraph.graphs.closure").name == "adjgraph.graphs.closure"
    assert get_logger().name == "adjgraph"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level():
    """Test that set_log_level updates logger levels."""
    logger = get_logger("test_module")

    set_log_level(logging.INFO)
    assert logger.level == logging.INFO

    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")

    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG

    set_log_level("ERROR")
    assert logger.level == logging.ERROR

    set_log_level("WARNING")


def test_configure_logging():
    """Test configure_logging redirects output."""
    stream = StringIO()
    logger = get_logger("test_module")
    configure_logging(level=logging.DEBUG, stream=stream)
    try:
        logger.debug("Debug message")
    finally:
        configure_logging(level=logging.WARNING)

    output = stream.getvalue()
    assert "Debug message" in output
    assert "[DEBUG] adjgraph.test_module" in output


def test_algorithms_log_at_debug(factory):
    """Test that graph algorithms emit debug records."""
    g = factory(True, 4)
    g.add_node("u")
    g.add_node("v")
    g.add_edge(0, 1)

    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    try:
        g.shortest_path_weights()
    finally:
        configure_logging(level=logging.WARNING)

    assert "floyd_warshall: relaxed 2 nodes" in stream.getvalue()


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False
