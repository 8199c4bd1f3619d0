"""Tests for graphwalk logger setup and engine debug records."""

import logging
from io import StringIO

import pytest

from graphwalk import (
    WALK_CONFIG,
    Walker,
    detect_cycle_from,
    shortest_paths_from,
    unweighted_shortest_paths_from,
)
from graphwalk.logging import (
    ROOT_LOGGER_NAME,
    get_logger,
    log_progress,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Put back the graphwalk logger's handlers and level after each test."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = list(root_logger.handlers), root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def capture():
    """Install a capturing handler on the graphwalk logger at DEBUG."""
    stream = StringIO()
    setup_root_logger(
        level=logging.DEBUG,
        format_string="%(name)s|%(levelname)s|%(message)s",
        handler=logging.StreamHandler(stream),
    )
    return stream


def test_setup_replaces_handler():
    first, second = StringIO(), StringIO()
    setup_root_logger(handler=logging.StreamHandler(first))
    setup_root_logger(level=logging.WARNING, handler=logging.StreamHandler(second))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.WARNING

    get_logger("graphwalk.test.replace").warning("only once")
    assert first.getvalue() == ""
    assert second.getvalue().count("only once") == 1


def test_custom_format_string_applied():
    capture = StringIO()
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(format_string=fmt, handler=logging.StreamHandler(capture))

    get_logger("graphwalk.test.format").info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:graphwalk.test.format" in out
    assert "MSG:hello" in out


def test_get_logger_configures_unconfigured_root():
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()

    logger = get_logger("graphwalk.test.lazy")
    assert len(root_logger.handlers) == 1
    assert logger.parent is root_logger
    assert logger.getEffectiveLevel() == logging.INFO


def test_nothing_logged_above_debug_by_default():
    stream = StringIO()
    setup_root_logger(handler=logging.StreamHandler(stream))
    list(Walker.in_graph({"a": ["b"]}.get).pre_order_from("a"))
    list(shortest_paths_from("a", {"a": {"b": 1}}.get))
    assert stream.getvalue() == ""


class TestLogProgress:
    def test_passes_items_through(self, monkeypatch):
        monkeypatch.setattr(WALK_CONFIG, "progress_log_interval", 1)
        logger = get_logger("graphwalk.test.progress")
        assert list(log_progress(iter("abc"), logger, "letters")) == ["a", "b", "c"]

    def test_records_at_interval(self, capture, monkeypatch):
        monkeypatch.setattr(WALK_CONFIG, "progress_log_interval", 3)
        logger = get_logger("graphwalk.test.progress")
        list(log_progress(range(7), logger, "numbers", "values"))

        out = capture.getvalue()
        assert "graphwalk.test.progress|DEBUG|numbers: 3 values so far" in out
        assert "numbers: 6 values so far" in out
        assert "numbers: 7" not in out

    def test_zero_interval_disables(self, capture, monkeypatch):
        monkeypatch.setattr(WALK_CONFIG, "progress_log_interval", 0)
        list(log_progress(range(50), get_logger("graphwalk.test.progress"), "x"))
        assert capture.getvalue() == ""

    def test_lazy(self, monkeypatch):
        monkeypatch.setattr(WALK_CONFIG, "progress_log_interval", 1)
        pulled = []

        def source():
            for i in range(3):
                pulled.append(i)
                yield i

        items = log_progress(source(), get_logger("graphwalk.test.progress"), "x")
        assert pulled == []
        assert next(items) == 0
        assert pulled == [0]


def test_traversal_start_logged_at_debug(capture):
    walker = Walker.in_graph({"a": ["b"]}.get)
    list(walker.post_order_from("a"))

    out = capture.getvalue()
    assert "graphwalk.algorithms.traversal|DEBUG|" in out
    assert "Starting post_order traversal from 1 start node(s)" in out


def test_traversal_progress_logged_at_interval(capture, monkeypatch):
    monkeypatch.setattr(WALK_CONFIG, "progress_log_interval", 2)
    walker = Walker.in_graph(lambda n: [n + 1] if n < 5 else None)
    assert list(walker.pre_order_from(1)) == [1, 2, 3, 4, 5]

    out = capture.getvalue()
    assert "pre_order traversal: 2 nodes so far" in out
    assert "pre_order traversal: 4 nodes so far" in out
    assert "5 nodes so far" not in out


def test_spf_progress_and_summary_logged(capture, monkeypatch):
    monkeypatch.setattr(WALK_CONFIG, "progress_log_interval", 2)
    list(shortest_paths_from("A", {"A": {"B": 1, "C": 4}, "B": {"C": 1}}.get))

    out = capture.getvalue()
    assert "graphwalk.algorithms.spf|DEBUG|SPF from 'A': 2 paths so far" in out
    assert "SPF from 'A' settled 3 nodes" in out


def test_bfs_progress_logged(capture, monkeypatch):
    monkeypatch.setattr(WALK_CONFIG, "progress_log_interval", 2)
    list(unweighted_shortest_paths_from("A", {"A": ["B", "C"]}.get))
    out = capture.getvalue()
    assert "graphwalk.algorithms.bfs|DEBUG|BFS from 'A': 2 paths so far" in out


def test_cycle_detection_logged(capture):
    detect_cycle_from("A", {"A": ["B"], "B": ["A"]}.get)
    assert "Cycle detected from 'A': 3 nodes" in capture.getvalue()
