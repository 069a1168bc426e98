"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from dinicflow.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("dinicflow.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()

    logger.removeHandler(handler)


def test_global_level_propagates_to_children():
    parent = get_logger("dinicflow.algorithms")
    child = get_logger("dinicflow.algorithms.dinic")

    set_global_log_level(logging.WARNING)
    assert parent.getEffectiveLevel() == logging.WARNING
    assert child.getEffectiveLevel() == logging.WARNING

    late = get_logger("dinicflow.io")
    assert late.getEffectiveLevel() == logging.WARNING


def test_setup_is_idempotent():
    setup_root_logger()
    setup_root_logger()
    assert len(logging.getLogger("dinicflow").handlers) == 1


def test_custom_handler_and_format():
    capture = StringIO()
    setup_root_logger(
        level=logging.DEBUG,
        format_string="%(levelname)s|%(message)s",
        handler=logging.StreamHandler(capture),
    )
    get_logger("dinicflow.custom").debug("hello")
    assert capture.getvalue() == "DEBUG|hello\n"


def test_reset_clears_handlers():
    setup_root_logger()
    reset_logging()
    root = logging.getLogger("dinicflow")
    assert root.handlers == []
    assert root.level == logging.NOTSET
