"""Tests for logging configuration."""

import logging

import pytest

from robot_canvas.utils.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_log_dir_gets_a_log_file(tmp_path, restore_root_logger):
    log_dir = tmp_path / "logs"

    setup_logging(log_dir=log_dir, log_level="DEBUG")
    logging.getLogger("robot_canvas.planner").info("planner ready")
    for handler in logging.getLogger().handlers:
        handler.flush()

    log_file = log_dir / "robot_canvas.log"
    assert log_file.exists()
    assert "robot_canvas.planner - INFO - planner ready" in log_file.read_text()


def test_without_log_dir_only_streams(restore_root_logger):
    setup_logging(log_level=logging.WARNING)

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
