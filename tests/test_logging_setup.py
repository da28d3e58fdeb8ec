# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskflow.logging_setup import setup_logging


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def test_console_only_by_default(restore_root_logger) -> None:
    setup_logging()
    root = restore_root_logger

    assert len(root.handlers) == 1
    assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)


def test_file_handler_when_log_dir_given(restore_root_logger, tmp_path: Path) -> None:
    setup_logging(log_dir=tmp_path / "logs")
    logging.getLogger("taskflow.test").debug("hello file")
    for h in restore_root_logger.handlers:
        h.flush()

    log_file = tmp_path / "logs" / "taskflow.log"
    assert log_file.exists()
    assert "hello file" in log_file.read_text("utf-8")


def test_console_filter_hides_third_party_noise(restore_root_logger) -> None:
    setup_logging(console_level=logging.DEBUG)
    (console,) = restore_root_logger.handlers

    def record(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert console.filter(record("taskflow.cli.main", logging.INFO))
    assert not console.filter(record("urllib3", logging.WARNING))
    assert console.filter(record("urllib3", logging.ERROR))
