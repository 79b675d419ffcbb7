"""Tests for log file configuration."""

import logging
from unittest.mock import patch

import pytest

from editr.logging_config import configure_logging


@pytest.fixture
def editr_logger():
    logger = logging.getLogger("editr")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_log_file_created_lazily(tmp_path, editr_logger):
    with patch('platformdirs.user_log_dir', return_value=str(tmp_path / "logs")):
        handler = configure_logging("debug")
    assert isinstance(handler, logging.FileHandler)
    assert editr_logger.level == logging.DEBUG
    log_file = tmp_path / "logs" / "editr.log"
    assert not log_file.exists()

    logging.getLogger("editr.document").debug("opened %s", "notes.txt")
    handler.flush()
    assert "opened notes.txt" in log_file.read_text(encoding="utf-8")


def test_level_from_environment(tmp_path, editr_logger, monkeypatch):
    monkeypatch.setenv("EDITR_LOG_LEVEL", "info")
    with patch('platformdirs.user_log_dir', return_value=str(tmp_path)):
        configure_logging()
    assert editr_logger.level == logging.INFO


def test_default_level_is_warning(tmp_path, editr_logger, monkeypatch):
    monkeypatch.delenv("EDITR_LOG_LEVEL", raising=False)
    with patch('platformdirs.user_log_dir', return_value=str(tmp_path)):
        configure_logging()
    assert editr_logger.level == logging.WARNING


def test_unusable_log_directory_falls_back_to_null_handler(tmp_path, editr_logger):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    with patch('platformdirs.user_log_dir', return_value=str(blocker / "logs")):
        handler = configure_logging()
    assert isinstance(handler, logging.NullHandler)
