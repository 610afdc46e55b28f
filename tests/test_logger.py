# File: tests/test_logger.py
import logging

from robots_txt.logger import LOGGER_NAME, configure, get_logger, logger


def test_get_logger_returns_children():
    assert get_logger() is logger
    assert get_logger("parser").name == f"{LOGGER_NAME}.parser"
    assert get_logger("parser").parent is logger


def test_configure_writes_log_file(tmp_path):
    log_file = tmp_path / "robots.log"
    configure(level="DEBUG", log_file=log_file, log_format="%(name)s:%(message)s")
    get_logger("fetcher").debug("fetched %d bytes", 42)
    for handler in logger.handlers:
        handler.flush()
    assert log_file.read_text(encoding="utf-8").strip() == f"{LOGGER_NAME}.fetcher:fetched 42 bytes"


def test_configure_replaces_handlers():
    configure(level="INFO")
    configure(level="ERROR")
    assert len(logger.handlers) == 1
    assert logger.level == logging.ERROR
    assert not logger.propagate
