"""
Tests for logging setup.
"""

import logging

import pytest

from chromaspace.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    """Leave the package logger as it was."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


class TestSetupLogging:

    def test_sets_level(self):
        logger = setup_logging("debug")
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.DEBUG

    def test_repeated_calls_do_not_duplicate_handlers(self):
        logger = setup_logging("INFO")
        count = len(logger.handlers)
        setup_logging("INFO")
        assert len(logger.handlers) == count

    def test_log_file(self, tmp_path):
        path = tmp_path / "logs" / "chromaspace.log"
        setup_logging("INFO", log_file=path)

        logging.getLogger("chromaspace.core.collection").info("hello")
        for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
            handler.flush()

        assert "hello" in path.read_text(encoding="utf-8")

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging("LOUD")

