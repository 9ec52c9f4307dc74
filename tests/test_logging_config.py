"""Tests for logging setup."""

import logging
import sys

import pytest

from graph_relax.logging_config import setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("graph_relax")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    def test_console_handler(self):
        logger = setup_logging(logging.DEBUG)
        assert logger.name == "graph_relax"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_console_goes_to_stderr(self):
        """stdout is left for the metric report."""
        logger = setup_logging()
        assert logger.handlers[0].stream is sys.stderr

    def test_repeated_setup_does_not_duplicate(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(logging.INFO, str(log_file))
        logging.getLogger("graph_relax.pipeline").info("relaxed")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "graph_relax.pipeline - INFO - relaxed" in log_file.read_text()
