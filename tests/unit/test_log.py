"""Unit tests for logging setup."""
import logging
from rich.logging import RichHandler
from msvcfilt.utils.log import LOGGER_NAME, parse_level, setup_logging


class TestParseLevel:

    def test_names(self):
        assert parse_level("debug") == logging.DEBUG
        assert parse_level("ERROR") == logging.ERROR

    def test_int_passthrough(self):
        assert parse_level(logging.INFO) == logging.INFO

    def test_unknown_falls_back_to_warning(self):
        assert parse_level("chatty") == logging.WARNING
        assert parse_level(None) == logging.WARNING


class TestSetupLogging:

    def test_stderr_handler_by_default(self):
        logger = setup_logging("INFO")
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "msvcfilt.log"
        logger = setup_logging("DEBUG", str(log_file))
        assert isinstance(logger.handlers[0], logging.FileHandler)

        logging.getLogger("msvcfilt.resolver.handler").debug("hello from the handler")
        logger.handlers[0].flush()
        assert "hello from the handler" in log_file.read_text()

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1
