"""Unit tests for logging setup."""

import logging

from tasklist.logs import get_logger, setup_logging


class TestSetupLogging:
    """Test handler configuration."""

    def _console(self, logger):
        return next(h for h in logger.handlers if not isinstance(h, logging.FileHandler))

    def test_default_level_and_log_file(self, tmp_path):
        """Console defaults to WARNING; the file gets everything."""
        logger = setup_logging()
        assert self._console(logger).level == logging.WARNING
        assert not logger.propagate

        get_logger("test").debug("hello file")
        for handler in logger.handlers:
            handler.flush()
        assert "hello file" in (tmp_path / "logs" / "tasklist.log").read_text()

    def test_environment_precedence(self, monkeypatch):
        """TASKLIST_DEBUG beats TASKLIST_LOG_LEVEL, which beats the argument."""
        assert self._console(setup_logging("info")).level == logging.INFO

        monkeypatch.setenv("TASKLIST_LOG_LEVEL", "error")
        assert self._console(setup_logging("info")).level == logging.ERROR

        monkeypatch.setenv("TASKLIST_DEBUG", "1")
        assert self._console(setup_logging("info")).level == logging.DEBUG

    def test_get_logger_namespace(self):
        assert get_logger("store").name == "tasklist.store"
        assert get_logger().name == "tasklist"
