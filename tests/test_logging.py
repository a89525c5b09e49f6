import logging
from unittest.mock import patch

from billed.logging import NOISY_LOGGERS, TEXT_FORMAT, configure_logging, reconfigure


def _configure(level="INFO", json_output=False, /, **kwargs):
    with patch("billed.logging.settings") as mock_settings:
        mock_settings.log_level = level
        mock_settings.log_json = json_output
        configure_logging(**kwargs)


class TestConfigureLogging:
    def test_text_format(self):
        _configure("debug")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == TEXT_FORMAT

    def test_json_format(self):
        _configure(json_output=True)

        root = logging.getLogger()
        assert len(root.handlers) == 1
        from pythonjsonlogger.json import JsonFormatter

        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_unknown_level_falls_back_to_info(self):
        _configure("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_arguments_override_settings(self):
        _configure("INFO", False, level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_client_libraries_are_quieted(self):
        _configure("INFO")
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_client_libraries_follow_debug(self):
        _configure("DEBUG")
        assert logging.getLogger("httpx").level == logging.DEBUG


class TestReconfigure:
    def test_restores_handler_after_override(self):
        _configure("INFO", False, level="error")
        logging.getLogger().handlers.clear()
        logging.getLogger().setLevel(logging.NOTSET)

        reconfigure()

        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert len(root.handlers) == 1
