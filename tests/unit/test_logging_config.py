"""
Unit tests for root logger setup.
"""

import logging

import pytest

import app.main
from app.config.settings import settings
from app.core.logging_config import CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME, setup_logging


@pytest.fixture
def root_logger():
    """Root logger restored to its previous handlers and level afterwards"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestSetupLogging:
    """Console and file handlers on the root logger"""

    def test_log_file_receives_records(self, root_logger, tmp_path):
        log_path = tmp_path / "logs" / "api.log"

        setup_logging("INFO", log_file=str(log_path))
        logging.getLogger("app.modules.hives").info("hive 7 created")
        for handler in root_logger.handlers:
            handler.flush()

        assert "[INFO] app.modules.hives: hive 7 created" in log_path.read_text(encoding="utf-8")

    def test_repeated_setup_does_not_duplicate_handlers(self, root_logger, tmp_path):
        setup_logging("INFO", log_file=str(tmp_path / "api.log"))
        setup_logging("INFO", log_file=str(tmp_path / "api.log"))

        names = [handler.get_name() for handler in root_logger.handlers]
        assert names.count(CONSOLE_HANDLER_NAME) == 1
        assert names.count(FILE_HANDLER_NAME) == 1

    def test_level_name_is_case_insensitive(self, root_logger):
        setup_logging("debug")

        assert root_logger.level == logging.DEBUG

    def test_create_app_passes_log_file_setting(self, monkeypatch):
        calls = []
        monkeypatch.setattr(settings, "log_file", "logs/katlasport.log")
        monkeypatch.setattr(app.main, "setup_logging", lambda *args: calls.append(args))

        app.main.create_app()

        assert calls == [(settings.log_level, "logs/katlasport.log")]
