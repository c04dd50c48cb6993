# backend/tests/core/test_config_and_logging.py
import logging

from pathbot.core.config import Settings
from pathbot.core.logging_config import resolve_log_level, setup_logging


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("API_PREFIX", raising=False)
    settings = Settings(_env_file=None)

    assert settings.PORT == 3333
    assert settings.API_PREFIX == "/pathbot"
    assert settings.CORS_ORIGINS == ["*"]


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "4444")

    assert Settings(_env_file=None).PORT == 4444


def test_resolve_log_level():
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level("WARNING") == logging.WARNING
    assert resolve_log_level("chatty") == logging.INFO


def test_setup_logging_does_not_stack_handlers():
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    try:
        setup_logging("DEBUG")
        setup_logging("DEBUG")

        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.DEBUG
    finally:
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)


def test_log_level_comes_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.LOG_LEVEL == "debug"
    assert resolve_log_level(settings.LOG_LEVEL) == logging.DEBUG
