"""Tests for the configuration module."""

import os
from unittest.mock import patch


class TestSettings:
    """Test cases for the Settings class."""

    def test_default_settings(self):
        """Test that default settings are loaded correctly."""
        from chat_uikit_bridge.core.config import Settings

        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.log_file is None
        assert settings.theme_default_hue == 203
        assert settings.theme_saturation == 100
        assert settings.theme_lightness == 60
        assert settings.css_variable_prefix == "--cui-color"
        assert settings.default_language == "en"
        assert settings.max_messages == 200

    def test_settings_from_env(self):
        """Test that settings can be loaded from environment variables."""
        from chat_uikit_bridge.core.config import Settings

        env_vars = {
            "LOG_LEVEL": "DEBUG",
            "LOG_JSON": "true",
            "THEME_DEFAULT_HUE": "120",
            "DEFAULT_LANGUAGE": "zh",
        }

        with patch.dict(os.environ, env_vars, clear=False):
            settings = Settings(_env_file=None)

            assert settings.log_level == "DEBUG"
            assert settings.log_json is True
            assert settings.theme_default_hue == 120
            assert settings.default_language == "zh"


class TestLogging:
    """Test cases for logging setup."""

    def test_get_logger_binds_name(self):
        """Test that a named logger carries its name in extra."""
        from chat_uikit_bridge.core.logging import get_logger

        messages = []
        log = get_logger("session")

        from loguru import logger

        handler_id = logger.add(lambda m: messages.append(m.record["extra"]["name"]))
        try:
            log.info("hello")
        finally:
            logger.remove(handler_id)

        assert messages == ["session"]

    def test_setup_logging_json_output(self, capsys):
        """Test that JSON output serializes records to stderr."""
        from chat_uikit_bridge.core.logging import setup_logging

        configured = setup_logging(level="INFO", json_output=True)
        configured.info("json record")
        configured.remove()

        err = capsys.readouterr().err
        assert '"message": "json record"' in err
        assert '"name": "chat_uikit_bridge"' in err

    def test_setup_logging_masks_credentials(self):
        """Test that token and password extras are masked before reaching a sink."""
        from loguru import logger

        from chat_uikit_bridge.core.logging import get_logger, setup_logging

        captured = []
        setup_logging(level="INFO")
        logger.add(lambda m: captured.append(dict(m.record["extra"])))
        try:
            get_logger("session").bind(token="secret", password="", user="alice").info("open")
        finally:
            logger.remove()

        assert captured[0]["token"] == "***"
        assert captured[0]["password"] == ""
        assert captured[0]["user"] == "alice"
