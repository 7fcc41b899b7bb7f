"""
Configuration management using pydantic-settings.

Loads bridge settings from environment variables and .env file.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Bridge settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = False
    log_file: str | None = None

    # Theme generation
    theme_default_hue: int = 203
    theme_saturation: int = 100
    theme_lightness: int = 60
    css_variable_prefix: str = "--cui-color"

    # Localization
    default_language: str = "en"

    # Conversation display
    max_messages: int = 200


# Global settings instance
settings = Settings()
