"""
Centralized logging configuration using loguru.

Every bridge module logs through ``get_logger`` so the host application
can route provider, session and theme output with one ``setup_logging`` call.
Credential values bound to a record (token, password) are masked.
"""

import sys
from typing import Any

from loguru import logger

# Record extras that carry login secrets
SECRET_FIELDS = frozenset({"token", "password", "pwd", "agoraToken"})
REDACTED = "***"


def redact_secrets(record: dict[str, Any]) -> None:
    """Mask credential values in a record's extra fields."""
    extra = record["extra"]
    for key in SECRET_FIELDS.intersection(extra):
        if extra[key]:
            extra[key] = REDACTED


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: str | None = None,
) -> Any:
    """Configure loguru for the bridge.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: If True, output logs as JSON records.
        log_file: Optional file path for log output with rotation.

    Returns:
        Configured logger instance.

    Example:
        >>> setup_logging(level="DEBUG")
        >>> get_logger("session").info("Opening chat session")
    """
    logger.remove()
    logger.configure(extra={"name": "chat_uikit_bridge"}, patcher=redact_secrets)

    human_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[name]}</cyan> - "
        "<level>{message}</level>"
    )

    if json_output:
        logger.add(
            sys.stderr,
            level=level,
            format="{message}",
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            level=level,
            format=human_format,
            colorize=True,
        )

    if log_file:
        logger.add(
            log_file,
            level=level,
            format=human_format if not json_output else "{message}",
            serialize=json_output,
            rotation="10 MB",
            retention="7 days",
            compression="gz",
        )

    return logger


def get_logger(name: str | None = None) -> Any:
    """Get a logger instance, optionally bound to a specific name.

    Args:
        name: Optional name to bind to the logger for context.

    Returns:
        Logger instance, optionally bound to the given name.

    Example:
        >>> log = get_logger("events")
        >>> log.debug("Listener registered", operation="open")
    """
    if name:
        return logger.bind(name=name)
    return logger
