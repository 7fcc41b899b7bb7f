"""
Core module for the chat UIKit bridge.

Provides connection parameter building, session bootstrap, the lifecycle
event bus, theme palette generation and provider composition.
"""

from chat_uikit_bridge.core.config import settings
from chat_uikit_bridge.core.connection import build_connection_parameters
from chat_uikit_bridge.core.events import (
    OPEN,
    ErrorEvent,
    EventDispatchBus,
    Outcome,
    SuccessEvent,
    get_event_bus,
)
from chat_uikit_bridge.core.logging import get_logger, setup_logging
from chat_uikit_bridge.core.provider import ChatProvider, ProviderContext
from chat_uikit_bridge.core.session import Credentials, SessionBootstrap
from chat_uikit_bridge.core.theme import Palette, ThemePaletteGenerator, generate_palette

__all__ = [
    "settings",
    "setup_logging",
    "get_logger",
    "build_connection_parameters",
    "OPEN",
    "Outcome",
    "SuccessEvent",
    "ErrorEvent",
    "EventDispatchBus",
    "get_event_bus",
    "Credentials",
    "SessionBootstrap",
    "Palette",
    "ThemePaletteGenerator",
    "generate_palette",
    "ChatProvider",
    "ProviderContext",
]
