"""
Pytest fixtures and configuration for the test suite.

Provides isolated event bus, theme and store instances, mocked
messaging clients and sample host configuration.
"""

from collections.abc import Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from chat_uikit_bridge.core.events import EventDispatchBus, reset_event_bus
from chat_uikit_bridge.core.store import RootStore, reset_root_store
from chat_uikit_bridge.core.theme import ThemeState, reset_theme_state


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    """Reset process-wide singletons around each test."""
    reset_event_bus()
    reset_theme_state()
    reset_root_store()
    yield
    reset_event_bus()
    reset_theme_state()
    reset_root_store()


@pytest.fixture
def bus() -> EventDispatchBus:
    """Create an isolated event bus."""
    return EventDispatchBus()


@pytest.fixture
def theme_state() -> ThemeState:
    """Create an empty theme state."""
    return ThemeState()


@pytest.fixture
def store() -> RootStore:
    """Create an empty root store."""
    return RootStore()


@pytest.fixture
def mock_chat_client() -> MagicMock:
    """Create a mock messaging client whose open call succeeds.

    Returns:
        Mock client with an async ``open``.
    """
    client = MagicMock()
    client.open = AsyncMock(return_value=None)
    return client


@pytest.fixture
def failing_chat_client() -> MagicMock:
    """Create a mock messaging client whose open call rejects.

    Returns:
        Mock client raising from ``open``.
    """
    client = MagicMock()
    client.open = AsyncMock(side_effect=ConnectionError("invalid token"))
    return client


@pytest.fixture
def recorder() -> Any:
    """Create a listener that records the events it receives."""

    class Recorder:
        def __init__(self) -> None:
            self.events: list = []

        def __call__(self, event) -> None:
            self.events.append(event)

    return Recorder()


@pytest.fixture
def sample_init_config() -> dict[str, Any]:
    """Create a host-shaped init config with token credentials.

    Returns:
        Dictionary with camelCase keys as the host sends them.
    """
    return {
        "appKey": "easemob#demo",
        "userId": "Alice",
        "token": "T",
        "msyncUrl": "wss://msync.example.com/websocket",
        "restUrl": "https://rest.example.com",
        "deviceId": "device-1",
    }


@pytest.fixture
def sample_props(sample_init_config: dict[str, Any]) -> dict[str, Any]:
    """Create host-shaped provider props.

    Returns:
        Dictionary representing provider props.
    """
    return {
        "initConfig": sample_init_config,
        "theme": {"primaryColor": "#1E90FF", "mode": "light"},
        "features": {"chat": {"header": {"threadList": True}}},
    }
