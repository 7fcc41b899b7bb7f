"""
Process-wide session state.

Holds the client handle, the raw init config and the connection
parameters the client was built from. Each setter replaces the previous
value.
"""

from typing import Any

from chat_uikit_bridge.core.models import ConnectionParameters, InitConfig


class RootStore:
    """Shared session state read by UI collaborators.

    Attributes:
        client: Messaging client handle, or None before the first render.
        init_config: Init config of the latest render.
        connection_parameters: Parameters the current client was built with.
    """

    def __init__(self) -> None:
        self.client: Any = None
        self.init_config: InitConfig | None = None
        self.connection_parameters: ConnectionParameters | None = None

    def set_client(self, client: Any) -> None:
        self.client = client

    def set_init_config(self, init_config: InitConfig) -> None:
        self.init_config = init_config

    def set_connection_parameters(self, parameters: ConnectionParameters) -> None:
        self.connection_parameters = parameters


# Singleton instance
_root_store: RootStore | None = None


def get_root_store() -> RootStore:
    """Get or create the process-wide root store."""
    global _root_store
    if _root_store is None:
        _root_store = RootStore()
    return _root_store


def reset_root_store() -> None:
    """Drop the process-wide root store.

    Useful for testing.
    """
    global _root_store
    _root_store = None
