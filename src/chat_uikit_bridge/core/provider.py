"""
Chat provider composition.

``ChatProvider.render`` takes the host's provider props and wires the
bridge together: connection parameters, the messaging client, the root
store, translations, the session bootstrap and the theme palette. The
result is an immutable ``ProviderContext`` for the UI layer.

Rendering again with new props only redoes the parts whose inputs
changed: the client is rebuilt when ``appKey``/``appId`` change, the
session is reopened when ``userId``/``token`` change, and the palette is
regenerated when the theme seed changes.
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from chat_uikit_bridge.core.connection import build_connection_parameters
from chat_uikit_bridge.core.events import EventDispatchBus, get_event_bus
from chat_uikit_bridge.core.locale import LocaleSettings, resolve_locale
from chat_uikit_bridge.core.logging import get_logger
from chat_uikit_bridge.core.models import (
    ConnectionParameters,
    InitConfig,
    ProviderProps,
    ThemeConfig,
)
from chat_uikit_bridge.core.session import ChatClient, Credentials, SessionBootstrap
from chat_uikit_bridge.core.store import RootStore, get_root_store
from chat_uikit_bridge.core.theme import Palette, ThemePaletteGenerator, ThemeState

logger = get_logger("provider")

ClientFactory = Callable[[ConnectionParameters], ChatClient]

_UNSET = object()

# Presence status -> icon asset name, used when the host supplies no map
DEFAULT_PRESENCE_MAP: dict[str, str] = {
    "Online": "presence/Online2.png",
    "Offline": "presence/Offline2.png",
    "Away": "presence/leave2.png",
    "Busy": "presence/Busy2.png",
    "Do Not Disturb": "presence/Do_not_Disturb2.png",
    "Custom": "presence/custom2.png",
}


@dataclass(frozen=True)
class ProviderContext:
    """Snapshot handed to the UI layer after a render.

    Attributes:
        store: Process-wide session state.
        init_config: Validated init config.
        client: Messaging client handle.
        connection_parameters: Parameters the client was built with.
        palette: Current theme palette.
        locale: Resolved translation setup.
        theme: Raw theme config.
        features: Feature switches, passed through.
        reaction_config: Reaction config, passed through.
        presence_map: Presence icon map, or DEFAULT_PRESENCE_MAP.
    """

    store: RootStore
    init_config: InitConfig
    client: Any
    connection_parameters: ConnectionParameters
    palette: Palette
    locale: LocaleSettings
    theme: ThemeConfig | None = None
    features: dict[str, Any] | None = None
    reaction_config: dict[str, Any] | None = None
    presence_map: dict[str, Any] | None = None


class ChatProvider:
    """Composes the bridge from provider props.

    Example:
        >>> provider = ChatProvider(lambda params: SdkConnection(params.to_options()))
        >>> context = provider.render({"initConfig": {"appKey": "org#app"}})
    """

    def __init__(
        self,
        client_factory: ClientFactory,
        *,
        bus: EventDispatchBus | None = None,
        store: RootStore | None = None,
        theme_state: ThemeState | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            client_factory: Builds the messaging client from connection parameters.
            bus: Event bus for session outcomes. Defaults to the process-wide bus.
            store: Session state. Defaults to the process-wide root store.
            theme_state: Theme state. Defaults to the process-wide theme state.
            loop: Event loop for session opens when render is called outside
                a running loop, e.g. a loop running in a background thread.
        """
        self.client_factory = client_factory
        self.bus = bus or get_event_bus()
        self.store = store or get_root_store()
        self.theme = ThemePaletteGenerator(theme_state)
        self.loop = loop

        self._identity_key: Any = _UNSET
        self._seed: Any = _UNSET
        self._client: Any = None
        self._parameters: ConnectionParameters | None = None
        self._session: SessionBootstrap | None = None

    @property
    def session(self) -> SessionBootstrap | None:
        """Session bootstrap of the current client."""
        return self._session

    def render(self, props: ProviderProps | dict[str, Any]) -> ProviderContext:
        """Apply provider props and return the context snapshot.

        The session open is scheduled on the running event loop, or on
        ``loop`` when called outside one. With neither, the open is skipped
        and retried on the next render.

        Args:
            props: Provider props, as a model or a host-shaped dict.

        Returns:
            Immutable context for the UI layer.

        Raises:
            pydantic.ValidationError: If the props are invalid, e.g. no
                appKey or appId is given.
        """
        if not isinstance(props, ProviderProps):
            props = ProviderProps.model_validate(props)
        config = props.init_config

        self._ensure_client(config)
        self.store.set_client(self._client)
        self.store.set_init_config(config)
        self.store.set_connection_parameters(self._parameters)

        locale = resolve_locale(props.local)

        self._session.bootstrap(
            Credentials(user_id=config.user_id, token=config.token, password=config.password)
        )

        palette = self._ensure_palette(props.theme)

        return ProviderContext(
            store=self.store,
            init_config=config,
            client=self._client,
            connection_parameters=self._parameters,
            palette=palette,
            locale=locale,
            theme=props.theme,
            features=props.features,
            reaction_config=props.reaction_config,
            presence_map=props.presence_map or DEFAULT_PRESENCE_MAP,
        )

    def _ensure_client(self, config: InitConfig) -> None:
        identity_key = (config.app_key, config.app_id)
        if identity_key == self._identity_key:
            return

        self._parameters = build_connection_parameters(config)
        self._client = self.client_factory(self._parameters)
        self._identity_key = identity_key
        logger.info(
            "Messaging client created",
            app_key=config.app_key,
            app_id=None if config.app_key else config.app_id,
        )

        # Keep the bootstrap (and its last credentials) across client changes
        if self._session is None:
            self._session = SessionBootstrap(self._client, bus=self.bus, loop=self.loop)
        else:
            self._session.client = self._client

    def _ensure_palette(self, theme: ThemeConfig | None) -> Palette:
        seed = theme.primary_color if theme else None
        if seed == self._seed and self.theme.state.palette is not None:
            return self.theme.state.palette

        self._seed = seed
        return self.theme.generate(seed)
