"""
Credential-driven chat session bootstrap.

Opens the user session on the external messaging client once credentials
are available and reports the outcome on the event bus under ``"open"``.
The open call is fire-and-forget: failures never propagate to the caller,
and a newer bootstrap does not cancel an older in-flight attempt.
"""

import asyncio
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Protocol

from chat_uikit_bridge.core.events import OPEN, EventDispatchBus, get_event_bus
from chat_uikit_bridge.core.logging import get_logger

logger = get_logger("session")


class ChatClient(Protocol):
    """The part of the external messaging client the bridge drives."""

    async def open(self, options: dict[str, Any]) -> Any: ...


@dataclass(frozen=True)
class Credentials:
    """User credentials taken from the init config.

    Attributes:
        user_id: User to log in as.
        token: Auth token.
        password: Password.
    """

    user_id: str | None = None
    token: str | None = None
    password: str | None = None

    @property
    def trigger_key(self) -> tuple[str | None, str | None]:
        """Values whose change re-runs the bootstrap (password excluded)."""
        return (self.user_id, self.token)


@dataclass(frozen=True)
class OpenRequest:
    """A resolved login request for the messaging client.

    Attributes:
        user: User name as sent to the client.
        token: Token for token mode.
        password: Password for password mode.
    """

    user: str
    token: str | None = None
    password: str | None = None

    @property
    def mode(self) -> str:
        return "token" if self.token else "password"

    def to_options(self) -> dict[str, str]:
        """Return the options dict for ``client.open``."""
        if self.token:
            return {"user": self.user, "agoraToken": self.token}
        return {"user": self.user, "pwd": self.password or ""}


def _token_mode(credentials: Credentials) -> OpenRequest | None:
    if credentials.user_id and credentials.token:
        return OpenRequest(user=credentials.user_id.lower(), token=credentials.token)
    return None


def _password_mode(credentials: Credentials) -> OpenRequest | None:
    if credentials.user_id and credentials.password:
        return OpenRequest(user=credentials.user_id, password=credentials.password)
    return None


# Checked in order; first match wins
CREDENTIAL_MODES: tuple[Callable[[Credentials], OpenRequest | None], ...] = (
    _token_mode,
    _password_mode,
)


def select_open_request(credentials: Credentials) -> OpenRequest | None:
    """Pick the login mode for a set of credentials.

    Token mode (user id lower-cased) is tried before password mode (user
    id used verbatim). Returns None when neither mode has what it needs.

    Example:
        >>> select_open_request(Credentials(user_id="Alice", token="T")).user
        'alice'
    """
    for mode in CREDENTIAL_MODES:
        request = mode(credentials)
        if request is not None:
            return request
    return None


_UNSET = object()


class SessionBootstrap:
    """Opens the chat session whenever the user id or token changes.

    Attempts are scheduled on the running event loop. Synchronous hosts
    (e.g. a Streamlit script) can pass a ``loop`` running in another
    thread; attempts are then submitted to it thread-safely.

    Attributes:
        client: External messaging client handle.
        bus: Event bus receiving the ``"open"`` outcome.
        loop: Fallback loop used when no loop runs in the calling thread.

    Example:
        >>> bootstrap = SessionBootstrap(client)
        >>> task = bootstrap.bootstrap(Credentials(user_id="alice", token="T"))
    """

    def __init__(
        self,
        client: ChatClient,
        bus: EventDispatchBus | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        """Initialize the bootstrap for a client.

        Args:
            client: Messaging client exposing an async ``open(options)``.
            bus: Event bus for outcomes. Defaults to the process-wide bus.
            loop: Loop for attempts started outside a running loop.
        """
        self.client = client
        self.bus = bus or get_event_bus()
        self.loop = loop
        self._last_key: Any = _UNSET
        self._pending: set[asyncio.Task | Future] = set()

    @property
    def pending(self) -> set[asyncio.Task | Future]:
        """Open attempts that have not finished yet."""
        return set(self._pending)

    def bootstrap(self, credentials: Credentials) -> asyncio.Task | Future | None:
        """Start a session open attempt if the credentials changed.

        The attempt runs in the background against the client set at call
        time; its outcome is only reported on the bus. Never raises.

        Args:
            credentials: Current user credentials.

        Returns:
            The background task (or a ``concurrent.futures.Future`` when
            submitted to ``loop`` from another thread), or None when nothing
            was started: the user id and token are unchanged, no login mode
            applies, or no event loop is available. In the last case the
            credentials are not recorded, so the next call retries.
        """
        key = credentials.trigger_key
        if key == self._last_key:
            return None

        request = select_open_request(credentials)
        if request is None:
            self._last_key = key
            logger.debug("No usable credentials, skipping session open")
            return None

        try:
            running_loop = asyncio.get_running_loop()
        except RuntimeError:
            running_loop = None

        if running_loop is None and (self.loop is None or not self.loop.is_running()):
            logger.warning("No running event loop, session open deferred", user=request.user)
            return None

        self._last_key = key
        attempt = self.open_session(request, self.client)
        if running_loop is not None:
            task = running_loop.create_task(attempt)
        else:
            task = asyncio.run_coroutine_threadsafe(attempt, self.loop)

        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def open_session(self, request: OpenRequest, client: ChatClient | None = None) -> None:
        """Open the session and dispatch the outcome.

        Never raises for a failed open; the error is dispatched instead.

        Args:
            request: Resolved login request.
            client: Client to open. Defaults to the current ``client``.
        """
        if client is None:
            client = self.client
        logger.info("Opening chat session", user=request.user, mode=request.mode)

        try:
            await client.open(request.to_options())
        except Exception as e:
            logger.warning("Chat session open failed", user=request.user, error=str(e))
            self.bus.dispatch_error(OPEN, e)
            return

        logger.info("Chat session opened", user=request.user)
        self.bus.dispatch_success(OPEN)
