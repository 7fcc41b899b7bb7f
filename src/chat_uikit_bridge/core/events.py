"""
Process-wide lifecycle event dispatch.

Asynchronous outcomes (such as opening the chat session) are reported
here instead of being pushed into the UI layer directly. Listeners are
keyed by operation name and outcome, and receive a tagged event whose
``kind`` tells success and error apart:

    >>> def on_open(event: DispatchEvent) -> None:
    ...     if event.kind == "error":
    ...         print("login failed", event.error)
    >>> bus = get_event_bus()
    >>> bus.subscribe("open", Outcome.ERROR, on_open)
"""

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from chat_uikit_bridge.core.logging import get_logger

logger = get_logger("events")

# Operation name used for session open/login outcomes
OPEN = "open"


class Outcome(str, Enum):
    """Outcome channel of an operation."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SuccessEvent:
    """An operation completed successfully.

    Attributes:
        operation: Name of the operation (e.g. ``"open"``).
        payload: Optional result data.
    """

    operation: str
    payload: Any = None
    kind: Literal["success"] = field(default="success", init=False)


@dataclass(frozen=True)
class ErrorEvent:
    """An operation failed.

    Attributes:
        operation: Name of the operation (e.g. ``"open"``).
        error: The underlying error, passed through untouched.
    """

    operation: str
    error: Any
    kind: Literal["error"] = field(default="error", init=False)


DispatchEvent = SuccessEvent | ErrorEvent
Listener = Callable[[DispatchEvent], Any]


class EventDispatchBus:
    """Publish/subscribe registry keyed by ``(operation, outcome)``.

    Dispatch is synchronous and runs listeners in registration order.
    Registering the same listener twice for one key is a no-op, as is
    removing a listener that was never registered. A listener that raises
    is logged and skipped; the remaining listeners still run.

    Example:
        >>> bus = EventDispatchBus()
        >>> bus.subscribe("open", Outcome.SUCCESS, lambda e: print("online"))
        >>> bus.dispatch_success("open")
        online
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._listeners: dict[tuple[str, Outcome], list[Listener]] = defaultdict(list)

    def subscribe(self, operation: str, outcome: Outcome | str, listener: Listener) -> None:
        """Register a listener for an operation outcome.

        Args:
            operation: Operation name to listen to.
            outcome: ``Outcome.SUCCESS`` or ``Outcome.ERROR`` (or their values).
            listener: Callable receiving the dispatched event.
        """
        key = (operation, Outcome(outcome))
        if listener in self._listeners[key]:
            return
        self._listeners[key].append(listener)
        logger.debug("Listener registered", operation=operation, outcome=key[1].value)

    def unsubscribe(self, operation: str, outcome: Outcome | str, listener: Listener) -> None:
        """Remove a listener. Unknown listeners are ignored."""
        key = (operation, Outcome(outcome))
        listeners = self._listeners.get(key)
        if listeners and listener in listeners:
            listeners.remove(listener)
            logger.debug("Listener removed", operation=operation, outcome=key[1].value)

    def listeners(self, operation: str, outcome: Outcome | str) -> list[Listener]:
        """Return a snapshot of the listeners registered for a key."""
        return list(self._listeners.get((operation, Outcome(outcome)), []))

    def dispatch_success(self, operation: str, payload: Any = None) -> None:
        """Notify success listeners of an operation.

        Args:
            operation: Operation name.
            payload: Optional result data for listeners.
        """
        self._dispatch(Outcome.SUCCESS, SuccessEvent(operation=operation, payload=payload))

    def dispatch_error(self, operation: str, error: Any) -> None:
        """Notify error listeners of an operation.

        Args:
            operation: Operation name.
            error: The error that caused the failure.
        """
        self._dispatch(Outcome.ERROR, ErrorEvent(operation=operation, error=error))

    def _dispatch(self, outcome: Outcome, event: DispatchEvent) -> None:
        # Iterate over a copy so listeners may (un)subscribe during dispatch
        listeners = self.listeners(event.operation, outcome)
        logger.debug(
            "Dispatching event",
            operation=event.operation,
            outcome=outcome.value,
            listeners=len(listeners),
        )

        for listener in listeners:
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "Event listener failed",
                    operation=event.operation,
                    outcome=outcome.value,
                )


# Singleton instance
_event_bus: EventDispatchBus | None = None


def get_event_bus() -> EventDispatchBus:
    """Get or create the process-wide event bus.

    Returns:
        The shared EventDispatchBus instance.
    """
    global _event_bus
    if _event_bus is None:
        _event_bus = EventDispatchBus()
    return _event_bus


def reset_event_bus() -> None:
    """Drop the process-wide event bus and all its listeners.

    Useful for testing.
    """
    global _event_bus
    _event_bus = None
    logger.debug("Event bus reset")
