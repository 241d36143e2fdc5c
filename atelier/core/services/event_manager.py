"""
event_manager.py
----------------
Event-driven system for decoupled orchestration communication.
Lets coordinators, the camera engine and observers (UI, audio) talk
without direct dependencies.

The EventManager is owned by the GameContext and injected into every
component; there is no global instance.
"""

from dataclasses import dataclass
from collections import defaultdict
from typing import Any, Callable, Type
from atelier.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class ProgressStateChangedEvent(BaseEvent):
    """Dispatched on every accepted progress state transition."""
    old_state: Any
    new_state: Any


@dataclass(frozen=True)
class ActivityResultReadyEvent(BaseEvent):
    """Dispatched when a finished session's result is ready to be placed."""
    result: Any


@dataclass(frozen=True)
class ActivitySessionAbortedEvent(BaseEvent):
    """Dispatched when a session wrapped up without a result."""
    activity_type: Any


@dataclass(frozen=True)
class ActivityPhaseChangedEvent(BaseEvent):
    """Dispatched when the mini-activity session phase changes."""
    old_phase: Any
    new_phase: Any


@dataclass(frozen=True)
class ItemPlacedEvent(BaseEvent):
    """Dispatched after an item has been placed on a spot."""
    spot_id: str
    item: Any
    placed_count: int


@dataclass(frozen=True)
class RoomCompleteEvent(BaseEvent):
    """Dispatched once when the placed-count reaches the threshold."""
    placed_count: int


@dataclass(frozen=True)
class CameraMovementStartedEvent(BaseEvent):
    """Dispatched when the camera begins a transition."""
    target: Any


@dataclass(frozen=True)
class CameraMovementCompleteEvent(BaseEvent):
    """Dispatched when the camera has snapped to its target pose."""
    pose: Any


@dataclass(frozen=True)
class SpotTargetedEvent(BaseEvent):
    """Dispatched when the pointer starts or stops hovering a spot."""
    spot_id: str
    targeted: bool

# ===========================================================
# Event Manager
# ===========================================================

def _callback_name(callback: Callable) -> str:
    owner = getattr(callback, "__self__", None)
    name = getattr(callback, "__name__", repr(callback))
    return f"{type(owner).__name__}.{name}" if owner is not None else name


class EventManager:
    """
    Synchronous typed pub/sub bus.

    Subscribers are keyed by exact event class and called in subscription
    order. A raising subscriber is logged and the remaining ones still run.
    """

    def __init__(self):
        self._subscribers = defaultdict(list)
        DebugLogger.init("EventManager initialized", category="event_manager")

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Register callback for event_type; a repeat registration is ignored."""
        callbacks = self._subscribers[event_type]
        if callback in callbacks:
            return
        callbacks.append(callback)
        DebugLogger.trace(
            f"{_callback_name(callback)} -> {event_type.__name__}",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Remove callback from event_type. Unknown callbacks are ignored."""
        callbacks = self._subscribers.get(event_type)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    def is_subscribed(self, event_type: Type[BaseEvent], callback: Callable) -> bool:
        return callback in self._subscribers.get(event_type, ())

    def subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """Callbacks for event_type, or across every type when None."""
        if event_type is not None:
            return len(self._subscribers.get(event_type, ()))
        return sum(len(callbacks) for callbacks in self._subscribers.values())

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Deliver event to every subscriber of its exact type, in order.

        A dispatch made from inside a callback is delivered completely
        before the next callback of the outer dispatch runs. Callbacks
        added or removed during delivery take effect on the next dispatch.
        """
        event_type = type(event)
        callbacks = self._subscribers.get(event_type)
        if not callbacks:
            return

        for callback in tuple(callbacks):
            try:
                callback(event)
            except Exception as e:
                DebugLogger.warn(
                    f"{_callback_name(callback)} raised on {event_type.__name__}: {e!r}",
                    category="system"
                )

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Drop every subscription. Called on context teardown."""
        self._subscribers.clear()
