"""
Event system for annotation workflow.

Two kinds of events live here: pointer events that the rendering surface
feeds into the session, and notification events that the session emits
so UI components can react without the core depending on any UI framework.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class PointerEventKind(Enum):
    """Raw pointer events delivered by the surface."""

    PRESS = "press"
    MOVE = "move"
    RELEASE = "release"


class EventSource(Enum):
    """Which affordance a pointer event originated from."""

    FIELD = "field"
    DELETE = "delete"
    CANVAS = "canvas"


@dataclass(frozen=True)
class PointerEvent:
    """
    A pointer event in screen coordinates.

    ``source`` is None when the surface could not resolve the event target.
    """

    kind: PointerEventKind
    client_x: Optional[float]
    client_y: Optional[float]
    source: Optional[EventSource] = EventSource.CANVAS

    @classmethod
    def press(cls, x, y, source=EventSource.CANVAS):
        return cls(PointerEventKind.PRESS, x, y, source)

    @classmethod
    def move(cls, x, y, source=EventSource.CANVAS):
        return cls(PointerEventKind.MOVE, x, y, source)

    @classmethod
    def release(cls, x, y, source=EventSource.CANVAS):
        return cls(PointerEventKind.RELEASE, x, y, source)


class EventType(Enum):
    """Types of events that can occur during annotation."""

    # Drag events
    DRAG_STARTED = "drag_started"
    DRAG_UPDATED = "drag_updated"
    DRAG_DISCARDED = "drag_discarded"

    # Field events
    FIELD_ADDED = "field_added"
    FIELD_SELECTED = "field_selected"
    FIELD_REMOVED = "field_removed"
    SELECTION_CLEARED = "selection_cleared"

    # Session events
    PAGE_CHANGED = "page_changed"
    STATE_CHANGED = "state_changed"


@dataclass
class AnnotationEvent:
    """Event that occurs during annotation."""

    event_type: EventType
    data: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        if self.data is None:
            self.data = {}


class EventEmitter:
    """
    Simple event emitter for pub/sub pattern.

    Allows components to subscribe to events without tight coupling.
    """

    def __init__(self):
        self._listeners: Dict[EventType, List[Callable]] = {}

    def on(self, event_type: EventType, callback: Callable[[AnnotationEvent], None]):
        """Subscribe to an event type."""
        if event_type not in self._listeners:
            self._listeners[event_type] = []
        self._listeners[event_type].append(callback)

    def off(self, event_type: EventType, callback: Callable[[AnnotationEvent], None]):
        """Unsubscribe from an event type."""
        if event_type in self._listeners:
            self._listeners[event_type].remove(callback)

    def emit(self, event: AnnotationEvent):
        """Emit an event to all subscribers."""
        for callback in list(self._listeners.get(event.event_type, [])):
            try:
                callback(event)
            except Exception:
                # A broken listener must not take the session down
                logger.exception("Error in event listener for %s", event.event_type.value)

    def clear(self):
        """Clear all event listeners."""
        self._listeners.clear()
