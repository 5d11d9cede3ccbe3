"""
Core annotation module - UI-agnostic signature field logic.

This module provides the geometry, field store and gesture state machine
behind drawing signature fields on a document, usable with any UI
framework (Tkinter, Web, CLI, etc).
"""

from .session import AnnotationSession
from .events import (
    AnnotationEvent,
    EventType,
    EventEmitter,
    EventSource,
    PointerEvent,
    PointerEventKind,
)
from .geometry import Rect
from .render import FieldView, RenderFrame
from .state import Box, DragState, Field, Point, SessionState

__all__ = [
    "AnnotationSession",
    "AnnotationEvent",
    "EventType",
    "EventEmitter",
    "EventSource",
    "PointerEvent",
    "PointerEventKind",
    "Rect",
    "FieldView",
    "RenderFrame",
    "Box",
    "DragState",
    "Field",
    "Point",
    "SessionState",
]
