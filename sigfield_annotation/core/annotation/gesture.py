"""
Gesture state machine.

Turns press/move/release pointer events into committed fields, discarded
clicks and selection changes. Every transition takes the current
``SessionState`` and returns the next one; nothing here keeps state of
its own.

States:
    Idle      ``state.drag.first_point`` is None
    Dragging  ``state.drag.first_point`` is set
"""

import logging
import uuid
from typing import Callable, Optional

from . import store
from .events import EventSource, PointerEvent, PointerEventKind
from .geometry import THRESHOLD_SMALL, Rect, is_degenerate, local_position
from .state import IDLE, DragState, Field, SessionState

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def new_field_id() -> str:
    return str(uuid.uuid4())


def _resolve(event: PointerEvent, rect: Optional[Rect]):
    if event.source is None:
        return None
    return local_position(event.client_x, event.client_y, rect)


def press(state: SessionState, event: PointerEvent, rect: Optional[Rect]) -> SessionState:
    """
    Start a drag at the pointer position.

    The first press of a gesture wins: pressing again while dragging does
    not restart the drag.
    """
    if state.is_dragging:
        return state
    position = _resolve(event, rect)
    if position is None:
        logger.debug("Ignoring unresolved press event %s", event)
        return state
    return state.with_drag(DragState(first_point=position))


def move(state: SessionState, event: PointerEvent, rect: Optional[Rect]) -> SessionState:
    """
    Track the pointer during a drag.

    Moving during a drag means a new field is being drawn, so any selected
    field is deselected right away, even if the drag ends up discarded.
    """
    if not state.is_dragging:
        return state
    position = _resolve(event, rect)
    if position is None:
        logger.debug("Ignoring unresolved move event %s", event)
        return state
    next_state = state.with_drag(
        DragState(first_point=state.drag.first_point, second_point=position)
    )
    return next_state.with_fields(store.deselect_all(next_state.fields))


def release(
    state: SessionState,
    event: PointerEvent,
    page: int,
    id_factory: IdFactory = new_field_id,
    min_area: float = THRESHOLD_SMALL,
) -> SessionState:
    """
    Finish a drag.

    A large enough box is committed as a new unselected field on ``page``.
    Anything smaller is a click: it clears the selection unless it landed
    on a delete control, whose own handler deals with the deletion. The
    drag is cleared in every case.

    Args:
        state: Current session state
        event: Release event
        page: Current page, used to tag a committed field
        id_factory: Produces a fresh unique field id
        min_area: Boxes below this area are treated as clicks

    Returns:
        Next session state, always idle
    """
    if not state.is_dragging:
        return state
    if event.source is None:
        logger.debug("Ignoring unresolved release event %s", event)
        return state

    candidate = state.drag.candidate_box()
    fields = state.fields
    if not is_degenerate(candidate, min_area):
        new_field = Field(page=page, id=id_factory(), box=candidate)
        fields = store.append(fields, new_field)
        logger.debug("Committed field %s on page %d", new_field.id, page)
    elif store.has_selection(fields) and event.source is not EventSource.DELETE:
        fields = store.deselect_all(fields)

    return SessionState(fields=fields, drag=IDLE)


def handle(
    state: SessionState,
    event: PointerEvent,
    rect: Optional[Rect],
    page: int,
    id_factory: IdFactory = new_field_id,
    min_area: float = THRESHOLD_SMALL,
) -> SessionState:
    """Dispatch a pointer event to its transition."""
    if event.kind is PointerEventKind.PRESS:
        return press(state, event, rect)
    if event.kind is PointerEventKind.MOVE:
        return move(state, event, rect)
    if event.kind is PointerEventKind.RELEASE:
        return release(state, event, page, id_factory, min_area)
    logger.debug("Ignoring unknown pointer event kind %s", event.kind)
    return state


def click_field(state: SessionState, field_id: str) -> SessionState:
    """Select the clicked field exclusively."""
    return state.with_fields(store.select_only(state.fields, field_id))


def click_delete(state: SessionState, field_id: str) -> SessionState:
    """Remove the field whose delete control was clicked."""
    return state.with_fields(store.remove(state.fields, field_id))
