"""
Annotation session management.

Core logic for managing an interactive signature field session.
UI-agnostic - can be used with any interface (GUI, Web, CLI).
"""

import logging
from typing import Any, Dict, List, Optional

from . import gesture, store
from .events import (
    AnnotationEvent,
    EventEmitter,
    EventType,
    PointerEvent,
    PointerEventKind,
)
from .geometry import (
    DELETE_CONTROL_OFFSET,
    FULL_LABEL,
    LABEL_THRESHOLD,
    SHORT_LABEL,
    THRESHOLD_SMALL,
    Rect,
)
from .render import RenderFrame, RenderOptions, render_page
from .state import Field, SessionState

logger = logging.getLogger(__name__)


class AnnotationSession:
    """
    Owns the state of a signature field session.

    This class handles:
    - Feeding pointer events through the gesture state machine
    - Direct field actions (select, delete)
    - Building render frames for the current page
    - Event emission for UI updates

    The session is UI-agnostic - it emits events that UI components
    can listen to, rather than directly manipulating UI elements.
    """

    def __init__(
        self,
        navigator,
        id_factory: Optional[gesture.IdFactory] = None,
        min_area: float = THRESHOLD_SMALL,
        label_area: float = LABEL_THRESHOLD,
        delete_offset: float = DELETE_CONTROL_OFFSET,
        short_label: str = SHORT_LABEL,
        full_label: str = FULL_LABEL,
    ):
        """
        Initialize annotation session.

        Args:
            navigator: Page navigation collaborator, read for ``current_page``
            id_factory: Produces a fresh unique id per committed field
            min_area: Boxes below this area are clicks, not fields
            label_area: Boxes up to this area get the short label
            delete_offset: Gap between a box and its delete control
            short_label: Label for small boxes
            full_label: Label for large boxes
        """
        if min_area <= 0:
            raise ValueError(f"min_area must be positive, got {min_area}")

        self.navigator = navigator
        self.id_factory = id_factory or gesture.new_field_id
        self.min_area = min_area
        self.render_options = RenderOptions(
            min_area=min_area,
            label_area=label_area,
            delete_offset=delete_offset,
            short_label=short_label,
            full_label=full_label,
        )

        # Current state
        self.state = SessionState()

        # Event emitter for UI notifications
        self.events = EventEmitter()

        navigator_events = getattr(navigator, "events", None)
        if navigator_events is not None:
            navigator_events.on(EventType.PAGE_CHANGED, self.events.emit)

    @classmethod
    def from_config(cls, navigator, cfg, id_factory=None):
        """Create a session from an EasyDict configuration."""
        return cls(
            navigator,
            id_factory=id_factory,
            min_area=cfg.min_field_area,
            label_area=cfg.label_area,
            delete_offset=cfg.delete_offset,
            short_label=cfg.labels.short,
            full_label=cfg.labels.full,
        )

    @property
    def current_page(self) -> int:
        return self.navigator.current_page

    @property
    def fields(self) -> List[Field]:
        return list(self.state.fields)

    @property
    def has_selection(self) -> bool:
        return store.has_selection(self.state.fields)

    @property
    def is_dragging(self) -> bool:
        return self.state.is_dragging

    @property
    def selected_field(self) -> Optional[Field]:
        return store.selected_field(self.state.fields)

    def get_fields_on_page(self, page: Optional[int] = None) -> List[Field]:
        if page is None:
            page = self.current_page
        return list(store.fields_on_page(self.state.fields, page))

    def handle_pointer(self, event: PointerEvent, container=None) -> bool:
        """
        Feed a pointer event from the surface through the state machine.

        Args:
            event: Pointer event in screen coordinates
            container: Object with a ``bounding_rect()`` method, queried
                on every press and move

        Returns:
            True if the session state changed
        """
        rect = None
        if event.kind is not PointerEventKind.RELEASE:
            rect = self._container_rect(container)

        new_state = gesture.handle(
            self.state,
            event,
            rect,
            page=self.current_page,
            id_factory=self.id_factory,
            min_area=self.min_area,
        )
        return self._apply(new_state)

    def click_field(self, field_id: str) -> bool:
        """Select a field, deselecting every other one."""
        return self._apply(gesture.click_field(self.state, field_id))

    def click_delete(self, field_id: str) -> bool:
        """Delete a field through its delete control."""
        return self._apply(gesture.click_delete(self.state, field_id))

    def render(self, page: Optional[int] = None) -> RenderFrame:
        """
        Get the render frame for a page.

        Args:
            page: Page to render, defaults to the current page

        Returns:
            Field views for the page, plus the drag preview when the page
            is the current one
        """
        current = self.current_page
        if page is None:
            page = current
        return render_page(
            self.state, page, self.render_options, include_preview=page == current
        )

    def get_visualization_data(self) -> Dict[str, Any]:
        """
        Get data needed for visualization.

        Returns:
            Dictionary with visualization data
        """
        selected = self.selected_field
        return {
            "frame": self.render(),
            "page": self.current_page,
            "num_pages": getattr(self.navigator, "num_pages", None),
            "num_fields": len(self.state.fields),
            "selected_id": selected.id if selected is not None else None,
            "is_dragging": self.is_dragging,
        }

    def _container_rect(self, container) -> Optional[Rect]:
        if container is None:
            return None
        rect = container.bounding_rect()
        if rect is None:
            return None
        return Rect(*rect)

    def _apply(self, new_state: SessionState) -> bool:
        """Swap in the new state and notify listeners about the difference."""
        previous = self.state
        if new_state == previous:
            return False
        self.state = new_state

        for event in self._diff_events(previous, new_state):
            self.events.emit(event)
        self.events.emit(AnnotationEvent(EventType.STATE_CHANGED, new_state.to_dict()))
        return True

    def _diff_events(self, previous: SessionState, current: SessionState):
        old_ids = {f.id for f in previous.fields}
        new_ids = {f.id for f in current.fields}
        added = [f for f in current.fields if f.id not in old_ids]

        if not previous.is_dragging and current.is_dragging:
            point = current.drag.first_point
            yield AnnotationEvent(EventType.DRAG_STARTED, {"point": point.to_dict()})
        elif current.is_dragging and previous.drag != current.drag:
            box = current.drag.candidate_box()
            yield AnnotationEvent(EventType.DRAG_UPDATED, {"box": box.to_dict()})

        for f in added:
            logger.info("Added field %s on page %d", f.id, f.page)
            yield AnnotationEvent(EventType.FIELD_ADDED, {"field": f.to_dict()})

        if previous.is_dragging and not current.is_dragging and not added:
            yield AnnotationEvent(EventType.DRAG_DISCARDED)

        for field_id in old_ids - new_ids:
            logger.info("Removed field %s", field_id)
            yield AnnotationEvent(EventType.FIELD_REMOVED, {"field_id": field_id})

        old_selected = store.selected_field(previous.fields)
        new_selected = store.selected_field(current.fields)
        if new_selected is not None and (
            old_selected is None or old_selected.id != new_selected.id
        ):
            yield AnnotationEvent(EventType.FIELD_SELECTED, {"field_id": new_selected.id})
        elif old_selected is not None and new_selected is None:
            yield AnnotationEvent(
                EventType.SELECTION_CLEARED, {"field_id": old_selected.id}
            )
