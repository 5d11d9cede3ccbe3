"""
GUI adapter for annotation session.

Bridges the AnnotationSession with a document rendering surface: turns the
surface's raw pointer callbacks into ``PointerEvent``s and rasterizes
render frames on top of a page image.
"""

from typing import Callable, Optional, Sequence
import numpy as np
import cv2

from ..core.annotation import (
    AnnotationEvent,
    AnnotationSession,
    EventSource,
    EventType,
    FieldView,
    PointerEvent,
    RenderFrame,
)

DELETE_TEXT = "Delete"


class SurfaceAdapter:
    """
    Adapter connecting AnnotationSession to a document surface.

    Provides a compatibility layer that:
    - Wraps pointer callbacks with GUI-friendly methods
    - Translates session events to a single redraw callback
    - Handles visualization rendering
    """

    def __init__(
        self,
        session: AnnotationSession,
        container,
        update_image_callback: Optional[Callable] = None,
        alpha: float = 0.5,
        border_width: int = 2,
        field_color: Sequence[int] = (255, 255, 0),
        selected_color: Sequence[int] = (255, 0, 0),
        border_color: Sequence[int] = (0, 0, 0),
    ):
        """
        Initialize adapter.

        Args:
            session: Core annotation session
            container: Page container exposing ``bounding_rect()``
            update_image_callback: Callback to redraw the GUI
            alpha: Fill opacity for field boxes
            border_width: Box border thickness in pixels
            field_color: Fill color of unselected boxes (RGB)
            selected_color: Fill color of the selected box (RGB)
            border_color: Border and text color (RGB)
        """
        self.session = session
        self.container = container
        self.update_image_callback = update_image_callback
        self.alpha = alpha
        self.border_width = border_width
        self.field_color = tuple(int(c) for c in field_color)
        self.selected_color = tuple(int(c) for c in selected_color)
        self.border_color = tuple(int(c) for c in border_color)

        # Subscribe to session events
        self._setup_event_handlers()

    @classmethod
    def from_config(cls, session, container, cfg, update_image_callback=None):
        return cls(
            session,
            container,
            update_image_callback=update_image_callback,
            alpha=cfg.render.alpha,
            border_width=cfg.render.border_width,
            field_color=cfg.render.field_color,
            selected_color=cfg.render.selected_color,
            border_color=cfg.render.border_color,
        )

    def _setup_event_handlers(self):
        """Redraw on every state or page change."""
        self.session.events.on(EventType.STATE_CHANGED, self._on_update)
        self.session.events.on(EventType.PAGE_CHANGED, self._on_update)

    def _on_update(self, event: AnnotationEvent):
        if self.update_image_callback:
            self.update_image_callback()

    # Pointer callbacks from the surface

    def on_press(self, client_x, client_y, source=EventSource.CANVAS) -> bool:
        return self.session.handle_pointer(
            PointerEvent.press(client_x, client_y, source), self.container
        )

    def on_move(self, client_x, client_y, source=EventSource.CANVAS) -> bool:
        return self.session.handle_pointer(
            PointerEvent.move(client_x, client_y, source), self.container
        )

    def on_release(self, client_x, client_y, source=EventSource.CANVAS) -> bool:
        return self.session.handle_pointer(
            PointerEvent.release(client_x, client_y, source), self.container
        )

    # Per-field affordances

    def on_field_click(self, field_id: str) -> bool:
        return self.session.click_field(field_id)

    def on_delete_click(self, field_id: str) -> bool:
        return self.session.click_delete(field_id)

    def get_visualization(
        self, page_image: np.ndarray, frame: Optional[RenderFrame] = None
    ) -> np.ndarray:
        """
        Draw the current page's fields on top of a page image.

        Args:
            page_image: RGB image of the rendered page, in container coordinates
            frame: Frame to draw, defaults to the session's current page

        Returns:
            RGB visualization image
        """
        if frame is None:
            frame = self.session.render()

        vis = page_image.copy()
        for view in frame.fields:
            vis = self._draw_view(vis, view)
        if frame.preview is not None:
            vis = self._draw_view(vis, frame.preview)
        return vis

    def _draw_view(self, image: np.ndarray, view: FieldView) -> np.ndarray:
        left, top, width, height = view.bounds
        pt1 = (int(round(left)), int(round(top)))
        pt2 = (int(round(left + width)), int(round(top + height)))
        fill = self.selected_color if view.selected else self.field_color

        # Half-transparent fill
        overlay = image.copy()
        cv2.rectangle(overlay, pt1, pt2, fill, -1)
        mask = np.zeros(image.shape[:2], dtype=bool)
        mask[
            max(pt1[1], 0) : max(pt2[1] + 1, 0), max(pt1[0], 0) : max(pt2[0] + 1, 0)
        ] = True
        result = image.copy()
        result[mask] = (
            self.alpha * overlay[mask] + (1 - self.alpha) * image[mask]
        ).astype(image.dtype)

        cv2.rectangle(result, pt1, pt2, self.border_color, self.border_width)
        self._put_centered_text(result, view.label, pt1, pt2)

        if view.has_delete_affordance and view.delete_anchor is not None:
            (_, text_h), _baseline = cv2.getTextSize(
                DELETE_TEXT, cv2.FONT_HERSHEY_SIMPLEX, 0.5, 1
            )
            origin = (
                int(round(view.delete_anchor.x)),
                int(round(view.delete_anchor.y)) + text_h,
            )
            cv2.putText(
                result,
                DELETE_TEXT,
                origin,
                cv2.FONT_HERSHEY_SIMPLEX,
                0.5,
                self.border_color,
                1,
                cv2.LINE_AA,
            )
        return result

    def _put_centered_text(self, image: np.ndarray, text: str, pt1, pt2):
        (text_w, text_h), _baseline = cv2.getTextSize(
            text, cv2.FONT_HERSHEY_SIMPLEX, 0.5, 1
        )
        cx = (pt1[0] + pt2[0]) // 2
        cy = (pt1[1] + pt2[1]) // 2
        cv2.putText(
            image,
            text,
            (cx - text_w // 2, cy + text_h // 2),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.5,
            self.border_color,
            1,
            cv2.LINE_AA,
        )

    @property
    def fields(self):
        return self.session.fields

    @property
    def has_selection(self) -> bool:
        return self.session.has_selection
