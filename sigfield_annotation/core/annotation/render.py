"""
Render contract.

Describes what the surface should draw for a page: every committed field
on that page, plus at most one preview box while a large enough drag is
in progress. UI-agnostic, the surface decides how to draw it.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from . import store
from .geometry import (
    DELETE_CONTROL_OFFSET,
    FULL_LABEL,
    LABEL_THRESHOLD,
    SHORT_LABEL,
    THRESHOLD_SMALL,
    bounds,
    delete_control_anchor,
    is_degenerate,
    label_for,
)
from .state import Box, Point, SessionState


@dataclass(frozen=True)
class RenderOptions:
    min_area: float = THRESHOLD_SMALL
    label_area: float = LABEL_THRESHOLD
    delete_offset: float = DELETE_CONTROL_OFFSET
    short_label: str = SHORT_LABEL
    full_label: str = FULL_LABEL


@dataclass(frozen=True)
class FieldView:
    """One box to draw. ``id`` is None for the drag preview."""

    id: Optional[str]
    box: Box
    selected: bool
    has_delete_affordance: bool
    label: str
    bounds: Tuple[float, float, float, float]
    delete_anchor: Optional[Point] = None

    def to_dict(self):
        return {
            "id": self.id,
            "box": self.box.to_dict(),
            "selected": self.selected,
            "has_delete_affordance": self.has_delete_affordance,
            "label": self.label,
            "bounds": list(self.bounds),
        }


@dataclass(frozen=True)
class RenderFrame:
    page: int
    fields: List[FieldView] = field(default_factory=list)
    preview: Optional[FieldView] = None


def _view(field_id, box, selected, with_delete, options: RenderOptions) -> FieldView:
    return FieldView(
        id=field_id,
        box=box,
        selected=selected,
        has_delete_affordance=with_delete,
        label=label_for(box, options.label_area, options.short_label, options.full_label),
        bounds=bounds(box),
        delete_anchor=delete_control_anchor(box, options.delete_offset) if with_delete else None,
    )


def render_page(
    state: SessionState,
    page: int,
    options: Optional[RenderOptions] = None,
    include_preview: bool = True,
) -> RenderFrame:
    """
    Build the render frame for a page.

    Args:
        state: Current session state
        page: Page to render (1-based)
        options: Thresholds and labels
        include_preview: Whether the drag in progress is drawn on this page

    Returns:
        Frame with field views in store order and the optional preview
    """
    if options is None:
        options = RenderOptions()

    views = [
        _view(f.id, f.box, f.selected, f.selected, options)
        for f in store.fields_on_page(state.fields, page)
    ]

    preview = None
    candidate = state.drag.candidate_box()
    if (
        include_preview
        and candidate is not None
        and state.drag.second_point is not None
        and not is_degenerate(candidate, options.min_area)
    ):
        preview = _view(None, candidate, False, False, options)

    return RenderFrame(page=page, fields=views, preview=preview)
