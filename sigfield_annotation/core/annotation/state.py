"""
State management for annotation sessions.

Contains the immutable data classes that represent signature fields and
the transient drag gesture. Transitions never mutate these values, they
build new ones.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class Point:
    """A position local to the page container."""

    x: float
    y: float

    def to_dict(self):
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict):
        """Create from dictionary."""
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True)
class Box:
    """
    Two opposite corners of an axis-aligned rectangle.

    The corners are kept as they were drawn: ``a`` is where the drag
    started, which is not necessarily the top-left corner.
    """

    a: Point
    b: Point

    def to_dict(self):
        """Convert to dictionary for serialization."""
        return {"a": self.a.to_dict(), "b": self.b.to_dict()}


@dataclass(frozen=True)
class Field:
    """A committed signature field on a single page."""

    page: int
    id: str
    box: Box
    selected: bool = False

    def with_selected(self, selected: bool) -> "Field":
        if self.selected == selected:
            return self
        return replace(self, selected=selected)

    def to_dict(self):
        return {
            "page": self.page,
            "id": self.id,
            "box": self.box.to_dict(),
            "selected": self.selected,
        }


@dataclass(frozen=True)
class DragState:
    """In-progress gesture, only present between a press and its release."""

    first_point: Optional[Point] = None
    second_point: Optional[Point] = None

    @property
    def is_active(self) -> bool:
        return self.first_point is not None

    def candidate_box(self) -> Optional[Box]:
        """
        Box spanned by the gesture so far.

        A press with no move yet collapses onto the first point.
        """
        if self.first_point is None:
            return None
        second = self.second_point if self.second_point is not None else self.first_point
        return Box(a=self.first_point, b=second)


IDLE = DragState()


@dataclass(frozen=True)
class SessionState:
    """
    Complete state of an annotation session.

    A single value threaded through the gesture transitions: the committed
    fields plus the drag in progress.
    """

    fields: Tuple[Field, ...] = field(default_factory=tuple)
    drag: DragState = IDLE

    @property
    def is_dragging(self) -> bool:
        return self.drag.is_active

    def with_fields(self, fields: Tuple[Field, ...]) -> "SessionState":
        if fields is self.fields:
            return self
        return replace(self, fields=fields)

    def with_drag(self, drag: DragState) -> "SessionState":
        if drag == self.drag:
            return self
        return replace(self, drag=drag)

    def to_dict(self):
        """Convert to dictionary for serialization."""
        return {
            "fields": [f.to_dict() for f in self.fields],
            "is_dragging": self.is_dragging,
        }
