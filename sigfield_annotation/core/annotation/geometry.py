"""
Pure geometry functions for annotation boxes.

These functions have no side effects and can be tested in isolation.
Boxes are never assumed to be normalized: every function derives the
min/max of each axis itself.
"""

from typing import NamedTuple, Optional, Tuple

from .state import Box, Point

# Boxes smaller than this are clicks, not drags
THRESHOLD_SMALL = 200
LABEL_THRESHOLD = 5000
DELETE_CONTROL_OFFSET = 11

SHORT_LABEL = "PS"
FULL_LABEL = "Patient Signature"


class Rect(NamedTuple):
    """On-screen bounding rectangle of a container."""

    left: float
    top: float
    width: float = 0.0
    height: float = 0.0


def area(box: Box) -> float:
    """
    Compute box area.

    Args:
        box: Box with corners in any order

    Returns:
        Width times height
    """
    width = abs(box.a.x - box.b.x)
    height = abs(box.a.y - box.b.y)
    return width * height


def is_degenerate(box: Box, threshold: float = THRESHOLD_SMALL) -> bool:
    """Whether the box is too small to be an intentional drag."""
    return area(box) < threshold


def bounds(box: Box) -> Tuple[float, float, float, float]:
    """
    Normalize box to (left, top, width, height).
    """
    left = min(box.a.x, box.b.x)
    top = min(box.a.y, box.b.y)
    return left, top, abs(box.a.x - box.b.x), abs(box.a.y - box.b.y)


def local_position(
    client_x: Optional[float], client_y: Optional[float], rect: Optional[Rect]
) -> Optional[Point]:
    """
    Translate a screen-space pointer position into container coordinates.

    The container rect must be fetched for every event since the
    container can scroll between events.

    Args:
        client_x: Pointer X on screen
        client_y: Pointer Y on screen
        rect: Current bounding rect of the container

    Returns:
        Local point, or None if any input is missing
    """
    if client_x is None or client_y is None or rect is None:
        return None
    return Point(x=client_x - rect.left, y=client_y - rect.top)


def label_for(
    box: Box,
    threshold: float = LABEL_THRESHOLD,
    short: str = SHORT_LABEL,
    full: str = FULL_LABEL,
) -> str:
    """Abbreviated label for small boxes, full label otherwise."""
    return short if area(box) <= threshold else full


def delete_control_anchor(box: Box, offset: float = DELETE_CONTROL_OFFSET) -> Point:
    """Top-left of the delete control, just right of the box's right edge."""
    left, top, width, _height = bounds(box)
    return Point(x=left + width + offset, y=top)
