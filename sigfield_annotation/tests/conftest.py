"""
Test fixtures and utilities for sigfield annotation tests.

Provides reusable fixtures for sessions, containers and page images.
"""

import pytest
import numpy as np

from sigfield_annotation.core.annotation import Rect
from sigfield_annotation.utils.misc import incrf


class MovableContainer:
    """Page container whose on-screen position can change, as when scrolling."""

    def __init__(self, left=0.0, top=0.0, width=600.0, height=800.0):
        self.left = left
        self.top = top
        self.width = width
        self.height = height
        self.calls = 0

    def bounding_rect(self):
        self.calls += 1
        return Rect(self.left, self.top, self.width, self.height)

    def scroll_to(self, left, top):
        self.left = left
        self.top = top


class DetachedContainer:
    """Container that is not currently laid out."""

    def bounding_rect(self):
        return None


@pytest.fixture
def container():
    return MovableContainer()


@pytest.fixture
def detached_container():
    return DetachedContainer()


@pytest.fixture
def id_factory():
    """Predictable ids: field-1, field-2, ..."""
    counter = incrf()

    def factory():
        return f"field-{next(counter)}"

    return factory


@pytest.fixture
def navigator():
    from sigfield_annotation.interfaces import PageNavigator

    return PageNavigator(num_pages=3)


@pytest.fixture
def annotation_session(navigator, id_factory):
    """Create an AnnotationSession on a three page document."""
    from sigfield_annotation.core.annotation import AnnotationSession

    return AnnotationSession(navigator, id_factory=id_factory)


@pytest.fixture
def page_image():
    """Blank white page."""
    return np.full((200, 300, 3), 255, dtype=np.uint8)


def _drag(session, container, start, end, source=None):
    """Press at start, move to end, release. Returns the release result."""
    from sigfield_annotation.core.annotation import EventSource, PointerEvent

    if source is None:
        source = EventSource.CANVAS
    session.handle_pointer(PointerEvent.press(*start), container)
    session.handle_pointer(PointerEvent.move(*end), container)
    return session.handle_pointer(PointerEvent.release(*end, source), container)


@pytest.fixture
def drag():
    """Helper performing a full press-move-release gesture."""
    return _drag
