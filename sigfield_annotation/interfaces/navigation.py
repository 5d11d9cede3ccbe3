"""
Page navigation for the document surface.

Thin wrapper around the current page number, clamped to the document's
page range. The annotation session only reads ``current_page``.
"""

import logging

from ..core.annotation.events import AnnotationEvent, EventEmitter, EventType

logger = logging.getLogger(__name__)


class PageNavigator:
    """
    Current page of a multi-page document.

    Emits ``EventType.PAGE_CHANGED`` on ``events`` whenever the page
    actually changes.
    """

    def __init__(self, num_pages: int = 1, current_page: int = 1):
        if num_pages < 1:
            raise ValueError(f"Document must have at least one page, got {num_pages}")
        self._num_pages = num_pages
        self._current_page = self._clamp(current_page)
        self.events = EventEmitter()

    @property
    def num_pages(self) -> int:
        return self._num_pages

    @property
    def current_page(self) -> int:
        return self._current_page

    def set_num_pages(self, num_pages: int):
        """Update the page count once the document is loaded."""
        if num_pages < 1:
            raise ValueError(f"Document must have at least one page, got {num_pages}")
        self._num_pages = num_pages
        self.go_to(self._current_page)

    def go_to(self, page: int) -> int:
        """
        Move to a page, clamped to [1, num_pages].

        Returns:
            The page now displayed
        """
        previous = self._current_page
        self._current_page = self._clamp(page)
        if self._current_page != previous:
            logger.debug("Page changed from %d to %d", previous, self._current_page)
            self.events.emit(
                AnnotationEvent(
                    EventType.PAGE_CHANGED,
                    {"page": self._current_page, "previous": previous},
                )
            )
        return self._current_page

    def first(self) -> int:
        return self.go_to(1)

    def previous(self) -> int:
        return self.go_to(self._current_page - 1)

    def next(self) -> int:
        return self.go_to(self._current_page + 1)

    def last(self) -> int:
        return self.go_to(self._num_pages)

    def _clamp(self, page: int) -> int:
        return max(1, min(int(page), self._num_pages))
