import pytest
from unittest.mock import Mock

from sigfield_annotation.core.annotation import EventType
from sigfield_annotation.interfaces import PageNavigator


def test_navigation_clamps():
    nav = PageNavigator(num_pages=3)
    assert nav.current_page == 1
    assert nav.previous() == 1
    assert nav.next() == 2
    assert nav.last() == 3
    assert nav.next() == 3
    assert nav.first() == 1
    assert nav.go_to(10) == 3
    assert nav.go_to(-2) == 1


def test_initial_page_clamped():
    assert PageNavigator(num_pages=2, current_page=5).current_page == 2


def test_set_num_pages_clamps_current():
    nav = PageNavigator(num_pages=5, current_page=5)
    nav.set_num_pages(2)
    assert nav.num_pages == 2
    assert nav.current_page == 2


def test_invalid_page_count():
    with pytest.raises(ValueError):
        PageNavigator(num_pages=0)
    nav = PageNavigator(num_pages=1)
    with pytest.raises(ValueError):
        nav.set_num_pages(0)


def test_page_changed_event():
    nav = PageNavigator(num_pages=2)
    listener = Mock()
    nav.events.on(EventType.PAGE_CHANGED, listener)

    nav.first()
    listener.assert_not_called()

    nav.next()
    listener.assert_called_once()
    event = listener.call_args[0][0]
    assert event.data == {"page": 2, "previous": 1}
