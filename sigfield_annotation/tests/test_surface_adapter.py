"""
Tests for the surface adapter: pointer wiring and rasterized output.
"""

import numpy as np
from unittest.mock import Mock

from sigfield_annotation.core.annotation import EventSource
from sigfield_annotation.interfaces import SurfaceAdapter


def make_adapter(session, container, callback=None):
    return SurfaceAdapter(session, container, update_image_callback=callback)


class TestSurfaceAdapter:
    def test_pointer_wiring(self, annotation_session, container):
        adapter = make_adapter(annotation_session, container)

        assert adapter.on_press(10, 10)
        assert adapter.on_move(60, 70)
        assert adapter.on_release(60, 70)

        assert len(adapter.fields) == 1
        assert adapter.fields[0].box.b.y == 70

    def test_field_affordances(self, annotation_session, container):
        adapter = make_adapter(annotation_session, container)
        adapter.on_press(0, 0)
        adapter.on_move(50, 50)
        adapter.on_release(50, 50)

        field_id = adapter.fields[0].id
        assert adapter.on_field_click(field_id)
        assert adapter.has_selection

        # Releasing on the delete control does not clear the selection
        adapter.on_press(61, 0, EventSource.DELETE)
        adapter.on_release(61, 0, EventSource.DELETE)
        assert adapter.has_selection

        assert adapter.on_delete_click(field_id)
        assert adapter.fields == []
        assert not adapter.has_selection

    def test_update_callback(self, annotation_session, navigator, container):
        callback = Mock()
        adapter = make_adapter(annotation_session, container, callback)

        adapter.on_move(10, 10)  # idle move, nothing changes
        callback.assert_not_called()

        adapter.on_press(0, 0)
        assert callback.call_count == 1

        navigator.next()
        assert callback.call_count == 2

    def test_visualization_draws_fields(self, annotation_session, container, page_image):
        adapter = make_adapter(annotation_session, container)
        adapter.on_press(20, 20)
        adapter.on_move(120, 100)
        adapter.on_release(120, 100)

        vis = adapter.get_visualization(page_image)

        assert vis.shape == page_image.shape
        assert vis.dtype == np.uint8
        # Input untouched
        assert (page_image == 255).all()
        # Border is black
        assert tuple(vis[20, 70]) == (0, 0, 0)
        # Yellow half-transparent fill: blue channel drops, red stays
        inside = vis[30, 30]
        assert inside[0] == 255
        assert inside[2] < 255
        # Outside untouched
        assert tuple(vis[150, 250]) == (255, 255, 255)

    def test_visualization_selected_color(self, annotation_session, container, page_image):
        adapter = make_adapter(annotation_session, container)
        adapter.on_press(20, 20)
        adapter.on_move(120, 100)
        adapter.on_release(120, 100)
        adapter.on_field_click(adapter.fields[0].id)

        vis = adapter.get_visualization(page_image)
        inside = vis[30, 30]
        # Red half-transparent fill: green channel drops too
        assert inside[0] == 255
        assert inside[1] < 255

    def test_visualization_preview(self, annotation_session, container, page_image):
        adapter = make_adapter(annotation_session, container)
        adapter.on_press(20, 20)
        adapter.on_move(120, 100)

        vis = adapter.get_visualization(page_image)
        assert tuple(vis[20, 70]) == (0, 0, 0)
        assert adapter.fields == []

    def test_visualization_empty_page(self, annotation_session, container, page_image):
        adapter = make_adapter(annotation_session, container)
        vis = adapter.get_visualization(page_image)
        np.testing.assert_array_equal(vis, page_image)

    def test_from_config(self, annotation_session, container):
        from sigfield_annotation.config import default_config

        cfg = default_config()
        cfg.render.alpha = 0.25
        adapter = SurfaceAdapter.from_config(annotation_session, container, cfg)
        assert adapter.alpha == 0.25
        assert adapter.selected_color == (255, 0, 0)
