import json
import logging
import sys
from gettext import gettext as _
from pathlib import Path
from typing import Any, Dict, List

import cv2
import numpy as np

from sigfield_annotation.config import load_config
from sigfield_annotation.core.annotation import (
    AnnotationSession,
    EventSource,
    PointerEvent,
    PointerEventKind,
    Rect,
)
from sigfield_annotation.core.annotation.geometry import bounds
from sigfield_annotation.interfaces import PageNavigator, SurfaceAdapter
from sigfield_annotation.utils.misc import incrf

logger = logging.getLogger(__name__)

POINTER_ACTIONS = {kind.value: kind for kind in PointerEventKind}
PAGE_MOVES = ("first", "previous", "next", "last")


class StaticContainer:
    """Page container that never scrolls."""

    def __init__(self, left: float = 0.0, top: float = 0.0, width=0.0, height=0.0):
        self.rect = Rect(left, top, width, height)

    def bounding_rect(self) -> Rect:
        return self.rect


def load_actions(path: Path) -> List[Dict[str, Any]]:
    with open(path, "r") as f:
        actions = json.load(f)
    if not isinstance(actions, list):
        raise ValueError(_("Expected a list of actions in {path}").format(path=path))
    return actions


def _require(action: Dict[str, Any], key: str, index: int):
    if key not in action:
        raise ValueError(
            _("Action #{index} ({action}) is missing '{key}'").format(
                index=index, action=action, key=key
            )
        )
    return action[key]


def _require_number(action: Dict[str, Any], key: str, index: int):
    value = _require(action, key, index)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(
            _("Action #{index} ({action}) needs a number for '{key}', got {value!r}").format(
                index=index, action=action, key=key, value=value
            )
        )
    return value


def apply_action(
    adapter: SurfaceAdapter, navigator: PageNavigator, action: Dict[str, Any], index: int
):
    """
    Apply one recorded action.

    Supported actions:
        {"action": "press"|"move"|"release", "x": .., "y": .., "source": "canvas"|null}
        {"action": "click_field"|"click_delete", "field": "<id>"}
        {"action": "page", "to": "first"|"previous"|"next"|"last"|<int>}
    """
    if not isinstance(action, dict):
        raise ValueError(_("Action #{index} is not an object").format(index=index))
    name = _require(action, "action", index)
    if not isinstance(name, str):
        raise ValueError(
            _("Action #{index} has an unknown action {name!r}").format(
                index=index, name=name
            )
        )

    if name in POINTER_ACTIONS:
        raw_source = action.get("source", EventSource.CANVAS.value)
        if raw_source is None:
            # null replays an event whose target could not be resolved
            source = None
        else:
            try:
                source = EventSource(raw_source)
            except ValueError:
                raise ValueError(
                    _("Action #{index} has an unknown source {source!r}").format(
                        index=index, source=raw_source
                    )
                )
        event = PointerEvent(
            POINTER_ACTIONS[name],
            _require_number(action, "x", index),
            _require_number(action, "y", index),
            source,
        )
        adapter.session.handle_pointer(event, adapter.container)
    elif name == "click_field":
        adapter.on_field_click(_require(action, "field", index))
    elif name == "click_delete":
        adapter.on_delete_click(_require(action, "field", index))
    elif name == "page":
        target = _require(action, "to", index)
        if target in PAGE_MOVES:
            getattr(navigator, target)()
        elif isinstance(target, int) and not isinstance(target, bool):
            navigator.go_to(target)
        else:
            raise ValueError(
                _("Action #{index} has an unknown page target {target!r}").format(
                    index=index, target=target
                )
            )
    else:
        raise ValueError(
            _("Action #{index} has an unknown action {name!r}").format(
                index=index, name=name
            )
        )


def replay(actions, adapter: SurfaceAdapter, navigator: PageNavigator):
    for index, action in enumerate(actions):
        apply_action(adapter, navigator, action, index)


def format_field(f) -> str:
    left, top, width, height = bounds(f.box)
    marker = "*" if f.selected else " "
    return f"{marker} page={f.page} id={f.id} box=({left:g}, {top:g}, {width:g}x{height:g})"


def handle(args):
    cfg = load_config()
    navigator = PageNavigator(num_pages=args.pages)

    id_factory = None
    if args.sequential_ids:
        counter = incrf()

        def id_factory():
            return f"field-{next(counter)}"

    session = AnnotationSession.from_config(navigator, cfg, id_factory=id_factory)
    width, height = args.page_size
    container = StaticContainer(args.offset[0], args.offset[1], width, height)
    adapter = SurfaceAdapter.from_config(session, container, cfg)

    try:
        replay(load_actions(args.events), adapter, navigator)
    except (OSError, ValueError) as e:
        logger.error(_("Could not replay {path}: {error}").format(path=args.events, error=e))
        sys.exit(1)

    for f in session.fields:
        print(format_field(f))
    logger.info(
        _("{count} field(s), current page {page} of {pages}").format(
            count=len(session.fields), page=navigator.current_page, pages=navigator.num_pages
        )
    )

    if args.render is not None:
        page_image = np.full((height, width, 3), 255, dtype=np.uint8)
        vis = adapter.get_visualization(page_image)
        cv2.imwrite(str(args.render), cv2.cvtColor(vis, cv2.COLOR_RGB2BGR))
        logger.info(_("Rendered page {page} to {path}").format(page=navigator.current_page, path=args.render))
