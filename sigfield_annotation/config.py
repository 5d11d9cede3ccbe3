"""
Session configuration.

Defaults mirror the constants in ``core.annotation.geometry`` and can be
overridden through ``SIGFIELD_*`` environment variables, e.g.
``SIGFIELD_MIN_FIELD_AREA=400`` or ``SIGFIELD_LABELS__SHORT=Sig``.
"""

import os
from typing import Dict, Optional

from easydict import EasyDict as edict

from .core.annotation.geometry import (
    DELETE_CONTROL_OFFSET,
    FULL_LABEL,
    LABEL_THRESHOLD,
    SHORT_LABEL,
    THRESHOLD_SMALL,
)
from .utils.env import load_cfg_from_env


def default_config() -> edict:
    cfg = edict()
    cfg.min_field_area = THRESHOLD_SMALL
    cfg.label_area = LABEL_THRESHOLD
    cfg.delete_offset = DELETE_CONTROL_OFFSET

    cfg.labels = edict()
    cfg.labels.short = SHORT_LABEL
    cfg.labels.full = FULL_LABEL

    # RGB
    cfg.render = edict()
    cfg.render.alpha = 0.5
    cfg.render.border_width = 2
    cfg.render.field_color = [255, 255, 0]
    cfg.render.selected_color = [255, 0, 0]
    cfg.render.border_color = [0, 0, 0]
    return cfg


def load_config(env: Optional[Dict[str, str]] = None) -> edict:
    """Default configuration with environment overrides applied."""
    if env is None:
        env = dict(os.environ)
    return load_cfg_from_env(default_config(), env)
