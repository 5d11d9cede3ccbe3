import logging
from gettext import gettext as _
from typing import Dict

from easydict import EasyDict as edict

logger = logging.getLogger(__name__)

ENV_PREFIX = "SIGFIELD_"


def _cast_like(current, value):
    if current is None or not isinstance(value, str):
        return value
    if isinstance(current, bool):
        return value.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(current, (int, float)):
        return type(current)(value)
    if isinstance(current, (list, tuple)):
        # "0,255,0" -> [0, 255, 0]
        items = [item.strip() for item in value.split(",") if item.strip()]
        if current:
            items = [_cast_like(current[0], item) for item in items]
        return type(current)(items)
    return value


def load_cfg_from_env(cfg: edict, env: Dict[str, str], prefix: str = ENV_PREFIX):
    for k, v in env.items():
        if k.startswith(prefix):
            cfgkey = k.replace(prefix, "", 1).replace("__", ".").lower()
            logger.warning(
                _(
                    "Changing configuration entry from environment variable: {k}={v}"
                ).format(k=cfgkey, v=v)
            )
            *parts, last = cfgkey.split(".")
            this_cfg = cfg
            for part in parts:
                if this_cfg.get(part) is None:
                    this_cfg[part] = edict()
                this_cfg = this_cfg[part]
            this_cfg[last] = _cast_like(this_cfg.get(last), v)
    return cfg
