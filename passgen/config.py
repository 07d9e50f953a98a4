# passgen/config.py
"""
Simple settings persistence for PassGen.
Settings saved as JSON in %APPDATA%/PassGen/config.json (Windows) or ~/.passgen/config.json (fallback).
PASSGEN_CONFIG overrides the file location.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

from .charclass import CLASS_ORDER, GroupMode, parse_classes
from .generator import GeneratorConfig

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 12,
    "classes": [c.value for c in CLASS_ORDER],
    "excluded": "",
    "one_per_group": False,
    "group_mode": GroupMode.REPLACE.value,
    "clipboard_clear_seconds": 20,
    "log_level": "WARNING",
}


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "PassGen")
    return os.path.join(os.path.expanduser("~"), ".passgen")


def config_path() -> str:
    override = os.getenv("PASSGEN_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> None:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    tmp = p + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, p)
    logger.debug("saved config to %s", p)


def generator_config_from(cfg: Dict[str, Any]) -> GeneratorConfig:
    """
    Build a GeneratorConfig from a loaded settings dict. Values that do not
    parse are logged and the defaults are used instead.
    """
    try:
        return _generator_config(cfg)
    except (TypeError, ValueError) as e:
        logger.warning("ignoring invalid generator settings: %s", e)
        return _generator_config(DEFAULTS)


def _generator_config(cfg: Dict[str, Any]) -> GeneratorConfig:
    excluded = cfg.get("excluded") or ""
    if not isinstance(excluded, str):
        raise ValueError(f"excluded must be a string, got {excluded!r}")
    one_per_group = cfg.get("one_per_group", False)
    if not isinstance(one_per_group, bool):
        raise ValueError(f"one_per_group must be true or false, got {one_per_group!r}")
    return GeneratorConfig(
        length=int(cfg.get("length", DEFAULTS["length"])),
        classes=parse_classes(cfg.get("classes", DEFAULTS["classes"])),
        excluded=excluded,
        one_per_group=one_per_group,
        group_mode=GroupMode(cfg.get("group_mode", DEFAULTS["group_mode"])),
    )
