from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

USER_CONFIG_PATH = Path.home() / ".issue_fields_config.yaml"

logger = logging.getLogger("issue_fields.config")

DEFAULT_FIELD_KEYS: Dict[str, List[str]] = {
    "left": ["h", "left"],
    "down": ["j", "down"],
    "up": ["k", "up"],
    "right": ["l", "right"],
    "activate": ["enter"],
    "commit": ["c-s"],
    "close": ["escape"],
    "enter_mode": ["e"],
}


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Unable to read %s: %s", USER_CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def _normalize_keys(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [str(key).strip() for key in value if str(key).strip()]


def get_field_keymap() -> Dict[str, List[str]]:
    """Default field-edit key map with ``field_edit.keys`` overrides applied."""
    keymap = {action: list(keys) for action, keys in DEFAULT_FIELD_KEYS.items()}
    section = _load_config().get("field_edit") or {}
    overrides = section.get("keys") if isinstance(section, dict) else None
    if not isinstance(overrides, dict):
        return keymap
    for action, value in overrides.items():
        if action not in keymap:
            logger.warning("Unknown field-edit action in config: %s", action)
            continue
        keys = _normalize_keys(value)
        if keys:
            keymap[action] = keys
    return keymap


def set_field_keys(action: str, keys: List[str]) -> None:
    if action not in DEFAULT_FIELD_KEYS:
        raise ValueError(f"Unknown field-edit action: {action!r}")
    data = _load_config()
    section = data.get("field_edit")
    if not isinstance(section, dict):
        section = {}
    overrides = section.get("keys")
    if not isinstance(overrides, dict):
        overrides = {}
    normalized = _normalize_keys(keys)
    if normalized:
        overrides[action] = normalized
    else:
        overrides.pop(action, None)
    if overrides:
        section["keys"] = overrides
    else:
        section.pop("keys", None)
    if section:
        data["field_edit"] = section
    else:
        data.pop("field_edit", None)
    _save_config(data)
