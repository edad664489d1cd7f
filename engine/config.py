"""Lightweight loader for engine configuration toggles."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

LOGGER = logging.getLogger(__name__)

_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "engine.json"
_CONFIG_DATA: Dict[str, Any] = {}
_LOADED = False


def _load(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        LOGGER.warning("failed to load config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        LOGGER.warning("config %s is not a JSON object; ignoring it", path)
        return {}
    return data


def _ensure_loaded() -> None:
    global _CONFIG_DATA, _LOADED
    if not _LOADED:
        _CONFIG_DATA = _load(_CONFIG_PATH)
        _LOADED = True


def load(path: Union[str, Path]) -> Dict[str, Any]:
    """Replace the active configuration with the contents of ``path``."""
    global _CONFIG_DATA, _LOADED
    _CONFIG_DATA = _load(Path(path))
    _LOADED = True
    return _CONFIG_DATA


def reset(data: Optional[Dict[str, Any]] = None) -> None:
    """Drop the cached configuration; ``data`` (if given) becomes the active one."""
    global _CONFIG_DATA, _LOADED
    _CONFIG_DATA = dict(data) if data is not None else {}
    _LOADED = data is not None


def get(path: str, default: Any = None) -> Any:
    """Return a config value using dotted paths, or default when missing."""
    _ensure_loaded()
    if not path:
        return _CONFIG_DATA

    current: Any = _CONFIG_DATA
    for segment in path.split('.'):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        else:
            return default
    return current
