from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import OPTION_ALIASES, TwsortCfg
from .typed import ConfigError, build_typed

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = ("twsort.yaml", ".twsort.yaml")

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> dict:
    """Read a YAML file that must hold a mapping."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}")
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def _normalize_keys(raw: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in raw.items():
        name = OPTION_ALIASES.get(key, key)
        if name in out:
            raise ConfigError(f"option given twice: {key!r}", (name,))
        out[name] = value
    return out


def cfg_from_dict(raw: Optional[Dict[str, Any]]) -> TwsortCfg:
    """Build configuration from a raw mapping (YAML document or test input)."""
    if not raw:
        return TwsortCfg()
    return build_typed(TwsortCfg, _normalize_keys(raw))


def find_config(start: Path) -> Optional[Path]:
    """Look for a config file in `start` and its parents."""
    current = start.resolve()
    for directory in (current, *current.parents):
        for name in CONFIG_FILENAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def load_config(path: Optional[Path] = None, *, start: Optional[Path] = None) -> TwsortCfg:
    """
    Load configuration.

    Args:
        path: Explicit config file (must exist)
        start: Directory to search upward from when no path is given

    Returns:
        TwsortCfg (defaults when no file is found)
    """
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"config file not found: {path}")
        cfg_path: Optional[Path] = path
    else:
        cfg_path = find_config(start or Path.cwd())

    if cfg_path is None:
        logger.debug("No config file found, using defaults")
        return TwsortCfg()

    logger.debug("Loading config from %s", cfg_path)
    return cfg_from_dict(_read_yaml_map(cfg_path))


__all__ = ["CONFIG_FILENAMES", "cfg_from_dict", "find_config", "load_config"]
