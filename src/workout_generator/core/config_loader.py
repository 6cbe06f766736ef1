"""
YAML settings loader.

Loads optional user settings from ``~/.workout-generator/config.yaml``
(or the file named by ``WORKOUT_GENERATOR_CONFIG``) and merges them over
the built-in defaults.

Usage:
    from workout_generator.core.config_loader import load_settings
    settings = load_settings()
    limit = settings["catalog_limit"]

Recognised keys:
    catalog_path   path to a YAML/JSON catalog file (default: bundled sample)
    catalog_limit  max base catalog rows to read (default: 500)

A settings file that cannot be read or parsed is ignored with a warning.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .config import CATALOG_ROW_LIMIT

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WORKOUT_GENERATOR_CONFIG"

DEFAULT_SETTINGS: dict[str, Any] = {
    "catalog_path": None,
    "catalog_limit": CATALOG_ROW_LIMIT,
}

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML mapping; return {} (with a warning) on any error."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring settings file %s: %s", path, exc)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: top level is not a mapping", path)
        return {}
    return data


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_user_settings_path() -> Path | None:
    """Return the user settings file if it exists, else None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        p = Path(override).expanduser()
    else:
        home = Path(os.environ.get("HOME", "~")).expanduser()
        p = home / ".workout-generator" / "config.yaml"
    return p if p.is_file() else None


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """
    Load settings, user file over defaults.

    Args:
        path: Explicit settings file; defaults to get_user_settings_path()

    Returns:
        Merged settings dict (always contains every key of DEFAULT_SETTINGS)
    """
    settings = dict(DEFAULT_SETTINGS)
    source = path if path is not None else get_user_settings_path()
    if source is not None:
        settings = _deep_merge(settings, _load_yaml_file(source))

    try:
        settings["catalog_limit"] = int(settings["catalog_limit"])
    except (TypeError, ValueError):
        logger.warning(
            "Invalid catalog_limit %r; using %d", settings["catalog_limit"], CATALOG_ROW_LIMIT
        )
        settings["catalog_limit"] = CATALOG_ROW_LIMIT

    return settings
