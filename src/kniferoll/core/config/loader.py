"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars

Nothing is cached at module level; callers load a config once and pass it
to the services that need it.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import KnifeRollConfig

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "kniferoll"
PROJECT_CONFIG_NAME = ".kniferoll.json"


def get_xdg_config_home() -> Path:
    """Base directory for per-user config, honoring $XDG_CONFIG_HOME."""
    configured = os.environ.get("XDG_CONFIG_HOME", "").strip()
    return Path(configured) if configured else Path.home() / ".config"


def get_user_config_path() -> Path:
    """Per-user settings shared by every kitchen project on this machine."""
    return get_xdg_config_home() / CONFIG_DIR_NAME / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """
    Location of the project's .kniferoll.json.

    Args:
        cwd: Project directory (defaults to current directory)
    """
    return (cwd or Path.cwd()) / PROJECT_CONFIG_NAME


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Layer `override` onto `base` without mutating either.

    Sections present in both layers as objects are combined key by key, so
    a project file can change suggestions.limit and still inherit
    suggestions.max_use_count from the user file. Any other value, including
    a bare string where the lower layer had an object, replaces what was
    there.
    """
    merged = dict(base)
    for key, value in override.items():
        lower = merged.get(key)
        if isinstance(lower, dict) and isinstance(value, dict):
            value = deep_merge(lower, value)
        merged[key] = value
    return merged


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Read one config layer.

    A missing file is an absent layer. A file that can't be read, isn't
    valid JSON, or doesn't hold an object is skipped with a warning so a
    typo in one layer never hides the others.

    Returns:
        The layer's settings, or None when the layer is skipped
    """
    if not path.is_file():
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to parse config at %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Ignoring config at %s: expected a JSON object", path)
        return None
    return data


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Env vars have the highest precedence and override all config files.

    Supported env vars:
        KNIFEROLL_SUGGESTION_LIMIT - overrides suggestions.limit ("all" shows every match)
        KNIFEROLL_MAX_USE_COUNT - overrides suggestions.max_use_count
        KNIFEROLL_STORE_PATH - overrides store.path

    Args:
        config_dict: Configuration dictionary to override

    Returns:
        Configuration dictionary with env var overrides applied
    """
    result = config_dict.copy()

    if limit_str := os.environ.get("KNIFEROLL_SUGGESTION_LIMIT"):
        if limit_str.strip().lower() == "all":
            result["suggestions"] = {**result.get("suggestions", {}), "limit": None}
        else:
            try:
                limit_value = int(limit_str)
                result["suggestions"] = {**result.get("suggestions", {}), "limit": limit_value}
            except ValueError:
                logger.warning("Invalid KNIFEROLL_SUGGESTION_LIMIT value '%s', ignoring", limit_str)

    if max_str := os.environ.get("KNIFEROLL_MAX_USE_COUNT"):
        try:
            max_value = int(max_str)
            if max_value < 1:
                logger.warning("KNIFEROLL_MAX_USE_COUNT must be >= 1, got %d, ignoring", max_value)
            else:
                result["suggestions"] = {
                    **result.get("suggestions", {}),
                    "max_use_count": max_value,
                }
        except ValueError:
            logger.warning("Invalid KNIFEROLL_MAX_USE_COUNT value '%s', ignoring", max_str)

    if store_path := os.environ.get("KNIFEROLL_STORE_PATH"):
        store = result.get("store", {})
        if isinstance(store, str):
            store = {"path": store}
        result["store"] = {**store, "path": store_path}

    return result


def get_default_config() -> dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Dictionary with default configuration values
    """
    return {
        "suggestions": {"limit": 3, "max_use_count": 50, "search_limit": 10},
        "store": {"path": ".kniferoll/suggestions.jsonl"},
    }


def load_config(project_dir: Path | None = None) -> KnifeRollConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (KNIFEROLL_*)
        2. Project config (.kniferoll.json)
        3. User config (~/.config/kniferoll/config.json)
        4. Hardcoded defaults

    Args:
        project_dir: Project directory to load .kniferoll.json from (defaults to cwd)

    Returns:
        Validated KnifeRollConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation
    """
    merged = get_default_config()

    user_config_path = get_user_config_path()
    if user_config := load_json_file(user_config_path):
        merged = deep_merge(merged, user_config)

    project_config_path = get_project_config_path(project_dir)
    if project_config := load_json_file(project_config_path):
        merged = deep_merge(merged, project_config)

    merged = apply_env_overrides(merged)

    return KnifeRollConfig(**merged)
