"""
Configuration models and loading.

This module provides Pydantic models for kniferoll configuration
with multi-layer merging: defaults < user < project < env vars.
"""

from .env import load_layered_env
from .loader import (
    get_project_config_path,
    get_user_config_path,
    get_xdg_config_home,
    load_config,
)
from .models import (
    KnifeRollConfig,
    StoreConfig,
    SuggestionConfig,
)

__all__ = [
    # Models
    "KnifeRollConfig",
    "StoreConfig",
    "SuggestionConfig",
    # Loader functions
    "get_project_config_path",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_config",
    "load_layered_env",
]
