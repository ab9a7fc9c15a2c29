"""Environment file loading.

KNIFEROLL_* overrides can live in .env files as well as the shell:
- the process environment always wins
- project files (.env, .env.local) override the user file
- the user file (~/.config/kniferoll/.env) supplies personal defaults
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

logger = logging.getLogger(__name__)


def read_env_file(path: Path) -> dict[str, str]:
    """Parse a .env file, dropping keys without values."""
    if not path.is_file():
        return {}
    return {
        str(key): str(value)
        for key, value in dotenv_values(path).items()
        if key is not None and value is not None
    }


def load_layered_env(
    *,
    project_dir: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> set[str]:
    """Copy values from user and project .env files into os.environ.

    Args:
        project_dir: Base directory for the default project files (defaults to cwd)
        user_env_paths: Explicit user env files
        project_env_paths: Explicit project env files, later files win

    Returns:
        Names of the variables that were set by this call
    """
    if project_dir is None:
        project_dir = Path.cwd()

    if user_env_paths is None:
        xdg_home = Path(os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config")))
        user_env_paths = [xdg_home / "kniferoll" / ".env"]

    if project_env_paths is None:
        project_env_paths = [project_dir / ".env", project_dir / ".env.local"]

    preexisting = set(os.environ)
    loaded: set[str] = set()

    for path in [*user_env_paths, *project_env_paths]:
        for key, value in read_env_file(Path(path)).items():
            if key in preexisting:
                continue
            os.environ[key] = value
            loaded.add(key)

    if loaded:
        logger.debug("Loaded %d variables from .env files", len(loaded))
    return loaded
