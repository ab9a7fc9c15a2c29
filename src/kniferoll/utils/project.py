"""
Project root discovery for kniferoll.

A project root is the nearest directory (walking upward) that holds a
.kniferoll/ data directory, a .kniferoll.json config file, or a .git/
repository.
"""

from pathlib import Path

# Markers that indicate a project root, in order of priority
PROJECT_ROOT_MARKERS = [
    ".kniferoll",  # Local suggestion data
    ".kniferoll.json",  # Project configuration
    ".git",  # Git repository
]


def find_project_root(start: Path | None = None) -> Path | None:
    """
    Find the project root directory by searching upward for marker files.

    Args:
        start: Directory to start searching from. Defaults to current working directory.

    Returns:
        Path to the project root directory, or None if not found.
    """
    if start is None:
        start = Path.cwd()

    for directory in [start.resolve(), *start.resolve().parents]:
        if any((directory / marker).exists() for marker in PROJECT_ROOT_MARKERS):
            return directory

    return None


def get_project_root(start: Path | None = None) -> Path:
    """
    Get the project root directory, falling back to the start directory.

    Unlike find_project_root this never fails: a fresh directory with no
    markers becomes its own project root, so the first `kniferoll record`
    can create the data directory there.

    Args:
        start: Directory to start searching from. Defaults to current working directory.

    Returns:
        Path to the project root directory.
    """
    root = find_project_root(start)
    if root is None:
        return (start or Path.cwd()).resolve()
    return root
