"""Path resolution for user-supplied project paths."""

import os
from pathlib import Path


def normalize_path(raw_path: str, cwd: str | None = None, home: str | None = None) -> str:
    """Resolve a user path to an absolute one without touching the filesystem.

    - Absolute paths are returned unchanged.
    - A leading ``~`` is replaced with the home directory.
    - Anything else is joined onto ``cwd``.
    """
    if os.path.isabs(raw_path):
        return raw_path
    if raw_path.startswith("~"):
        return (home if home is not None else str(Path.home())) + raw_path[1:]
    base = cwd if cwd is not None else os.getcwd()
    return os.path.normpath(os.path.join(base, raw_path))


def path_exists(path: str) -> bool:
    return Path(path).exists()
