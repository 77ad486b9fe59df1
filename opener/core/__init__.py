"""Registry data model and path handling."""

from .paths import normalize_path, path_exists
from .registry import DEFAULT_EDITOR_COMMAND, Project, Registry

__all__ = [
    "DEFAULT_EDITOR_COMMAND",
    "Project",
    "Registry",
    "normalize_path",
    "path_exists",
]
