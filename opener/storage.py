"""JSON persistence for the project registry."""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional

from .core.registry import Registry
from .errors import RegistryLoadError, RegistrySaveError


def load_registry(path: Path) -> Optional[Registry]:
    """Read the registry document, or None if the file does not exist."""
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise RegistryLoadError(f"{path}: {e}") from e
    if not isinstance(data, dict):
        raise RegistryLoadError(f"{path}: expected a JSON object")
    try:
        return Registry.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise RegistryLoadError(f"{path}: malformed project entry ({e})") from e


def dump_registry(registry: Registry) -> str:
    return json.dumps(registry.to_dict(), indent=2) + "\n"


def save_registry(registry: Registry, path: Path) -> None:
    """Write the whole document, replacing the previous file atomically.

    On failure the previous file is left untouched.
    """
    content = dump_registry(registry)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as e:
        raise RegistrySaveError(f"{path}: {e}") from e
