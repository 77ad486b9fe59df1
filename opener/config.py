"""Tool preferences (config.yaml) and registry file resolution.

config.yaml only holds preferences about the tool itself. The projects live
in the JSON registry file it points to.
"""

import os
from pathlib import Path

import yaml

DEFAULT_REGISTRY_FILE = ".project-opener.json"
DEFAULT_VERBOSITY = 1


def get_config_dir() -> Path:
    """Config directory, honouring XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "project-opener"


def get_config_file() -> Path:
    return get_config_dir() / "config.yaml"


def load_config() -> dict:
    """Read config.yaml; missing, unreadable or non-mapping content reads as {}."""
    try:
        data = yaml.safe_load(get_config_file().read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def update_config(**values) -> dict:
    """Merge values into config.yaml and return the stored mapping."""
    config = {**load_config(), **values}
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_config_file().write_text(
        yaml.safe_dump(config, default_flow_style=False, sort_keys=True),
        encoding="utf-8",
    )
    return config


def get_registry_path() -> Path:
    """Get registry file path with resolution priority.

    Priority:
    1. PROJECT_OPENER_REGISTRY environment variable
    2. ``registry`` key in config.yaml
    3. ~/.project-opener.json (fallback)
    """
    env_registry = os.environ.get("PROJECT_OPENER_REGISTRY")
    if env_registry:
        return Path(env_registry).expanduser()

    configured = load_config().get("registry")
    if configured:
        return Path(configured).expanduser()

    return Path.home() / DEFAULT_REGISTRY_FILE


def get_verbosity() -> int:
    """0 silent, 1 normal, 2 verbose, 3 debug. Bad values read as the default."""
    level = load_config().get("verbosity", DEFAULT_VERBOSITY)
    return level if isinstance(level, int) else DEFAULT_VERBOSITY


def set_verbosity(level: int) -> None:
    # range is validated by the set-verbosity command
    update_config(verbosity=level)
