"""Command modules for the project-opener CLI."""

import click

from ..service import RegistryService

EMPTY_REGISTRY_HINT = "No projects configured. Add one using: project-opener add <name> <path>"

pass_service = click.make_pass_decorator(RegistryService)

from .projects import add, remove, list_projects, companies, open_cmd, go  # noqa: E402
from .search import search, interactive  # noqa: E402
from .settings import set_vscode_cmd, set_base_path, set_verbosity_cmd  # noqa: E402
from .scan import scan  # noqa: E402

__all__ = [
    "add",
    "remove",
    "list_projects",
    "companies",
    "open_cmd",
    "go",
    "search",
    "interactive",
    "set_vscode_cmd",
    "set_base_path",
    "set_verbosity_cmd",
    "scan",
]
