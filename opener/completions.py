"""Shell completion functions for the project-opener CLI."""

from click.shell_completion import CompletionItem

from .config import get_registry_path
from .errors import RegistryLoadError
from .search import fuzzy_match
from .storage import load_registry


def _load_quietly():
    # Completion must never print or fail.
    try:
        return load_registry(get_registry_path())
    except RegistryLoadError:
        return None


def complete_filtered_with_fuzzy(incomplete: str, items: list[str]) -> list[str]:
    """Prefix matches first; fall back to fuzzy matching if none."""
    prefixed = [item for item in items if item.startswith(incomplete)]
    if prefixed or not incomplete:
        return prefixed
    return fuzzy_match(incomplete, items)


def complete_project(ctx, param, incomplete: str) -> list:
    """Shell completion for project names."""
    registry = _load_quietly()
    if registry is None:
        return []

    projects = {p.name: p for p in registry.all_projects()}
    return [
        CompletionItem(name, help=projects[name].path)
        for name in complete_filtered_with_fuzzy(incomplete, list(projects))
    ]


def complete_company(ctx, param, incomplete: str) -> list:
    """Shell completion for company names."""
    registry = _load_quietly()
    if registry is None:
        return []

    index = registry.company_index()
    return [
        CompletionItem(c, help=f"{len(index[c])} projects")
        for c in complete_filtered_with_fuzzy(incomplete, list(index))
    ]
