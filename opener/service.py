"""Registry operations used by the CLI commands.

A ``RegistryService`` owns one Registry for the duration of a single command
invocation. Every mutating operation rewrites the registry file before it
returns.
"""

import os
from pathlib import Path
from typing import Optional

from .core.paths import normalize_path, path_exists
from .core.registry import Project, Registry
from .errors import PathNotFoundError
from .launcher import launch
from .scan import FoundProject, find_projects
from .search import Outcome, fuzzy_search, select, substring_search
from .storage import load_registry, save_registry


class RegistryService:
    def __init__(
        self,
        registry: Registry,
        registry_path: Path,
        cwd: Optional[str] = None,
        home: Optional[str] = None,
    ):
        self.registry = registry
        self.registry_path = registry_path
        self.cwd = cwd if cwd is not None else os.getcwd()
        self.home = home if home is not None else str(Path.home())

    @classmethod
    def load(cls, registry_path: Path, **kwargs) -> "RegistryService":
        """Load the registry file, creating a default one if it is absent.

        Raises RegistryLoadError for an unreadable file and RegistrySaveError
        if the default file cannot be written.
        """
        registry = load_registry(registry_path)
        if registry is None:
            service = cls(Registry(base_path=kwargs.get("home")), registry_path, **kwargs)
            service.save()
            return service
        return cls(registry, registry_path, **kwargs)

    def save(self) -> None:
        save_registry(self.registry, self.registry_path)

    # Paths

    def resolve_path(self, raw_path: str) -> str:
        return normalize_path(raw_path, cwd=self.cwd, home=self.home)

    # Mutations

    def add_project(self, name: str, path: str, company: Optional[str] = None) -> bool:
        """Upsert a project whose path is already absolute. True if new."""
        created = self.registry.upsert(name, path, company)
        self.save()
        return created

    def remove_project(self, name: str) -> Optional[Project]:
        removed = self.registry.remove(name)
        if removed is not None:
            self.save()
        return removed

    def set_editor_command(self, command: str) -> None:
        self.registry.editor_command = command
        self.save()

    def set_base_path(self, raw_path: str) -> str:
        """Set the default scan directory; it must exist."""
        path = self.resolve_path(raw_path)
        if not path_exists(path):
            raise PathNotFoundError(f"Path does not exist: {path}")
        self.registry.base_path = path
        self.save()
        return path

    # Queries

    def get(self, name: str) -> Optional[Project]:
        return self.registry.get(name)

    def list_projects(self, company: Optional[str] = None) -> list[Project]:
        if company:
            return list(self.registry.projects_for_company(company))
        return list(self.registry.all_projects())

    def grouped_projects(self, company: Optional[str] = None) -> dict[str, list[Project]]:
        """Projects grouped under sorted company names; untagged under ``None``."""
        groups: dict[Optional[str], list[Project]] = {}
        for project in self.list_projects(company):
            groups.setdefault(project.company, []).append(project)
        return dict(sorted(groups.items(), key=lambda kv: (kv[0] is None, kv[0] or "")))

    def company_counts(self) -> dict[str, int]:
        index = self.registry.company_index()
        return {company: len(index[company]) for company in sorted(index)}

    def search(self, query: str, company: Optional[str] = None) -> Outcome:
        """Substring search over name, path and company."""
        return select(substring_search(query, self.registry.all_projects(), company))

    def fuzzy_search(self, query: str, company: Optional[str] = None) -> list[Project]:
        return fuzzy_search(query, self.registry.all_projects(), company)

    def scan(self, directory: Optional[str] = None) -> tuple[str, list[FoundProject]]:
        """Candidate projects under ``directory`` (default: the base path)."""
        root = self.resolve_path(directory or self.registry.base_path)
        return root, find_projects(Path(root))

    # Launching

    def launch_command(self, project: Project) -> str:
        return f'{self.registry.editor_command} "{project.path}"'

    def open_project(self, project: Project) -> None:
        """Raises LaunchError if the editor fails."""
        launch(self.registry.editor_command, project.path)
