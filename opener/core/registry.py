"""In-memory project registry.

The registry owns every Project record. Company membership is not stored
separately: the company index is a view computed from the project list, so it
always agrees with the ``company`` field of each project.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_EDITOR_COMMAND = "code"


@dataclass(frozen=True)
class Project:
    """A named local project, optionally tagged with a company."""

    name: str
    path: str
    company: Optional[str] = None

    def to_dict(self) -> dict:
        return {"name": self.name, "path": self.path, "company": self.company}

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        return cls(
            name=str(data["name"]),
            path=str(data["path"]),
            company=data.get("company") or None,
        )


class Registry:
    """Projects in insertion order plus the two tool settings."""

    def __init__(
        self,
        projects: Optional[list[Project]] = None,
        editor_command: str = DEFAULT_EDITOR_COMMAND,
        base_path: Optional[str] = None,
    ):
        self._projects: list[Project] = []
        for project in projects or []:
            self.upsert(project.name, project.path, project.company)
        self.editor_command = editor_command
        self.base_path = base_path or str(Path.home())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Registry):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __len__(self) -> int:
        return len(self._projects)

    def _index_of(self, name: str) -> int:
        for i, project in enumerate(self._projects):
            if project.name == name:
                return i
        return -1

    def get(self, name: str) -> Optional[Project]:
        """Exact lookup by name."""
        i = self._index_of(name)
        return self._projects[i] if i >= 0 else None

    def upsert(self, name: str, path: str, company: Optional[str] = None) -> bool:
        """Add a project, or overwrite path and company of an existing one.

        Returns True if the project was newly created.
        """
        if not name:
            raise ValueError("Project name must not be empty")
        project = Project(name=name, path=path, company=company or None)
        i = self._index_of(name)
        if i >= 0:
            self._projects[i] = project
            return False
        self._projects.append(project)
        return True

    def remove(self, name: str) -> Optional[Project]:
        """Remove a project by name. Returns the removed project, or None."""
        i = self._index_of(name)
        if i < 0:
            return None
        return self._projects.pop(i)

    def all_projects(self) -> tuple[Project, ...]:
        return tuple(self._projects)

    def projects_for_company(self, company: str) -> tuple[Project, ...]:
        return tuple(p for p in self._projects if p.company == company)

    def company_index(self) -> dict[str, list[str]]:
        """Company name -> project names, both in first-seen order.

        Companies with no projects never appear, and names are unique because
        project names are.
        """
        index: dict[str, list[str]] = {}
        for project in self._projects:
            if project.company:
                index.setdefault(project.company, []).append(project.name)
        return index

    def companies(self) -> list[str]:
        return list(self.company_index())

    def to_dict(self) -> dict:
        """The persisted JSON document layout."""
        return {
            "projects": [p.to_dict() for p in self._projects],
            "companies": self.company_index(),
            "vscodeCommand": self.editor_command,
            "projectsBasePath": self.base_path,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Registry":
        # "companies" is derived from the projects, so the stored copy is ignored.
        projects = [Project.from_dict(p) for p in data.get("projects") or []]
        return cls(
            projects=projects,
            editor_command=data.get("vscodeCommand") or DEFAULT_EDITOR_COMMAND,
            base_path=data.get("projectsBasePath") or None,
        )
