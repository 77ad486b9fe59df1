"""Discovery of project directories under a base path."""

from dataclasses import dataclass
from pathlib import Path

# Files or directories whose presence marks a project root.
PROJECT_INDICATORS = (
    ".git",
    "package.json",
    "composer.json",
    ".vscode",
    "pom.xml",
    "Cargo.toml",
    "go.mod",
)


@dataclass(frozen=True)
class FoundProject:
    name: str
    path: str


def is_project_dir(path: Path) -> bool:
    return any((path / indicator).exists() for indicator in PROJECT_INDICATORS)


def find_projects(directory: Path) -> list[FoundProject]:
    """Immediate sub-directories of ``directory`` that look like projects.

    Raises OSError if the directory cannot be listed.
    """
    found = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir() and is_project_dir(entry):
            found.append(FoundProject(name=entry.name, path=str(entry)))
    return found
