"""Shared test fixtures for project-opener tests."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def temp_home(tmp_path, monkeypatch):
    """Isolate the user environment under tmp_path.

    Sets up:
    - HOME pointing to tmp_path/home (also the working directory)
    - XDG_CONFIG_HOME so opener.config reads tmp_path/config/project-opener/config.yaml
    - PROJECT_OPENER_REGISTRY pointing to tmp_path/registry.json

    Returns the home path.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("PROJECT_OPENER_REGISTRY", str(tmp_path / "registry.json"))
    monkeypatch.chdir(home)
    return home


@pytest.fixture
def registry_file(temp_home) -> Path:
    return temp_home.parent / "registry.json"


def make_project_dir(parent: Path, name: str, indicator: str = ".git") -> Path:
    """Create a directory that looks like a project root."""
    path = parent / name
    path.mkdir(parents=True)
    if indicator.startswith("."):
        (path / indicator).mkdir()
    else:
        (path / indicator).write_text("{}")
    return path


@pytest.fixture
def sample_registry(temp_home, registry_file):
    """Write a registry with three projects.

    Creates:
    - alpha (acme), beta (acme), gamma (no company) under ~/work

    Returns dict with project paths.
    """
    work = temp_home / "work"
    paths = {name: make_project_dir(work, name) for name in ("alpha", "beta", "gamma")}

    data = {
        "projects": [
            {"name": "alpha", "path": str(paths["alpha"]), "company": "acme"},
            {"name": "beta", "path": str(paths["beta"]), "company": "acme"},
            {"name": "gamma", "path": str(paths["gamma"]), "company": None},
        ],
        "companies": {"acme": ["alpha", "beta"]},
        "vscodeCommand": "code",
        "projectsBasePath": str(temp_home),
    }
    registry_file.write_text(json.dumps(data, indent=2))
    return {"registry": registry_file, "work": work, **paths}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def launched(monkeypatch):
    """Record editor launches instead of running the editor."""
    calls = []

    def fake_launch(command, path):
        calls.append((command, path))

    monkeypatch.setattr("opener.service.launch", fake_launch)
    return calls


def read_registry(path: Path) -> dict:
    return json.loads(path.read_text())
