"""Tests for JSON persistence."""

import json

import pytest

from opener.core.registry import Registry
from opener.errors import RegistryLoadError, RegistrySaveError
from opener.storage import dump_registry, load_registry, save_registry


def test_missing_file_is_absent(tmp_path):
    assert load_registry(tmp_path / "nope.json") is None


def test_corrupt_file_raises(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text("{not json")
    with pytest.raises(RegistryLoadError):
        load_registry(path)


def test_non_object_raises(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text("[]")
    with pytest.raises(RegistryLoadError):
        load_registry(path)


def test_project_without_path_raises(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text(json.dumps({"projects": [{"name": "a"}]}))
    with pytest.raises(RegistryLoadError):
        load_registry(path)


def test_missing_companies_key_tolerated(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text(json.dumps({
        "projects": [{"name": "a", "path": "/a", "company": "acme"}],
        "vscodeCommand": "code",
        "projectsBasePath": "/home/u",
    }))
    assert load_registry(path).company_index() == {"acme": ["a"]}


def test_save_writes_indented_document(tmp_path):
    registry = Registry(base_path="/home/u")
    registry.upsert("a", "/a", "acme")
    path = tmp_path / "sub" / "registry.json"

    save_registry(registry, path)

    text = path.read_text()
    assert text.startswith('{\n  "projects"')
    assert json.loads(text)["companies"] == {"acme": ["a"]}
    assert load_registry(path) == registry


def test_remove_missing_is_byte_identical(tmp_path):
    registry = Registry(base_path="/home/u")
    registry.upsert("a", "/a", "acme")
    before = dump_registry(registry)
    registry.remove("nonexistent")
    assert dump_registry(registry) == before


def test_failed_save_leaves_previous_file(tmp_path, monkeypatch):
    path = tmp_path / "registry.json"
    path.write_text("previous")

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("opener.storage.os.replace", broken_replace)
    with pytest.raises(RegistrySaveError, match="disk full"):
        save_registry(Registry(base_path="/home/u"), path)

    assert path.read_text() == "previous"
    assert list(tmp_path.iterdir()) == [path]
