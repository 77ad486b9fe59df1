"""Tests for shell completion."""

from opener.completions import complete_company, complete_filtered_with_fuzzy, complete_project


def test_prefix_matches_win():
    assert complete_filtered_with_fuzzy("al", ["alpha", "beta", "salsa"]) == ["alpha"]


def test_fuzzy_fallback():
    assert complete_filtered_with_fuzzy("bt", ["alpha", "beta"]) == ["beta"]


def test_empty_incomplete_lists_everything():
    assert complete_filtered_with_fuzzy("", ["b", "a"]) == ["b", "a"]


def test_complete_project(sample_registry):
    items = complete_project(None, None, "g")
    assert [i.value for i in items] == ["gamma"]
    assert items[0].help == str(sample_registry["gamma"])


def test_complete_company(sample_registry):
    assert [i.value for i in complete_company(None, None, "")] == ["acme"]


def test_completion_on_corrupt_registry(registry_file):
    registry_file.write_text("{broken")
    assert complete_project(None, None, "") == []
