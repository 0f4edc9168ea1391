from __future__ import annotations

"""
Unit tests for tree description loading.
"""

import json

import pytest

from nametree.domain.config import get_default_tree_description, load_tree_description
from nametree.domain.errors import TreeDescriptionError


def test_default_description_is_a_fresh_copy():
    first = get_default_tree_description()
    first["children"].clear()

    second = get_default_tree_description()
    assert [c["name"] for c in second["children"]] == ["a", "b"]
    assert second["aliases"] == {"var": "a"}


def test_load_valid_file(tmp_path, sample_description):
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(sample_description), encoding="utf-8")

    assert load_tree_description(str(path)) == sample_description


def test_load_missing_file(tmp_path):
    path = tmp_path / "missing.json"
    with pytest.raises(TreeDescriptionError) as exc_info:
        load_tree_description(str(path))

    assert exc_info.value.location == str(path)


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(TreeDescriptionError, match="invalid JSON"):
        load_tree_description(str(path))


def test_load_rejects_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(TreeDescriptionError, match="expected a JSON object"):
        load_tree_description(str(path))
