from __future__ import annotations

"""
Unit tests for the CLI application controller.

Runs main() in-process and checks exit codes and rendered output.
"""

import json

import pytest

from nametree.interface.cli.app import main

pytestmark = pytest.mark.usefixtures("clean_logging")


@pytest.fixture
def tree_file(tmp_path, sample_description):
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(sample_description), encoding="utf-8")
    return str(path)


def test_default_tree_query(capsys):
    assert main(["b", "d"]) == 0
    assert capsys.readouterr().out.strip() == "The closest common parent directory is: root"


def test_alias_on_default_tree(capsys):
    assert main(["var", "d"]) == 0
    assert capsys.readouterr().out.strip() == "The closest common parent directory is: a"


def test_missing_name(capsys):
    assert main(["b", "nope"]) == 1
    assert capsys.readouterr().out.strip() == "File 'nope' not found"


def test_tree_file_and_json_output(capsys, tree_file):
    assert main(["x", "f", "--tree", tree_file, "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is True
    assert payload["parent_name"] == "d"
    assert payload["parent_path"] == ["root", "a", "d"]


def test_print_tree(capsys, tree_file):
    assert main(["c", "d", "--tree", tree_file, "--print-tree"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "root"
    assert "    └── h -> d" in out
    assert out[-1] == "The closest common parent directory is: a"


def test_dump_tree(capsys):
    assert main(["a", "b", "--dump-tree"]) == 0
    assert json.loads(capsys.readouterr().out)["name"] == "root"


def test_unreadable_tree_file(capsys, tmp_path):
    assert main(["a", "b", "--tree", str(tmp_path / "missing.json")]) == 2
    assert "ERROR" in capsys.readouterr().err


def test_invalid_tree_description(capsys, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"name": "root", "aliases": {"x": "ghost"}}), encoding="utf-8")

    assert main(["a", "b", "--tree", str(path)]) == 2
    assert "unknown id 'ghost'" in capsys.readouterr().err
