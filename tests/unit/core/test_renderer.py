from __future__ import annotations

"""
Unit tests for the Namespace Renderer.
"""

from nametree.core.builder import build_namespace
from nametree.core.renderer import render_namespace
from nametree.domain.config import get_default_tree_description


def test_render_default_tree():
    ns, root = build_namespace(get_default_tree_description())

    assert render_namespace(ns, root) == [
        "root",
        "├── @var => a",
        "├── a",
        "│   ├── c",
        "│   └── d",
        "└── b",
    ]


def test_render_links_and_nested_aliases(sample_description):
    ns, root = build_namespace(sample_description)

    assert render_namespace(ns, root) == [
        "root",
        "├── @x => d",
        "├── a",
        "│   ├── c",
        "│   │   ├── @y => f",
        "│   │   └── g",
        "│   └── d",
        "│       └── f",
        "└── b",
        "    ├── e",
        "    │   └── @z => a",
        "    └── h -> d",
    ]


def test_render_single_node(sample_tree):
    assert render_namespace(sample_tree.ns, sample_tree.g) == ["g"]
    assert render_namespace(sample_tree.ns, sample_tree.h) == ["h -> d"]
