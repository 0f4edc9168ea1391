from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared namespace fixtures used across unit tests.
"""

import logging
import os
import sys
from types import SimpleNamespace
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from nametree.domain.namespace import Namespace  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree() -> SimpleNamespace:
    """
    Build the reference namespace.

    Structure:
    root            (alias x => d)
      a
        c           (alias y => f)
          g
        d
          f
      b
        e           (alias z => a)
        h -> d      (soft link)

    Returns:
        SimpleNamespace: 'ns' is the arena, every other attribute is the
                         node of the same name.
    """
    ns = Namespace()
    t = SimpleNamespace(ns=ns)
    for name in "root a b c d e f g".split():
        setattr(t, name, ns.new_file(name))

    ns.add_child(t.root, t.a)
    ns.add_child(t.root, t.b)
    ns.add_child(t.a, t.c)
    ns.add_child(t.a, t.d)
    ns.add_child(t.b, t.e)
    ns.add_child(t.d, t.f)
    ns.add_child(t.c, t.g)

    t.h = ns.new_link("h", t.d)
    ns.add_child(t.b, t.h)

    t.x = ns.new_file("x")
    ns.add_alias(t.root, t.x, t.d)
    t.y = ns.new_file("y")
    ns.add_alias(t.c, t.y, t.f)
    t.z = ns.new_file("z")
    ns.add_alias(t.e, t.z, t.a)
    return t


@pytest.fixture
def sample_description() -> Dict[str, Any]:
    """Tree description equivalent to the sample_tree fixture."""
    return {
        "name": "root",
        "aliases": {"x": "d"},
        "children": [
            {
                "name": "a",
                "children": [
                    {"name": "c", "aliases": {"y": "f"}, "children": [{"name": "g"}]},
                    {"name": "d", "children": [{"name": "f"}]},
                ],
            },
            {
                "name": "b",
                "children": [
                    {"name": "e", "aliases": {"z": "a"}},
                    {"name": "h", "link": "d"},
                ],
            },
        ],
    }


@pytest.fixture
def clean_logging():
    """Detach nametree logging handlers and listeners before and after a test."""
    _reset_logging()
    yield
    _reset_logging()


def _reset_logging() -> None:
    from nametree.infra.logging import (
        _CONFIGURED_FLAG_ATTR,
        _HANDLER_TAG_ATTR,
        _QUEUE_LISTENER_ATTR,
    )

    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)
