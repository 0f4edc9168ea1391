from __future__ import annotations

"""
Tree Description Configuration.

Handles the JSON documents that declare a namespace (nodes, aliases and
soft links) and provides the built-in demo tree used when no document is
supplied.
"""

import copy
import json
import logging
from typing import Any, Dict

from nametree.domain.errors import TreeDescriptionError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DESCRIPTION_KEYS = ("name", "id", "children", "aliases", "link")

_DEFAULT_TREE: Dict[str, Any] = {
    "name": "root",
    "aliases": {"var": "a"},
    "children": [
        {
            "name": "a",
            "children": [
                {"name": "c"},
                {"name": "d"},
            ],
        },
        {"name": "b"},
    ],
}


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def get_default_tree_description() -> Dict[str, Any]:
    """
    Return a fresh copy of the built-in demo tree.

    Returns:
        Dict[str, Any]: root -> {a -> {c, d}, b} with alias 'var' -> a on root.
    """
    return copy.deepcopy(_DEFAULT_TREE)


def load_tree_description(path: str) -> Dict[str, Any]:
    """
    Load a tree description from a JSON file.

    Only the document shape is checked here; node-level validation happens
    when the namespace is built.

    Args:
        path: Path of the JSON document.

    Returns:
        Dict[str, Any]: The parsed description.

    Raises:
        TreeDescriptionError: If the file cannot be read or parsed, or its
                              top level is not a JSON object.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise TreeDescriptionError(f"cannot read tree description: {e}", path) from e
    except json.JSONDecodeError as e:
        raise TreeDescriptionError(f"invalid JSON: {e}", path) from e

    if not isinstance(data, dict):
        raise TreeDescriptionError(
            f"expected a JSON object, received {type(data).__name__}", path
        )

    logger.debug(f"Tree description loaded from {path}")
    return data
