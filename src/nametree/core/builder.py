from __future__ import annotations

"""
Namespace Builder.

Turns a tree description (see nametree.domain.config) into a populated
Namespace. Validation is strict: any malformed entry aborts the build with
a TreeDescriptionError naming the offending location.
"""

import logging
from typing import Any, Dict, List, Tuple

from nametree.domain.config import DESCRIPTION_KEYS
from nametree.domain.errors import TreeDescriptionError
from nametree.domain.namespace import Namespace
from nametree.domain.node import Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_namespace(description: Any) -> Tuple[Namespace, Node]:
    """
    Build a Namespace from a tree description.

    Nodes are created and attached first; soft links and aliases are wired
    afterwards so references may point anywhere in the tree, including
    forward to entries declared later.

    Args:
        description: Root entry of the description.

    Returns:
        Tuple[Namespace, Node]: The populated arena and its root node.

    Raises:
        TreeDescriptionError: If the description is malformed or references
                              an unknown id.
    """
    namespace = Namespace()
    by_id: Dict[str, Node] = {}
    pending_links: List[Tuple[Node, str, str]] = []
    pending_aliases: List[Tuple[Node, str, str, str]] = []
    stack: List[Tuple[Any, str, Node]] = []

    def register(entry: Any, location: str) -> Node:
        """Validate entry, create its node and queue its indirections."""
        _validate_entry(entry, location)

        node = namespace.new_file(entry["name"])
        node_ref = entry.get("id", entry["name"])
        if node_ref in by_id:
            raise TreeDescriptionError(f"duplicate id '{node_ref}'", f"{location}.id")
        by_id[node_ref] = node

        if "link" in entry:
            pending_links.append((node, entry["link"], f"{location}.link"))
        for alias_name, ref in entry.get("aliases", {}).items():
            pending_aliases.append((node, alias_name, ref, f"{location}.aliases.{alias_name}"))

        children = entry.get("children", [])
        for index in range(len(children) - 1, -1, -1):
            stack.append((children[index], f"{location}.children[{index}]", node))
        return node

    # 1. Node creation and parent/child structure
    root = register(description, "root")
    while stack:
        entry, location, parent = stack.pop()
        namespace.add_child(parent, register(entry, location))

    # 2. Indirection wiring
    for node, ref, location in pending_links:
        namespace.set_link(node, _lookup_ref(by_id, ref, location))

    for owner, alias_name, ref, location in pending_aliases:
        target = _lookup_ref(by_id, ref, location)
        namespace.add_alias(owner, namespace.new_file(alias_name), target)

    logger.debug(
        f"Namespace built: {len(by_id)} nodes, {len(pending_links)} links, "
        f"{len(pending_aliases)} aliases."
    )
    return namespace, root

# -----------------------------------------------------------------------------
# VALIDATION HELPERS
# -----------------------------------------------------------------------------

def _validate_entry(entry: Any, location: str) -> None:
    """Check the shape of a single description entry."""
    if not isinstance(entry, dict):
        raise TreeDescriptionError(
            f"expected an object, received {type(entry).__name__}", location
        )

    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise TreeDescriptionError("'name' must be a non-empty string", f"{location}.name")

    if "id" in entry and (not isinstance(entry["id"], str) or not entry["id"]):
        raise TreeDescriptionError("'id' must be a non-empty string", f"{location}.id")

    children = entry.get("children", [])
    if not isinstance(children, list):
        raise TreeDescriptionError("'children' must be a list", f"{location}.children")

    aliases = entry.get("aliases", {})
    if not isinstance(aliases, dict):
        raise TreeDescriptionError("'aliases' must be an object", f"{location}.aliases")
    for alias_name, ref in aliases.items():
        if not isinstance(ref, str):
            raise TreeDescriptionError(
                "alias target must be an id string", f"{location}.aliases.{alias_name}"
            )

    if "link" in entry:
        if not isinstance(entry["link"], str):
            raise TreeDescriptionError("'link' must be an id string", f"{location}.link")
        if children or aliases:
            raise TreeDescriptionError(
                "a soft link cannot declare children or aliases", location
            )

    unknown = [k for k in entry if k not in DESCRIPTION_KEYS]
    if unknown:
        logger.warning(f"Ignoring unknown keys at {location}: {', '.join(sorted(unknown))}")


def _lookup_ref(by_id: Dict[str, Node], ref: str, location: str) -> Node:
    """Resolve a description reference to its node."""
    node = by_id.get(ref)
    if node is None:
        raise TreeDescriptionError(f"unknown id '{ref}'", location)
    return node
