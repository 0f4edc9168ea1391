from __future__ import annotations

"""
Namespace Renderer.

Converts a Namespace subtree into a visual ASCII representation. Aliases
are listed under their owning node before its children; soft links show
their target instead of a subtree.
"""

from typing import List, Optional, Tuple

from nametree.domain.namespace import Namespace
from nametree.domain.node import Node

# (text, node to expand or None for leaves, prefix, is_last)
_Entry = Tuple[str, Optional[Node], str, bool]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_namespace(namespace: Namespace, root: Node) -> List[str]:
    """
    Render the subtree under root as a list of lines.

    Uses standard ASCII connectors (├──, └──) and keeps children in
    insertion order.

    Args:
        namespace: Arena owning root.
        root: Top node of the rendered subtree.

    Returns:
        List[str]: Visual lines, the first one being the root name.
    """
    lines: List[str] = [_label(namespace, root)]

    stack: List[_Entry] = []
    _push_entries(namespace, root, "", stack)

    while stack:
        text, node, prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{text}")

        if node is not None:
            child_prefix = prefix + ("    " if is_last else "│   ")
            _push_entries(namespace, node, child_prefix, stack)

    return lines

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _label(namespace: Namespace, node: Node) -> str:
    """Display text for a node."""
    if node.is_link:
        target = namespace.target_of(node)
        return f"{node.name} -> {target.name if target else '?'}"
    return node.name


def _push_entries(namespace: Namespace, node: Node, prefix: str, stack: List[_Entry]) -> None:
    """Queue the aliases and children of node so they pop in display order."""
    if node.is_link:
        return

    entries: List[Tuple[str, Optional[Node]]] = [
        (f"@{alias.name} => {target.name}", None)
        for alias, target in namespace.aliases_of(node)
    ]
    for child in namespace.children_of(node):
        entries.append((_label(namespace, child), None if child.is_link else child))

    total = len(entries)
    for i in range(total - 1, -1, -1):
        text, expand = entries[i]
        stack.append((text, expand, prefix, i == total - 1))
