from __future__ import annotations

"""
Namespace Node Data Model.

Provides the vertex record stored in a Namespace arena. Every structural
reference (parent, children, aliases, link target) is a NodeId pointing
back into the same arena, so nodes never own each other.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

# Stable index of a node inside its owning Namespace
NodeId = int


# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class Node:
    """
    A named vertex of the namespace tree.

    Names are not unique. Two nodes are the same node only if they are the
    same arena entry.

    Attributes:
        node_id: Arena index, fixed at creation.
        name: Identifier used by name lookup.
        parent: Arena index of the parent, None for roots and detached nodes.
        children: Ordered arena indices of the child nodes.
        aliases: Alias node index -> target node index, in insertion order.
        is_link: True when this node is a soft link.
        target: Arena index of the link target when is_link is set.
    """
    node_id: NodeId
    name: str
    parent: Optional[NodeId] = None
    children: List[NodeId] = field(default_factory=list)
    aliases: Dict[NodeId, NodeId] = field(default_factory=dict)
    is_link: bool = False
    target: Optional[NodeId] = None

    def __repr__(self) -> str:
        kind = f" -> #{self.target}" if self.is_link else ""
        return f"Node(#{self.node_id} {self.name!r}{kind})"
