from __future__ import annotations

"""
Namespace Arena.

Owns every Node of a tree and implements the construction operations:
node creation, child attachment, alias registration and soft-link setup.
Invalid structural changes are logged and ignored so a partially wrong
build never corrupts the parent/child tree.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from nametree.domain.errors import NilArgumentError, NodeNotFoundError
from nametree.domain.node import Node, NodeId

logger = logging.getLogger(__name__)


class Namespace:
    """Arena of nodes indexed by stable NodeIds."""

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Node) and self.owns(node)

    # -------------------------------------------------------------------------
    # CREATION
    # -------------------------------------------------------------------------

    def new_file(self, name: str) -> Node:
        """
        Create a detached leaf node.

        Args:
            name: Node name, not required to be unique.

        Returns:
            Node: The new node, with no children, aliases or link target.
        """
        node = Node(node_id=len(self._nodes), name=name)
        self._nodes.append(node)
        return node

    def new_link(self, name: str, target: Node) -> Node:
        """Create a detached soft link pointing at target."""
        self._require(target, "target", "new_link")
        node = self.new_file(name)
        self.set_link(node, target)
        return node

    # -------------------------------------------------------------------------
    # STRUCTURE
    # -------------------------------------------------------------------------

    def add_child(self, parent: Node, child: Node) -> None:
        """
        Attach child under parent.

        Refused (logged, no mutation) when parent is a soft link, when child
        already belongs to another parent, or when the attachment would make
        child its own ancestor. Re-attaching to the same parent is a no-op.

        Args:
            parent: Directory gaining the child.
            child: Node to attach.

        Raises:
            NilArgumentError: If either node is None.
            NodeNotFoundError: If either node belongs to another namespace.
        """
        self._require(parent, "parent", "add_child")
        self._require(child, "child", "add_child")

        if parent.is_link:
            logger.error(f"Cannot add child '{child.name}' to soft link '{parent.name}'.")
            return
        if child.parent == parent.node_id:
            return
        if child.parent is not None:
            owner = self._nodes[child.parent].name
            logger.error(
                f"Cannot attach '{child.name}' to '{parent.name}': already a child of '{owner}'."
            )
            return
        if self._is_ancestor_or_self(child, parent):
            logger.error(f"Cannot attach '{child.name}' below itself ('{parent.name}').")
            return

        child.parent = parent.node_id
        parent.children.append(child.node_id)

    def add_alias(self, owner: Node, alias: Node, target: Node) -> None:
        """
        Register alias -> target in the alias table of owner.

        An existing mapping for the same alias node is replaced and moves to
        the most-recent position, which is the one lookup prefers on name
        collisions.

        Raises:
            NilArgumentError: If any node is None.
            NodeNotFoundError: If any node belongs to another namespace.
        """
        self._require(owner, "owner", "add_alias")
        self._require(alias, "alias", "add_alias")
        self._require(target, "target", "add_alias")

        if owner.is_link:
            logger.error(f"Cannot add alias '{alias.name}' to soft link '{owner.name}'.")
            return

        for other_id in owner.aliases:
            other = self._nodes[other_id]
            if other_id != alias.node_id and other.name == alias.name:
                logger.debug(
                    f"Alias '{alias.name}' on '{owner.name}' shadows an earlier alias "
                    f"with the same name."
                )
                break

        owner.aliases.pop(alias.node_id, None)
        owner.aliases[alias.node_id] = target.node_id

    def set_link(self, node: Node, target: Node) -> None:
        """
        Turn node into a soft link forwarding to target.

        Refused (logged, no mutation) when node already holds children or
        aliases, since soft links cannot own either.
        """
        self._require(node, "node", "set_link")
        self._require(target, "target", "set_link")

        if node.children or node.aliases:
            logger.error(f"Cannot turn '{node.name}' into a soft link: it has children or aliases.")
            return

        node.is_link = True
        node.target = target.node_id

    # -------------------------------------------------------------------------
    # ACCESSORS
    # -------------------------------------------------------------------------

    def get(self, node_id: NodeId) -> Node:
        """
        Return the node stored at node_id.

        Raises:
            NodeNotFoundError: If node_id is not an index of this arena.
        """
        if not 0 <= node_id < len(self._nodes):
            raise NodeNotFoundError(f"#{node_id}")
        return self._nodes[node_id]

    def owns(self, node: Node) -> bool:
        """Check that node is an entry of this arena."""
        return 0 <= node.node_id < len(self._nodes) and self._nodes[node.node_id] is node

    def parent_of(self, node: Node) -> Optional[Node]:
        return None if node.parent is None else self._nodes[node.parent]

    def children_of(self, node: Node) -> List[Node]:
        return [self._nodes[i] for i in node.children]

    def aliases_of(self, node: Node) -> List[Tuple[Node, Node]]:
        """Alias (alias, target) pairs of node, oldest first."""
        return [(self._nodes[a], self._nodes[t]) for a, t in node.aliases.items()]

    def target_of(self, node: Node) -> Optional[Node]:
        return None if node.target is None else self._nodes[node.target]

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _require(self, node: Optional[Node], argument: str, operation: str) -> Node:
        """Validate a node argument against this arena."""
        if node is None:
            raise NilArgumentError(argument, operation)
        if not self.owns(node):
            raise NodeNotFoundError(
                node.name,
                message=f"{operation}: '{node.name}' is not part of this namespace",
            )
        return node

    def _is_ancestor_or_self(self, candidate: Node, node: Node) -> bool:
        """Walk the parent chain of node looking for candidate."""
        current: Optional[Node] = node
        while current is not None:
            if current.node_id == candidate.node_id:
                return True
            current = self.parent_of(current)
        return False
