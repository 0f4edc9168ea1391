from __future__ import annotations

"""
Namespace Resolver.

Stateless query algorithms over a Namespace: name lookup through aliases
and soft links, root-to-node path computation along parent links, and
lowest common ancestor of two nodes. Every walk uses an explicit stack or
loop so deep trees never exhaust the interpreter recursion limit.
"""

import logging
from typing import List, Optional, Set, Tuple

from nametree.domain.errors import NilArgumentError, NodeNotFoundError
from nametree.domain.namespace import Namespace
from nametree.domain.node import Node, NodeId

logger = logging.getLogger(__name__)


class Resolver:
    """Read-only queries over the nodes of one Namespace."""

    def __init__(self, namespace: Namespace) -> None:
        self.namespace = namespace

    # -------------------------------------------------------------------------
    # NAME LOOKUP
    # -------------------------------------------------------------------------

    def find_file_by_name(self, start: Optional[Node], name: str) -> Tuple[Optional[Node], bool]:
        """
        Depth-first, pre-order search for name below start.

        Each visited node is first resolved through its soft-link chain, then
        matched by its own name, then by the names of its aliases (the most
        recently registered alias wins), then its children are visited in
        insertion order. A resolved node is expanded at most once, so soft
        links pointing back at an ancestor, or at each other, end the walk
        instead of looping.

        Args:
            start: Node the search begins at.
            name: Name to look for.

        Returns:
            Tuple[Optional[Node], bool]: The matched node and True, or
                                         (None, False) when nothing matches.
                                         A None start, or a start node owned
                                         by another namespace, is reported as
                                         not found.
        """
        if start is None:
            logger.debug(f"Lookup of '{name}' started from no node.")
            return None, False
        if not self.namespace.owns(start):
            logger.debug(f"Lookup of '{name}' started from '{start.name}', outside this namespace.")
            return None, False

        visited: Set[NodeId] = set()
        stack: List[NodeId] = [start.node_id]
        while stack:
            node = self._follow_links(self.namespace.get(stack.pop()))
            if node is None or node.node_id in visited:
                continue
            visited.add(node.node_id)

            if node.name == name:
                return node, True

            aliased = self._match_alias(node, name)
            if aliased is not None:
                return aliased, True

            stack.extend(reversed(node.children))

        return None, False

    def resolve_link(self, node: Node) -> Node:
        """
        Follow a chain of soft links to the first node that is not a link.

        Raises:
            NodeNotFoundError: If the chain loops back on itself.
        """
        resolved = self._follow_links(node)
        if resolved is None:
            raise NodeNotFoundError(node.name, message=f"soft link '{node.name}' never reaches a node")
        return resolved

    # -------------------------------------------------------------------------
    # PATHS AND ANCESTRY
    # -------------------------------------------------------------------------

    def find_path(self, root: Optional[Node], target: Optional[Node]) -> List[Node]:
        """
        Compute the ordered node sequence from root to target, both inclusive.

        Walks upward from target through parent links only. Soft links and
        aliases are never followed, so the path to a soft link is the path to
        its own position in the tree.

        Raises:
            NilArgumentError: If root or target is None.
            NodeNotFoundError: If the parent chain of target does not end at root.
        """
        if root is None:
            raise NilArgumentError("root", "find_path")
        if target is None:
            raise NilArgumentError("target", "find_path")
        if not self.namespace.owns(target):
            raise NodeNotFoundError(target.name, root.name)

        path: List[Node] = [target]
        node = target
        while node.parent is not None:
            node = self.namespace.get(node.parent)
            path.append(node)

        if node is not root:
            raise NodeNotFoundError(target.name, root.name)

        path.reverse()
        return path

    def find_parent(
            self,
            root: Optional[Node],
            file1: Optional[Node],
            file2: Optional[Node],
    ) -> Optional[Node]:
        """
        Return the lowest common ancestor of file1 and file2 under root.

        A node counts as its own ancestor, so equal arguments yield that node
        and a root argument yields root.

        Raises:
            NilArgumentError: If root, file1 or file2 is None.
            NodeNotFoundError: If either file is not a descendant of root.
        """
        if root is None:
            raise NilArgumentError("root", "find_parent")
        if file1 is None:
            raise NilArgumentError("file1", "find_parent")
        if file2 is None:
            raise NilArgumentError("file2", "find_parent")

        path1 = self.find_path(root, file1)
        path2 = self.find_path(root, file2)

        common: Optional[Node] = None
        for first, second in zip(path1, path2):
            if first is not second:
                break
            common = first

        return common

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _follow_links(self, node: Node) -> Optional[Node]:
        """Resolve the link chain of node, None if the chain is cyclic."""
        seen: Set[NodeId] = set()
        while node.is_link:
            if node.node_id in seen or node.target is None:
                return None
            seen.add(node.node_id)
            node = self.namespace.get(node.target)
        return node

    def _match_alias(self, node: Node, name: str) -> Optional[Node]:
        """Return the target of the newest alias of node called name."""
        for alias_id in reversed(list(node.aliases)):
            if self.namespace.get(alias_id).name == name:
                return self.namespace.get(node.aliases[alias_id])
        return None
