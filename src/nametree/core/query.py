from __future__ import annotations

"""
Common Parent Query Service.

Resolves two names against a namespace and reports their closest common
parent. Lookup misses and resolver errors are captured in the returned
QueryResult instead of being raised, so interface layers only render.
"""

import logging

from nametree.core.resolver import Resolver
from nametree.domain.errors import NameTreeError
from nametree.domain.namespace import Namespace
from nametree.domain.node import Node
from nametree.domain.query_models import QueryResult, create_error_result

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_query(namespace: Namespace, root: Node, first: str, second: str) -> QueryResult:
    """
    Find the closest common parent of the nodes named first and second.

    Names are resolved from root through aliases and soft links.

    Args:
        namespace: Arena owning root.
        root: Node lookups start from and paths end at.
        first: Name of the first node.
        second: Name of the second node.

    Returns:
        QueryResult: The common parent and its path, or the failure reason.
    """
    resolver = Resolver(namespace)

    # 1. Name resolution
    file1, found1 = resolver.find_file_by_name(root, first)
    if not found1 or file1 is None:
        logger.info(f"Lookup miss: '{first}'")
        return create_error_result(first, second, f"File '{first}' not found")

    file2, found2 = resolver.find_file_by_name(root, second)
    if not found2 or file2 is None:
        logger.info(f"Lookup miss: '{second}'")
        return create_error_result(first, second, f"File '{second}' not found")

    logger.debug(f"Resolved '{first}' -> {file1!r}, '{second}' -> {file2!r}")

    # 2. Ancestry
    try:
        parent = resolver.find_parent(root, file1, file2)
        if parent is None:
            return create_error_result(first, second, "No common parent directory")
        path = resolver.find_path(root, parent)
    except NameTreeError as e:
        logger.warning(f"Common parent query failed ({e.kind.value}): {e}")
        return create_error_result(first, second, str(e))

    return QueryResult(
        ok=True,
        error="",
        first=first,
        second=second,
        parent_name=parent.name,
        parent_path=[n.name for n in path],
    )
