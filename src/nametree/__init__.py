from __future__ import annotations

"""
nametree: hierarchical namespaces with aliases, soft links and
lowest-common-ancestor queries.
"""

from nametree.core.builder import build_namespace
from nametree.core.query import run_query
from nametree.core.renderer import render_namespace
from nametree.core.resolver import Resolver
from nametree.domain import (
    ErrorKind,
    NameTreeError,
    Namespace,
    NilArgumentError,
    Node,
    NodeId,
    NodeNotFoundError,
    TreeDescriptionError,
)

__version__ = "0.1.0"

__all__ = [
    "build_namespace",
    "run_query",
    "render_namespace",
    "Resolver",
    "ErrorKind",
    "NameTreeError",
    "Namespace",
    "NilArgumentError",
    "Node",
    "NodeId",
    "NodeNotFoundError",
    "TreeDescriptionError",
]
