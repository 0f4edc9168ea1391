from __future__ import annotations

from .errors import (
    ErrorKind,
    NameTreeError,
    NilArgumentError,
    NodeNotFoundError,
    TreeDescriptionError,
)
from .namespace import Namespace
from .node import Node, NodeId

__all__ = [
    "ErrorKind",
    "NameTreeError",
    "NilArgumentError",
    "NodeNotFoundError",
    "TreeDescriptionError",
    "Namespace",
    "Node",
    "NodeId",
]
