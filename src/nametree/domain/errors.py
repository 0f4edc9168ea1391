from __future__ import annotations

"""
Namespace Error Model.

Defines the closed set of failure kinds raised by the namespace core and
the exception classes that carry their structured context.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Closed enumeration of the failure categories."""
    NIL_ARGUMENT = "nil_argument"
    NOT_FOUND = "not_found"
    INVALID_DESCRIPTION = "invalid_description"


class NameTreeError(Exception):
    """Base exception for all namespace errors."""

    def __init__(self, message: str, kind: ErrorKind) -> None:
        """
        Initialize the exception.

        Args:
            message: Human readable error message.
            kind: Failure category.
        """
        self.kind = kind
        super().__init__(message)


class NilArgumentError(NameTreeError):
    """Raised when a required node reference is None."""

    def __init__(self, argument: str, operation: str) -> None:
        """
        Initialize the exception.

        Args:
            argument: Name of the parameter that was None.
            operation: Operation that needed it.
        """
        self.argument = argument
        self.operation = operation
        super().__init__(
            f"{operation}: '{argument}' cannot be None",
            ErrorKind.NIL_ARGUMENT,
        )


class NodeNotFoundError(NameTreeError):
    """Raised when a node is not part of the expected tree."""

    def __init__(
            self,
            target: Optional[str],
            root: Optional[str] = None,
            message: Optional[str] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            target: Name of the node that could not be reached.
            root: Name of the root the walk was expected to end at.
            message: Optional override for the default message.
        """
        self.target = target
        self.root = root
        if message is None:
            if root is None:
                message = f"node '{target}' not found"
            else:
                message = f"node '{target}' not found under '{root}'"
        super().__init__(message, ErrorKind.NOT_FOUND)


class TreeDescriptionError(NameTreeError):
    """Raised when a tree description cannot be loaded or built."""

    def __init__(self, message: str, location: str = "") -> None:
        self.location = location
        text = f"{location}: {message}" if location else message
        super().__init__(text, ErrorKind.INVALID_DESCRIPTION)
