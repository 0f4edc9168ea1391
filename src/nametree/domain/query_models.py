from __future__ import annotations

"""
Query Domain Data Models.

Defines the result object exchanged between the query service and the
interface layer.
"""

from dataclasses import dataclass, field
from typing import List

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class QueryResult:
    """
    Outcome of a common-parent query between two names.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        first: First queried name.
        second: Second queried name.
        parent_name: Name of the closest common parent, empty on failure.
        parent_path: Names from the root down to the common parent.
    """
    ok: bool
    error: str
    first: str
    second: str
    parent_name: str = ""
    parent_path: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(first: str, second: str, error: str) -> QueryResult:
    """Build a failed QueryResult."""
    return QueryResult(ok=False, error=error, first=first, second=second)
