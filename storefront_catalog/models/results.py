"""
Row results.

Normalizing a raw export record yields exactly one result: the record
either produced an entity or was skipped with a reason.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")

SKIP_MISSING_TITLE = "missing title"
SKIP_UNNAMED_CATEGORY = "unnamed category"
SKIP_UNCATEGORIZED = "uncategorized"


@dataclass
class RowOk(Generic[T]):
    """Record normalized successfully."""
    index: int
    value: T


@dataclass
class RowSkipped:
    """Record dropped; reason is a short stable string."""
    index: int
    reason: str


RowResult = Union[RowOk, RowSkipped]
