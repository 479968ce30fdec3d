"""Domain enumerations package."""

from .column_role import ColumnRole
from .merge_outcome import DefinitionMergeOutcome

__all__ = [
    "ColumnRole",
    "DefinitionMergeOutcome",
]
