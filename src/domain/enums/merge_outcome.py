"""Outcome of merging one candidate definition into a term."""

from enum import Enum


class DefinitionMergeOutcome(str, Enum):
    """What happened to a candidate definition during a merge."""

    ADDED = "added"  # No definition with the same trimmed text existed
    UPDATED = "updated"  # Existing definition gained new tags
    SKIPPED = "skipped"  # Existing definition already carried every tag
