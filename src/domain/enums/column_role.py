"""Column role enum for tabular glossary input."""

from enum import Enum


class ColumnRole(str, Enum):
    """Semantic role of a column in an imported glossary sheet."""

    TERM = "term"  # The business key of a glossary entry
    NOTE = "note"  # Free-text note attached to the term itself
    DEFINITION = "definition"  # One definition text per non-empty cell
    TAGS = "tags"  # Comma-separated tags applied to the row's definitions
    UNMAPPED = "unmapped"  # Ignored column
