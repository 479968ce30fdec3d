"""Domain value objects for the glossary.

Value objects are immutable and used within the GlossaryTerm aggregate and
the ingestion pipeline.
"""

from .glossary_definition import GlossaryDefinition, normalize_definition_text, normalize_tags
from .ingestion import CandidateDefinition, NormalizedEntry, RowSkipped, TermGroup

__all__ = [
    "GlossaryDefinition",
    "normalize_definition_text",
    "normalize_tags",
    # Ingestion pipeline
    "NormalizedEntry",
    "RowSkipped",
    "CandidateDefinition",
    "TermGroup",
]
