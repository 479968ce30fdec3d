"""Observability utilities and metrics."""

from .metrics import (
    glossary_definitions_added,
    glossary_definitions_skipped,
    glossary_definitions_updated,
    glossary_import_processing_time,
    glossary_merge_processing_time,
    glossary_rows_skipped,
    glossary_term_merge_failures,
    glossary_terms_cleared,
    glossary_terms_created,
    glossary_terms_updated,
)

__all__ = [
    # Term metrics
    "glossary_terms_created",
    "glossary_terms_updated",
    "glossary_term_merge_failures",
    "glossary_terms_cleared",
    "glossary_merge_processing_time",
    # Definition metrics
    "glossary_definitions_added",
    "glossary_definitions_updated",
    "glossary_definitions_skipped",
    # Import metrics
    "glossary_rows_skipped",
    "glossary_import_processing_time",
]
