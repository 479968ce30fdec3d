"""Application services package.

Contains the glossary ingestion pipeline: tabular reader, header classifier,
row normalizer, batch aggregator, merge engine and the service that chains them.
"""

from .batch_aggregator import aggregate_entries
from .clock import Clock, SystemClock
from .glossary_ingestion_service import GlossaryIngestionService, IngestionSummary, TermFailure
from .header_classifier import classify_header, classify_headers
from .manual_entry import ManualDefinitionInput, ValidationError, build_manual_group
from .row_normalizer import normalize_row, normalize_rows
from .tabular_reader import ParseError, read_rows
from .term_merge_engine import TermMergeEngine, TermMergeResult

__all__ = [
    "Clock",
    "SystemClock",
    "ParseError",
    "read_rows",
    "classify_header",
    "classify_headers",
    "normalize_row",
    "normalize_rows",
    "aggregate_entries",
    "ValidationError",
    "ManualDefinitionInput",
    "build_manual_group",
    "TermMergeEngine",
    "TermMergeResult",
    "GlossaryIngestionService",
    "IngestionSummary",
    "TermFailure",
]
