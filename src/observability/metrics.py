"""Business metrics for Glossary Manager.

Defines OpenTelemetry metrics for the ingestion pipeline:
- Terms: created / updated / failed merges / cleared
- Definitions: added / updated / skipped
- Rows: skipped during normalization
"""

from opentelemetry import metrics

meter = metrics.get_meter(__name__)

# =============================================================================
# TERM METRICS
# =============================================================================

glossary_terms_created = meter.create_counter(
    name="glossary.terms.created",
    description="Total glossary terms created by a merge",
    unit="1",
)

glossary_terms_updated = meter.create_counter(
    name="glossary.terms.updated",
    description="Total existing glossary terms changed by a merge",
    unit="1",
)

glossary_term_merge_failures = meter.create_counter(
    name="glossary.terms.merge_failures",
    description="Total term merges aborted by a store error",
    unit="1",
)

glossary_terms_cleared = meter.create_counter(
    name="glossary.terms.cleared",
    description="Total glossary terms deleted by bulk clear",
    unit="1",
)

glossary_merge_processing_time = meter.create_histogram(
    name="glossary.term.merge_time",
    description="Time to read, merge and write one glossary term",
    unit="ms",
)

# =============================================================================
# DEFINITION METRICS
# =============================================================================

glossary_definitions_added = meter.create_counter(
    name="glossary.definitions.added",
    description="Total definitions appended to terms",
    unit="1",
)

glossary_definitions_updated = meter.create_counter(
    name="glossary.definitions.updated",
    description="Total existing definitions whose tag set grew",
    unit="1",
)

glossary_definitions_skipped = meter.create_counter(
    name="glossary.definitions.skipped",
    description="Total candidate definitions already present with the same tags",
    unit="1",
)

# =============================================================================
# IMPORT METRICS
# =============================================================================

glossary_rows_skipped = meter.create_counter(
    name="glossary.import.rows_skipped",
    description="Total data rows rejected by the row normalizer",
    unit="1",
)

glossary_import_processing_time = meter.create_histogram(
    name="glossary.import.processing_time",
    description="Time to process one import or manual save batch",
    unit="ms",
)
