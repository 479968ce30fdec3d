"""Glossary ingestion pipeline.

Runs a batch end to end:

    read rows -> classify headers -> normalize rows -> aggregate by term -> merge each term

Terms are merged sequentially. A StoreError on one term is recorded in the
summary and the next term is processed; only parsing problems abort a batch
before anything is written.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Sequence

from neuroglia.hosting.web import WebApplicationBuilder

from application.services.batch_aggregator import aggregate_entries
from application.services.clock import Clock
from application.services.header_classifier import classify_headers
from application.services.manual_entry import ManualDefinitionInput, build_manual_group
from application.services.row_normalizer import normalize_rows
from application.services.tabular_reader import ParseError, read_rows
from application.services.term_merge_engine import TermMergeEngine, TermMergeResult
from application.settings import Settings
from domain.models import RowSkipped, TermGroup
from domain.repositories import GlossaryTermRepository, StoreError
from observability import glossary_import_processing_time, glossary_rows_skipped

log = logging.getLogger(__name__)


@dataclass
class TermFailure:
    """A term whose merge was aborted by a store error."""

    term: str
    error: str

    def to_dict(self) -> dict:
        return {"term": self.term, "error": self.error}


@dataclass
class IngestionSummary:
    """Counters and details for one batch."""

    origin: str
    terms_added: int = 0
    terms_updated: int = 0
    terms_unchanged: int = 0
    terms_failed: int = 0
    definitions_added: int = 0
    definitions_updated: int = 0
    definitions_skipped: int = 0
    skipped_rows: list[RowSkipped] = field(default_factory=list)
    failures: list[TermFailure] = field(default_factory=list)
    results: list[TermMergeResult] = field(default_factory=list)

    @property
    def rows_skipped(self) -> int:
        return len(self.skipped_rows)

    def record(self, result: TermMergeResult) -> None:
        self.results.append(result)
        if result.created:
            self.terms_added += 1
        elif result.changed:
            self.terms_updated += 1
        else:
            self.terms_unchanged += 1
        self.definitions_added += result.definitions_added
        self.definitions_updated += result.definitions_updated
        self.definitions_skipped += result.definitions_skipped

    def record_failure(self, term: str, error: Exception) -> None:
        self.terms_failed += 1
        self.failures.append(TermFailure(term=term, error=str(error)))

    def to_message(self) -> str:
        message = (
            f"Import complete: {self.terms_added} new terms, {self.terms_updated} updated terms, "
            f"{self.definitions_added} new definitions, {self.definitions_updated} updated definitions"
        )
        if self.rows_skipped:
            message += f", {self.rows_skipped} rows skipped"
        if self.terms_failed:
            message += f", {self.terms_failed} terms failed"
        return message


class GlossaryIngestionService:
    """Imports sheets and manual entries into the glossary store."""

    def __init__(
        self,
        repository: GlossaryTermRepository,
        clock: Clock,
        settings: Settings,
    ):
        self._repository = repository
        self._settings = settings
        self._engine = TermMergeEngine(repository, clock)

    async def import_content_async(self, content: bytes | str, origin: str, created_by: str | None = None) -> IngestionSummary:
        """Import a CSV upload.

        Args:
            content: Raw CSV bytes or text
            origin: Provenance stamped on every new definition (usually the file name)
            created_by: User recorded on newly created terms

        Raises:
            ParseError: The input is malformed or has no data row
        """
        rows = read_rows(content, self._settings.import_encoding)
        return await self.import_rows_async(rows, origin, created_by)

    async def import_rows_async(self, rows: Sequence[Sequence[Any]], origin: str, created_by: str | None = None) -> IngestionSummary:
        """Import already tokenized rows, header first."""
        if len(rows) < 2:
            raise ParseError("Input is empty or missing headers/data")

        start_time = time.time()
        roles = classify_headers(rows[0])
        entries, skipped = normalize_rows(rows[1:], roles)
        groups = aggregate_entries(entries, origin)

        summary = IngestionSummary(origin=origin, skipped_rows=skipped)
        if skipped:
            glossary_rows_skipped.add(len(skipped))
        if not groups:
            log.warning(f"No valid glossary rows found in '{origin}' ({len(skipped)} rows skipped)")

        await self._merge_groups_async(groups, created_by, summary)

        glossary_import_processing_time.record((time.time() - start_time) * 1000, {"glossary.origin.manual": False})
        log.info(f"{summary.to_message()} (origin: {origin})")
        return summary

    async def save_manual_entry_async(
        self,
        term: str,
        note: str | None,
        definitions: Sequence[ManualDefinitionInput],
        created_by: str | None = None,
    ) -> TermMergeResult:
        """Save one term typed in by hand.

        Raises:
            ValidationError: The term is blank or has no definition text
            StoreError: The lookup or write failed
        """
        start_time = time.time()
        group = build_manual_group(term, note, definitions, origin=self._settings.manual_origin)
        result = await self._engine.merge_async(group, created_by)
        glossary_import_processing_time.record((time.time() - start_time) * 1000, {"glossary.origin.manual": True})
        log.info(
            f"Saved term '{result.term}': {result.definitions_added} definitions added, "
            f"{result.definitions_updated} updated, {result.definitions_skipped} unchanged"
        )
        return result

    async def _merge_groups_async(self, groups: list[TermGroup], created_by: str | None, summary: IngestionSummary) -> None:
        for group in groups:
            try:
                summary.record(await self._engine.merge_async(group, created_by))
            except StoreError as e:
                summary.record_failure(group.term, e)

    @staticmethod
    def configure(builder: WebApplicationBuilder) -> WebApplicationBuilder:
        """Register the ingestion service as a scoped dependency."""
        builder.services.add_scoped(GlossaryIngestionService, GlossaryIngestionService)
        return builder
