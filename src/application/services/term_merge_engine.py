"""Merge engine for glossary terms.

Applies one aggregated TermGroup to the store: read the existing term (if
any), merge every candidate definition into it, then write it back with a
single add or update.

The read and the write are not atomic. The store owns ``state_version`` and
bumps it on every update; an update carrying a stale version is rejected and
surfaces here as a StoreError for that term.
"""

import logging
import time
from dataclasses import dataclass

from opentelemetry import trace

from application.services.clock import Clock
from domain.entities import GlossaryTerm
from domain.enums import DefinitionMergeOutcome
from domain.models import TermGroup
from domain.repositories import GlossaryTermRepository, StoreError
from observability import (
    glossary_definitions_added,
    glossary_definitions_skipped,
    glossary_definitions_updated,
    glossary_merge_processing_time,
    glossary_term_merge_failures,
    glossary_terms_created,
    glossary_terms_updated,
)

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass
class TermMergeResult:
    """Outcome of merging one term group."""

    aggregate: GlossaryTerm
    """The aggregate as written to the store."""

    created: bool = False
    """True when the term did not exist before this merge."""

    definitions_added: int = 0
    definitions_updated: int = 0
    definitions_skipped: int = 0

    @property
    def term(self) -> str:
        return self.aggregate.state.term

    @property
    def term_id(self) -> str:
        return self.aggregate.id()

    @property
    def changed(self) -> bool:
        """True when the term was created or at least one definition was added or updated."""
        return self.created or self.definitions_added > 0 or self.definitions_updated > 0

    def record(self, outcome: DefinitionMergeOutcome) -> None:
        if outcome == DefinitionMergeOutcome.ADDED:
            self.definitions_added += 1
        elif outcome == DefinitionMergeOutcome.UPDATED:
            self.definitions_updated += 1
        else:
            self.definitions_skipped += 1


class TermMergeEngine:
    """Read-merge-write of one glossary term per call."""

    def __init__(self, repository: GlossaryTermRepository, clock: Clock):
        self._repository = repository
        self._clock = clock

    async def merge_async(self, group: TermGroup, created_by: str | None = None) -> TermMergeResult:
        """Merge a term group into the store.

        The term is written even when no definition changed, so the note
        and ``updated_at`` always reflect the latest batch.

        Args:
            group: The aggregated term with its candidate definitions
            created_by: User recorded on newly created terms

        Returns:
            TermMergeResult with per-definition counters

        Raises:
            StoreError: The lookup or the write failed
        """
        start_time = time.time()
        with tracer.start_as_current_span("TermMergeEngine.merge_async") as span:
            span.set_attribute("glossary.term", group.term)
            span.set_attribute("glossary.candidates", len(group.candidates))

            try:
                existing = await self._call_store_async(self._repository.get_by_term_async(group.term), group.term, "read")
                now = self._clock.now()

                if existing is None:
                    aggregate = GlossaryTerm(term=group.term, note=group.note, created_by=created_by, created_at=now)
                    result = TermMergeResult(aggregate=aggregate, created=True)
                else:
                    aggregate = existing
                    result = TermMergeResult(aggregate=aggregate)

                for candidate in group.candidates:
                    result.record(aggregate.merge_definition(candidate, now))

                aggregate.revise(group.note, now)

                if result.created:
                    written = await self._call_store_async(self._repository.add_async(aggregate), group.term, "write")
                else:
                    written = await self._call_store_async(self._repository.update_async(aggregate), group.term, "write")
                result.aggregate = written or aggregate

            except StoreError as e:
                span.set_attribute("glossary.merge.failed", True)
                glossary_term_merge_failures.add(1)
                log.error(f"Merge of term '{group.term}' failed: {e}")
                raise

            span.set_attribute("glossary.term.created", result.created)
            span.set_attribute("glossary.definitions.added", result.definitions_added)
            span.set_attribute("glossary.definitions.updated", result.definitions_updated)
            span.set_attribute("glossary.definitions.skipped", result.definitions_skipped)

        if result.created:
            glossary_terms_created.add(1)
        elif result.changed:
            glossary_terms_updated.add(1)
        glossary_definitions_added.add(result.definitions_added)
        glossary_definitions_updated.add(result.definitions_updated)
        glossary_definitions_skipped.add(result.definitions_skipped)
        glossary_merge_processing_time.record((time.time() - start_time) * 1000)

        log.debug(
            f"Merged term '{group.term}': created={result.created} added={result.definitions_added} "
            f"updated={result.definitions_updated} skipped={result.definitions_skipped}"
        )
        return result

    async def _call_store_async(self, operation, term: str, action: str):
        try:
            return await operation
        except StoreError:
            raise
        except Exception as e:
            raise StoreError(f"Failed to {action} glossary term '{term}': {e}", term=term, cause=e) from e
