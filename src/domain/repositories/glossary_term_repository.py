"""Repository contract for the GlossaryTerm aggregate.

The ingestion core only relies on the operations declared here, so it runs
unchanged against MongoDB, the in-memory store, or the unavailable stub.

Implementations:
- MotorGlossaryTermRepository (MongoDB, via MotorRepository.configure() in main.py)
- InMemoryGlossaryTermRepository (development/testing)
- UnavailableGlossaryTermRepository (no usable store; every write fails)
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from neuroglia.data.infrastructure.abstractions import Repository

from domain.entities import GlossaryTerm

log = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when a lookup or write against the glossary store fails.

    Aborts the merge of the affected term only.
    """

    def __init__(self, message: str, term: str | None = None, cause: Exception | None = None):
        super().__init__(message)
        self.term = term
        self.cause = cause


class StoreUnavailable(StoreError):
    """No usable store or session is available for writes."""

    pass


@dataclass
class BulkRemoveResult:
    """Outcome of deleting every glossary term."""

    deleted: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.deleted + self.failed


class GlossaryTermRepository(Repository[GlossaryTerm, str], ABC):
    """Abstract repository for the GlossaryTerm aggregate.

    Note: Standard CRUD operations (get_async, add_async, update_async, remove_async)
    are inherited from the base Repository interface. Only glossary-specific
    operations are declared here.
    """

    @abstractmethod
    async def get_by_term_async(self, term: str) -> GlossaryTerm | None:
        """Find a term by its exact (case-sensitive) name.

        Args:
            term: The term name

        Returns:
            The matching term, or None when no record carries that name
        """
        pass

    @abstractmethod
    async def get_all_async(self) -> list[GlossaryTerm]:
        """Retrieve every glossary term."""
        pass

    async def remove_all_async(self) -> BulkRemoveResult:
        """Delete every glossary term, one delete per record.

        Deletes are issued concurrently and all of them are awaited. There is
        no transaction: failures are counted, never retried or rolled back.

        Returns:
            Number of deleted and failed records
        """
        terms = await self.get_all_async()
        result = BulkRemoveResult()
        if not terms:
            return result

        outcomes = await asyncio.gather(*(self.remove_async(term.id()) for term in terms), return_exceptions=True)
        for term, outcome in zip(terms, outcomes):
            if isinstance(outcome, Exception):
                result.failed += 1
                result.errors.append(f"{term.state.term}: {outcome}")
                log.error(f"Failed to delete glossary term '{term.state.term}' ({term.id()}): {outcome}")
            else:
                result.deleted += 1
        return result
