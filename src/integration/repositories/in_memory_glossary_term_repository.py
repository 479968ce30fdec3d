"""In-memory glossary term repository implementation (for testing/development)."""

import copy
import logging

from neuroglia.data.exceptions import EntityNotFoundException, OptimisticConcurrencyException
from neuroglia.hosting.abstractions import ApplicationBuilderBase

from domain.entities import GlossaryTerm
from domain.repositories import GlossaryTermRepository

logger = logging.getLogger(__name__)


class InMemoryGlossaryTermRepository(GlossaryTermRepository):
    """
    In-memory implementation of GlossaryTermRepository.

    Aggregates are copied on the way in and on the way out, so a caller
    mutating a loaded term does not change the stored one until it is written.
    Suitable for testing and development only. Production uses MongoDB via Motor.
    """

    def __init__(self) -> None:
        # term_id -> GlossaryTerm
        self._terms: dict[str, GlossaryTerm] = {}

    async def get_async(self, id: str) -> GlossaryTerm | None:
        """Get a term by ID."""
        entity = self._terms.get(id)
        return copy.deepcopy(entity) if entity else None

    async def get_by_term_async(self, term: str) -> GlossaryTerm | None:
        """Get a term by its exact name."""
        for entity in self._terms.values():
            if entity.state.term == term:
                return copy.deepcopy(entity)
        return None

    async def get_all_async(self) -> list[GlossaryTerm]:
        """Retrieve all terms, sorted by name."""
        return [copy.deepcopy(entity) for entity in sorted(self._terms.values(), key=lambda t: t.state.term)]

    async def add_async(self, entity: GlossaryTerm) -> GlossaryTerm:
        """Add a term."""
        self._terms[entity.id()] = copy.deepcopy(entity)
        logger.debug(f"Added glossary term '{entity.state.term}' ({entity.id()})")
        return entity

    async def update_async(self, entity: GlossaryTerm) -> GlossaryTerm:
        """Update a term, rejecting a stale state_version like MotorRepository does."""
        stored = self._terms.get(entity.id())
        if stored is None:
            raise EntityNotFoundException(entity_id=entity.id(), entity_type=type(entity).__name__)
        old_version = entity.state.state_version
        if stored.state.state_version != old_version:
            raise OptimisticConcurrencyException(entity_id=entity.id(), expected_version=old_version, actual_version=stored.state.state_version)
        entity.state.state_version = old_version + 1
        self._terms[entity.id()] = copy.deepcopy(entity)
        logger.debug(f"Updated glossary term '{entity.state.term}' ({entity.id()})")
        return entity

    async def remove_async(self, id: str) -> None:
        """Remove a term."""
        if self._terms.pop(id, None) is not None:
            logger.debug(f"Removed glossary term {id}")

    async def contains_async(self, id: str) -> bool:
        """Check if a term exists."""
        return id in self._terms

    async def _do_add_async(self, entity: GlossaryTerm) -> GlossaryTerm:
        """Internal add implementation required by Repository base class."""
        return await self.add_async(entity)

    async def _do_update_async(self, entity: GlossaryTerm) -> GlossaryTerm:
        """Internal update implementation required by Repository base class."""
        return await self.update_async(entity)

    async def _do_remove_async(self, id: str) -> None:
        """Internal remove implementation required by Repository base class."""
        await self.remove_async(id)

    def clear_all(self) -> None:
        """Clear all terms (for testing)."""
        self._terms.clear()

    @staticmethod
    def configure(builder: ApplicationBuilderBase) -> None:
        """
        Configure InMemoryGlossaryTermRepository in the service collection.

        Args:
            builder: The application builder
        """
        repository = InMemoryGlossaryTermRepository()

        builder.services.add_singleton(InMemoryGlossaryTermRepository, singleton=repository)
        builder.services.add_singleton(GlossaryTermRepository, singleton=repository)

        logger.info("Configured InMemoryGlossaryTermRepository")
