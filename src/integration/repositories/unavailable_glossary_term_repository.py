"""Glossary term repository used when no store is configured.

Reads behave like an empty store; every write raises StoreUnavailable, which
the merge engine reports per term without crashing the caller.
"""

import logging

from neuroglia.hosting.abstractions import ApplicationBuilderBase

from domain.entities import GlossaryTerm
from domain.repositories import GlossaryTermRepository, StoreUnavailable

logger = logging.getLogger(__name__)


class UnavailableGlossaryTermRepository(GlossaryTermRepository):
    """Non-persisting stand-in for the glossary store."""

    async def get_async(self, id: str) -> GlossaryTerm | None:
        return None

    async def get_by_term_async(self, term: str) -> GlossaryTerm | None:
        return None

    async def get_all_async(self) -> list[GlossaryTerm]:
        return []

    async def add_async(self, entity: GlossaryTerm) -> GlossaryTerm:
        raise StoreUnavailable(f"No glossary store available to save term '{entity.state.term}'", term=entity.state.term)

    async def update_async(self, entity: GlossaryTerm) -> GlossaryTerm:
        raise StoreUnavailable(f"No glossary store available to save term '{entity.state.term}'", term=entity.state.term)

    async def remove_async(self, id: str) -> None:
        raise StoreUnavailable(f"No glossary store available to delete term {id}")

    async def contains_async(self, id: str) -> bool:
        return False

    async def _do_add_async(self, entity: GlossaryTerm) -> GlossaryTerm:
        return await self.add_async(entity)

    async def _do_update_async(self, entity: GlossaryTerm) -> GlossaryTerm:
        return await self.update_async(entity)

    async def _do_remove_async(self, id: str) -> None:
        await self.remove_async(id)

    @staticmethod
    def configure(builder: ApplicationBuilderBase) -> None:
        """Register the unavailable repository as the glossary store."""
        repository = UnavailableGlossaryTermRepository()
        builder.services.add_singleton(GlossaryTermRepository, singleton=repository)
        logger.warning("No glossary store configured: terms can be read as empty but never saved")
