"""MongoDB repository implementation for the GlossaryTerm aggregate."""

import logging

from motor.motor_asyncio import AsyncIOMotorClient
from neuroglia.data.infrastructure.mongo import MotorRepository
from neuroglia.hosting.abstractions import ApplicationBuilderBase, HostedService

from domain.entities import GlossaryTerm
from domain.repositories import GlossaryTermRepository

log = logging.getLogger(__name__)

# Every merge looks a term up by name; not unique, the store does not enforce it
TERM_INDEX_FIELD = "term"


class MotorGlossaryTermRepository(MotorRepository[GlossaryTerm, str], GlossaryTermRepository):
    """MongoDB-based repository for the GlossaryTerm aggregate.

    Extends Neuroglia's MotorRepository to inherit standard CRUD operations
    (including the ``state_version`` check on update) and implements
    GlossaryTermRepository for the lookup by term name.

    AggregateState fields are stored at the document root level, so the
    term name is queried as ``term`` (not ``state.term``).
    """

    async def get_by_term_async(self, term: str) -> GlossaryTerm | None:
        """Find a term by its exact name.

        Args:
            term: The term name (case-sensitive)

        Returns:
            The matching term, or None
        """
        doc = await self.collection.find_one({"term": term})
        if doc is None:
            return None
        return self._deserialize_entity(doc)

    async def get_all_async(self) -> list[GlossaryTerm]:
        """Retrieve every glossary term, sorted by name.

        Returns:
            List of all terms
        """
        cursor = self.collection.find({}).sort("term", 1)
        results = []
        async for doc in cursor:
            entity = self._deserialize_entity(doc)
            if entity:
                results.append(entity)
        return results

    @staticmethod
    def configure(builder: ApplicationBuilderBase, database_name: str, collection_name: str) -> ApplicationBuilderBase:
        """Register the Motor-backed GlossaryTermRepository and its index initializer.

        Args:
            builder: The application builder
            database_name: MongoDB database
            collection_name: Collection holding the terms

        Returns:
            The builder instance for fluent chaining
        """
        MotorRepository.configure(
            builder,
            entity_type=GlossaryTerm,
            key_type=str,
            database_name=database_name,
            collection_name=collection_name,
            domain_repository_type=GlossaryTermRepository,
            implementation_type=MotorGlossaryTermRepository,
        )
        builder.services.add_singleton(
            HostedService,
            implementation_factory=lambda sp: GlossaryTermIndexInitializer(sp.get_required_service(AsyncIOMotorClient), database_name, collection_name),
        )
        log.info(f"Configured MotorGlossaryTermRepository ({database_name}.{collection_name})")
        return builder


class GlossaryTermIndexInitializer(HostedService):
    """Hosted service that creates the glossary collection indexes on startup.

    Runs before scoped services exist, so it talks to the collection through
    the shared AsyncIOMotorClient instead of a repository instance.
    """

    def __init__(self, client: AsyncIOMotorClient, database_name: str, collection_name: str) -> None:
        self._client = client
        self._database_name = database_name
        self._collection_name = collection_name

    async def start_async(self) -> None:
        try:
            await self._client[self._database_name][self._collection_name].create_index(TERM_INDEX_FIELD)
            log.info(f"✅ Glossary index on '{TERM_INDEX_FIELD}' ensured")
        except Exception as e:
            # Lookups still work without the index, only slower
            log.error(f"❌ Could not create glossary index: {e}")

    async def stop_async(self) -> None:
        pass
