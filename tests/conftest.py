"""Pytest configuration and fixtures for Glossary Manager tests."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from mongomock_motor import AsyncMongoMockClient
from neuroglia.mapping import Mapper
from neuroglia.mediation import Mediator
from neuroglia.serialization.json import JsonSerializer

from application.services import GlossaryIngestionService, TermMergeEngine
from application.settings import Settings
from domain.entities import GlossaryTerm
from integration.repositories import InMemoryGlossaryTermRepository, MotorGlossaryTermRepository, UnavailableGlossaryTermRepository
from tests.fixtures.factories import SteppingClock


@pytest.fixture
def settings() -> Settings:
    """Create test settings."""
    return Settings(
        app_port=8071,
        database_name="glossary_test",
        glossary_store="memory",
        anonymous_user_id="anonymous",
    )


@pytest.fixture
def clock() -> SteppingClock:
    """Clock starting at 2024-01-01 and advancing one second per call."""
    return SteppingClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC))


@pytest.fixture
def repository() -> InMemoryGlossaryTermRepository:
    """Create an empty in-memory glossary store."""
    return InMemoryGlossaryTermRepository()


@pytest.fixture
def mongo_client() -> AsyncMongoMockClient:
    """Create an in-process MongoDB client."""
    return AsyncMongoMockClient()


@pytest.fixture
def motor_repository(mongo_client: AsyncMongoMockClient) -> MotorGlossaryTermRepository:
    """Create a Motor-backed glossary store on the in-process client."""
    return MotorGlossaryTermRepository(
        client=mongo_client,
        database_name="glossary_test",
        collection_name="terms",
        serializer=JsonSerializer(),
        entity_type=GlossaryTerm,
    )


@pytest.fixture
def unavailable_repository() -> UnavailableGlossaryTermRepository:
    """Create a store on which every write fails."""
    return UnavailableGlossaryTermRepository()


@pytest.fixture
def merge_engine(repository: InMemoryGlossaryTermRepository, clock: SteppingClock) -> TermMergeEngine:
    """Create a merge engine backed by the in-memory store."""
    return TermMergeEngine(repository, clock)


@pytest.fixture
def ingestion_service(repository: InMemoryGlossaryTermRepository, clock: SteppingClock, settings: Settings) -> GlossaryIngestionService:
    """Create an ingestion service backed by the in-memory store."""
    return GlossaryIngestionService(repository, clock, settings)


@pytest.fixture
def mapper() -> Mapper:
    """Create mapper instance."""
    return Mapper()


@pytest.fixture
def mock_mediator() -> MagicMock:
    """Create mock mediator."""
    return MagicMock(spec=Mediator)


@pytest.fixture
def user_info() -> dict:
    """Authenticated user claims."""
    return {"sub": "user-123", "email": "editor@example.com", "name": "Editor", "roles": []}
