"""Tests for the term merge engine."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from neuroglia.data.exceptions import OptimisticConcurrencyException

from application.services import TermMergeEngine
from domain.repositories import GlossaryTermRepository, StoreError, StoreUnavailable
from integration.repositories import InMemoryGlossaryTermRepository
from tests.fixtures.factories import FixedClock, GlossaryTermFactory, SteppingClock, TermGroupFactory
from tests.fixtures.mixins import BaseTestCase


@pytest.mark.unit
class TestTermMergeEngine(BaseTestCase):
    """Test read-merge-write of a single term."""

    @pytest.mark.asyncio
    async def test_new_term_is_inserted(self, merge_engine: TermMergeEngine, repository: InMemoryGlossaryTermRepository) -> None:
        group = TermGroupFactory.create(term="Cat", note="Household", definitions=[("A feline", ["pet"])])

        result = await merge_engine.merge_async(group, created_by="user-1")

        assert result.created
        assert result.changed
        assert result.definitions_added == 1
        stored = await repository.get_by_term_async("Cat")
        assert stored is not None
        assert stored.id() == result.term_id
        assert stored.state.note == "Household"
        assert stored.state.created_by == "user-1"
        self.assert_indexes_consistent(stored)

    @pytest.mark.asyncio
    async def test_existing_term_is_updated_in_place(self, merge_engine: TermMergeEngine, repository: InMemoryGlossaryTermRepository) -> None:
        existing = GlossaryTermFactory.create(term="Cat", definitions=[("A feline", ["pet"])], created_by="alice")
        await repository.add_async(existing)

        result = await merge_engine.merge_async(TermGroupFactory.create(term="Cat", definitions=[("A feline", ["animal"]), ("Says meow", [])]), created_by="bob")

        assert not result.created
        assert (result.definitions_added, result.definitions_updated, result.definitions_skipped) == (1, 1, 0)
        stored = await repository.get_by_term_async("Cat")
        assert stored is not None
        assert stored.id() == existing.id()
        assert stored.state.created_by == "alice"
        assert stored.state.created_at == existing.state.created_at
        self.assert_definition_tags(stored, "A feline", {"pet", "animal"})
        assert len(await repository.get_all_async()) == 1

    @pytest.mark.asyncio
    async def test_unchanged_term_is_still_written(self, repository: InMemoryGlossaryTermRepository) -> None:
        later = datetime(2025, 6, 1, tzinfo=UTC)
        await repository.add_async(GlossaryTermFactory.create(term="Cat", note="old", definitions=[("A feline", ["pet"])]))
        engine = TermMergeEngine(repository, FixedClock(later))

        result = await engine.merge_async(TermGroupFactory.create(term="Cat", note="new", definitions=[("A feline", ["pet"])]))

        assert not result.changed
        assert result.definitions_skipped == 1
        stored = await repository.get_by_term_async("Cat")
        assert stored is not None
        assert stored.state.note == "new"
        assert stored.state.updated_at == later

    @pytest.mark.asyncio
    async def test_every_timestamp_comes_from_the_clock(self, repository: InMemoryGlossaryTermRepository) -> None:
        clock = SteppingClock(datetime(2024, 3, 1, tzinfo=UTC))
        engine = TermMergeEngine(repository, clock)

        result = await engine.merge_async(TermGroupFactory.create(term="Dog", definitions=[("Canine", ["pet"]), ("Barks", [])]))

        state = result.aggregate.state
        assert clock.calls == 1
        assert state.created_at == datetime(2024, 3, 1, tzinfo=UTC)
        assert state.updated_at == state.created_at
        assert {d["created_at"] for d in state.definitions} == {state.created_at.isoformat()}

    @pytest.mark.asyncio
    async def test_store_bumps_state_version_on_each_update(self, merge_engine: TermMergeEngine, repository: InMemoryGlossaryTermRepository) -> None:
        group = TermGroupFactory.create(term="Cat")

        await merge_engine.merge_async(group)
        inserted = await repository.get_by_term_async("Cat")
        await merge_engine.merge_async(group)
        await merge_engine.merge_async(group)

        stored = await repository.get_by_term_async("Cat")
        assert inserted is not None and stored is not None
        assert inserted.state.state_version == 0
        assert stored.state.state_version == 2

    @pytest.mark.asyncio
    async def test_write_based_on_a_stale_read_is_rejected(self, merge_engine: TermMergeEngine, repository: InMemoryGlossaryTermRepository) -> None:
        await merge_engine.merge_async(TermGroupFactory.create(term="Cat", definitions=[("A feline", ["pet"])]))
        stale = await repository.get_by_term_async("Cat")
        await merge_engine.merge_async(TermGroupFactory.create(term="Cat", definitions=[("A feline", ["animal"])]))

        with patch.object(repository, "get_by_term_async", AsyncMock(return_value=stale)):
            with pytest.raises(StoreError) as exc_info:
                await merge_engine.merge_async(TermGroupFactory.create(term="Cat", definitions=[("Purrs", [])]))

        assert isinstance(exc_info.value.cause, OptimisticConcurrencyException)
        stored = await repository.get_by_term_async("Cat")
        assert stored is not None
        self.assert_definition_tags(stored, "A feline", {"pet", "animal"})
        assert stored.find_definition("Purrs") is None

    @pytest.mark.asyncio
    async def test_lookup_failure_is_wrapped(self, clock: SteppingClock) -> None:
        repository = MagicMock(spec=GlossaryTermRepository)
        repository.get_by_term_async = AsyncMock(side_effect=ConnectionError("mongo down"))
        engine = TermMergeEngine(repository, clock)

        with pytest.raises(StoreError) as exc_info:
            await engine.merge_async(TermGroupFactory.create(term="Cat"))

        assert exc_info.value.term == "Cat"
        assert isinstance(exc_info.value.cause, ConnectionError)

    @pytest.mark.asyncio
    async def test_write_failure_is_wrapped_and_nothing_else_written(self, clock: SteppingClock) -> None:
        repository = MagicMock(spec=GlossaryTermRepository)
        repository.get_by_term_async = self.create_async_mock(return_value=None)
        repository.add_async = AsyncMock(side_effect=RuntimeError("write refused"))
        engine = TermMergeEngine(repository, clock)

        with pytest.raises(StoreError):
            await engine.merge_async(TermGroupFactory.create(term="Cat"))

        repository.add_async.assert_called_once()
        repository.update_async.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_unavailable_propagates_unchanged(self, unavailable_repository, clock: SteppingClock) -> None:
        engine = TermMergeEngine(unavailable_repository, clock)

        with pytest.raises(StoreUnavailable):
            await engine.merge_async(TermGroupFactory.create(term="Cat"))
