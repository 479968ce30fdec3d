"""Domain layer tests for the GlossaryTerm aggregate.

Tests the core domain logic including:
- Term creation and initialization
- Definition merging (add, tag union, skip)
- Derived counters (index_defs / index_tags)
- Domain events generation
"""

from datetime import UTC, datetime, timedelta

import pytest

from domain.entities import GlossaryTerm
from domain.enums import DefinitionMergeOutcome
from domain.events import (
    GlossaryDefinitionAddedDomainEvent,
    GlossaryDefinitionTagsMergedDomainEvent,
    GlossaryTermCreatedDomainEvent,
    GlossaryTermRevisedDomainEvent,
)
from domain.models import CandidateDefinition, GlossaryDefinition
from tests.fixtures.factories import GlossaryTermFactory
from tests.fixtures.mixins import AssertionMixin

T0 = datetime(2024, 1, 1, tzinfo=UTC)
T1 = T0 + timedelta(hours=1)


def candidate(text: str, *tags: str, origin: str = "manual") -> CandidateDefinition:
    return CandidateDefinition(text=text, tags=frozenset(tags), origin=origin)


@pytest.mark.domain
class TestGlossaryTermCreation:
    """Test GlossaryTerm creation."""

    def test_create_term_with_defaults(self) -> None:
        term = GlossaryTerm(term="Cat")

        assert term.state.term == "Cat"
        assert term.state.note == ""
        assert term.state.definitions == []
        assert term.state.index_defs == 0
        assert term.state.index_tags == 0
        assert term.state.created_by is None
        assert term.id() != ""

    def test_create_term_with_all_parameters(self) -> None:
        term = GlossaryTerm(term="Cat", note="Household", created_by="user-1", created_at=T0, term_id="term-1")

        assert term.id() == "term-1"
        assert term.state.note == "Household"
        assert term.state.created_by == "user-1"
        assert term.state.created_at == T0
        assert term.state.updated_at == T0

    def test_create_term_generates_domain_event(self) -> None:
        term = GlossaryTerm(term="Cat", created_by="user-1")

        events = term.domain_events
        assert len(events) == 1
        assert isinstance(events[0], GlossaryTermCreatedDomainEvent)
        assert events[0].term == "Cat"
        assert events[0].created_by == "user-1"


@pytest.mark.domain
class TestDefinitionMerge(AssertionMixin):
    """Test merging candidate definitions into a term."""

    def test_new_definition_is_added(self) -> None:
        term = GlossaryTerm(term="Cat", created_at=T0)

        outcome = term.merge_definition(candidate("A feline", "pet", "animal", origin="cats.csv"), T1)

        assert outcome == DefinitionMergeOutcome.ADDED
        definition = term.find_definition("A feline")
        assert definition is not None
        assert definition.tags == ["animal", "pet"]
        assert definition.origin == "cats.csv"
        assert definition.created_at == T1
        assert definition.modified == T1
        self.assert_indexes_consistent(term)

    def test_added_text_is_trimmed(self) -> None:
        term = GlossaryTerm(term="Cat")

        term.merge_definition(candidate("  A feline  ", "pet"), T0)

        assert term.state.definitions[0]["text"] == "A feline"

    def test_existing_definition_with_new_tag_is_updated(self) -> None:
        term = GlossaryTermFactory.create(definitions=[("A feline", ["pet"])], created_at=T0)

        outcome = term.merge_definition(candidate("A feline", "color:red"), T1)

        assert outcome == DefinitionMergeOutcome.UPDATED
        self.assert_definition_tags(term, "A feline", {"pet", "color:red"})
        definition = term.find_definition("A feline")
        assert definition is not None
        assert definition.modified == T1
        assert definition.created_at == T0
        assert term.state.index_defs == 1
        assert term.state.index_tags == 2

    def test_existing_definition_with_subset_tags_is_skipped(self) -> None:
        term = GlossaryTermFactory.create(definitions=[("A feline", ["pet", "animal"])], created_at=T0)
        events_before = len(term.domain_events)

        outcome = term.merge_definition(candidate("A feline", "pet"), T1)

        assert outcome == DefinitionMergeOutcome.SKIPPED
        self.assert_definition_tags(term, "A feline", {"pet", "animal"})
        definition = term.find_definition("A feline")
        assert definition is not None
        assert definition.modified == T0
        assert len(term.domain_events) == events_before

    def test_identity_ignores_surrounding_whitespace_only(self) -> None:
        term = GlossaryTermFactory.create(definitions=[("A feline", ["pet"])])

        assert term.merge_definition(candidate("\tA feline \n", "pet"), T1) == DefinitionMergeOutcome.SKIPPED
        assert term.merge_definition(candidate("a feline", "pet"), T1) == DefinitionMergeOutcome.ADDED
        assert term.merge_definition(candidate("A  feline", "pet"), T1) == DefinitionMergeOutcome.ADDED
        assert term.state.index_defs == 3

    def test_tag_merge_is_commutative(self) -> None:
        first = GlossaryTermFactory.create(term_id="a")
        second = GlossaryTermFactory.create(term_id="b")

        for c in (candidate("A feline", "pet"), candidate("A feline", "animal", "cute")):
            first.merge_definition(c, T1)
        for c in (candidate("A feline", "animal", "cute"), candidate("A feline", "pet")):
            second.merge_definition(c, T1)

        assert first.find_definition("A feline").tags == second.find_definition("A feline").tags

    def test_tag_merge_is_idempotent(self) -> None:
        term = GlossaryTerm(term="Cat")
        term.merge_definition(candidate("A feline", "pet", "animal"), T0)

        outcomes = [term.merge_definition(candidate("A feline", "pet", "animal"), T1) for _ in range(3)]

        assert outcomes == [DefinitionMergeOutcome.SKIPPED] * 3
        self.assert_definition_tags(term, "A feline", {"pet", "animal"})

    def test_indexes_follow_every_change(self) -> None:
        term = GlossaryTerm(term="Dog")

        term.merge_definition(candidate("Canine", "pet"), T0)
        term.merge_definition(candidate("Loyal companion", "pet"), T0)
        self.assert_indexes_consistent(term)
        assert (term.state.index_defs, term.state.index_tags) == (2, 1)

        term.merge_definition(candidate("Canine", "mammal"), T1)
        self.assert_indexes_consistent(term)
        assert (term.state.index_defs, term.state.index_tags) == (2, 2)

    def test_definitions_keep_insertion_order(self) -> None:
        term = GlossaryTerm(term="Dog")
        for text in ("Canine", "Loyal companion", "Barks"):
            term.merge_definition(candidate(text), T0)

        assert [d.text for d in term.get_definitions()] == ["Canine", "Loyal companion", "Barks"]

    def test_merge_events(self) -> None:
        term = GlossaryTerm(term="Cat")
        term.merge_definition(candidate("A feline", "pet"), T0)
        term.merge_definition(candidate("A feline", "animal"), T1)

        events = term.domain_events
        assert isinstance(events[1], GlossaryDefinitionAddedDomainEvent)
        assert isinstance(events[2], GlossaryDefinitionTagsMergedDomainEvent)
        assert events[2].tags == ["animal", "pet"]


@pytest.mark.domain
class TestGlossaryTermRevision:
    """Test stamping a write on a term."""

    def test_revise_overwrites_note_and_leaves_version_to_the_store(self) -> None:
        term = GlossaryTerm(term="Cat", note="old", created_at=T0)

        term.revise("new", T1)

        assert term.state.note == "new"
        assert term.state.updated_at == T1
        assert term.state.created_at == T0
        assert term.state.state_version == 0
        assert isinstance(term.domain_events[-1], GlossaryTermRevisedDomainEvent)

    def test_revise_with_empty_note_clears_it(self) -> None:
        term = GlossaryTerm(term="Cat", note="old")

        term.revise("", T1)

        assert term.state.note == ""

    def test_get_all_tags(self) -> None:
        term = GlossaryTermFactory.create(definitions=[("A feline", ["pet"]), ("A small lion", ["pet", "joke"])])

        assert term.get_all_tags() == {"pet", "joke"}


@pytest.mark.domain
class TestGlossaryDefinition:
    """Test the GlossaryDefinition value object."""

    def test_round_trip_dict(self) -> None:
        definition = GlossaryDefinition(text="A feline", tags=["animal", "pet"], origin="cats.csv", created_at=T0, modified=T1)

        restored = GlossaryDefinition.from_dict(definition.to_dict())

        assert restored == definition

    def test_from_dict_normalizes_tags_and_naive_timestamps(self) -> None:
        restored = GlossaryDefinition.from_dict({"text": "A feline", "tags": ["pet", "animal", "pet"], "created_at": "2024-01-01T00:00:00"})

        assert restored.tags == ["animal", "pet"]
        assert restored.created_at == T0
        assert restored.origin == "manual"
        assert restored.modified is None

    def test_has_text(self) -> None:
        definition = GlossaryDefinition(text="A feline")

        assert definition.has_text("  A feline ")
        assert not definition.has_text("a feline")
