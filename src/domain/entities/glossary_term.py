"""GlossaryTerm aggregate root.

A glossary term is keyed by its exact name and owns an append-only list of
tagged definitions. The derived counters ``index_defs`` and ``index_tags``
are recomputed from the definitions every time the state changes.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from multipledispatch import dispatch
from neuroglia.data.abstractions import AggregateRoot, AggregateState

from domain.enums import DefinitionMergeOutcome
from domain.events.glossary_term import (
    GlossaryDefinitionAddedDomainEvent,
    GlossaryDefinitionTagsMergedDomainEvent,
    GlossaryTermCreatedDomainEvent,
    GlossaryTermRevisedDomainEvent,
)
from domain.models import CandidateDefinition, GlossaryDefinition, normalize_definition_text, normalize_tags


class GlossaryTermState(AggregateState[str]):
    """Encapsulates the persisted state for the GlossaryTerm aggregate."""

    # Identity
    id: str
    """Opaque store identifier (UUID)."""

    term: str
    """The term name, business key (case-sensitive, exact match)."""

    note: str
    """Optional free-text note on the term."""

    # Content
    definitions: list[dict]
    """GlossaryDefinition.to_dict() entries, in insertion order."""

    # Statistics (derived from definitions)
    index_defs: int
    index_tags: int

    # Audit
    created_by: str | None
    created_at: datetime
    updated_at: datetime

    # Optimistic concurrency (owned by the repository, bumped on every update)
    state_version: int

    def __init__(self) -> None:
        super().__init__()
        self.id = ""
        self.term = ""
        self.note = ""
        self.definitions = []
        self.index_defs = 0
        self.index_tags = 0
        self.created_by = None
        now = datetime.now(UTC)
        self.created_at = now
        self.updated_at = now
        self.state_version = 0

    def refresh_indexes(self) -> None:
        """Recompute the derived counters from the definitions."""
        self.index_defs = len(self.definitions)
        self.index_tags = len({tag for definition in self.definitions for tag in definition.get("tags") or []})

    # =========================================================================
    # Event Handlers - Apply events to state
    # =========================================================================

    @dispatch(GlossaryTermCreatedDomainEvent)
    def on(self, event: GlossaryTermCreatedDomainEvent) -> None:  # type: ignore[override]
        """Apply the term created event to the state."""
        self.id = event.aggregate_id
        self.term = event.term
        self.note = event.note
        self.created_by = event.created_by
        self.created_at = event.created_at
        self.updated_at = event.created_at

    @dispatch(GlossaryDefinitionAddedDomainEvent)
    def on(self, event: GlossaryDefinitionAddedDomainEvent) -> None:  # type: ignore[override]
        """Apply the definition added event to the state."""
        self.definitions.append(
            {
                "text": event.text,
                "tags": list(event.tags),
                "origin": event.origin,
                "created_at": event.created_at.isoformat(),
                "modified": event.created_at.isoformat(),
            }
        )
        self.refresh_indexes()

    @dispatch(GlossaryDefinitionTagsMergedDomainEvent)
    def on(self, event: GlossaryDefinitionTagsMergedDomainEvent) -> None:  # type: ignore[override]
        """Apply the definition tags merged event to the state."""
        key = normalize_definition_text(event.text)
        for definition in self.definitions:
            if normalize_definition_text(definition["text"]) == key:
                definition["tags"] = list(event.tags)
                definition["modified"] = event.modified_at.isoformat()
                break
        self.refresh_indexes()

    @dispatch(GlossaryTermRevisedDomainEvent)
    def on(self, event: GlossaryTermRevisedDomainEvent) -> None:  # type: ignore[override]
        """Apply the term revised event to the state."""
        self.note = event.note
        self.updated_at = event.updated_at
        self.refresh_indexes()


class GlossaryTerm(AggregateRoot[GlossaryTermState, str]):
    """Aggregate root for glossary terms.

    Definitions are never removed; merging a candidate either appends a new
    definition, grows the tag set of the definition with the same trimmed
    text, or leaves the term untouched.
    """

    def __init__(
        self,
        term: str,
        note: str = "",
        created_by: str | None = None,
        created_at: datetime | None = None,
        term_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Create a new GlossaryTerm.

        Args:
            term: The term name (business key)
            note: Optional note
            created_by: User who created the term
            created_at: Creation time (defaults to now)
            term_id: Optional explicit identifier (defaults to a UUID)
        """
        super().__init__()
        event = GlossaryTermCreatedDomainEvent(
            aggregate_id=term_id or str(uuid4()),
            term=term,
            note=note or "",
            created_by=created_by,
            created_at=created_at or datetime.now(UTC),
        )
        self.state.on(self.register_event(event))  # type: ignore

    # =========================================================================
    # Definition Management
    # =========================================================================

    def find_definition(self, text: str) -> GlossaryDefinition | None:
        """Get the definition whose trimmed text matches ``text``.

        Args:
            text: Definition text (surrounding whitespace ignored)

        Returns:
            GlossaryDefinition if found, None otherwise
        """
        key = normalize_definition_text(text)
        for definition in self.state.definitions:
            if normalize_definition_text(definition["text"]) == key:
                return GlossaryDefinition.from_dict(definition)
        return None

    def merge_definition(self, candidate: CandidateDefinition, now: datetime) -> DefinitionMergeOutcome:
        """Merge one candidate definition into this term.

        Args:
            candidate: The proposed definition
            now: Timestamp used for created_at / modified

        Returns:
            Whether the candidate was added, updated an existing definition, or skipped
        """
        existing = self.find_definition(candidate.text)

        if existing is None:
            event = GlossaryDefinitionAddedDomainEvent(
                aggregate_id=self.id(),
                text=normalize_definition_text(candidate.text),
                tags=normalize_tags(candidate.tags),
                origin=candidate.origin,
                created_at=now,
            )
            self.state.on(self.register_event(event))  # type: ignore
            return DefinitionMergeOutcome.ADDED

        current_tags = set(existing.tags)
        merged_tags = current_tags | set(candidate.tags)
        if merged_tags == current_tags:
            return DefinitionMergeOutcome.SKIPPED

        event = GlossaryDefinitionTagsMergedDomainEvent(
            aggregate_id=self.id(),
            text=existing.text,
            tags=normalize_tags(merged_tags),
            modified_at=now,
        )
        self.state.on(self.register_event(event))  # type: ignore
        return DefinitionMergeOutcome.UPDATED

    def revise(self, note: str, now: datetime) -> None:
        """Stamp a write of this term, overwriting its note.

        Args:
            note: The note carried by the incoming batch
            now: The write timestamp
        """
        event = GlossaryTermRevisedDomainEvent(
            aggregate_id=self.id(),
            note=note or "",
            updated_at=now,
        )
        self.state.on(self.register_event(event))  # type: ignore

    def get_definitions(self) -> list[GlossaryDefinition]:
        """Get all definitions in insertion order."""
        return [GlossaryDefinition.from_dict(d) for d in self.state.definitions]

    def get_all_tags(self) -> set[str]:
        """Get the union of tags across all definitions."""
        return {tag for definition in self.state.definitions for tag in definition.get("tags") or []}
