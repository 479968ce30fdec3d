"""Domain events for the GlossaryTerm aggregate.

Events:
- GlossaryTermCreatedDomainEvent: first successful merge for a term name
- GlossaryDefinitionAddedDomainEvent: a definition with new text was appended
- GlossaryDefinitionTagsMergedDomainEvent: an existing definition gained tags
- GlossaryTermRevisedDomainEvent: the term record was written (note + updated_at)
"""

from dataclasses import dataclass
from datetime import datetime

from neuroglia.data.abstractions import DomainEvent
from neuroglia.eventing.cloud_events.decorators import cloudevent


@cloudevent("glossary.term.created.v1")
@dataclass
class GlossaryTermCreatedDomainEvent(DomainEvent):
    """Event raised when a glossary term is created."""

    aggregate_id: str
    term: str
    note: str
    created_by: str | None
    created_at: datetime

    def __init__(
        self,
        aggregate_id: str,
        term: str,
        note: str,
        created_at: datetime,
        created_by: str | None = None,
    ) -> None:
        super().__init__(aggregate_id)
        self.aggregate_id = aggregate_id
        self.term = term
        self.note = note
        self.created_by = created_by
        self.created_at = created_at


@cloudevent("glossary.definition.added.v1")
@dataclass
class GlossaryDefinitionAddedDomainEvent(DomainEvent):
    """Event raised when a definition is appended to a term."""

    aggregate_id: str
    text: str
    tags: list[str]
    origin: str
    created_at: datetime

    def __init__(
        self,
        aggregate_id: str,
        text: str,
        tags: list[str],
        origin: str,
        created_at: datetime,
    ) -> None:
        super().__init__(aggregate_id)
        self.aggregate_id = aggregate_id
        self.text = text
        self.tags = tags
        self.origin = origin
        self.created_at = created_at


@cloudevent("glossary.definition.tags-merged.v1")
@dataclass
class GlossaryDefinitionTagsMergedDomainEvent(DomainEvent):
    """Event raised when an existing definition's tag set grows."""

    aggregate_id: str
    text: str
    tags: list[str]
    modified_at: datetime

    def __init__(
        self,
        aggregate_id: str,
        text: str,
        tags: list[str],
        modified_at: datetime,
    ) -> None:
        super().__init__(aggregate_id)
        self.aggregate_id = aggregate_id
        self.text = text
        self.tags = tags
        self.modified_at = modified_at


@cloudevent("glossary.term.revised.v1")
@dataclass
class GlossaryTermRevisedDomainEvent(DomainEvent):
    """Event raised once per merge write, carrying the note and write time."""

    aggregate_id: str
    note: str
    updated_at: datetime

    def __init__(
        self,
        aggregate_id: str,
        note: str,
        updated_at: datetime,
    ) -> None:
        super().__init__(aggregate_id)
        self.aggregate_id = aggregate_id
        self.note = note
        self.updated_at = updated_at
