"""Domain events for the glossary."""

from domain.events.glossary_term import (
    GlossaryDefinitionAddedDomainEvent,
    GlossaryDefinitionTagsMergedDomainEvent,
    GlossaryTermCreatedDomainEvent,
    GlossaryTermRevisedDomainEvent,
)

__all__ = [
    "GlossaryTermCreatedDomainEvent",
    "GlossaryTermRevisedDomainEvent",
    # Definition events
    "GlossaryDefinitionAddedDomainEvent",
    "GlossaryDefinitionTagsMergedDomainEvent",
]
