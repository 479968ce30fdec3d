"""Glossary term repository implementations."""

from integration.repositories.in_memory_glossary_term_repository import InMemoryGlossaryTermRepository
from integration.repositories.motor_glossary_term_repository import GlossaryTermIndexInitializer, MotorGlossaryTermRepository
from integration.repositories.unavailable_glossary_term_repository import UnavailableGlossaryTermRepository

__all__ = [
    "GlossaryTermIndexInitializer",
    "MotorGlossaryTermRepository",
    "InMemoryGlossaryTermRepository",
    "UnavailableGlossaryTermRepository",
]
