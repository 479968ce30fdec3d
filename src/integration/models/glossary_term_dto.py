"""Glossary DTOs returned by the API."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from neuroglia.data.abstractions import queryable

from domain.entities import GlossaryTerm


@dataclass
class GlossaryDefinitionDto:
    """DTO for one definition of a term."""

    text: str
    """The definition text."""

    tags: list[str] = field(default_factory=list)
    """Sorted, de-duplicated tags."""

    origin: str = "manual"
    """'manual' or the name of the imported file."""

    created_at: datetime | str | None = None
    """When the definition was first added."""

    modified: datetime | str | None = None
    """When the definition text was added or its tags last grew."""


@queryable
@dataclass
class GlossaryTermDto:
    """DTO for a full glossary term record."""

    id: str
    """Store identifier."""

    term: str
    """The term name (exact, case-sensitive)."""

    note: str = ""
    """Free-text note on the term."""

    definitions: list[GlossaryDefinitionDto] = field(default_factory=list)
    """Definitions in insertion order."""

    index_defs: int = 0
    """Number of definitions."""

    index_tags: int = 0
    """Number of distinct tags across all definitions."""

    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class GlossaryTermSummaryDto:
    """One row of the term matrix."""

    id: str
    term: str
    index_defs: int = 0
    index_tags: int = 0


@dataclass
class TermSaveResultDto:
    """Result of a manual term save."""

    term: GlossaryTermDto
    created: bool = False
    definitions_added: int = 0
    definitions_updated: int = 0
    definitions_skipped: int = 0
    message: str = ""


@dataclass
class ImportSummaryDto:
    """Summary of one batch import."""

    origin: str
    terms_added: int = 0
    terms_updated: int = 0
    terms_failed: int = 0
    definitions_added: int = 0
    definitions_updated: int = 0
    definitions_skipped: int = 0
    rows_skipped: int = 0
    skipped_rows: list[dict[str, Any]] = field(default_factory=list)
    """Row number, reason and raw values of each rejected row."""

    failed_terms: list[dict[str, Any]] = field(default_factory=list)
    """Term name and error of each term whose merge failed."""

    message: str = ""


@dataclass
class ClearSummaryDto:
    """Summary of a bulk clear."""

    deleted: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)
    message: str = ""


def to_glossary_term_dto(entity: GlossaryTerm) -> GlossaryTermDto:
    """Map a GlossaryTerm aggregate to its DTO."""
    state = entity.state
    return GlossaryTermDto(
        id=entity.id(),
        term=state.term,
        note=state.note,
        definitions=[
            GlossaryDefinitionDto(
                text=definition.get("text", ""),
                tags=list(definition.get("tags") or []),
                origin=definition.get("origin", "manual"),
                created_at=definition.get("created_at"),
                modified=definition.get("modified"),
            )
            for definition in state.definitions
        ],
        index_defs=state.index_defs,
        index_tags=state.index_tags,
        created_by=state.created_by,
        created_at=state.created_at,
        updated_at=state.updated_at,
    )


def to_glossary_term_summary_dto(entity: GlossaryTerm) -> GlossaryTermSummaryDto:
    """Map a GlossaryTerm aggregate to its term matrix row."""
    return GlossaryTermSummaryDto(
        id=entity.id(),
        term=entity.state.term,
        index_defs=entity.state.index_defs,
        index_tags=entity.state.index_tags,
    )
