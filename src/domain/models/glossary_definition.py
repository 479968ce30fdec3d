"""GlossaryDefinition value object.

A definition is one explanation of a glossary term. Within a term it is
identified by its text with surrounding whitespace removed; its tags form a
set that only ever grows through merges.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Iterable


def normalize_definition_text(text: str) -> str:
    """Return the identity key of a definition text."""
    return (text or "").strip()


def normalize_tags(tags: Iterable[str] | None) -> list[str]:
    """Deduplicate tags and return them in a deterministic (sorted) order."""
    if not tags:
        return []
    return sorted({tag for tag in tags if tag})


@dataclass(frozen=True)
class GlossaryDefinition:
    """A tagged definition of a glossary term.

    Stored inside the GlossaryTerm aggregate state as a dictionary; this value
    object is the read-side view of one entry.
    """

    text: str
    """The definition text, also its identity key within the term."""

    tags: list[str] = field(default_factory=list)
    """Deduplicated tags, sorted for deterministic round trips."""

    origin: str = "manual"
    """Provenance: 'manual' or the name of the imported file."""

    created_at: datetime | None = None
    """When the definition was first added."""

    modified: datetime | None = None
    """When the tag set last changed (or creation time)."""

    @property
    def key(self) -> str:
        return normalize_definition_text(self.text)

    def has_text(self, text: str) -> bool:
        """Check whether ``text`` designates this definition (whitespace-insensitive at the edges)."""
        return self.key == normalize_definition_text(text)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "text": self.text,
            "tags": list(self.tags),
            "origin": self.origin,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "modified": self.modified.isoformat() if self.modified else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GlossaryDefinition":
        """Create from dictionary."""
        return cls(
            text=data["text"],
            tags=normalize_tags(data.get("tags")),
            origin=data.get("origin") or "manual",
            created_at=_parse_timestamp(data.get("created_at")),
            modified=_parse_timestamp(data.get("modified")),
        )


def _parse_timestamp(value: datetime | str | None) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    parsed = datetime.fromisoformat(value)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
