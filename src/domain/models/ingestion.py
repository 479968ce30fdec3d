"""Value objects flowing through the glossary ingestion pipeline.

raw rows -> NormalizedEntry (per row) -> TermGroup (per term) -> merge.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NormalizedEntry:
    """One data row after its columns have been mapped to roles."""

    term: str
    note: str = ""
    definition_texts: tuple[str, ...] = ()
    tags: frozenset[str] = frozenset()
    row_number: int | None = None  # 1-based row in the sheet (blank lines excluded), None for manual entries


@dataclass(frozen=True)
class RowSkipped:
    """A data row that could not be normalized. Non-fatal; reported in summaries."""

    row_number: int
    reason: str
    values: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"row_number": self.row_number, "reason": self.reason, "values": list(self.values)}


@dataclass(frozen=True)
class CandidateDefinition:
    """A definition proposed for merging into a term."""

    text: str
    tags: frozenset[str] = frozenset()
    origin: str = "manual"


@dataclass
class TermGroup:
    """All candidate definitions for one term within a single batch."""

    term: str
    note: str = ""
    candidates: list[CandidateDefinition] = field(default_factory=list)
