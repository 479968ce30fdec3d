"""Manual (form) entry of a single glossary term.

A form submission carries one term, an optional note and N definitions,
each with its own tags. It is turned into normalized entries and then into
exactly one TermGroup, so it goes through the same merge path as an import.
"""

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from application.services.batch_aggregator import aggregate_entries
from application.services.row_normalizer import coerce_cell, split_tags
from domain.models import NormalizedEntry, TermGroup


class ValidationError(Exception):
    """Raised when manual input lacks a term or any definition text."""

    pass


@dataclass
class ManualDefinitionInput:
    """One definition as typed in the form."""

    text: str
    tags: str | list[str] = field(default_factory=list)
    """Comma-separated string or list of tags."""


def parse_tags(tags: str | Iterable[str] | None) -> frozenset[str]:
    """Accept tags either as a comma-separated string or as a list."""
    if tags is None:
        return frozenset()
    if isinstance(tags, str):
        return frozenset(split_tags(tags))
    result: set[str] = set()
    for tag in tags:
        result |= split_tags(coerce_cell(tag))
    return frozenset(result)


def build_manual_group(
    term: str,
    note: str | None,
    definitions: Sequence[ManualDefinitionInput],
    origin: str = "manual",
) -> TermGroup:
    """Build the single term group for a manual submission.

    Definitions with blank text are ignored.

    Raises:
        ValidationError: The term is blank or no definition has text
    """
    name = coerce_cell(term)
    if not name:
        raise ValidationError("Term name is required")

    entries = [
        NormalizedEntry(
            term=name,
            note=coerce_cell(note),
            definition_texts=(coerce_cell(definition.text),),
            tags=parse_tags(definition.tags),
        )
        for definition in definitions
        if coerce_cell(definition.text)
    ]
    if not entries:
        raise ValidationError(f"At least one definition is required for term '{name}'")

    return aggregate_entries(entries, origin)[0]
