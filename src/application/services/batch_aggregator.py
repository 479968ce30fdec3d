"""Batch aggregation of normalized glossary entries.

Groups the entries of one import (or one manual submission) by exact term
name so that each term is read, merged and written exactly once per batch.
"""

from typing import Iterable

from domain.models import CandidateDefinition, NormalizedEntry, TermGroup


def aggregate_entries(entries: Iterable[NormalizedEntry], origin: str) -> list[TermGroup]:
    """Group entries by term.

    The note of a group is the note of the last entry seen for that term.
    Each definition text of an entry becomes one candidate carrying that
    entry's full tag set.

    Args:
        entries: Normalized entries in source order
        origin: Provenance stamped on every candidate ('manual' or the file name)

    Returns:
        One group per distinct term, in order of first appearance
    """
    groups: dict[str, TermGroup] = {}
    for entry in entries:
        group = groups.get(entry.term)
        if group is None:
            group = TermGroup(term=entry.term)
            groups[entry.term] = group
        group.note = entry.note
        for text in entry.definition_texts:
            group.candidates.append(CandidateDefinition(text=text, tags=entry.tags, origin=origin))
    return list(groups.values())
