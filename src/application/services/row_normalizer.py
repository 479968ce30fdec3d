"""Row normalization for glossary sheets.

Applies the classified column roles to one data row and produces a
NormalizedEntry, or a RowSkipped record when the row has no term or no
definition text.
"""

import logging
from typing import Any, Sequence

from domain.enums import ColumnRole
from domain.models import NormalizedEntry, RowSkipped

log = logging.getLogger(__name__)


def coerce_cell(value: Any) -> str:
    """Coerce a parsed cell value to a trimmed string (None becomes '')."""
    if value is None:
        return ""
    return str(value).strip()


def split_tags(value: str) -> set[str]:
    """Split a comma-separated tag cell into a set of trimmed, non-empty tags."""
    return {piece.strip() for piece in value.split(",") if piece.strip()}


def normalize_row(
    values: Sequence[Any],
    roles: Sequence[ColumnRole],
    row_number: int,
) -> NormalizedEntry | RowSkipped:
    """Normalize one data row.

    Args:
        values: Cell values aligned positionally with ``roles`` (may be shorter or longer)
        roles: Column roles produced by the header classifier
        row_number: 1-based row number in the sheet, header included, blank lines excluded

    Returns:
        The normalized entry, or a RowSkipped when the row lacks a term or a definition
    """
    term = ""
    note = ""
    definition_texts: list[str] = []
    tags: set[str] = set()

    for index, role in enumerate(roles):
        value = coerce_cell(values[index]) if index < len(values) else ""
        if role is ColumnRole.TERM:
            term = value
        elif role is ColumnRole.NOTE:
            note = value
        elif role is ColumnRole.DEFINITION:
            if value:
                definition_texts.append(value)
        elif role is ColumnRole.TAGS:
            if value:
                tags |= split_tags(value)

    cells = tuple(coerce_cell(v) for v in values)
    if not term:
        log.warning(f"Skipped row {row_number}: missing term value")
        return RowSkipped(row_number=row_number, reason="missing term", values=cells)
    if not definition_texts:
        log.warning(f"Skipped row {row_number}: no definition text for term '{term}'")
        return RowSkipped(row_number=row_number, reason="missing definition", values=cells)

    return NormalizedEntry(
        term=term,
        note=note,
        definition_texts=tuple(definition_texts),
        tags=frozenset(tags),
        row_number=row_number,
    )


def normalize_rows(
    rows: Sequence[Sequence[Any]],
    roles: Sequence[ColumnRole],
    first_row_number: int = 2,
) -> tuple[list[NormalizedEntry], list[RowSkipped]]:
    """Normalize every data row of a sheet.

    Args:
        rows: Data rows (header row excluded)
        roles: Column roles produced by the header classifier
        first_row_number: Row number of the first data row (2 when the header is row 1)

    Returns:
        The accepted entries and the skipped rows, each in source order
    """
    entries: list[NormalizedEntry] = []
    skipped: list[RowSkipped] = []
    for offset, values in enumerate(rows):
        outcome = normalize_row(values, roles, row_number=first_row_number + offset)
        if isinstance(outcome, RowSkipped):
            skipped.append(outcome)
        else:
            entries.append(outcome)
    return entries, skipped
