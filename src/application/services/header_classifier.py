"""Header classification for glossary sheets.

Maps the header row of an imported sheet to one ColumnRole per column using
a fixed indicator vocabulary. Matching is case-insensitive; Term and Note
headers must match exactly, Definition and Tags headers only need to contain
an indicator (so "Def1", "Definition (EN)" or "Tag2" are recognized).
"""

from typing import Any, Sequence

from domain.enums import ColumnRole

TERM_INDICATORS: tuple[str, ...] = ("term", "concept", "word", "name")
NOTE_INDICATORS: tuple[str, ...] = ("note", "description", "summary", "notes")
DEFINITION_INDICATORS: tuple[str, ...] = ("definition", "meaning", "def", "deff", "explanation")
TAG_INDICATORS: tuple[str, ...] = ("tags", "keywords", "categories", "tag", "tabs")


def normalize_header(header: Any) -> str:
    """Coerce a raw header value to a lower-cased string."""
    if header is None:
        return ""
    return str(header).strip().lower()


def classify_header(header: Any, term_found: bool = False) -> ColumnRole:
    """Classify a single header.

    Args:
        header: The raw header value
        term_found: Whether an earlier column already holds the Term role

    Returns:
        The role of the column
    """
    name = normalize_header(header)
    if not term_found and name in TERM_INDICATORS:
        return ColumnRole.TERM
    if name in NOTE_INDICATORS:
        return ColumnRole.NOTE
    if any(indicator in name for indicator in DEFINITION_INDICATORS):
        return ColumnRole.DEFINITION
    if any(indicator in name for indicator in TAG_INDICATORS):
        return ColumnRole.TAGS
    return ColumnRole.UNMAPPED


def classify_headers(headers: Sequence[Any]) -> list[ColumnRole]:
    """Classify every header of a sheet.

    Only the first column matching a Term indicator becomes the Term column;
    later Term-like headers fall through to the Note/Definition/Tags checks.

    Args:
        headers: The header row, in column order

    Returns:
        One role per column, aligned with ``headers``
    """
    roles: list[ColumnRole] = []
    term_found = False
    for header in headers:
        role = classify_header(header, term_found=term_found)
        if role is ColumnRole.TERM:
            term_found = True
        roles.append(role)
    return roles
