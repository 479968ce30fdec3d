"""Integration layer DTOs."""

from integration.models.glossary_term_dto import (
    ClearSummaryDto,
    GlossaryDefinitionDto,
    GlossaryTermDto,
    GlossaryTermSummaryDto,
    ImportSummaryDto,
    TermSaveResultDto,
    to_glossary_term_dto,
    to_glossary_term_summary_dto,
)

__all__ = [
    "GlossaryDefinitionDto",
    "GlossaryTermDto",
    "GlossaryTermSummaryDto",
    "TermSaveResultDto",
    "ImportSummaryDto",
    "ClearSummaryDto",
    "to_glossary_term_dto",
    "to_glossary_term_summary_dto",
]
