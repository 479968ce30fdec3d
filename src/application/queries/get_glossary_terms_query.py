"""Glossary term list queries and handlers.

Provides queries for:
- GetGlossaryTermsQuery: Get all terms with their definitions
- GetGlossaryTermMatrixQuery: Get the term matrix (term, definition count, tag count)
"""

import logging
from dataclasses import dataclass
from typing import Any

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler
from neuroglia.observability.tracing import add_span_attributes

from domain.repositories import GlossaryTermRepository
from integration.models import GlossaryTermDto, GlossaryTermSummaryDto, to_glossary_term_dto, to_glossary_term_summary_dto

log = logging.getLogger(__name__)


# =============================================================================
# Get All Terms Query
# =============================================================================


@dataclass
class GetGlossaryTermsQuery(Query[OperationResult[list[GlossaryTermDto]]]):
    """Query to get all glossary terms.

    Optionally filter by tag (exact match on any definition).
    """

    tag: str | None = None
    """Only return terms having at least one definition with this tag."""

    user_info: dict[str, Any] | None = None
    """User information from authentication context."""


class GetGlossaryTermsQueryHandler(QueryHandler[GetGlossaryTermsQuery, OperationResult[list[GlossaryTermDto]]]):
    """Handler for GetGlossaryTermsQuery."""

    def __init__(self, repository: GlossaryTermRepository):
        super().__init__()
        self._repository = repository

    async def handle_async(self, request: GetGlossaryTermsQuery) -> OperationResult[list[GlossaryTermDto]]:
        """Handle get glossary terms query."""
        query = request
        add_span_attributes({"glossary.has_tag_filter": query.tag is not None})

        try:
            terms = await self._repository.get_all_async()
            if query.tag:
                terms = [t for t in terms if query.tag in t.get_all_tags()]

            dtos = [to_glossary_term_dto(t) for t in terms]
            dtos.sort(key=lambda x: x.term)
            return self.ok(dtos)

        except Exception as e:
            log.exception(f"Error querying glossary terms: {e}")
            return self.internal_server_error(f"Failed to retrieve glossary terms: {str(e)}")


# =============================================================================
# Term Matrix Query (lightweight)
# =============================================================================


@dataclass
class GetGlossaryTermMatrixQuery(Query[OperationResult[list[GlossaryTermSummaryDto]]]):
    """Query to get one summary row per term."""

    user_info: dict[str, Any] | None = None
    """User information from authentication context."""


class GetGlossaryTermMatrixQueryHandler(QueryHandler[GetGlossaryTermMatrixQuery, OperationResult[list[GlossaryTermSummaryDto]]]):
    """Handler for GetGlossaryTermMatrixQuery."""

    def __init__(self, repository: GlossaryTermRepository):
        super().__init__()
        self._repository = repository

    async def handle_async(self, request: GetGlossaryTermMatrixQuery) -> OperationResult[list[GlossaryTermSummaryDto]]:
        """Handle get term matrix query."""
        try:
            terms = await self._repository.get_all_async()
            summaries = [to_glossary_term_summary_dto(t) for t in terms]
            summaries.sort(key=lambda x: x.term)
            return self.ok(summaries)

        except Exception as e:
            log.exception(f"Error querying term matrix: {e}")
            return self.internal_server_error(f"Failed to retrieve term matrix: {str(e)}")
