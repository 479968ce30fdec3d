"""Get glossary term query with handler."""

import logging
from dataclasses import dataclass
from typing import Any

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler
from neuroglia.observability.tracing import add_span_attributes

from domain.entities import GlossaryTerm
from domain.repositories import GlossaryTermRepository
from integration.models import GlossaryTermDto, to_glossary_term_dto

log = logging.getLogger(__name__)


@dataclass
class GetGlossaryTermQuery(Query[OperationResult[GlossaryTermDto]]):
    """Query to get a single glossary term by its exact name."""

    term: str
    """The term name (case-sensitive)."""

    user_info: dict[str, Any] | None = None
    """User information from authentication context."""


class GetGlossaryTermQueryHandler(QueryHandler[GetGlossaryTermQuery, OperationResult[GlossaryTermDto]]):
    """Handler for GetGlossaryTermQuery."""

    def __init__(self, repository: GlossaryTermRepository):
        super().__init__()
        self._repository = repository

    async def handle_async(self, request: GetGlossaryTermQuery) -> OperationResult[GlossaryTermDto]:
        """Handle get glossary term query."""
        query = request
        add_span_attributes({"glossary.term": query.term})

        try:
            entity = await self._repository.get_by_term_async(query.term)
            if entity is None:
                return self.not_found(GlossaryTerm, query.term)
            return self.ok(to_glossary_term_dto(entity))

        except Exception as e:
            log.exception(f"Error retrieving glossary term '{query.term}': {e}")
            return self.internal_server_error(f"Failed to retrieve glossary term: {str(e)}")
