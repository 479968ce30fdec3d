"""Import glossary command with handler.

Imports one CSV sheet: the header row decides which columns hold the term,
note, definitions and tags; each distinct term is merged once.
"""

import logging
from dataclasses import dataclass
from typing import Any

from neuroglia.core import OperationResult
from neuroglia.mapping import Mapper
from neuroglia.mediation import Command, CommandHandler, Mediator
from neuroglia.observability.tracing import add_span_attributes

from application.commands.command_handler_base import CommandHandlerBase
from application.services import GlossaryIngestionService, ParseError
from application.settings import Settings
from integration.models import ImportSummaryDto

log = logging.getLogger(__name__)


@dataclass
class ImportGlossaryCommand(Command[OperationResult[ImportSummaryDto]]):
    """Command to import a glossary sheet."""

    content: bytes
    """Raw CSV content."""

    origin: str
    """Provenance stamped on new definitions, usually the uploaded file name."""

    # Context
    user_info: dict[str, Any] | None = None
    """User information from authentication context."""


class ImportGlossaryCommandHandler(CommandHandlerBase, CommandHandler[ImportGlossaryCommand, OperationResult[ImportSummaryDto]]):
    """Handler for ImportGlossaryCommand."""

    def __init__(
        self,
        mediator: Mediator,
        mapper: Mapper,
        settings: Settings,
        ingestion_service: GlossaryIngestionService,
    ):
        super().__init__(mediator, mapper, settings)
        self._ingestion_service = ingestion_service

    async def handle_async(self, command: ImportGlossaryCommand) -> OperationResult[ImportSummaryDto]:
        """Handle the import glossary command.

        Per-term store failures do not fail the command; they are listed in
        the returned summary.

        Args:
            command: The command to handle

        Returns:
            OperationResult containing the import summary, or error
        """
        add_span_attributes(
            {
                "glossary.import.origin": command.origin,
                "glossary.import.size_bytes": len(command.content),
            }
        )

        if not command.content:
            return self.bad_request("Uploaded file is empty")
        if len(command.content) > self.settings.max_import_bytes:
            return self.bad_request(f"Uploaded file exceeds {self.settings.max_import_bytes} bytes")

        try:
            summary = await self._ingestion_service.import_content_async(
                content=command.content,
                origin=command.origin,
                created_by=self.resolve_user_id(command.user_info),
            )
        except ParseError as e:
            log.warning(f"Rejected import '{command.origin}': {e}")
            return self.bad_request(str(e))

        add_span_attributes(
            {
                "glossary.import.terms_added": summary.terms_added,
                "glossary.import.terms_updated": summary.terms_updated,
                "glossary.import.terms_failed": summary.terms_failed,
                "glossary.import.rows_skipped": summary.rows_skipped,
            }
        )

        dto = ImportSummaryDto(
            origin=summary.origin,
            terms_added=summary.terms_added,
            terms_updated=summary.terms_updated,
            terms_failed=summary.terms_failed,
            definitions_added=summary.definitions_added,
            definitions_updated=summary.definitions_updated,
            definitions_skipped=summary.definitions_skipped,
            rows_skipped=summary.rows_skipped,
            skipped_rows=[row.to_dict() for row in summary.skipped_rows],
            failed_terms=[failure.to_dict() for failure in summary.failures],
            message=summary.to_message(),
        )
        return self.ok(dto)
