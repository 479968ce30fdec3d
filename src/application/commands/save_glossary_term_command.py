"""Save glossary term command with handler.

Merges a manually entered term (one term, N definitions) into the store.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from neuroglia.core import OperationResult
from neuroglia.mapping import Mapper
from neuroglia.mediation import Command, CommandHandler, Mediator
from neuroglia.observability.tracing import add_span_attributes

from application.commands.command_handler_base import CommandHandlerBase
from application.services import GlossaryIngestionService, ManualDefinitionInput, ValidationError
from application.settings import Settings
from domain.repositories import StoreError
from integration.models import TermSaveResultDto, to_glossary_term_dto

log = logging.getLogger(__name__)


@dataclass
class DefinitionInput:
    """One definition in a manual save request."""

    text: str
    """The definition text."""

    tags: str | list[str] = field(default_factory=list)
    """Tags as a list or a comma-separated string."""


@dataclass
class SaveGlossaryTermCommand(Command[OperationResult[TermSaveResultDto]]):
    """Command to create or extend a glossary term by hand."""

    term: str
    """The term name (exact, case-sensitive)."""

    definitions: list[DefinitionInput] = field(default_factory=list)
    """Definitions to merge. Blank texts are ignored."""

    note: str | None = None
    """Note stored on the term (replaces the current one)."""

    # Context
    user_info: dict[str, Any] | None = None
    """User information from authentication context."""


class SaveGlossaryTermCommandHandler(CommandHandlerBase, CommandHandler[SaveGlossaryTermCommand, OperationResult[TermSaveResultDto]]):
    """Handler for SaveGlossaryTermCommand."""

    def __init__(
        self,
        mediator: Mediator,
        mapper: Mapper,
        settings: Settings,
        ingestion_service: GlossaryIngestionService,
    ):
        super().__init__(mediator, mapper, settings)
        self._ingestion_service = ingestion_service

    async def handle_async(self, command: SaveGlossaryTermCommand) -> OperationResult[TermSaveResultDto]:
        """Handle the save glossary term command.

        Args:
            command: The command to handle

        Returns:
            OperationResult containing the saved term and merge counters, or error
        """
        add_span_attributes(
            {
                "glossary.term": command.term,
                "glossary.definitions.count": len(command.definitions),
            }
        )

        definitions = [ManualDefinitionInput(text=d.text, tags=d.tags) for d in command.definitions]

        try:
            result = await self._ingestion_service.save_manual_entry_async(
                term=command.term,
                note=command.note,
                definitions=definitions,
                created_by=self.resolve_user_id(command.user_info),
            )
        except ValidationError as e:
            return self.bad_request(str(e))
        except StoreError as e:
            log.error(f"Failed to save term '{command.term}': {e}")
            return self.internal_server_error(f"Failed to save term: {e}")

        if result.created:
            message = f"Term '{result.term}' created with {result.definitions_added} definitions"
        else:
            message = f"Term '{result.term}' updated: added {result.definitions_added} new definitions, updated {result.definitions_updated} existing definitions"

        dto = TermSaveResultDto(
            term=to_glossary_term_dto(result.aggregate),
            created=result.created,
            definitions_added=result.definitions_added,
            definitions_updated=result.definitions_updated,
            definitions_skipped=result.definitions_skipped,
            message=message,
        )
        return self.created(dto) if result.created else self.ok(dto)
