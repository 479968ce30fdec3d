"""Clear glossary command with handler."""

import logging
from dataclasses import dataclass
from typing import Any

from neuroglia.core import OperationResult
from neuroglia.mapping import Mapper
from neuroglia.mediation import Command, CommandHandler, Mediator
from neuroglia.observability.tracing import add_span_attributes

from application.commands.command_handler_base import CommandHandlerBase
from application.settings import Settings
from domain.repositories import GlossaryTermRepository
from integration.models import ClearSummaryDto
from observability import glossary_terms_cleared

log = logging.getLogger(__name__)


@dataclass
class ClearGlossaryCommand(Command[OperationResult[ClearSummaryDto]]):
    """Command to delete every glossary term.

    Irreversible, so the caller must confirm explicitly.
    """

    confirmed: bool = False
    """Must be True, otherwise the command is rejected without touching the store."""

    # Context
    user_info: dict[str, Any] | None = None
    """User information from authentication context."""


class ClearGlossaryCommandHandler(CommandHandlerBase, CommandHandler[ClearGlossaryCommand, OperationResult[ClearSummaryDto]]):
    """Handler for ClearGlossaryCommand."""

    def __init__(
        self,
        mediator: Mediator,
        mapper: Mapper,
        settings: Settings,
        repository: GlossaryTermRepository,
    ):
        super().__init__(mediator, mapper, settings)
        self._repository = repository

    async def handle_async(self, command: ClearGlossaryCommand) -> OperationResult[ClearSummaryDto]:
        """Handle the clear glossary command."""
        if not command.confirmed:
            return self.bad_request("Clearing the glossary requires explicit confirmation")

        user_id = self.resolve_user_id(command.user_info)
        log.warning(f"Clearing all glossary terms (requested by {user_id})")

        try:
            result = await self._repository.remove_all_async()
        except Exception as e:
            log.exception(f"Error clearing glossary: {e}")
            return self.internal_server_error(f"Failed to clear glossary: {str(e)}")

        glossary_terms_cleared.add(result.deleted)
        add_span_attributes({"glossary.clear.deleted": result.deleted, "glossary.clear.failed": result.failed})

        message = f"Deleted {result.deleted} terms"
        if result.failed:
            message += f", {result.failed} could not be deleted"
        log.info(message)

        return self.ok(ClearSummaryDto(deleted=result.deleted, failed=result.failed, errors=list(result.errors), message=message))
