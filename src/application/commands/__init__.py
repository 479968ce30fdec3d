"""Application commands package."""

from .clear_glossary_command import ClearGlossaryCommand, ClearGlossaryCommandHandler
from .command_handler_base import CommandHandlerBase
from .import_glossary_command import ImportGlossaryCommand, ImportGlossaryCommandHandler
from .save_glossary_term_command import DefinitionInput, SaveGlossaryTermCommand, SaveGlossaryTermCommandHandler

__all__ = [
    "CommandHandlerBase",
    # Glossary term commands
    "SaveGlossaryTermCommand",
    "SaveGlossaryTermCommandHandler",
    "DefinitionInput",
    "ImportGlossaryCommand",
    "ImportGlossaryCommandHandler",
    "ClearGlossaryCommand",
    "ClearGlossaryCommandHandler",
]
