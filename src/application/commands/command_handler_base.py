import logging
from typing import Any

from neuroglia.mapping import Mapper
from neuroglia.mediation import Mediator

from application.settings import Settings

log = logging.getLogger(__name__)


class CommandHandlerBase:
    """Represents the base class for all services used to handle glossary Commands."""

    mediator: Mediator
    """ Gets the service used to mediate calls """

    mapper: Mapper
    """ Gets the service used to map objects """

    settings: Settings
    """ Gets the application settings """

    def __init__(
        self,
        mediator: Mediator,
        mapper: Mapper,
        settings: Settings,
    ):
        self.mediator = mediator
        self.mapper = mapper
        self.settings = settings

    def resolve_user_id(self, user_info: dict[str, Any] | None) -> str:
        """Gets the id recorded as creator: the token subject, or the configured anonymous id"""
        if user_info:
            user_id = user_info.get("sub") or user_info.get("user_id")
            if user_id:
                return str(user_id)
        log.debug("No authenticated user in context, using anonymous id")
        return self.settings.anonymous_user_id
