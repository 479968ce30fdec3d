"""Application health check and info controller."""

import logging

from classy_fastapi.decorators import get
from neuroglia.dependency_injection import ServiceProviderBase
from neuroglia.mapping import Mapper
from neuroglia.mediation import Mediator
from neuroglia.mvc import ControllerBase

from application.settings import app_settings

log = logging.getLogger(__name__)


class AppController(ControllerBase):
    """Controller for application health checks and info."""

    def __init__(self, service_provider: ServiceProviderBase, mapper: Mapper, mediator: Mediator):
        super().__init__(service_provider, mapper, mediator)

    @get("/health")
    async def health(self) -> dict:
        """Health check endpoint to verify the application is online."""
        return {"online": True, "status": "healthy", "store": app_settings.glossary_store}

    @get("/info")
    async def info(self) -> dict:
        """Application info endpoint returning version and store configuration."""
        return {
            "name": app_settings.app_name,
            "version": app_settings.app_version,
            "environment": app_settings.environment,
            "store": app_settings.glossary_store,
            "database": app_settings.database_name if app_settings.glossary_store == "mongo" else None,
        }
