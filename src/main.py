"""Glossary Manager - Main Application Entry Point.

Imports tagged glossary definitions from CSV sheets and manual entries and
merges them, term by term, into a glossary store.

Built on the Neuroglia framework with CQRS and Clean Architecture.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from neuroglia.eventing.cloud_events.infrastructure.cloud_event_publisher import CloudEventPublisher
from neuroglia.hosting.web import SubAppConfig, WebApplicationBuilder
from neuroglia.mapping import Mapper
from neuroglia.mediation import Mediator
from neuroglia.observability import Observability
from neuroglia.serialization.json import JsonSerializer

from application.services import Clock, GlossaryIngestionService, SystemClock
from application.settings import Settings, app_settings, configure_logging

# Domain repository interfaces
from domain.repositories import GlossaryTermRepository

# Integration layer - repository implementations
from integration.repositories import InMemoryGlossaryTermRepository, MotorGlossaryTermRepository, UnavailableGlossaryTermRepository

configure_logging(log_level=app_settings.log_level)
log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the Glossary Manager application.

    Creates a single API sub-app (/api prefix) with the glossary and health controllers.

    Returns:
        Configured FastAPI application with Neuroglia framework
    """
    log.debug("🚀 Creating Glossary Manager application...")

    builder = WebApplicationBuilder(app_settings=app_settings)

    # Configure core Neuroglia services
    Mediator.configure(
        builder,
        [
            "application.commands",
            "application.queries",
        ],
    )
    Mapper.configure(
        builder,
        [
            "application.commands",
            "application.queries",
            "integration.models",
        ],
    )
    JsonSerializer.configure(
        builder,
        [
            "domain.entities",
            "domain.models",
            "integration.models",
        ],
    )
    CloudEventPublisher.configure(builder)
    Observability.configure(builder)

    _configure_glossary_store(builder)
    _configure_application_services(builder)

    builder.add_sub_app(
        SubAppConfig(
            path="/api",
            name="api",
            title=f"{app_settings.app_name} API",
            description="Glossary ingestion and merge API",
            version=app_settings.app_version,
            controllers=["api.controllers"],
            docs_url="/docs",
        )
    )

    # Build the application
    app = builder.build_app_with_lifespan(
        title=app_settings.app_name,
        description="Glossary ingestion and merge service",
        version=app_settings.app_version,
        debug=app_settings.debug,
    )

    if app_settings.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    _configure_health_endpoints(app)

    log.info("✅ Glossary Manager application created successfully!")
    log.info("📊 Access points:")
    log.info(f"   - API Docs: http://localhost:{app_settings.app_port}/api/docs")
    return app


def _configure_glossary_store(builder: WebApplicationBuilder) -> None:
    """Register the GlossaryTermRepository selected by ``glossary_store``.

    Args:
        builder: The WebApplicationBuilder

    Raises:
        ValueError: If the configured store is unknown
    """
    store = app_settings.glossary_store.lower()
    log.info(f"🔧 Configuring glossary store: {store}")

    if store == "mongo":
        MotorGlossaryTermRepository.configure(builder, app_settings.database_name, app_settings.glossary_collection_name)
    elif store == "memory":
        InMemoryGlossaryTermRepository.configure(builder)
    elif store == "none":
        UnavailableGlossaryTermRepository.configure(builder)
    else:
        raise ValueError(f"Unknown glossary store '{app_settings.glossary_store}' (expected mongo, memory or none)")


def _configure_application_services(builder: WebApplicationBuilder) -> None:
    """Register settings, clock and the ingestion service in the DI container.

    Args:
        builder: The WebApplicationBuilder
    """
    builder.services.add_singleton(Settings, singleton=app_settings)
    builder.services.add_singleton(Clock, singleton=SystemClock())
    GlossaryIngestionService.configure(builder)


def _configure_health_endpoints(app: FastAPI) -> None:
    """Add health check endpoints to the app.

    Args:
        app: FastAPI application
    """

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Basic health check."""
        return {"status": "healthy", "service": "glossary-manager"}

    @app.get("/health/ready", tags=["Health"])
    async def readiness_check():
        """Readiness check: the glossary store answers a lookup."""
        checks = {"service": "ready"}

        try:
            repository = app.state.services.get_required_service(GlossaryTermRepository)
            await repository.get_by_term_async("")
            checks["store"] = "ready"
        except Exception:
            checks["store"] = "not_ready"

        all_ready = all(v == "ready" for v in checks.values())
        return {"status": "ready" if all_ready else "degraded", "checks": checks}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:create_app",
        factory=True,
        host=app_settings.app_host,
        port=app_settings.app_port,
        reload=app_settings.debug,
    )
