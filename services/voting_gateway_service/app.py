"""Voting Gateway Service - client-facing entry point for the anonymous voting workflow.

Serves the voting UI static files and forwards session, nullifier, vote and
results requests to the voting backend.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from services.voting_gateway_service.api.health_routes import router as health_router
from services.voting_gateway_service.api.static_routes import router as static_router
from services.voting_gateway_service.api.voting_routes import router as voting_router
from services.voting_gateway_service.config import VotingGatewaySettings, settings
from services.voting_gateway_service.di import RequestContextProvider, VotingGatewayProvider
from services.voting_gateway_service.errors import register_error_handlers
from services.voting_gateway_service.logging_utils import (
    configure_service_logging,
    create_service_logger,
)
from services.voting_gateway_service.middleware import CorrelationIDMiddleware

configure_service_logging(
    "voting-gateway-service",
    environment=settings.ENVIRONMENT.value,
    log_level=settings.LOG_LEVEL,
)
logger = create_service_logger("voting_gateway_service")


def create_di_container(config: VotingGatewaySettings) -> AsyncContainer:
    """Create and configure the DI container."""
    return make_async_container(VotingGatewayProvider(config), RequestContextProvider())


def create_app(
    container: AsyncContainer | None = None,
    config: VotingGatewaySettings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        container: DI container to use; tests pass one built from test providers.
        config: Settings for static serving and the default container.
    """
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(f"Voting gateway running on http://{config.HOST}:{config.PORT}")
        logger.info(f"Backend connected to {config.BACKEND_URL}")
        yield
        await app.state.di_container.close()
        logger.info("Voting gateway shutdown completed")

    app = FastAPI(
        title=config.SERVICE_NAME,
        version="1.0.0",
        description="Voting Gateway Service - forwards voting requests to the voting backend",
        docs_url="/docs" if config.is_development() else None,
        redoc_url=None,
        openapi_url="/openapi.json" if config.is_development() else None,
        lifespan=lifespan,
    )

    register_error_handlers(app)
    app.add_middleware(CorrelationIDMiddleware)

    app.include_router(health_router)
    app.include_router(static_router)
    app.include_router(voting_router, prefix="/api", tags=["Voting"])

    if container is None:
        container = create_di_container(config)
    setup_dishka(container, app)
    app.state.di_container = container

    # Static files at the root path; registered last so API routes win
    if config.STATIC_DIR.exists():
        app.mount("/", StaticFiles(directory=str(config.STATIC_DIR), html=True), name="static")
        logger.info(f"Mounted static files from {config.STATIC_DIR}")
    else:
        logger.warning(f"Static directory not found: {config.STATIC_DIR}")

    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "services.voting_gateway_service.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
        log_level=settings.LOG_LEVEL.lower(),
    )
