"""Dependency Injection providers for Voting Gateway Service.

Provides Dishka DI container setup with APP-scoped infrastructure
and REQUEST-scoped context providers.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any
from uuid import UUID, uuid4

import httpx
from dishka import Provider, Scope, from_context, provide
from fastapi import Request
from prometheus_client import REGISTRY, CollectorRegistry

from services.voting_gateway_service.clients.backend_client import VotingBackendClientImpl
from services.voting_gateway_service.config import VotingGatewaySettings, settings
from services.voting_gateway_service.logging_utils import create_service_logger
from services.voting_gateway_service.metrics import GatewayMetrics
from services.voting_gateway_service.protocols import (
    MetricsProtocol,
    VotingBackendClientProtocol,
)

logger = create_service_logger("voting_gateway.di")


def build_http_client_options(config: VotingGatewaySettings) -> dict[str, Any]:
    """Keyword arguments for the backend AsyncClient; unset timeout keeps httpx defaults."""
    if config.HTTP_CLIENT_TIMEOUT_SECONDS is None:
        return {}
    return {"timeout": httpx.Timeout(config.HTTP_CLIENT_TIMEOUT_SECONDS)}


class VotingGatewayProvider(Provider):
    """Infrastructure provider for Voting Gateway Service.

    Provides APP-scoped dependencies: config, HTTP client, backend client,
    metrics.
    """

    scope = Scope.APP

    def __init__(self, config: VotingGatewaySettings | None = None) -> None:
        super().__init__()
        self._config = config or settings

    @provide
    def get_config(self) -> VotingGatewaySettings:
        """Provide settings."""
        return self._config

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, config: VotingGatewaySettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide shared HTTP client with connection pooling."""
        async with httpx.AsyncClient(**build_http_client_options(config)) as client:
            yield client
        logger.info("Backend HTTP client closed")

    @provide(scope=Scope.APP)
    def provide_registry(self) -> CollectorRegistry:
        return REGISTRY

    @provide(scope=Scope.APP)
    def provide_metrics(self, registry: CollectorRegistry) -> MetricsProtocol:
        return GatewayMetrics(registry=registry)

    @provide(scope=Scope.APP)
    def provide_backend_client(
        self,
        http_client: httpx.AsyncClient,
        config: VotingGatewaySettings,
        metrics: MetricsProtocol,
    ) -> VotingBackendClientProtocol:
        """Provide the voting backend client bound to the configured base URL."""
        return VotingBackendClientImpl(http_client, config.BACKEND_URL, metrics)


class RequestContextProvider(Provider):
    """Request-scoped provider for correlation context.

    The correlation id is set on request state by CorrelationIDMiddleware.
    """

    request = from_context(provides=Request, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def provide_correlation_id(self, request: Request) -> UUID:
        """Provide correlation ID from request state."""
        return getattr(request.state, "correlation_id", uuid4())
