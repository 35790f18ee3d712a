"""Shared fixtures for Voting Gateway Service tests."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from dishka import AsyncContainer, make_async_container
from httpx import ASGITransport, AsyncClient

from services.voting_gateway_service.app import create_app
from services.voting_gateway_service.config import VotingGatewaySettings
from services.voting_gateway_service.di import RequestContextProvider
from services.voting_gateway_service.tests.test_provider import (
    InfrastructureTestProvider,
    make_test_settings,
)


@pytest.fixture
def test_settings() -> VotingGatewaySettings:
    return make_test_settings()


@pytest.fixture
async def container(test_settings: VotingGatewaySettings) -> AsyncIterator[AsyncContainer]:
    """Create test container with real httpx client and isolated metrics."""
    container = make_async_container(
        InfrastructureTestProvider(test_settings),
        RequestContextProvider(),
    )
    yield container
    await container.close()


@pytest.fixture
async def client(
    container: AsyncContainer, test_settings: VotingGatewaySettings
) -> AsyncIterator[AsyncClient]:
    """ASGI client for an app wired to the test container."""
    app = create_app(container=container, config=test_settings)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
