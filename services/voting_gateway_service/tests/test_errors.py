"""Tests for gateway error translation."""

from __future__ import annotations

from uuid import uuid4

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from services.voting_gateway_service.errors import (
    GatewayError,
    raise_gateway_error,
    register_error_handlers,
)


@pytest.fixture
def error_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/default")
    async def default_status() -> None:
        raise_gateway_error(
            "Failed to fetch results",
            operation="fetching results",
            correlation_id=uuid4(),
            cause=RuntimeError("socket closed"),
        )

    @app.get("/custom")
    async def custom_status() -> None:
        raise GatewayError("Upstream busy", operation="creating session", status_code=503)

    return app


@pytest.mark.asyncio
async def test_gateway_error_rendered_with_message_only(error_app: FastAPI) -> None:
    async with AsyncClient(transport=ASGITransport(app=error_app), base_url="http://test") as ac:
        response = await ac.get("/default")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch results"}
    assert "socket closed" not in response.text


@pytest.mark.asyncio
async def test_gateway_error_status_code_is_honoured(error_app: FastAPI) -> None:
    async with AsyncClient(transport=ASGITransport(app=error_app), base_url="http://test") as ac:
        response = await ac.get("/custom")

    assert response.status_code == 503
    assert response.json() == {"error": "Upstream busy"}


def test_raise_gateway_error_chains_cause() -> None:
    cause = RuntimeError("boom")

    with pytest.raises(GatewayError) as exc_info:
        raise_gateway_error("Failed to submit vote", operation="submitting vote", cause=cause)

    assert exc_info.value.__cause__ is cause
    assert exc_info.value.status_code == 500
