"""Tests for Voting Gateway Service settings."""

from __future__ import annotations

import pytest

from services.voting_gateway_service.config import Environment, VotingGatewaySettings
from services.voting_gateway_service.di import build_http_client_options


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BACKEND_URL", "VOTING_GATEWAY_BACKEND_URL", "VOTING_GATEWAY_PORT", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_reference_deployment() -> None:
    settings = VotingGatewaySettings(_env_file=None)

    assert settings.BACKEND_URL == "http://localhost:8080"
    assert settings.PORT == 3000
    assert settings.HTTP_CLIENT_TIMEOUT_SECONDS is None
    assert (settings.STATIC_DIR / "index.html").exists()
    assert settings.is_development()


def test_backend_url_from_plain_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BACKEND_URL", "http://backend:8080")

    assert VotingGatewaySettings(_env_file=None).BACKEND_URL == "http://backend:8080"


def test_prefixed_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VOTING_GATEWAY_BACKEND_URL", "http://voting-backend:9000")
    monkeypatch.setenv("VOTING_GATEWAY_PORT", "3100")
    monkeypatch.setenv("ENVIRONMENT", "production")

    settings = VotingGatewaySettings(_env_file=None)

    assert settings.BACKEND_URL == "http://voting-backend:9000"
    assert settings.PORT == 3100
    assert settings.ENVIRONMENT == Environment.PRODUCTION
    assert settings.is_production()


def test_http_client_options_keep_httpx_default_timeout() -> None:
    assert build_http_client_options(VotingGatewaySettings(_env_file=None)) == {}


def test_http_client_options_apply_configured_timeout() -> None:
    options = build_http_client_options(
        VotingGatewaySettings(_env_file=None, HTTP_CLIENT_TIMEOUT_SECONDS=2.5)
    )

    assert options["timeout"].read == 2.5
    assert options["timeout"].connect == 2.5
