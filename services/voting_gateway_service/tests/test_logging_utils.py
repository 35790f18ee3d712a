"""Tests for structlog configuration."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from services.voting_gateway_service.logging_utils import (
    add_service_context,
    configure_service_logging,
)


@pytest.fixture
def restore_logging(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SERVICE_NAME", "voting-gateway-service")
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.delenv("LOG_TO_FILE", raising=False)
    yield
    configure_service_logging("voting-gateway-service", log_to_file=False)


def test_file_logging_adds_rotating_handler(restore_logging, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "voting-gateway-service.log"

    configure_service_logging(
        "voting-gateway-service", log_to_file=True, log_file_path=str(log_file)
    )
    logging.getLogger("voting_gateway.test").warning("written to file")

    file_handlers = [
        h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    file_handlers[0].flush()
    assert log_file.parent.is_dir()
    assert "written to file" in log_file.read_text(encoding="utf-8")


def test_file_logging_enabled_from_environment(
    restore_logging, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    log_file = tmp_path / "env.log"
    monkeypatch.setenv("LOG_TO_FILE", "true")
    monkeypatch.setenv("LOG_FILE_PATH", str(log_file))

    configure_service_logging("voting-gateway-service")

    assert any(isinstance(h, RotatingFileHandler) for h in logging.getLogger().handlers)
    assert log_file.exists()


def test_console_only_by_default(restore_logging) -> None:
    configure_service_logging("voting-gateway-service")

    assert not any(isinstance(h, RotatingFileHandler) for h in logging.getLogger().handlers)


def test_service_context_added_to_events(restore_logging) -> None:
    event = add_service_context(None, "info", {"event": "hello"})

    assert event["service.name"] == "voting-gateway-service"
    assert event["deployment.environment"] == "development"
