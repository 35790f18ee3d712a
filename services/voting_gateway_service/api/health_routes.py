"""Health and metrics routes for Voting Gateway Service."""

from __future__ import annotations

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from services.voting_gateway_service.logging_utils import create_service_logger

router = APIRouter(tags=["Health"])
logger = create_service_logger("voting_gateway.health_routes")


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness of the gateway itself; the backend is not contacted."""
    return {"status": "Frontend healthy"}


@router.get("/metrics", response_class=PlainTextResponse)
@inject
async def metrics(registry: FromDishka[CollectorRegistry]) -> PlainTextResponse:
    """Prometheus metrics endpoint."""
    try:
        metrics_data = generate_latest(registry)
        return PlainTextResponse(content=metrics_data, media_type=CONTENT_TYPE_LATEST)
    except Exception as e:
        logger.error(f"Error generating metrics: {e}", exc_info=True)
        return PlainTextResponse(content="Error generating metrics", status_code=500)
