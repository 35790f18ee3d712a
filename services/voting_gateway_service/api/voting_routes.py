"""Voting API routes.

Each route forwards to exactly one voting backend endpoint and relays the
backend body verbatim at HTTP 200, whatever status the backend answered.
When the backend call cannot complete, the client gets HTTP 500 with a
fixed per-route message and the cause only goes to the log.
"""

from __future__ import annotations

import json
from collections.abc import Awaitable
from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Request
from starlette.responses import Response

from services.voting_gateway_service.errors import BackendUnavailableError, raise_gateway_error
from services.voting_gateway_service.logging_utils import create_service_logger
from services.voting_gateway_service.protocols import (
    BackendReply,
    MetricsProtocol,
    VotingBackendClientProtocol,
)

router = APIRouter()
logger = create_service_logger("voting_gateway.voting_routes")

SESSION_CREATE_FAILED = "Failed to create session"
NULLIFIER_GENERATE_FAILED = "Failed to generate nullifier"
VOTE_SUBMIT_FAILED = "Failed to submit vote"
RESULTS_FETCH_FAILED = "Failed to fetch results"


def _reject_constant(constant: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {constant}")


async def read_json_object(request: Request) -> dict[str, Any]:
    """Return the request body as a JSON object, or ``{}`` if it is not one.

    NaN and Infinity are rejected here since they cannot be re-serialised for
    the backend; overly deep nesting is treated the same way.
    """
    try:
        body = json.loads(await request.body(), parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        logger.debug("Request body is not valid JSON; forwarding without fields")
        return {}
    return body if isinstance(body, dict) else {}


def pick_fields(body: dict[str, Any], *fields: str) -> dict[str, Any]:
    """Select the named fields that are present, values untouched."""
    return {field: body[field] for field in fields if field in body}


async def relay(
    backend_call: Awaitable[BackendReply],
    *,
    method: str,
    endpoint: str,
    operation: str,
    failure_message: str,
    metrics: MetricsProtocol,
    correlation_id: UUID,
) -> Response:
    """Await the single backend call and map its outcome to the client response."""
    with metrics.http_request_duration_seconds.labels(method=method, endpoint=endpoint).time():
        try:
            reply = await backend_call
        except Exception as e:
            error_type = (
                "backend_unavailable" if isinstance(e, BackendUnavailableError) else "proxy_error"
            )
            logger.error(
                f"Error {operation}: {e}",
                endpoint=endpoint,
                error_type=error_type,
                exc_info=True,
            )
            metrics.http_requests_total.labels(
                method=method, endpoint=endpoint, http_status="500"
            ).inc()
            metrics.api_errors_total.labels(endpoint=endpoint, error_type=error_type).inc()
            raise_gateway_error(
                failure_message,
                operation=operation,
                correlation_id=correlation_id,
                cause=e,
            )

    metrics.http_requests_total.labels(method=method, endpoint=endpoint, http_status="200").inc()
    logger.info(
        f"Relayed backend response for {endpoint}",
        backend_status=reply.status_code,
    )
    return Response(content=reply.content, status_code=200, media_type=reply.media_type)


@router.post("/session/create")
@inject
async def create_session(
    request: Request,
    backend: FromDishka[VotingBackendClientProtocol],
    metrics: FromDishka[MetricsProtocol],
    correlation_id: FromDishka[UUID],
) -> Response:
    """Create a voting session for ``proposalId``."""
    body = await read_json_object(request)
    return await relay(
        backend.create_session(pick_fields(body, "proposalId"), correlation_id),
        method="POST",
        endpoint="/api/session/create",
        operation="creating session",
        failure_message=SESSION_CREATE_FAILED,
        metrics=metrics,
        correlation_id=correlation_id,
    )


@router.post("/nullifier/generate")
@inject
async def generate_nullifier(
    request: Request,
    backend: FromDishka[VotingBackendClientProtocol],
    metrics: FromDishka[MetricsProtocol],
    correlation_id: FromDishka[UUID],
) -> Response:
    """Generate a nullifier for ``voterId``."""
    body = await read_json_object(request)
    return await relay(
        backend.generate_nullifier(pick_fields(body, "voterId"), correlation_id),
        method="POST",
        endpoint="/api/nullifier/generate",
        operation="generating nullifier",
        failure_message=NULLIFIER_GENERATE_FAILED,
        metrics=metrics,
        correlation_id=correlation_id,
    )


@router.post("/vote/submit")
@inject
async def submit_vote(
    request: Request,
    backend: FromDishka[VotingBackendClientProtocol],
    metrics: FromDishka[MetricsProtocol],
    correlation_id: FromDishka[UUID],
) -> Response:
    """Submit ``vote`` for ``proposalId``; the vote value is opaque here."""
    body = await read_json_object(request)
    return await relay(
        backend.submit_vote(pick_fields(body, "proposalId", "vote"), correlation_id),
        method="POST",
        endpoint="/api/vote/submit",
        operation="submitting vote",
        failure_message=VOTE_SUBMIT_FAILED,
        metrics=metrics,
        correlation_id=correlation_id,
    )


@router.get("/results/{proposal_id:path}")
@inject
async def get_results(
    proposal_id: str,
    backend: FromDishka[VotingBackendClientProtocol],
    metrics: FromDishka[MetricsProtocol],
    correlation_id: FromDishka[UUID],
) -> Response:
    """Fetch tallied results for a proposal."""
    return await relay(
        backend.fetch_results(proposal_id, correlation_id),
        method="GET",
        endpoint="/api/results/{proposal_id}",
        operation="fetching results",
        failure_message=RESULTS_FETCH_FAILED,
        metrics=metrics,
        correlation_id=correlation_id,
    )
