"""Voting backend HTTP client."""

from __future__ import annotations

from typing import Any
from uuid import UUID

import httpx

from services.voting_gateway_service.errors import BackendUnavailableError
from services.voting_gateway_service.logging_utils import create_service_logger
from services.voting_gateway_service.protocols import BackendReply, MetricsProtocol

logger = create_service_logger("voting_gateway.backend_client")

DEFAULT_MEDIA_TYPE = "application/json"

SESSION_CREATE_PATH = "/api/session/create"
NULLIFIER_GENERATE_PATH = "/api/nullifier/generate"
VOTE_SUBMIT_PATH = "/api/vote/submit"
RESULTS_PATH = "/api/results"


class VotingBackendClientImpl:
    """HTTP client for the voting backend.

    Bodies are relayed as raw bytes. The backend's status code is recorded
    but never raised on: only a call that fails to complete is an error.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        metrics: MetricsProtocol,
    ) -> None:
        """Initialize with shared HTTP client.

        Args:
            http_client: Shared httpx AsyncClient instance
            base_url: Voting backend base URL, e.g. ``http://localhost:8080``
            metrics: Metrics sink for backend call counters and timings
        """
        self._client = http_client
        self._base_url = base_url.rstrip("/")
        self._metrics = metrics

    async def create_session(
        self, payload: dict[str, Any], correlation_id: UUID | None = None
    ) -> BackendReply:
        return await self._send("POST", SESSION_CREATE_PATH, correlation_id, json=payload)

    async def generate_nullifier(
        self, payload: dict[str, Any], correlation_id: UUID | None = None
    ) -> BackendReply:
        return await self._send("POST", NULLIFIER_GENERATE_PATH, correlation_id, json=payload)

    async def submit_vote(
        self, payload: dict[str, Any], correlation_id: UUID | None = None
    ) -> BackendReply:
        return await self._send("POST", VOTE_SUBMIT_PATH, correlation_id, json=payload)

    async def fetch_results(
        self, proposal_id: str, correlation_id: UUID | None = None
    ) -> BackendReply:
        return await self._send(
            "GET", RESULTS_PATH, correlation_id, params={"proposalId": proposal_id}
        )

    async def _send(
        self,
        method: str,
        path: str,
        correlation_id: UUID | None,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> BackendReply:
        """Issue one call to the backend and wrap the completed exchange.

        Raises:
            BackendUnavailableError: If the call cannot complete (connection
                refused, DNS failure, timeout, protocol error).
        """
        url = f"{self._base_url}{path}"
        headers = {"X-Correlation-ID": str(correlation_id)} if correlation_id else None

        logger.debug("Calling voting backend", method=method, url=url)

        try:
            with self._metrics.backend_call_duration_seconds.labels(
                method=method, endpoint=path
            ).time():
                response = await self._client.request(
                    method, url, json=json, params=params, headers=headers
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._metrics.backend_calls_total.labels(
                method=method, endpoint=path, status_code="unreachable"
            ).inc()
            raise BackendUnavailableError(f"{method} {path}", e) from e

        self._metrics.backend_calls_total.labels(
            method=method, endpoint=path, status_code=str(response.status_code)
        ).inc()

        if response.is_error:
            logger.info(
                "Voting backend answered with an error status; relaying body",
                method=method,
                endpoint=path,
                status_code=response.status_code,
            )

        return BackendReply(
            content=response.content,
            media_type=response.headers.get("content-type", DEFAULT_MEDIA_TYPE),
            status_code=response.status_code,
        )
