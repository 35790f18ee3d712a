"""Protocol definitions for Voting Gateway Service.

Defines interfaces for the backend client and metrics used in dependency
injection. Route handlers depend on these protocols, not implementations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol
from uuid import UUID

from prometheus_client import Counter, Histogram


@dataclass(frozen=True)
class BackendReply:
    """A completed exchange with the voting backend.

    ``status_code`` is informational only; the gateway relays ``content``
    at HTTP 200 whatever the backend answered.
    """

    content: bytes
    media_type: str
    status_code: int


class VotingBackendClientProtocol(Protocol):
    """Protocol for the voting backend HTTP client.

    Every method performs exactly one outbound call and raises
    ``BackendUnavailableError`` when that call cannot complete.
    """

    async def create_session(
        self, payload: dict[str, Any], correlation_id: UUID | None = None
    ) -> BackendReply:
        """POST ``payload`` to the backend's session creation endpoint."""
        ...

    async def generate_nullifier(
        self, payload: dict[str, Any], correlation_id: UUID | None = None
    ) -> BackendReply:
        """POST ``payload`` to the backend's nullifier endpoint."""
        ...

    async def submit_vote(
        self, payload: dict[str, Any], correlation_id: UUID | None = None
    ) -> BackendReply:
        """POST ``payload`` to the backend's vote submission endpoint."""
        ...

    async def fetch_results(
        self, proposal_id: str, correlation_id: UUID | None = None
    ) -> BackendReply:
        """GET results for ``proposal_id`` from the backend."""
        ...


class MetricsProtocol(Protocol):
    """Protocol for metrics collection matching GatewayMetrics."""

    @property
    def http_requests_total(self) -> Counter:
        """Total HTTP requests counter."""
        ...

    @property
    def http_request_duration_seconds(self) -> Histogram:
        """HTTP request duration histogram."""
        ...

    @property
    def backend_calls_total(self) -> Counter:
        """Backend calls counter."""
        ...

    @property
    def backend_call_duration_seconds(self) -> Histogram:
        """Backend call duration histogram."""
        ...

    @property
    def api_errors_total(self) -> Counter:
        """API errors counter."""
        ...
