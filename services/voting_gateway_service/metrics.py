"""Metrics definitions for the Voting Gateway Service."""

from __future__ import annotations

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram


class GatewayMetrics:
    """A container for all Prometheus metrics for the Voting Gateway Service."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics with optional registry for test isolation."""
        if registry is None:
            registry = REGISTRY
        self.http_requests_total = Counter(
            "voting_gateway_http_requests_total",
            "Total number of HTTP requests for Voting Gateway Service.",
            ["method", "endpoint", "http_status"],
            registry=registry,
        )
        self.http_request_duration_seconds = Histogram(
            "voting_gateway_http_request_duration_seconds",
            "HTTP request duration in seconds for Voting Gateway Service.",
            ["method", "endpoint"],
            registry=registry,
        )
        self.backend_calls_total = Counter(
            "voting_gateway_backend_calls_total",
            "Total number of calls to the voting backend.",
            ["method", "endpoint", "status_code"],
            registry=registry,
        )
        self.backend_call_duration_seconds = Histogram(
            "voting_gateway_backend_call_duration_seconds",
            "Duration of calls to the voting backend in seconds.",
            ["method", "endpoint"],
            registry=registry,
        )
        self.api_errors_total = Counter(
            "voting_gateway_api_errors_total",
            "Total number of API errors.",
            ["endpoint", "error_type"],
            registry=registry,
        )
