"""Error types and FastAPI error handlers for Voting Gateway Service.

Clients only ever see ``{"error": "<message>"}`` with a fixed per-route
message. The underlying cause is kept on the exception for logging.
"""

from __future__ import annotations

from typing import NoReturn
from uuid import UUID

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from services.voting_gateway_service.logging_utils import create_service_logger

logger = create_service_logger("voting_gateway.errors")


class BackendUnavailableError(Exception):
    """The outbound call to the voting backend did not complete."""

    def __init__(self, operation: str, cause: BaseException) -> None:
        super().__init__(f"{operation}: {type(cause).__name__}: {cause}")
        self.operation = operation
        self.cause = cause


class GatewayError(Exception):
    """Client-facing failure carrying only a static, safe message."""

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        correlation_id: UUID | None = None,
        status_code: int = 500,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.correlation_id = correlation_id
        self.status_code = status_code


def raise_gateway_error(
    message: str,
    *,
    operation: str,
    correlation_id: UUID | None = None,
    cause: BaseException | None = None,
) -> NoReturn:
    """Raise a GatewayError chained to the original failure."""
    raise GatewayError(
        message, operation=operation, correlation_id=correlation_id
    ) from cause


async def _handle_gateway_error(request: Request, exc: GatewayError) -> JSONResponse:
    logger.warning(
        "Returning gateway error",
        operation=exc.operation,
        path=request.url.path,
        status_code=exc.status_code,
        correlation_id=str(exc.correlation_id) if exc.correlation_id else None,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    """Register gateway exception handlers on the FastAPI app."""
    app.add_exception_handler(GatewayError, _handle_gateway_error)
