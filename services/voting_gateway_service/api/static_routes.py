"""Entry page route for Voting Gateway Service."""

from __future__ import annotations

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter
from fastapi.responses import FileResponse, JSONResponse

from services.voting_gateway_service.config import VotingGatewaySettings
from services.voting_gateway_service.logging_utils import create_service_logger

router = APIRouter()
logger = create_service_logger("voting_gateway.static_routes")


@router.get("/", include_in_schema=False, response_model=None)
@inject
async def serve_index(config: FromDishka[VotingGatewaySettings]) -> FileResponse | JSONResponse:
    """Serve the voting UI entry page."""
    index_path = config.STATIC_DIR / "index.html"
    if index_path.exists():
        return FileResponse(index_path, media_type="text/html")
    logger.warning("Entry page not found", static_dir=str(config.STATIC_DIR))
    return JSONResponse(status_code=404, content={"error": "Entry page not found"})
