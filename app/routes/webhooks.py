"""
Inbound Automation Webhook Routes

Endpoints called by external automation (n8n, Zapier, scripts):
- POST /api/webhooks/project-sync - Store a discovered project with scores
- POST /api/webhooks/bid-status   - Update a proposal's bid status

Both answer a bare OPTIONS probe with an empty 200 and permissive CORS
headers. Every failure is returned as {"error": message}; nothing escapes
as an unhandled exception.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from app.domain.exceptions import InvalidRequestError, RecordNotFoundError
from app.services.ingest_service import (
    ProjectSyncService,
    BidStatusService,
    get_project_sync_service,
    get_bid_status_service,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/webhooks", tags=["webhooks"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


# ===================== HELPERS =====================

def _json(status_code: int, content: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content), headers=CORS_HEADERS)


def _preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


async def _read_body(request: Request) -> Dict[str, Any]:
    """Decode the JSON body; anything but an object is a client error."""
    try:
        body = await request.json()
    except ValueError as e:
        raise InvalidRequestError("Request body must be valid JSON") from e
    if not isinstance(body, dict):
        raise InvalidRequestError("Request body must be a JSON object")
    return body


# ===================== ENDPOINTS =====================

@router.options("/project-sync")
async def project_sync_preflight():
    return _preflight()


@router.post("/project-sync")
async def project_sync(
    request: Request,
    service: ProjectSyncService = Depends(get_project_sync_service)
):
    """
    Synchronize a project discovered by automation.

    Required: title, platform. Optional: description, budget_min, budget_max,
    skills_required, client_rating, client_history, project_url, ai_insights.
    The stored project gets a NexScore, win probability and risk level.
    """
    try:
        body = await _read_body(request)
        logger.info(f"Received project sync: {body}")

        project = service.sync(body)
        return _json(200, {
            "success": True,
            "project": project,
            "message": "Project synchronized successfully",
        })

    except InvalidRequestError as e:
        logger.warning(f"Project sync rejected: {e}")
        return _json(400, {"error": str(e)})
    except Exception as e:
        logger.error(f"Project sync error: {e}")
        return _json(500, {"error": str(e) or "Unknown error occurred"})


@router.options("/bid-status")
async def bid_status_preflight():
    return _preflight()


@router.post("/bid-status")
async def bid_status(
    request: Request,
    service: BidStatusService = Depends(get_bid_status_service)
):
    """
    Update the status of a stored proposal.

    Required: proposal_id, status. Optional: user_id; with status won/lost
    the user's win/loss counters and win ratio are updated.
    """
    try:
        body = await _read_body(request)
        logger.info(f"Received bid status update: {body}")

        proposal = service.update(body)
        return _json(200, {
            "success": True,
            "proposal": proposal,
            "message": "Bid status updated successfully",
        })

    except InvalidRequestError as e:
        logger.warning(f"Bid status update rejected: {e}")
        return _json(400, {"error": str(e)})
    except RecordNotFoundError as e:
        logger.warning(f"Bid status update for unknown proposal: {e}")
        return _json(404, {"error": str(e)})
    except Exception as e:
        logger.error(f"Bid status update error: {e}")
        return _json(500, {"error": str(e) or "Unknown error occurred"})
