"""
Proposal Draft Routes

Drafts saved here get a proposal_id that automation later reports bid
status against (see /api/webhooks/bid-status).

Endpoints:
- POST /api/proposals/drafts - Save a draft
- GET  /api/proposals        - A user's proposals
"""
import logging
from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field

from app.middleware.auth import verify_api_key
from app.domain.exceptions import InvalidRequestError
from app.services.proposal_service import ProposalService, get_proposal_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/proposals", tags=["proposals"])


class SaveDraftRequest(BaseModel):
    """Proposal text to keep as a draft"""
    user_id: str = Field(..., description="Owner of the proposal")
    content: str = Field(..., description="Proposal text")
    tone: Optional[str] = Field(None, description="Tone used, e.g. professional, friendly")


@router.post("/drafts", response_model=Dict[str, Any], status_code=201)
async def save_draft(
    request: SaveDraftRequest,
    service: ProposalService = Depends(get_proposal_service),
    _: dict = Depends(verify_api_key)
):
    try:
        proposal = service.save_draft(request.user_id, request.content, request.tone)
        return {"success": True, "proposal": proposal, "message": "Proposal saved to drafts"}
    except InvalidRequestError as e:
        raise HTTPException(400, str(e))
    except Exception as e:
        logger.error(f"Error saving proposal: {e}")
        raise HTTPException(500, str(e))


@router.get("", response_model=Dict[str, Any])
async def list_proposals(
    user_id: str = Query(..., min_length=1),
    service: ProposalService = Depends(get_proposal_service),
    _: dict = Depends(verify_api_key)
):
    try:
        return {"success": True, "proposals": service.list_for_user(user_id)}
    except Exception as e:
        logger.error(f"Error fetching proposals: {e}")
        raise HTTPException(500, str(e))
