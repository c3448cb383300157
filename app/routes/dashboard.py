"""
Dashboard Automation Routes

Forwards company and bid details to the user's active automation webhook
and returns normalized results.

Endpoints:
- POST /api/dashboard/insights - Insights + top bids for a company
- POST /api/dashboard/proposal - Proposal for one bid (fetched once)
- GET  /api/dashboard/bids     - Bids from the latest insights call
"""
import logging
from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional, List
from pydantic import BaseModel, Field

from app.middleware.auth import verify_api_key
from app.domain.exceptions import AutomationError, InvalidRequestError, RecordNotFoundError
from app.models.automation import AutomationResult, NormalizedBid
from app.services.automation_service import (
    AutomationUser,
    CompanyDetails,
    DashboardService,
    get_dashboard_service,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


# ===================== REQUEST/RESPONSE MODELS =====================

class InsightsRequest(BaseModel):
    """Company details forwarded to the automation webhook"""
    user: AutomationUser
    company: CompanyDetails


class InsightsResponse(BaseModel):
    success: bool
    result: AutomationResult


class ProposalRequest(BaseModel):
    """Request a proposal for one bid"""
    user: AutomationUser
    bid_id: str = Field(..., min_length=1)
    bid: Optional[NormalizedBid] = Field(None, description="Used when the bid is not on the user's board")


class ProposalResponse(BaseModel):
    success: bool
    bid: NormalizedBid


class BidsResponse(BaseModel):
    success: bool
    bids: List[NormalizedBid]


# ===================== ENDPOINTS =====================

@router.post("/insights", response_model=InsightsResponse)
async def generate_insights(
    request: InsightsRequest,
    service: DashboardService = Depends(get_dashboard_service),
    _: dict = Depends(verify_api_key)
):
    """
    Send company details to the active webhook (action generate_insights).

    The reply may use many field names; it is normalized into a summary,
    highlights, metrics and a list of bids.
    """
    try:
        agent = service.get_active_agent(request.user.id)
        result = await service.generate_insights(request.user, request.company, agent)
        return InsightsResponse(success=True, result=result)

    except InvalidRequestError as e:
        raise HTTPException(400, str(e))
    except AutomationError as e:
        logger.error(f"Error fetching automation insights: {e}")
        raise HTTPException(502, str(e))
    except Exception as e:
        logger.error(f"Insights error: {e}")
        raise HTTPException(500, str(e))


@router.post("/proposal", response_model=ProposalResponse)
async def generate_proposal(
    request: ProposalRequest,
    service: DashboardService = Depends(get_dashboard_service),
    _: dict = Depends(verify_api_key)
):
    """
    Return a bid with its proposal, asking the webhook (action
    generate_proposal) only when the bid has none yet.
    """
    try:
        agent = service.get_active_agent(request.user.id)
        bid = await service.generate_proposal(request.user, request.bid_id, agent, bid=request.bid)
        return ProposalResponse(success=True, bid=bid)

    except RecordNotFoundError as e:
        raise HTTPException(404, str(e))
    except AutomationError as e:
        logger.error(f"Error generating proposal: {e}")
        raise HTTPException(502, str(e))
    except Exception as e:
        logger.error(f"Proposal error: {e}")
        raise HTTPException(500, str(e))


@router.get("/bids", response_model=BidsResponse)
async def get_bids(
    user_id: str = Query(..., min_length=1),
    service: DashboardService = Depends(get_dashboard_service),
    _: dict = Depends(verify_api_key)
):
    """Bids from the user's most recent insights call."""
    return BidsResponse(success=True, bids=service.get_board(user_id).bids)
