"""
Analytics Routes

Per-user win/loss counters maintained by bid-status webhooks.
"""
import logging
from fastapi import APIRouter, HTTPException, Depends

from pydantic import BaseModel

from app.middleware.auth import verify_api_key
from app.services.metrics_service import MetricsService, get_metrics_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/analytics", tags=["analytics"])


class UserAnalyticsResponse(BaseModel):
    """Win/loss counters for one user"""
    success: bool
    user_id: str
    total_wins: int
    total_losses: int
    total_proposals: int
    win_ratio: float


@router.get("/{user_id}", response_model=UserAnalyticsResponse)
async def get_user_analytics(
    user_id: str,
    service: MetricsService = Depends(get_metrics_service),
    _: dict = Depends(verify_api_key)
):
    """Counters for a user; zeros when no analytics record exists yet."""
    try:
        stats = service.get_user_analytics(user_id)
        return UserAnalyticsResponse(success=True, **stats)
    except Exception as e:
        logger.error(f"Error getting analytics for {user_id}: {e}")
        raise HTTPException(500, str(e))
