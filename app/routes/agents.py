"""
Agent Config Routes

Connect and activate automation webhooks.

Endpoints:
- GET  /api/agents                    - List a user's agents
- POST /api/agents                    - Register a webhook (inactive)
- POST /api/agents/{agent_id}/toggle  - Activate / deactivate
"""
import logging
from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Dict, Any
from pydantic import BaseModel, Field

from app.middleware.auth import verify_api_key
from app.domain.exceptions import InvalidRequestError, RecordNotFoundError
from app.services.agent_service import AgentService, get_agent_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/agents", tags=["agents"])


class AddAgentRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    webhook_url: str = Field(..., description="Automation webhook URL, e.g. an n8n webhook")


@router.get("", response_model=Dict[str, Any])
async def list_agents(
    user_id: str = Query(..., min_length=1),
    service: AgentService = Depends(get_agent_service),
    _: dict = Depends(verify_api_key)
):
    try:
        return {"success": True, "agents": service.list_agents(user_id)}
    except Exception as e:
        logger.error(f"Error fetching agents: {e}")
        raise HTTPException(500, str(e))


@router.post("", response_model=Dict[str, Any], status_code=201)
async def add_agent(
    request: AddAgentRequest,
    service: AgentService = Depends(get_agent_service),
    _: dict = Depends(verify_api_key)
):
    """Register a webhook. It stays inactive until toggled on."""
    try:
        agent = service.add_agent(request.user_id, request.webhook_url)
        return {"success": True, "agent": agent, "message": "Webhook added successfully"}
    except InvalidRequestError as e:
        raise HTTPException(400, str(e))
    except Exception as e:
        logger.error(f"Error adding webhook: {e}")
        raise HTTPException(500, str(e))


@router.post("/{agent_id}/toggle", response_model=Dict[str, Any])
async def toggle_agent(
    agent_id: str,
    service: AgentService = Depends(get_agent_service),
    _: dict = Depends(verify_api_key)
):
    try:
        agent = service.toggle_agent(agent_id)
        message = "Agent activated" if agent.get("is_active") else "Agent deactivated"
        return {"success": True, "agent": agent, "message": message}
    except RecordNotFoundError as e:
        raise HTTPException(404, str(e))
    except Exception as e:
        logger.error(f"Error toggling agent: {e}")
        raise HTTPException(500, str(e))
