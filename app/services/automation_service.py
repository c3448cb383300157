"""
Automation Service

Talks to the user's automation webhook (n8n or similar) and turns its
replies into dashboard state:
- generate_insights: company details in, insights + top bids out
- generate_proposal: one bid in, proposal text out (fetched lazily, once)

The webhook is called one request at a time with no retries. A timeout is
only applied when WEBHOOK_TIMEOUT_SECONDS is configured.
"""
import json
import logging
from typing import Optional, List, Dict, Any

import httpx
from pydantic import BaseModel

from app.config import settings
from app.domain.constants import AutomationAction
from app.domain.exceptions import AutomationError, MissingFieldsError, RecordNotFoundError
from app.models.automation import AutomationResult, NormalizedBid
from app.utils.payload_resolver import resolve_automation_response, resolve_proposal_text

logger = logging.getLogger(__name__)


COMPANY_REQUIRED_FIELDS = ["name", "focus"]


class AutomationUser(BaseModel):
    """Identity forwarded to the webhook with every action."""
    id: str
    email: Optional[str] = None


class CompanyDetails(BaseModel):
    name: str = ""
    website: str = ""
    focus: str = ""
    differentiator: str = ""


# ===================== HTTP CLIENT =====================

class AutomationClient:
    """Thin async JSON-over-HTTP client for automation webhooks."""

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport = None,
        timeout: Optional[float] = None
    ):
        self.transport = transport
        self.timeout = timeout if timeout is not None else settings.WEBHOOK_TIMEOUT_SECONDS

    async def post(
        self,
        webhook_url: str,
        payload: Dict[str, Any],
        source_label: str = "automation webhook"
    ) -> Any:
        """
        POST a JSON payload and decode the JSON reply.

        Returns:
            Decoded body ({} for an empty body)

        Raises:
            AutomationError: transport failure, non-2xx status or invalid JSON
        """
        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                response = await client.post(
                    webhook_url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
            except httpx.HTTPError as e:
                raise AutomationError(f"Failed to contact the {source_label}: {e}") from e

        if not response.is_success:
            raise AutomationError(f"Webhook responded with status {response.status_code}")

        raw_text = response.text
        if not raw_text.strip():
            return {}
        try:
            return json.loads(raw_text)
        except ValueError as e:
            raise AutomationError(f"Received invalid JSON from {source_label}.") from e


# ===================== SESSION STATE =====================

class BidBoard:
    """
    The bids surfaced by one generate_insights call.

    Bids are replaced wholesale on every successful call; a bid's proposal
    is filled in at most once.
    """

    def __init__(self, bids: List[NormalizedBid] = None):
        self._bids: List[NormalizedBid] = list(bids or [])

    @property
    def bids(self) -> List[NormalizedBid]:
        return list(self._bids)

    def get(self, bid_id: str) -> Optional[NormalizedBid]:
        return next((bid for bid in self._bids if bid.id == bid_id), None)

    def attach_proposal(self, bid_id: str, proposal: str) -> Optional[NormalizedBid]:
        """
        Set the proposal of the bid with this id unless it already has one.

        Returns:
            The bid as stored after the call, or None for an unknown id
        """
        for index, bid in enumerate(self._bids):
            if bid.id != bid_id:
                continue
            if not bid.proposal:
                self._bids[index] = bid.model_copy(update={"proposal": proposal})
            return self._bids[index]
        return None


# ===================== SERVICE =====================

class DashboardService:
    """
    Orchestrates webhook calls for the dashboard.

    The active agent config is passed in by the caller; None means the user
    has not connected an automation yet.

    Usage:
        service = DashboardService()
        agent = service.get_active_agent(user.id)
        result = await service.generate_insights(user, company, agent)
    """

    def __init__(self, agent_repo=None, client: AutomationClient = None):
        self.agent_repo = agent_repo
        self.client = client or AutomationClient()
        self._boards: Dict[str, BidBoard] = {}

    def _get_repo(self):
        """Lazy load agent config repository."""
        if not self.agent_repo:
            from app.infra.mongodb.repositories import get_agent_repo
            self.agent_repo = get_agent_repo()
        return self.agent_repo

    def get_active_agent(self, user_id: str) -> Optional[Dict[str, Any]]:
        return self._get_repo().get_active(user_id)

    def get_board(self, user_id: str) -> BidBoard:
        return self._boards.get(user_id) or BidBoard()

    @staticmethod
    def _require_webhook(agent: Optional[Dict[str, Any]]) -> str:
        webhook_url = (agent or {}).get("webhook_url")
        if not webhook_url:
            raise AutomationError("No active n8n webhook found. Connect your automation first.")
        return webhook_url

    async def generate_insights(
        self,
        user: AutomationUser,
        company: CompanyDetails,
        agent: Optional[Dict[str, Any]]
    ) -> AutomationResult:
        """
        Ask the webhook for insights and top bids for a company.

        Raises:
            MissingFieldsError: company name or focus missing
            AutomationError: no active agent or unusable webhook reply
        """
        missing = [name for name in COMPANY_REQUIRED_FIELDS if not getattr(company, name).strip()]
        if missing:
            raise MissingFieldsError(missing)

        webhook_url = self._require_webhook(agent)
        payload = {
            "action": AutomationAction.GENERATE_INSIGHTS.value,
            "company": company.model_dump(),
            "user": user.model_dump(),
        }

        logger.info(f"[Automation] Requesting insights for {company.name} (user {user.id})")
        reply = await self.client.post(webhook_url, payload, source_label="n8n webhook")
        result = resolve_automation_response(reply)

        self._boards[user.id] = BidBoard(result.bids)
        return result

    async def generate_proposal(
        self,
        user: AutomationUser,
        bid_id: str,
        agent: Optional[Dict[str, Any]],
        bid: NormalizedBid = None
    ) -> NormalizedBid:
        """
        Return the bid with its proposal, calling the webhook only if it has none.

        The bid is looked up on the user's board; an explicit ``bid`` is used
        when the board does not know the id.

        Raises:
            RecordNotFoundError: unknown bid id and no bid supplied
            AutomationError: no active agent, unusable reply or empty proposal
        """
        board = self._boards.get(user.id) or BidBoard()
        target = board.get(bid_id)
        if target is None and bid is not None:
            target = bid
        if target is None:
            raise RecordNotFoundError(f"Bid not found: {bid_id}")

        if target.proposal:
            return target

        webhook_url = self._require_webhook(agent)
        payload = {
            "action": AutomationAction.GENERATE_PROPOSAL.value,
            "bid": target.to_payload(),
            "user": user.model_dump(),
        }

        logger.info(f"[Automation] Requesting proposal for bid {bid_id} (user {user.id})")
        reply = await self.client.post(webhook_url, payload, source_label="proposal agent")
        proposal_text = resolve_proposal_text(reply)
        if not proposal_text:
            raise AutomationError("Proposal agent did not return any content.")

        return board.attach_proposal(bid_id, proposal_text) or target.model_copy(
            update={"proposal": proposal_text}
        )


# Singleton instance
_dashboard_service: Optional[DashboardService] = None


def get_dashboard_service() -> DashboardService:
    """Get singleton DashboardService instance."""
    global _dashboard_service
    if _dashboard_service is None:
        _dashboard_service = DashboardService()
    return _dashboard_service
