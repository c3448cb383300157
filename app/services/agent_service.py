"""
Agent Service

Management of the automation webhooks a user has connected.
"""
import logging
from typing import Optional, List, Dict, Any

from app.config import settings
from app.domain.exceptions import MissingFieldsError, RecordNotFoundError

logger = logging.getLogger(__name__)


class AgentService:
    """Add, list and toggle agent configs."""

    def __init__(self, agent_repo=None):
        self.agent_repo = agent_repo

    def _get_repo(self):
        """Lazy load agent config repository."""
        if not self.agent_repo:
            from app.infra.mongodb.repositories import get_agent_repo
            self.agent_repo = get_agent_repo()
        return self.agent_repo

    def add_agent(self, user_id: str, webhook_url: str) -> Dict[str, Any]:
        """
        Register a webhook for a user. New agents start inactive.

        Raises:
            MissingFieldsError: webhook_url is empty
        """
        if not webhook_url or not webhook_url.strip():
            raise MissingFieldsError(["webhook_url"])
        return self._get_repo().add(user_id, settings.DEFAULT_AGENT_NAME, webhook_url.strip())

    def list_agents(self, user_id: str) -> List[Dict[str, Any]]:
        return self._get_repo().list_for_user(user_id)

    def toggle_agent(self, agent_id: str) -> Dict[str, Any]:
        """
        Flip an agent between active and inactive.

        Raises:
            RecordNotFoundError: unknown agent id
        """
        repo = self._get_repo()
        agent = repo.get_by_agent_id(agent_id)
        if not agent:
            raise RecordNotFoundError(f"Agent not found: {agent_id}")

        updated = repo.set_active(agent_id, not agent.get("is_active", False))
        logger.info(f"Agent {agent_id} is_active -> {updated.get('is_active')}")
        return updated


# Singleton instance
_agent_service: Optional[AgentService] = None


def get_agent_service() -> AgentService:
    """Get singleton AgentService instance."""
    global _agent_service
    if _agent_service is None:
        _agent_service = AgentService()
    return _agent_service
