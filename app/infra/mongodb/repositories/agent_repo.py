"""
Agent Config Repository

Per-user automation webhook registrations (the `agent_configs` collection).
At most one is expected to be active; the newest active one is used.
"""
import logging
import uuid
from typing import Optional, List, Dict, Any
from pymongo import DESCENDING

from app.infra.mongodb.base_repository import BaseRepository

logger = logging.getLogger(__name__)


class AgentConfigRepository(BaseRepository[Dict[str, Any]]):
    """Repository for automation webhook configurations."""

    collection_name = "agent_configs"

    def add(self, user_id: str, agent_name: str, webhook_url: str) -> Dict[str, Any]:
        """Register a webhook; new agents start inactive."""
        document = {
            "agent_id": f"agent_{uuid.uuid4().hex[:12]}",
            "user_id": user_id,
            "agent_name": agent_name,
            "webhook_url": webhook_url,
            "is_active": False,
            "config": {},
        }
        stored = self.insert_one(document)
        logger.info(f"Added agent {stored['agent_id']} for user {user_id}")
        return stored

    def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        """All agents of a user, newest first."""
        return self.find_many(
            {"user_id": user_id},
            limit=100,
            sort=[("created_at", DESCENDING)]
        )

    def get_by_agent_id(self, agent_id: str) -> Optional[Dict[str, Any]]:
        return self.find_one({"agent_id": agent_id})

    def set_active(self, agent_id: str, is_active: bool) -> Optional[Dict[str, Any]]:
        return self.update_and_return({"agent_id": agent_id}, {"is_active": is_active})

    def get_active(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Newest active agent for a user, or None."""
        results = self.find_many(
            {"user_id": user_id, "is_active": True},
            limit=1,
            sort=[("created_at", DESCENDING)]
        )
        return results[0] if results else None


# Singleton instance
_agent_repo: Optional[AgentConfigRepository] = None


def get_agent_repo() -> AgentConfigRepository:
    """Get singleton AgentConfigRepository instance."""
    global _agent_repo
    if _agent_repo is None:
        _agent_repo = AgentConfigRepository()
    return _agent_repo
