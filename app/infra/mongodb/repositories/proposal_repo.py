"""
Proposal Repository

Handles the proposals collection: saved drafts and their bid status
(draft -> submitted -> won / lost).
"""
import logging
import uuid
from typing import Optional, List, Dict, Any
from pymongo import DESCENDING

from app.domain.constants import ProposalStatus
from app.infra.mongodb.base_repository import BaseRepository

logger = logging.getLogger(__name__)


class ProposalRepository(BaseRepository[Dict[str, Any]]):
    """Repository for user proposals with status tracking."""

    collection_name = "proposals"

    def save_draft(self, user_id: str, content: str, tone: str = None) -> Dict[str, Any]:
        """
        Save a proposal as a draft.

        Args:
            user_id: Owner of the proposal
            content: Proposal text
            tone: Optional tone label chosen when writing it

        Returns:
            Stored document with proposal_id
        """
        document = {
            "proposal_id": f"prop_{uuid.uuid4().hex[:12]}",
            "user_id": user_id,
            "content": content,
            "tone": tone,
            "status": ProposalStatus.DRAFT.value,
            "submitted_at": None,
        }
        stored = self.insert_one(document)
        logger.info(f"Saved draft proposal {stored['proposal_id']} for user {user_id}")
        return stored

    def update_status(self, proposal_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Apply a status change.

        Args:
            proposal_id: Proposal to update
            fields: status and, when applicable, submitted_at

        Returns:
            Updated document or None if the proposal does not exist
        """
        updated = self.update_and_return({"proposal_id": proposal_id}, fields)
        if updated:
            logger.info(f"Updated proposal {proposal_id} status to: {fields.get('status')}")
        return updated

    def get_by_proposal_id(self, proposal_id: str) -> Optional[Dict[str, Any]]:
        return self.find_one({"proposal_id": proposal_id})

    def list_for_user(self, user_id: str, limit: int = 50) -> List[Dict[str, Any]]:
        """A user's proposals, newest first."""
        return self.find_many(
            {"user_id": user_id},
            limit=limit,
            sort=[("created_at", DESCENDING)]
        )


# Singleton instance
_proposal_repo: Optional[ProposalRepository] = None


def get_proposal_repo() -> ProposalRepository:
    """Get singleton ProposalRepository instance."""
    global _proposal_repo
    if _proposal_repo is None:
        _proposal_repo = ProposalRepository()
    return _proposal_repo
