"""
Proposal Service

Saving proposal drafts so automation can later report their bid status.
"""
import logging
from typing import Optional, List, Dict, Any

from app.domain.exceptions import MissingFieldsError

logger = logging.getLogger(__name__)


class ProposalService:
    """Draft storage for user proposals."""

    def __init__(self, proposal_repo=None):
        self.proposal_repo = proposal_repo

    def _get_repo(self):
        """Lazy load proposal repository."""
        if not self.proposal_repo:
            from app.infra.mongodb.repositories import get_proposal_repo
            self.proposal_repo = get_proposal_repo()
        return self.proposal_repo

    def save_draft(self, user_id: str, content: str, tone: Optional[str] = None) -> Dict[str, Any]:
        """
        Store proposal text as a draft.

        Raises:
            MissingFieldsError: user_id or content is empty
        """
        missing = [
            name for name, value in (("user_id", user_id), ("content", content))
            if not value or not value.strip()
        ]
        if missing:
            raise MissingFieldsError(missing)
        return self._get_repo().save_draft(user_id, content, tone)

    def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        return self._get_repo().list_for_user(user_id)


# Singleton instance
_proposal_service: Optional[ProposalService] = None


def get_proposal_service() -> ProposalService:
    """Get singleton ProposalService instance."""
    global _proposal_service
    if _proposal_service is None:
        _proposal_service = ProposalService()
    return _proposal_service
