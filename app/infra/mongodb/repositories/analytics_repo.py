"""
Analytics Repository

One analytics document per user holding the win/loss counters shown on
the dashboard. Records are provisioned elsewhere; this repository only
reads and updates them.
"""
import logging
from typing import Optional, Dict, Any

from app.infra.mongodb.base_repository import BaseRepository

logger = logging.getLogger(__name__)


class AnalyticsRepository(BaseRepository[Dict[str, Any]]):
    """Repository for per-user bid analytics."""

    collection_name = "analytics"

    def get_by_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get the analytics record for a user, or None."""
        return self.find_one({"user_id": user_id})

    def update_counters(self, user_id: str, counters: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Overwrite counter fields for a user.

        Args:
            user_id: Owner of the record
            counters: total_wins / total_losses / win_ratio values

        Returns:
            Updated document or None if the user has no record
        """
        updated = self.update_and_return({"user_id": user_id}, counters)
        if updated:
            logger.info(f"Updated analytics for user {user_id}: {counters}")
        return updated


# Singleton instance
_analytics_repo: Optional[AnalyticsRepository] = None


def get_analytics_repo() -> AnalyticsRepository:
    """Get singleton AnalyticsRepository instance."""
    global _analytics_repo
    if _analytics_repo is None:
        _analytics_repo = AnalyticsRepository()
    return _analytics_repo
