"""
Project Repository

Stores synchronized project opportunities (the `projects` collection).
"""
import logging
import uuid
from typing import Optional, List, Dict, Any
from pymongo import DESCENDING

from app.domain.constants import ProjectStatus
from app.infra.mongodb.base_repository import BaseRepository

logger = logging.getLogger(__name__)


class ProjectRepository(BaseRepository[Dict[str, Any]]):
    """Repository for projects pushed in by automation syncs."""

    collection_name = "projects"

    def create(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """
        Persist a new project record.

        Args:
            record: Fully populated project fields (metrics included)

        Returns:
            Stored document with project_id, _id and created_at
        """
        document = {"project_id": f"proj_{uuid.uuid4().hex[:12]}", **record}
        stored = self.insert_one(document)
        logger.info(f"Created project {stored['project_id']}: {stored.get('title')}")
        return stored

    def list_active(self, limit: int = 100) -> List[Dict[str, Any]]:
        """Active projects, newest first."""
        return self.find_many(
            {"status": ProjectStatus.ACTIVE.value},
            limit=limit,
            sort=[("created_at", DESCENDING)]
        )

    def get_by_project_id(self, project_id: str) -> Optional[Dict[str, Any]]:
        return self.find_one({"project_id": project_id})


# Singleton instance
_project_repo: Optional[ProjectRepository] = None


def get_project_repo() -> ProjectRepository:
    """Get singleton ProjectRepository instance."""
    global _project_repo
    if _project_repo is None:
        _project_repo = ProjectRepository()
    return _project_repo
