"""
Project Catalog Service

Browsing for synchronized project opportunities. Falls back to the
bundled sample projects while nothing has been synchronized.
"""
import logging
from copy import deepcopy
from typing import Optional, List, Dict, Any

from app.domain.sample_projects import SAMPLE_PROJECTS

logger = logging.getLogger(__name__)


def matches_search(project: Dict[str, Any], query: str) -> bool:
    """Case-insensitive match on title, description or any skill."""
    needle = query.lower()
    if needle in str(project.get("title") or "").lower():
        return True
    if needle in str(project.get("description") or "").lower():
        return True
    return any(needle in str(skill).lower() for skill in project.get("skills_required") or [])


class ProjectCatalogService:
    """Read-side access to projects."""

    def __init__(self, project_repo=None):
        self.project_repo = project_repo

    def _get_repo(self):
        """Lazy load project repository."""
        if not self.project_repo:
            from app.infra.mongodb.repositories import get_project_repo
            self.project_repo = get_project_repo()
        return self.project_repo

    def list_active_projects(self, search: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Active projects newest first, or the samples when none are stored.

        Args:
            search: Optional free-text filter
        """
        projects = self._get_repo().list_active()
        if not projects:
            logger.info("No synchronized projects yet; serving sample projects")
            projects = deepcopy(SAMPLE_PROJECTS)

        if search and search.strip():
            projects = [p for p in projects if matches_search(p, search.strip())]
        return projects

    def get_project(self, project_id: str) -> Optional[Dict[str, Any]]:
        """Stored project first, then the samples."""
        project = self._get_repo().get_by_project_id(project_id)
        if project:
            return project
        sample = next((p for p in SAMPLE_PROJECTS if p["project_id"] == project_id), None)
        return deepcopy(sample) if sample else None


# Singleton instance
_catalog_service: Optional[ProjectCatalogService] = None


def get_catalog_service() -> ProjectCatalogService:
    """Get singleton ProjectCatalogService instance."""
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = ProjectCatalogService()
    return _catalog_service
