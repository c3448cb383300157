"""
Project Browsing Routes

Endpoints:
- GET /api/projects              - Active projects (optional ?search=)
- GET /api/projects/{project_id} - One project
"""
import logging
from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional, Dict, Any

from app.middleware.auth import verify_api_key
from app.services.catalog_service import ProjectCatalogService, get_catalog_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=Dict[str, Any])
async def list_projects(
    search: Optional[str] = Query(None, description="Matches title, description or skills"),
    service: ProjectCatalogService = Depends(get_catalog_service),
    _: dict = Depends(verify_api_key)
):
    try:
        projects = service.list_active_projects(search)
        return {"success": True, "total": len(projects), "projects": projects}
    except Exception as e:
        logger.error(f"Error fetching projects: {e}")
        raise HTTPException(500, str(e))


@router.get("/{project_id}", response_model=Dict[str, Any])
async def get_project(
    project_id: str,
    service: ProjectCatalogService = Depends(get_catalog_service),
    _: dict = Depends(verify_api_key)
):
    try:
        project = service.get_project(project_id)
    except Exception as e:
        logger.error(f"Error fetching project {project_id}: {e}")
        raise HTTPException(500, str(e))

    if not project:
        raise HTTPException(404, "Project not found")
    return {"success": True, "project": project}
