"""
Routes package - exports all API routers
"""
from app.routes.webhooks import router as webhooks_router
from app.routes.dashboard import router as dashboard_router
from app.routes.agents import router as agents_router
from app.routes.projects import router as projects_router
from app.routes.proposals import router as proposals_router
from app.routes.analytics import router as analytics_router

__all__ = [
    "webhooks_router",
    "dashboard_router",
    "agents_router",
    "projects_router",
    "proposals_router",
    "analytics_router",
]
