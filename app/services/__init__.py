"""
Application Services - Business Logic Layer

Services contain business logic extracted from route handlers,
coordinating repositories and external services.
"""

from app.services.metrics_service import MetricsService, get_metrics_service
from app.services.ingest_service import (
    ProjectSyncService,
    BidStatusService,
    get_project_sync_service,
    get_bid_status_service,
)
from app.services.automation_service import (
    AutomationClient,
    DashboardService,
    BidBoard,
    get_dashboard_service,
)
from app.services.catalog_service import ProjectCatalogService, get_catalog_service
from app.services.agent_service import AgentService, get_agent_service
from app.services.proposal_service import ProposalService, get_proposal_service

__all__ = [
    "MetricsService",
    "get_metrics_service",
    "ProjectSyncService",
    "BidStatusService",
    "get_project_sync_service",
    "get_bid_status_service",
    "AutomationClient",
    "DashboardService",
    "BidBoard",
    "get_dashboard_service",
    "ProjectCatalogService",
    "get_catalog_service",
    "AgentService",
    "get_agent_service",
    "ProposalService",
    "get_proposal_service",
]
