"""
Shared fixtures: in-memory repositories and a TestClient wired to them.
"""
import random
import sys
from pathlib import Path

# Add project root to path to enable imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient

from fakes import FakeAgentRepo, FakeAnalyticsRepo, FakeProjectRepo, FakeProposalRepo


@pytest.fixture
def project_repo():
    return FakeProjectRepo()


@pytest.fixture
def proposal_repo():
    return FakeProposalRepo([
        {"proposal_id": "prop_1", "user_id": "user-1", "content": "Hello", "status": "draft", "submitted_at": None},
    ])


@pytest.fixture
def analytics_repo():
    return FakeAnalyticsRepo([
        {"user_id": "user-1", "total_wins": 8, "total_losses": 2, "total_proposals": 10, "win_ratio": 80},
    ])


@pytest.fixture
def agent_repo():
    return FakeAgentRepo()


@pytest.fixture
def metrics_service(analytics_repo):
    from app.services.metrics_service import MetricsService
    return MetricsService(analytics_repo=analytics_repo, rng=random.Random(42))


@pytest.fixture
def client(project_repo, proposal_repo, metrics_service, agent_repo):
    """TestClient with every service dependency bound to the fakes."""
    from main import app
    from app.services.ingest_service import (
        ProjectSyncService,
        BidStatusService,
        get_project_sync_service,
        get_bid_status_service,
    )
    from app.services.metrics_service import get_metrics_service
    from app.services.catalog_service import ProjectCatalogService, get_catalog_service
    from app.services.agent_service import AgentService, get_agent_service
    from app.services.proposal_service import ProposalService, get_proposal_service

    app.dependency_overrides[get_project_sync_service] = lambda: ProjectSyncService(project_repo, metrics_service)
    app.dependency_overrides[get_bid_status_service] = lambda: BidStatusService(proposal_repo, metrics_service)
    app.dependency_overrides[get_metrics_service] = lambda: metrics_service
    app.dependency_overrides[get_catalog_service] = lambda: ProjectCatalogService(project_repo)
    app.dependency_overrides[get_agent_service] = lambda: AgentService(agent_repo)
    app.dependency_overrides[get_proposal_service] = lambda: ProposalService(proposal_repo)

    yield TestClient(app)

    app.dependency_overrides.clear()
