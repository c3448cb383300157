"""
MongoDB Repositories - Domain-specific data access.

Repository Pattern Implementation:
- ProjectRepository - Synchronized project opportunities
- ProposalRepository - Proposal drafts and bid status
- AnalyticsRepository - Per-user win/loss counters
- AgentConfigRepository - Automation webhook registrations
"""

from app.infra.mongodb.repositories.project_repo import (
    ProjectRepository,
    get_project_repo,
)

from app.infra.mongodb.repositories.proposal_repo import (
    ProposalRepository,
    get_proposal_repo,
)

from app.infra.mongodb.repositories.analytics_repo import (
    AnalyticsRepository,
    get_analytics_repo,
)

from app.infra.mongodb.repositories.agent_repo import (
    AgentConfigRepository,
    get_agent_repo,
)

__all__ = [
    "ProjectRepository",
    "get_project_repo",
    "ProposalRepository",
    "get_proposal_repo",
    "AnalyticsRepository",
    "get_analytics_repo",
    "AgentConfigRepository",
    "get_agent_repo",
]
