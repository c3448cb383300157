"""
Ingest Service - inbound automation syncs.

Two validate -> compute -> persist pipelines:
- Project sync: stores a new active project with synthetic scores
- Bid status: moves a proposal through draft/submitted/won/lost and
  folds won/lost outcomes into the user's analytics

Validation failures raise MissingFieldsError before anything is written.
Storage failures propagate to the caller.
"""
import logging
from datetime import datetime
from typing import Optional, List, Dict, Any

from app.domain.constants import ProjectStatus, ProposalStatus, OUTCOME_STATUSES
from app.domain.exceptions import MissingFieldsError, RecordNotFoundError
from app.services.metrics_service import MetricsService, get_metrics_service

logger = logging.getLogger(__name__)


PROJECT_REQUIRED_FIELDS = ["title", "platform"]
BID_STATUS_REQUIRED_FIELDS = ["proposal_id", "status"]


def _is_blank(value: Any) -> bool:
    """Falsy values (None, "", 0, False, [], {}) and whitespace-only strings."""
    if isinstance(value, str):
        return not value.strip()
    return not value


def require_fields(body: Dict[str, Any], fields: List[str]) -> None:
    """Raise MissingFieldsError naming every required field that is blank."""
    missing = [name for name in fields if _is_blank(body.get(name))]
    if missing:
        raise MissingFieldsError(missing)


def build_project_record(body: Dict[str, Any], metrics: Dict[str, Any]) -> Dict[str, Any]:
    """Project document with defaults applied to optional passthrough fields."""
    return {
        "title": body["title"],
        "description": body.get("description"),
        "platform": body["platform"],
        "budget_min": body.get("budget_min") or 0,
        "budget_max": body.get("budget_max") or 0,
        "skills_required": body.get("skills_required") or [],
        **metrics,
        "client_rating": body.get("client_rating") or None,
        "client_history": body.get("client_history") or None,
        "project_url": body.get("project_url") or None,
        "ai_insights": body.get("ai_insights") or {},
        "status": ProjectStatus.ACTIVE.value,
    }


class ProjectSyncService:
    """
    Creates project records from automation sync requests.

    Usage:
        service = ProjectSyncService()
        project = service.sync({"title": "...", "platform": "upwork"})
    """

    def __init__(self, project_repo=None, metrics_service: MetricsService = None):
        self.project_repo = project_repo
        self.metrics_service = metrics_service or get_metrics_service()

    def _get_repo(self):
        """Lazy load project repository."""
        if not self.project_repo:
            from app.infra.mongodb.repositories import get_project_repo
            self.project_repo = get_project_repo()
        return self.project_repo

    def sync(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate, score and store one project.

        Raises:
            MissingFieldsError: title or platform missing
        """
        require_fields(body, PROJECT_REQUIRED_FIELDS)

        metrics = self.metrics_service.compute_sync_metrics()
        record = build_project_record(body, metrics.to_dict())

        project = self._get_repo().create(record)
        logger.info(
            f"[ProjectSync] Created project {project.get('project_id')} "
            f"(nex_score={metrics.nex_score}, risk={metrics.risk_level})"
        )
        return project


class BidStatusService:
    """
    Applies bid status updates pushed by automation.

    Usage:
        service = BidStatusService()
        proposal = service.update({"proposal_id": "...", "status": "won", "user_id": "..."})
    """

    def __init__(self, proposal_repo=None, metrics_service: MetricsService = None):
        self.proposal_repo = proposal_repo
        self.metrics_service = metrics_service or get_metrics_service()

    def _get_repo(self):
        """Lazy load proposal repository."""
        if not self.proposal_repo:
            from app.infra.mongodb.repositories import get_proposal_repo
            self.proposal_repo = get_proposal_repo()
        return self.proposal_repo

    def update(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update a proposal's status and, for won/lost, the owner's analytics.

        Raises:
            MissingFieldsError: proposal_id or status missing
            RecordNotFoundError: no proposal with that id
        """
        require_fields(body, BID_STATUS_REQUIRED_FIELDS)

        proposal_id = str(body["proposal_id"])
        status = str(body["status"])
        user_id: Optional[str] = body.get("user_id") or None

        fields: Dict[str, Any] = {"status": status}
        if status == ProposalStatus.SUBMITTED.value:
            fields["submitted_at"] = datetime.utcnow()

        proposal = self._get_repo().update_status(proposal_id, fields)
        if proposal is None:
            raise RecordNotFoundError(f"Proposal not found: {proposal_id}")

        if user_id and status in OUTCOME_STATUSES:
            self.metrics_service.record_outcome(str(user_id), status)

        logger.info(f"[BidStatus] Proposal {proposal_id} -> {status}")
        return proposal


# Singleton instances
_project_sync_service: Optional[ProjectSyncService] = None
_bid_status_service: Optional[BidStatusService] = None


def get_project_sync_service() -> ProjectSyncService:
    """Get singleton ProjectSyncService instance."""
    global _project_sync_service
    if _project_sync_service is None:
        _project_sync_service = ProjectSyncService()
    return _project_sync_service


def get_bid_status_service() -> BidStatusService:
    """Get singleton BidStatusService instance."""
    global _bid_status_service
    if _bid_status_service is None:
        _bid_status_service = BidStatusService()
    return _bid_status_service
