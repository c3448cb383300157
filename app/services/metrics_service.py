"""
Metrics Service

Derived metrics for the bid dashboard:
- Synthetic NexScore / win probability / risk level for synced projects
- Win ratio recomputation when a bid is won or lost

NexScore and win probability are placeholders drawn at random. Callers
only rely on the three fields and the risk bucketing, so a real scoring
model can replace ``compute_sync_metrics`` without touching them.
"""
import logging
import random
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

from app.config import settings
from app.domain.constants import (
    RISK_THRESHOLDS,
    RiskLevel,
    ProposalStatus,
    OUTCOME_STATUSES,
)

logger = logging.getLogger(__name__)


@dataclass
class SyncMetrics:
    """Scores attached to a newly synchronized project."""
    nex_score: int
    win_probability: int
    risk_level: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def risk_level_for(nex_score: int) -> RiskLevel:
    """Bucket a NexScore: >= 85 low, >= 70 medium, otherwise high."""
    for threshold, level in RISK_THRESHOLDS:
        if nex_score >= threshold:
            return level
    return RiskLevel.HIGH


def apply_outcome(analytics: Dict[str, Any], status: str) -> Dict[str, Any]:
    """
    Compute new counters for a won/lost bid.

    Exactly one of total_wins / total_losses moves. win_ratio is recomputed
    against the stored total_proposals, which this update does not change.

    Args:
        analytics: Current analytics record
        status: "won" or "lost"

    Returns:
        Dict with total_wins, total_losses and win_ratio
    """
    if status not in OUTCOME_STATUSES:
        raise ValueError(f"Invalid outcome: {status}. Must be one of {list(OUTCOME_STATUSES)}")

    wins = int(analytics.get("total_wins") or 0)
    losses = int(analytics.get("total_losses") or 0)
    total_proposals = int(analytics.get("total_proposals") or 0)

    if status == ProposalStatus.WON.value:
        wins += 1
    else:
        losses += 1

    win_ratio = wins / total_proposals * 100 if total_proposals > 0 else 0

    return {
        "total_wins": wins,
        "total_losses": losses,
        "win_ratio": win_ratio,
    }


class MetricsService:
    """
    Service computing and persisting derived bid metrics.

    Usage:
        service = MetricsService()
        metrics = service.compute_sync_metrics()
        service.record_outcome(user_id, "won")
    """

    def __init__(self, analytics_repo=None, rng: random.Random = None):
        """
        Initialize with dependencies.

        Args:
            analytics_repo: AnalyticsRepository instance
            rng: Random source (seed it in tests)
        """
        self.repo = analytics_repo
        self.rng = rng or random.Random()

    def _get_repo(self):
        """Lazy load analytics repository."""
        if not self.repo:
            from app.infra.mongodb.repositories import get_analytics_repo
            self.repo = get_analytics_repo()
        return self.repo

    def compute_sync_metrics(self) -> SyncMetrics:
        """Draw NexScore and win probability independently; bucket risk from NexScore."""
        nex_score = self.rng.randint(settings.NEX_SCORE_MIN, settings.NEX_SCORE_MAX)
        win_probability = self.rng.randint(settings.WIN_PROBABILITY_MIN, settings.WIN_PROBABILITY_MAX)
        return SyncMetrics(
            nex_score=nex_score,
            win_probability=win_probability,
            risk_level=risk_level_for(nex_score).value,
        )

    def record_outcome(self, user_id: str, status: str) -> Optional[Dict[str, Any]]:
        """
        Fold a won/lost bid into the user's analytics.

        The read-modify-write is not guarded against concurrent updates
        for the same user.

        Returns:
            Updated analytics record, or None when the user has no record
        """
        repo = self._get_repo()
        analytics = repo.get_by_user(user_id)
        if not analytics:
            logger.info(f"No analytics record for user {user_id}; skipping outcome update")
            return None

        counters = apply_outcome(analytics, status)
        return repo.update_counters(user_id, counters)

    def get_user_analytics(self, user_id: str) -> Dict[str, Any]:
        """Analytics counters for a user, zeros when no record exists."""
        analytics = self._get_repo().get_by_user(user_id) or {}
        return {
            "user_id": user_id,
            "total_wins": int(analytics.get("total_wins") or 0),
            "total_losses": int(analytics.get("total_losses") or 0),
            "total_proposals": int(analytics.get("total_proposals") or 0),
            "win_ratio": analytics.get("win_ratio") or 0,
        }


# Singleton instance
_metrics_service: Optional[MetricsService] = None


def get_metrics_service() -> MetricsService:
    """Get singleton MetricsService instance."""
    global _metrics_service
    if _metrics_service is None:
        _metrics_service = MetricsService()
    return _metrics_service
