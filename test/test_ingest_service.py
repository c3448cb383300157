"""
Tests for the project-sync and bid-status ingest pipelines.
"""
import random

import pytest

from app.domain.exceptions import MissingFieldsError, RecordNotFoundError
from app.services.ingest_service import BidStatusService, ProjectSyncService
from app.services.metrics_service import MetricsService
from fakes import FakeAnalyticsRepo, FakeProjectRepo, FakeProposalRepo


def _metrics(analytics_repo=None):
    return MetricsService(analytics_repo=analytics_repo or FakeAnalyticsRepo(), rng=random.Random(11))


def test_sync_requires_title_and_platform():
    repo = FakeProjectRepo()
    service = ProjectSyncService(repo, _metrics())

    with pytest.raises(MissingFieldsError) as exc:
        service.sync({"title": "Chatbot", "platform": "  "})

    assert exc.value.missing_fields == ["platform"]
    assert "platform" in str(exc.value)
    assert repo.projects == [], "Nothing may be stored when validation fails"

    with pytest.raises(MissingFieldsError) as exc:
        service.sync({})
    assert exc.value.missing_fields == ["title", "platform"]


def test_sync_treats_falsy_values_as_missing():
    repo = FakeProjectRepo()
    service = ProjectSyncService(repo, _metrics())

    with pytest.raises(MissingFieldsError) as exc:
        service.sync({"title": False, "platform": []})

    assert exc.value.missing_fields == ["title", "platform"]
    assert repo.projects == []


def test_sync_applies_defaults_and_metrics():
    repo = FakeProjectRepo()
    project = ProjectSyncService(repo, _metrics()).sync({"title": "Chatbot", "platform": "upwork"})

    assert project["status"] == "active"
    assert project["budget_min"] == 0 and project["budget_max"] == 0
    assert project["skills_required"] == []
    assert project["ai_insights"] == {}
    assert project["client_rating"] is None
    assert project["project_url"] is None
    assert 70 <= project["nex_score"] <= 100
    assert 60 <= project["win_probability"] <= 100
    assert project["risk_level"] in ("low", "medium")
    assert len(repo.projects) == 1


def test_sync_passes_optional_fields_through():
    body = {
        "title": "Data pipeline",
        "platform": "fiverr",
        "description": "ETL work",
        "budget_min": 500,
        "budget_max": 900,
        "skills_required": ["Python", "SQL"],
        "client_rating": 4.8,
        "client_history": "12 hires",
        "project_url": "https://fiverr.com/x",
        "ai_insights": {"fit": "strong"},
    }
    project = ProjectSyncService(FakeProjectRepo(), _metrics()).sync(body)

    for key, value in body.items():
        assert project[key] == value


def test_bid_status_requires_fields():
    service = BidStatusService(FakeProposalRepo(), _metrics())
    with pytest.raises(MissingFieldsError) as exc:
        service.update({"status": "won"})
    assert exc.value.missing_fields == ["proposal_id"]


def test_submitted_status_stamps_submission_time():
    repo = FakeProposalRepo([{"proposal_id": "p1", "user_id": "u1", "status": "draft", "submitted_at": None}])
    proposal = BidStatusService(repo, _metrics()).update({"proposal_id": "p1", "status": "submitted"})

    assert proposal["status"] == "submitted"
    assert proposal["submitted_at"] is not None


def test_other_statuses_leave_submission_time_alone():
    repo = FakeProposalRepo([{"proposal_id": "p1", "user_id": "u1", "status": "submitted", "submitted_at": "earlier"}])
    proposal = BidStatusService(repo, _metrics()).update({"proposal_id": "p1", "status": "won"})

    assert proposal["status"] == "won"
    assert proposal["submitted_at"] == "earlier"


def test_won_with_user_updates_analytics():
    analytics = FakeAnalyticsRepo([{"user_id": "u1", "total_wins": 8, "total_losses": 2, "total_proposals": 10}])
    repo = FakeProposalRepo([{"proposal_id": "p1", "user_id": "u1", "status": "submitted"}])

    BidStatusService(repo, _metrics(analytics)).update({"proposal_id": "p1", "status": "won", "user_id": "u1"})

    assert analytics.updates == [{"user_id": "u1", "total_wins": 9, "total_losses": 2, "win_ratio": pytest.approx(90)}]


def test_outcome_without_user_skips_analytics():
    analytics = FakeAnalyticsRepo([{"user_id": "u1", "total_wins": 1, "total_losses": 0, "total_proposals": 2}])
    repo = FakeProposalRepo([{"proposal_id": "p1", "user_id": "u1", "status": "submitted"}])

    BidStatusService(repo, _metrics(analytics)).update({"proposal_id": "p1", "status": "lost"})

    assert analytics.updates == []


def test_unknown_proposal_raises():
    service = BidStatusService(FakeProposalRepo(), _metrics())
    with pytest.raises(RecordNotFoundError):
        service.update({"proposal_id": "missing", "status": "won", "user_id": "u1"})
