"""
In-memory stand-ins for the MongoDB repositories.

They expose the same methods the services call and keep documents in
plain dicts so tests can inspect what was written.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional


class FakeProjectRepo:
    def __init__(self, fail_with: Exception = None):
        self.projects: List[Dict[str, Any]] = []
        self.fail_with = fail_with

    def create(self, record: Dict[str, Any]) -> Dict[str, Any]:
        if self.fail_with:
            raise self.fail_with
        document = {"project_id": f"proj_{len(self.projects) + 1}", **record, "created_at": datetime.utcnow()}
        self.projects.append(document)
        return dict(document)

    def list_active(self, limit: int = 100) -> List[Dict[str, Any]]:
        active = [p for p in reversed(self.projects) if p.get("status") == "active"]
        return [dict(p) for p in active[:limit]]

    def get_by_project_id(self, project_id: str) -> Optional[Dict[str, Any]]:
        return next((dict(p) for p in self.projects if p["project_id"] == project_id), None)


class FakeProposalRepo:
    def __init__(self, proposals: List[Dict[str, Any]] = None):
        self.proposals: Dict[str, Dict[str, Any]] = {p["proposal_id"]: dict(p) for p in proposals or []}

    def save_draft(self, user_id: str, content: str, tone: str = None) -> Dict[str, Any]:
        proposal_id = f"prop_{len(self.proposals) + 1}"
        self.proposals[proposal_id] = {
            "proposal_id": proposal_id,
            "user_id": user_id,
            "content": content,
            "tone": tone,
            "status": "draft",
            "submitted_at": None,
            "created_at": datetime.utcnow(),
        }
        return dict(self.proposals[proposal_id])

    def update_status(self, proposal_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if proposal_id not in self.proposals:
            return None
        self.proposals[proposal_id].update(fields)
        return dict(self.proposals[proposal_id])

    def list_for_user(self, user_id: str, limit: int = 50) -> List[Dict[str, Any]]:
        return [dict(p) for p in self.proposals.values() if p["user_id"] == user_id][:limit]


class FakeAnalyticsRepo:
    def __init__(self, records: List[Dict[str, Any]] = None):
        self.records: Dict[str, Dict[str, Any]] = {r["user_id"]: dict(r) for r in records or []}
        self.updates: List[Dict[str, Any]] = []

    def get_by_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        record = self.records.get(user_id)
        return dict(record) if record else None

    def update_counters(self, user_id: str, counters: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if user_id not in self.records:
            return None
        self.updates.append({"user_id": user_id, **counters})
        self.records[user_id].update(counters)
        return dict(self.records[user_id])


class FakeAgentRepo:
    def __init__(self):
        self.agents: List[Dict[str, Any]] = []

    def add(self, user_id: str, agent_name: str, webhook_url: str) -> Dict[str, Any]:
        agent = {
            "agent_id": f"agent_{len(self.agents) + 1}",
            "user_id": user_id,
            "agent_name": agent_name,
            "webhook_url": webhook_url,
            "is_active": False,
            "config": {},
        }
        self.agents.append(agent)
        return dict(agent)

    def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        return [dict(a) for a in reversed(self.agents) if a["user_id"] == user_id]

    def get_by_agent_id(self, agent_id: str) -> Optional[Dict[str, Any]]:
        return next((dict(a) for a in self.agents if a["agent_id"] == agent_id), None)

    def set_active(self, agent_id: str, is_active: bool) -> Optional[Dict[str, Any]]:
        for agent in self.agents:
            if agent["agent_id"] == agent_id:
                agent["is_active"] = is_active
                return dict(agent)
        return None

    def get_active(self, user_id: str) -> Optional[Dict[str, Any]]:
        active = [a for a in self.list_for_user(user_id) if a["is_active"]]
        return active[0] if active else None
