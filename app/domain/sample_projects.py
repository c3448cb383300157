"""
Sample opportunities shown when no synchronized projects exist yet.
"""

from typing import Any, Dict, List


SAMPLE_PROJECTS: List[Dict[str, Any]] = [
    {
        "project_id": "sample-1",
        "title": "AI-Powered Proposal Analyzer",
        "description": "Build a Next.js tool that scores freelance proposals with NLP and "
                       "sentiment analysis to surface risks and opportunities.",
        "platform": "upwork",
        "budget_min": 1200,
        "budget_max": 1800,
        "skills_required": ["Next.js", "TypeScript", "OpenAI", "Tailwind CSS"],
        "nex_score": 88,
        "win_probability": 74,
        "risk_level": "low",
        "project_url": "https://www.upwork.com/jobs/~example1",
        "posted_at": "2025-11-28T10:00:00Z",
        "client_location": "San Francisco, USA",
        "client_history": "38 jobs posted, 95% hire rate, $120k total spend",
        "deliverables": [
            "Proposal intelligence dashboard",
            "Sentiment analysis pipeline",
            "Risk and opportunity scoring",
        ],
        "requirements": [
            "Experience with OpenAI or similar LLMs",
            "Knowledge of freelance marketplaces",
        ],
        "status": "active",
    },
    {
        "project_id": "sample-2",
        "title": "Realtime Bid Automation Agent",
        "description": "Create an agent that watches Freelancer.com listings and drafts "
                       "personalized bids from predefined playbooks.",
        "platform": "freelancer",
        "budget_min": 900,
        "budget_max": 1500,
        "skills_required": ["Python", "LangChain", "Automation"],
        "nex_score": 82,
        "win_probability": 68,
        "risk_level": "medium",
        "project_url": "https://www.freelancer.com/projects/example2",
        "posted_at": "2025-11-26T14:30:00Z",
        "client_location": "Berlin, Germany",
        "client_history": "12 jobs posted, 88% hire rate, $35k total spend",
        "deliverables": [
            "Monitoring agent",
            "Playbook editor",
            "Bid submission workflow",
        ],
        "requirements": [
            "LangChain experience",
            "Strong Python automation background",
        ],
        "status": "active",
    },
    {
        "project_id": "sample-3",
        "title": "Voice-Enabled Client Discovery Bot",
        "description": "Develop a Chrome extension that transcribes client calls and "
                       "suggests follow-up actions in real time.",
        "platform": "fiverr",
        "budget_min": 600,
        "budget_max": 1100,
        "skills_required": ["Chrome Extensions", "React", "Whisper", "UI/UX"],
        "nex_score": 76,
        "win_probability": 63,
        "risk_level": "medium",
        "project_url": "https://www.fiverr.com/example3",
        "posted_at": "2025-11-25T09:15:00Z",
        "client_location": "Sydney, Australia",
        "client_history": "22 jobs posted, 90% hire rate, $48k total spend",
        "deliverables": [
            "Chrome extension MVP",
            "Realtime transcription layer",
            "Insights dashboard",
        ],
        "requirements": [
            "Familiarity with Whisper or similar",
            "Chrome extension publishing knowledge",
        ],
        "status": "active",
    },
]
