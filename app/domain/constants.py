"""
Centralized Constants for the BidBoard backend

SINGLE SOURCE OF TRUTH for status values, risk buckets and the
field-alias chains used to read loosely shaped automation payloads.
The alias order is the contract with upstream senders: do not reorder.
"""

from typing import Dict, List, Tuple
from enum import Enum


# =============================================================================
# SHARED ENUMS
# =============================================================================

class RiskLevel(str, Enum):
    """Coarse risk bucket derived from NexScore."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ProjectStatus(str, Enum):
    ACTIVE = "active"


class ProposalStatus(str, Enum):
    """Lifecycle of a stored proposal."""
    DRAFT = "draft"
    SUBMITTED = "submitted"
    WON = "won"
    LOST = "lost"


class AutomationAction(str, Enum):
    """Actions sent to the automation webhook."""
    GENERATE_INSIGHTS = "generate_insights"
    GENERATE_PROPOSAL = "generate_proposal"


# Outcomes that move the per-user win/loss counters
OUTCOME_STATUSES: Tuple[str, ...] = (ProposalStatus.WON.value, ProposalStatus.LOST.value)


# =============================================================================
# RISK THRESHOLDS
# =============================================================================
# Evaluated top-down; first threshold the score reaches wins

RISK_THRESHOLDS: List[Tuple[int, RiskLevel]] = [
    (85, RiskLevel.LOW),
    (70, RiskLevel.MEDIUM),
]


# =============================================================================
# PAYLOAD ALIAS CHAINS
# =============================================================================
# Dotted entries are nested paths ("project.ai_insights")

ENVELOPE_KEY = "data"

INSIGHT_SOURCE_KEYS: List[str] = ["insights", "ai_insights", "project.ai_insights"]
BID_LIST_KEYS: List[str] = ["top_bids", "topBids", "bids", "opportunities"]

METRIC_LABEL_KEYS: List[str] = ["label", "name", "title"]
METRIC_VALUE_KEYS: List[str] = ["value", "score", "amount", "percentage"]
METRIC_VALUE_DEFAULT = "-"

BID_URL_KEYS: List[str] = ["url", "link", "project_url", "href"]
BID_PLATFORM_KEYS: List[str] = ["platform", "source"]
BID_SCORE_KEYS: List[str] = ["score", "nex_score", "win_probability"]
BID_ID_KEYS: List[str] = ["id", "bid_id"]
BID_TITLE_KEYS: List[str] = ["title", "name"]
BID_SUMMARY_FALLBACK_KEYS: List[str] = ["description", "brief"]
BID_PROPOSAL_KEYS: List[str] = [
    "proposal",
    "proposal_output",
    "proposal_agent_output",
    "generated_proposal",
]

# Proposal text returned by a generate_proposal call
PROPOSAL_RESPONSE_KEYS: List[str] = [
    "proposal",
    "proposal_output",
    "generated_proposal",
    "content",
]

# URL substring -> display platform, checked in order
PLATFORM_URL_HINTS: Dict[str, str] = {
    "upwork": "Upwork",
    "fiverr": "Fiverr",
}
