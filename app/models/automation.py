"""
Pydantic schemas for automation webhook results

Defines the fixed internal shapes that loosely shaped webhook replies are
normalized into:
- NormalizedBid: one surfaced opportunity
- InsightBundle: summary / highlights / metrics
- AutomationResult: both, plus the time they were generated
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any
from datetime import datetime


class NormalizedBid(BaseModel):
    """One opportunity surfaced by the automation webhook"""
    id: str
    title: str
    platform: Optional[str] = None
    url: str = ""
    budget: Optional[str] = None
    score: Optional[float] = None
    summary: Optional[str] = ""
    proposal: Optional[str] = ""

    def to_payload(self) -> Dict[str, Any]:
        """Shape sent back to the webhook on generate_proposal (unset fields dropped)."""
        return self.model_dump(exclude_none=True)


class InsightMetric(BaseModel):
    label: str
    value: str


class InsightBundle(BaseModel):
    """AI-style insights extracted from a webhook reply"""
    summary: str = ""
    highlights: List[str] = Field(default_factory=list)
    metrics: List[InsightMetric] = Field(default_factory=list)


class AutomationResult(BaseModel):
    """Normalized generate_insights response"""
    insights: InsightBundle = Field(default_factory=InsightBundle)
    bids: List[NormalizedBid] = Field(default_factory=list)
    generated_at: Optional[datetime] = None
