"""
Payload Shape Resolver

Turns whatever JSON an automation webhook returns into an InsightBundle
and a list of NormalizedBid records.

Accepted shapes (after an optional {"data": ...} envelope is removed):
- insights as a plain string  -> summary
- insights as a list          -> highlights
- insights as an object       -> summary / highlights / metrics / overview
- bids under top_bids, topBids, bids or opportunities

Nothing here raises on bad input; absent or wrongly typed pieces degrade
to empty defaults.
"""
import logging
from datetime import datetime
from typing import Any, List

from app.domain.constants import (
    ENVELOPE_KEY,
    INSIGHT_SOURCE_KEYS,
    BID_LIST_KEYS,
    METRIC_LABEL_KEYS,
    METRIC_VALUE_KEYS,
    METRIC_VALUE_DEFAULT,
    PROPOSAL_RESPONSE_KEYS,
)
from app.models.automation import (
    AutomationResult,
    InsightBundle,
    InsightMetric,
    NormalizedBid,
)
from app.utils.bid_normalizer import normalize_bid
from app.utils.field_lookup import as_dict, first_present, to_text

logger = logging.getLogger(__name__)


def unwrap_envelope(payload: Any) -> Any:
    """Return payload["data"] when present, else the payload itself."""
    if isinstance(payload, dict) and payload.get(ENVELOPE_KEY) is not None:
        return payload[ENVELOPE_KEY]
    return payload


def _resolve_metrics(metrics: Any) -> List[InsightMetric]:
    if isinstance(metrics, list):
        resolved = []
        for index, entry in enumerate(metrics):
            entry = as_dict(entry)
            resolved.append(InsightMetric(
                label=to_text(first_present(entry, METRIC_LABEL_KEYS, default=f"Metric {index + 1}")),
                value=to_text(first_present(entry, METRIC_VALUE_KEYS, default=METRIC_VALUE_DEFAULT)),
            ))
        return resolved

    if isinstance(metrics, dict):
        # dicts keep insertion order, which mirrors the JSON key order
        return [InsightMetric(label=str(label), value=to_text(value)) for label, value in metrics.items()]

    return []


def resolve_insights(result: Any) -> InsightBundle:
    """
    Extract an InsightBundle from an unwrapped webhook result.

    Probes insights, then ai_insights, then project.ai_insights.
    """
    source = first_present(result, INSIGHT_SOURCE_KEYS)

    if isinstance(source, str):
        return InsightBundle(summary=source)

    if isinstance(source, list):
        return InsightBundle(highlights=[to_text(item) for item in source])

    if isinstance(source, dict):
        summary = source.get("summary")
        summary = summary if isinstance(summary, str) else ""

        highlights = source.get("highlights")
        highlights = [to_text(item) for item in highlights] if isinstance(highlights, list) else []

        if not summary and source.get("overview"):
            summary = to_text(source["overview"])

        return InsightBundle(
            summary=summary,
            highlights=highlights,
            metrics=_resolve_metrics(source.get("metrics")),
        )

    if source is not None:
        logger.warning(f"Ignoring insights of unsupported type: {type(source).__name__}")
    return InsightBundle()


def resolve_bids(result: Any) -> List[NormalizedBid]:
    """Normalize the first alias that holds a list; no list means no bids."""
    result = as_dict(result)
    for key in BID_LIST_KEYS:
        source = result.get(key)
        if isinstance(source, list):
            return [normalize_bid(raw, position) for position, raw in enumerate(source)]
    return []


def resolve_automation_response(payload: Any) -> AutomationResult:
    """
    Resolve a full generate_insights reply.

    Args:
        payload: Decoded JSON body, optionally wrapped in {"data": ...}

    Returns:
        AutomationResult stamped with the current UTC time
    """
    result = unwrap_envelope(payload)
    resolved = AutomationResult(
        insights=resolve_insights(result),
        bids=resolve_bids(result),
        generated_at=datetime.utcnow(),
    )
    logger.info(
        f"Resolved automation reply: {len(resolved.bids)} bids, "
        f"{len(resolved.insights.highlights)} highlights, {len(resolved.insights.metrics)} metrics"
    )
    return resolved


def resolve_proposal_text(payload: Any) -> str:
    """Pull proposal text out of a generate_proposal reply ("" when absent)."""
    result = unwrap_envelope(payload)
    return to_text(first_present(result, PROPOSAL_RESPONSE_KEYS, default=""))
