"""
Bid Normalizer

Maps one raw bid-like object from an automation webhook into a
NormalizedBid. Every field is read through an alias chain from
app.domain.constants; a missing or wrongly typed field falls back to a
safe default instead of raising.
"""
from typing import Any, Optional

from app.domain.constants import (
    BID_URL_KEYS,
    BID_PLATFORM_KEYS,
    BID_SCORE_KEYS,
    BID_ID_KEYS,
    BID_TITLE_KEYS,
    BID_SUMMARY_FALLBACK_KEYS,
    BID_PROPOSAL_KEYS,
    PLATFORM_URL_HINTS,
)
from app.models.automation import NormalizedBid
from app.utils.field_lookup import as_dict, first_present, to_text, to_number


def infer_platform(url: str) -> Optional[str]:
    """Guess the marketplace from a listing URL, or None."""
    for needle, platform in PLATFORM_URL_HINTS.items():
        if needle in url:
            return platform
    return None


def resolve_budget(raw: dict) -> Optional[str]:
    """String budget verbatim, else "$min - $max", else price_range."""
    budget = raw.get("budget")
    if isinstance(budget, str):
        return budget

    budget_min = raw.get("budget_min")
    budget_max = raw.get("budget_max")
    if budget_min and budget_max:
        return f"${to_text(budget_min)} - ${to_text(budget_max)}"

    price_range = raw.get("price_range")
    if price_range is not None:
        return to_text(price_range)
    return None


def resolve_summary(raw: dict) -> str:
    summary = raw.get("summary")
    if isinstance(summary, str):
        return summary
    return to_text(first_present(raw, BID_SUMMARY_FALLBACK_KEYS, default=""))


def normalize_bid(raw: Any, position: int) -> NormalizedBid:
    """
    Normalize one raw bid.

    Args:
        raw: Decoded JSON element (anything; non-dicts become an empty bid)
        position: 0-based index of the element within its batch

    Returns:
        NormalizedBid with a stable id and title
    """
    raw = as_dict(raw)
    ordinal = position + 1

    url = to_text(first_present(raw, BID_URL_KEYS, default="", skip_empty=True))

    platform = first_present(raw, BID_PLATFORM_KEYS, skip_empty=True)
    platform = to_text(platform) if platform is not None else infer_platform(url)

    return NormalizedBid(
        id=to_text(first_present(raw, BID_ID_KEYS, default=f"bid-{ordinal}")),
        title=to_text(first_present(raw, BID_TITLE_KEYS, default=f"Opportunity {ordinal}")),
        platform=platform,
        url=url,
        budget=resolve_budget(raw),
        score=to_number(first_present(raw, BID_SCORE_KEYS)),
        summary=resolve_summary(raw),
        proposal=to_text(first_present(raw, BID_PROPOSAL_KEYS, default="")),
    )
