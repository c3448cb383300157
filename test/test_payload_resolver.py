"""
Tests for the Payload Shape Resolver

Webhook replies arrive in many shapes; these tests pin down how each one
maps onto the insights bundle and bid list.
"""
from app.utils.payload_resolver import (
    resolve_automation_response,
    resolve_bids,
    resolve_insights,
    resolve_proposal_text,
    unwrap_envelope,
)


def test_string_insights_become_summary():
    bundle = resolve_insights({"insights": "All good"})
    assert bundle.model_dump() == {"summary": "All good", "highlights": [], "metrics": []}


def test_list_insights_become_highlights():
    bundle = resolve_insights({"ai_insights": ["Fast replies win", {"tip": "be short"}, 3]})
    assert bundle.summary == ""
    assert bundle.highlights == ["Fast replies win", '{"tip": "be short"}', "3"]


def test_nested_project_insights_are_probed_last():
    bundle = resolve_insights({"project": {"ai_insights": "Nested"}})
    assert bundle.summary == "Nested"

    preferred = resolve_insights({"insights": "Top", "project": {"ai_insights": "Nested"}})
    assert preferred.summary == "Top"


def test_metrics_object_keeps_key_order():
    bundle = resolve_insights({"insights": {"summary": "ok", "metrics": {"Speed": "fast", "Risk": "low"}}})
    assert bundle.summary == "ok"
    assert [m.model_dump() for m in bundle.metrics] == [
        {"label": "Speed", "value": "fast"},
        {"label": "Risk", "value": "low"},
    ]


def test_metrics_list_aliases_and_defaults():
    bundle = resolve_insights({"insights": {"metrics": [
        {"label": "Win rate", "value": "82%"},
        {"name": "Pipeline", "amount": 12000},
        {"title": "Reply time", "percentage": 40},
        {},
    ]}})

    assert [(m.label, m.value) for m in bundle.metrics] == [
        ("Win rate", "82%"),
        ("Pipeline", "12000"),
        ("Reply time", "40"),
        ("Metric 4", "-"),
    ]


def test_overview_fills_missing_summary():
    bundle = resolve_insights({"insights": {"overview": "Overview text", "highlights": ["a", 1]}})
    assert bundle.summary == "Overview text"
    assert bundle.highlights == ["a", "1"]

    kept = resolve_insights({"insights": {"summary": "Summary", "overview": "Overview"}})
    assert kept.summary == "Summary"


def test_wrongly_typed_insights_degrade_to_empty():
    assert resolve_insights({"insights": 42}).model_dump() == {"summary": "", "highlights": [], "metrics": []}
    assert resolve_insights({"insights": {"highlights": "nope", "metrics": 5}}).highlights == []
    assert resolve_insights(None).summary == ""


def test_bid_list_aliases():
    assert [b.title for b in resolve_bids({"topBids": [{"title": "A"}]})] == ["A"]
    assert [b.title for b in resolve_bids({"opportunities": [{"name": "B"}]})] == ["B"]

    # the first alias holding a list wins
    bids = resolve_bids({"top_bids": "n/a", "bids": [{"title": "C"}, {"title": "D"}]})
    assert [b.title for b in bids] == ["C", "D"]

    assert resolve_bids({"bids": {"title": "not a list"}}) == []
    assert resolve_bids([]) == []


def test_data_envelope_is_unwrapped():
    payload = {"data": {"insights": "Wrapped", "top_bids": [{"url": "https://upwork.com/1"}]}}
    result = resolve_automation_response(payload)

    assert result.insights.summary == "Wrapped"
    assert len(result.bids) == 1
    assert result.bids[0].id == "bid-1"
    assert result.bids[0].platform == "Upwork"
    assert result.generated_at is not None


def test_unwrap_envelope_passthrough():
    assert unwrap_envelope({"insights": "x"}) == {"insights": "x"}
    assert unwrap_envelope({"data": None, "insights": "x"}) == {"data": None, "insights": "x"}
    assert unwrap_envelope("text") == "text"


def test_proposal_text_aliases():
    assert resolve_proposal_text({"data": {"proposal_output": "Hi"}}) == "Hi"
    assert resolve_proposal_text({"content": "From content"}) == "From content"
    assert resolve_proposal_text({"proposal": "A", "content": "B"}) == "A"
    assert resolve_proposal_text({}) == ""
