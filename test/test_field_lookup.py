"""
Tests for alias-chain lookup and value coercion helpers.
"""
import pytest

from app.utils.field_lookup import as_dict, first_present, get_path, to_number, to_text


def test_get_path_walks_nested_dicts():
    payload = {"project": {"ai_insights": {"summary": "ok"}}}
    assert get_path(payload, "project.ai_insights.summary") == "ok"
    assert get_path(payload, "project.missing") is None
    assert get_path({"project": "flat"}, "project.ai_insights") is None


def test_first_present_respects_alias_order():
    payload = {"link": "https://b.example", "href": "https://c.example"}
    assert first_present(payload, ["url", "link", "href"]) == "https://b.example"


def test_first_present_keeps_falsy_values_unless_empty_skipped():
    payload = {"url": "", "link": "https://b.example", "score": 0}
    assert first_present(payload, ["url", "link"]) == ""
    assert first_present(payload, ["url", "link"], skip_empty=True) == "https://b.example"
    assert first_present(payload, ["score", "nex_score"]) == 0
    assert first_present(payload, ["nothing"], default="-") == "-"


def test_as_dict():
    assert as_dict({"a": 1}) == {"a": 1}
    assert as_dict(["a"]) == {}
    assert as_dict(None) == {}


@pytest.mark.parametrize("value, expected", [
    (None, ""),
    ("text", "text"),
    (42, "42"),
    (4.0, "4"),
    (4.5, "4.5"),
    (True, "true"),
    ([1, 2], "[1, 2]"),
])
def test_to_text(value, expected):
    assert to_text(value) == expected


@pytest.mark.parametrize("value, expected", [
    (88, 88),
    ("91.5", 91.5),
    (" 70 ", 70),
    ("0", 0),
    ("high", None),
    ("", None),
    (True, None),
    (float("nan"), None),
    (float("inf"), None),
    (10 ** 400, None),
    ({"score": 1}, None),
])
def test_to_number(value, expected):
    assert to_number(value) == expected
