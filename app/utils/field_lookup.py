"""
Ordered-fallback field lookup for loosely shaped JSON payloads.

Automation senders name the same thing several ways (``url`` / ``link`` /
``href``). Every reader in this codebase goes through ``first_present`` with
an alias list from ``app.domain.constants`` so the probe order lives in one
place.
"""
import json
from typing import Any, Dict, Iterable, Optional


def get_path(source: Any, path: str) -> Any:
    """
    Read a dotted path ("project.ai_insights") from nested dicts.

    Returns None as soon as a segment is missing or a non-dict is met.
    """
    current = source
    for segment in path.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(segment)
        if current is None:
            return None
    return current


def first_present(
    source: Any,
    keys: Iterable[str],
    default: Any = None,
    skip_empty: bool = False,
) -> Any:
    """
    Return the value of the first key (or dotted path) that is not None.

    Args:
        source: Decoded JSON value, usually a dict
        keys: Alias chain, probed in order
        default: Returned when no alias matches
        skip_empty: Also skip empty strings

    Returns:
        First matching value or ``default``
    """
    for key in keys:
        value = get_path(source, key)
        if value is None:
            continue
        if skip_empty and value == "":
            continue
        return value
    return default


def as_dict(value: Any) -> Dict[str, Any]:
    """Treat anything that is not a dict as an empty object."""
    return value if isinstance(value, dict) else {}


def to_text(value: Any) -> str:
    """Stringify a decoded JSON value for display; containers become JSON text."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_number(value: Any) -> Optional[float]:
    """
    Coerce a score-like value to a finite number.

    Booleans, NaN, infinities, integers too large for a float and
    unparsable strings all yield None.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (int, float)):
        return None

    try:
        number = float(value)
    except (OverflowError, ValueError):
        return None

    if number != number or number in (float("inf"), float("-inf")):
        return None
    return number
