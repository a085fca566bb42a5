"""Defensive parsing of raw provider output into common shapes.

An empty reply is read as an empty object: advice and descriptions fall back
to default text. Only text that is present but not JSON is a failure.
"""

import json
from typing import Any

from backend.compass.llm.errors import TransientProviderError
from backend.compass.models.advice import AdviceResponse

DEFAULT_ADVICE_TEXT = (
    "I'm sorry, I couldn't process your request. Please try asking about travel "
    "destinations, cultural sites, or travel tips."
)

DEFAULT_DESCRIPTION_TEXT = "A personalized cultural journey awaits."

MAX_INSIGHTS = 5


def _load_json(provider: str, raw: str | None, empty: Any) -> Any:
    if raw is None or not raw.strip():
        return empty
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise TransientProviderError(provider, f"malformed JSON: {e.msg}") from e


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [entry.strip() for entry in value if isinstance(entry, str) and entry.strip()]


def parse_advice(provider: str, raw: str | None) -> AdviceResponse:
    """Parse advice JSON, substituting defaults for absent fields.

    Raises:
        TransientProviderError: Output is present but not JSON
    """
    data = _load_json(provider, raw, {})
    if not isinstance(data, dict):
        data = {}

    response = data.get("response")
    if not isinstance(response, str) or not response.strip():
        response = DEFAULT_ADVICE_TEXT

    return AdviceResponse(
        response=response,
        suggestions=_string_list(data.get("suggestions")),
        cultural_tips=_string_list(data.get("culturalTips", data.get("cultural_tips"))),
    )


def parse_insights(provider: str, raw: str | None) -> list[str]:
    """Parse an insight list from a JSON array or an {"insights": [...]} object.

    Raises:
        TransientProviderError: Output is not JSON or yields no insights
    """
    data = _load_json(provider, raw, [])
    if isinstance(data, dict):
        data = data.get("insights")

    insights = _string_list(data)
    if not insights:
        raise TransientProviderError(provider, "no insights in response")
    return insights[:MAX_INSIGHTS]


def parse_description(provider: str, raw: str | None) -> str:
    """Narrative paragraph, or the default line for an empty reply."""
    if raw is None or not raw.strip():
        return DEFAULT_DESCRIPTION_TEXT
    return raw.strip()
