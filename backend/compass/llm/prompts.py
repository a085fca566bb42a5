"""Request builders - provider-agnostic prompt payloads.

Pure functions: no I/O, no provider specifics. Optional request sections are
omitted entirely when absent.
"""

import json
from collections.abc import Sequence
from dataclasses import dataclass

from backend.compass.models.advice import AdviceRequest
from backend.compass.models.itinerary import ItineraryItem

ADVISOR_SYSTEM_PROMPT = """You are a knowledgeable cultural travel assistant. You specialize in
personalized travel advice, cultural insights, and practical tips for travelers interested in
cultural experiences worldwide.

Your expertise includes:
- Cultural sites, museums, and historical landmarks
- Local customs and etiquette
- Authentic dining recommendations
- Transportation and logistics
- Seasonal travel considerations
- Cultural festivals and events
- Art, music, and performance recommendations

Always provide helpful, accurate, and culturally sensitive advice. When possible, include
practical tips like best times to visit, how to book tickets, local customs to respect, and
insider knowledge that enhances the cultural experience."""

ADVICE_FORMAT_INSTRUCTIONS = """Include 3-5 actionable suggestions and 3-5 cultural tips when relevant.

Respond in JSON format with:
- response: your main advice (string)
- suggestions: short actionable suggestions (array of strings)
- culturalTips: cultural insights and etiquette tips (array of strings)"""


@dataclass(frozen=True)
class PromptPayload:
    """Prompt handed to a provider adapter."""

    user: str
    system: str | None = None
    expects_json: bool = False
    max_tokens: int = 1000


def _serialize_items(items: Sequence[ItineraryItem]) -> str:
    return json.dumps([item.model_dump(mode="json", by_alias=True) for item in items])


def build_advice_payload(request: AdviceRequest) -> PromptPayload:
    """Build the chat-advice prompt.

    Args:
        request: Chat turn with optional preference, destination and
            itinerary context

    Returns:
        JSON-mode payload whose system prompt carries the context sections
    """
    sections = [ADVISOR_SYSTEM_PROMPT]

    context_lines = []
    if request.preferences:
        context_lines.append(f"User preferences: {', '.join(request.preferences)}")
    if request.destination_context:
        context_lines.append(f"Current destination context: {request.destination_context}")
    if request.itinerary_context:
        context_lines.append(f"Current itinerary: {_serialize_items(request.itinerary_context)}")
    if context_lines:
        sections.append("\n".join(context_lines))

    sections.append(ADVICE_FORMAT_INSTRUCTIONS)

    return PromptPayload(
        system="\n\n".join(sections),
        user=request.message,
        expects_json=True,
        max_tokens=1000,
    )


def build_insights_payload(destination: str, preferences: Sequence[str]) -> PromptPayload:
    """Build the cultural-insights prompt."""
    lines = [
        f"Generate 3-5 cultural insights and practical tips for travelers visiting {destination}.",
        "Focus on:",
        "- Local customs and etiquette",
    ]
    if preferences:
        lines.append(f"- Cultural experiences that align with: {', '.join(preferences)}")
    lines.extend(
        [
            "- Practical travel tips specific to this destination",
            "- Respectful behavior at cultural sites",
            "",
            'Respond in JSON format with: { "insights": ["insight 1", "insight 2", "insight 3"] }',
        ]
    )

    return PromptPayload(user="\n".join(lines), expects_json=True, max_tokens=800)


def build_itinerary_payload(items: Sequence[ItineraryItem]) -> PromptPayload:
    """Build the itinerary-narrative prompt."""
    lines = ["Create a narrative description of this travel itinerary, highlighting the"]
    lines.append("cultural experiences and flow of the journey.")
    if items:
        lines.extend(["", _serialize_items(items)])
    lines.extend(
        [
            "",
            "Focus on the cultural significance and connections between experiences.",
            "Make it engaging and informative. Return a single descriptive paragraph.",
        ]
    )

    return PromptPayload(user="\n".join(lines), expects_json=False, max_tokens=500)
