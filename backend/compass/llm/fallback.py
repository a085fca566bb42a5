"""Static degraded responses returned when every provider is unavailable."""

from backend.compass.models.advice import AdviceResponse

DEGRADED_ADVICE_TEXT = (
    "I'm sorry, I'm having trouble processing your request right now. "
    "Please try again later or contact support if the problem persists."
)

DEGRADED_ADVICE_SUGGESTIONS = (
    "Try asking a different question",
    "Check back in a few minutes",
    "Contact support for assistance",
)

DEGRADED_INSIGHTS = (
    "Every destination offers rich cultural experiences for curious travelers",
    "Local customs and traditions provide unique insights into the culture",
    "Try local cuisine and interact with locals for authentic experiences",
    "Visit museums and cultural sites to learn about the history",
    "Respect local customs and dress codes when visiting religious sites",
)

DEGRADED_ITINERARY_DESCRIPTION = (
    "Your personalized cultural travel itinerary includes carefully selected destinations, "
    "cultural sites, and dining experiences tailored to your preferences."
)


def degraded_advice() -> AdviceResponse:
    """Generic apology with retry suggestions."""
    return AdviceResponse(
        response=DEGRADED_ADVICE_TEXT,
        suggestions=list(DEGRADED_ADVICE_SUGGESTIONS),
        cultural_tips=[],
    )


def degraded_insights() -> list[str]:
    """Destination-agnostic insight bullets."""
    return list(DEGRADED_INSIGHTS)


def degraded_itinerary_description() -> str:
    """Generic itinerary paragraph."""
    return DEGRADED_ITINERARY_DESCRIPTION
