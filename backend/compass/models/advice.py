"""Advice models - chat request/response and provider status."""

from pydantic import Field, field_validator

from backend.compass.models.common import CamelModel
from backend.compass.models.itinerary import ItineraryItem


class AdviceRequest(CamelModel):
    """One chat turn handed to the AI orchestrator."""

    message: str = Field(..., min_length=1)
    preferences: list[str] = Field(default_factory=list)
    destination_context: str | None = None
    itinerary_context: list[ItineraryItem] = Field(default_factory=list)


class AdviceResponse(CamelModel):
    """Assistant reply. Lists are always present, possibly empty."""

    response: str = Field(..., min_length=1)
    suggestions: list[str] = Field(default_factory=list)
    cultural_tips: list[str] = Field(default_factory=list)

    @field_validator("response")
    @classmethod
    def validate_response_not_blank(cls, v: str) -> str:
        """Ensure response text carries content."""
        if not v.strip():
            raise ValueError("response must not be blank")
        return v


class ProviderStatus(CamelModel):
    """Availability snapshot reported to operators."""

    openai: bool
    gemini: bool
