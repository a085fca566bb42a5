"""Itinerary, chat and user models."""

from datetime import datetime

from pydantic import Field

from backend.compass.models.common import CamelModel, ItemKind, TimeOfDay


class ItineraryItem(CamelModel):
    """One scheduled entry in an itinerary."""

    id: str = Field(..., min_length=1)
    type: ItemKind
    item_id: int
    day: int = Field(..., ge=1)
    time_of_day: TimeOfDay
    duration: str


class Itinerary(CamelModel):
    """Stored itinerary."""

    id: int
    user_id: int | None = None
    name: str
    items: list[ItineraryItem] = Field(default_factory=list)
    created_at: datetime


class ChatMessage(CamelModel):
    """Stored chat exchange."""

    id: int
    user_id: int | None = None
    message: str
    response: str
    timestamp: datetime


class User(CamelModel):
    """Traveler with saved preference tokens."""

    id: int
    username: str
    preferences: list[str] = Field(default_factory=list)
    created_at: datetime
