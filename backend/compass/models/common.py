"""Common types and enums shared across all models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys on the HTTP surface."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Coordinates(BaseModel):
    """Geographic coordinates (WGS84)."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class ItemKind(str, Enum):
    """Kind of catalog entry an itinerary item points at."""

    destination = "destination"
    cultural_site = "cultural_site"
    restaurant = "restaurant"
    activity = "activity"


class TimeOfDay(str, Enum):
    """Itinerary slot."""

    morning = "morning"
    afternoon = "afternoon"
    evening = "evening"
