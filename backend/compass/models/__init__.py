"""Models package - re-exports for convenience."""

from backend.compass.models.advice import AdviceRequest, AdviceResponse, ProviderStatus
from backend.compass.models.catalog import (
    CatalogItem,
    CulturalSite,
    Destination,
    DomainPreferences,
    PreferenceProfile,
    RecommendationResult,
    Region,
    Restaurant,
)
from backend.compass.models.common import CamelModel, Coordinates, ItemKind, TimeOfDay
from backend.compass.models.itinerary import ChatMessage, Itinerary, ItineraryItem, User

__all__ = [
    # Common
    "CamelModel",
    "Coordinates",
    "ItemKind",
    "TimeOfDay",
    # Catalog
    "CatalogItem",
    "Destination",
    "CulturalSite",
    "Restaurant",
    "Region",
    "RecommendationResult",
    "DomainPreferences",
    "PreferenceProfile",
    # Advice
    "AdviceRequest",
    "AdviceResponse",
    "ProviderStatus",
    # Itinerary
    "ItineraryItem",
    "Itinerary",
    "ChatMessage",
    "User",
]
