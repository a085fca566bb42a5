"""Repository protocol interfaces for data access."""

from typing import Protocol

from backend.compass.models.catalog import CulturalSite, Destination, Region, Restaurant
from backend.compass.models.itinerary import ChatMessage, Itinerary, ItineraryItem, User


class CatalogRepository(Protocol):
    """Read-only access to the seeded catalog."""

    def list_destinations(self) -> list[Destination]:
        """All destinations in declaration order."""
        ...

    def get_destination(self, destination_id: int) -> Destination | None:
        """Destination by id, None when absent."""
        ...

    def list_destinations_by_region(self, region: str) -> list[Destination]:
        """Destinations whose region equals the key."""
        ...

    def list_cultural_sites(self) -> list[CulturalSite]:
        """All cultural sites in declaration order."""
        ...

    def list_cultural_sites_by_destination(self, destination_id: int) -> list[CulturalSite]:
        """Sites attached to a destination."""
        ...

    def list_cultural_sites_by_category(self, category: str) -> list[CulturalSite]:
        """Sites whose category equals the key."""
        ...

    def list_restaurants(self) -> list[Restaurant]:
        """All restaurants in declaration order."""
        ...

    def list_restaurants_by_destination(self, destination_id: int) -> list[Restaurant]:
        """Restaurants attached to a destination."""
        ...

    def list_restaurants_by_cuisine(self, cuisine: str) -> list[Restaurant]:
        """Restaurants whose cuisine equals the key."""
        ...

    def list_regions(self) -> list[Region]:
        """World-map regions."""
        ...


class ItineraryRepository(Protocol):
    """Repository for itinerary operations."""

    def create_itinerary(
        self, name: str, items: list[ItineraryItem], user_id: int | None = None
    ) -> Itinerary:
        """Store a new itinerary.

        Args:
            name: Display name
            items: Scheduled items
            user_id: Owner, if known

        Returns:
            Stored itinerary with assigned id
        """
        ...

    def get_itinerary(self, itinerary_id: int) -> Itinerary | None:
        """Itinerary by id, None when absent."""
        ...

    def update_items(self, itinerary_id: int, items: list[ItineraryItem]) -> Itinerary | None:
        """Replace the items of an itinerary.

        Returns:
            Updated itinerary, or None when the id is unknown
        """
        ...


class ChatRepository(Protocol):
    """Repository for chat history."""

    def record(self, user_id: int | None, message: str, response: str) -> ChatMessage:
        """Store one chat exchange."""
        ...

    def list_by_user(self, user_id: int) -> list[ChatMessage]:
        """Exchanges for a user, oldest first."""
        ...


class UserRepository(Protocol):
    """Repository for user profiles."""

    def get_user(self, user_id: int) -> User | None:
        """User by id, None when absent."""
        ...

    def update_preferences(self, user_id: int, preferences: list[str]) -> User | None:
        """Replace the saved preference tokens.

        Returns:
            Updated user, or None when the id is unknown
        """
        ...
