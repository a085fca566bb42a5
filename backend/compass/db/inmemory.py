"""In-memory implementations of repository interfaces."""

from collections.abc import Iterable
from datetime import datetime

from backend.compass.models.catalog import CulturalSite, Destination, Region, Restaurant
from backend.compass.models.itinerary import ChatMessage, Itinerary, ItineraryItem, User


class InMemoryCatalog:
    """In-memory implementation of CatalogRepository.

    Records are frozen models; lookups return them in seed order.
    """

    def __init__(
        self,
        destinations: Iterable[Destination] = (),
        cultural_sites: Iterable[CulturalSite] = (),
        restaurants: Iterable[Restaurant] = (),
        regions: Iterable[Region] = (),
    ) -> None:
        self._destinations: dict[int, Destination] = {d.id: d for d in destinations}
        self._cultural_sites: dict[int, CulturalSite] = {s.id: s for s in cultural_sites}
        self._restaurants: dict[int, Restaurant] = {r.id: r for r in restaurants}
        self._regions: list[Region] = list(regions)

    def list_destinations(self) -> list[Destination]:
        return list(self._destinations.values())

    def get_destination(self, destination_id: int) -> Destination | None:
        return self._destinations.get(destination_id)

    def list_destinations_by_region(self, region: str) -> list[Destination]:
        return [d for d in self._destinations.values() if d.region == region]

    def list_cultural_sites(self) -> list[CulturalSite]:
        return list(self._cultural_sites.values())

    def list_cultural_sites_by_destination(self, destination_id: int) -> list[CulturalSite]:
        return [s for s in self._cultural_sites.values() if s.destination_id == destination_id]

    def list_cultural_sites_by_category(self, category: str) -> list[CulturalSite]:
        return [s for s in self._cultural_sites.values() if s.category == category]

    def list_restaurants(self) -> list[Restaurant]:
        return list(self._restaurants.values())

    def list_restaurants_by_destination(self, destination_id: int) -> list[Restaurant]:
        return [r for r in self._restaurants.values() if r.destination_id == destination_id]

    def list_restaurants_by_cuisine(self, cuisine: str) -> list[Restaurant]:
        return [r for r in self._restaurants.values() if r.cuisine == cuisine]

    def list_regions(self) -> list[Region]:
        return list(self._regions)


class InMemoryItineraryRepository:
    """In-memory implementation of ItineraryRepository."""

    def __init__(self) -> None:
        self._itineraries: dict[int, Itinerary] = {}
        self._next_id = 1

    def create_itinerary(
        self, name: str, items: list[ItineraryItem], user_id: int | None = None
    ) -> Itinerary:
        """Store a new itinerary."""
        itinerary = Itinerary(
            id=self._next_id,
            user_id=user_id,
            name=name,
            items=list(items),
            created_at=datetime.now(),
        )
        self._itineraries[itinerary.id] = itinerary
        self._next_id += 1
        return itinerary

    def get_itinerary(self, itinerary_id: int) -> Itinerary | None:
        """Get itinerary by ID."""
        return self._itineraries.get(itinerary_id)

    def update_items(self, itinerary_id: int, items: list[ItineraryItem]) -> Itinerary | None:
        """Replace itinerary items."""
        record = self._itineraries.get(itinerary_id)
        if record is None:
            return None

        updated = record.model_copy(update={"items": list(items)})
        self._itineraries[itinerary_id] = updated
        return updated


class InMemoryChatRepository:
    """In-memory implementation of ChatRepository."""

    def __init__(self) -> None:
        self._messages: dict[int, ChatMessage] = {}
        self._next_id = 1

    def record(self, user_id: int | None, message: str, response: str) -> ChatMessage:
        """Store one chat exchange."""
        chat_message = ChatMessage(
            id=self._next_id,
            user_id=user_id,
            message=message,
            response=response,
            timestamp=datetime.now(),
        )
        self._messages[chat_message.id] = chat_message
        self._next_id += 1
        return chat_message

    def list_by_user(self, user_id: int) -> list[ChatMessage]:
        """List exchanges for user."""
        return [m for m in self._messages.values() if m.user_id == user_id]


class InMemoryUserRepository:
    """In-memory implementation of UserRepository."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: dict[int, User] = {u.id: u for u in users}

    def get_user(self, user_id: int) -> User | None:
        """Get user by ID."""
        return self._users.get(user_id)

    def update_preferences(self, user_id: int, preferences: list[str]) -> User | None:
        """Replace saved preference tokens."""
        user = self._users.get(user_id)
        if user is None:
            return None

        updated = user.model_copy(update={"preferences": list(preferences)})
        self._users[user_id] = updated
        return updated
