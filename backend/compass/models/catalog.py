"""Catalog models - seeded destinations, cultural sites, restaurants, regions."""

from pydantic import ConfigDict, Field

from backend.compass.models.common import CamelModel, Coordinates


class CatalogItem(CamelModel):
    """Immutable seeded record matched against preference tokens."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str
    image_url: str | None = None
    score: float | None = Field(None, ge=0, le=1, description="Relevance score, higher first")

    @property
    def categories(self) -> list[str]:
        """Tags the preference matcher compares against."""
        return []


class Destination(CatalogItem):
    """Travel destination (city or site cluster)."""

    country: str
    region: str
    cultural_tags: list[str] = Field(default_factory=list)
    best_seasons: list[str] = Field(default_factory=list)
    coordinates: Coordinates | None = None

    @property
    def categories(self) -> list[str]:
        return self.cultural_tags


class CulturalSite(CatalogItem):
    """Museum, temple, monument or other visitable site."""

    destination_id: int | None = None
    category: str
    duration: str | None = None
    tags: list[str] = Field(default_factory=list)

    @property
    def categories(self) -> list[str]:
        return self.tags


class Restaurant(CatalogItem):
    """Restaurant tied to a destination."""

    destination_id: int | None = None
    cuisine: str
    price_range: str
    rating: int = Field(..., ge=1, le=5)
    tags: list[str] = Field(default_factory=list)

    @property
    def categories(self) -> list[str]:
        return self.tags


class Region(CamelModel):
    """World-map region summary."""

    model_config = ConfigDict(frozen=True)

    name: str
    coordinates: Coordinates
    description: str
    top_destinations: list[str] = Field(default_factory=list)
    cultural_highlights: list[str] = Field(default_factory=list)
    best_season: str


class RecommendationResult(CamelModel):
    """Matched catalog items for one set of preference tokens."""

    destinations: list[Destination] = Field(default_factory=list)
    cultural_sites: list[CulturalSite] = Field(default_factory=list)
    restaurants: list[Restaurant] = Field(default_factory=list)


class DomainPreferences(CamelModel):
    """Preference tokens bucketed by cultural domain."""

    culinary: list[str] = Field(default_factory=list)
    visual_arts: list[str] = Field(default_factory=list)
    music: list[str] = Field(default_factory=list)
    history: list[str] = Field(default_factory=list)
    nature: list[str] = Field(default_factory=list)
    traditions: list[str] = Field(default_factory=list)


class PreferenceProfile(CamelModel):
    """Analysis of a user's preference tokens."""

    cultural_domains: list[str] = Field(default_factory=list)
    preferences: DomainPreferences = Field(default_factory=DomainPreferences)
