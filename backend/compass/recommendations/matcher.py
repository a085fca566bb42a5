"""Preference matcher - substring tag matching over the seeded catalog.

A catalog item is relevant when at least one of its category tags and one
preference token contain each other (case-insensitive, either direction), so
"art" matches "street art" and "italian cuisine" matches "cuisine". Matching
is intentionally loose: catalog tags and UI-selected tokens are tuned to it.
"""

import logging
from collections.abc import Sequence
from typing import TypeVar

from backend.compass.db.repositories import CatalogRepository
from backend.compass.models.catalog import (
    CatalogItem,
    DomainPreferences,
    PreferenceProfile,
    RecommendationResult,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

ItemT = TypeVar("ItemT", bound=CatalogItem)

# Keyword buckets for preference analysis
DOMAIN_KEYWORDS: dict[str, tuple[str, ...]] = {
    "culinary": ("culinary", "food", "cuisine", "dining"),
    "visual_arts": ("art", "museum", "gallery", "visual"),
    "music": ("music", "concert", "performance"),
    "history": ("history", "historical", "ancient", "heritage"),
    "nature": ("nature", "outdoor", "adventure", "hiking"),
    "traditions": ("tradition", "culture", "festival", "ceremony"),
}


def normalize_tokens(preferences: Sequence[str]) -> list[str]:
    """Lower-case and strip tokens, dropping blanks.

    A blank token would be a substring of every tag.
    """
    return [p.strip().lower() for p in preferences if p and p.strip()]


def tag_matches(tag: str, token: str) -> bool:
    """Substring containment in either direction, case-insensitive."""
    tag_lower = tag.lower()
    token_lower = token.lower()
    return token_lower in tag_lower or tag_lower in token_lower


def is_relevant(item: CatalogItem, tokens: Sequence[str]) -> bool:
    """Check whether any tag of the item matches any token."""
    return any(tag_matches(tag, token) for tag in item.categories for token in tokens)


def match_items(
    items: Sequence[ItemT],
    preferences: Sequence[str],
    limit: int = DEFAULT_LIMIT,
) -> list[ItemT]:
    """Filter, rank and truncate catalog items for preference tokens.

    Args:
        items: Candidate items in declaration order
        preferences: Free-text preference tokens
        limit: Maximum number of items returned

    Returns:
        Relevant items, scored ones first by descending score, then unscored
        ones in declaration order. Empty when no usable token is given.
    """
    tokens = normalize_tokens(preferences)
    if not tokens or limit <= 0:
        return []

    relevant = [item for item in items if is_relevant(item, tokens)]

    # sorted() is stable, so ties keep declaration order
    ranked = sorted(
        relevant,
        key=lambda item: (item.score is None, -(item.score or 0.0)),
    )
    return ranked[:limit]


class PreferenceMatcher:
    """Recommends destinations, cultural sites and restaurants."""

    def __init__(self, catalog: CatalogRepository, default_limit: int = DEFAULT_LIMIT) -> None:
        self._catalog = catalog
        self._default_limit = default_limit

    def recommend(self, preferences: Sequence[str], limit: int | None = None) -> RecommendationResult:
        """Match every catalog collection against the same tokens and limit."""
        limit = self._default_limit if limit is None else limit

        result = RecommendationResult(
            destinations=match_items(self._catalog.list_destinations(), preferences, limit),
            cultural_sites=match_items(self._catalog.list_cultural_sites(), preferences, limit),
            restaurants=match_items(self._catalog.list_restaurants(), preferences, limit),
        )

        logger.info(
            f"Recommendations for {len(preferences)} preference(s): "
            f"{len(result.destinations)} destinations, {len(result.cultural_sites)} sites, "
            f"{len(result.restaurants)} restaurants"
        )
        return result


def analyze_preferences(preferences: Sequence[str]) -> PreferenceProfile:
    """Bucket preference tokens into cultural domains.

    A token lands in every domain whose keyword it contains; tokens matching
    no keyword still appear in cultural_domains.
    """
    buckets: dict[str, list[str]] = {domain: [] for domain in DOMAIN_KEYWORDS}
    for token in preferences:
        lowered = token.lower()
        for domain, keywords in DOMAIN_KEYWORDS.items():
            if any(keyword in lowered for keyword in keywords):
                buckets[domain].append(token)

    return PreferenceProfile(
        cultural_domains=list(preferences),
        preferences=DomainPreferences(**buckets),
    )
