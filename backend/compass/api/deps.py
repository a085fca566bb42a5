"""Process-wide service singletons injected into routes via Depends."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from backend.compass.config import Settings, get_settings
from backend.compass.db.inmemory import (
    InMemoryChatRepository,
    InMemoryItineraryRepository,
    InMemoryUserRepository,
)
from backend.compass.db.repositories import (
    CatalogRepository,
    ChatRepository,
    ItineraryRepository,
    UserRepository,
)
from backend.compass.db.seed import load_catalog, load_users
from backend.compass.llm.orchestrator import AIOrchestrator, build_orchestrator
from backend.compass.recommendations.matcher import PreferenceMatcher
from backend.compass.utils.logging import StructuredProviderLogger
from backend.compass.utils.metrics import PrometheusProviderMetrics


@lru_cache
def get_orchestrator() -> AIOrchestrator:
    """Shared orchestrator; availability state lives as long as the process."""
    return build_orchestrator(
        get_settings(),
        metrics=PrometheusProviderMetrics(),
        attempt_logger=StructuredProviderLogger(),
    )


@lru_cache
def get_catalog() -> CatalogRepository:
    """Seeded read-only catalog."""
    return load_catalog(get_settings().catalog_fixture_path)


@lru_cache
def get_itinerary_repository() -> ItineraryRepository:
    return InMemoryItineraryRepository()


@lru_cache
def get_chat_repository() -> ChatRepository:
    return InMemoryChatRepository()


@lru_cache
def get_user_repository() -> UserRepository:
    return load_users(get_settings().catalog_fixture_path)


def get_matcher(
    catalog: Annotated[CatalogRepository, Depends(get_catalog)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> PreferenceMatcher:
    """Matcher over the seeded catalog."""
    return PreferenceMatcher(catalog, default_limit=settings.recommendation_default_limit)


OrchestratorDep = Annotated[AIOrchestrator, Depends(get_orchestrator)]
CatalogDep = Annotated[CatalogRepository, Depends(get_catalog)]
ItineraryRepoDep = Annotated[ItineraryRepository, Depends(get_itinerary_repository)]
ChatRepoDep = Annotated[ChatRepository, Depends(get_chat_repository)]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
MatcherDep = Annotated[PreferenceMatcher, Depends(get_matcher)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
