"""Shared pytest fixtures for all test suites."""

from collections.abc import Generator, Sequence
from typing import Any

import pytest
from fastapi.testclient import TestClient

from backend.compass.api.deps import (
    get_catalog,
    get_chat_repository,
    get_itinerary_repository,
    get_orchestrator,
    get_user_repository,
)
from backend.compass.db.inmemory import InMemoryChatRepository, InMemoryItineraryRepository
from backend.compass.db.seed import load_catalog, load_users
from backend.compass.llm.errors import ProviderError
from backend.compass.llm.orchestrator import AIOrchestrator, DowngradePolicy, ProviderSlot
from backend.compass.llm.prompts import PromptPayload
from backend.compass.main import app
from backend.compass.models.advice import AdviceResponse


class StubAdapter:
    """Provider adapter returning canned results or raising scripted errors."""

    def __init__(
        self,
        name: str,
        advice: AdviceResponse | None = None,
        insights: Sequence[str] = ("Stub insight",),
        description: str = "Stub description",
        error: ProviderError | None = None,
    ) -> None:
        self.name = name
        self.advice = advice or AdviceResponse(
            response=f"Advice from {name}", suggestions=["Visit early"], cultural_tips=["Be polite"]
        )
        self.insights = list(insights)
        self.description = description
        self.error = error
        self.calls = 0

    def _check(self) -> None:
        self.calls += 1
        if self.error is not None:
            raise self.error

    async def invoke_advice(self, payload: PromptPayload) -> AdviceResponse:
        self._check()
        return self.advice

    async def invoke_insights(self, payload: PromptPayload) -> list[str]:
        self._check()
        return self.insights

    async def invoke_itinerary_description(self, payload: PromptPayload) -> str:
        self._check()
        return self.description


def orchestrator_with(primary: Any = None, secondary: Any = None) -> AIOrchestrator:
    """Orchestrator wired like production: primary throttled-only, secondary any-error."""
    slots = []
    if primary is not None:
        slots.append(ProviderSlot(primary, DowngradePolicy.THROTTLED_ONLY))
    if secondary is not None:
        slots.append(ProviderSlot(secondary, DowngradePolicy.ANY_ERROR))
    return AIOrchestrator(slots)


@pytest.fixture
def orchestrator() -> AIOrchestrator:
    """Orchestrator with healthy stub providers."""
    return orchestrator_with(StubAdapter("openai"), StubAdapter("gemini"))


@pytest.fixture
def client(orchestrator: AIOrchestrator) -> Generator[TestClient, None, None]:
    """Test client with fresh stores and the stub orchestrator injected."""
    catalog = load_catalog()
    users = load_users()
    itineraries = InMemoryItineraryRepository()
    chats = InMemoryChatRepository()

    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_user_repository] = lambda: users
    app.dependency_overrides[get_itinerary_repository] = lambda: itineraries
    app.dependency_overrides[get_chat_repository] = lambda: chats
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator

    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()


@pytest.fixture
def stub_adapter() -> type[StubAdapter]:
    """StubAdapter class for tests that script provider behaviour."""
    return StubAdapter


@pytest.fixture
def make_orchestrator() -> Any:
    """Factory building an orchestrator from primary/secondary adapters."""
    return orchestrator_with
