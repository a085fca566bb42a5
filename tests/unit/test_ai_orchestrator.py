"""Unit tests for the AI orchestrator.

Tests cover:
1. Primary success short-circuits the chain
2. Fallback to the secondary on primary failure
3. Downgrade policies (primary on throttling only, secondary on any error)
4. Degraded responses when no provider succeeds
5. Availability reset and status snapshot
6. Metrics wiring
"""

from collections.abc import Sequence
from typing import Any

import pytest
from pydantic import SecretStr

from backend.compass.config import Settings
from backend.compass.llm.errors import ProviderError, ThrottledError, TransientProviderError
from backend.compass.llm.fallback import (
    DEGRADED_ADVICE_SUGGESTIONS,
    DEGRADED_ADVICE_TEXT,
    DEGRADED_INSIGHTS,
    DEGRADED_ITINERARY_DESCRIPTION,
)
from backend.compass.llm.orchestrator import (
    AIOrchestrator,
    DowngradePolicy,
    ProviderMetrics,
    ProviderSlot,
    build_orchestrator,
)
from backend.compass.llm.prompts import PromptPayload
from backend.compass.models.advice import AdviceRequest, AdviceResponse


class FakeAdapter:
    """Adapter that replays scripted outcomes and counts calls.

    A None outcome means "succeed with the default value".
    """

    def __init__(self, name: str, outcomes: Sequence[Any] = ()) -> None:
        self.name = name
        self._outcomes = list(outcomes)
        self.calls = 0
        self.payloads: list[PromptPayload] = []

    def _next(self, payload: PromptPayload, default: Any) -> Any:
        self.calls += 1
        self.payloads.append(payload)
        outcome = self._outcomes.pop(0) if self._outcomes else None
        if outcome is None:
            outcome = default
        if isinstance(outcome, ProviderError):
            raise outcome
        return outcome

    async def invoke_advice(self, payload: PromptPayload) -> AdviceResponse:
        return self._next(payload, AdviceResponse(response=f"advice from {self.name}"))  # type: ignore[no-any-return]

    async def invoke_insights(self, payload: PromptPayload) -> list[str]:
        return self._next(payload, [f"insight from {self.name}"])  # type: ignore[no-any-return]

    async def invoke_itinerary_description(self, payload: PromptPayload) -> str:
        return self._next(payload, f"description from {self.name}")  # type: ignore[no-any-return]


class RecordingMetrics(ProviderMetrics):
    """Metrics recorder that keeps every call."""

    def __init__(self) -> None:
        self.latencies: list[tuple[str, str, str]] = []
        self.errors: list[tuple[str, str]] = []
        self.degraded: list[str] = []

    def record_latency(self, provider: str, operation: str, outcome: str, latency_ms: float) -> None:
        self.latencies.append((provider, operation, outcome))

    def inc_error(self, provider: str, reason: str) -> None:
        self.errors.append((provider, reason))

    def inc_degraded(self, operation: str) -> None:
        self.degraded.append(operation)


def throttled(provider: str) -> ThrottledError:
    return ThrottledError(provider, "rate limited")


def transient(provider: str) -> TransientProviderError:
    return TransientProviderError(provider, "connection reset")


def make_orchestrator(
    primary: FakeAdapter | None,
    secondary: FakeAdapter | None,
    metrics: ProviderMetrics | None = None,
) -> AIOrchestrator:
    slots = []
    if primary is not None:
        slots.append(ProviderSlot(primary, DowngradePolicy.THROTTLED_ONLY))
    if secondary is not None:
        slots.append(ProviderSlot(secondary, DowngradePolicy.ANY_ERROR))
    return AIOrchestrator(slots, metrics=metrics)


ADVICE_REQUEST = AdviceRequest(message="What should I see in Florence?")


class TestFallbackChain:
    """Test provider ordering and fallback."""

    @pytest.mark.asyncio
    async def test_primary_success_skips_secondary(self) -> None:
        primary, secondary = FakeAdapter("openai"), FakeAdapter("gemini")
        orchestrator = make_orchestrator(primary, secondary)

        advice = await orchestrator.get_travel_advice(ADVICE_REQUEST)

        assert advice.response == "advice from openai"
        assert primary.calls == 1
        assert secondary.calls == 0

    @pytest.mark.asyncio
    async def test_primary_throttled_falls_back_and_downgrades(self) -> None:
        primary = FakeAdapter("openai", [throttled("openai")])
        secondary = FakeAdapter("gemini")
        orchestrator = make_orchestrator(primary, secondary)

        advice = await orchestrator.get_travel_advice(ADVICE_REQUEST)

        assert advice.response == "advice from gemini"
        status = orchestrator.get_provider_status()
        assert status.openai is False
        assert status.gemini is True

    @pytest.mark.asyncio
    async def test_downgraded_primary_is_not_called_again(self) -> None:
        primary = FakeAdapter("openai", [throttled("openai")])
        secondary = FakeAdapter("gemini")
        orchestrator = make_orchestrator(primary, secondary)

        await orchestrator.get_travel_advice(ADVICE_REQUEST)
        await orchestrator.get_cultural_insights("Kyoto", ["temples"])

        assert primary.calls == 1
        assert secondary.calls == 2

    @pytest.mark.asyncio
    async def test_primary_transient_error_does_not_downgrade(self) -> None:
        primary = FakeAdapter("openai", [transient("openai")])
        secondary = FakeAdapter("gemini")
        orchestrator = make_orchestrator(primary, secondary)

        advice = await orchestrator.get_travel_advice(ADVICE_REQUEST)

        assert advice.response == "advice from gemini"
        assert orchestrator.get_provider_status().openai is True

        advice = await orchestrator.get_travel_advice(ADVICE_REQUEST)
        assert advice.response == "advice from openai"
        assert primary.calls == 2

    @pytest.mark.asyncio
    async def test_secondary_any_error_downgrades(self) -> None:
        primary = FakeAdapter("openai", [transient("openai")])
        secondary = FakeAdapter("gemini", [transient("gemini")])
        orchestrator = make_orchestrator(primary, secondary)

        await orchestrator.get_travel_advice(ADVICE_REQUEST)

        status = orchestrator.get_provider_status()
        assert status.openai is True
        assert status.gemini is False

    @pytest.mark.asyncio
    async def test_each_provider_called_at_most_once_per_operation(self) -> None:
        primary = FakeAdapter("openai", [transient("openai")])
        secondary = FakeAdapter("gemini", [transient("gemini")])
        orchestrator = make_orchestrator(primary, secondary)

        await orchestrator.get_itinerary_description([])

        assert primary.calls == 1
        assert secondary.calls == 1

    @pytest.mark.asyncio
    async def test_unconfigured_secondary_is_never_invoked(self) -> None:
        primary = FakeAdapter("openai", [throttled("openai")])
        orchestrator = make_orchestrator(primary, None)

        advice = await orchestrator.get_travel_advice(ADVICE_REQUEST)

        assert advice.response == DEGRADED_ADVICE_TEXT
        assert orchestrator.get_provider_status().gemini is False


class TestDegradedResponses:
    """Test static responses when nothing succeeds."""

    @pytest.mark.asyncio
    async def test_degraded_advice(self) -> None:
        orchestrator = make_orchestrator(
            FakeAdapter("openai", [throttled("openai")]),
            FakeAdapter("gemini", [throttled("gemini")]),
        )

        advice = await orchestrator.get_travel_advice(ADVICE_REQUEST)

        assert advice.response == DEGRADED_ADVICE_TEXT
        assert advice.suggestions == list(DEGRADED_ADVICE_SUGGESTIONS)
        assert advice.cultural_tips == []

    @pytest.mark.asyncio
    async def test_degraded_insights(self) -> None:
        orchestrator = make_orchestrator(None, None)

        insights = await orchestrator.get_cultural_insights("Lima", [])

        assert insights == list(DEGRADED_INSIGHTS)
        assert len(insights) == 5

    @pytest.mark.asyncio
    async def test_degraded_itinerary_description(self) -> None:
        orchestrator = make_orchestrator(None, None)

        assert await orchestrator.get_itinerary_description([]) == DEGRADED_ITINERARY_DESCRIPTION

    @pytest.mark.asyncio
    async def test_all_downgraded_skips_providers(self) -> None:
        primary = FakeAdapter("openai", [throttled("openai")])
        secondary = FakeAdapter("gemini", [transient("gemini")])
        orchestrator = make_orchestrator(primary, secondary)
        await orchestrator.get_travel_advice(ADVICE_REQUEST)

        advice = await orchestrator.get_travel_advice(ADVICE_REQUEST)

        assert advice.response == DEGRADED_ADVICE_TEXT
        assert primary.calls == 1
        assert secondary.calls == 1


class TestReset:
    """Test availability reset."""

    @pytest.mark.asyncio
    async def test_reset_restores_primary(self) -> None:
        primary = FakeAdapter("openai", [throttled("openai")])
        secondary = FakeAdapter("gemini", [transient("gemini")])
        orchestrator = make_orchestrator(primary, secondary)
        await orchestrator.get_travel_advice(ADVICE_REQUEST)

        orchestrator.reset_availability()

        status = orchestrator.get_provider_status()
        assert status.openai is True
        assert status.gemini is True
        advice = await orchestrator.get_travel_advice(ADVICE_REQUEST)
        assert advice.response == "advice from openai"

    def test_reset_keeps_unconfigured_secondary_false(self) -> None:
        orchestrator = make_orchestrator(FakeAdapter("openai"), None)

        orchestrator.reset_availability()

        status = orchestrator.get_provider_status()
        assert status.openai is True
        assert status.gemini is False


class TestIdempotence:
    """Test repeated status reads and resets."""

    def test_status_read_twice_is_identical(self) -> None:
        orchestrator = make_orchestrator(FakeAdapter("openai"), FakeAdapter("gemini"))

        assert orchestrator.get_provider_status() == orchestrator.get_provider_status()

    @pytest.mark.asyncio
    async def test_status_read_twice_after_throttling_is_identical(self) -> None:
        orchestrator = make_orchestrator(
            FakeAdapter("openai", [throttled("openai")]), FakeAdapter("gemini")
        )
        await orchestrator.get_travel_advice(ADVICE_REQUEST)

        first = orchestrator.get_provider_status()
        second = orchestrator.get_provider_status()

        assert first == second
        assert first.openai is False
        assert first.gemini is True

    @pytest.mark.asyncio
    async def test_reset_twice_matches_single_reset(self) -> None:
        orchestrator = make_orchestrator(
            FakeAdapter("openai", [throttled("openai")]),
            FakeAdapter("gemini", [transient("gemini")]),
        )
        await orchestrator.get_travel_advice(ADVICE_REQUEST)

        orchestrator.reset_availability()
        after_one = orchestrator.get_provider_status()
        orchestrator.reset_availability()

        assert orchestrator.get_provider_status() == after_one
        assert after_one.openai is True
        assert after_one.gemini is True


class TestPayloads:
    """Test the orchestrator hands built prompts to adapters."""

    @pytest.mark.asyncio
    async def test_insights_payload_names_destination(self) -> None:
        primary = FakeAdapter("openai")
        orchestrator = make_orchestrator(primary, None)

        await orchestrator.get_cultural_insights("Marrakech", ["markets"])

        assert "Marrakech" in primary.payloads[0].user
        assert "markets" in primary.payloads[0].user


class TestMetrics:
    """Test metrics wiring."""

    @pytest.mark.asyncio
    async def test_metrics_record_failure_success_and_degraded(self) -> None:
        metrics = RecordingMetrics()
        orchestrator = make_orchestrator(
            FakeAdapter("openai", [throttled("openai")]),
            FakeAdapter("gemini", [None, transient("gemini")]),
            metrics=metrics,
        )

        await orchestrator.get_itinerary_description([])

        assert ("openai", "itinerary_description", "throttled") in metrics.latencies
        assert ("openai", "throttled") in metrics.errors
        assert metrics.degraded == []

        await orchestrator.get_itinerary_description([])

        assert ("gemini", "error") in metrics.errors
        assert metrics.degraded == ["itinerary_description"]


class TestBuildOrchestrator:
    """Test factory wiring from settings."""

    def test_no_keys_configures_no_providers(self) -> None:
        settings = Settings(openai_api_key=None, gemini_api_key=None)

        orchestrator = build_orchestrator(settings)

        assert orchestrator.availability.configured == ()
        status = orchestrator.get_provider_status()
        assert status.openai is False
        assert status.gemini is False

    def test_both_keys_configure_in_order(self) -> None:
        settings = Settings(
            openai_api_key=SecretStr("sk-test"), gemini_api_key=SecretStr("gm-test")
        )

        orchestrator = build_orchestrator(settings)

        assert orchestrator.availability.configured == ("openai", "gemini")

    def test_primary_only(self) -> None:
        settings = Settings(openai_api_key=SecretStr("sk-test"), gemini_api_key=None)

        orchestrator = build_orchestrator(settings)

        assert orchestrator.availability.configured == ("openai",)
