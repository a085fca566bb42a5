"""AI orchestrator - ordered provider fallback with availability tracking.

Per operation:
1. Try each configured provider in order, skipping ones marked unavailable.
2. On failure, classify the error; the slot's downgrade policy decides
   whether the provider is marked unavailable until an explicit reset.
3. If nothing succeeds, return the operation's static degraded response.

Provider errors never escape; the public operations always return a value.
"""

import logging
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from backend.compass.config import Settings
from backend.compass.llm.availability import AvailabilityTracker
from backend.compass.llm.base import ProviderAdapter
from backend.compass.llm.errors import ProviderConfigurationError, ProviderError, ThrottledError
from backend.compass.llm.fallback import (
    degraded_advice,
    degraded_insights,
    degraded_itinerary_description,
)
from backend.compass.llm.gemini_provider import GeminiProvider
from backend.compass.llm.openai_provider import OpenAIProvider
from backend.compass.llm.prompts import (
    build_advice_payload,
    build_insights_payload,
    build_itinerary_payload,
)
from backend.compass.models.advice import AdviceRequest, AdviceResponse, ProviderStatus
from backend.compass.models.itinerary import ItineraryItem

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DowngradePolicy(str, Enum):
    """Which failures mark a provider unavailable."""

    THROTTLED_ONLY = "throttled_only"
    ANY_ERROR = "any_error"


@dataclass(frozen=True)
class ProviderSlot:
    """Adapter plus its downgrade policy, in orchestration order."""

    adapter: ProviderAdapter
    downgrade_policy: DowngradePolicy

    @property
    def name(self) -> str:
        return self.adapter.name

    def should_downgrade(self, error: ProviderError) -> bool:
        if self.downgrade_policy == DowngradePolicy.ANY_ERROR:
            return True
        return isinstance(error, ThrottledError)


# Metrics interface (Prometheus implementation in utils.metrics)
class ProviderMetrics:
    """Interface for provider call metrics."""

    def record_latency(self, provider: str, operation: str, outcome: str, latency_ms: float) -> None:
        """Record provider call latency."""
        pass

    def inc_error(self, provider: str, reason: str) -> None:
        """Increment error counter."""
        pass

    def inc_degraded(self, operation: str) -> None:
        """Increment degraded-response counter."""
        pass


# Logging interface (structured implementation in utils.logging)
class ProviderAttemptLogger:
    """Interface for structured attempt logging."""

    def log_attempt(
        self,
        provider: str,
        operation: str,
        outcome: str,
        latency_ms: float,
        error_reason: str | None = None,
    ) -> None:
        """Log provider attempt."""
        pass


class AIOrchestrator:
    """Produces advice, insights and itinerary narratives across providers."""

    def __init__(
        self,
        slots: Sequence[ProviderSlot],
        metrics: ProviderMetrics | None = None,
        attempt_logger: ProviderAttemptLogger | None = None,
    ) -> None:
        """Initialize orchestrator.

        Args:
            slots: Configured providers, most preferred first
            metrics: Metrics recorder (optional, defaults to no-op)
            attempt_logger: Structured logger (optional, defaults to no-op)
        """
        self._slots = list(slots)
        self._availability = AvailabilityTracker(slot.name for slot in self._slots)
        self._metrics = metrics or ProviderMetrics()
        self._attempt_logger = attempt_logger or ProviderAttemptLogger()

    @property
    def availability(self) -> AvailabilityTracker:
        return self._availability

    async def get_travel_advice(self, request: AdviceRequest) -> AdviceResponse:
        """Chat advice; degraded apology when every provider fails."""
        result = await self._run(
            "advice",
            lambda adapter: adapter.invoke_advice(build_advice_payload(request)),
        )
        return result if result is not None else degraded_advice()

    async def get_cultural_insights(self, destination: str, preferences: Sequence[str]) -> list[str]:
        """3-5 short insights; generic bullets when every provider fails."""
        result = await self._run(
            "insights",
            lambda adapter: adapter.invoke_insights(
                build_insights_payload(destination, preferences)
            ),
        )
        return result if result is not None else degraded_insights()

    async def get_itinerary_description(self, items: Sequence[ItineraryItem]) -> str:
        """Narrative paragraph; generic paragraph when every provider fails."""
        result = await self._run(
            "itinerary_description",
            lambda adapter: adapter.invoke_itinerary_description(build_itinerary_payload(items)),
        )
        return result if result is not None else degraded_itinerary_description()

    def get_provider_status(self) -> ProviderStatus:
        """Read-only availability snapshot; unconfigured providers report False."""
        snapshot = self._availability.snapshot()
        return ProviderStatus(
            openai=snapshot.get(OpenAIProvider.name, False),
            gemini=snapshot.get(GeminiProvider.name, False),
        )

    def reset_availability(self) -> None:
        """Mark every configured provider available again."""
        self._availability.reset()
        logger.info(f"AI provider availability reset: {self._availability.snapshot()}")

    async def _run(
        self,
        operation: str,
        call: Callable[[ProviderAdapter], Awaitable[T]],
    ) -> T | None:
        """Walk the provider chain.

        Returns:
            First successful result, or None when every provider was
            unavailable or failed
        """
        for slot in self._slots:
            if not self._availability.is_available(slot.name):
                self._attempt_logger.log_attempt(slot.name, operation, "skipped", 0.0)
                continue

            start_time = time.monotonic()
            try:
                result = await call(slot.adapter)
            except ProviderError as e:
                elapsed_ms = (time.monotonic() - start_time) * 1000
                outcome = "throttled" if isinstance(e, ThrottledError) else "error"

                self._metrics.record_latency(slot.name, operation, outcome, elapsed_ms)
                self._metrics.inc_error(slot.name, outcome)
                self._attempt_logger.log_attempt(
                    slot.name, operation, outcome, elapsed_ms, error_reason=e.reason
                )

                if slot.should_downgrade(e) and self._availability.mark_unavailable(slot.name):
                    logger.warning(
                        f"Marking {slot.name} unavailable after {type(e).__name__}; "
                        "it will be skipped until availability is reset"
                    )
                continue

            elapsed_ms = (time.monotonic() - start_time) * 1000
            self._metrics.record_latency(slot.name, operation, "success", elapsed_ms)
            self._attempt_logger.log_attempt(slot.name, operation, "success", elapsed_ms)
            return result

        self._metrics.inc_degraded(operation)
        logger.warning(f"All AI providers unavailable or failed for {operation}, using degraded response")
        return None


def build_orchestrator(
    settings: Settings,
    metrics: ProviderMetrics | None = None,
    attempt_logger: ProviderAttemptLogger | None = None,
) -> AIOrchestrator:
    """Factory function wiring configured providers in preference order.

    OpenAI is primary and only downgraded on throttling; Gemini is secondary
    and downgraded on any failure. Providers without credentials are left out.
    """
    slots: list[ProviderSlot] = []

    openai_key = settings.openai_api_key.get_secret_value() if settings.openai_api_key else None
    try:
        slots.append(
            ProviderSlot(
                adapter=OpenAIProvider(
                    api_key=openai_key,
                    model=settings.openai_model,
                    timeout_ms=settings.provider_timeout_ms,
                ),
                downgrade_policy=DowngradePolicy.THROTTLED_ONLY,
            )
        )
        logger.info(f"Using OpenAI ({settings.openai_model}) as primary AI provider")
    except ProviderConfigurationError as e:
        logger.warning(f"{e}, excluding OpenAI from orchestration")

    gemini_key = settings.gemini_api_key.get_secret_value() if settings.gemini_api_key else None
    try:
        slots.append(
            ProviderSlot(
                adapter=GeminiProvider(
                    api_key=gemini_key,
                    model=settings.gemini_model,
                    timeout_ms=settings.provider_timeout_ms,
                ),
                downgrade_policy=DowngradePolicy.ANY_ERROR,
            )
        )
        logger.info(f"Using Gemini ({settings.gemini_model}) as secondary AI provider")
    except ProviderConfigurationError as e:
        logger.warning(f"{e}, excluding Gemini from orchestration")

    if not slots:
        logger.warning("No AI providers configured, all AI responses will be degraded")

    return AIOrchestrator(slots, metrics=metrics, attempt_logger=attempt_logger)
