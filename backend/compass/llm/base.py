"""Provider adapter contract and shared call pipeline.

Each adapter turns a PromptPayload into one provider call and the raw output
back into the common advice / insights / description shapes. Failures are
always raised as ProviderError subclasses so the orchestrator can classify
them without knowing the provider SDK.
"""

import asyncio
from abc import ABC, abstractmethod
from enum import Enum
from typing import Protocol

from backend.compass.llm.errors import ProviderError, TransientProviderError
from backend.compass.llm.parsing import parse_advice, parse_description, parse_insights
from backend.compass.llm.prompts import PromptPayload
from backend.compass.models.advice import AdviceResponse


class ResponseShape(str, Enum):
    """Structured output expected from a call."""

    advice = "advice"
    insights = "insights"
    text = "text"


class ProviderAdapter(Protocol):
    """Capability interface implemented once per provider."""

    name: str

    async def invoke_advice(self, payload: PromptPayload) -> AdviceResponse:
        """Produce chat advice.

        Raises:
            ProviderError: Call failed or output was unusable
        """
        ...

    async def invoke_insights(self, payload: PromptPayload) -> list[str]:
        """Produce short cultural insight strings."""
        ...

    async def invoke_itinerary_description(self, payload: PromptPayload) -> str:
        """Produce a narrative paragraph."""
        ...


class BaseProviderAdapter(ABC):
    """Shared timeout, classification and parsing for concrete adapters."""

    name = "base"

    def __init__(self, timeout_ms: int) -> None:
        """Initialize adapter.

        Args:
            timeout_ms: Hard timeout for a single provider call
        """
        self.timeout_ms = timeout_ms

    async def invoke_advice(self, payload: PromptPayload) -> AdviceResponse:
        raw = await self._call(payload, ResponseShape.advice)
        return parse_advice(self.name, raw)

    async def invoke_insights(self, payload: PromptPayload) -> list[str]:
        raw = await self._call(payload, ResponseShape.insights)
        return parse_insights(self.name, raw)

    async def invoke_itinerary_description(self, payload: PromptPayload) -> str:
        raw = await self._call(payload, ResponseShape.text)
        return parse_description(self.name, raw)

    async def _call(self, payload: PromptPayload, shape: ResponseShape) -> str | None:
        """Run one provider call under the hard timeout.

        Raises:
            ThrottledError: Provider rate limit or quota exhausted
            TransientProviderError: Timeout or any other failure
        """
        try:
            return await asyncio.wait_for(
                self._complete(payload, shape), timeout=self.timeout_ms / 1000
            )
        except TimeoutError as e:
            raise TransientProviderError(self.name, f"timed out after {self.timeout_ms}ms") from e
        except ProviderError:
            raise
        except Exception as e:
            raise self.classify_error(e) from e

    @abstractmethod
    async def _complete(self, payload: PromptPayload, shape: ResponseShape) -> str | None:
        """Issue the provider call and return its raw text output."""

    def classify_error(self, exc: Exception) -> ProviderError:
        """Map an SDK exception onto the provider error taxonomy."""
        return TransientProviderError(self.name, f"{type(exc).__name__}: {exc}")
