"""OpenAI adapter (primary provider).

Security: API key comes from settings only, never hardcoded.
"""

from typing import Any

import openai
from openai import AsyncOpenAI

from backend.compass.llm.base import BaseProviderAdapter, ResponseShape
from backend.compass.llm.errors import (
    ProviderConfigurationError,
    ProviderError,
    ThrottledError,
    TransientProviderError,
)
from backend.compass.llm.prompts import PromptPayload

QUOTA_ERROR_CODES = frozenset({"insufficient_quota", "rate_limit_exceeded"})


class OpenAIProvider(BaseProviderAdapter):
    """Chat-completions backed adapter."""

    name = "openai"

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4o",
        timeout_ms: int = 15000,
        client: AsyncOpenAI | None = None,
    ) -> None:
        """Initialize OpenAI adapter.

        Args:
            api_key: OpenAI API key (read from settings)
            model: Chat model name
            timeout_ms: Hard timeout per call
            client: Preconfigured client (tests)

        Raises:
            ProviderConfigurationError: No API key and no client given
        """
        if client is None and not api_key:
            raise ProviderConfigurationError("OpenAI API key not configured")

        super().__init__(timeout_ms)
        # SDK retries would hide 429s from availability tracking
        self.client = client or AsyncOpenAI(api_key=api_key, max_retries=0)
        self.model = model

    async def _complete(self, payload: PromptPayload, shape: ResponseShape) -> str | None:
        messages = []
        if payload.system:
            messages.append({"role": "system", "content": payload.system})
        messages.append({"role": "user", "content": payload.user})

        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": 0.7,
            "max_tokens": payload.max_tokens,
        }
        if payload.expects_json:
            kwargs["response_format"] = {"type": "json_object"}

        response = await self.client.chat.completions.create(**kwargs)

        if not response.choices:
            return None
        content: str | None = response.choices[0].message.content
        return content

    def classify_error(self, exc: Exception) -> ProviderError:
        """429 and quota errors are throttling; everything else is transient."""
        code = getattr(exc, "code", None)

        if isinstance(exc, openai.RateLimitError) or code in QUOTA_ERROR_CODES:
            return ThrottledError(self.name, f"rate limited: {exc}")
        if isinstance(exc, openai.APIStatusError) and exc.status_code == 429:
            return ThrottledError(self.name, f"rate limited: {exc}")
        if isinstance(exc, openai.APITimeoutError):
            return TransientProviderError(self.name, "request timed out")
        if isinstance(exc, openai.APIConnectionError):
            return TransientProviderError(self.name, f"connection error: {exc}")

        return TransientProviderError(self.name, f"{type(exc).__name__}: {exc}")
