"""Gemini adapter (secondary provider)."""

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from backend.compass.llm.base import BaseProviderAdapter, ResponseShape
from backend.compass.llm.errors import (
    ProviderConfigurationError,
    ProviderError,
    ThrottledError,
    TransientProviderError,
)
from backend.compass.llm.prompts import PromptPayload

_STRING_LIST = types.Schema(type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING))

RESPONSE_SCHEMAS: dict[ResponseShape, types.Schema] = {
    ResponseShape.advice: types.Schema(
        type=types.Type.OBJECT,
        properties={
            "response": types.Schema(type=types.Type.STRING),
            "suggestions": _STRING_LIST,
            "culturalTips": _STRING_LIST,
        },
        required=["response"],
    ),
    ResponseShape.insights: types.Schema(
        type=types.Type.OBJECT,
        properties={"insights": _STRING_LIST},
        required=["insights"],
    ),
}


class GeminiProvider(BaseProviderAdapter):
    """google-genai backed adapter using the async client surface."""

    name = "gemini"

    def __init__(
        self,
        api_key: str | None,
        model: str = "gemini-2.5-flash",
        timeout_ms: int = 15000,
        client: genai.Client | None = None,
    ) -> None:
        """Initialize Gemini adapter.

        Raises:
            ProviderConfigurationError: No API key and no client given
        """
        if client is None and not api_key:
            raise ProviderConfigurationError("Gemini API key not configured")

        super().__init__(timeout_ms)
        self.client = client or genai.Client(api_key=api_key)
        self.model = model

    def _build_config(self, payload: PromptPayload, shape: ResponseShape) -> types.GenerateContentConfig:
        schema = RESPONSE_SCHEMAS.get(shape) if payload.expects_json else None
        return types.GenerateContentConfig(
            system_instruction=payload.system,
            temperature=0.7,
            response_mime_type="application/json" if schema is not None else None,
            response_schema=schema,
        )

    async def _complete(self, payload: PromptPayload, shape: ResponseShape) -> str | None:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=payload.user,
            config=self._build_config(payload, shape),
        )
        text: str | None = response.text
        return text

    def classify_error(self, exc: Exception) -> ProviderError:
        """HTTP 429 / RESOURCE_EXHAUSTED is throttling; everything else is transient."""
        if isinstance(exc, genai_errors.APIError):
            if exc.code == 429 or exc.status == "RESOURCE_EXHAUSTED":
                return ThrottledError(self.name, f"rate limited: {exc.message}")
            return TransientProviderError(self.name, f"API error {exc.code}: {exc.message}")

        return TransientProviderError(self.name, f"{type(exc).__name__}: {exc}")
