"""AI advice endpoints - POST /api/chat, GET /api/chat/history, POST /api/cultural-insights."""

import logging

from fastapi import APIRouter
from pydantic import Field, field_validator

from backend.compass.api.deps import ChatRepoDep, OrchestratorDep, SettingsDep
from backend.compass.models.advice import AdviceRequest, AdviceResponse
from backend.compass.models.common import CamelModel
from backend.compass.models.itinerary import ChatMessage, ItineraryItem

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class ChatRequest(CamelModel):
    """Request body for POST /api/chat."""

    message: str = Field(..., min_length=1)
    user_preferences: list[str] | None = None
    current_destination: str | None = None
    itinerary: list[ItineraryItem] | None = None

    @field_validator("message")
    @classmethod
    def validate_message_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("message must not be blank")
        return v


class ChatResponse(AdviceResponse):
    """Assistant reply plus the id of the stored exchange."""

    message_id: int


class ChatHistoryResponse(CamelModel):
    """Response for GET /api/chat/history."""

    messages: list[ChatMessage]


class CulturalInsightsRequest(CamelModel):
    """Request body for POST /api/cultural-insights."""

    destination: str = Field(..., min_length=1)
    preferences: list[str]

    @field_validator("destination")
    @classmethod
    def validate_destination_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("destination must not be blank")
        return v


class CulturalInsightsResponse(CamelModel):
    """Response for POST /api/cultural-insights."""

    insights: list[str]


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    orchestrator: OrchestratorDep,
    chat_repo: ChatRepoDep,
    settings: SettingsDep,
) -> ChatResponse:
    """Travel advice for one chat turn.

    Always answers: when no provider succeeds the reply is the degraded
    apology. The exchange is stored under the default user.
    """
    advice = await orchestrator.get_travel_advice(
        AdviceRequest(
            message=request.message,
            preferences=request.user_preferences or [],
            destination_context=request.current_destination,
            itinerary_context=request.itinerary or [],
        )
    )

    stored = chat_repo.record(settings.default_user_id, request.message, advice.response)
    logger.info(f"Chat message {stored.id} answered for user {settings.default_user_id}")

    return ChatResponse(
        response=advice.response,
        suggestions=advice.suggestions,
        cultural_tips=advice.cultural_tips,
        message_id=stored.id,
    )


@router.get("/chat/history", response_model=ChatHistoryResponse)
async def chat_history(chat_repo: ChatRepoDep, settings: SettingsDep) -> ChatHistoryResponse:
    """Stored exchanges for the default user, oldest first."""
    return ChatHistoryResponse(messages=chat_repo.list_by_user(settings.default_user_id))


@router.post("/cultural-insights", response_model=CulturalInsightsResponse)
async def cultural_insights(
    request: CulturalInsightsRequest,
    orchestrator: OrchestratorDep,
) -> CulturalInsightsResponse:
    """Short cultural insights about a destination."""
    insights = await orchestrator.get_cultural_insights(request.destination, request.preferences)
    return CulturalInsightsResponse(insights=insights)
