"""AI provider availability endpoints - GET /api/ai-status, POST /api/ai-reset."""

from fastapi import APIRouter
from pydantic import BaseModel

from backend.compass.api.deps import OrchestratorDep
from backend.compass.models.advice import ProviderStatus

router = APIRouter(prefix="/api")


class ResetResponse(BaseModel):
    """Response for POST /api/ai-reset."""

    message: str


@router.get("/ai-status", response_model=ProviderStatus)
async def ai_status(orchestrator: OrchestratorDep) -> ProviderStatus:
    """Current availability flags; unconfigured providers report false."""
    return orchestrator.get_provider_status()


@router.post("/ai-reset", response_model=ResetResponse)
async def ai_reset(orchestrator: OrchestratorDep) -> ResetResponse:
    """Mark every configured provider available again."""
    orchestrator.reset_availability()
    return ResetResponse(message="AI service availability reset")
