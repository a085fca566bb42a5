"""Preference matching endpoints - POST /api/recommendations, POST /api/preferences/profile."""

from fastapi import APIRouter
from pydantic import Field

from backend.compass.api.deps import MatcherDep
from backend.compass.models.catalog import PreferenceProfile, RecommendationResult
from backend.compass.models.common import CamelModel
from backend.compass.recommendations.matcher import analyze_preferences

router = APIRouter(prefix="/api")


class RecommendationRequest(CamelModel):
    """Request body for POST /api/recommendations."""

    preferences: list[str]
    limit: int | None = Field(None, ge=1, description="Per-collection maximum")


class PreferenceProfileRequest(CamelModel):
    """Request body for POST /api/preferences/profile."""

    preferences: list[str]


@router.post("/recommendations", response_model=RecommendationResult)
async def get_recommendations(
    request: RecommendationRequest,
    matcher: MatcherDep,
) -> RecommendationResult:
    """Destinations, cultural sites and restaurants matching the tokens."""
    return matcher.recommend(request.preferences, limit=request.limit)


@router.post("/preferences/profile", response_model=PreferenceProfile)
async def get_preference_profile(request: PreferenceProfileRequest) -> PreferenceProfile:
    """Bucket preference tokens into cultural domains."""
    return analyze_preferences(request.preferences)
