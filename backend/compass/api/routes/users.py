"""User preference endpoint - POST /api/user/{id}/preferences."""

import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from backend.compass.api.deps import UserRepoDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user")


class UpdatePreferencesRequest(BaseModel):
    """Request body for POST /api/user/{id}/preferences."""

    preferences: list[str]


class SuccessResponse(BaseModel):
    success: bool = True


@router.post("/{user_id}/preferences", response_model=SuccessResponse)
async def update_user_preferences(
    user_id: int,
    request: UpdatePreferencesRequest,
    user_repo: UserRepoDep,
) -> SuccessResponse:
    """Replace a user's saved preference tokens."""
    if user_repo.update_preferences(user_id, request.preferences) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    logger.info(f"Saved {len(request.preferences)} preference(s) for user {user_id}")
    return SuccessResponse()
