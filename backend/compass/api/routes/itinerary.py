"""Itinerary endpoints - create, fetch, replace items, AI narrative."""

import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from backend.compass.api.deps import ItineraryRepoDep, OrchestratorDep
from backend.compass.models.common import CamelModel
from backend.compass.models.itinerary import Itinerary, ItineraryItem

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/itinerary")


class CreateItineraryRequest(CamelModel):
    """Request body for POST /api/itinerary."""

    name: str = Field(..., min_length=1, max_length=200)
    user_id: int | None = None
    items: list[ItineraryItem] = Field(default_factory=list)


class UpdateItineraryRequest(CamelModel):
    """Request body for PUT /api/itinerary/{id}."""

    items: list[ItineraryItem]


class SuccessResponse(BaseModel):
    success: bool = True


class ItineraryDescriptionResponse(BaseModel):
    """Response for GET /api/itinerary/{id}/description."""

    description: str


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Itinerary not found")


@router.post("", response_model=Itinerary, status_code=status.HTTP_201_CREATED)
async def create_itinerary(
    request: CreateItineraryRequest,
    itinerary_repo: ItineraryRepoDep,
) -> Itinerary:
    """Store a new itinerary."""
    itinerary = itinerary_repo.create_itinerary(
        name=request.name, items=request.items, user_id=request.user_id
    )
    logger.info(f"Created itinerary {itinerary.id} with {len(itinerary.items)} item(s)")
    return itinerary


@router.get("/{itinerary_id}", response_model=Itinerary)
async def get_itinerary(itinerary_id: int, itinerary_repo: ItineraryRepoDep) -> Itinerary:
    itinerary = itinerary_repo.get_itinerary(itinerary_id)
    if itinerary is None:
        raise _not_found()
    return itinerary


@router.put("/{itinerary_id}", response_model=SuccessResponse)
async def update_itinerary(
    itinerary_id: int,
    request: UpdateItineraryRequest,
    itinerary_repo: ItineraryRepoDep,
) -> SuccessResponse:
    """Replace the items of an existing itinerary."""
    if itinerary_repo.update_items(itinerary_id, request.items) is None:
        raise _not_found()
    return SuccessResponse()


@router.get("/{itinerary_id}/description", response_model=ItineraryDescriptionResponse)
async def describe_itinerary(
    itinerary_id: int,
    itinerary_repo: ItineraryRepoDep,
    orchestrator: OrchestratorDep,
) -> ItineraryDescriptionResponse:
    """Narrative paragraph for the itinerary's items."""
    itinerary = itinerary_repo.get_itinerary(itinerary_id)
    if itinerary is None:
        raise _not_found()

    description = await orchestrator.get_itinerary_description(itinerary.items)
    return ItineraryDescriptionResponse(description=description)
