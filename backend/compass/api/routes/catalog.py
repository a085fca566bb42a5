"""Read-only catalog endpoints - destinations, cultural sites, restaurants, regions."""

from fastapi import APIRouter, HTTPException, status

from backend.compass.api.deps import CatalogDep
from backend.compass.models.catalog import CulturalSite, Destination, Region, Restaurant

router = APIRouter(prefix="/api")


@router.get("/destinations", response_model=list[Destination])
async def list_destinations(catalog: CatalogDep) -> list[Destination]:
    return catalog.list_destinations()


@router.get("/destinations/region/{region}", response_model=list[Destination])
async def list_destinations_by_region(region: str, catalog: CatalogDep) -> list[Destination]:
    return catalog.list_destinations_by_region(region)


@router.get("/destinations/{destination_id}", response_model=Destination)
async def get_destination(destination_id: int, catalog: CatalogDep) -> Destination:
    """Single destination; 404 when the id is unknown."""
    destination = catalog.get_destination(destination_id)
    if destination is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Destination not found")
    return destination


@router.get("/cultural-sites/destination/{destination_id}", response_model=list[CulturalSite])
async def list_cultural_sites_by_destination(
    destination_id: int, catalog: CatalogDep
) -> list[CulturalSite]:
    return catalog.list_cultural_sites_by_destination(destination_id)


@router.get("/cultural-sites/category/{category}", response_model=list[CulturalSite])
async def list_cultural_sites_by_category(category: str, catalog: CatalogDep) -> list[CulturalSite]:
    return catalog.list_cultural_sites_by_category(category)


@router.get("/restaurants/destination/{destination_id}", response_model=list[Restaurant])
async def list_restaurants_by_destination(
    destination_id: int, catalog: CatalogDep
) -> list[Restaurant]:
    return catalog.list_restaurants_by_destination(destination_id)


@router.get("/restaurants/cuisine/{cuisine}", response_model=list[Restaurant])
async def list_restaurants_by_cuisine(cuisine: str, catalog: CatalogDep) -> list[Restaurant]:
    return catalog.list_restaurants_by_cuisine(cuisine)


@router.get("/regions", response_model=list[Region])
async def list_regions(catalog: CatalogDep) -> list[Region]:
    """World-map regions with their top destinations."""
    return catalog.list_regions()
