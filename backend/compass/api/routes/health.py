"""Health check endpoints.

/health is a liveness check. /healthz reports the catalog and the AI provider
availability; AI outages only degrade responses, so they never fail the check.
"""

from typing import Any

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from backend.compass.api.deps import CatalogDep, OrchestratorDep
from backend.compass.db.repositories import CatalogRepository

router = APIRouter()


def check_catalog(catalog: CatalogRepository) -> tuple[bool, str]:
    """Check the seeded catalog is loaded.

    Returns:
        (is_ok, status_message)
    """
    count = len(catalog.list_destinations())
    if count == 0:
        return (False, "empty")
    return (True, f"ok ({count} destinations)")


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz(catalog: CatalogDep, orchestrator: OrchestratorDep) -> dict[str, Any] | Response:
    """Component health.

    Returns:
        200 with component status if the catalog is loaded
        503 otherwise
    """
    catalog_ok, catalog_status = check_catalog(catalog)
    providers = orchestrator.get_provider_status()

    response_body = {
        "status": "ok" if catalog_ok else "degraded",
        "components": {
            "catalog": catalog_status,
            "ai": providers.model_dump(),
        },
    }

    if not catalog_ok:
        return JSONResponse(content=response_body, status_code=503)

    return response_body
