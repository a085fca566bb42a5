"""FastAPI application - cultural travel recommendations and AI advice."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from backend.compass.api.deps import get_catalog, get_orchestrator
from backend.compass.api.errors import register_exception_handlers
from backend.compass.api.routes.ai_status import router as ai_status_router
from backend.compass.api.routes.catalog import router as catalog_router
from backend.compass.api.routes.chat import router as chat_router
from backend.compass.api.routes.health import router as health_router
from backend.compass.api.routes.itinerary import router as itinerary_router
from backend.compass.api.routes.metrics import router as metrics_router
from backend.compass.api.routes.recommendations import router as recommendations_router
from backend.compass.api.routes.users import router as users_router
from backend.compass.config import get_settings
from backend.compass.utils.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and build the shared services before serving."""
    configure_logging(get_settings().log_level)
    get_catalog()
    status = get_orchestrator().get_provider_status()
    logger.info(f"AI providers at startup: openai={status.openai} gemini={status.gemini}")
    yield


app = FastAPI(title="Culture Compass API", version="0.1.0", lifespan=lifespan)

register_exception_handlers(app)

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(recommendations_router, tags=["recommendations"])
app.include_router(chat_router, tags=["chat"])
app.include_router(ai_status_router, tags=["ai"])
app.include_router(catalog_router, tags=["catalog"])
app.include_router(itinerary_router, tags=["itinerary"])
app.include_router(users_router, tags=["users"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Culture Compass API", "version": "0.1.0"}


def run() -> None:
    """Serve the API with uvicorn (console script entry point)."""
    uvicorn.run("backend.compass.main:app", host="0.0.0.0", port=8000)
